"""
Adapters - Implementations of ports.

Storage:
- MemoryStorageAdapter: In-memory storage (testing)
- RedisStorageAdapter: Redis-backed storage
- VaultStorageAdapter: HashiCorp Vault secure storage

Notifications:
- MemoryNotificationAdapter: Records scheduled reminders (testing)
"""

from boardroom_client.adapters.memory_storage import MemoryStorageAdapter
from boardroom_client.adapters.redis_storage import RedisStorageAdapter
from boardroom_client.adapters.vault_storage import VaultStorageAdapter
from boardroom_client.adapters.memory_notifications import MemoryNotificationAdapter

__all__ = [
    "MemoryStorageAdapter",
    "RedisStorageAdapter",
    "VaultStorageAdapter",
    "MemoryNotificationAdapter",
]
