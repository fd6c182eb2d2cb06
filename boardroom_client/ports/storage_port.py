"""
Storage Port - Interface for persisting client state.

Implementations:
- MemoryStorageAdapter: In-process dict (testing, ephemeral runs)
- RedisStorageAdapter: Redis-backed key/value storage
- VaultStorageAdapter: HashiCorp Vault KV v2 (secure storage for tokens)
"""

from abc import ABC, abstractmethod
from typing import Optional


class StoragePort(ABC):
    """
    Port: string key/value storage.

    Storage is best-effort: implementations log backend failures and
    behave as if the key were absent, so a broken store degrades to a
    signed-out client instead of a crash.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read a value.

        Args:
            key: Storage key (e.g. "auth-storage")

        Returns:
            Stored string, or None if absent or unreadable
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Write a value, replacing any previous one.

        Args:
            key: Storage key
            value: Serialized value
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """
        Delete a value. Missing keys are ignored.

        Args:
            key: Storage key
        """
        pass
