"""
Memory Storage Adapter - In-memory key/value storage (testing only).
"""

from typing import Optional, Dict, List
from boardroom_client.ports.storage_port import StoragePort


class MemoryStorageAdapter(StoragePort):
    """
    In-memory storage.

    WARNING: Values are lost when the process exits.
    Use Vault or Redis to keep a session across runs.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        """Stored keys (for inspection in tests)."""
        return list(self._items)
