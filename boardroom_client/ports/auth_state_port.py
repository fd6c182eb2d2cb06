"""
Auth State Port - What the gateway needs from the session store.

The gateway sits below the store (the store's login call goes through
the gateway), so it only sees this interface, bound after construction.
"""

from abc import ABC, abstractmethod
from typing import Optional


class AuthStatePort(ABC):
    """Port: live view of the session credential pair plus its mutators."""

    @property
    @abstractmethod
    def access_token(self) -> Optional[str]:
        pass

    @property
    @abstractmethod
    def refresh_token(self) -> Optional[str]:
        pass

    @abstractmethod
    def set_tokens(self, access_token: str, refresh_token: str) -> None:
        """Replace the credential pair after a successful refresh."""
        pass

    @abstractmethod
    def logout(self) -> None:
        """Destroy the session (user and both tokens)."""
        pass
