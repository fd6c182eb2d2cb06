"""
Session Context - Late-bound hooks shared by the gateway and the stores.

Owned by the composition root and handed to GatewayClient at construction.
The auth state getter and the navigation callback are bound afterwards,
which breaks the gateway -> store -> gateway import cycle.
"""

from typing import Callable, Optional

from boardroom_client.ports.auth_state_port import AuthStatePort


class SessionContext:
    """
    Holds the three integration points the gateway reads on every request:

    1. a getter for the live auth state (tokens + set_tokens/logout)
    2. a callback that resets navigation to the login screen
    3. the optional campus (tenant) id sent as X-Campus-Id
    """

    def __init__(self, campus_id: Optional[str] = None):
        self._auth_state_getter: Optional[Callable[[], AuthStatePort]] = None
        self._navigation_reset: Optional[Callable[[], None]] = None
        self._campus_id = campus_id

    def bind_auth_state(self, getter: Optional[Callable[[], AuthStatePort]]):
        """
        Install the getter for the live auth state.

        The getter is called on every use, so it always returns the
        current state rather than a snapshot. Pass None to unbind.
        """
        self._auth_state_getter = getter

    def bind_navigation_reset(self, callback: Optional[Callable[[], None]]):
        """Install the reset-to-login callback. Pass None to unbind."""
        self._navigation_reset = callback

    @property
    def has_auth_state(self) -> bool:
        return self._auth_state_getter is not None

    def auth_state(self) -> Optional[AuthStatePort]:
        if self._auth_state_getter is None:
            return None
        return self._auth_state_getter()

    def reset_navigation(self):
        if self._navigation_reset is not None:
            self._navigation_reset()

    @property
    def campus_id(self) -> Optional[str]:
        return self._campus_id

    @campus_id.setter
    def campus_id(self, value: Optional[str]):
        self._campus_id = value or None

    def set_campus_id(self, campus_id: Optional[str]):
        self.campus_id = campus_id

    def get_campus_id(self) -> Optional[str]:
        return self._campus_id
