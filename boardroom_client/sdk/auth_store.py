"""
Auth Store - The persisted session credential pair and signed-in user.
"""

import json
import logging
from typing import Callable, List, Optional

from boardroom_client.domain.session import AuthSession
from boardroom_client.domain.user import User
from boardroom_client.ports.auth_state_port import AuthStatePort
from boardroom_client.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)

AUTH_STORAGE_KEY = "auth-storage"


class AuthStore(AuthStatePort):
    """
    Session store backed by a StoragePort.

    Writers: login, the gateway's refresh path (set_tokens) and logout.
    All run on one event loop, so no locking is needed. Every change is
    written through to storage and then announced to subscribers.
    """

    def __init__(self, storage: StoragePort, key: str = AUTH_STORAGE_KEY):
        """
        Initialize auth store.

        Args:
            storage: Where the session is persisted (use a secure adapter in production)
            key: Storage key for the serialized session
        """
        self._storage = storage
        self._key = key
        self._session = AuthSession()
        self._listeners: List[Callable[[AuthSession], None]] = []
        self.is_hydrated = False

    @property
    def session(self) -> AuthSession:
        return self._session

    @property
    def user(self) -> Optional[User]:
        return self._session.user

    @property
    def access_token(self) -> Optional[str]:
        return self._session.access_token

    @property
    def refresh_token(self) -> Optional[str]:
        return self._session.refresh_token

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    def hydrate(self) -> AuthSession:
        """
        Load the persisted session.

        Unreadable data is discarded and the store starts signed out.
        """
        raw = self._storage.get_item(self._key)
        if raw:
            try:
                self._session = AuthSession.from_dict(json.loads(raw))
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Discarding unreadable persisted session: {e}")
                self._session = AuthSession()
        self.is_hydrated = True
        return self._session

    def login(self, user: User, access_token: str, refresh_token: str):
        self._session.login(user, access_token, refresh_token)
        logger.info(f"Signed in as user {user.id}")
        self._changed()

    def set_user(self, user: User):
        self._session.user = user
        self._changed()

    def set_tokens(self, access_token: str, refresh_token: str):
        self._session.set_tokens(access_token, refresh_token)
        self._changed()

    def logout(self):
        was_authenticated = self._session.is_authenticated
        self._session.clear()
        self._storage.remove_item(self._key)
        if was_authenticated:
            logger.info("Signed out")
        self._notify()

    def subscribe(self, listener: Callable[[AuthSession], None]) -> Callable[[], None]:
        """
        Call listener after every change.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self):
        self._storage.set_item(self._key, json.dumps(self._session.to_dict()))
        self._notify()

    def _notify(self):
        for listener in list(self._listeners):
            listener(self._session)
