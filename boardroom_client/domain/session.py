"""
Session Domain Model - The credential pair and the signed-in user.

This is the only state the client owns: created on login, mutated in
place by a silent refresh, destroyed on logout or when a refresh fails.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from datetime import datetime, timezone

import jwt

from boardroom_client.domain.user import User


@dataclass
class AuthTokens:
    """Access/refresh pair as issued by /auth/login and /auth/refresh."""
    access_token: str
    refresh_token: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthTokens":
        """
        Read the camelCase pair.

        Raises:
            KeyError: If either token is missing
            ValueError: If either token is empty
        """
        access = data["accessToken"]
        refresh = data["refreshToken"]
        if not access or not refresh:
            raise ValueError("Token pair is incomplete")
        return cls(access_token=access, refresh_token=refresh)


def token_expires_at(token: Optional[str]) -> Optional[datetime]:
    """
    Read the exp claim of a JWT without verifying it.

    The signature is the backend's business; the client only uses exp
    for display and diagnostics. Opaque tokens return None.
    """
    if not token:
        return None
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError:
        return None

    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    return datetime.fromtimestamp(exp, tz=timezone.utc)


@dataclass
class AuthSession:
    """
    Session entity.

    Domain rules:
    - is_authenticated is True only between login and logout
    - set_tokens replaces both tokens together
    - clear() drops user and tokens together
    """
    user: Optional[User] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    is_authenticated: bool = False

    def login(self, user: User, access_token: str, refresh_token: str):
        self.user = user
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.is_authenticated = True

    def set_tokens(self, access_token: str, refresh_token: str):
        self.access_token = access_token
        self.refresh_token = refresh_token

    def clear(self):
        self.user = None
        self.access_token = None
        self.refresh_token = None
        self.is_authenticated = False

    def access_token_expires_at(self) -> Optional[datetime]:
        return token_expires_at(self.access_token)

    def is_access_token_expired(self, now: Optional[datetime] = None, leeway: int = 0) -> bool:
        """
        Check the access token's exp claim.

        Returns False when there is no readable exp; the gateway's 401
        handling covers those tokens.
        """
        expires_at = self.access_token_expires_at()
        if expires_at is None:
            return False
        current = now or datetime.now(timezone.utc)
        return (expires_at - current).total_seconds() <= leeway

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted shape."""
        return {
            "user": self.user.to_dict() if self.user else None,
            "accessToken": self.access_token,
            "refreshToken": self.refresh_token,
            "isAuthenticated": self.is_authenticated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthSession":
        """
        Deserialize from the persisted shape.

        Raises:
            TypeError: If data is not a JSON object
        """
        if not isinstance(data, dict):
            raise TypeError(f"Persisted session must be an object, got {type(data).__name__}")
        return cls(
            user=User.from_dict(data["user"]) if data.get("user") else None,
            access_token=data.get("accessToken"),
            refresh_token=data.get("refreshToken"),
            is_authenticated=bool(data.get("isAuthenticated", False)),
        )
