"""
Auth Service - Login, registration and logout endpoints.

These calls only talk to the backend. Storing the returned session is
the job of BoardroomClient / AuthStore.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from boardroom_client.domain.response import ApiResponse
from boardroom_client.domain.session import AuthTokens
from boardroom_client.domain.user import User
from boardroom_client.errors import ValidationError
from boardroom_client.services.base import BaseService

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class LoginResponse:
    user: User
    tokens: AuthTokens

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoginResponse":
        return cls(user=User.from_dict(data["user"]), tokens=AuthTokens.from_dict(data["tokens"]))


@dataclass
class RegisterData:
    email: str
    password: str
    first_name: str
    last_name: str
    campus_id: str
    confirm_password: Optional[str] = None
    department: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "email": self.email,
            "password": self.password,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "campusId": self.campus_id,
        }
        if self.department:
            data["department"] = self.department
        return data


def validate_registration(data: RegisterData) -> None:
    """
    Check a registration form before it is sent.

    Raises:
        ValidationError: On the first failing field, with its message
    """
    if not data.first_name.strip():
        raise ValidationError("First name is required", field="firstName")
    if not data.last_name.strip():
        raise ValidationError("Last name is required", field="lastName")
    if not _EMAIL_RE.match(data.email or ""):
        raise ValidationError("Please enter a valid email address", field="email")

    password = data.password or ""
    if len(password) < 8:
        raise ValidationError("Password must be at least 8 characters", field="password")
    if not re.search(r"[A-Z]", password):
        raise ValidationError("Must include an uppercase letter", field="password")
    if not re.search(r"[a-z]", password):
        raise ValidationError("Must include a lowercase letter", field="password")
    if not re.search(r"[0-9]", password):
        raise ValidationError("Must include a number", field="password")

    if data.confirm_password is not None and data.confirm_password != password:
        raise ValidationError("Passwords do not match", field="confirmPassword")
    if not data.campus_id:
        raise ValidationError("Please select a campus", field="campusId")


class AuthService(BaseService):

    async def login(self, email: str, password: str) -> ApiResponse[LoginResponse]:
        body = {"email": email, "password": password}
        return await self._call("POST", "/auth/login", LoginResponse.from_dict, json=body)

    async def register(self, data: RegisterData) -> ApiResponse:
        """
        Create an account. New accounts usually wait for admin approval,
        so no tokens are returned.
        """
        validate_registration(data)
        return await self._call("POST", "/auth/register", json=data.to_dict())

    async def logout(self, refresh_token: str) -> ApiResponse[None]:
        """Revoke the refresh token on the backend."""
        return await self._call("POST", "/auth/logout", json={"refreshToken": refresh_token})

    async def me(self) -> ApiResponse[User]:
        return await self._call("GET", "/auth/me", User.from_dict)
