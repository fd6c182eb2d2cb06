"""
User Domain Model - Local projection of a backend user.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from enum import Enum


class UserRole(Enum):
    """Backend user roles."""
    USER = "USER"
    CAMPUS_ADMIN = "CAMPUS_ADMIN"    # Manages one campus
    SUPER_ADMIN = "SUPER_ADMIN"      # Manages all campuses, selects one via X-Campus-Id
    ADMIN = "ADMIN"


class ApprovalStatus(Enum):
    """Registration approval states."""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass
class CampusRef:
    """Short campus reference embedded in users and rooms."""
    id: str
    name: str
    code: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "code": self.code}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["CampusRef"]:
        if not data:
            return None
        return cls(id=data["id"], name=data.get("name", ""), code=data.get("code", ""))


@dataclass
class User:
    """
    User entity - the signed-in account or an account listed by admin views.

    The backend owns validation; this is a read projection that is also
    persisted with the session so the app can render before re-fetching.
    """
    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.USER

    # Optional fields
    department: Optional[str] = None
    campus_id: Optional[str] = None
    campus: Optional[CampusRef] = None
    is_active: bool = True
    approval_status: Optional[ApprovalStatus] = None
    created_at: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_admin(self) -> bool:
        """Admin panels are open to every administrative role."""
        return self.role in (UserRole.ADMIN, UserRole.CAMPUS_ADMIN, UserRole.SUPER_ADMIN)

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the backend's camelCase shape."""
        return {
            "id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": self.role.value,
            "department": self.department,
            "campusId": self.campus_id,
            "campus": self.campus.to_dict() if self.campus else None,
            "isActive": self.is_active,
            "approvalStatus": self.approval_status.value if self.approval_status else None,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Deserialize from the backend's camelCase shape."""
        return cls(
            id=data["id"],
            email=data.get("email", ""),
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            role=UserRole(data.get("role", "USER")),
            department=data.get("department"),
            campus_id=data.get("campusId"),
            campus=CampusRef.from_dict(data.get("campus")),
            is_active=data.get("isActive", True),
            approval_status=ApprovalStatus(data["approvalStatus"]) if data.get("approvalStatus") else None,
            created_at=data.get("createdAt"),
        )
