"""
Campus Domain Model - Tenants of the booking backend.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional


@dataclass
class Campus:
    """
    Campus entity.

    A SUPER_ADMIN picks one campus at a time; its id is sent as the
    X-Campus-Id header on every request.
    """
    id: str
    name: str
    code: str
    city: str = ""
    address: Optional[str] = None
    pincode: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    schools: List[str] = field(default_factory=list)
    logo_url: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    # Present on admin listings only
    user_count: Optional[int] = None
    room_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "address": self.address,
            "city": self.city,
            "pincode": self.pincode,
            "phone": self.phone,
            "email": self.email,
            "schools": list(self.schools),
            "logoUrl": self.logo_url,
            "isActive": self.is_active,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.user_count is not None or self.room_count is not None:
            data["_count"] = {"users": self.user_count or 0, "rooms": self.room_count or 0}
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Campus":
        counts = data.get("_count") or {}
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            code=data.get("code", ""),
            city=data.get("city", ""),
            address=data.get("address"),
            pincode=data.get("pincode"),
            phone=data.get("phone"),
            email=data.get("email"),
            schools=list(data.get("schools") or []),
            logo_url=data.get("logoUrl"),
            is_active=data.get("isActive", True),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            user_count=counts.get("users"),
            room_count=counts.get("rooms"),
        )


@dataclass
class CampusStats:
    """Usage counters for one campus."""
    total_users: int = 0
    total_rooms: int = 0
    active_rooms: int = 0
    total_bookings: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CampusStats":
        return cls(
            total_users=data.get("totalUsers", 0),
            total_rooms=data.get("totalRooms", 0),
            active_rooms=data.get("activeRooms", 0),
            total_bookings=data.get("totalBookings", 0),
        )
