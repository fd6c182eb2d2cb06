"""
Room Domain Model - Bookable meeting rooms.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from boardroom_client.domain.user import CampusRef


@dataclass
class Room:
    """Room entity as listed by /rooms."""
    id: str
    name: str
    capacity: int
    campus_id: str = ""
    floor: Optional[str] = None
    building: Optional[str] = None
    amenities: List[str] = field(default_factory=list)
    campus: Optional[CampusRef] = None
    is_active: bool = True
    image_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def location(self) -> str:
        """Display label such as "Main Block, Floor 3"."""
        if not self.building:
            return f"Floor {self.floor}" if self.floor else ""
        if self.floor:
            return f"{self.building}, Floor {self.floor}"
        return self.building

    def has_amenities(self, required: List[str]) -> bool:
        return all(a in self.amenities for a in required)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Room":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            capacity=int(data.get("capacity", 0)),
            campus_id=data.get("campusId", ""),
            floor=data.get("floor"),
            building=data.get("building"),
            amenities=list(data.get("amenities") or []),
            campus=CampusRef.from_dict(data.get("campus")),
            is_active=data.get("isActive", True),
            image_url=data.get("imageUrl"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass
class FavoriteRoom(Room):
    """Room with the time it was favorited."""
    favorited_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FavoriteRoom":
        room = Room.from_dict(data)
        return cls(**room.__dict__, favorited_at=data.get("favoritedAt"))


@dataclass
class RoomFilters:
    """Filters accepted by GET /rooms."""
    capacity: Optional[int] = None
    building: Optional[str] = None
    floor: Optional[str] = None
    amenities: List[str] = field(default_factory=list)
    campus_id: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        """Query parameters with empty filters dropped."""
        params: Dict[str, Any] = {}
        if self.capacity:
            params["capacity"] = self.capacity
        if self.building and self.building.strip():
            params["building"] = self.building.strip()
        if self.floor and self.floor.strip():
            params["floor"] = self.floor.strip()
        if self.amenities:
            params["amenities"] = ",".join(self.amenities)
        if self.campus_id:
            params["campusId"] = self.campus_id
        return params
