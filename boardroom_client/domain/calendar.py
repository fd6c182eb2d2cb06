"""
Calendar Domain Model - External calendar links (Google, Microsoft).
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from enum import Enum


class CalendarProvider(Enum):
    GOOGLE = "GOOGLE"
    MICROSOFT = "MICROSOFT"

    @property
    def slug(self) -> str:
        """Lowercase form used in URL paths."""
        return self.value.lower()

    @classmethod
    def parse(cls, value) -> "CalendarProvider":
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


@dataclass
class CalendarConnection:
    provider: CalendarProvider
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalendarConnection":
        return cls(
            provider=CalendarProvider.parse(data["provider"]),
            created_at=data.get("createdAt"),
        )
