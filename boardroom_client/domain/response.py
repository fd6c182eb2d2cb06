"""
Response Envelope - The {success, message, data, pagination, errors} wrapper
every backend endpoint returns.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass
class Pagination:
    page: int = 1
    limit: int = 0
    total: int = 0
    total_pages: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pagination":
        return cls(
            page=data.get("page", 1),
            limit=data.get("limit", 0),
            total=data.get("total", 0),
            total_pages=data.get("totalPages", 0),
        )


@dataclass
class ApiResponse(Generic[T]):
    """
    Parsed response envelope.

    data holds the parsed projection (entity, list of entities, or raw
    value when no parser is given).
    """
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    pagination: Optional[Pagination] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        parser: Optional[Callable[[Any], Any]] = None,
        many: bool = False,
    ) -> "ApiResponse":
        """
        Parse an envelope.

        Args:
            payload: Decoded JSON body
            parser: Converts one item of data (e.g. Room.from_dict)
            many: data is a list; parser is applied to each item

        Returns:
            ApiResponse with data parsed
        """
        if not isinstance(payload, dict):
            return cls(success=False, message="Malformed response body")

        raw = payload.get("data")
        data: Any = raw
        if raw is not None and parser is not None:
            data = [parser(item) for item in raw] if many else parser(raw)
        elif raw is None and many:
            data = []

        return cls(
            success=bool(payload.get("success", True)),
            data=data,
            message=payload.get("message"),
            pagination=Pagination.from_dict(payload["pagination"]) if payload.get("pagination") else None,
            errors=payload.get("errors") or {},
        )
