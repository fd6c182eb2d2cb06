"""
Errors - Exception types raised by the client.

Network failures are not wrapped: they surface as httpx.TransportError.
"""

from typing import Dict, Any, List, Optional

import httpx


class BoardroomError(Exception):
    """Base class for client errors."""


class ApiError(BoardroomError):
    """
    Non-2xx response from the booking backend.

    The backend answers errors with the same envelope as successes:
    {"success": false, "message": "...", "errors": {"field": ["..."]}}
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: Optional[Dict[str, List[str]]] = None,
        payload: Any = None,
        response: Optional[httpx.Response] = None,
    ):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.errors = errors or {}
        self.payload = payload
        self.response = response

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build an ApiError from a failed response, reading the envelope if any."""
        payload: Any = None
        try:
            payload = response.json()
        except ValueError:
            payload = None

        message = response.reason_phrase or "Request failed"
        errors = None
        if isinstance(payload, dict):
            message = payload.get("message") or message
            if isinstance(payload.get("errors"), dict):
                errors = payload["errors"]

        return cls(
            status_code=response.status_code,
            message=message,
            errors=errors,
            payload=payload,
            response=response,
        )


class ValidationError(BoardroomError, ValueError):
    """Local input check failed before any request was sent."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
