"""
Client Configuration - Backend location and client behaviour.

Values come from constructor arguments or from prefixed environment
variables (BOARDROOM_API_URL, BOARDROOM_TIMEOUT, ...).
"""

import os
from dataclasses import dataclass
from typing import Optional, Mapping

DEFAULT_API_URL = "https://boardroom-booking-tan.vercel.app/api/v1"
DEFAULT_ASSISTANT_URL = "https://api.anthropic.com/v1/messages"
DEFAULT_ASSISTANT_MODEL = "claude-sonnet-4-20250929"

AMENITIES = (
    "projector",
    "whiteboard",
    "video-conferencing",
    "audio-system",
    "tv-screen",
    "air-conditioning",
    "wifi",
    "phone",
    "printer",
    "coffee-machine",
    "water-dispenser",
    "natural-light",
    "accessibility",
    "standing-desk",
    "recording-equipment",
)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ClientConfig:
    """
    Configuration for BoardroomClient and GatewayClient.

    timeout=None leaves the httpx transport default in place.
    """
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None
    coalesce_refresh: bool = False
    assistant_url: str = DEFAULT_ASSISTANT_URL
    assistant_model: str = DEFAULT_ASSISTANT_MODEL
    reminder_minutes: int = 15

    def __post_init__(self):
        self.api_url = self.api_url.rstrip("/")

    @classmethod
    def from_env(
        cls,
        prefix: str = "BOARDROOM_",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        """
        Build configuration from environment variables.

        Args:
            prefix: Prefix for environment variables (default BOARDROOM_)
            environ: Mapping to read from (default os.environ)

        Returns:
            ClientConfig with unset variables left at their defaults

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(f"{prefix}{name}")
            return value.strip() if value and value.strip() else None

        timeout = get("TIMEOUT")
        reminder_minutes = get("REMINDER_MINUTES")
        coalesce = get("COALESCE_REFRESH")

        return cls(
            api_url=get("API_URL") or DEFAULT_API_URL,
            timeout=float(timeout) if timeout else None,
            coalesce_refresh=coalesce is not None and coalesce.lower() in _TRUE_VALUES,
            assistant_url=get("ASSISTANT_URL") or DEFAULT_ASSISTANT_URL,
            assistant_model=get("ASSISTANT_MODEL") or DEFAULT_ASSISTANT_MODEL,
            reminder_minutes=int(reminder_minutes) if reminder_minutes else 15,
        )
