"""
Unit tests for client configuration and errors.
"""

import httpx
import pytest

from boardroom_client.config import ClientConfig, DEFAULT_API_URL
from boardroom_client.errors import ApiError, ValidationError


def test_defaults():
    config = ClientConfig()

    assert config.api_url == DEFAULT_API_URL
    assert config.timeout is None
    assert config.coalesce_refresh is False
    assert config.reminder_minutes == 15


def test_trailing_slash_stripped():
    assert ClientConfig(api_url="http://localhost:3000/api/v1/").api_url == "http://localhost:3000/api/v1"


def test_from_env():
    """Test reading prefixed environment variables."""
    config = ClientConfig.from_env(environ={
        "BOARDROOM_API_URL": "http://localhost:3000/api/v1",
        "BOARDROOM_TIMEOUT": "5",
        "BOARDROOM_COALESCE_REFRESH": "true",
        "BOARDROOM_REMINDER_MINUTES": "30",
    })

    assert config.api_url == "http://localhost:3000/api/v1"
    assert config.timeout == 5.0
    assert config.coalesce_refresh is True
    assert config.reminder_minutes == 30


def test_from_env_custom_prefix():
    config = ClientConfig.from_env(prefix="KIOSK_", environ={
        "KIOSK_API_URL": "http://kiosk/api/v1",
        "BOARDROOM_API_URL": "http://ignored",
    })
    assert config.api_url == "http://kiosk/api/v1"


def test_from_env_blank_values_use_defaults():
    config = ClientConfig.from_env(environ={"BOARDROOM_API_URL": "  ", "BOARDROOM_TIMEOUT": ""})

    assert config.api_url == DEFAULT_API_URL
    assert config.timeout is None


def test_from_env_bad_number():
    with pytest.raises(ValueError):
        ClientConfig.from_env(environ={"BOARDROOM_TIMEOUT": "soon"})


def test_api_error_from_envelope():
    response = httpx.Response(
        409,
        json={"success": False, "message": "Room already booked", "errors": {"startTime": ["Overlaps"]}},
    )

    error = ApiError.from_response(response)

    assert error.status_code == 409
    assert error.message == "Room already booked"
    assert error.errors == {"startTime": ["Overlaps"]}
    assert not error.is_unauthorized


def test_api_error_without_body():
    error = ApiError.from_response(httpx.Response(502, text="Bad gateway"))

    assert error.status_code == 502
    assert error.message == "Bad Gateway"
    assert error.payload is None


def test_validation_error_is_value_error():
    error = ValidationError("Please select a campus", field="campusId")

    assert isinstance(error, ValueError)
    assert str(error) == "Please select a campus"
