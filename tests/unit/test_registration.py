"""
Unit tests for registration form checks.
"""

import pytest

from boardroom_client.errors import ValidationError
from boardroom_client.services.auth import RegisterData, validate_registration


def make_form(**overrides) -> RegisterData:
    data = {
        "email": "alice@example.com",
        "password": "Secret123",
        "first_name": "Alice",
        "last_name": "Smith",
        "campus_id": "campus-1",
        "confirm_password": "Secret123",
    }
    data.update(overrides)
    return RegisterData(**data)


def test_valid_form():
    validate_registration(make_form())


@pytest.mark.parametrize(
    "overrides, message, field",
    [
        ({"first_name": " "}, "First name is required", "firstName"),
        ({"last_name": ""}, "Last name is required", "lastName"),
        ({"email": "alice@"}, "Please enter a valid email address", "email"),
        ({"password": "Sh0rt", "confirm_password": "Sh0rt"}, "Password must be at least 8 characters", "password"),
        ({"password": "secret123", "confirm_password": "secret123"}, "Must include an uppercase letter", "password"),
        ({"password": "SECRET123", "confirm_password": "SECRET123"}, "Must include a lowercase letter", "password"),
        ({"password": "SecretSecret", "confirm_password": "SecretSecret"}, "Must include a number", "password"),
        ({"confirm_password": "Secret124"}, "Passwords do not match", "confirmPassword"),
        ({"campus_id": ""}, "Please select a campus", "campusId"),
    ],
)
def test_invalid_form(overrides, message, field):
    with pytest.raises(ValidationError) as exc_info:
        validate_registration(make_form(**overrides))

    assert exc_info.value.message == message
    assert exc_info.value.field == field


def test_payload_omits_confirmation():
    payload = make_form(department="Finance").to_dict()

    assert "confirmPassword" not in payload
    assert payload["department"] == "Finance"
    assert payload["campusId"] == "campus-1"
