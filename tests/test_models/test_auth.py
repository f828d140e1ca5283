"""Tests for the login payload models."""

import pytest
from pydantic import ValidationError

from rocketchat_facade.models.auth import AuthenticatedUser, AuthResult


def test_auth_result_from_login_payload():
    result = AuthResult.model_validate(
        {
            "status": "success",
            "data": {
                "authToken": "tok",
                "userId": "U1",
                "me": {"_id": "U1", "username": "bot", "name": "Bot", "email": "bot@example.com"},
            },
        }
    )
    assert result.status == "success"
    assert result.auth_token == "tok"
    assert result.user_id == "U1"
    assert result.me == AuthenticatedUser(
        id="U1", username="bot", name="Bot", email="bot@example.com"
    )


def test_authenticated_user_takes_first_email_address():
    """Rocket.Chat's emails list fills email when no plain email key is sent."""
    user = AuthenticatedUser.model_validate(
        {
            "_id": "U1",
            "emails": [
                {"address": "first@example.com", "verified": True},
                {"address": "second@example.com", "verified": False},
            ],
        }
    )
    assert user.email == "first@example.com"


def test_authenticated_user_without_email():
    user = AuthenticatedUser.model_validate({"_id": "U1", "username": "bot"})
    assert user.email is None


def test_auth_result_without_me():
    result = AuthResult.model_validate({"data": {"authToken": "tok", "userId": "U1"}})
    assert result.me is None
    assert result.status is None


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "error", "message": "Unauthorized"},
        {"data": {"userId": "U1"}},
        {"data": {"authToken": "tok"}},
        {"data": {"authToken": "", "userId": "U1"}},
    ],
)
def test_auth_result_requires_token_and_user_id(payload):
    with pytest.raises(ValidationError):
        AuthResult.model_validate(payload)
