from datetime import timedelta

import pytest
from jose import jwt

from filegate.config import get_settings
from filegate.domain.entities import Role, User
from filegate.domain.exceptions import InvalidTokenError, TokenExpiredError
from filegate.infrastructure.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def _user(role: Role = Role.USER) -> User:
    return User(id="user-1", username="bob", password="", role=role, created_at=None)


def test_password_hash_is_salted_and_verifiable():
    first = get_password_hash("secret1")
    second = get_password_hash("secret1")

    assert first != second
    assert "secret1" not in first
    assert verify_password("secret1", first)
    assert not verify_password("secret2", first)


def test_token_round_trip_carries_identity_claims():
    payload = decode_access_token(create_access_token(_user(Role.ADMIN)))

    assert payload["sub"] == "user-1"
    assert payload["username"] == "bob"
    assert payload["role"] == "admin"


def test_tokens_have_no_expiry_unless_configured():
    payload = decode_access_token(create_access_token(_user()))
    assert "exp" not in payload


def test_expired_token_is_rejected():
    token = create_access_token(_user(), expires_delta=timedelta(seconds=-30))

    with pytest.raises(TokenExpiredError):
        decode_access_token(token)


def test_token_signed_with_another_secret_is_rejected():
    token = jwt.encode(
        {"sub": "user-1", "username": "bob", "role": "admin"},
        "another-secret",
        algorithm=get_settings().jwt_algorithm,
    )

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


@pytest.mark.parametrize(
    "claims",
    [
        {"sub": "user-1", "username": "bob", "role": "owner"},
        {"sub": "user-1", "role": "user"},
        {"sub": 7, "username": "bob", "role": "user"},
    ],
)
def test_token_with_malformed_claims_is_rejected(claims):
    settings = get_settings()
    token = jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_garbage_token_is_rejected():
    with pytest.raises(InvalidTokenError):
        decode_access_token("not-a-token")
