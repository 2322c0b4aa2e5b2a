"""Unit tests for access token creation and verification."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from flashdeck.infrastructure.identity.services import TokenService

SECRET = "unit-test-secret-key-that-is-32-bytes-long"


@pytest.fixture
def service() -> TokenService:
    return TokenService(secret_key=SECRET, lifetime=timedelta(days=7))


def test_round_trip(service: TokenService) -> None:
    token = service.create_access_token(7)

    assert service.verify_access_token(token) == 7


def test_claims(service: TokenService) -> None:
    token = service.create_access_token(7)

    payload = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert payload["sub"] == "7"
    assert payload["type"] == "access"
    lifetime = datetime.fromtimestamp(payload["exp"], UTC) - datetime.now(UTC)
    assert timedelta(days=6, hours=23) < lifetime <= timedelta(days=7)


def test_default_lifetime_comes_from_settings() -> None:
    token = TokenService(secret_key=SECRET).create_access_token(7)

    payload = jwt.decode(token, SECRET, algorithms=["HS256"])
    lifetime = datetime.fromtimestamp(payload["exp"], UTC) - datetime.now(UTC)
    assert timedelta(days=6, hours=23) < lifetime <= timedelta(days=7)


def test_expired_token_rejected(service: TokenService) -> None:
    token = service.create_access_token(7, timedelta(seconds=-5))

    assert service.verify_access_token(token) is None


def test_wrong_signature_rejected(service: TokenService) -> None:
    other = TokenService(secret_key="some-other-secret-that-is-also-32-bytes-long")

    assert service.verify_access_token(other.create_access_token(7)) is None


def test_wrong_token_type_rejected(service: TokenService) -> None:
    token = jwt.encode(
        {"sub": "7", "exp": datetime.now(UTC) + timedelta(hours=1), "type": "refresh"},
        SECRET,
        algorithm="HS256",
    )

    assert service.verify_access_token(token) is None


def test_garbage_rejected(service: TokenService) -> None:
    assert service.verify_access_token("garbage") is None
