"""Tests for access token verification."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt

from lingualearn.config import get_settings
from lingualearn.domain.common.value_objects import UserId
from lingualearn.infrastructure.identity.token_service import verify_access_token


def test_valid_token_yields_identity(token_for) -> None:
    subject = uuid4()

    assert verify_access_token(token_for(str(subject))) == UserId(subject)


def test_expired_token_yields_nothing(token_for) -> None:
    token = token_for(str(uuid4()), exp=datetime.now(UTC) - timedelta(minutes=1))

    assert verify_access_token(token) is None


def test_token_without_expiry_yields_nothing() -> None:
    settings = get_settings()
    token = jwt.encode(
        {"sub": str(uuid4()), "aud": settings.JWT_AUDIENCE},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )

    assert verify_access_token(token) is None


def test_wrong_audience_yields_nothing(token_for) -> None:
    assert verify_access_token(token_for(str(uuid4()), aud="service_role")) is None


def test_non_uuid_subject_yields_nothing(token_for) -> None:
    assert verify_access_token(token_for("user-42")) is None


def test_token_signed_with_other_secret_yields_nothing() -> None:
    settings = get_settings()
    token = jwt.encode(
        {"sub": str(uuid4()), "aud": settings.JWT_AUDIENCE},
        "another-secret-that-is-also-long-enough-1234",
        algorithm="HS256",
    )

    assert verify_access_token(token) is None
