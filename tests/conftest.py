"""Pytest configuration and fixtures."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-jwt-secret-that-is-long-enough-for-hs256"
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"

from collections.abc import Callable, Generator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402
from uuid import UUID, uuid4  # noqa: E402

import jwt  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import select  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from lingualearn import models  # noqa: E402
from lingualearn.config import get_settings  # noqa: E402
from lingualearn.database import build_engine, get_db  # noqa: E402
from lingualearn.domain.common.value_objects import UserId  # noqa: E402
from lingualearn.infrastructure.access import PolicyRepository, RowSecurity  # noqa: E402
from lingualearn.infrastructure.migrations import runner  # noqa: E402
from lingualearn.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite://"


def make_token(subject: str, **claims: Any) -> str:  # noqa: ANN401
    """Mint an access token the way the session provider does."""
    settings = get_settings()
    payload: dict[str, Any] = {
        "sub": subject,
        "aud": settings.JWT_AUDIENCE,
        "exp": datetime.now(UTC) + timedelta(hours=1),
        **claims,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def auth_headers_for(user_id: UUID) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(str(user_id))}"}


@pytest.fixture
def migrated_engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database built by the migration log."""
    engine = build_engine(TEST_DATABASE_URL)
    runner.upgrade(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db_session(migrated_engine: Engine) -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=migrated_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def token_for() -> Callable[..., str]:
    return make_token


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def other_user_id() -> UUID:
    return uuid4()


@pytest.fixture
def auth_headers(user_id: UUID) -> dict[str, str]:
    return auth_headers_for(user_id)


@pytest.fixture
def other_auth_headers(other_user_id: UUID) -> dict[str, str]:
    return auth_headers_for(other_user_id)


@pytest.fixture
def identity(user_id: UUID) -> UserId:
    return UserId(user_id)


@pytest.fixture
def row_security(db_session: Session) -> RowSecurity:
    return RowSecurity(PolicyRepository(db_session))


@pytest.fixture
def level_by_order(db_session: Session) -> Callable[[int], models.Level]:
    def find(order: int) -> models.Level:
        return db_session.execute(
            select(models.Level).where(models.Level.order == order)
        ).scalar_one()

    return find


@pytest.fixture
def beginner_quiz(db_session: Session, level_by_order: Callable[[int], models.Level]) -> models.Quiz:
    """Seeded quiz of the first level: 'What is "Hello" in Spanish?' -> Hola."""
    level = level_by_order(1)
    return db_session.execute(
        select(models.Quiz).where(models.Quiz.level_id == level.id)
    ).scalar_one()


@pytest.fixture
def first_flashcard(db_session: Session) -> models.Flashcard:
    return db_session.execute(
        select(models.Flashcard).order_by(models.Flashcard.id).limit(1)
    ).scalar_one()
