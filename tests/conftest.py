"""Shared fixtures: an isolated in-memory database, HTTP clients and card factories."""

import os

# Settings are read once at import time; configure them before importing flashdeck
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""

from collections.abc import Callable, Generator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from flashdeck import models  # noqa: E402
from flashdeck.database import Base, get_db, register_sqlite_functions  # noqa: E402
from flashdeck.infrastructure.identity.services import PasswordService, TokenService  # noqa: E402
from flashdeck.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection, so the app's worker thread sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
register_sqlite_functions(test_engine)

TestingSession = sessionmaker(bind=test_engine, autoflush=False)

TEST_USER_EMAIL = "admin@example.com"
TEST_USER_PASSWORD = "correct horse battery staple"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Session on freshly created tables, dropped again afterwards."""
    Base.metadata.create_all(bind=test_engine)

    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def override_db(db_session: Session) -> Generator[None, None, None]:
    """Route the app's request-scoped sessions to the test session."""

    def shared_session() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = shared_session
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_db: None) -> Generator[TestClient, Any, None]:
    """Anonymous client; the app lifespan runs around it."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create the single privileged user."""
    hashed_password = PasswordService().hash_password(TEST_USER_PASSWORD)
    user = models.User(email=TEST_USER_EMAIL, hashed_password=hashed_password)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_token(test_user: models.User) -> str:
    return TokenService().create_access_token(test_user.id)


@pytest.fixture
def auth_client(client: TestClient, auth_token: str) -> TestClient:
    """Test client carrying the credential cookie."""
    client.cookies.set("token", auth_token)
    return client


@pytest.fixture
def make_flashcard(db_session: Session) -> Callable[..., models.Flashcard]:
    """
    Factory inserting flashcards directly.

    Each call is stamped one second after the previous one, so later calls
    are newer and sort first.
    """
    base_time = datetime(2026, 1, 1, tzinfo=UTC)
    counter = {"n": 0}

    def _make(
        question: str = "What is a closure?",
        answer: str = "A function bundled with its lexical scope.",
        tech: str = "JavaScript",
        categories: list[str] | None = None,
        difficulty: str | None = None,
    ) -> models.Flashcard:
        counter["n"] += 1
        created_at = base_time + timedelta(seconds=counter["n"])
        flashcard = models.Flashcard(
            id=str(uuid4()),
            question=question,
            answer=answer,
            tech=tech,
            categories=categories or [],
            difficulty=difficulty,
            created_at=created_at,
            updated_at=created_at,
        )
        db_session.add(flashcard)
        db_session.commit()
        db_session.refresh(flashcard)
        return flashcard

    return _make
