"""
Engine and session lifecycle.

One engine (and its connection pool) exists per process. It is created when
the application starts, released when it stops, and every request borrows
its own session from it through ``get_db``.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Annotated

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from flashdeck.config import Settings, get_settings


class Base(DeclarativeBase):
    pass


# SQLite's built-in lower() only folds ASCII letters
SQLITE_LOWER = "py_lower"

_engine: Engine | None = None
_sessions: sessionmaker[Session] | None = None


def register_sqlite_functions(engine: Engine) -> None:
    """Install Python-backed SQL functions on every new SQLite connection."""

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        dbapi_connection.create_function(SQLITE_LOWER, 1, str.lower, deterministic=True)


def _build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # A single shared connection; an in-memory database only exists on it
        engine = create_engine(
            url, connect_args={"check_same_thread": False}, poolclass=StaticPool
        )
        register_sqlite_functions(engine)
        return engine
    return create_engine(
        url, pool_size=10, max_overflow=10, pool_pre_ping=True, pool_recycle=3600
    )


def initialize_database(settings: Settings) -> None:
    """Create the process-wide engine and session factory."""
    global _engine, _sessions  # noqa: PLW0603
    _engine = _build_engine(settings.DATABASE_URL)
    _sessions = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=True)


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("initialize_database() has not been called")
    return _engine


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Session factory, initialized on first use outside the app lifespan (scripts, tests)."""
    if _sessions is None:
        initialize_database(settings)
    assert _sessions is not None
    return _sessions


def dispose_engine() -> None:
    """Close every pooled connection; a later initialize_database() starts afresh."""
    global _engine, _sessions  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _sessions = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Iterator[Session]:
    """Request-scoped session, closed when the response is sent."""
    with session_factory() as session:
        yield session


DatabaseSession = Annotated[Session, Depends(get_db)]


# Session the container builds repositories around. Each request runs in its
# own copy of the context, so concurrent requests never see each other's.
_bound_session: ContextVar[Session | None] = ContextVar("flashdeck_session", default=None)


@contextmanager
def bound_session(session: Session) -> Iterator[Session]:
    """Make ``session`` the current session for the enclosed block."""
    token = _bound_session.set(session)
    try:
        yield session
    finally:
        _bound_session.reset(token)


def current_session() -> Session:
    session = _bound_session.get()
    if session is None:
        raise RuntimeError("No database session is bound to the current context")
    return session
