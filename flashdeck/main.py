"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flashdeck import models  # noqa: F401
from flashdeck.config import configure_logging, get_settings
from flashdeck.database import Base, dispose_engine, get_engine, initialize_database
from flashdeck.infrastructure.common.errors import register_exception_handlers
from flashdeck.infrastructure.common.routers import health
from flashdeck.infrastructure.identity.routers import auth
from flashdeck.infrastructure.learning.routers import flashcards
from flashdeck.seed import seed_admin_user

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the database engine for the lifetime of the process."""
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)

    # SQLite databases are created in place; other backends go through alembic
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=get_engine())
    seed_admin_user(settings)

    yield

    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.state.limiter = auth.limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(flashcards.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get(f"{settings.API_V1_PREFIX}/")
def api_root() -> dict[str, Any]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }


def run() -> None:
    """Run the development server."""
    uvicorn.run(
        "flashdeck.main:app",
        host="0.0.0.0",  # noqa: S104
        port=8000,
        reload=settings.ENVIRONMENT == "development",
    )
