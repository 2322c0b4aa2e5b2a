"""
Runtime configuration.

Values come from the environment or a ``.env`` file. Names match the
environment variables one to one.
"""

import logging
import sys
from functools import lru_cache
from typing import Literal

import structlog
from pydantic import Field, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flashdeck.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

Environment = Literal["development", "production", "test"]

# Used only when ENVIRONMENT is not production and SECRET_KEY is unset
DEV_SECRET_KEY = "flashdeck-development-secret-change-me-in-production"  # noqa: S105

TOKEN_LIFETIME_MINUTES = 7 * 24 * 60


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENVIRONMENT: Environment = "development"
    DATABASE_URL: str = "sqlite:///./flashdeck.db"
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    PROJECT_NAME: str = "flashdeck API"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"

    SECRET_KEY: str = ""
    PASSWORD_PEPPER: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=TOKEN_LIFETIME_MINUTES, gt=0)
    COOKIE_SECURE: bool | None = None
    RATE_LIMIT_ENABLED: bool = True

    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None

    DEFAULT_PAGE_SIZE: int = DEFAULT_PAGE_SIZE
    MAX_PAGE_SIZE: int = MAX_PAGE_SIZE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cookie_secure(self) -> bool:
        """Explicit COOKIE_SECURE wins; otherwise only production sends Secure cookies."""
        if self.COOKIE_SECURE is None:
            return self.ENVIRONMENT == "production"
        return self.COOKIE_SECURE

    @field_validator("ADMIN_EMAIL", mode="after")
    @classmethod
    def _normalize_admin_email(cls, value: str | None) -> str | None:
        cleaned = (value or "").strip().lower()
        return cleaned or None

    @model_validator(mode="after")
    def _check_secret_key(self) -> "Settings":
        if self.SECRET_KEY:
            return self
        if self.ENVIRONMENT == "production":
            raise ValueError("SECRET_KEY is required when ENVIRONMENT is 'production'")
        self.SECRET_KEY = DEV_SECRET_KEY
        return self

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "Settings":
        if not 1 <= self.DEFAULT_PAGE_SIZE <= self.MAX_PAGE_SIZE:
            raise ValueError("DEFAULT_PAGE_SIZE must be positive and not exceed MAX_PAGE_SIZE")
        return self


def _renderer(environment: str) -> structlog.types.Processor:
    if environment == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(environment: str = "development") -> None:
    """
    Route structlog through stdlib logging.

    Production emits one JSON object per line; other environments get the
    colored console renderer. Development also lowers the level to DEBUG.
    """
    level = logging.DEBUG if environment == "development" else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(environment),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings()
