"""Pydantic schemas for the auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.domain.identity.entities.user import User
from flashdeck.infrastructure.common.schemas import CamelModel


class LoginRequest(BaseModel):
    """Login body; presence is checked by the route for a friendlier message."""

    email: str | None = Field(None, description="Account email")
    password: str | None = Field(None, description="Account password")


class UserDetails(CamelModel):
    """Public view of a user. The password hash never leaves the server."""

    id: int
    email: str
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDetails":
        return cls(id=user.id.value, email=user.email, created_at=user.created_at)


class MeResponse(BaseModel):
    user: UserDetails
