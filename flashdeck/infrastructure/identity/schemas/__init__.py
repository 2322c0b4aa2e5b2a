"""Identity schemas."""

from flashdeck.infrastructure.identity.schemas.user_schemas import (
    LoginRequest,
    MeResponse,
    UserDetails,
)

__all__ = [
    "LoginRequest",
    "MeResponse",
    "UserDetails",
]
