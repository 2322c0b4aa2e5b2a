"""Identity domain layer."""

from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError

__all__ = [
    "InvalidCredentialsError",
    "User",
    "UserNotFoundError",
]
