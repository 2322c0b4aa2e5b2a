"""Identity application layer."""

from flashdeck.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from flashdeck.application.identity.use_cases.seed_admin_user_use_case import (
    SeedAdminUserUseCase,
)

__all__ = [
    "AuthenticationUseCase",
    "SeedAdminUserUseCase",
]
