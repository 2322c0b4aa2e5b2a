from .authentication_use_case import AuthenticationUseCase
from .seed_admin_user_use_case import SeedAdminUserUseCase

__all__ = [
    "AuthenticationUseCase",
    "SeedAdminUserUseCase",
]
