"""Use case for provisioning the admin account."""

import structlog

from flashdeck.application.identity.protocols.password_service import PasswordServiceProtocol
from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.identity.entities.user import User, normalize_email

logger = structlog.get_logger(__name__)


class SeedAdminUserUseCase:
    """Create the admin user, or reset its password if it already exists."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service

    def seed(self, email: str, password: str) -> User:
        """
        Upsert the admin user.

        Args:
            email: Admin email
            password: Admin plain text password

        Returns:
            The created or updated user
        """
        email = normalize_email(email)
        hashed_password = self.password_service.hash_password(password)

        user = self.user_repository.find_by_email(email)
        if user is None:
            user = self.user_repository.save(User.register(email, hashed_password))
            logger.info("admin_user_created", user_id=user.id.value)
            return user

        user.change_password_hash(hashed_password)
        user = self.user_repository.save(user)
        logger.info("admin_user_password_reset", user_id=user.id.value)
        return user
