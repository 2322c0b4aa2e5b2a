"""Login and credential resolution."""

import structlog

from flashdeck.application.identity.protocols.password_service import PasswordServiceProtocol
from flashdeck.application.identity.protocols.token_service import TokenServiceProtocol
from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User, normalize_email
from flashdeck.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError

logger = structlog.get_logger(__name__)


class AuthenticationUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def _password_matches(self, user: User | None, password: str) -> bool:
        if user is None:
            # Spend the same hashing time as for a real account
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            return False
        if not user.hashed_password:
            return False
        return self.password_service.verify_password(password, user.hashed_password)

    def authenticate_user(self, email: str, password: str) -> tuple[User, str]:
        """
        Exchange email and password for the user and a fresh access token.

        The email is normalized before lookup. An unknown email and a wrong
        password are indistinguishable to the caller.

        Raises:
            InvalidCredentialsError: On any mismatch
        """
        user = self.user_repository.find_by_email(normalize_email(email))
        if not self._password_matches(user, password):
            logger.info("login_rejected")
            raise InvalidCredentialsError
        assert user is not None

        logger.info("user_authenticated", user_id=user.id.value)
        return user, self.token_service.create_access_token(user.id.value)

    def authenticate_token(self, token: str) -> User:
        """
        Resolve an access token to a live user.

        Raises:
            InvalidCredentialsError: Bad signature, expired, wrong type, or user deleted
        """
        user_id = self.token_service.verify_access_token(token)
        if user_id is None:
            raise InvalidCredentialsError
        try:
            return self.get_user_by_id(user_id)
        except UserNotFoundError:
            raise InvalidCredentialsError from None

    def get_user_by_id(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user
