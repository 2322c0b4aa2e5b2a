"""Identity domain exceptions."""

from flashdeck.domain.common.exceptions import DomainError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)


class InvalidCredentialsError(DomainError):
    """Raised when authentication fails; never says which half was wrong."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")
