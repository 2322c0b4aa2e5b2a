"""The credential record behind the single authenticated tier."""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects.ids import UserId

EMAIL_MAX_LENGTH = 100


def normalize_email(email: str) -> str:
    """Lookup key for an email: surrounding whitespace and case are ignored."""
    return email.strip().lower()


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    An account allowed to write flashcards.

    There are no roles or ownership: any authenticated user may change any
    card. The password hash never leaves the server.
    """

    id: UserId
    email: str
    hashed_password: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.email:
            raise ValidationError("Email is required", field="email")
        if len(self.email) > EMAIL_MAX_LENGTH:
            raise ValidationError(
                f"Email must be at most {EMAIL_MAX_LENGTH} characters", field="email"
            )

    def change_password_hash(self, hashed_password: str) -> None:
        self.hashed_password = hashed_password

    @classmethod
    def register(cls, email: str, hashed_password: str) -> "User":
        """New, not yet persisted user; the store assigns the id."""
        return cls(
            id=UserId.unsaved(),
            email=normalize_email(email),
            hashed_password=hashed_password,
        )
