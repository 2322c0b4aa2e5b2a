"""Typed identifiers."""

from dataclasses import dataclass
from uuid import UUID, uuid4

from ..entity import EntityId

UNSAVED = 0


@dataclass(frozen=True)
class UserId(EntityId):
    """Integer key assigned by the database; 0 until the user is stored."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UserId cannot be negative")

    @classmethod
    def unsaved(cls) -> "UserId":
        return cls(UNSAVED)

    @property
    def is_saved(self) -> bool:
        return self.value != UNSAVED


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Opaque UUID chosen when the card is created, before it is stored."""

    value: UUID

    @classmethod
    def generate(cls) -> "FlashcardId":
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> "FlashcardId":
        """
        Parse an identifier received from a caller.

        Raises:
            ValueError: If raw is not a UUID
        """
        return cls(UUID(raw))
