"""Identity-bearing domain objects."""

from dataclasses import dataclass
from typing import Generic, TypeVar
from uuid import UUID

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """Typed primary key, so a user id can never be passed where a flashcard id is expected."""

    value: int | UUID

    def __str__(self) -> str:
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(Generic[IdType]):
    """
    Mutable object whose equality is its id, not its current field values.

    Subclasses are dataclasses declared with eq=False so these methods apply.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
