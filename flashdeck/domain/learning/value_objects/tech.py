"""Closed enumerations attached to a flashcard."""

from enum import StrEnum

from flashdeck.domain.common.exceptions import ValidationError


class Tech(StrEnum):
    """Subject technology of a flashcard."""

    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"
    REACT = "React"
    NODE = "Node"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_value(cls, value: str | None) -> "Tech | None":
        """Return the member matching value exactly, or None."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def require(cls, value: str) -> "Tech":
        """
        Parse a tech value supplied for a write.

        Raises:
            ValidationError: If value is not a member
        """
        tech = cls.from_value(value)
        if tech is None:
            raise ValidationError(
                f"Invalid tech value. Must be one of: {', '.join(cls.values())}",
                field="tech",
                value=value,
            )
        return tech


class Difficulty(StrEnum):
    """Optional difficulty rating. Absence means unrated."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse_optional(cls, value: str | None) -> "Difficulty | None":
        """
        Parse a difficulty supplied for a write; empty or None means unrated.

        Raises:
            ValidationError: If value is non-empty and not a member
        """
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"Invalid difficulty value. Must be one of: {', '.join(cls.values())}",
                field="difficulty",
                value=value,
            ) from None
