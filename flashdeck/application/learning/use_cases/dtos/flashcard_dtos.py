"""DTOs for flashcard use cases."""

from dataclasses import dataclass, field


@dataclass
class FlashcardDraft:
    """Raw input for creating a flashcard, validated by the use case."""

    question: str | None
    answer: str | None
    tech: str | None
    categories: list[str] = field(default_factory=list)
    difficulty: str | None = None


@dataclass
class FlashcardChanges:
    """
    Partial update of a flashcard.

    Only names listed in ``provided`` are applied, so an explicit
    ``difficulty=None`` (clear the rating) differs from leaving it out.
    """

    question: str | None = None
    answer: str | None = None
    tech: str | None = None
    categories: list[str] | None = None
    difficulty: str | None = None
    provided: frozenset[str] = frozenset()

    def has(self, name: str) -> bool:
        return name in self.provided
