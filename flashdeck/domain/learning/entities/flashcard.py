"""
Flashcard entity.
"""

from dataclasses import dataclass, field
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import FlashcardId
from flashdeck.domain.learning.value_objects.tech import Difficulty, Tech


def _require_text(value: str | None, field_name: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field_name.capitalize()} cannot be empty", field=field_name)
    return value


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Study card.

    Business Rules:
    - Question, answer and tech are always present
    - Categories is always a list (possibly empty); order is kept, duplicates allowed
    - Difficulty is optional; None means unrated
    """

    id: FlashcardId
    question: str
    answer: str
    tech: Tech
    categories: list[str] = field(default_factory=list)
    difficulty: Difficulty | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _require_text(self.question, "question")
        _require_text(self.answer, "answer")
        if self.categories is None:
            self.categories = []

    def update_question(self, question: str) -> None:
        """
        Update the question.

        Raises:
            ValidationError: If question is empty
        """
        self.question = _require_text(question, "question")

    def update_answer(self, answer: str) -> None:
        """
        Update the answer.

        Raises:
            ValidationError: If answer is empty
        """
        self.answer = _require_text(answer, "answer")

    def update_tech(self, tech: Tech) -> None:
        self.tech = tech

    def replace_categories(self, categories: list[str]) -> None:
        self.categories = list(categories)

    def rate(self, difficulty: Difficulty | None) -> None:
        self.difficulty = difficulty

    @classmethod
    def create(
        cls,
        question: str,
        answer: str,
        tech: Tech,
        categories: list[str] | None = None,
        difficulty: Difficulty | None = None,
    ) -> "Flashcard":
        """Create a new flashcard with a freshly generated id."""
        return cls(
            id=FlashcardId.generate(),
            question=question,
            answer=answer,
            tech=tech,
            categories=list(categories or []),
            difficulty=difficulty,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        question: str,
        answer: str,
        tech: Tech,
        categories: list[str],
        difficulty: Difficulty | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            question=question,
            answer=answer,
            tech=tech,
            categories=list(categories),
            difficulty=difficulty,
            created_at=created_at,
            updated_at=updated_at,
        )
