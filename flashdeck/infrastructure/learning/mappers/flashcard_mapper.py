"""Flashcard rows to entities and back."""

from uuid import UUID

from flashdeck.domain.common.value_objects import FlashcardId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import Difficulty, Tech
from flashdeck.models import Flashcard as FlashcardRow


class FlashcardMapper:
    def to_domain(self, row: FlashcardRow) -> Flashcard:
        return Flashcard.create_with_id(
            id=FlashcardId(UUID(row.id)),
            question=row.question,
            answer=row.answer,
            tech=Tech(row.tech),
            categories=list(row.categories or []),
            difficulty=Difficulty(row.difficulty) if row.difficulty else None,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def to_orm(self, card: Flashcard, row: FlashcardRow | None = None) -> FlashcardRow:
        """Copy the card's fields onto ``row``, or onto a new row when none is given."""
        if row is None:
            row = FlashcardRow(id=str(card.id))
        row.question = card.question
        row.answer = card.answer
        row.tech = card.tech.value
        # Always a new list, so the JSON column is flagged dirty
        row.categories = list(card.categories)
        row.difficulty = card.difficulty.value if card.difficulty else None
        return row
