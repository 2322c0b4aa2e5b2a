"""DTOs for learning use cases."""

from flashdeck.application.learning.use_cases.dtos.flashcard_dtos import (
    FlashcardChanges,
    FlashcardDraft,
)

__all__ = ["FlashcardChanges", "FlashcardDraft"]
