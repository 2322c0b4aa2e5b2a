"""Learning context schemas."""

from flashdeck.infrastructure.learning.schemas.flashcard_schemas import (
    CategoriesResponse,
    Flashcard,
    FlashcardCreateRequest,
    FlashcardsListResponse,
    FlashcardUpdateRequest,
)

__all__ = [
    "CategoriesResponse",
    "Flashcard",
    "FlashcardCreateRequest",
    "FlashcardUpdateRequest",
    "FlashcardsListResponse",
]
