"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from flashdeck.application.common.pagination import Pagination
from flashdeck.domain.common.value_objects.ids import FlashcardId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects.flashcard_filter import FlashcardFilter


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...

    def find_page(
        self, flashcard_filter: FlashcardFilter, pagination: Pagination
    ) -> tuple[list[Flashcard], int]:
        """
        Get one page of flashcards matching a filter, newest first.

        Returns:
            Tuple of (flashcards on this page, total matching the filter)
        """
        ...

    def list_categories(self) -> list[str]:
        """
        Get every distinct category tag across all flashcards.

        Returns:
            Sorted list of tags
        """
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Returns:
            Saved flashcard entity with database-generated values
        """
        ...

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...
