"""Use case for flashcard operations."""

import structlog

from flashdeck.application.common.pagination import PaginatedResult, Pagination
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.dtos import FlashcardChanges, FlashcardDraft
from flashdeck.domain.common.value_objects.ids import FlashcardId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import Difficulty, FlashcardFilter, Tech
from flashdeck.exceptions import FlashcardNotFoundError, ValidationError

logger = structlog.get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: question, answer, and tech are required"


def _parse_id(flashcard_id: str) -> FlashcardId:
    # A malformed id cannot resolve to anything, so it is a miss, not bad input
    try:
        return FlashcardId.parse(flashcard_id)
    except ValueError:
        raise FlashcardNotFoundError(flashcard_id) from None


class FlashcardUseCase:
    """Use case for flashcard CRUD operations and the filtered list query."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.flashcard_repository = flashcard_repository

    def list_flashcards(
        self, flashcard_filter: FlashcardFilter, pagination: Pagination
    ) -> PaginatedResult[Flashcard]:
        """
        Get one page of flashcards matching a filter, newest first.

        Args:
            flashcard_filter: Tech/category/search constraints (AND-combined)
            pagination: Page and page size

        Returns:
            PaginatedResult with the page items, the filtered total and has_more
        """
        items, total = self.flashcard_repository.find_page(flashcard_filter, pagination)
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def list_categories(self) -> list[str]:
        """Get the sorted set of all category tags, independent of any page."""
        return self.flashcard_repository.list_categories()

    def get_flashcard(self, flashcard_id: str) -> Flashcard:
        """
        Get a single flashcard.

        Raises:
            FlashcardNotFoundError: If no flashcard has this id
        """
        flashcard = self.flashcard_repository.find_by_id(_parse_id(flashcard_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard

    def create_flashcard(self, draft: FlashcardDraft) -> Flashcard:
        """
        Create a new flashcard.

        Args:
            draft: Unvalidated input

        Returns:
            Created flashcard domain entity

        Raises:
            ValidationError: If a required field is missing or an enum value is unknown
        """
        if not draft.question or not draft.answer or not draft.tech:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        flashcard = Flashcard.create(
            question=draft.question,
            answer=draft.answer,
            tech=Tech.require(draft.tech),
            categories=draft.categories,
            difficulty=Difficulty.parse_optional(draft.difficulty),
        )
        flashcard = self.flashcard_repository.save(flashcard)

        logger.info("created_flashcard", flashcard_id=str(flashcard.id), tech=flashcard.tech.value)
        return flashcard

    def update_flashcard(self, flashcard_id: str, changes: FlashcardChanges) -> Flashcard:
        """
        Apply a partial update to a flashcard.

        Args:
            flashcard_id: ID of the flashcard to update
            changes: Fields to change; unlisted fields are left alone

        Returns:
            Updated flashcard domain entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If a provided value is invalid
        """
        flashcard = self.flashcard_repository.find_by_id(_parse_id(flashcard_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)

        # Validate everything before touching the entity
        tech = Tech.require(changes.tech or "") if changes.has("tech") else None
        difficulty = Difficulty.parse_optional(changes.difficulty)

        if changes.has("question"):
            flashcard.update_question(changes.question or "")
        if changes.has("answer"):
            flashcard.update_answer(changes.answer or "")
        if tech is not None:
            flashcard.update_tech(tech)
        if changes.has("categories"):
            flashcard.replace_categories(changes.categories or [])
        if changes.has("difficulty"):
            flashcard.rate(difficulty)

        flashcard = self.flashcard_repository.save(flashcard)

        logger.info("updated_flashcard", flashcard_id=flashcard_id, fields=sorted(changes.provided))
        return flashcard

    def delete_flashcard(self, flashcard_id: str) -> None:
        """
        Delete a flashcard (hard delete).

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        deleted = self.flashcard_repository.delete(_parse_id(flashcard_id))
        if not deleted:
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
