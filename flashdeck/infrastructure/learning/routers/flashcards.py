"""API routes for flashcard management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from flashdeck.application.common.pagination import Pagination
from flashdeck.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from flashdeck.config import Settings, get_settings
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.value_objects import FlashcardFilter
from flashdeck.exceptions import FlashdeckError, ServerError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentUser
from flashdeck.infrastructure.learning.schemas import (
    CategoriesResponse,
    Flashcard,
    FlashcardCreateRequest,
    FlashcardsListResponse,
    FlashcardUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])

FlashcardUseCaseDep = Annotated[
    FlashcardUseCase, Depends(inject_use_case(container.flashcard_use_case))
]

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("", response_model=FlashcardsListResponse, status_code=status.HTTP_200_OK)
def list_flashcards(
    use_case: FlashcardUseCaseDep,
    settings: Annotated[Settings, Depends(get_settings)],
    tech: Annotated[str | None, Query(description="Exact technology")] = None,
    category: Annotated[str | None, Query(description="Tag the card must carry")] = None,
    search: Annotated[str | None, Query(description="Substring of question or answer")] = None,
    page: Annotated[str | None, Query(description="1-based page number")] = None,
    limit: Annotated[str | None, Query(description="Page size")] = None,
) -> FlashcardsListResponse:
    """
    Get one page of flashcards, newest first.

    Filters AND together. An unknown tech value, or a malformed page or limit,
    falls back to the unconstrained/default value instead of failing.

    Args:
        tech: Only cards for this technology
        category: Only cards tagged with this category
        search: Only cards whose question or answer contains this text (case-insensitive)
        page: Page number, defaults to 1
        limit: Page size, defaults to DEFAULT_PAGE_SIZE and is capped at MAX_PAGE_SIZE

    Returns:
        Page items with hasMore, page, limit and totalCount
    """
    try:
        flashcard_filter = FlashcardFilter.from_params(tech=tech, category=category, search=search)
        pagination = Pagination.parse(
            page,
            limit,
            default_page_size=settings.DEFAULT_PAGE_SIZE,
            max_page_size=settings.MAX_PAGE_SIZE,
        )
        result = use_case.list_flashcards(flashcard_filter, pagination)
        return FlashcardsListResponse.from_result(result)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch flashcards: {e!s}", exc_info=True)
        raise ServerError(UNEXPECTED_ERROR, "FETCH_ERROR") from e


@router.get("/categories", response_model=CategoriesResponse, status_code=status.HTTP_200_OK)
def list_categories(use_case: FlashcardUseCaseDep) -> CategoriesResponse:
    """Get every distinct category tag across all flashcards, sorted."""
    try:
        return CategoriesResponse(categories=use_case.list_categories())
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch categories: {e!s}", exc_info=True)
        raise ServerError(UNEXPECTED_ERROR, "FETCH_ERROR") from e


@router.get("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def get_flashcard(flashcard_id: str, use_case: FlashcardUseCaseDep) -> Flashcard:
    """
    Get a single flashcard.

    Raises:
        FlashcardNotFoundError: If no flashcard has this id
    """
    try:
        return Flashcard.from_entity(use_case.get_flashcard(flashcard_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise ServerError(UNEXPECTED_ERROR, "FETCH_ERROR") from e


@router.post("", response_model=Flashcard, status_code=status.HTTP_201_CREATED)
def create_flashcard(
    request: FlashcardCreateRequest,
    current_user: CurrentUser,
    use_case: FlashcardUseCaseDep,
) -> Flashcard:
    """
    Create a new flashcard.

    Args:
        request: question, answer and tech are required; categories and difficulty are optional

    Returns:
        The created flashcard with its generated id and timestamps

    Raises:
        ValidationError: If a required field is missing or an enum value is unknown
    """
    try:
        flashcard = use_case.create_flashcard(request.to_draft())
        logger.info(f"User {current_user.id.value} created flashcard {flashcard.id}")
        return Flashcard.from_entity(flashcard)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard: {e!s}", exc_info=True)
        raise ServerError(UNEXPECTED_ERROR, "CREATE_ERROR") from e


@router.put("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def update_flashcard(
    flashcard_id: str,
    request: FlashcardUpdateRequest,
    current_user: CurrentUser,
    use_case: FlashcardUseCaseDep,
) -> Flashcard:
    """
    Partially update a flashcard.

    Only fields present in the body change. Sending difficulty as null or ""
    clears it.

    Raises:
        FlashcardNotFoundError: If flashcard is not found
        ValidationError: If a provided value is invalid
    """
    try:
        flashcard = use_case.update_flashcard(flashcard_id, request.to_changes())
        return Flashcard.from_entity(flashcard)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise ServerError(UNEXPECTED_ERROR, "UPDATE_ERROR") from e


@router.delete("/{flashcard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flashcard(
    flashcard_id: str,
    current_user: CurrentUser,
    use_case: FlashcardUseCaseDep,
) -> Response:
    """
    Delete a flashcard.

    Raises:
        FlashcardNotFoundError: If flashcard is not found
    """
    try:
        use_case.delete_flashcard(flashcard_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise ServerError(UNEXPECTED_ERROR, "DELETE_ERROR") from e
