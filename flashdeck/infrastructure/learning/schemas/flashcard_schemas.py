"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from flashdeck.application.common.pagination import PaginatedResult
from flashdeck.application.learning.use_cases.dtos import FlashcardChanges, FlashcardDraft
from flashdeck.domain.learning.entities.flashcard import Flashcard as FlashcardEntity
from flashdeck.domain.learning.value_objects import Difficulty, Tech
from flashdeck.infrastructure.common.schemas import CamelModel


def _coerce_categories(value: object) -> object:
    # A lone tag is accepted as a one-element list
    if isinstance(value, str):
        return [value]
    return value


class Flashcard(CamelModel):
    """Schema for Flashcard response."""

    id: str
    question: str
    answer: str
    tech: Tech
    categories: list[str]
    difficulty: Difficulty | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, flashcard: FlashcardEntity) -> "Flashcard":
        return cls(
            id=str(flashcard.id),
            question=flashcard.question,
            answer=flashcard.answer,
            tech=flashcard.tech,
            categories=flashcard.categories,
            difficulty=flashcard.difficulty,
            created_at=flashcard.created_at,
            updated_at=flashcard.updated_at,
        )


class FlashcardCreateRequest(BaseModel):
    """
    Schema for creating a new flashcard.

    Required fields and enum values are checked by the use case so that
    the error messages name the allowed values.
    """

    question: str | None = Field(None, description="Question text for the flashcard")
    answer: str | None = Field(None, description="Answer text, may contain markdown")
    tech: str | None = Field(None, description=f"One of: {', '.join(Tech.values())}")
    categories: list[str] | None = Field(None, description="Ordered category tags")
    difficulty: str | None = Field(None, description=f"One of: {', '.join(Difficulty.values())}")

    @field_validator("categories", mode="before")
    @classmethod
    def coerce_categories(cls, value: object) -> object:
        return _coerce_categories(value)

    def to_draft(self) -> FlashcardDraft:
        return FlashcardDraft(
            question=self.question,
            answer=self.answer,
            tech=self.tech,
            categories=self.categories or [],
            difficulty=self.difficulty,
        )


class FlashcardUpdateRequest(BaseModel):
    """Schema for updating a flashcard; any subset of fields may be sent."""

    question: str | None = Field(None, description="New question text")
    answer: str | None = Field(None, description="New answer text")
    tech: str | None = Field(None, description="New technology")
    categories: list[str] | None = Field(None, description="Replacement category tags")
    difficulty: str | None = Field(None, description="New difficulty, null or empty to clear")

    @field_validator("categories", mode="before")
    @classmethod
    def coerce_categories(cls, value: object) -> object:
        return _coerce_categories(value)

    def to_changes(self) -> FlashcardChanges:
        return FlashcardChanges(
            question=self.question,
            answer=self.answer,
            tech=self.tech,
            categories=self.categories,
            difficulty=self.difficulty,
            provided=frozenset(self.model_fields_set),
        )


class FlashcardsListResponse(CamelModel):
    """One page of the filtered flashcard list."""

    flashcards: list[Flashcard] = Field(..., description="Flashcards on this page")
    has_more: bool = Field(..., description="Whether later pages exist")
    page: int = Field(..., description="Page number served (1-based)")
    limit: int = Field(..., description="Page size applied")
    total_count: int = Field(..., description="Cards matching the filter across all pages")

    @classmethod
    def from_result(cls, result: PaginatedResult[FlashcardEntity]) -> "FlashcardsListResponse":
        return cls(
            flashcards=[Flashcard.from_entity(fc) for fc in result.items],
            has_more=result.has_more,
            page=result.page,
            limit=result.page_size,
            total_count=result.total,
        )


class CategoriesResponse(BaseModel):
    """Every distinct category tag, sorted."""

    categories: list[str] = Field(..., description="Sorted distinct tags")
