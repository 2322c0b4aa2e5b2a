"""Wire models as seen by the client."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from flashdeck.domain.learning.value_objects import Difficulty, Tech


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Flashcard(_WireModel):
    id: str
    question: str
    answer: str
    tech: Tech
    categories: list[str] = Field(default_factory=list)
    difficulty: Difficulty | None = None
    created_at: datetime
    updated_at: datetime


class FlashcardPage(_WireModel):
    """One page of the list endpoint."""

    flashcards: list[Flashcard]
    has_more: bool
    page: int
    limit: int
    total_count: int


class UserDetails(_WireModel):
    id: int
    email: str
    created_at: datetime | None = None


class FlashcardFilters(BaseModel):
    """
    Ephemeral filter state of a list or study screen.

    A field left as None places no constraint on that dimension.
    """

    model_config = ConfigDict(frozen=True)

    tech: Tech | None = None
    category: str | None = None
    search: str | None = None

    def to_query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.tech is not None:
            params["tech"] = self.tech.value
        if self.category:
            params["category"] = self.category
        if self.search:
            params["search"] = self.search
        return params

    def with_search(self, search: str | None) -> "FlashcardFilters":
        return self.model_copy(update={"search": search or None})
