"""
Infinite-scroll list controller.

The browsing screen shows an ever-growing list of flashcards. Page 1 is
loaded on every filter change or mutation ("reset"); later pages are
appended when the scroll sentinel becomes visible ("append").

Every reset bumps a generation counter. A response is applied only if the
generation it was requested under is still current, so a slow response for
an old filter can neither replace nor extend the list of a newer one.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

import structlog

from flashdeck.client.api import ApiError
from flashdeck.client.models import Flashcard, FlashcardFilters, FlashcardPage
from flashdeck.constants import LIST_PAGE_SIZE

logger = structlog.get_logger(__name__)


class FlashcardSource(Protocol):
    """The subset of the API the controllers read from."""

    async def list_flashcards(
        self, filters: FlashcardFilters | None = None, page: int = 1, limit: int | None = None
    ) -> FlashcardPage: ...

    async def list_categories(self) -> list[str]: ...


class FlashcardApi(FlashcardSource, Protocol):
    """Reads plus the authenticated writes."""

    async def create_flashcard(self, data: dict[str, Any]) -> Flashcard: ...

    async def update_flashcard(self, flashcard_id: str, changes: dict[str, Any]) -> Flashcard: ...

    async def delete_flashcard(self, flashcard_id: str) -> None: ...


@dataclass
class ListState:
    """
    Client-visible list state.

    Attributes:
        items: Loaded cards, in server order, without duplicates
        page: Last page successfully loaded (0 before the first load)
        has_more: Whether the server reported later pages
        loading_initial: A reset fetch is in flight
        loading_more: An append fetch is in flight
        total_count: Cards matching the filter, from the last response
        error: Message of the last failed fetch, cleared by the next attempt
    """

    items: list[Flashcard] = field(default_factory=list)
    page: int = 0
    has_more: bool = True
    loading_initial: bool = False
    loading_more: bool = False
    total_count: int = 0
    error: str | None = None


class ListPaginationController:
    """Drive incremental page fetches for the browsing list."""

    def __init__(
        self,
        api: FlashcardApi,
        page_size: int = LIST_PAGE_SIZE,
        filters: FlashcardFilters | None = None,
    ) -> None:
        self.api = api
        self.page_size = page_size
        self.filters = filters or FlashcardFilters()
        self.state = ListState()
        self.categories: list[str] = []
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_fetching(self) -> bool:
        return self.state.loading_initial or self.state.loading_more

    async def set_filters(self, filters: FlashcardFilters) -> None:
        """Apply new filters and reload from page 1."""
        self.filters = filters
        await self.reload()

    async def reload(self) -> None:
        """
        Reload page 1 under the current filters.

        Items already on screen stay visible until the new page arrives.
        """
        self._generation += 1
        generation = self._generation
        state = self.state
        state.page = 0
        state.has_more = True
        state.loading_initial = True
        # Any append still in flight belongs to the previous generation
        state.loading_more = False
        state.error = None

        try:
            result = await self.api.list_flashcards(self.filters, page=1, limit=self.page_size)
        except ApiError as e:
            if generation != self._generation:
                return
            logger.warning("list_reload_failed", error=e.message, kind=e.kind.value)
            state.error = e.message
            state.loading_initial = False
            return

        if generation != self._generation:
            logger.debug("discarded_stale_page", page=1, generation=generation)
            return

        state.items = list(result.flashcards)
        state.page = 1
        state.has_more = result.has_more
        state.total_count = result.total_count
        state.loading_initial = False

    async def load_more(self) -> bool:
        """
        Append the next page; called when the scroll sentinel becomes visible.

        Ignored while any fetch is in flight or when no more pages exist. A
        failed append leaves page unchanged, so the next call retries it.

        Returns:
            True if a page was appended
        """
        state = self.state
        if not state.has_more or self.is_fetching:
            return False

        generation = self._generation
        next_page = state.page + 1
        state.loading_more = True
        state.error = None

        try:
            result = await self.api.list_flashcards(
                self.filters, page=next_page, limit=self.page_size
            )
        except ApiError as e:
            if generation != self._generation:
                return False
            logger.warning("list_append_failed", page=next_page, error=e.message)
            state.error = e.message
            state.loading_more = False
            return False

        if generation != self._generation:
            logger.debug("discarded_stale_page", page=next_page, generation=generation)
            return False

        # Concurrent inserts can shift a boundary card onto two pages
        seen = {card.id for card in state.items}
        state.items.extend(card for card in result.flashcards if card.id not in seen)
        state.page = next_page
        state.has_more = result.has_more
        state.total_count = result.total_count
        state.loading_more = False
        return True

    async def refresh_categories(self) -> list[str]:
        """Reload the global category list used for filter options."""
        try:
            self.categories = await self.api.list_categories()
        except ApiError as e:
            logger.warning("category_refresh_failed", error=e.message)
            self.state.error = e.message
        return self.categories

    # Mutations: the list is reloaded from page 1 after every successful write.
    # Failures propagate to the caller so a form can keep the user's input.

    async def create(self, data: dict[str, Any]) -> Flashcard:
        flashcard = await self.api.create_flashcard(data)
        await self._after_mutation()
        return flashcard

    async def update(self, flashcard_id: str, changes: dict[str, Any]) -> Flashcard:
        flashcard = await self.api.update_flashcard(flashcard_id, changes)
        await self._after_mutation()
        return flashcard

    async def delete(self, flashcard_id: str) -> None:
        await self.api.delete_flashcard(flashcard_id)
        await self._after_mutation()

    async def _after_mutation(self) -> None:
        await self.reload()
        await self.refresh_categories()
