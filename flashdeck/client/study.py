"""
Study mode navigator.

A single request loads up to STUDY_MODE_MAX_CARDS matching cards; all
navigation afterwards is local. Filters that match more cards than the
ceiling are silently truncated to the newest ones.
"""

import random
from enum import StrEnum

import structlog

from flashdeck.client.api import ApiError
from flashdeck.client.models import Flashcard, FlashcardFilters
from flashdeck.client.pagination import FlashcardSource
from flashdeck.constants import STUDY_MODE_MAX_CARDS

logger = structlog.get_logger(__name__)


class StudyAction(StrEnum):
    NEXT = "next"
    PREVIOUS = "previous"
    RANDOM = "random"
    TOGGLE_ANSWER = "toggle_answer"
    EXIT = "exit"


class FocusTarget(StrEnum):
    """Element holding keyboard focus when a key is pressed."""

    BODY = "body"
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    BUTTON = "button"


# Keys never navigate while a form control has focus
FORM_CONTROLS = frozenset(
    {FocusTarget.INPUT, FocusTarget.TEXTAREA, FocusTarget.SELECT, FocusTarget.BUTTON}
)

KEY_BINDINGS: dict[str, StudyAction] = {
    "ArrowRight": StudyAction.NEXT,
    " ": StudyAction.NEXT,
    "ArrowLeft": StudyAction.PREVIOUS,
    "r": StudyAction.RANDOM,
    "R": StudyAction.RANDOM,
    "Enter": StudyAction.TOGGLE_ANSWER,
    "a": StudyAction.TOGGLE_ANSWER,
    "A": StudyAction.TOGGLE_ANSWER,
    "Escape": StudyAction.EXIT,
}


class StudyNavigator:
    """In-memory traversal over a bounded working set of flashcards."""

    def __init__(
        self,
        api: FlashcardSource,
        max_cards: int = STUDY_MODE_MAX_CARDS,
        rng: random.Random | None = None,
    ) -> None:
        self.api = api
        self.max_cards = max_cards
        self.rng = rng or random.Random()
        self.filters = FlashcardFilters()
        self.cards: list[Flashcard] = []
        self.index = 0
        self.show_answer = False
        self.loading = False
        self.error: str | None = None
        self._generation = 0

    async def load(self, filters: FlashcardFilters | None = None) -> None:
        """
        Replace the working set with the first max_cards matching cards.

        On failure the previous working set is kept and error is set.
        """
        if filters is not None:
            self.filters = filters
        self._generation += 1
        generation = self._generation
        self.loading = True
        self.error = None

        try:
            result = await self.api.list_flashcards(self.filters, page=1, limit=self.max_cards)
        except ApiError as e:
            if generation == self._generation:
                logger.warning("study_load_failed", error=e.message, kind=e.kind.value)
                self.error = e.message
                self.loading = False
            return

        if generation != self._generation:
            return

        self.cards = list(result.flashcards)
        if result.has_more:
            logger.info(
                "study_set_truncated", loaded=len(self.cards), total=result.total_count
            )
        self._move_to(0)
        self.loading = False

    @property
    def current(self) -> Flashcard | None:
        if not self.cards:
            return None
        return self.cards[self.index]

    @property
    def is_empty(self) -> bool:
        return not self.cards

    @property
    def can_step(self) -> bool:
        """Display hint: with fewer than two cards the step buttons go nowhere."""
        return len(self.cards) >= 2

    def _move_to(self, index: int) -> None:
        self.index = index
        self.show_answer = False

    def next(self) -> None:
        """Advance with wraparound; a single card stays put but hides its answer."""
        if self.cards:
            self._move_to((self.index + 1) % len(self.cards))

    def previous(self) -> None:
        if self.cards:
            self._move_to((self.index - 1) % len(self.cards))

    def random(self) -> None:
        """Jump to a uniformly random card; may land on the current one."""
        if self.cards:
            self._move_to(self.rng.randrange(len(self.cards)))

    def toggle_answer(self) -> None:
        if self.cards:
            self.show_answer = not self.show_answer

    def handle_key(
        self, key: str, focus: FocusTarget = FocusTarget.BODY
    ) -> StudyAction | None:
        """
        Apply the action bound to a key.

        Returns:
            The action taken, or None if the key is unbound or suppressed.
            EXIT is returned for the caller to act on.
        """
        if focus in FORM_CONTROLS:
            return None
        action = KEY_BINDINGS.get(key)
        if action is None:
            return None

        if action is StudyAction.NEXT:
            self.next()
        elif action is StudyAction.PREVIOUS:
            self.previous()
        elif action is StudyAction.RANDOM:
            self.random()
        elif action is StudyAction.TOGGLE_ANSWER:
            self.toggle_answer()
        return action
