"""Debounced search input."""

import asyncio
from collections.abc import Awaitable, Callable

from flashdeck.constants import SEARCH_DEBOUNCE_SECONDS, SEARCH_MIN_LENGTH


class SearchDebouncer:
    """
    Apply search text after a pause in typing.

    Text is applied only when it is empty or at least min_length long, and
    only when it differs from the search currently in effect. Each keystroke
    cancels the pending timer; close() cancels it for good.
    """

    def __init__(
        self,
        apply: Callable[[str], Awaitable[None]],
        current: Callable[[], str | None],
        delay: float = SEARCH_DEBOUNCE_SECONDS,
        min_length: int = SEARCH_MIN_LENGTH,
    ) -> None:
        self._apply = apply
        self._current = current
        self.delay = delay
        self.min_length = min_length
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def should_apply(self, text: str) -> bool:
        if text and len(text) < self.min_length:
            return False
        return text != (self._current() or "")

    def update(self, text: str) -> None:
        """Record a keystroke; must be called from a running event loop."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._fire(text))

    async def _fire(self, text: str) -> None:
        await asyncio.sleep(self.delay)
        # Past the delay the text is committed; a later keystroke starts a new timer
        self._task = None
        if self.should_apply(text):
            await self._apply(text)

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def close(self) -> None:
        """Cancel any pending timer and wait for it to finish unwinding."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
