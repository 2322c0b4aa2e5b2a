"""Tests for the debounced search input."""

import asyncio

import pytest

from flashdeck.client.debounce import SearchDebouncer

DELAY = 0.02


class Recorder:
    def __init__(self, current: str | None = None) -> None:
        self.current = current
        self.applied: list[str] = []

    async def apply(self, text: str) -> None:
        self.applied.append(text)
        self.current = text

    def debouncer(self) -> SearchDebouncer:
        return SearchDebouncer(self.apply, lambda: self.current, delay=DELAY, min_length=2)


@pytest.mark.asyncio
async def test_only_last_keystroke_is_applied() -> None:
    recorder = Recorder()
    debouncer = recorder.debouncer()

    for text in ("c", "cl", "clo", "clos"):
        debouncer.update(text)
        await asyncio.sleep(DELAY / 4)
    await asyncio.sleep(DELAY * 3)

    assert recorder.applied == ["clos"]
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_short_text_is_ignored() -> None:
    recorder = Recorder()
    debouncer = recorder.debouncer()

    debouncer.update("c")
    await asyncio.sleep(DELAY * 3)

    assert recorder.applied == []


@pytest.mark.asyncio
async def test_clearing_the_search_is_applied() -> None:
    recorder = Recorder(current="hooks")
    debouncer = recorder.debouncer()

    debouncer.update("")
    await asyncio.sleep(DELAY * 3)

    assert recorder.applied == [""]


@pytest.mark.asyncio
async def test_unchanged_text_is_not_reapplied() -> None:
    recorder = Recorder(current="hooks")
    debouncer = recorder.debouncer()

    debouncer.update("hooks")
    await asyncio.sleep(DELAY * 3)

    assert recorder.applied == []


@pytest.mark.asyncio
async def test_close_cancels_pending_timer() -> None:
    recorder = Recorder()
    debouncer = recorder.debouncer()

    debouncer.update("hooks")
    assert debouncer.pending
    await debouncer.close()
    await asyncio.sleep(DELAY * 3)

    assert recorder.applied == []
    assert not debouncer.pending
