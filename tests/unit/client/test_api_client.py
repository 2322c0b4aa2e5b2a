"""Tests for the HTTP client, run against the real app in-process."""

from collections.abc import Callable

import httpx
import pytest

from flashdeck import models
from flashdeck.client.api import ApiError, FlashdeckClient
from flashdeck.client.models import FlashcardFilters
from flashdeck.client.pagination import ListPaginationController
from flashdeck.client.study import StudyNavigator
from flashdeck.domain.learning.value_objects import Tech
from flashdeck.exceptions import ErrorKind
from flashdeck.main import app
from tests.conftest import TEST_USER_EMAIL, TEST_USER_PASSWORD

FlashcardFactory = Callable[..., models.Flashcard]


def make_client() -> FlashdeckClient:
    return FlashdeckClient(
        "http://testserver/api/v1", transport=httpx.ASGITransport(app=app)
    )


@pytest.mark.asyncio
async def test_list_with_filters_and_paging(
    override_db: None, make_flashcard: FlashcardFactory
) -> None:
    for n in range(5):
        make_flashcard(question=f"React {n}", tech="React", categories=["hooks"])
    make_flashcard(question="Node", tech="Node")

    async with make_client() as api:
        page = await api.list_flashcards(
            FlashcardFilters(tech=Tech.REACT, category="hooks"), page=2, limit=3
        )

    assert page.page == 2
    assert page.limit == 3
    assert page.total_count == 5
    assert page.has_more is False
    assert [card.question for card in page.flashcards] == ["React 1", "React 0"]


@pytest.mark.asyncio
async def test_write_requires_login(override_db: None, test_user: models.User) -> None:
    async with make_client() as api:
        with pytest.raises(ApiError) as exc_info:
            await api.create_flashcard({"question": "Q", "answer": "A", "tech": "React"})

        assert exc_info.value.kind is ErrorKind.AUTH
        assert exc_info.value.status_code == 401
        assert exc_info.value.code == "AUTH_ERROR"

        await api.login(TEST_USER_EMAIL, TEST_USER_PASSWORD)
        created = await api.create_flashcard(
            {"question": "Q", "answer": "A", "tech": "React", "categories": ["jsx"]}
        )
        me = await api.me()

        assert created.tech is Tech.REACT
        assert me.email == TEST_USER_EMAIL
        assert await api.list_categories() == ["jsx"]

        await api.logout()
        with pytest.raises(ApiError):
            await api.me()


@pytest.mark.asyncio
async def test_error_kinds(override_db: None, test_user: models.User) -> None:
    async with make_client() as api:
        with pytest.raises(ApiError) as not_found:
            await api.get_flashcard("00000000-0000-4000-8000-000000000000")
        with pytest.raises(ApiError) as bad_login:
            await api.login(TEST_USER_EMAIL, "wrong")

    assert not_found.value.kind is ErrorKind.NOT_FOUND
    assert not_found.value.message == "Flashcard not found"
    assert bad_login.value.kind is ErrorKind.AUTH
    assert bad_login.value.message == "Invalid email or password"


@pytest.mark.asyncio
async def test_validation_error_kind(override_db: None, test_user: models.User) -> None:
    async with make_client() as api:
        await api.login(TEST_USER_EMAIL, TEST_USER_PASSWORD)
        with pytest.raises(ApiError) as exc_info:
            await api.create_flashcard({"question": "Q", "answer": "A", "tech": "Elm"})

    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_transport_failure_is_server_error() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api = FlashdeckClient("http://testserver/api/v1", transport=httpx.MockTransport(refuse))
    try:
        with pytest.raises(ApiError) as exc_info:
            await api.list_flashcards()
    finally:
        await api.close()

    assert exc_info.value.kind is ErrorKind.SERVER
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_controllers_against_real_api(
    override_db: None, make_flashcard: FlashcardFactory
) -> None:
    for n in range(5):
        make_flashcard(question=f"Card {n}", tech="TypeScript")

    async with make_client() as api:
        controller = ListPaginationController(api, page_size=3)
        await controller.reload()
        await controller.load_more()
        navigator = StudyNavigator(api, max_cards=500)
        await navigator.load(FlashcardFilters(tech=Tech.TYPESCRIPT))

    assert [card.question for card in controller.state.items] == [
        "Card 4",
        "Card 3",
        "Card 2",
        "Card 1",
        "Card 0",
    ]
    assert controller.state.has_more is False
    assert len(navigator.cards) == 5
