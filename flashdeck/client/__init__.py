"""Async client for the flashdeck API and the list/study controllers built on it."""

from flashdeck.client.api import ApiError, FlashdeckClient
from flashdeck.client.config import ClientSettings, get_client_settings
from flashdeck.client.debounce import SearchDebouncer
from flashdeck.client.models import Flashcard, FlashcardFilters, FlashcardPage
from flashdeck.client.pagination import ListPaginationController
from flashdeck.client.study import FocusTarget, StudyAction, StudyNavigator

__all__ = [
    "ApiError",
    "ClientSettings",
    "Flashcard",
    "FlashcardFilters",
    "FlashcardPage",
    "FlashdeckClient",
    "FocusTarget",
    "ListPaginationController",
    "SearchDebouncer",
    "StudyAction",
    "StudyNavigator",
    "get_client_settings",
]
