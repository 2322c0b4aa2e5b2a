"""flashdeck REST API client with cookie authentication."""

import logging
from typing import Any

import httpx

from flashdeck.client.models import Flashcard, FlashcardFilters, FlashcardPage, UserDetails
from flashdeck.exceptions import DEFAULT_CODE_BY_KIND, ErrorKind

logger = logging.getLogger(__name__)

KIND_BY_STATUS: dict[int, ErrorKind] = {
    400: ErrorKind.VALIDATION,
    401: ErrorKind.AUTH,
    404: ErrorKind.NOT_FOUND,
}


class ApiError(Exception):
    """A failed API call, classified by the error envelope's status."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.code = code or DEFAULT_CODE_BY_KIND[kind]
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build from an error envelope; anything unrecognised is a server error."""
        kind = KIND_BY_STATUS.get(response.status_code)
        if kind is None:
            kind = (
                ErrorKind.VALIDATION if 400 <= response.status_code < 500 else ErrorKind.SERVER
            )
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("error") or response.reason_phrase or "Request failed"
        return cls(kind, message, response.status_code, body.get("code"))


class FlashdeckClient:
    """
    HTTP client for the flashdeck REST API.

    The login credential is an httpOnly cookie kept in the client's cookie jar.
    Failed calls raise ApiError and are never retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "FlashdeckClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e!s}")
            raise ApiError(ErrorKind.SERVER, "Network error. Please try again.") from e

        if response.is_error:
            raise ApiError.from_response(response)
        return response

    # --- Flashcard endpoints ---

    async def list_flashcards(
        self,
        filters: FlashcardFilters | None = None,
        page: int = 1,
        limit: int | None = None,
    ) -> FlashcardPage:
        """Get one page of flashcards matching the filters, newest first."""
        params: dict[str, str | int] = dict((filters or FlashcardFilters()).to_query_params())
        params["page"] = page
        if limit is not None:
            params["limit"] = limit
        response = await self._request("GET", "/flashcards", params=params)
        return FlashcardPage.model_validate(response.json())

    async def list_categories(self) -> list[str]:
        """Get every distinct category tag, sorted."""
        response = await self._request("GET", "/flashcards/categories")
        return list(response.json()["categories"])

    async def get_flashcard(self, flashcard_id: str) -> Flashcard:
        response = await self._request("GET", f"/flashcards/{flashcard_id}")
        return Flashcard.model_validate(response.json())

    async def create_flashcard(self, data: dict[str, Any]) -> Flashcard:
        """Create a flashcard from question, answer, tech and optional categories/difficulty."""
        response = await self._request("POST", "/flashcards", json=data)
        return Flashcard.model_validate(response.json())

    async def update_flashcard(self, flashcard_id: str, changes: dict[str, Any]) -> Flashcard:
        """Update any subset of a flashcard's fields."""
        response = await self._request("PUT", f"/flashcards/{flashcard_id}", json=changes)
        return Flashcard.model_validate(response.json())

    async def delete_flashcard(self, flashcard_id: str) -> None:
        await self._request("DELETE", f"/flashcards/{flashcard_id}")

    # --- Auth endpoints ---

    async def login(self, email: str, password: str) -> None:
        """Authenticate; the server sets the credential cookie."""
        await self._request("POST", "/auth/login", json={"email": email, "password": password})
        logger.info("Authenticated with flashdeck API")

    async def logout(self) -> None:
        await self._request("POST", "/auth/logout")
        self._client.cookies.clear()

    async def me(self) -> UserDetails:
        """Get the logged-in user."""
        response = await self._request("GET", "/auth/me")
        return UserDetails.model_validate(response.json()["user"])
