"""Application exception hierarchy.

Every failure that crosses the HTTP boundary is one of four kinds and is
rendered as the same ``{"error": ..., "code": ...}`` envelope.
"""

from enum import StrEnum

from starlette import status


class ErrorKind(StrEnum):
    """Closed set of failure classes exposed to callers."""

    VALIDATION = "validation"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    SERVER = "server"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTH: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.SERVER: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

DEFAULT_CODE_BY_KIND: dict[ErrorKind, str] = {
    ErrorKind.VALIDATION: "VALIDATION_ERROR",
    ErrorKind.AUTH: "AUTH_ERROR",
    ErrorKind.NOT_FOUND: "NOT_FOUND",
    ErrorKind.SERVER: "SERVER_ERROR",
}


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    kind: ErrorKind = ErrorKind.SERVER

    def __init__(self, message: str, code: str | None = None) -> None:
        """Initialize exception with message and optional machine-readable code."""
        self.message = message
        self.code = code or DEFAULT_CODE_BY_KIND[self.kind]
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        """HTTP status conveying the class of failure."""
        return STATUS_BY_KIND[self.kind]


class ValidationError(FlashdeckError):
    """Malformed or missing input."""

    kind = ErrorKind.VALIDATION


class AuthError(FlashdeckError):
    """Missing or invalid credential."""

    kind = ErrorKind.AUTH


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    kind = ErrorKind.NOT_FOUND


class ServerError(FlashdeckError):
    """Unexpected failure, surfaced without internal detail."""

    kind = ErrorKind.SERVER


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: str | None = None) -> None:
        """Initialize with the id that failed to resolve."""
        self.flashcard_id = flashcard_id
        super().__init__("Flashcard not found")
