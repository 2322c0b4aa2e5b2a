"""Translation of every failure into the uniform error envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashdeck.domain.common.exceptions import DomainError, EntityNotFoundError
from flashdeck.domain.identity.exceptions import InvalidCredentialsError
from flashdeck.exceptions import (
    DEFAULT_CODE_BY_KIND,
    STATUS_BY_KIND,
    ErrorKind,
    FlashdeckError,
)
from flashdeck.infrastructure.common.schemas import ErrorResponse

logger = logging.getLogger(__name__)

KIND_BY_STATUS: dict[int, ErrorKind] = {
    status.HTTP_400_BAD_REQUEST: ErrorKind.VALIDATION,
    status.HTTP_401_UNAUTHORIZED: ErrorKind.AUTH,
    status.HTTP_404_NOT_FOUND: ErrorKind.NOT_FOUND,
    422: ErrorKind.VALIDATION,
}


def error_response(
    status_code: int, message: str, code: str | None = None, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Render the error envelope."""
    body = ErrorResponse(error=message, code=code).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.code)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if isinstance(exc, EntityNotFoundError):
        kind = ErrorKind.NOT_FOUND
    elif isinstance(exc, InvalidCredentialsError):
        kind = ErrorKind.AUTH
    else:
        kind = ErrorKind.VALIDATION
    return error_response(STATUS_BY_KIND[kind], exc.message, DEFAULT_CODE_BY_KIND[kind])


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid {location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(
        status.HTTP_400_BAD_REQUEST, message, DEFAULT_CODE_BY_KIND[ErrorKind.VALIDATION]
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    kind = KIND_BY_STATUS.get(exc.status_code)
    if kind is None and exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        kind = ErrorKind.SERVER
    code = DEFAULT_CODE_BY_KIND[kind] if kind else None
    headers = getattr(exc, "headers", None)
    return error_response(exc.status_code, str(exc.detail), code, headers)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {request.url.path}: {exc.detail}")
    return error_response(
        status.HTTP_429_TOO_MANY_REQUESTS,
        f"Too many requests: {exc.detail}",
        "RATE_LIMITED",
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!s}", exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please try again later.",
        DEFAULT_CODE_BY_KIND[ErrorKind.SERVER],
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on an application."""
    app.add_exception_handler(FlashdeckError, flashdeck_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        request_validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
