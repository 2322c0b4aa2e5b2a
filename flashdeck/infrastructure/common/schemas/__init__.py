"""Common schemas."""

from flashdeck.infrastructure.common.schemas.response_wrappers import (
    CamelModel,
    ErrorResponse,
    SuccessResponse,
)

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "SuccessResponse",
]
