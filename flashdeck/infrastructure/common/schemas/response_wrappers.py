"""Common response wrapper schemas for API responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool
    message: str


class ErrorResponse(BaseModel):
    """Uniform error envelope returned by every endpoint."""

    error: str
    code: str | None = None
