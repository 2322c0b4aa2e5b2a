"""
Domain errors.

Raised when an invariant or business rule is violated. They carry a message
safe to show to callers; the web layer maps them onto the error envelope.
"""


class DomainError(Exception):
    """Base for every domain failure."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """A value breaks an entity invariant or falls outside a closed enumeration."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """Lookup by id found nothing."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(f"{entity_type} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id
