from .pagination import PaginatedResult, Pagination

__all__ = [
    "PaginatedResult",
    "Pagination",
]
