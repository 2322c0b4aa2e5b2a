"""
Page requests and page results for list queries.

A page request is derived from untrusted query strings, so parsing never
fails: anything unusable falls back to page 1 and the default size.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from flashdeck.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")

# Largest offset a database can bind as a signed 64-bit integer
MAX_OFFSET = 2**63 - 1


def _positive_int(raw: str | int | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


@dataclass(frozen=True)
class Pagination:
    """1-based page number and page size."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1 or self.page_size < 1:
            raise ValueError(f"Invalid page window: page={self.page}, size={self.page_size}")

    @classmethod
    def parse(
        cls,
        page: str | int | None,
        limit: str | int | None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "Pagination":
        """
        Lenient parse: bad values take the defaults, big limits are clamped.

        Pages so far out that the offset would not fit a 64-bit integer are
        clamped too; such a page is simply past the end.
        """
        size = min(_positive_int(limit) or default_page_size, max_page_size)
        last_addressable = MAX_OFFSET // size + 1
        return cls(page=min(_positive_int(page) or 1, last_addressable), page_size=size)

    @property
    def offset(self) -> int:
        return self.page_size * (self.page - 1)

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of items plus the unpaginated match count."""

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    @property
    def has_more(self) -> bool:
        # An exactly full last page reports False
        return self.pagination.offset + len(self.items) < self.total
