"""Unit tests for pagination parsing and has_more."""

import pytest

from flashdeck.application.common.pagination import MAX_OFFSET, PaginatedResult, Pagination


class TestPaginationParse:
    def test_defaults(self) -> None:
        assert Pagination.parse(None, None) == Pagination(page=1, page_size=20)

    def test_numeric_strings(self) -> None:
        pagination = Pagination.parse("3", "10")

        assert pagination.page == 3
        assert pagination.offset == 20
        assert pagination.limit == 10

    @pytest.mark.parametrize("raw", ["0", "-1", "abc", "", "2.5"])
    def test_bad_values_fall_back(self, raw: str) -> None:
        assert Pagination.parse(raw, raw) == Pagination(page=1, page_size=20)

    def test_limit_clamped_to_max(self) -> None:
        assert Pagination.parse(1, 10_000, max_page_size=500).page_size == 500

    def test_huge_page_keeps_offset_bindable(self) -> None:
        pagination = Pagination.parse(str(10**30), "20")

        assert pagination.offset <= MAX_OFFSET
        assert pagination.offset > MAX_OFFSET - 20

    def test_custom_default_page_size(self) -> None:
        assert Pagination.parse(None, None, default_page_size=3).page_size == 3

    def test_direct_construction_rejects_zero_page(self) -> None:
        with pytest.raises(ValueError):
            Pagination(page=0)


class TestHasMore:
    @pytest.mark.parametrize(
        ("page", "returned", "total", "expected"),
        [
            (1, 3, 5, True),
            (2, 2, 5, False),
            (2, 3, 6, False),
            (1, 0, 0, False),
            (4, 0, 5, False),
        ],
    )
    def test_has_more(self, page: int, returned: int, total: int, expected: bool) -> None:
        result = PaginatedResult(
            items=list(range(returned)), total=total, pagination=Pagination(page, 3)
        )

        assert result.has_more is expected
