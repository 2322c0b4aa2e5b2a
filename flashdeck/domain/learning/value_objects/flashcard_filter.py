"""
List filters.

A filter dimension that is absent never excludes a card. The tech dimension is
deliberately forgiving: a value outside the Tech enumeration parses to
"unconstrained" instead of failing the request.
"""

from dataclasses import dataclass

from flashdeck.domain.common.value_object import ValueObject
from flashdeck.domain.learning.value_objects.tech import Tech


@dataclass(frozen=True)
class TechFilter(ValueObject):
    """Tagged variant: unconstrained (tech is None) or an exact technology."""

    tech: Tech | None = None

    @classmethod
    def unconstrained(cls) -> "TechFilter":
        return cls(None)

    @classmethod
    def exact(cls, tech: Tech) -> "TechFilter":
        return cls(tech)

    @classmethod
    def parse(cls, raw: str | None) -> "TechFilter":
        """Parse failure yields the unconstrained variant."""
        tech = Tech.from_value(raw)
        return cls.exact(tech) if tech is not None else cls.unconstrained()

    @property
    def is_constrained(self) -> bool:
        return self.tech is not None


@dataclass(frozen=True)
class FlashcardFilter(ValueObject):
    """
    Combined list filter; dimensions AND together.

    Attributes:
        tech: Technology constraint
        category: Exact tag that must be a member of the card's categories
        search: Case-insensitive substring of question OR answer
    """

    tech: TechFilter = TechFilter()
    category: str | None = None
    search: str | None = None

    def __post_init__(self) -> None:
        # Empty strings are "no constraint", not "match empty"
        if self.category == "":
            object.__setattr__(self, "category", None)
        if self.search == "":
            object.__setattr__(self, "search", None)

    @classmethod
    def from_params(
        cls,
        tech: str | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> "FlashcardFilter":
        return cls(tech=TechFilter.parse(tech), category=category, search=search)

    def matches(self, tech: Tech, categories: list[str], question: str, answer: str) -> bool:
        """In-memory evaluation of the same predicate the repository builds in SQL."""
        if self.tech.is_constrained and tech != self.tech.tech:
            return False
        if self.category is not None and self.category not in categories:
            return False
        if self.search is not None:
            needle = self.search.lower()
            return needle in question.lower() or needle in answer.lower()
        return True
