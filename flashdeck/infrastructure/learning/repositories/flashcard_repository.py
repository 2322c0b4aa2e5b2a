"""Repository for Flashcard domain entities."""

from sqlalchemy import ColumnElement, String, cast, func, or_, select
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import InstrumentedAttribute, Session

from flashdeck.application.common.pagination import Pagination
from flashdeck.database import SQLITE_LOWER
from flashdeck.domain.common.value_objects.ids import FlashcardId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects.flashcard_filter import FlashcardFilter
from flashdeck.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        orm_model = self.db.get(FlashcardORM, str(flashcard_id))
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_page(
        self, flashcard_filter: FlashcardFilter, pagination: Pagination
    ) -> tuple[list[Flashcard], int]:
        """
        Get one page of flashcards matching a filter.

        Ordering is newest first with id as tie-breaker, so consecutive pages
        under an unchanged filter are disjoint and together exhaustive.

        Args:
            flashcard_filter: Tech, category and search constraints
            pagination: Page number and page size

        Returns:
            tuple[list[Flashcard], int]: (flashcards on this page, total matching the filter)
        """
        filters = self._filter_conditions(flashcard_filter)

        total_stmt = select(func.count(FlashcardORM.id)).where(*filters)
        total = self.db.execute(total_stmt).scalar() or 0
        if pagination.offset >= total:
            return [], total

        stmt = (
            select(FlashcardORM)
            .where(*filters)
            .order_by(FlashcardORM.created_at.desc(), FlashcardORM.id.desc())
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

    def list_categories(self) -> list[str]:
        """
        Get every distinct category tag across all flashcards.

        Returns:
            Sorted list of tags
        """
        tag_lists = self.db.execute(select(FlashcardORM.categories)).scalars().all()
        return sorted({tag for tags in tag_lists for tag in (tags or [])})

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Args:
            flashcard: The flashcard entity to save

        Returns:
            Saved flashcard entity with database-generated values
        """
        orm_model = self.db.get(FlashcardORM, str(flashcard.id))
        if orm_model is None:
            orm_model = self.mapper.to_orm(flashcard)
            self.db.add(orm_model)
        else:
            self.mapper.to_orm(flashcard, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            True if deleted, False if not found
        """
        flashcard_orm = self.db.get(FlashcardORM, str(flashcard_id))

        if not flashcard_orm:
            return False

        self.db.delete(flashcard_orm)
        self.db.commit()
        return True

    def _filter_conditions(self, flashcard_filter: FlashcardFilter) -> list[ColumnElement[bool]]:
        filters: list[ColumnElement[bool]] = []

        if flashcard_filter.tech.tech is not None:
            filters.append(FlashcardORM.tech == flashcard_filter.tech.tech.value)

        if flashcard_filter.category is not None:
            filters.append(self._has_category(flashcard_filter.category))

        if flashcard_filter.search is not None:
            needle = flashcard_filter.search.lower()
            filters.append(
                or_(
                    self._lower(FlashcardORM.question).contains(needle, autoescape=True),
                    self._lower(FlashcardORM.answer).contains(needle, autoescape=True),
                )
            )

        return filters

    def _dialect(self) -> str:
        return self.db.get_bind().dialect.name

    def _lower(self, column: InstrumentedAttribute[str]) -> ColumnElement[str]:
        """Unicode-aware lowercasing, matching Python's str.lower on SQLite."""
        if self._dialect() == "sqlite":
            return getattr(func, SQLITE_LOWER)(column, type_=String)
        return func.lower(column)

    def _has_category(self, category: str) -> ColumnElement[bool]:
        """Exact membership of category in the card's JSON tag list."""
        if self._dialect() == "postgresql":
            return cast(FlashcardORM.categories, JSONB).contains([category])
        tags = func.json_each(FlashcardORM.categories).table_valued("value")
        return select(1).select_from(tags).where(tags.c.value == category).exists()
