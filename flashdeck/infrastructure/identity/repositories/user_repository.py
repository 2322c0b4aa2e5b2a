"""SQLAlchemy-backed store for users."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import UserNotFoundError
from flashdeck.infrastructure.identity.mappers.user_mapper import UserMapper
from flashdeck.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        row = self.db.get(UserORM, user_id.value)
        return self.mapper.to_domain(row) if row else None

    def find_by_email(self, email: str) -> User | None:
        """Look up by an email that the caller has already normalized."""
        row = self.db.execute(select(UserORM).where(UserORM.email == email)).scalar_one_or_none()
        return self.mapper.to_domain(row) if row else None

    def save(self, user: User) -> User:
        """
        Insert an unsaved user or update a stored one.

        Raises:
            UserNotFoundError: If a stored user's row has disappeared
        """
        if user.id.is_saved:
            row = self.db.get(UserORM, user.id.value)
            if row is None:
                raise UserNotFoundError(user.id.value)
            self.mapper.apply(user, row)
        else:
            row = self.mapper.new_row(user)
            self.db.add(row)

        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Saved user {row.id} ({row.email})")
        return self.mapper.to_domain(row)
