"""Conversion between the users table and the User entity."""

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.models import User as UserORM


class UserMapper:
    def to_domain(self, row: UserORM) -> User:
        return User(
            id=UserId(row.id),
            email=row.email,
            hashed_password=row.hashed_password,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def apply(self, user: User, row: UserORM) -> UserORM:
        """Copy the mutable fields of user onto an existing row."""
        row.email = user.email
        row.hashed_password = user.hashed_password
        return row

    def new_row(self, user: User) -> UserORM:
        return UserORM(email=user.email, hashed_password=user.hashed_password)
