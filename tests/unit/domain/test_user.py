"""Tests for the User entity and identifiers."""

import pytest

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import FlashcardId
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User, normalize_email


def test_register_normalizes_email_and_is_unsaved() -> None:
    user = User.register("  Admin@Example.COM ", "hash")

    assert user.email == "admin@example.com"
    assert user.hashed_password == "hash"
    assert not user.id.is_saved


def test_email_required() -> None:
    with pytest.raises(ValidationError) as exc_info:
        User(id=UserId(1), email="")

    assert exc_info.value.field == "email"


def test_email_length_limited() -> None:
    with pytest.raises(ValidationError):
        User(id=UserId(1), email="a" * 95 + "@x.com")


def test_change_password_hash() -> None:
    user = User(id=UserId(1), email="a@b.c", hashed_password="old")

    user.change_password_hash("new")

    assert user.hashed_password == "new"


def test_equality_is_by_id() -> None:
    assert User(id=UserId(1), email="a@b.c") == User(id=UserId(1), email="other@b.c")
    assert User(id=UserId(1), email="a@b.c") != User(id=UserId(2), email="a@b.c")
    assert len({User(id=UserId(1), email="a@b.c"), User(id=UserId(1), email="x@y.z")}) == 1


def test_normalize_email() -> None:
    assert normalize_email(" X@Y.Z\n") == "x@y.z"


def test_negative_user_id_rejected() -> None:
    with pytest.raises(ValueError):
        UserId(-1)


def test_flashcard_id_parse() -> None:
    card_id = FlashcardId.generate()

    assert FlashcardId.parse(str(card_id)) == card_id
    with pytest.raises(ValueError):
        FlashcardId.parse("not-a-uuid")
