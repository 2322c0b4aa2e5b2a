"""Unit tests for the Flashcard entity and its value objects."""

import pytest

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import FlashcardId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import Difficulty, Tech


def make_flashcard(**overrides: object) -> Flashcard:
    fields: dict[str, object] = {
        "question": "What is a promise?",
        "answer": "A placeholder for a future value",
        "tech": Tech.JAVASCRIPT,
    }
    fields.update(overrides)
    return Flashcard.create(**fields)  # type: ignore[arg-type]


class TestFlashcard:
    def test_create_assigns_unique_ids(self) -> None:
        assert make_flashcard().id != make_flashcard().id

    def test_categories_default_to_empty_list(self) -> None:
        flashcard = make_flashcard()

        assert flashcard.categories == []
        assert flashcard.difficulty is None

    def test_categories_keep_order_and_duplicates(self) -> None:
        flashcard = make_flashcard(categories=["b", "a", "b"])

        assert flashcard.categories == ["b", "a", "b"]

    @pytest.mark.parametrize("question", ["", "   "])
    def test_blank_question_rejected(self, question: str) -> None:
        with pytest.raises(ValidationError, match="Question cannot be empty"):
            make_flashcard(question=question)

    def test_update_answer_rejects_blank(self) -> None:
        flashcard = make_flashcard()

        with pytest.raises(ValidationError):
            flashcard.update_answer("")
        assert flashcard.answer == "A placeholder for a future value"

    def test_replace_categories_copies_list(self) -> None:
        flashcard = make_flashcard()
        tags = ["async"]

        flashcard.replace_categories(tags)
        tags.append("mutated")

        assert flashcard.categories == ["async"]

    def test_rate_and_clear(self) -> None:
        flashcard = make_flashcard()

        flashcard.rate(Difficulty.HARD)
        assert flashcard.difficulty is Difficulty.HARD
        flashcard.rate(None)
        assert flashcard.difficulty is None


class TestFlashcardId:
    def test_parse_round_trips_string_form(self) -> None:
        flashcard_id = FlashcardId.generate()

        assert FlashcardId.parse(str(flashcard_id)) == flashcard_id

    def test_parse_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            FlashcardId.parse("42")


class TestTech:
    def test_from_value_is_exact(self) -> None:
        assert Tech.from_value("React") is Tech.REACT
        assert Tech.from_value("react") is None
        assert Tech.from_value(None) is None

    def test_require_names_allowed_values(self) -> None:
        with pytest.raises(ValidationError, match="JavaScript, TypeScript, React, Node"):
            Tech.require("Elm")


class TestDifficulty:
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_is_unrated(self, value: str | None) -> None:
        assert Difficulty.parse_optional(value) is None

    def test_invalid_rejected(self) -> None:
        with pytest.raises(ValidationError, match="easy, medium, hard"):
            Difficulty.parse_optional("impossible")
