"""Tests for the Level and Flashcard entities."""

import pytest

from lingualearn.domain.catalog.entities import Flashcard, Level
from lingualearn.domain.common.exceptions import ValidationError
from lingualearn.domain.common.value_objects import LevelId


def test_level_defaults_to_seventy_percent_pass_mark() -> None:
    level = Level(id=LevelId(1), name="Beginner", order=1)

    assert level.required_score == 70
    assert level.is_passed_by(70)
    assert not level.is_passed_by(69)


@pytest.mark.parametrize("required_score", [-1, 101])
def test_level_rejects_required_score_out_of_range(required_score: int) -> None:
    with pytest.raises(ValidationError):
        Level(id=LevelId(1), name="Beginner", order=1, required_score=required_score)


def test_level_rejects_non_positive_order() -> None:
    with pytest.raises(ValidationError):
        Level(id=LevelId(1), name="Beginner", order=0)


def test_flashcard_create_strips_text() -> None:
    flashcard = Flashcard.create(word=" Hello ", translation="Hola ", category=" Greetings")

    assert (flashcard.word, flashcard.translation, flashcard.category) == (
        "Hello",
        "Hola",
        "Greetings",
    )
    assert flashcard.id.value == 0


def test_flashcard_rejects_empty_word() -> None:
    with pytest.raises(ValidationError):
        Flashcard.create(word="", translation="Hola", category="Greetings")
