"""Catalog context schemas."""

from lingualearn.infrastructure.catalog.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardsListResponse,
)
from lingualearn.infrastructure.catalog.schemas.level_schemas import (
    Level,
    LevelsListResponse,
    Quiz,
    QuizzesListResponse,
)

__all__ = [
    "Flashcard",
    "FlashcardsListResponse",
    "Level",
    "LevelsListResponse",
    "Quiz",
    "QuizzesListResponse",
]
