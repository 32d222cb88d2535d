from lingualearn.infrastructure.catalog.repositories.flashcard_repository import (
    FlashcardRepository,
)
from lingualearn.infrastructure.catalog.repositories.level_repository import LevelRepository
from lingualearn.infrastructure.catalog.repositories.quiz_repository import QuizRepository

__all__ = ["FlashcardRepository", "LevelRepository", "QuizRepository"]
