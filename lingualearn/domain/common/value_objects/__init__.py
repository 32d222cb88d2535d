"""Common value objects shared across all domain modules."""

from .ids import (
    FlashcardId,
    LevelId,
    QuizAttemptId,
    QuizId,
    UserId,
    UserLevelId,
    UserProgressId,
)

__all__ = [
    "FlashcardId",
    "LevelId",
    "QuizAttemptId",
    "QuizId",
    "UserId",
    "UserLevelId",
    "UserProgressId",
]
