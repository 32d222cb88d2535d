"""Protocol for Quiz repository."""

from typing import Protocol

from lingualearn.domain.catalog.entities.quiz import Quiz
from lingualearn.domain.common.value_objects import LevelId, QuizId, UserId


class QuizRepositoryProtocol(Protocol):
    """Protocol for Quiz repository operations."""

    def find_by_id(self, identity: UserId | None, quiz_id: QuizId) -> Quiz | None:
        ...

    def find_by_level(self, identity: UserId | None, level_id: LevelId) -> list[Quiz]:
        """
        Get the quizzes of a level.

        Returns:
            Quiz entities ordered by question text
        """
        ...
