"""Protocol for QuizAttempt repository."""

from collections.abc import Collection
from typing import Protocol

from lingualearn.domain.common.value_objects import QuizId, UserId
from lingualearn.domain.progress.entities.quiz_attempt import QuizAttempt


class QuizAttemptRepositoryProtocol(Protocol):
    """Protocol for QuizAttempt repository operations."""

    def add(self, identity: UserId | None, attempt: QuizAttempt) -> QuizAttempt:
        """Append an attempt and return it with database-generated values."""
        ...

    def find_by_user(
        self, identity: UserId | None, quiz_id: QuizId | None = None
    ) -> list[QuizAttempt]:
        """Get the caller's attempts, newest first."""
        ...

    def find_for_quizzes(
        self, identity: UserId | None, quiz_ids: Collection[QuizId]
    ) -> list[QuizAttempt]:
        """Get the caller's attempts on ``quiz_ids``, oldest first."""
        ...
