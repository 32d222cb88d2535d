"""Use case for answering quizzes."""

from uuid import UUID

import structlog

from lingualearn.application.catalog.protocols.quiz_repository import QuizRepositoryProtocol
from lingualearn.application.catalog.use_cases.exceptions import QuizNotFoundError
from lingualearn.application.progress.protocols.quiz_attempt_repository import (
    QuizAttemptRepositoryProtocol,
)
from lingualearn.domain.common.value_objects import QuizId, UserId
from lingualearn.domain.progress.entities.quiz_attempt import QuizAttempt
from lingualearn.exceptions import AuthenticationRequiredError

logger = structlog.get_logger(__name__)


class QuizAttemptUseCase:
    """Grades answers and keeps the caller's attempt log."""

    def __init__(
        self,
        quiz_repository: QuizRepositoryProtocol,
        attempt_repository: QuizAttemptRepositoryProtocol,
    ) -> None:
        self.quiz_repository = quiz_repository
        self.attempt_repository = attempt_repository

    def submit_quiz_attempt(
        self, identity: UserId | None, quiz_id: UUID, answer: str
    ) -> QuizAttempt:
        """
        Grade ``answer`` and append it to the caller's attempts.

        The answer is compared to the quiz's correct answer after stripping
        surrounding whitespace; the comparison is case-sensitive.

        Args:
            identity: The caller
            quiz_id: Quiz being answered
            answer: Submitted answer text

        Returns:
            The stored attempt, including ``is_correct``

        Raises:
            AuthenticationRequiredError: If the caller is not authenticated
            QuizNotFoundError: If the quiz does not exist
            ValidationError: If the answer is blank
        """
        if identity is None:
            raise AuthenticationRequiredError()

        quiz = self.quiz_repository.find_by_id(identity, QuizId(quiz_id))
        if quiz is None:
            raise QuizNotFoundError(quiz_id)

        attempt = self.attempt_repository.add(identity, QuizAttempt.submit(identity, quiz, answer))

        logger.info(
            "quiz_attempt_recorded",
            quiz_id=str(quiz_id),
            is_correct=attempt.is_correct,
        )
        return attempt

    def list_quiz_attempts(
        self, identity: UserId | None, quiz_id: UUID | None = None
    ) -> list[QuizAttempt]:
        """List the caller's attempts, newest first, optionally for one quiz."""
        return self.attempt_repository.find_by_user(
            identity, QuizId(quiz_id) if quiz_id is not None else None
        )
