"""QuizAttempt entity."""

from dataclasses import dataclass
from datetime import datetime

from lingualearn.domain.catalog.entities.quiz import Quiz, normalize_answer
from lingualearn.domain.common.entity import Entity
from lingualearn.domain.common.exceptions import ValidationError
from lingualearn.domain.common.value_objects import QuizAttemptId, QuizId, UserId


@dataclass
class QuizAttempt(Entity[QuizAttemptId]):
    """
    One answer submitted by a user for a quiz.

    Attempts are append-only; a user may answer the same quiz many times.
    """

    id: QuizAttemptId
    user_id: UserId
    quiz_id: QuizId
    answer: str
    is_correct: bool
    created_at: datetime | None = None

    @classmethod
    def submit(cls, user_id: UserId, quiz: Quiz, answer: str) -> "QuizAttempt":
        """
        Grade ``answer`` against ``quiz`` and build the attempt to append.

        Raises:
            ValidationError: If the answer is blank
        """
        normalized = normalize_answer(answer)
        if not normalized:
            raise ValidationError("Answer cannot be empty", field="answer")
        return cls(
            id=QuizAttemptId.generate(),
            user_id=user_id,
            quiz_id=quiz.id,
            answer=normalized,
            is_correct=quiz.grade(normalized),
        )
