"""
Quiz entity and the answer grading rule.
"""

from dataclasses import dataclass, field

from lingualearn.domain.common.entity import Entity
from lingualearn.domain.common.exceptions import InvariantViolationError, ValidationError
from lingualearn.domain.common.value_objects import LevelId, QuizId


def normalize_answer(answer: str) -> str:
    """
    Normalize a submitted answer before grading.

    Surrounding whitespace is dropped. Case, accents and inner spacing are
    significant, so "hola" does not match "Hola".
    """
    return answer.strip()


@dataclass
class Quiz(Entity[QuizId]):
    """
    A multiple-choice question.

    Business Rules:
    - Question cannot be empty
    - Options are a non-empty ordered list
    - The correct answer is one of the options
    """

    id: QuizId
    level_id: LevelId
    question: str
    correct_answer: str
    options: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.question or not self.question.strip():
            raise ValidationError("Question cannot be empty", field="question")
        if not self.options:
            raise InvariantViolationError("Quiz", "options cannot be empty")
        if self.correct_answer not in self.options:
            raise InvariantViolationError("Quiz", "correct_answer must be one of the options")

    def grade(self, answer: str) -> bool:
        """
        Grade a submitted answer.

        Args:
            answer: Raw answer text

        Returns:
            True if the normalized answer equals the correct answer exactly
        """
        return normalize_answer(answer) == self.correct_answer

    @classmethod
    def create(
        cls,
        level_id: LevelId,
        question: str,
        correct_answer: str,
        options: list[str],
    ) -> "Quiz":
        """Create a new quiz with a fresh id."""
        return cls(
            id=QuizId.generate(),
            level_id=level_id,
            question=question.strip(),
            correct_answer=correct_answer,
            options=list(options),
        )
