"""Exceptions for catalog use cases."""

from uuid import UUID

from lingualearn.exceptions import NotFoundError


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int) -> None:
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")


class LevelNotFoundError(NotFoundError):
    """Level not found error."""

    def __init__(self, level_id: int) -> None:
        self.level_id = level_id
        super().__init__(f"Level with id {level_id} not found")


class QuizNotFoundError(NotFoundError):
    """Quiz not found error."""

    def __init__(self, quiz_id: UUID) -> None:
        self.quiz_id = quiz_id
        super().__init__(f"Quiz with id {quiz_id} not found")
