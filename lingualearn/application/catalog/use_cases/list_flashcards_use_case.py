"""Use case for listing flashcards."""

from lingualearn.application.catalog.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lingualearn.domain.catalog.entities.flashcard import Flashcard
from lingualearn.domain.common.value_objects import LevelId, UserId


class ListFlashcardsUseCase:
    """Use case for listing the flashcard catalog."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def list_flashcards(
        self, identity: UserId | None, level_id: int | None = None
    ) -> list[Flashcard]:
        """
        List flashcards ordered by id ascending.

        Args:
            identity: The caller
            level_id: Only return flashcards of this level

        Returns:
            Flashcard domain entities

        Raises:
            AuthenticationRequiredError: If the caller is not authenticated
        """
        level_filter = LevelId(level_id) if level_id is not None else None
        return self.flashcard_repository.find_all(identity, level_filter)
