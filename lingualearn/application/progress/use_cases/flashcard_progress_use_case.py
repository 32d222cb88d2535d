"""Use case for per-user flashcard progress."""

import structlog

from lingualearn.application.catalog.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lingualearn.application.catalog.use_cases.exceptions import FlashcardNotFoundError
from lingualearn.application.progress.protocols.user_progress_repository import (
    UserProgressRepositoryProtocol,
)
from lingualearn.application.progress.use_cases.dtos import ProgressSummary
from lingualearn.domain.common.value_objects import FlashcardId, UserId
from lingualearn.domain.progress.entities.user_progress import UserProgress
from lingualearn.exceptions import AuthenticationRequiredError

logger = structlog.get_logger(__name__)


class FlashcardProgressUseCase:
    """Reads and records which flashcards a user knows."""

    def __init__(
        self,
        progress_repository: UserProgressRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.progress_repository = progress_repository
        self.flashcard_repository = flashcard_repository

    def get_known_flashcard_ids(self, identity: UserId | None) -> set[int]:
        """
        Get ids of the flashcards the caller marked as known.

        Raises:
            AuthenticationRequiredError: If the caller is not authenticated
        """
        return {
            flashcard_id.value
            for flashcard_id in self.progress_repository.find_known_flashcard_ids(identity)
        }

    def mark_known(self, identity: UserId | None, flashcard_id: int) -> UserProgress:
        """
        Mark a flashcard as known for the caller.

        Safe to repeat: the row is upserted on (user_id, flashcard_id), so any
        number of calls leaves exactly one row with ``known = true``.

        Args:
            identity: The caller
            flashcard_id: Flashcard to mark

        Returns:
            The stored progress row

        Raises:
            AuthenticationRequiredError: If the caller is not authenticated
            FlashcardNotFoundError: If the flashcard does not exist
        """
        if identity is None:
            raise AuthenticationRequiredError()

        flashcard_id_vo = FlashcardId(flashcard_id)
        if self.flashcard_repository.find_by_id(identity, flashcard_id_vo) is None:
            raise FlashcardNotFoundError(flashcard_id)

        progress = self.progress_repository.upsert(
            identity, UserProgress.known_card(identity, flashcard_id_vo)
        )

        logger.info("marked_flashcard_known", flashcard_id=flashcard_id)
        return progress

    def get_progress_summary(self, identity: UserId | None) -> ProgressSummary:
        """Count known flashcards against the whole catalog."""
        known = self.progress_repository.find_known_flashcard_ids(identity)
        total = self.flashcard_repository.count(identity)
        return ProgressSummary(known=len(known), total=total)
