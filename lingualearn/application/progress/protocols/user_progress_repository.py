"""Protocol for UserProgress repository."""

from typing import Protocol

from lingualearn.domain.common.value_objects import FlashcardId, UserId
from lingualearn.domain.progress.entities.user_progress import UserProgress


class UserProgressRepositoryProtocol(Protocol):
    """Protocol for UserProgress repository operations."""

    def find_known_flashcard_ids(self, identity: UserId | None) -> set[FlashcardId]:
        """
        Get the flashcards the caller marked as known.

        Rows are scoped to ``identity`` by the SELECT policy.
        """
        ...

    def upsert(self, identity: UserId | None, progress: UserProgress) -> UserProgress:
        """
        Insert or update the row keyed by (user_id, flashcard_id).

        Returns:
            The stored row
        """
        ...
