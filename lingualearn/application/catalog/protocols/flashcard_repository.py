"""Protocol for Flashcard repository in catalog context."""

from typing import Protocol

from lingualearn.domain.catalog.entities.flashcard import Flashcard
from lingualearn.domain.common.value_objects import FlashcardId, LevelId, UserId


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations."""

    def find_all(self, identity: UserId | None, level_id: LevelId | None = None) -> list[Flashcard]:
        """
        Get every flashcard visible to ``identity``.

        Args:
            identity: The caller
            level_id: Optional level filter

        Returns:
            Flashcard entities ordered by id ascending
        """
        ...

    def find_by_id(self, identity: UserId | None, flashcard_id: FlashcardId) -> Flashcard | None:
        ...

    def count(self, identity: UserId | None) -> int:
        ...
