"""UserProgress entity."""

from dataclasses import dataclass
from datetime import datetime

from lingualearn.domain.common.entity import Entity
from lingualearn.domain.common.value_objects import FlashcardId, UserId, UserProgressId


@dataclass
class UserProgress(Entity[UserProgressId]):
    """
    A user's state for one flashcard.

    At most one row exists per (user_id, flashcard_id); writes go through an
    upsert on that pair.
    """

    id: UserProgressId
    user_id: UserId
    flashcard_id: FlashcardId
    known: bool = False
    created_at: datetime | None = None

    @classmethod
    def known_card(cls, user_id: UserId, flashcard_id: FlashcardId) -> "UserProgress":
        """Progress row marking a flashcard as known."""
        return cls(
            id=UserProgressId.generate(),
            user_id=user_id,
            flashcard_id=flashcard_id,
            known=True,
        )
