"""Mapper for UserProgress ORM ↔ Domain conversion."""

from lingualearn.domain.common.value_objects import FlashcardId, UserId, UserProgressId
from lingualearn.domain.progress.entities.user_progress import UserProgress
from lingualearn.models import UserProgress as UserProgressORM


class UserProgressMapper:
    """Mapper for UserProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserProgressORM) -> UserProgress:
        return UserProgress(
            id=UserProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            flashcard_id=FlashcardId(orm_model.flashcard_id),
            known=orm_model.known,
            created_at=orm_model.created_at,
        )

    def to_row(self, domain_entity: UserProgress) -> dict[str, object]:
        """Column values for an INSERT statement."""
        return {
            "id": domain_entity.id.value,
            "user_id": domain_entity.user_id.value,
            "flashcard_id": domain_entity.flashcard_id.value,
            "known": domain_entity.known,
        }
