"""Mapper for Flashcard ORM ↔ Domain conversion."""

from lingualearn.domain.catalog.entities.flashcard import Flashcard
from lingualearn.domain.common.value_objects import FlashcardId, LevelId
from lingualearn.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            word=orm_model.word,
            translation=orm_model.translation,
            category=orm_model.category,
            level_id=LevelId(orm_model.level_id) if orm_model.level_id is not None else None,
            created_at=orm_model.created_at,
        )
