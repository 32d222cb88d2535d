"""Repository for Flashcard domain entities."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lingualearn.domain.catalog.entities.flashcard import Flashcard
from lingualearn.domain.common.value_objects import FlashcardId, LevelId, UserId
from lingualearn.infrastructure.access.row_security import RowSecurity
from lingualearn.infrastructure.catalog.mappers.flashcard_mapper import FlashcardMapper
from lingualearn.infrastructure.common.db_errors import database_errors
from lingualearn.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session, row_security: RowSecurity) -> None:
        self.db = db
        self.row_security = row_security
        self.mapper = FlashcardMapper()

    def find_all(self, identity: UserId | None, level_id: LevelId | None = None) -> list[Flashcard]:
        """
        Get all flashcards visible to the caller.

        Args:
            identity: The caller
            level_id: Optional level filter

        Returns:
            List of flashcard entities ordered by id ASC
        """
        stmt = self.row_security.select(identity, FlashcardORM).order_by(FlashcardORM.id.asc())
        if level_id is not None:
            stmt = stmt.where(FlashcardORM.level_id == level_id.value)
        with database_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, identity: UserId | None, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Returns:
            Flashcard entity if found and visible, None otherwise
        """
        stmt = self.row_security.select(identity, FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value
        )
        with database_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def count(self, identity: UserId | None) -> int:
        """Count flashcards visible to the caller."""
        visible = self.row_security.select(identity, FlashcardORM).subquery()
        stmt = select(func.count()).select_from(visible)
        with database_errors(self.db):
            return self.db.execute(stmt).scalar() or 0
