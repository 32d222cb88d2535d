"""Repository for UserProgress domain entities."""

from sqlalchemy.orm import Session

from lingualearn.domain.common.value_objects import FlashcardId, UserId
from lingualearn.domain.progress.entities.user_progress import UserProgress
from lingualearn.infrastructure.access.row_security import RowSecurity
from lingualearn.infrastructure.common.db_errors import database_errors
from lingualearn.infrastructure.common.upsert import insert_for
from lingualearn.infrastructure.progress.mappers.user_progress_mapper import UserProgressMapper
from lingualearn.models import UserProgress as UserProgressORM


class UserProgressRepository:
    """Repository for UserProgress domain entities."""

    def __init__(self, db: Session, row_security: RowSecurity) -> None:
        self.db = db
        self.row_security = row_security
        self.mapper = UserProgressMapper()

    def find_known_flashcard_ids(self, identity: UserId | None) -> set[FlashcardId]:
        """
        Get the flashcards the caller marked as known.

        Args:
            identity: The caller; rows of other users are never returned

        Returns:
            Set of flashcard ids
        """
        stmt = self.row_security.select(identity, UserProgressORM).where(
            UserProgressORM.known.is_(True)
        )
        with database_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return {FlashcardId(orm.flashcard_id) for orm in orm_models}

    def upsert(self, identity: UserId | None, progress: UserProgress) -> UserProgress:
        """
        Insert or update the row keyed by (user_id, flashcard_id).

        Runs as a single INSERT ... ON CONFLICT DO UPDATE so concurrent calls
        for the same pair converge on one row.

        Args:
            identity: The caller
            progress: Desired state of the row

        Returns:
            The stored row

        Raises:
            AccessDeniedError: If the row does not belong to the caller
            ReferencedRowNotFoundError: If the flashcard does not exist
        """
        row = self.mapper.to_row(progress)
        self.row_security.check_upsert(identity, UserProgressORM, row)

        insert_stmt = insert_for(self.db, UserProgressORM).values(**row)
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[UserProgressORM.user_id, UserProgressORM.flashcard_id],
            set_={"known": insert_stmt.excluded.known},
        )
        with database_errors(self.db):
            self.db.execute(stmt)
            self.db.commit()

        select_stmt = self.row_security.select(identity, UserProgressORM).where(
            UserProgressORM.user_id == progress.user_id.value,
            UserProgressORM.flashcard_id == progress.flashcard_id.value,
        )
        with database_errors(self.db):
            orm_model = self.db.execute(select_stmt).scalar_one()
        return self.mapper.to_domain(orm_model)
