"""Repository for QuizAttempt domain entities."""

from collections.abc import Collection

from sqlalchemy.orm import Session

from lingualearn.domain.common.value_objects import QuizId, UserId
from lingualearn.domain.progress.entities.quiz_attempt import QuizAttempt
from lingualearn.infrastructure.access.row_security import RowSecurity
from lingualearn.infrastructure.common.db_errors import database_errors
from lingualearn.infrastructure.progress.mappers.quiz_attempt_mapper import QuizAttemptMapper
from lingualearn.models import QuizAttempt as QuizAttemptORM


class QuizAttemptRepository:
    """Repository for QuizAttempt domain entities."""

    def __init__(self, db: Session, row_security: RowSecurity) -> None:
        self.db = db
        self.row_security = row_security
        self.mapper = QuizAttemptMapper()

    def add(self, identity: UserId | None, attempt: QuizAttempt) -> QuizAttempt:
        """
        Append an attempt.

        Args:
            identity: The caller
            attempt: Graded attempt to store

        Returns:
            The stored attempt with its creation time

        Raises:
            AccessDeniedError: If the attempt does not belong to the caller
            ReferencedRowNotFoundError: If the quiz does not exist
        """
        orm_model = self.mapper.to_orm(attempt)
        self.row_security.check_insert(
            identity,
            QuizAttemptORM,
            {"user_id": orm_model.user_id, "quiz_id": orm_model.quiz_id},
        )

        with database_errors(self.db):
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def find_by_user(
        self, identity: UserId | None, quiz_id: QuizId | None = None
    ) -> list[QuizAttempt]:
        """
        Get the caller's attempts.

        Returns:
            List of attempts ordered by created_at DESC
        """
        stmt = self.row_security.select(identity, QuizAttemptORM).order_by(
            QuizAttemptORM.created_at.desc(), QuizAttemptORM.id.desc()
        )
        if quiz_id is not None:
            stmt = stmt.where(QuizAttemptORM.quiz_id == quiz_id.value)
        with database_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_for_quizzes(
        self, identity: UserId | None, quiz_ids: Collection[QuizId]
    ) -> list[QuizAttempt]:
        """
        Get the caller's attempts on the given quizzes.

        Returns:
            List of attempts ordered by created_at ASC, then id
        """
        stmt = self.row_security.select(identity, QuizAttemptORM)
        if not quiz_ids:
            return []
        stmt = stmt.where(
            QuizAttemptORM.quiz_id.in_([quiz_id.value for quiz_id in quiz_ids])
        ).order_by(
            QuizAttemptORM.created_at.asc(), QuizAttemptORM.id.asc()
        )
        with database_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]
