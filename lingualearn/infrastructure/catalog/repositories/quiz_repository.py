"""Repository for Quiz domain entities."""

from sqlalchemy.orm import Session

from lingualearn.domain.catalog.entities.quiz import Quiz
from lingualearn.domain.common.value_objects import LevelId, QuizId, UserId
from lingualearn.infrastructure.access.row_security import RowSecurity
from lingualearn.infrastructure.catalog.mappers.quiz_mapper import QuizMapper
from lingualearn.infrastructure.common.db_errors import database_errors
from lingualearn.models import Quiz as QuizORM


class QuizRepository:
    """Repository for Quiz domain entities."""

    def __init__(self, db: Session, row_security: RowSecurity) -> None:
        self.db = db
        self.row_security = row_security
        self.mapper = QuizMapper()

    def find_by_id(self, identity: UserId | None, quiz_id: QuizId) -> Quiz | None:
        stmt = self.row_security.select(identity, QuizORM).where(QuizORM.id == quiz_id.value)
        with database_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_level(self, identity: UserId | None, level_id: LevelId) -> list[Quiz]:
        stmt = (
            self.row_security.select(identity, QuizORM)
            .where(QuizORM.level_id == level_id.value)
            .order_by(QuizORM.question.asc())
        )
        with database_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]
