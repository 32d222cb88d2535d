"""Repository for Level domain entities."""

from sqlalchemy.orm import Session

from lingualearn.domain.catalog.entities.level import Level
from lingualearn.domain.common.value_objects import LevelId, UserId
from lingualearn.infrastructure.access.row_security import RowSecurity
from lingualearn.infrastructure.catalog.mappers.level_mapper import LevelMapper
from lingualearn.infrastructure.common.db_errors import database_errors
from lingualearn.models import Level as LevelORM


class LevelRepository:
    """Repository for Level domain entities."""

    def __init__(self, db: Session, row_security: RowSecurity) -> None:
        self.db = db
        self.row_security = row_security
        self.mapper = LevelMapper()

    def find_all(self, identity: UserId | None) -> list[Level]:
        stmt = self.row_security.select(identity, LevelORM).order_by(LevelORM.order.asc())
        with database_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, identity: UserId | None, level_id: LevelId) -> Level | None:
        stmt = self.row_security.select(identity, LevelORM).where(LevelORM.id == level_id.value)
        with database_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None
