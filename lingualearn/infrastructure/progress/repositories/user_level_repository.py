"""Repository for UserLevel domain entities."""

from sqlalchemy.orm import Session

from lingualearn.domain.common.value_objects import UserId
from lingualearn.domain.progress.entities.user_level import UserLevel
from lingualearn.infrastructure.access.row_security import RowSecurity
from lingualearn.infrastructure.common.db_errors import database_errors
from lingualearn.infrastructure.common.upsert import insert_for
from lingualearn.infrastructure.progress.mappers.user_level_mapper import UserLevelMapper
from lingualearn.models import UserLevel as UserLevelORM


class UserLevelRepository:
    """Repository for UserLevel domain entities."""

    def __init__(self, db: Session, row_security: RowSecurity) -> None:
        self.db = db
        self.row_security = row_security
        self.mapper = UserLevelMapper()

    def find_by_user(self, identity: UserId | None) -> list[UserLevel]:
        stmt = self.row_security.select(identity, UserLevelORM).order_by(
            UserLevelORM.level_id.asc()
        )
        with database_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def upsert(self, identity: UserId | None, user_level: UserLevel) -> UserLevel:
        """
        Insert or update the row keyed by (user_id, level_id).

        Raises:
            AccessDeniedError: If the row does not belong to the caller
            ReferencedRowNotFoundError: If the level does not exist
        """
        row = self.mapper.to_row(user_level)
        self.row_security.check_upsert(identity, UserLevelORM, row)

        insert_stmt = insert_for(self.db, UserLevelORM).values(**row)
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[UserLevelORM.user_id, UserLevelORM.level_id],
            set_={
                "completed": insert_stmt.excluded.completed,
                "score": insert_stmt.excluded.score,
                "accuracy": insert_stmt.excluded.accuracy,
            },
        )
        with database_errors(self.db):
            self.db.execute(stmt)
            self.db.commit()

        select_stmt = self.row_security.select(identity, UserLevelORM).where(
            UserLevelORM.user_id == user_level.user_id.value,
            UserLevelORM.level_id == user_level.level_id.value,
        )
        with database_errors(self.db):
            orm_model = self.db.execute(select_stmt).scalar_one()
        return self.mapper.to_domain(orm_model)
