"""Mapper for UserLevel ORM ↔ Domain conversion."""

from lingualearn.domain.common.value_objects import LevelId, UserId, UserLevelId
from lingualearn.domain.progress.entities.user_level import UserLevel
from lingualearn.models import UserLevel as UserLevelORM


class UserLevelMapper:
    """Mapper for UserLevel ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserLevelORM) -> UserLevel:
        return UserLevel(
            id=UserLevelId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            level_id=LevelId(orm_model.level_id),
            completed=orm_model.completed,
            score=orm_model.score,
            accuracy=orm_model.accuracy,
        )

    def to_row(self, domain_entity: UserLevel) -> dict[str, object]:
        return {
            "id": domain_entity.id.value,
            "user_id": domain_entity.user_id.value,
            "level_id": domain_entity.level_id.value,
            "completed": domain_entity.completed,
            "score": domain_entity.score,
            "accuracy": domain_entity.accuracy,
        }
