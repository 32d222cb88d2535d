"""Mapper for Level ORM ↔ Domain conversion."""

from lingualearn.domain.catalog.entities.level import Level
from lingualearn.domain.common.value_objects import LevelId
from lingualearn.models import Level as LevelORM


class LevelMapper:
    """Mapper for Level ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LevelORM) -> Level:
        return Level(
            id=LevelId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
            order=orm_model.order,
            required_score=orm_model.required_score,
        )
