"""Mapper for Quiz ORM ↔ Domain conversion."""

from lingualearn.domain.catalog.entities.quiz import Quiz
from lingualearn.domain.common.value_objects import LevelId, QuizId
from lingualearn.models import Quiz as QuizORM


class QuizMapper:
    """Mapper for Quiz ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: QuizORM) -> Quiz:
        return Quiz(
            id=QuizId(orm_model.id),
            level_id=LevelId(orm_model.level_id),
            question=orm_model.question,
            correct_answer=orm_model.correct_answer,
            options=list(orm_model.options),
        )
