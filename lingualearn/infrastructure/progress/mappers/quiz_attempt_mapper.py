"""Mapper for QuizAttempt ORM ↔ Domain conversion."""

from lingualearn.domain.common.value_objects import QuizAttemptId, QuizId, UserId
from lingualearn.domain.progress.entities.quiz_attempt import QuizAttempt
from lingualearn.models import QuizAttempt as QuizAttemptORM


class QuizAttemptMapper:
    """Mapper for QuizAttempt ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: QuizAttemptORM) -> QuizAttempt:
        """Convert ORM model to domain entity."""
        return QuizAttempt(
            id=QuizAttemptId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            quiz_id=QuizId(orm_model.quiz_id),
            answer=orm_model.answer,
            is_correct=orm_model.is_correct,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: QuizAttempt) -> QuizAttemptORM:
        """Convert domain entity to a new ORM model; attempts are never updated."""
        return QuizAttemptORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            quiz_id=domain_entity.quiz_id.value,
            answer=domain_entity.answer,
            is_correct=domain_entity.is_correct,
        )
