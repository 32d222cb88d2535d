"""Use case for per-user level results."""

import structlog

from lingualearn.application.catalog.protocols.level_repository import LevelRepositoryProtocol
from lingualearn.application.catalog.protocols.quiz_repository import QuizRepositoryProtocol
from lingualearn.application.catalog.use_cases.exceptions import LevelNotFoundError
from lingualearn.application.progress.protocols.quiz_attempt_repository import (
    QuizAttemptRepositoryProtocol,
)
from lingualearn.application.progress.protocols.user_level_repository import (
    UserLevelRepositoryProtocol,
)
from lingualearn.domain.common.value_objects import LevelId, UserId
from lingualearn.domain.progress.entities.user_level import UserLevel
from lingualearn.domain.progress.services.level_scoring_service import (
    LevelScoringService,
    LevelStatus,
)
from lingualearn.exceptions import AuthenticationRequiredError

logger = structlog.get_logger(__name__)


class LevelProgressUseCase:
    """Scores levels from quiz attempts and stores the caller's results."""

    def __init__(
        self,
        level_repository: LevelRepositoryProtocol,
        quiz_repository: QuizRepositoryProtocol,
        attempt_repository: QuizAttemptRepositoryProtocol,
        user_level_repository: UserLevelRepositoryProtocol,
        scoring_service: LevelScoringService,
    ) -> None:
        self.level_repository = level_repository
        self.quiz_repository = quiz_repository
        self.attempt_repository = attempt_repository
        self.user_level_repository = user_level_repository
        self.scoring_service = scoring_service

    def evaluate_level(self, identity: UserId | None, level_id: int) -> UserLevel:
        """
        Recompute and store the caller's result for a level.

        Args:
            identity: The caller
            level_id: Level to evaluate

        Returns:
            The stored UserLevel row

        Raises:
            AuthenticationRequiredError: If the caller is not authenticated
            LevelNotFoundError: If the level does not exist
        """
        if identity is None:
            raise AuthenticationRequiredError()

        level = self.level_repository.find_by_id(identity, LevelId(level_id))
        if level is None:
            raise LevelNotFoundError(level_id)

        quizzes = self.quiz_repository.find_by_level(identity, level.id)
        attempts = self.attempt_repository.find_for_quizzes(
            identity, [quiz.id for quiz in quizzes]
        )
        result = self.scoring_service.evaluate(identity, level, quizzes, attempts)
        stored = self.user_level_repository.upsert(identity, result)

        logger.info(
            "level_evaluated",
            level_id=level_id,
            score=stored.score,
            completed=stored.completed,
        )
        return stored

    def list_level_progress(self, identity: UserId | None) -> list[LevelStatus]:
        """Every level with the caller's result and whether it is unlocked."""
        levels = self.level_repository.find_all(identity)
        results = self.user_level_repository.find_by_user(identity)
        return self.scoring_service.statuses(levels, results)
