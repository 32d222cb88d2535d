"""Use case for browsing levels and their quizzes."""

from lingualearn.application.catalog.protocols.level_repository import LevelRepositoryProtocol
from lingualearn.application.catalog.protocols.quiz_repository import QuizRepositoryProtocol
from lingualearn.application.catalog.use_cases.exceptions import LevelNotFoundError
from lingualearn.domain.catalog.entities import Level, Quiz
from lingualearn.domain.common.value_objects import LevelId, UserId


class LevelCatalogUseCase:
    """Read-only access to levels and quizzes."""

    def __init__(
        self,
        level_repository: LevelRepositoryProtocol,
        quiz_repository: QuizRepositoryProtocol,
    ) -> None:
        self.level_repository = level_repository
        self.quiz_repository = quiz_repository

    def list_levels(self, identity: UserId | None) -> list[Level]:
        """List levels in sequence order."""
        return self.level_repository.find_all(identity)

    def list_level_quizzes(self, identity: UserId | None, level_id: int) -> list[Quiz]:
        """
        List the quizzes of a level.

        Raises:
            LevelNotFoundError: If the level does not exist
        """
        level_id_vo = LevelId(level_id)
        if self.level_repository.find_by_id(identity, level_id_vo) is None:
            raise LevelNotFoundError(level_id)
        return self.quiz_repository.find_by_level(identity, level_id_vo)
