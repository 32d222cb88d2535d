from lingualearn.infrastructure.progress.repositories.quiz_attempt_repository import (
    QuizAttemptRepository,
)
from lingualearn.infrastructure.progress.repositories.user_level_repository import (
    UserLevelRepository,
)
from lingualearn.infrastructure.progress.repositories.user_progress_repository import (
    UserProgressRepository,
)

__all__ = ["QuizAttemptRepository", "UserLevelRepository", "UserProgressRepository"]
