"""Progress context schemas."""

from lingualearn.infrastructure.progress.schemas.level_progress_schemas import (
    LevelProgress,
    LevelProgressListResponse,
    UserLevelResponse,
)
from lingualearn.infrastructure.progress.schemas.progress_schemas import (
    KnownFlashcardsResponse,
    ProgressSummaryResponse,
    UserProgressResponse,
)
from lingualearn.infrastructure.progress.schemas.quiz_attempt_schemas import (
    QuizAttemptCreateRequest,
    QuizAttemptResponse,
    QuizAttemptsListResponse,
)

__all__ = [
    "KnownFlashcardsResponse",
    "LevelProgress",
    "LevelProgressListResponse",
    "ProgressSummaryResponse",
    "QuizAttemptCreateRequest",
    "QuizAttemptResponse",
    "QuizAttemptsListResponse",
    "UserLevelResponse",
    "UserProgressResponse",
]
