from lingualearn.domain.progress.entities.quiz_attempt import QuizAttempt
from lingualearn.domain.progress.entities.user_level import UserLevel
from lingualearn.domain.progress.entities.user_progress import UserProgress

__all__ = ["QuizAttempt", "UserLevel", "UserProgress"]
