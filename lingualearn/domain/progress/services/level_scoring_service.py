"""Computes a user's result for a level from their quiz attempts."""

from collections.abc import Sequence
from dataclasses import dataclass

from lingualearn.domain.catalog.entities import Level, Quiz
from lingualearn.domain.common.value_objects import LevelId, QuizId, UserId, UserLevelId
from lingualearn.domain.progress.entities import QuizAttempt, UserLevel


@dataclass(frozen=True)
class LevelStatus:
    """A level together with the caller's result and whether it is open."""

    level: Level
    result: UserLevel | None
    unlocked: bool


class LevelScoringService:
    """
    Domain service scoring levels.

    - score: percentage of the level's quizzes whose latest attempt is correct
    - accuracy: correct attempts over all attempts on the level's quizzes
    - completed: the level has quizzes and the score reaches its pass mark
    """

    def evaluate(
        self,
        user_id: UserId,
        level: Level,
        quizzes: Sequence[Quiz],
        attempts: Sequence[QuizAttempt],
    ) -> UserLevel:
        quiz_ids = {quiz.id for quiz in quizzes}
        relevant = [attempt for attempt in attempts if attempt.quiz_id in quiz_ids]

        latest: dict[QuizId, QuizAttempt] = {}
        for attempt in sorted(relevant, key=_attempt_sort_key):
            latest[attempt.quiz_id] = attempt

        score = 0
        if quiz_ids:
            solved = sum(1 for attempt in latest.values() if attempt.is_correct)
            score = round(100 * solved / len(quiz_ids))

        accuracy = 0.0
        if relevant:
            accuracy = sum(1 for attempt in relevant if attempt.is_correct) / len(relevant)

        return UserLevel(
            id=UserLevelId.generate(),
            user_id=user_id,
            level_id=level.id,
            completed=bool(quiz_ids) and level.is_passed_by(score),
            score=score,
            accuracy=accuracy,
        )

    def statuses(
        self, levels: Sequence[Level], results: Sequence[UserLevel]
    ) -> list[LevelStatus]:
        """
        Pair each level with the user's result.

        The first level is always unlocked; each later one unlocks when the
        level before it is completed.
        """
        by_level: dict[LevelId, UserLevel] = {result.level_id: result for result in results}
        statuses: list[LevelStatus] = []
        previous_completed = True
        for level in sorted(levels, key=lambda lvl: lvl.order):
            result = by_level.get(level.id)
            statuses.append(LevelStatus(level=level, result=result, unlocked=previous_completed))
            previous_completed = result is not None and result.completed
        return statuses


def _attempt_sort_key(attempt: QuizAttempt) -> float:
    # sorted() is stable; ties keep repository order (created_at, then id)
    return attempt.created_at.timestamp() if attempt.created_at else 0.0
