"""Tests for LevelScoringService."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from lingualearn.domain.catalog.entities import Level, Quiz
from lingualearn.domain.common.value_objects import LevelId, UserId, UserLevelId
from lingualearn.domain.progress.entities import QuizAttempt, UserLevel
from lingualearn.domain.progress.services.level_scoring_service import LevelScoringService

START = datetime(2025, 1, 1, tzinfo=UTC)


@pytest.fixture
def service() -> LevelScoringService:
    return LevelScoringService()


@pytest.fixture
def user_id() -> UserId:
    return UserId(uuid4())


@pytest.fixture
def level() -> Level:
    return Level(id=LevelId(1), name="Beginner", order=1, required_score=70)


@pytest.fixture
def quizzes() -> list[Quiz]:
    return [
        Quiz.create(LevelId(1), f"Question {n}?", "right", ["right", "wrong"]) for n in range(4)
    ]


def _attempts(user_id: UserId, answers: list[tuple[Quiz, str]]) -> list[QuizAttempt]:
    attempts = []
    for offset, (quiz, answer) in enumerate(answers):
        attempt = QuizAttempt.submit(user_id, quiz, answer)
        attempt.created_at = START + timedelta(seconds=offset)
        attempts.append(attempt)
    return attempts


class TestEvaluate:
    def test_no_attempts(self, service, user_id, level, quizzes) -> None:
        result = service.evaluate(user_id, level, quizzes, [])

        assert (result.score, result.accuracy, result.completed) == (0, 0.0, False)

    def test_level_without_quizzes_is_never_completed(self, service, user_id) -> None:
        easy = Level(id=LevelId(2), name="Free", order=2, required_score=0)

        result = service.evaluate(user_id, easy, [], [])

        assert result.completed is False

    def test_score_counts_latest_attempt_per_quiz(self, service, user_id, level, quizzes) -> None:
        attempts = _attempts(
            user_id,
            [
                (quizzes[0], "wrong"),
                (quizzes[0], "right"),
                (quizzes[1], "right"),
                (quizzes[1], "wrong"),
                (quizzes[2], "right"),
            ],
        )

        result = service.evaluate(user_id, level, quizzes, list(reversed(attempts)))

        assert result.score == 50
        assert result.accuracy == pytest.approx(3 / 5)
        assert result.completed is False

    def test_reaching_required_score_completes_level(
        self, service, user_id, level, quizzes
    ) -> None:
        attempts = _attempts(user_id, [(quiz, "right") for quiz in quizzes[:3]])

        result = service.evaluate(user_id, level, quizzes, attempts)

        assert result.score == 75
        assert result.completed is True

    def test_attempts_on_other_quizzes_are_ignored(self, service, user_id, level, quizzes) -> None:
        stray = Quiz.create(LevelId(9), "Elsewhere?", "right", ["right"])
        attempts = _attempts(user_id, [(stray, "right"), (quizzes[0], "wrong")])

        result = service.evaluate(user_id, level, quizzes, attempts)

        assert result.accuracy == 0.0


class TestStatuses:
    def _levels(self) -> list[Level]:
        return [
            Level(id=LevelId(n), name=f"Level {n}", order=n, required_score=70)
            for n in (3, 1, 2)
        ]

    def test_first_level_unlocked_without_results(self, service) -> None:
        statuses = service.statuses(self._levels(), [])

        assert [status.level.order for status in statuses] == [1, 2, 3]
        assert [status.unlocked for status in statuses] == [True, False, False]

    def test_completed_level_unlocks_the_next(self, service, user_id) -> None:
        results = [
            UserLevel(
                id=UserLevelId.generate(),
                user_id=user_id,
                level_id=LevelId(1),
                completed=True,
                score=100,
                accuracy=1.0,
            ),
            UserLevel(
                id=UserLevelId.generate(),
                user_id=user_id,
                level_id=LevelId(2),
                completed=False,
                score=40,
                accuracy=0.4,
            ),
        ]

        statuses = service.statuses(self._levels(), results)

        assert [status.unlocked for status in statuses] == [True, True, False]
        assert statuses[1].result is not None
        assert statuses[1].result.score == 40
