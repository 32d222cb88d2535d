"""Tests for replaying the migration log."""

from collections.abc import Generator

import pytest
from alembic import command
from sqlalchemy import func, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from lingualearn import models
from lingualearn.database import build_engine
from lingualearn.infrastructure.migrations import runner

EXPECTED_TABLES = {
    "flashcards",
    "users_progress",
    "levels",
    "quizzes",
    "user_levels",
    "quiz_attempts",
    "row_policies",
}


def _count(engine: Engine, model: type) -> int:
    with Session(engine) as session:
        return session.execute(select(func.count()).select_from(model)).scalar_one()


def _policies(engine: Engine) -> set[tuple[str, str, str, str | None, str | None]]:
    with Session(engine) as session:
        rows = session.execute(select(models.RowPolicy)).scalars().all()
        return {
            (row.table_name, row.name, row.command, row.using_rule, row.check_rule)
            for row in rows
        }


@pytest.fixture
def empty_engine() -> Generator[Engine, None, None]:
    engine = build_engine("sqlite://")
    try:
        yield engine
    finally:
        engine.dispose()


class TestUpgrade:
    def test_upgrade_creates_all_tables(self, migrated_engine: Engine) -> None:
        tables = set(inspect(migrated_engine).get_table_names())
        assert EXPECTED_TABLES <= tables

    def test_upgrade_seeds_catalog(self, migrated_engine: Engine) -> None:
        assert _count(migrated_engine, models.Flashcard) == 5
        assert _count(migrated_engine, models.Level) == 4
        assert _count(migrated_engine, models.Quiz) == 4

    def test_upgrade_registers_policies(self, migrated_engine: Engine) -> None:
        policies = _policies(migrated_engine)

        assert len(policies) == 11
        assert (
            "user_levels",
            "Users can update their own level progress",
            "UPDATE",
            "owner",
            "owner",
        ) in policies
        assert not any(policy[2] == "DELETE" for policy in policies)

    def test_seed_quizzes_have_correct_answer_among_options(
        self, migrated_engine: Engine
    ) -> None:
        with Session(migrated_engine) as session:
            quizzes = session.execute(select(models.Quiz)).scalars().all()
        assert all(quiz.correct_answer in quiz.options for quiz in quizzes)


class TestReplay:
    def test_replay_on_migrated_database_changes_nothing(self, migrated_engine: Engine) -> None:
        policies_before = _policies(migrated_engine)

        runner.replay(migrated_engine)
        runner.replay(migrated_engine)

        assert _count(migrated_engine, models.Flashcard) == 5
        assert _count(migrated_engine, models.Level) == 4
        assert _count(migrated_engine, models.Quiz) == 4
        assert _policies(migrated_engine) == policies_before

    @pytest.mark.parametrize("prefix", ["001", "002", "003"])
    def test_replay_from_partial_state(self, empty_engine: Engine, prefix: str) -> None:
        runner.upgrade(empty_engine, prefix)

        runner.replay(empty_engine)

        assert EXPECTED_TABLES <= set(inspect(empty_engine).get_table_names())
        assert _count(empty_engine, models.Flashcard) == 5
        assert _count(empty_engine, models.Level) == 4
        assert _count(empty_engine, models.Quiz) == 4
        assert len(_policies(empty_engine)) == 11

    def test_replay_keeps_user_rows(self, migrated_engine: Engine, user_id) -> None:
        with Session(migrated_engine) as session:
            session.add(models.UserProgress(user_id=user_id, flashcard_id=1, known=True))
            session.commit()

        runner.replay(migrated_engine)

        assert _count(migrated_engine, models.UserProgress) == 1

    def test_replay_restores_missing_seed_rows(self, migrated_engine: Engine) -> None:
        with Session(migrated_engine) as session:
            session.execute(
                models.Flashcard.__table__.delete().where(models.Flashcard.word == "Please")
            )
            session.commit()

        runner.replay(migrated_engine)

        assert _count(migrated_engine, models.Flashcard) == 5


class TestDowngrade:
    def test_downgrade_drops_level_update_policy(self, migrated_engine: Engine) -> None:
        with migrated_engine.begin() as connection:
            command.downgrade(runner.build_alembic_config(connection), "002")

        names = {policy[1] for policy in _policies(migrated_engine)}
        assert "Users can update their own level progress" not in names
        assert len(names) == 10
