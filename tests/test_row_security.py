"""Tests for row-level policy enforcement at the repository boundary."""

import random
from uuid import UUID

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from lingualearn import models
from lingualearn.domain.access import Command
from lingualearn.domain.common.value_objects import FlashcardId, LevelId, UserId, UserLevelId
from lingualearn.domain.progress.entities import QuizAttempt, UserLevel, UserProgress
from lingualearn.exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
    ConstraintViolationError,
    ReferencedRowNotFoundError,
    TransportFailureError,
)
from lingualearn.infrastructure.access import RowSecurity
from lingualearn.infrastructure.catalog.mappers.quiz_mapper import QuizMapper
from lingualearn.infrastructure.catalog.repositories import FlashcardRepository
from lingualearn.infrastructure.common.db_errors import database_errors
from lingualearn.infrastructure.progress.repositories import (
    QuizAttemptRepository,
    UserLevelRepository,
    UserProgressRepository,
)

ALL_TABLES = [
    "flashcards",
    "users_progress",
    "levels",
    "quizzes",
    "user_levels",
    "quiz_attempts",
]


class TestDefaultDeny:
    @pytest.mark.parametrize("table", ALL_TABLES)
    def test_delete_is_never_allowed(
        self, row_security: RowSecurity, identity: UserId, table: str
    ) -> None:
        row = {"user_id": identity.value}
        assert not row_security.engine.allows(identity, table, Command.DELETE, row)

    @pytest.mark.parametrize("table", ["flashcards", "levels", "quizzes"])
    def test_catalog_tables_are_read_only(
        self, row_security: RowSecurity, identity: UserId, table: str
    ) -> None:
        for command in (Command.INSERT, Command.UPDATE):
            assert not row_security.engine.allows(identity, table, command, {})

    def test_catalog_insert_is_denied(self, row_security: RowSecurity, identity: UserId) -> None:
        with pytest.raises(AccessDeniedError):
            row_security.check_insert(identity, models.Flashcard, {"word": "Hi"})

    def test_quiz_attempts_cannot_be_updated(
        self, row_security: RowSecurity, identity: UserId
    ) -> None:
        row = {"user_id": identity.value}
        with pytest.raises(AccessDeniedError):
            row_security.check_update(identity, models.QuizAttempt, row, row)

    def test_policy_catalog_is_not_readable(
        self, row_security: RowSecurity, identity: UserId
    ) -> None:
        with pytest.raises(AccessDeniedError):
            row_security.select(identity, models.RowPolicy)

    def test_anonymous_read_requires_authentication(self, row_security: RowSecurity) -> None:
        with pytest.raises(AuthenticationRequiredError):
            row_security.select(None, models.Flashcard)

    def test_anonymous_read_of_owned_rows_requires_authentication(
        self, row_security: RowSecurity
    ) -> None:
        with pytest.raises(AuthenticationRequiredError):
            row_security.select(None, models.QuizAttempt)

    def test_anonymous_write_requires_authentication(self, row_security: RowSecurity) -> None:
        with pytest.raises(AuthenticationRequiredError):
            row_security.check_upsert(None, models.UserProgress, {"user_id": None})


class TestIsolation:
    def test_users_cannot_write_rows_of_others(
        self, db_session: Session, row_security: RowSecurity, user_id: UUID, other_user_id: UUID
    ) -> None:
        repository = UserProgressRepository(db_session, row_security)
        foreign_row = UserProgress.known_card(UserId(other_user_id), FlashcardId(1))

        with pytest.raises(AccessDeniedError):
            repository.upsert(UserId(user_id), foreign_row)

        assert repository.find_known_flashcard_ids(UserId(other_user_id)) == set()

    def test_users_cannot_write_level_results_of_others(
        self, db_session: Session, row_security: RowSecurity, user_id: UUID, other_user_id: UUID
    ) -> None:
        repository = UserLevelRepository(db_session, row_security)
        foreign_row = UserLevel(
            id=UserLevelId.generate(),
            user_id=UserId(other_user_id),
            level_id=LevelId(1),
            completed=True,
            score=100,
            accuracy=1.0,
        )

        with pytest.raises(AccessDeniedError):
            repository.upsert(UserId(user_id), foreign_row)

    def test_users_cannot_append_attempts_for_others(
        self,
        db_session: Session,
        row_security: RowSecurity,
        user_id: UUID,
        other_user_id: UUID,
        beginner_quiz: models.Quiz,
    ) -> None:
        repository = QuizAttemptRepository(db_session, row_security)
        quiz = QuizMapper().to_domain(beginner_quiz)
        foreign_attempt = QuizAttempt.submit(UserId(other_user_id), quiz, "Hola")

        with pytest.raises(AccessDeniedError):
            repository.add(UserId(user_id), foreign_attempt)

        assert repository.find_by_user(UserId(other_user_id)) == []
        assert db_session.execute(select(func.count(models.QuizAttempt.id))).scalar_one() == 0

    def test_progress_is_isolated_across_random_identity_pairs(
        self, db_session: Session, row_security: RowSecurity
    ) -> None:
        rng = random.Random(20240401)
        repository = UserProgressRepository(db_session, row_security)

        for _ in range(25):
            owner = UserId(UUID(int=rng.getrandbits(128), version=4))
            stranger = UserId(UUID(int=rng.getrandbits(128), version=4))
            flashcard_id = FlashcardId(rng.randint(1, 5))

            repository.upsert(owner, UserProgress.known_card(owner, flashcard_id))

            assert flashcard_id in repository.find_known_flashcard_ids(owner)
            assert flashcard_id not in repository.find_known_flashcard_ids(stranger)
            with pytest.raises(AccessDeniedError):
                repository.upsert(stranger, UserProgress.known_card(owner, flashcard_id))

    def test_upsert_for_missing_flashcard_is_not_found(
        self, db_session: Session, row_security: RowSecurity, identity: UserId
    ) -> None:
        repository = UserProgressRepository(db_session, row_security)

        with pytest.raises(ReferencedRowNotFoundError):
            repository.upsert(identity, UserProgress.known_card(identity, FlashcardId(99999)))

        assert repository.find_known_flashcard_ids(identity) == set()

    def test_catalog_is_shared_between_identities(
        self, db_session: Session, row_security: RowSecurity, user_id: UUID, other_user_id: UUID
    ) -> None:
        repository = FlashcardRepository(db_session, row_security)

        mine = repository.find_all(UserId(user_id))
        theirs = repository.find_all(UserId(other_user_id))

        assert [card.id for card in mine] == [card.id for card in theirs]
        assert repository.count(UserId(user_id)) == 5


class TestDatabaseErrors:
    def test_duplicate_unique_key_is_constraint_violation(self, db_session: Session) -> None:
        with pytest.raises(ConstraintViolationError):
            with database_errors(db_session):
                db_session.add(models.Level(name="Duplicate", order=1, required_score=70))
                db_session.commit()

    def test_dangling_foreign_key_is_referenced_row_not_found(
        self, db_session: Session, user_id: UUID
    ) -> None:
        with pytest.raises(ReferencedRowNotFoundError):
            with database_errors(db_session):
                db_session.add(models.UserProgress(user_id=user_id, flashcard_id=424242))
                db_session.commit()

    def test_unreachable_store_is_transport_failure(self, db_session: Session) -> None:
        with pytest.raises(TransportFailureError):
            with database_errors(db_session):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))
