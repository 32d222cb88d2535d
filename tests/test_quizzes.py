"""Tests for quiz API endpoints."""

from uuid import UUID, uuid4

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from lingualearn import models


class TestListLevelQuizzes:
    """Test suite for GET /levels/:id/quizzes endpoint."""

    def test_list_quizzes_hides_correct_answer(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        beginner_quiz: models.Quiz,
    ) -> None:
        response = client.get(
            f"/api/v1/levels/{beginner_quiz.level_id}/quizzes", headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        quizzes = response.json()["quizzes"]
        assert len(quizzes) == 1
        assert quizzes[0]["id"] == str(beginner_quiz.id)
        assert quizzes[0]["question"] == 'What is "Hello" in Spanish?'
        assert quizzes[0]["options"] == ["Hola", "Adios", "Gracias", "Por favor"]
        assert "correct_answer" not in quizzes[0]

    def test_list_quizzes_level_not_found(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/levels/99999/quizzes", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSubmitQuizAttempt:
    """Test suite for POST /quizzes/:id/attempts endpoint."""

    @pytest.mark.parametrize(
        ("answer", "is_correct", "stored"),
        [
            ("Hola", True, "Hola"),
            ("hola", False, "hola"),
            (" Hola ", True, "Hola"),
            ("HOLA", False, "HOLA"),
            ("Adios", False, "Adios"),
        ],
    )
    def test_submit_attempt_grades_answer(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        beginner_quiz: models.Quiz,
        answer: str,
        is_correct: bool,
        stored: str,
    ) -> None:
        response = client.post(
            f"/api/v1/quizzes/{beginner_quiz.id}/attempts",
            json={"answer": answer},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["is_correct"] is is_correct
        assert data["answer"] == stored
        assert data["quiz_id"] == str(beginner_quiz.id)

    def test_submit_attempt_is_stored_for_caller(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        user_id: UUID,
        beginner_quiz: models.Quiz,
    ) -> None:
        response = client.post(
            f"/api/v1/quizzes/{beginner_quiz.id}/attempts",
            json={"answer": "Hola"},
            headers=auth_headers,
        )

        attempt = db_session.execute(
            select(models.QuizAttempt).where(
                models.QuizAttempt.id == UUID(response.json()["id"])
            )
        ).scalar_one()
        assert attempt.user_id == user_id
        assert attempt.is_correct is True

    def test_submit_blank_answer_is_rejected(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        beginner_quiz: models.Quiz,
    ) -> None:
        response = client.post(
            f"/api/v1/quizzes/{beginner_quiz.id}/attempts",
            json={"answer": "   "},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "validation_error"

    def test_submit_attempt_quiz_not_found(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            f"/api/v1/quizzes/{uuid4()}/attempts",
            json={"answer": "Hola"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_submit_attempt_requires_authentication(
        self, client: TestClient, beginner_quiz: models.Quiz
    ) -> None:
        response = client.post(
            f"/api/v1/quizzes/{beginner_quiz.id}/attempts", json={"answer": "Hola"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestListQuizAttempts:
    """Test suite for GET /quizzes/attempts endpoint."""

    def test_attempts_are_listed_newest_first(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        beginner_quiz: models.Quiz,
    ) -> None:
        for answer in ["Adios", "Gracias", "Hola"]:
            client.post(
                f"/api/v1/quizzes/{beginner_quiz.id}/attempts",
                json={"answer": answer},
                headers=auth_headers,
            )

        response = client.get("/api/v1/quizzes/attempts", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        answers = [attempt["answer"] for attempt in response.json()["attempts"]]
        assert answers == ["Hola", "Gracias", "Adios"]

    def test_attempts_filtered_by_quiz(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        beginner_quiz: models.Quiz,
        level_by_order,
    ) -> None:
        other_quiz = db_session.execute(
            select(models.Quiz).where(models.Quiz.level_id == level_by_order(2).id)
        ).scalar_one()
        client.post(
            f"/api/v1/quizzes/{beginner_quiz.id}/attempts",
            json={"answer": "Hola"},
            headers=auth_headers,
        )
        client.post(
            f"/api/v1/quizzes/{other_quiz.id}/attempts",
            json={"answer": "Tengo hambre"},
            headers=auth_headers,
        )

        response = client.get(
            "/api/v1/quizzes/attempts",
            params={"quiz_id": str(other_quiz.id)},
            headers=auth_headers,
        )

        attempts = response.json()["attempts"]
        assert [attempt["quiz_id"] for attempt in attempts] == [str(other_quiz.id)]

    def test_attempts_are_isolated_between_users(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
        beginner_quiz: models.Quiz,
    ) -> None:
        client.post(
            f"/api/v1/quizzes/{beginner_quiz.id}/attempts",
            json={"answer": "Hola"},
            headers=auth_headers,
        )

        response = client.get("/api/v1/quizzes/attempts", headers=other_auth_headers)

        assert response.json() == {"attempts": []}
