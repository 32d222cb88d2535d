"""Tests for flashcard catalog API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lingualearn import models

SEED_WORDS = ["Hello", "Goodbye", "Thank you", "Please", "Good morning"]


class TestListFlashcards:
    """Test suite for GET /flashcards endpoint."""

    def test_list_flashcards_returns_seed_catalog(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/flashcards", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        flashcards = response.json()["flashcards"]
        assert [card["word"] for card in flashcards] == SEED_WORDS
        assert flashcards[0]["translation"] == "Hola"
        assert flashcards[0]["category"] == "Greetings"

    def test_list_flashcards_ordered_by_id_regardless_of_insertion_order(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        db_session.add(models.Flashcard(id=200, word="Cat", translation="Gato", category="Animals"))
        db_session.commit()
        db_session.add(models.Flashcard(id=100, word="Dog", translation="Perro", category="Animals"))
        db_session.commit()

        response = client.get("/api/v1/flashcards", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        ids = [card["id"] for card in response.json()["flashcards"]]
        assert ids == sorted(ids)
        assert ids[-2:] == [100, 200]

    def test_list_flashcards_filtered_by_level(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        level_by_order,
    ) -> None:
        level = level_by_order(2)
        db_session.add(
            models.Flashcard(word="Hungry", translation="Hambre", category="Food", level_id=level.id)
        )
        db_session.commit()

        response = client.get(
            "/api/v1/flashcards", params={"level_id": level.id}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        flashcards = response.json()["flashcards"]
        assert [card["word"] for card in flashcards] == ["Hungry"]
        assert flashcards[0]["level_id"] == level.id

    def test_list_flashcards_requires_authentication(self, client: TestClient) -> None:
        response = client.get("/api/v1/flashcards")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "access_denied"

    def test_list_flashcards_rejects_invalid_token(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/flashcards", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_flashcards_rejects_token_for_other_audience(
        self, client: TestClient, token_for
    ) -> None:
        token = token_for("7c9e6679-7425-40de-944b-e07fc1f90ae7", aud="anon")

        response = client.get(
            "/api/v1/flashcards", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
