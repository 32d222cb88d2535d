"""API routes for the flashcard catalog."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lingualearn.application.catalog.use_cases.list_flashcards_use_case import (
    ListFlashcardsUseCase,
)
from lingualearn.core import container
from lingualearn.domain.common.exceptions import DomainError
from lingualearn.exceptions import LinguaLearnError
from lingualearn.infrastructure.catalog.schemas import Flashcard, FlashcardsListResponse
from lingualearn.infrastructure.common.di import inject_use_case
from lingualearn.infrastructure.identity.dependencies import CurrentIdentity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.get("", response_model=FlashcardsListResponse, status_code=status.HTTP_200_OK)
def list_flashcards(
    identity: CurrentIdentity,
    level_id: Annotated[int | None, Query(ge=0, description="Only this level")] = None,
    use_case: ListFlashcardsUseCase = Depends(inject_use_case(container.list_flashcards_use_case)),
) -> FlashcardsListResponse:
    """
    List every flashcard, ordered by id.

    Args:
        identity: Caller resolved from the bearer token
        level_id: Optional level filter
        use_case: ListFlashcardsUseCase injected via dependency container

    Returns:
        Flashcards ordered by id ascending

    Raises:
        HTTPException: If fetching the flashcards fails unexpectedly
    """
    try:
        flashcards = use_case.list_flashcards(identity, level_id)
        return FlashcardsListResponse(
            flashcards=[
                Flashcard(
                    id=flashcard.id.value,
                    word=flashcard.word,
                    translation=flashcard.translation,
                    category=flashcard.category,
                    level_id=flashcard.level_id.value if flashcard.level_id else None,
                    created_at=flashcard.created_at,
                )
                for flashcard in flashcards
            ]
        )
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcards: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
