"""API routes for flashcard progress."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from lingualearn.application.progress.use_cases.flashcard_progress_use_case import (
    FlashcardProgressUseCase,
)
from lingualearn.core import container
from lingualearn.domain.common.exceptions import DomainError
from lingualearn.exceptions import LinguaLearnError
from lingualearn.infrastructure.common.di import inject_use_case
from lingualearn.infrastructure.identity.dependencies import CurrentIdentity
from lingualearn.infrastructure.progress.schemas import (
    KnownFlashcardsResponse,
    ProgressSummaryResponse,
    UserProgressResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/known", response_model=KnownFlashcardsResponse, status_code=status.HTTP_200_OK)
def get_known_flashcards(
    identity: CurrentIdentity,
    use_case: FlashcardProgressUseCase = Depends(
        inject_use_case(container.flashcard_progress_use_case)
    ),
) -> KnownFlashcardsResponse:
    """
    Get the flashcards the caller has marked as known.

    Raises:
        HTTPException: If fetching progress fails unexpectedly
    """
    try:
        known = use_case.get_known_flashcard_ids(identity)
        return KnownFlashcardsResponse(flashcard_ids=sorted(known))
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch known flashcards: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put(
    "/known/{flashcard_id}",
    response_model=UserProgressResponse,
    status_code=status.HTTP_200_OK,
)
def mark_flashcard_known(
    identity: CurrentIdentity,
    flashcard_id: int = Path(..., ge=0),
    use_case: FlashcardProgressUseCase = Depends(
        inject_use_case(container.flashcard_progress_use_case)
    ),
) -> UserProgressResponse:
    """
    Mark a flashcard as known. Repeating the call is a no-op.

    Args:
        identity: Caller resolved from the bearer token
        flashcard_id: ID of the flashcard
        use_case: FlashcardProgressUseCase injected via dependency container

    Returns:
        The stored progress row

    Raises:
        HTTPException: If the update fails unexpectedly
    """
    try:
        progress = use_case.mark_known(identity, flashcard_id)
        return UserProgressResponse(
            id=progress.id.value,
            user_id=progress.user_id.value,
            flashcard_id=progress.flashcard_id.value,
            known=progress.known,
        )
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to mark flashcard {flashcard_id} as known: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/summary", response_model=ProgressSummaryResponse, status_code=status.HTTP_200_OK)
def get_progress_summary(
    identity: CurrentIdentity,
    use_case: FlashcardProgressUseCase = Depends(
        inject_use_case(container.flashcard_progress_use_case)
    ),
) -> ProgressSummaryResponse:
    """
    Summarize how much of the catalog the caller knows.

    Raises:
        HTTPException: If computing the summary fails unexpectedly
    """
    try:
        summary = use_case.get_progress_summary(identity)
        return ProgressSummaryResponse(
            known=summary.known, total=summary.total, percentage=summary.percentage
        )
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to summarize progress: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
