"""API routes for answering quizzes."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lingualearn.application.progress.use_cases.quiz_attempt_use_case import QuizAttemptUseCase
from lingualearn.core import container
from lingualearn.domain.common.exceptions import DomainError
from lingualearn.domain.progress.entities import QuizAttempt
from lingualearn.exceptions import LinguaLearnError
from lingualearn.infrastructure.common.di import inject_use_case
from lingualearn.infrastructure.identity.dependencies import CurrentIdentity
from lingualearn.infrastructure.progress.schemas import (
    QuizAttemptCreateRequest,
    QuizAttemptResponse,
    QuizAttemptsListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quizzes", tags=["quizzes"])


def attempt_to_schema(attempt: QuizAttempt) -> QuizAttemptResponse:
    return QuizAttemptResponse(
        id=attempt.id.value,
        quiz_id=attempt.quiz_id.value,
        answer=attempt.answer,
        is_correct=attempt.is_correct,
        created_at=attempt.created_at,
    )


@router.post(
    "/{quiz_id}/attempts",
    response_model=QuizAttemptResponse,
    status_code=status.HTTP_201_CREATED,
)
def submit_quiz_attempt(
    quiz_id: UUID,
    request: QuizAttemptCreateRequest,
    identity: CurrentIdentity,
    use_case: QuizAttemptUseCase = Depends(inject_use_case(container.quiz_attempt_use_case)),
) -> QuizAttemptResponse:
    """
    Grade an answer and record the attempt.

    Args:
        quiz_id: ID of the quiz being answered
        request: Request containing the answer
        identity: Caller resolved from the bearer token
        use_case: QuizAttemptUseCase injected via dependency container

    Returns:
        The graded attempt

    Raises:
        HTTPException: If recording the attempt fails unexpectedly
    """
    try:
        attempt = use_case.submit_quiz_attempt(identity, quiz_id, request.answer)
        return attempt_to_schema(attempt)
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to submit attempt for quiz {quiz_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/attempts", response_model=QuizAttemptsListResponse, status_code=status.HTTP_200_OK)
def list_quiz_attempts(
    identity: CurrentIdentity,
    quiz_id: Annotated[UUID | None, Query(description="Only attempts on this quiz")] = None,
    use_case: QuizAttemptUseCase = Depends(inject_use_case(container.quiz_attempt_use_case)),
) -> QuizAttemptsListResponse:
    """
    List the caller's attempts, newest first.

    Raises:
        HTTPException: If fetching attempts fails unexpectedly
    """
    try:
        attempts = use_case.list_quiz_attempts(identity, quiz_id)
        return QuizAttemptsListResponse(attempts=[attempt_to_schema(a) for a in attempts])
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list quiz attempts: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
