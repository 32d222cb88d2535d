"""API routes for level results and the learning path."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from lingualearn.application.progress.use_cases.level_progress_use_case import (
    LevelProgressUseCase,
)
from lingualearn.core import container
from lingualearn.domain.common.exceptions import DomainError
from lingualearn.exceptions import LinguaLearnError
from lingualearn.infrastructure.catalog.routers.levels import level_to_schema
from lingualearn.infrastructure.common.di import inject_use_case
from lingualearn.infrastructure.identity.dependencies import CurrentIdentity
from lingualearn.infrastructure.progress.schemas import (
    LevelProgress,
    LevelProgressListResponse,
    UserLevelResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/levels", tags=["levels"])


@router.get("/progress", response_model=LevelProgressListResponse, status_code=status.HTTP_200_OK)
def list_level_progress(
    identity: CurrentIdentity,
    use_case: LevelProgressUseCase = Depends(inject_use_case(container.level_progress_use_case)),
) -> LevelProgressListResponse:
    """
    Get every level with the caller's result and whether it is unlocked.

    Raises:
        HTTPException: If fetching level progress fails unexpectedly
    """
    try:
        statuses = use_case.list_level_progress(identity)
        return LevelProgressListResponse(
            levels=[
                LevelProgress(
                    level=level_to_schema(item.level),
                    completed=item.result.completed if item.result else False,
                    score=item.result.score if item.result else 0,
                    accuracy=item.result.accuracy if item.result else 0.0,
                    unlocked=item.unlocked,
                )
                for item in statuses
            ]
        )
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list level progress: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{level_id}/evaluate",
    response_model=UserLevelResponse,
    status_code=status.HTTP_200_OK,
)
def evaluate_level(
    identity: CurrentIdentity,
    level_id: int = Path(..., ge=0),
    use_case: LevelProgressUseCase = Depends(inject_use_case(container.level_progress_use_case)),
) -> UserLevelResponse:
    """
    Recompute and store the caller's result for a level.

    Args:
        identity: Caller resolved from the bearer token
        level_id: ID of the level
        use_case: LevelProgressUseCase injected via dependency container

    Returns:
        The stored result

    Raises:
        HTTPException: If the evaluation fails unexpectedly
    """
    try:
        result = use_case.evaluate_level(identity, level_id)
        return UserLevelResponse(
            level_id=result.level_id.value,
            completed=result.completed,
            score=result.score,
            accuracy=result.accuracy,
        )
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to evaluate level {level_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
