"""API routes for levels and their quizzes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from lingualearn.application.catalog.use_cases.level_catalog_use_case import LevelCatalogUseCase
from lingualearn.core import container
from lingualearn.domain.catalog.entities import Level as LevelEntity
from lingualearn.domain.common.exceptions import DomainError
from lingualearn.exceptions import LinguaLearnError
from lingualearn.infrastructure.catalog.schemas import (
    Level,
    LevelsListResponse,
    Quiz,
    QuizzesListResponse,
)
from lingualearn.infrastructure.common.di import inject_use_case
from lingualearn.infrastructure.identity.dependencies import CurrentIdentity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/levels", tags=["levels"])


def level_to_schema(level: LevelEntity) -> Level:
    return Level(
        id=level.id.value,
        name=level.name,
        description=level.description,
        order=level.order,
        required_score=level.required_score,
    )


@router.get("", response_model=LevelsListResponse, status_code=status.HTTP_200_OK)
def list_levels(
    identity: CurrentIdentity,
    use_case: LevelCatalogUseCase = Depends(inject_use_case(container.level_catalog_use_case)),
) -> LevelsListResponse:
    """
    List levels in learning-path order.

    Raises:
        HTTPException: If fetching levels fails unexpectedly
    """
    try:
        levels = use_case.list_levels(identity)
        return LevelsListResponse(levels=[level_to_schema(level) for level in levels])
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list levels: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{level_id}/quizzes",
    response_model=QuizzesListResponse,
    status_code=status.HTTP_200_OK,
)
def list_level_quizzes(
    identity: CurrentIdentity,
    level_id: int = Path(..., ge=0),
    use_case: LevelCatalogUseCase = Depends(inject_use_case(container.level_catalog_use_case)),
) -> QuizzesListResponse:
    """
    List the quizzes of a level.

    Args:
        identity: Caller resolved from the bearer token
        level_id: ID of the level
        use_case: LevelCatalogUseCase injected via dependency container

    Returns:
        Quizzes without their correct answers

    Raises:
        HTTPException: If fetching quizzes fails unexpectedly
    """
    try:
        quizzes = use_case.list_level_quizzes(identity, level_id)
        return QuizzesListResponse(
            quizzes=[
                Quiz(
                    id=quiz.id.value,
                    level_id=quiz.level_id.value,
                    question=quiz.question,
                    options=quiz.options,
                )
                for quiz in quizzes
            ]
        )
    except (LinguaLearnError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list quizzes for level {level_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
