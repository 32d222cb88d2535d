"""Pydantic schemas for level results."""

from pydantic import BaseModel, Field

from lingualearn.infrastructure.catalog.schemas.level_schemas import Level


class UserLevelResponse(BaseModel):
    """Schema for the caller's result on one level."""

    level_id: int
    completed: bool
    score: int = Field(..., description="Percentage of the level's quizzes answered correctly")
    accuracy: float = Field(..., description="Correct attempts over all attempts, 0-1")


class LevelProgress(BaseModel):
    """Schema for a level with the caller's result."""

    level: Level
    completed: bool = False
    score: int = 0
    accuracy: float = 0.0
    unlocked: bool


class LevelProgressListResponse(BaseModel):
    """Schema for the learning path."""

    levels: list[LevelProgress]
