"""Pydantic schemas for Level and Quiz API responses."""

from uuid import UUID

from pydantic import BaseModel, Field


class Level(BaseModel):
    """Schema for Level response."""

    id: int
    name: str
    description: str | None = None
    order: int = Field(..., description="Position of the level in the learning path")
    required_score: int = Field(..., description="Score (0-100) needed to complete the level")


class LevelsListResponse(BaseModel):
    """Schema for list of levels response."""

    levels: list[Level]


class Quiz(BaseModel):
    """Schema for Quiz response; the correct answer is never sent to clients."""

    id: UUID
    level_id: int
    question: str
    options: list[str]


class QuizzesListResponse(BaseModel):
    """Schema for list of quizzes response."""

    quizzes: list[Quiz]
