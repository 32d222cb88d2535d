"""Pydantic schemas for quiz attempts."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class QuizAttemptCreateRequest(BaseModel):
    """Schema for submitting an answer."""

    answer: str = Field(..., description="Answer text; surrounding whitespace is ignored")


class QuizAttemptResponse(BaseModel):
    """Schema for a graded attempt."""

    id: UUID
    quiz_id: UUID
    answer: str
    is_correct: bool
    created_at: datetime | None = None


class QuizAttemptsListResponse(BaseModel):
    """Schema for list of attempts response."""

    attempts: list[QuizAttemptResponse] = Field(..., description="Attempts, newest first")
