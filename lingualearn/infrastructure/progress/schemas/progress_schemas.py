"""Pydantic schemas for flashcard progress."""

from uuid import UUID

from pydantic import BaseModel, Field


class UserProgressResponse(BaseModel):
    """Schema for a stored progress row."""

    id: UUID
    user_id: UUID
    flashcard_id: int
    known: bool


class KnownFlashcardsResponse(BaseModel):
    """Schema for the caller's known flashcards."""

    flashcard_ids: list[int] = Field(..., description="Known flashcard ids, ascending")


class ProgressSummaryResponse(BaseModel):
    """Schema for the caller's mastery summary."""

    known: int
    total: int
    percentage: float = Field(..., description="Share of known flashcards, 0-100")
