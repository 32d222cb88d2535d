"""Pydantic schemas for Flashcard API responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class Flashcard(BaseModel):
    """Schema for Flashcard response."""

    id: int
    word: str = Field(..., description="Word in the learner's language")
    translation: str = Field(..., description="Translation in the target language")
    category: str
    level_id: int | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class FlashcardsListResponse(BaseModel):
    """Schema for list of flashcards response."""

    flashcards: list[Flashcard] = Field(..., description="Flashcards ordered by id")
