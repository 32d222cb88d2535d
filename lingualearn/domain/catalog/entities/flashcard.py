"""
Flashcard entity for vocabulary learning.
"""

from dataclasses import dataclass
from datetime import datetime

from lingualearn.domain.common.entity import Entity
from lingualearn.domain.common.exceptions import ValidationError
from lingualearn.domain.common.value_objects import FlashcardId, LevelId


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    A word and its translation.

    Business Rules:
    - Word, translation and category cannot be empty
    - Flashcard can optionally belong to a level
    """

    id: FlashcardId
    word: str
    translation: str
    category: str
    level_id: LevelId | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        for field_name in ("word", "translation", "category"):
            value = getattr(self, field_name)
            if not value or not value.strip():
                raise ValidationError(f"{field_name.capitalize()} cannot be empty", field=field_name)

    @classmethod
    def create(
        cls,
        word: str,
        translation: str,
        category: str,
        level_id: LevelId | None = None,
    ) -> "Flashcard":
        """Create a new flashcard (ID will be 0 until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            word=word.strip(),
            translation=translation.strip(),
            category=category.strip(),
            level_id=level_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        word: str,
        translation: str,
        category: str,
        created_at: datetime | None,
        level_id: LevelId | None = None,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            word=word,
            translation=translation,
            category=category,
            level_id=level_id,
            created_at=created_at,
        )
