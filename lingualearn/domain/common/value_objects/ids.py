from dataclasses import dataclass

from ..entity import EntityId, UuidEntityId


@dataclass(frozen=True)
class UserId(UuidEntityId):
    """Opaque identity of an authenticated subject, issued by the session provider."""


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("FlashcardId must be non-negative")

    @classmethod
    def generate(cls) -> "FlashcardId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class LevelId(EntityId):
    """Strongly-typed level identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("LevelId must be non-negative")


@dataclass(frozen=True)
class QuizId(UuidEntityId):
    """Strongly-typed quiz identifier."""


@dataclass(frozen=True)
class UserProgressId(UuidEntityId):
    """Strongly-typed user progress identifier."""


@dataclass(frozen=True)
class UserLevelId(UuidEntityId):
    """Strongly-typed user level identifier."""


@dataclass(frozen=True)
class QuizAttemptId(UuidEntityId):
    """Strongly-typed quiz attempt identifier."""
