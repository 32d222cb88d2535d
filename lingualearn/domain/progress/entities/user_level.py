"""UserLevel entity."""

from dataclasses import dataclass

from lingualearn.domain.common.entity import Entity
from lingualearn.domain.common.exceptions import ValidationError
from lingualearn.domain.common.value_objects import LevelId, UserId, UserLevelId


@dataclass
class UserLevel(Entity[UserLevelId]):
    """
    A user's result for one level.

    Business Rules:
    - One row per (user_id, level_id)
    - Score is a percentage between 0 and 100
    - Accuracy is a fraction between 0 and 1
    """

    id: UserLevelId
    user_id: UserId
    level_id: LevelId
    completed: bool = False
    score: int = 0
    accuracy: float = 0.0

    def __post_init__(self) -> None:
        if not 0 <= self.score <= 100:
            raise ValidationError("Score must be between 0 and 100", field="score", value=self.score)
        if not 0.0 <= self.accuracy <= 1.0:
            raise ValidationError(
                "Accuracy must be between 0 and 1", field="accuracy", value=self.accuracy
            )
