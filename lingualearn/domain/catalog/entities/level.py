"""Level entity."""

from dataclasses import dataclass

from lingualearn.domain.common.entity import Entity
from lingualearn.domain.common.exceptions import ValidationError
from lingualearn.domain.common.value_objects import LevelId

DEFAULT_REQUIRED_SCORE = 70
MAX_SCORE = 100


@dataclass
class Level(Entity[LevelId]):
    """
    A difficulty tier.

    Business Rules:
    - Name cannot be empty
    - ``order`` is the unique sequencing key (positive)
    - ``required_score`` is a percentage between 0 and 100
    """

    id: LevelId
    name: str
    order: int
    required_score: int = DEFAULT_REQUIRED_SCORE
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Name cannot be empty", field="name")
        if self.order <= 0:
            raise ValidationError("Order must be positive", field="order", value=self.order)
        if not 0 <= self.required_score <= MAX_SCORE:
            raise ValidationError(
                "Required score must be between 0 and 100",
                field="required_score",
                value=self.required_score,
            )

    def is_passed_by(self, score: int) -> bool:
        """Whether ``score`` reaches this level's pass mark."""
        return score >= self.required_score
