"""DTOs for progress use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressSummary:
    """How many flashcards the caller has mastered."""

    known: int
    total: int

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return round(100 * self.known / self.total, 1)
