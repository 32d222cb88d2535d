"""Protocol for Level repository."""

from typing import Protocol

from lingualearn.domain.catalog.entities.level import Level
from lingualearn.domain.common.value_objects import LevelId, UserId


class LevelRepositoryProtocol(Protocol):
    """Protocol for Level repository operations."""

    def find_all(self, identity: UserId | None) -> list[Level]:
        """
        Get every level.

        Returns:
            Level entities ordered by ``order``
        """
        ...

    def find_by_id(self, identity: UserId | None, level_id: LevelId) -> Level | None:
        ...
