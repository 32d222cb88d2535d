"""Protocol for UserLevel repository."""

from typing import Protocol

from lingualearn.domain.common.value_objects import UserId
from lingualearn.domain.progress.entities.user_level import UserLevel


class UserLevelRepositoryProtocol(Protocol):
    """Protocol for UserLevel repository operations."""

    def find_by_user(self, identity: UserId | None) -> list[UserLevel]:
        ...

    def upsert(self, identity: UserId | None, user_level: UserLevel) -> UserLevel:
        """Insert or update the row keyed by (user_id, level_id)."""
        ...
