"""Access infrastructure layer."""

from lingualearn.infrastructure.access.repositories.policy_repository import PolicyRepository
from lingualearn.infrastructure.access.row_security import RowSecurity

__all__ = ["PolicyRepository", "RowSecurity"]
