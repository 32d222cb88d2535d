"""Row-level policy value objects."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from lingualearn.domain.common.exceptions import ValidationError
from lingualearn.domain.common.value_object import ValueObject
from lingualearn.domain.common.value_objects import UserId

OWNER_COLUMN = "user_id"


class Command(StrEnum):
    """Statement kind a policy applies to."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Rule(StrEnum):
    """Predicate over (identity, row)."""

    AUTHENTICATED = "authenticated"
    OWNER = "owner"

    def holds(self, identity: UserId, row: Mapping[str, object]) -> bool:
        """Evaluate the rule for an authenticated identity."""
        if self is Rule.AUTHENTICATED:
            return True
        return row.get(OWNER_COLUMN) == identity.value


@dataclass(frozen=True)
class Policy(ValueObject):
    """
    A named, permissive policy on one table and one command.

    ``using`` filters existing rows (SELECT, UPDATE, DELETE); ``check``
    validates the row being written (INSERT, UPDATE). Only authenticated
    identities are ever granted anything.
    """

    name: str
    table: str
    command: Command
    using: Rule | None = None
    check: Rule | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValidationError("Policy name cannot be empty", field="name")
        if self.command is Command.INSERT and self.using is not None:
            raise ValidationError("INSERT policies only take a check rule", field="using")
        if self.command in (Command.SELECT, Command.DELETE) and self.check is not None:
            raise ValidationError(
                f"{self.command} policies only take a using rule", field="check"
            )
        if self.using is None and self.check is None:
            raise ValidationError("Policy needs a using or check rule", field="using")
