"""
Row-level security gate used by every repository.

All statements against policy-protected tables are scoped or checked here,
so the view layer never reaches the data store without passing through the
policy engine.
"""

from collections.abc import Generator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import Select, select

from lingualearn.application.access.protocols.policy_repository import (
    PolicyRepositoryProtocol,
)
from lingualearn.domain.access.policy import OWNER_COLUMN, Command, Rule
from lingualearn.domain.access.services.policy_engine import (
    AuthenticationRequiredError as PolicyAuthenticationRequired,
)
from lingualearn.domain.access.services.policy_engine import PolicyEngine
from lingualearn.domain.common.exceptions import AuthorizationError
from lingualearn.domain.common.value_objects import UserId
from lingualearn.exceptions import AccessDeniedError, AuthenticationRequiredError

ModelT = TypeVar("ModelT")


class RowSecurity:
    """Applies the policy engine to SQLAlchemy statements."""

    def __init__(self, policy_repository: PolicyRepositoryProtocol) -> None:
        self.policy_repository = policy_repository
        self._engine: PolicyEngine | None = None

    @property
    def engine(self) -> PolicyEngine:
        if self._engine is None:
            self._engine = PolicyEngine(self.policy_repository.find_all())
        return self._engine

    def select(self, identity: UserId | None, model: type[ModelT]) -> Select[tuple[ModelT]]:
        """
        Start a SELECT on ``model`` restricted to the rows ``identity`` may see.

        Raises:
            AuthenticationRequiredError: If there is no identity
            AccessDeniedError: If the table has no SELECT policy
        """
        table_name = _table_name(model)
        with _translate_denials():
            rule = self.engine.read_rule(identity, table_name)

        stmt = select(model)
        if rule is Rule.OWNER:
            if identity is None:
                raise AuthenticationRequiredError()
            stmt = stmt.where(getattr(model, OWNER_COLUMN) == identity.value)
        return stmt

    def check_insert(self, identity: UserId | None, model: type, row: Mapping[str, Any]) -> None:
        with _translate_denials():
            self.engine.authorize(identity, _table_name(model), Command.INSERT, row)

    def check_update(
        self,
        identity: UserId | None,
        model: type,
        row: Mapping[str, Any],
        existing: Mapping[str, Any],
    ) -> None:
        with _translate_denials():
            self.engine.authorize(identity, _table_name(model), Command.UPDATE, row, existing)

    def check_upsert(self, identity: UserId | None, model: type, row: Mapping[str, Any]) -> None:
        with _translate_denials():
            self.engine.authorize_upsert(identity, _table_name(model), row)


def _table_name(model: type) -> str:
    return model.__tablename__  # type: ignore[attr-defined, no-any-return]


@contextmanager
def _translate_denials() -> Generator[None, None, None]:
    """Turn policy-engine denials into access-layer errors."""
    try:
        yield
    except PolicyAuthenticationRequired as e:
        raise AuthenticationRequiredError() from e
    except AuthorizationError as e:
        raise AccessDeniedError(e.message) from e
