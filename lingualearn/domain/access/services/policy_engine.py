"""
Deny-by-default evaluation of row-level policies.

Semantics follow PostgreSQL row security: policies for the same table and
command are permissive and OR-ed together, a request with no identity is
never granted anything, and a table/command pair without any policy is
closed.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping

import structlog

from lingualearn.domain.access.policy import Command, Policy, Rule
from lingualearn.domain.common.exceptions import AuthorizationError
from lingualearn.domain.common.value_objects import UserId

logger = structlog.get_logger(__name__)

Row = Mapping[str, object]


class AuthenticationRequiredError(AuthorizationError):
    """Raised when a request carries no authenticated identity."""

    def __init__(self, table: str, command: Command) -> None:
        super().__init__("Authentication required", table=table, command=command.value)


class PolicyEngine:
    """Evaluates the policies of every table for a given identity."""

    def __init__(self, policies: Iterable[Policy]) -> None:
        self._policies: dict[tuple[str, Command], list[Policy]] = defaultdict(list)
        for policy in policies:
            self._policies[(policy.table, policy.command)].append(policy)

    def policies_for(self, table: str, command: Command) -> list[Policy]:
        return list(self._policies.get((table, command), ()))

    def allows(
        self,
        identity: UserId | None,
        table: str,
        command: Command,
        row: Row,
        existing: Row | None = None,
    ) -> bool:
        """
        Check whether ``identity`` may run ``command`` on ``row``.

        For UPDATE, ``existing`` is the row before the write and must satisfy
        the using rule while ``row`` must satisfy the check rule. Without an
        explicit check rule, UPDATE reuses the using rule for the new row.
        """
        if identity is None:
            return False

        for policy in self.policies_for(table, command):
            if self._policy_allows(policy, identity, command, row, existing):
                return True
        return False

    def authorize(
        self,
        identity: UserId | None,
        table: str,
        command: Command,
        row: Row,
        existing: Row | None = None,
    ) -> None:
        """
        Raise unless the write or read of ``row`` is allowed.

        Raises:
            AuthenticationRequiredError: If there is no identity
            AuthorizationError: If no policy grants the command
        """
        if identity is None:
            raise AuthenticationRequiredError(table, command)
        if not self.allows(identity, table, command, row, existing):
            logger.info("policy_denied", table=table, command=command.value)
            raise AuthorizationError(
                f"{command.value} on {table} is not permitted", table=table, command=command.value
            )

    def authorize_upsert(self, identity: UserId | None, table: str, row: Row) -> None:
        """
        Authorize an insert-or-update keyed on a constraint that includes ``user_id``.

        The conflicting row, if any, shares the owner of ``row``, so it stands in
        for the existing row of the UPDATE branch.
        """
        self.authorize(identity, table, Command.INSERT, row)
        self.authorize(identity, table, Command.UPDATE, row, existing=row)

    def read_rule(self, identity: UserId | None, table: str) -> Rule:
        """
        Return the most permissive SELECT rule available to ``identity``.

        Raises:
            AuthenticationRequiredError: If there is no identity
            AuthorizationError: If the table has no SELECT policy
        """
        if identity is None:
            raise AuthenticationRequiredError(table, Command.SELECT)

        rules = {policy.using for policy in self.policies_for(table, Command.SELECT)}
        if Rule.AUTHENTICATED in rules:
            return Rule.AUTHENTICATED
        if Rule.OWNER in rules:
            return Rule.OWNER

        logger.info("policy_denied", table=table, command=Command.SELECT.value)
        raise AuthorizationError(
            f"SELECT on {table} is not permitted", table=table, command=Command.SELECT.value
        )

    @staticmethod
    def _policy_allows(
        policy: Policy,
        identity: UserId,
        command: Command,
        row: Row,
        existing: Row | None,
    ) -> bool:
        if command is Command.INSERT:
            return policy.check is not None and policy.check.holds(identity, row)

        if command is Command.UPDATE:
            before = existing if existing is not None else row
            if policy.using is not None and not policy.using.holds(identity, before):
                return False
            after_rule = policy.check or policy.using
            return after_rule is not None and after_rule.holds(identity, row)

        return policy.using is not None and policy.using.holds(identity, row)
