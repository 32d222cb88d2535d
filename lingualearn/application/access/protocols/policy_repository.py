"""Protocol for the row-level policy catalog."""

from typing import Protocol

from lingualearn.domain.access.policy import Policy


class PolicyRepositoryProtocol(Protocol):
    """Protocol for reading the policy catalog."""

    def find_all(self) -> list[Policy]:
        """
        Load every registered policy.

        Returns:
            Policies in registration order
        """
        ...
