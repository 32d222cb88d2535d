"""
Access bounded context - Domain layer.

Row-level authorization: every read and write against a table is gated by
the policies declared for that table and command. Anything without a
matching policy is denied.
"""

from lingualearn.domain.access.policy import Command, Policy, Rule
from lingualearn.domain.access.services.policy_engine import PolicyEngine

__all__ = [
    "Command",
    "Policy",
    "PolicyEngine",
    "Rule",
]
