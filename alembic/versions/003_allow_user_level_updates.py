"""Allow users to update their own level progress.

Revision ID: 003
Revises: 002
Create Date: 2025-04-03

Level results are written with an upsert on (user_id, level_id), which needs
an UPDATE policy next to the INSERT one. The owner must hold both before and
after the write so a row can never be reassigned to another identity.
"""

from collections.abc import Sequence

from lingualearn.infrastructure.migrations.guards import create_policy_if_absent, drop_policy

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: str | Sequence[str] | None = "002"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

POLICY_NAME = "Users can update their own level progress"


def upgrade() -> None:
    """Add the user_levels UPDATE policy."""
    create_policy_if_absent(POLICY_NAME, "user_levels", "UPDATE", using="owner", check="owner")


def downgrade() -> None:
    """Remove the user_levels UPDATE policy."""
    drop_policy("user_levels", POLICY_NAME)
