"""Initial schema: flashcards, per-user progress and the policy catalog.

Revision ID: 001
Revises:
Create Date: 2025-04-03

Creates:
1. flashcards - vocabulary catalog
2. users_progress - one row per (user_id, flashcard_id)
3. row_policies - row-level policy catalog evaluated by the access layer
4. Policies: flashcards readable by any authenticated identity, progress
   readable and writable only by its owner
5. Five seed flashcards
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op
from lingualearn.infrastructure.migrations.guards import (
    create_index_if_absent,
    create_policy_if_absent,
    create_table_if_absent,
    insert_if_absent,
)

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

SEED_FLASHCARDS = [
    ("Hello", "Hola", "Greetings"),
    ("Goodbye", "Adiós", "Greetings"),
    ("Thank you", "Gracias", "Common Phrases"),
    ("Please", "Por favor", "Common Phrases"),
    ("Good morning", "Buenos días", "Greetings"),
]


def upgrade() -> None:
    """Create tables, policies and seed flashcards."""
    create_table_if_absent(
        "flashcards",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("word", sa.Text(), nullable=False),
        sa.Column("translation", sa.Text(), nullable=False),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
    )

    create_table_if_absent(
        "users_progress",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("flashcard_id", sa.Integer(), nullable=False),
        sa.Column("known", sa.Boolean(), server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.ForeignKeyConstraint(["flashcard_id"], ["flashcards.id"]),
        sa.UniqueConstraint("user_id", "flashcard_id", name="uq_users_progress_user_flashcard"),
    )
    create_index_if_absent("ix_users_progress_user_id", "users_progress", ["user_id"])

    create_table_if_absent(
        "row_policies",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("table_name", sa.String(100), nullable=False),
        sa.Column("command", sa.String(10), nullable=False),
        sa.Column("using_rule", sa.String(20), nullable=True),
        sa.Column("check_rule", sa.String(20), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.UniqueConstraint("table_name", "name", name="uq_row_policies_table_name"),
    )

    create_policy_if_absent(
        "Flashcards are viewable by authenticated users",
        "flashcards",
        "SELECT",
        using="authenticated",
    )
    create_policy_if_absent(
        "Users can view their own progress",
        "users_progress",
        "SELECT",
        using="owner",
    )
    create_policy_if_absent(
        "Users can insert their own progress",
        "users_progress",
        "INSERT",
        check="owner",
    )
    create_policy_if_absent(
        "Users can update their own progress",
        "users_progress",
        "UPDATE",
        using="owner",
        check="owner",
    )

    flashcards = sa.table(
        "flashcards",
        sa.column("word", sa.Text),
        sa.column("translation", sa.Text),
        sa.column("category", sa.Text),
    )
    for word, translation, category in SEED_FLASHCARDS:
        insert_if_absent(
            flashcards,
            {"word": word},
            {"translation": translation, "category": category},
        )


def downgrade() -> None:
    """Drop tables created by this revision."""
    op.drop_table("row_policies")
    op.drop_index("ix_users_progress_user_id", table_name="users_progress")
    op.drop_table("users_progress")
    op.drop_table("flashcards")
