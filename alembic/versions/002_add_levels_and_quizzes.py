"""Add levels and quizzes support.

Revision ID: 002
Revises: 001
Create Date: 2025-04-03

Creates:
1. levels - ordered difficulty tiers with a pass mark
2. quizzes - multiple-choice questions per level
3. user_levels - one result row per (user_id, level_id)
4. quiz_attempts - append-only answer log
5. flashcards.level_id - optional level of a flashcard
6. Policies for the new tables
7. Four seed levels and one seed quiz per level
"""

from collections.abc import Sequence
from uuid import uuid4

import sqlalchemy as sa

from alembic import op
from lingualearn.infrastructure.migrations.guards import (
    add_column_if_absent,
    create_index_if_absent,
    create_policy_if_absent,
    create_table_if_absent,
    drop_policy,
    insert_if_absent,
)

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | Sequence[str] | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

SEED_LEVELS = [
    ("Beginner", "Basic vocabulary and simple phrases", 1, 70),
    ("Elementary", "Common expressions and basic grammar", 2, 75),
    ("Intermediate", "Complex sentences and conversations", 3, 80),
    ("Advanced", "Fluent conversations and idioms", 4, 85),
]

# (level order, question, correct answer, options)
SEED_QUIZZES = [
    (1, 'What is "Hello" in Spanish?', "Hola", ["Hola", "Adios", "Gracias", "Por favor"]),
    (
        2,
        'Which is the correct way to say "I am hungry" in Spanish?',
        "Tengo hambre",
        ["Estoy hambre", "Tengo hambre", "Soy hambre", "Estar hambre"],
    ),
    (
        3,
        'What is the correct conjugation of "to be" in "I am happy"?',
        "Estoy feliz",
        ["Soy feliz", "Estoy feliz", "Estar feliz", "Es feliz"],
    ),
    (
        4,
        'Which is the correct subjunctive form in: "I hope that..."?',
        "Espero que",
        ["Espero que", "Espero", "Esperando que", "Esperé que"],
    ),
]

POLICIES = [
    ("Levels are viewable by authenticated users", "levels", "SELECT", "authenticated", None),
    ("Quizzes are viewable by authenticated users", "quizzes", "SELECT", "authenticated", None),
    ("Users can view their own level progress", "user_levels", "SELECT", "owner", None),
    ("Users can insert their own level progress", "user_levels", "INSERT", None, "owner"),
    ("Users can insert their own quiz attempts", "quiz_attempts", "INSERT", None, "owner"),
    ("Users can view their own quiz attempts", "quiz_attempts", "SELECT", "owner", None),
]


def upgrade() -> None:
    """Create level/quiz tables, link flashcards to levels, seed catalog."""
    create_table_if_absent(
        "levels",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("required_score", sa.Integer(), nullable=False, server_default="70"),
        sa.UniqueConstraint("order", name="uq_levels_order"),
    )

    create_table_if_absent(
        "quizzes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("level_id", sa.Integer(), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("correct_answer", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(["level_id"], ["levels.id"]),
    )

    create_table_if_absent(
        "user_levels",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("level_id", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Boolean(), server_default=sa.false()),
        sa.Column("score", sa.Integer(), server_default="0"),
        sa.Column("accuracy", sa.Float(), server_default="0"),
        sa.ForeignKeyConstraint(["level_id"], ["levels.id"]),
        sa.UniqueConstraint("user_id", "level_id", name="uq_user_levels_user_level"),
    )
    create_index_if_absent("ix_user_levels_user_id", "user_levels", ["user_id"])

    create_table_if_absent(
        "quiz_attempts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("quiz_id", sa.Uuid(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
        ),
        sa.ForeignKeyConstraint(["quiz_id"], ["quizzes.id"]),
    )
    create_index_if_absent("ix_quiz_attempts_user_id", "quiz_attempts", ["user_id"])

    add_column_if_absent(
        "flashcards",
        sa.Column("level_id", sa.Integer(), nullable=True),
        foreign_key=("fk_flashcards_level_id_levels", "levels", "id"),
    )

    for name, table_name, command, using, check in POLICIES:
        create_policy_if_absent(name, table_name, command, using=using, check=check)

    levels = sa.table(
        "levels",
        sa.column("id", sa.Integer),
        sa.column("name", sa.Text),
        sa.column("description", sa.Text),
        sa.column("order", sa.Integer),
        sa.column("required_score", sa.Integer),
    )
    for name, description, order, required_score in SEED_LEVELS:
        insert_if_absent(
            levels,
            {"order": order},
            {"name": name, "description": description, "required_score": required_score},
        )

    quizzes = sa.table(
        "quizzes",
        sa.column("id", sa.Uuid),
        sa.column("level_id", sa.Integer),
        sa.column("question", sa.Text),
        sa.column("correct_answer", sa.Text),
        sa.column("options", sa.JSON),
    )
    bind = op.get_bind()
    for order, question, correct_answer, options in SEED_QUIZZES:
        level_id = bind.execute(sa.select(levels.c.id).where(levels.c.order == order)).scalar()
        if level_id is None:
            continue
        insert_if_absent(
            quizzes,
            {"level_id": level_id, "question": question},
            {"id": uuid4(), "correct_answer": correct_answer, "options": options},
        )


def downgrade() -> None:
    """Drop level/quiz tables and their policies."""
    for name, table_name, *_ in POLICIES:
        drop_policy(table_name, name)

    with op.batch_alter_table("flashcards") as batch_op:
        batch_op.drop_constraint("fk_flashcards_level_id_levels", type_="foreignkey")
        batch_op.drop_column("level_id")

    op.drop_index("ix_quiz_attempts_user_id", table_name="quiz_attempts")
    op.drop_table("quiz_attempts")
    op.drop_index("ix_user_levels_user_id", table_name="user_levels")
    op.drop_table("user_levels")
    op.drop_table("quizzes")
    op.drop_table("levels")
