"""
Existence guards for alembic revisions.

Every schema-evolution step goes through one of these helpers so that the
migration log can be replayed from empty, from any prefix-applied state, or
on top of an already-migrated database without failing on duplicate
objects or duplicating seed rows.
"""

from collections.abc import Mapping

import sqlalchemy as sa
import structlog
from alembic import op

logger = structlog.get_logger(__name__)

ROW_POLICIES = sa.table(
    "row_policies",
    sa.column("name", sa.String),
    sa.column("table_name", sa.String),
    sa.column("command", sa.String),
    sa.column("using_rule", sa.String),
    sa.column("check_rule", sa.String),
)


def table_exists(table_name: str) -> bool:
    return sa.inspect(op.get_bind()).has_table(table_name)


def column_exists(table_name: str, column_name: str) -> bool:
    columns = sa.inspect(op.get_bind()).get_columns(table_name)
    return any(column["name"] == column_name for column in columns)


def create_table_if_absent(table_name: str, *elements: sa.schema.SchemaItem) -> bool:
    """Create ``table_name`` unless it already exists. Returns True when created."""
    if table_exists(table_name):
        logger.info("migration_skip_table", table=table_name)
        return False
    op.create_table(table_name, *elements)
    return True


def create_index_if_absent(
    index_name: str, table_name: str, columns: list[str], *, unique: bool = False
) -> bool:
    indexes = sa.inspect(op.get_bind()).get_indexes(table_name)
    if any(index["name"] == index_name for index in indexes):
        return False
    op.create_index(index_name, table_name, columns, unique=unique)
    return True


def add_column_if_absent(
    table_name: str,
    column: sa.Column,
    *,
    foreign_key: tuple[str, str, str] | None = None,
) -> bool:
    """
    Add ``column`` unless the table already has it.

    Args:
        table_name: Table to alter
        column: Column definition (without an inline ForeignKey)
        foreign_key: Optional (constraint name, referent table, referent column)

    Runs in batch mode so SQLite can rebuild the table for the constraint.
    """
    if column_exists(table_name, column.name):
        logger.info("migration_skip_column", table=table_name, column=column.name)
        return False

    with op.batch_alter_table(table_name) as batch_op:
        batch_op.add_column(column)
        if foreign_key is not None:
            constraint_name, referent_table, referent_column = foreign_key
            batch_op.create_foreign_key(
                constraint_name, referent_table, [column.name], [referent_column]
            )
    return True


def policy_exists(table_name: str, policy_name: str) -> bool:
    stmt = (
        sa.select(sa.literal(1))
        .select_from(ROW_POLICIES)
        .where(
            ROW_POLICIES.c.table_name == table_name,
            ROW_POLICIES.c.name == policy_name,
        )
        .limit(1)
    )
    return op.get_bind().execute(stmt).first() is not None


def create_policy_if_absent(
    policy_name: str,
    table_name: str,
    command: str,
    *,
    using: str | None = None,
    check: str | None = None,
) -> bool:
    """Register a row-level policy unless one with the same name exists on the table."""
    if policy_exists(table_name, policy_name):
        logger.info("migration_skip_policy", table=table_name, policy=policy_name)
        return False
    op.get_bind().execute(
        ROW_POLICIES.insert().values(
            name=policy_name,
            table_name=table_name,
            command=command,
            using_rule=using,
            check_rule=check,
        )
    )
    return True


def drop_policy(table_name: str, policy_name: str) -> None:
    op.get_bind().execute(
        ROW_POLICIES.delete().where(
            ROW_POLICIES.c.table_name == table_name,
            ROW_POLICIES.c.name == policy_name,
        )
    )


def insert_if_absent(
    table: sa.TableClause,
    natural_key: Mapping[str, object],
    values: Mapping[str, object] | None = None,
) -> bool:
    """
    Insert a seed row unless a row with the same natural key exists.

    Args:
        table: Lightweight table clause
        natural_key: Column values identifying the row
        values: Remaining column values

    Returns:
        True if the row was inserted
    """
    bind = op.get_bind()
    conditions = [table.c[name] == value for name, value in natural_key.items()]
    stmt = sa.select(sa.literal(1)).select_from(table).where(*conditions).limit(1)
    if bind.execute(stmt).first() is not None:
        return False
    bind.execute(table.insert().values({**natural_key, **(values or {})}))
    return True
