"""Dialect-specific INSERT ... ON CONFLICT statements."""

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from lingualearn.exceptions import LinguaLearnError


def insert_for(db: Session, model: type) -> postgresql.Insert | sqlite.Insert:
    """
    Build an INSERT on ``model`` that supports ``on_conflict_do_update``.

    Raises:
        LinguaLearnError: If the session is bound to a backend other than
            PostgreSQL or SQLite
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise LinguaLearnError(f"Upsert is not supported on the {dialect} backend")
