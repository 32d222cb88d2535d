"""Programmatic access to the alembic migration log."""

import structlog
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection, Engine

from lingualearn.config import ALEMBIC_DIR, ALEMBIC_INI

logger = structlog.get_logger(__name__)


def build_alembic_config(connection: Connection | None = None) -> Config:
    """
    Build an alembic config pointing at the project's migration scripts.

    When ``connection`` is given, revisions run on it instead of opening a new one.
    """
    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    config.attributes["configure_logger"] = False
    if connection is not None:
        config.attributes["connection"] = connection
    return config


def upgrade(engine: Engine, revision: str = "head") -> None:
    """Apply the migration log up to ``revision``."""
    with engine.begin() as connection:
        command.upgrade(build_alembic_config(connection), revision)
    logger.info("migrations_applied", revision=revision)


def stamp(engine: Engine, revision: str) -> None:
    """Record ``revision`` as current without running any step."""
    with engine.begin() as connection:
        command.stamp(build_alembic_config(connection), revision, purge=True)


def replay(engine: Engine, revision: str = "head") -> None:
    """Forget the recorded revision and run every step again up to ``revision``."""
    stamp(engine, "base")
    upgrade(engine, revision)
    logger.info("migrations_replayed", revision=revision)
