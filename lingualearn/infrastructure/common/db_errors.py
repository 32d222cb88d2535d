"""Translation of SQLAlchemy failures into LinguaLearn errors."""

from collections.abc import Generator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session

from lingualearn.exceptions import (
    ConstraintViolationError,
    ReferencedRowNotFoundError,
    TransportFailureError,
)

logger = structlog.get_logger(__name__)

FOREIGN_KEY_VIOLATION = "23503"


def is_foreign_key_violation(error: IntegrityError) -> bool:
    """Whether ``error`` was raised by a foreign key check (PostgreSQL or SQLite)."""
    if getattr(error.orig, "sqlstate", None) == FOREIGN_KEY_VIOLATION:
        return True
    if getattr(error.orig, "pgcode", None) == FOREIGN_KEY_VIOLATION:
        return True
    return "FOREIGN KEY" in str(error.orig).upper()


@contextmanager
def database_errors(db: Session) -> Generator[None, None, None]:
    """
    Roll back and re-raise data-store failures as typed errors.

    Raises:
        ReferencedRowNotFoundError: A foreign key pointed at a missing row
        ConstraintViolationError: Any other integrity failure
        TransportFailureError: The data store could not be reached
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        if is_foreign_key_violation(e):
            raise ReferencedRowNotFoundError() from e
        raise ConstraintViolationError("Write conflicts with an existing row") from e
    except (OperationalError, InterfaceError) as e:
        db.rollback()
        logger.error("data_store_unreachable", error=str(e.orig))
        raise TransportFailureError() from e
    except DBAPIError as e:
        db.rollback()
        if e.connection_invalidated:
            raise TransportFailureError() from e
        raise
