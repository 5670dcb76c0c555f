"""Shared session handling for repositories: commit/rollback and store error wrapping."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateRecordError, StoreError

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation in PostgreSQL.
PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the driver reports a unique index violation (PostgreSQL or SQLite)."""
    orig = error.orig
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


class BaseRepository:
    """Holds the request's Session; subclasses run every store call inside store_call()."""

    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def store_call(self, operation: str) -> Iterator[None]:
        """
        Roll back and wrap any SQLAlchemy failure with the operation name.

        Unique index violations raise DuplicateRecordError so services can map them
        to the matching AlreadyExists error.
        """
        try:
            yield
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                logger.warning("Unique index rejected write: operation=%s", operation)
                raise DuplicateRecordError(f"{operation}: {e.orig}") from e
            logger.error("Integrity error: operation=%s error=%s", operation, e.orig)
            raise StoreError(f"{operation}: {e.orig}") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Store call failed: operation=%s error=%s", operation, e)
            raise StoreError(f"{operation}: {e}") from e
