"""Transaction boundary shared by the write use cases."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.exceptions import ChurchManagementError, StorageError

logger = logging.getLogger(__name__)


@contextmanager
def unit_of_work(session: Session) -> Iterator[Session]:
    """Commit everything done inside the block, or nothing at all.

    Domain errors are re-raised untouched after the rollback; driver errors
    are logged and surfaced as :class:`StorageError`.
    """

    try:
        yield session
        session.commit()
    except ChurchManagementError:
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Database transaction rolled back: %s", exc)
        detail = getattr(exc, "orig", None) or exc
        raise StorageError(str(detail)) from exc


__all__ = ["unit_of_work"]
