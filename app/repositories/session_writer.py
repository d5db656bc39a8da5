"""
app/repositories/session_writer.py

Single-row commit helper shared by the registry sinks.

Rejections (constraint violations, bad values) come back as text so the
caller can record them against a row. Losing the connection is raised as
PersistenceUnavailableError because no later row can succeed either.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import PersistenceUnavailableError

logger = logging.getLogger(__name__)


def describe_db_error(exc: SQLAlchemyError) -> str:
    """
    Return the driver's message without SQLAlchemy's statement dump.
    """

    if isinstance(exc, DBAPIError) and exc.orig is not None:
        message = str(exc.orig).strip()
    else:
        message = str(exc).strip()
    first_line = message.splitlines()[0] if message else ""
    return first_line or exc.__class__.__name__


def is_connection_failure(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, (OperationalError, InterfaceError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


def commit_instance(session: Session, instance: object) -> str | None:
    """
    Add and commit one ORM instance. Returns None on success or the
    rejection message.
    """

    try:
        session.add(instance)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        if is_connection_failure(exc):
            raise PersistenceUnavailableError("Registry database is unavailable.") from exc
        message = describe_db_error(exc)
        logger.debug("Insert rejected table=%s: %s", getattr(instance, "__tablename__", "?"), message)
        return message
    return None
