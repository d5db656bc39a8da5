"""
app/repositories/tds_entry_repository.py

Read access to TDS entries for free-text search.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.models.tds_entry import TDSEntry

_DEFAULT_LIMIT = 10


class TDSEntryRepository:
    """
    Case-insensitive substring search over designation, short name and NSN.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(self, query: str, *, limit: int = _DEFAULT_LIMIT) -> list[dict[str, Any]]:
        stmt = (
            select(TDSEntry)
            .where(
                or_(
                    TDSEntry.designation.icontains(query, autoescape=True),
                    TDSEntry.short_name.icontains(query, autoescape=True),
                    TDSEntry.nsn.icontains(query, autoescape=True),
                )
            )
            .order_by(TDSEntry.reference)
            .limit(max(1, limit))
        )
        try:
            entries = self._session.scalars(stmt).all()
        except SQLAlchemyError:
            self._session.rollback()
            raise
        return [entry.to_search_result() for entry in entries]
