"""
db/models/tds_entry.py

Transportation Data Sheet entries as read by the search endpoint.

Only the columns the backend reads or returns are mapped; the portal owns
the remaining sheet attributes.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin

SEARCH_RESULT_COLUMNS: tuple[str, ...] = (
    "reference",
    "designation",
    "nsn",
    "short_name",
    "asset_type",
    "status",
)


class TDSEntry(Base, TimestampMixin):
    __tablename__ = "tds_entries"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    reference: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    designation: Mapped[str] = mapped_column(Text, nullable=False)
    nsn: Mapped[str] = mapped_column(Text, nullable=False)
    short_name: Mapped[str] = mapped_column(Text, nullable=False)
    asset_code: Mapped[str] = mapped_column(Text, nullable=False)
    asset_type: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="Pending")
    ssr_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    ssr_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    submitted_by: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)

    __table_args__ = (
        Index("ix_tds_entries_nsn", "nsn"),
        Index("ix_tds_entries_designation", "designation"),
    )

    def to_search_result(self) -> dict[str, Any]:
        return {column: getattr(self, column) for column in SEARCH_RESULT_COLUMNS}
