"""
db/models/ssr_asset.py

Assets registered under an SSR.
"""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Index, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin


class SSRAsset(Base, TimestampMixin):
    __tablename__ = "ssr_assets"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    ssr_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("ssrs.id", ondelete="CASCADE"),
        nullable=False,
    )
    nsn: Mapped[str] = mapped_column(Text, nullable=False, comment="National Stock Number")
    asset_code: Mapped[str] = mapped_column(Text, nullable=False)
    designation: Mapped[str] = mapped_column(Text, nullable=False)
    asset_type: Mapped[str] = mapped_column(Text, nullable=False, default="Other")
    short_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str | None] = mapped_column(Text, nullable=True, default="active")

    ssr: Mapped["SSR"] = relationship(back_populates="assets")  # noqa: F821

    __table_args__ = (
        UniqueConstraint("ssr_id", "nsn", "asset_code", name="uq_ssr_assets_ssr_nsn_code"),
        Index("ix_ssr_assets_ssr_id", "ssr_id"),
        Index("ix_ssr_assets_nsn", "nsn"),
    )
