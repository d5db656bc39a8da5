"""
db/models/ssr.py

SSR contacts: the parent grouping under which assets are registered.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin


class SSR(Base, TimestampMixin):
    __tablename__ = "ssrs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    delivery_team: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    role_type: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str | None] = mapped_column(Text, nullable=True, default="active")
    created_by: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        nullable=True,
        comment="Auth user that registered the SSR, when known",
    )

    assets: Mapped[list["SSRAsset"]] = relationship(  # noqa: F821
        back_populates="ssr",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("ix_ssrs_email", "email"),
        Index("ix_ssrs_delivery_team", "delivery_team"),
    )
