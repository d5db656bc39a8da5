"""create ssrs, ssr_assets and tds_entries tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 09:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "ssrs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("delivery_team", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=True),
        sa.Column("role_type", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=True),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_ssrs"),
    )
    op.create_index("ix_ssrs_email", "ssrs", ["email"], unique=False)
    op.create_index("ix_ssrs_delivery_team", "ssrs", ["delivery_team"], unique=False)

    op.create_table(
        "ssr_assets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("ssr_id", sa.Uuid(), nullable=False),
        sa.Column("nsn", sa.Text(), nullable=False),
        sa.Column("asset_code", sa.Text(), nullable=False),
        sa.Column("designation", sa.Text(), nullable=False),
        sa.Column("asset_type", sa.Text(), nullable=False),
        sa.Column("short_name", sa.Text(), nullable=True),
        sa.Column("status", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_ssr_assets"),
        sa.ForeignKeyConstraint(
            ["ssr_id"],
            ["ssrs.id"],
            name="fk_ssr_assets_ssr_id_ssrs",
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint("ssr_id", "nsn", "asset_code", name="uq_ssr_assets_ssr_nsn_code"),
    )
    op.create_index("ix_ssr_assets_ssr_id", "ssr_assets", ["ssr_id"], unique=False)
    op.create_index("ix_ssr_assets_nsn", "ssr_assets", ["nsn"], unique=False)

    op.create_table(
        "tds_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("reference", sa.Text(), nullable=False),
        sa.Column("designation", sa.Text(), nullable=False),
        sa.Column("nsn", sa.Text(), nullable=False),
        sa.Column("short_name", sa.Text(), nullable=False),
        sa.Column("asset_code", sa.Text(), nullable=False),
        sa.Column("asset_type", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False),
        sa.Column("ssr_name", sa.Text(), nullable=True),
        sa.Column("ssr_email", sa.Text(), nullable=True),
        sa.Column("submitted_by", sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_tds_entries"),
        sa.UniqueConstraint("reference", name="uq_tds_entries_reference"),
    )
    op.create_index("ix_tds_entries_nsn", "tds_entries", ["nsn"], unique=False)
    op.create_index("ix_tds_entries_designation", "tds_entries", ["designation"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_tds_entries_designation", table_name="tds_entries")
    op.drop_index("ix_tds_entries_nsn", table_name="tds_entries")
    op.drop_table("tds_entries")
    op.drop_index("ix_ssr_assets_nsn", table_name="ssr_assets")
    op.drop_index("ix_ssr_assets_ssr_id", table_name="ssr_assets")
    op.drop_table("ssr_assets")
    op.drop_index("ix_ssrs_delivery_team", table_name="ssrs")
    op.drop_index("ix_ssrs_email", table_name="ssrs")
    op.drop_table("ssrs")
