"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.ssr import SSR
from db.models.ssr_asset import SSRAsset
from db.models.tds_entry import TDSEntry

__all__ = [
    "SSR",
    "SSRAsset",
    "TDSEntry",
]
