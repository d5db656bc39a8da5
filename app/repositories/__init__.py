"""
app/repositories package marker.
"""

from app.repositories.asset_repository import AssetSink, InsertResult, SQLAlchemyAssetSink
from app.repositories.ssr_repository import SQLAlchemySSRSink, SSRSink
from app.repositories.tds_entry_repository import TDSEntryRepository

__all__ = [
    "AssetSink",
    "InsertResult",
    "SQLAlchemyAssetSink",
    "SQLAlchemySSRSink",
    "SSRSink",
    "TDSEntryRepository",
]
