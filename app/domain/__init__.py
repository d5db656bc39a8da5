"""
app/domain package marker.
"""

from app.domain.asset_import import (
    AssetRecord,
    BatchSummary,
    ImportState,
    RowCreated,
    RowFailed,
    RowOutcome,
)
from app.domain.ssr_import import ImportMode, SSRBatchSummary, SSRRecord

__all__ = [
    "AssetRecord",
    "BatchSummary",
    "ImportMode",
    "ImportState",
    "RowCreated",
    "RowFailed",
    "RowOutcome",
    "SSRBatchSummary",
    "SSRRecord",
]
