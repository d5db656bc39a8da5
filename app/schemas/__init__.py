"""
app/schemas package marker.
"""

from app.schemas.asset_import import (
    AssetCSVImportRequest,
    AssetImportSummaryResponse,
    SSRCSVImportRequest,
    SSRImportSummaryResponse,
)
from app.schemas.notification import TDSNotificationRequest, TDSNotificationResponse

__all__ = [
    "AssetCSVImportRequest",
    "AssetImportSummaryResponse",
    "SSRCSVImportRequest",
    "SSRImportSummaryResponse",
    "TDSNotificationRequest",
    "TDSNotificationResponse",
]
