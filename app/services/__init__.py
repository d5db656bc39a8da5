"""
app/services package marker.
"""

from app.services.asset_import_service import AssetImportService, get_asset_import_service
from app.services.notification_service import (
    NotificationService,
    build_notification,
    get_notification_service,
)
from app.services.ssr_import_service import SSRImportService, get_ssr_import_service
from app.services.tds_search_service import TDSSearchService, get_tds_search_service

__all__ = [
    "AssetImportService",
    "get_asset_import_service",
    "NotificationService",
    "build_notification",
    "get_notification_service",
    "SSRImportService",
    "get_ssr_import_service",
    "TDSSearchService",
    "get_tds_search_service",
]
