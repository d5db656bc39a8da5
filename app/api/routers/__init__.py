"""
app/api/routers package marker.
"""

from app.api.routers.asset_import import router as asset_import_router
from app.api.routers.notifications import router as notifications_router
from app.api.routers.ssr_import import router as ssr_import_router
from app.api.routers.tds_search import router as tds_search_router

__all__ = [
    "asset_import_router",
    "notifications_router",
    "ssr_import_router",
    "tds_search_router",
]
