"""
app/mappers package marker.
"""

from app.mappers.asset_mapper import AssetRecordMapper, SSRRecordMapper, zip_row

__all__ = [
    "AssetRecordMapper",
    "SSRRecordMapper",
    "zip_row",
]
