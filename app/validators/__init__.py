"""
app/validators package marker.
"""

from app.validators.asset_validator import AssetRecordValidator, SSRRecordValidator

__all__ = [
    "AssetRecordValidator",
    "SSRRecordValidator",
]
