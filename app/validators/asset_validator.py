"""
app/validators/asset_validator.py

Mandatory-field checks for mapped asset and SSR rows.

Validators return a human-readable reason instead of raising, so the batch
coordinator can record the failure against the row and move on.
"""

from __future__ import annotations

from typing import Sequence

from app.domain.asset_import import AssetRecord
from app.domain.ssr_import import SSRRecord

MISSING_ASSET_FIELDS_REASON = "Missing required fields (NSN, asset_code, designation)"
MISSING_SSR_FIELDS_REASON = "Missing required SSR fields"


class AssetRecordValidator:
    """
    Checks required asset fields and, optionally, row shape.
    """

    def __init__(self, *, reject_short_rows: bool = False) -> None:
        self._reject_short_rows = reject_short_rows

    def check_shape(self, *, values: Sequence[str], headers: Sequence[str]) -> str | None:
        """
        Return a reason when short rows are rejected and this row is short.
        """

        if self._reject_short_rows and len(values) < len(headers):
            return f"Expected {len(headers)} columns, found {len(values)}"
        return None

    def validate(self, record: AssetRecord) -> str | None:
        if not record.nsn or not record.asset_code or not record.designation:
            return MISSING_ASSET_FIELDS_REASON
        return None

    def is_complete(self, record: AssetRecord) -> bool:
        return self.validate(record) is None


class SSRRecordValidator:
    def validate(self, record: SSRRecord) -> str | None:
        if (
            not record.first_name
            or not record.last_name
            or not record.email
            or not record.delivery_team
        ):
            return MISSING_SSR_FIELDS_REASON
        return None
