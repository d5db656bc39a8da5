"""
app/mappers/asset_mapper.py

Positional-to-named mapping for asset and SSR upload rows.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from app.domain.asset_import import DEFAULT_ASSET_STATUS, DEFAULT_ASSET_TYPE, AssetRecord
from app.domain.ssr_import import DEFAULT_SSR_ROLE_TYPE, DEFAULT_SSR_STATUS, SSRRecord

# Source columns tried in order for each field; the first non-empty wins.
ASSET_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "nsn": ("nsn",),
    "asset_code": ("asset_code", "code"),
    "designation": ("designation",),
    "asset_type": ("asset_type", "type"),
    "short_name": ("short_name",),
    "status": ("status",),
}

# Combined SSR uploads carry asset columns with an ``asset_`` prefix.
PREFIXED_ASSET_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "nsn": ("asset_nsn", "nsn"),
    "asset_code": ("asset_code", "code"),
    "designation": ("asset_designation", "designation"),
    "asset_type": ("asset_type", "type"),
    "short_name": ("asset_short_name", "short_name"),
}

SSR_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "delivery_team": ("delivery_team", "team"),
    "title": ("title",),
    "first_name": ("first_name", "firstname"),
    "last_name": ("last_name", "lastname"),
    "email": ("email",),
    "phone": ("phone",),
    "role_type": ("role_type", "role"),
    "status": ("status",),
}


def zip_row(headers: Sequence[str], values: Sequence[str]) -> dict[str, str]:
    """
    Pair each header with its positional value.

    Rows shorter than the header set are padded with empty strings. When a
    header repeats, the right-most column wins.
    """

    row: dict[str, str] = {}
    for index, header in enumerate(headers):
        row[header] = values[index] if index < len(values) else ""
    return row


def first_present(row: Mapping[str, str], columns: Sequence[str], default: str = "") -> str:
    for column in columns:
        value = row.get(column, "")
        if value:
            return value
    return default


class AssetRecordMapper:
    """
    Maps one raw upload row onto an AssetRecord.
    """

    def __init__(self, aliases: Mapping[str, Sequence[str]] | None = None) -> None:
        self._aliases = dict(aliases or ASSET_COLUMN_ALIASES)

    def map_row(
        self,
        *,
        values: Sequence[str],
        headers: Sequence[str],
        ssr_id: str,
    ) -> AssetRecord:
        return self.map_named_row(zip_row(headers, values), ssr_id=ssr_id)

    def map_named_row(
        self,
        row: Mapping[str, str],
        *,
        ssr_id: str,
        status: str | None = None,
    ) -> AssetRecord:
        aliases = self._aliases
        return AssetRecord(
            ssr_id=ssr_id,
            nsn=first_present(row, aliases["nsn"]),
            asset_code=first_present(row, aliases["asset_code"]),
            designation=first_present(row, aliases["designation"]),
            asset_type=first_present(row, aliases["asset_type"], DEFAULT_ASSET_TYPE),
            short_name=first_present(row, aliases["short_name"]),
            status=status or first_present(row, aliases.get("status", ()), DEFAULT_ASSET_STATUS),
        )


class SSRRecordMapper:
    """
    Maps one raw upload row onto an SSRRecord.
    """

    def map_named_row(self, row: Mapping[str, str]) -> SSRRecord:
        return SSRRecord(
            delivery_team=first_present(row, SSR_COLUMN_ALIASES["delivery_team"]),
            title=first_present(row, SSR_COLUMN_ALIASES["title"]) or None,
            first_name=first_present(row, SSR_COLUMN_ALIASES["first_name"]),
            last_name=first_present(row, SSR_COLUMN_ALIASES["last_name"]),
            email=first_present(row, SSR_COLUMN_ALIASES["email"]),
            phone=first_present(row, SSR_COLUMN_ALIASES["phone"]) or None,
            role_type=first_present(row, SSR_COLUMN_ALIASES["role_type"], DEFAULT_SSR_ROLE_TYPE),
            status=first_present(row, SSR_COLUMN_ALIASES["status"], DEFAULT_SSR_STATUS),
        )

    @staticmethod
    def has_asset_columns(row: Mapping[str, str]) -> bool:
        return bool(first_present(row, PREFIXED_ASSET_COLUMN_ALIASES["nsn"]))
