"""
tests/test_asset_mapper.py

Unit tests for positional-to-named row mapping, aliases and defaults.
"""

from __future__ import annotations

import pytest

from app.domain.asset_import import AssetRecord
from app.mappers.asset_mapper import (
    PREFIXED_ASSET_COLUMN_ALIASES,
    AssetRecordMapper,
    SSRRecordMapper,
    zip_row,
)


@pytest.fixture()
def mapper() -> AssetRecordMapper:
    return AssetRecordMapper()


class TestZipRow:
    def test_short_rows_are_padded_with_empty_strings(self) -> None:
        row = zip_row(("nsn", "asset_code", "designation"), ("N1",))
        assert row == {"nsn": "N1", "asset_code": "", "designation": ""}

    def test_extra_values_are_ignored(self) -> None:
        row = zip_row(("nsn",), ("N1", "surplus"))
        assert row == {"nsn": "N1"}

    def test_repeated_header_takes_right_most_value(self) -> None:
        row = zip_row(("nsn", "nsn"), ("first", "second"))
        assert row == {"nsn": "second"}


class TestAssetRecordMapper:
    def test_maps_aliases_and_defaults(self, mapper: AssetRecordMapper) -> None:
        record = mapper.map_row(
            values=("N1", "C1", "Valve", "D1"),
            headers=("nsn", "code", "type", "designation"),
            ssr_id="ssr-42",
        )

        assert record == AssetRecord(
            ssr_id="ssr-42",
            nsn="N1",
            asset_code="C1",
            designation="D1",
            asset_type="Valve",
            short_name="",
            status="active",
        )

    def test_missing_type_column_defaults_to_other(self, mapper: AssetRecordMapper) -> None:
        record = mapper.map_row(
            values=("N1", "C1", "D1"),
            headers=("nsn", "asset_code", "designation"),
            ssr_id="ssr-1",
        )
        assert record.asset_type == "Other"
        assert record.status == "active"

    def test_primary_column_wins_over_alias(self, mapper: AssetRecordMapper) -> None:
        record = mapper.map_row(
            values=("N1", "PRIMARY", "ALIAS", "D1"),
            headers=("nsn", "asset_code", "code", "designation"),
            ssr_id="ssr-1",
        )
        assert record.asset_code == "PRIMARY"

    def test_empty_primary_column_falls_back_to_alias(self, mapper: AssetRecordMapper) -> None:
        record = mapper.map_row(
            values=("N1", "", "ALIAS", "D1"),
            headers=("nsn", "asset_code", "code", "designation"),
            ssr_id="ssr-1",
        )
        assert record.asset_code == "ALIAS"

    def test_explicit_status_and_short_name_are_kept(self, mapper: AssetRecordMapper) -> None:
        record = mapper.map_row(
            values=("N1", "C1", "D1", "Rover", "retired"),
            headers=("nsn", "asset_code", "designation", "short_name", "status"),
            ssr_id="ssr-1",
        )
        assert record.short_name == "Rover"
        assert record.status == "retired"

    def test_prefixed_aliases_prefer_asset_columns(self) -> None:
        prefixed = AssetRecordMapper(aliases=PREFIXED_ASSET_COLUMN_ALIASES)
        record = prefixed.map_named_row(
            {
                "asset_nsn": "AN1",
                "nsn": "N1",
                "code": "C1",
                "asset_designation": "AD1",
                "designation": "D1",
                "status": "retired",
            },
            ssr_id="ssr-1",
            status="active",
        )
        assert (record.nsn, record.asset_code, record.designation) == ("AN1", "C1", "AD1")
        assert record.status == "active"


class TestSSRRecordMapper:
    def test_maps_aliases_and_defaults(self) -> None:
        record = SSRRecordMapper().map_named_row(
            {
                "team": "Alpha",
                "firstname": "Sam",
                "lastname": "Jones",
                "email": "sam@example.org",
                "phone": "",
            }
        )

        assert record.delivery_team == "Alpha"
        assert record.first_name == "Sam"
        assert record.last_name == "Jones"
        assert record.role_type == "Safety Officer"
        assert record.status == "active"
        assert record.phone is None
        assert record.title is None

    def test_has_asset_columns(self) -> None:
        assert SSRRecordMapper.has_asset_columns({"asset_nsn": "N1"})
        assert SSRRecordMapper.has_asset_columns({"nsn": "N1"})
        assert not SSRRecordMapper.has_asset_columns({"nsn": "", "email": "x@y"})
