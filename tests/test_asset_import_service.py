"""
tests/test_asset_import_service.py

Unit tests for the asset batch coordinator.

All collaborators are in-memory; no database or network is touched.

Coverage
--------
- Worked examples (missing field, alias + default mapping)
- Row accounting: created + failed == data rows
- Failure ordering and mixed causes
- Sink rejections and unexpected row exceptions
- Batch-level failures: empty input, lost database
- Optional short-row rejection
- Batch lifecycle and per-row failure logging
"""

from __future__ import annotations

import logging

import pytest

from app.domain.asset_import import AssetRecord, BatchSummary, ImportState, RowCreated
from app.errors import EmptyInputError, PersistenceUnavailableError
from app.services.asset_import_service import AssetImportService

MISSING = "Missing required fields (NSN, asset_code, designation)"


@pytest.fixture()
def svc() -> AssetImportService:
    return AssetImportService(log_row_errors=False)


class TestWorkedExamples:
    def test_missing_nsn_is_reported_against_its_line(self, svc, asset_sink) -> None:
        summary = svc.import_assets(
            csv_data="nsn,asset_code,designation\nNSN1,AC1,Widget\n,AC2,Gadget",
            ssr_id="ssr-42",
            sink=asset_sink,
        )

        assert summary.to_dict() == {
            "assetsCreated": 1,
            "errors": [f"Row 3: {MISSING}"],
        }
        assert [record.nsn for record in asset_sink.records] == ["NSN1"]

    def test_aliases_and_defaults_reach_the_sink(self, svc, asset_sink) -> None:
        summary = svc.import_assets(
            csv_data="nsn,code,type,designation\nN1,C1,Valve,D1",
            ssr_id="ssr-42",
            sink=asset_sink,
        )

        assert summary.assets_created == 1
        assert asset_sink.records == [
            AssetRecord(
                ssr_id="ssr-42",
                nsn="N1",
                asset_code="C1",
                designation="D1",
                asset_type="Valve",
                short_name="",
                status="active",
            )
        ]


class TestRowAccounting:
    def test_every_data_row_yields_one_outcome(self, svc, asset_sink) -> None:
        csv_data = "\n".join(
            [
                "nsn,asset_code,designation",
                "N1,C1,D1",
                "",
                "N3,,D3",
                "N4,C4,D4",
                "N5",
            ]
        )

        summary = svc.import_assets(csv_data=csv_data, ssr_id="ssr-1", sink=asset_sink)

        assert summary.assets_created + len(summary.errors) == 5
        assert summary.assets_created == 2

    def test_invalid_rows_never_reach_the_sink(self, svc, asset_sink) -> None:
        svc.import_assets(
            csv_data="nsn,asset_code,designation\n,C1,D1\nN2,,D2\nN3,C3,",
            ssr_id="ssr-1",
            sink=asset_sink,
        )

        assert asset_sink.calls == []

    def test_header_only_input_creates_nothing(self, svc, asset_sink) -> None:
        summary = svc.import_assets(csv_data="nsn,asset_code,designation\n", ssr_id="ssr-1", sink=asset_sink)

        assert summary.to_dict() == {"assetsCreated": 0, "errors": []}

    def test_blank_line_is_a_failed_row(self, svc, asset_sink) -> None:
        summary = svc.import_assets(
            csv_data="nsn,asset_code,designation\nN1,C1,D1\n\nN3,C3,D3",
            ssr_id="ssr-1",
            sink=asset_sink,
        )

        assert summary.assets_created == 2
        assert summary.errors == [f"Row 3: {MISSING}"]


class TestFailureReporting:
    def test_errors_follow_row_order_across_causes(self, svc, make_asset_sink) -> None:
        sink = make_asset_sink(on_insert=lambda record: "duplicate key" if record.nsn == "N2" else None)

        summary = svc.import_assets(
            csv_data="nsn,asset_code,designation\n,C1,D1\nN2,C2,D2\nN3,C3,D3\nN4,,D4",
            ssr_id="ssr-1",
            sink=sink,
        )

        assert summary.errors == [
            f"Row 2: {MISSING}",
            "Row 3: duplicate key",
            f"Row 5: {MISSING}",
        ]
        assert summary.assets_created == 1

    def test_unexpected_row_exception_is_recorded_and_batch_continues(self, svc, make_asset_sink) -> None:
        def explode(record: AssetRecord) -> str | None:
            if record.nsn == "N1":
                raise RuntimeError("sink exploded")
            return None

        sink = make_asset_sink(on_insert=explode)
        summary = svc.import_assets(
            csv_data="nsn,asset_code,designation\nN1,C1,D1\nN2,C2,D2",
            ssr_id="ssr-1",
            sink=sink,
        )

        assert summary.errors == ["Row 2: sink exploded"]
        assert summary.assets_created == 1


class TestBatchLevelFailures:
    def test_empty_input_fails_before_any_row(self, svc, asset_sink) -> None:
        with pytest.raises(EmptyInputError):
            svc.import_assets(csv_data="  \n ", ssr_id="ssr-1", sink=asset_sink)
        assert asset_sink.calls == []

    def test_lost_database_aborts_the_batch(self, svc, make_asset_sink) -> None:
        def unavailable(record: AssetRecord) -> str | None:
            raise PersistenceUnavailableError("Registry database is unavailable.")

        sink = make_asset_sink(on_insert=unavailable)
        with pytest.raises(PersistenceUnavailableError):
            svc.import_assets(
                csv_data="nsn,asset_code,designation\nN1,C1,D1\nN2,C2,D2",
                ssr_id="ssr-1",
                sink=sink,
            )
        assert len(sink.calls) == 1


class TestShortRowPolicy:
    def test_short_rows_are_padded_by_default(self, svc, asset_sink) -> None:
        summary = svc.import_assets(
            csv_data="nsn,asset_code,designation,short_name\nN1,C1,D1",
            ssr_id="ssr-1",
            sink=asset_sink,
        )
        assert summary.assets_created == 1

    def test_short_rows_fail_when_rejection_enabled(self, asset_sink) -> None:
        strict = AssetImportService(reject_short_rows=True, log_row_errors=False)

        summary = strict.import_assets(
            csv_data="nsn,asset_code,designation,short_name\nN1,C1,D1\nN2,C2,D2,Rover",
            ssr_id="ssr-1",
            sink=asset_sink,
        )

        assert summary.errors == ["Row 2: Expected 4 columns, found 3"]
        assert summary.assets_created == 1


class TestBatchLifecycle:
    def test_returned_summary_is_done(self, svc, asset_sink) -> None:
        summary = svc.import_assets(
            csv_data="nsn,asset_code,designation\nN1,C1,D1",
            ssr_id="ssr-1",
            sink=asset_sink,
        )

        assert summary.state is ImportState.DONE

    def test_outcomes_are_rejected_outside_processing(self) -> None:
        summary = BatchSummary()
        with pytest.raises(RuntimeError):
            summary.record(RowCreated(row_number=2))

        summary.start()
        summary.record(RowCreated(row_number=2))
        summary.finish()

        with pytest.raises(RuntimeError):
            summary.record(RowCreated(row_number=3))
        with pytest.raises(RuntimeError):
            summary.finish()
        assert summary.to_dict() == {"assetsCreated": 1, "errors": []}


class TestRowFailureLogging:
    def test_unexpected_row_exception_is_logged_once_with_traceback(self, make_asset_sink, caplog) -> None:
        def explode(record: AssetRecord) -> str | None:
            raise RuntimeError("sink exploded")

        svc = AssetImportService(log_row_errors=True)
        with caplog.at_level(logging.WARNING, logger="app.services.asset_import_service"):
            svc.import_assets(
                csv_data="nsn,asset_code,designation\nN1,C1,D1",
                ssr_id="ssr-1",
                sink=make_asset_sink(on_insert=explode),
            )

        row_records = [record for record in caplog.records if "Row 2" in record.getMessage()]
        assert len(row_records) == 1
        assert row_records[0].levelno == logging.ERROR
        assert row_records[0].exc_info is not None

    def test_validation_failure_is_a_single_warning(self, asset_sink, caplog) -> None:
        svc = AssetImportService(log_row_errors=True)
        with caplog.at_level(logging.WARNING, logger="app.services.asset_import_service"):
            svc.import_assets(csv_data="nsn,asset_code,designation\n,C1,D1", ssr_id="ssr-1", sink=asset_sink)

        row_records = [record for record in caplog.records if "Row 2" in record.getMessage()]
        assert [record.levelno for record in row_records] == [logging.WARNING]
