"""
app/services/ssr_import_service.py

Bulk registration of SSR contacts, optionally with one asset per row.

Asset columns in combined uploads may carry an ``asset_`` prefix. An asset
that is incomplete is skipped without an error; the SSR row still counts.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.config import get_asset_import_settings
from app.domain.ssr_import import ImportMode, SSRBatchSummary
from app.errors import PersistenceUnavailableError
from app.logging_utils import log_event
from app.mappers.asset_mapper import (
    PREFIXED_ASSET_COLUMN_ALIASES,
    AssetRecordMapper,
    SSRRecordMapper,
    zip_row,
)
from app.parsers.delimited_text import parse_delimited_text, split_row
from app.repositories.asset_repository import AssetSink
from app.repositories.ssr_repository import SSRSink
from app.validators.asset_validator import AssetRecordValidator, SSRRecordValidator

logger = logging.getLogger(__name__)


class SSRImportService:
    def __init__(self, *, log_row_errors: bool = True) -> None:
        self._log_row_errors = log_row_errors
        self._ssr_mapper = SSRRecordMapper()
        self._ssr_validator = SSRRecordValidator()
        self._asset_mapper = AssetRecordMapper(aliases=PREFIXED_ASSET_COLUMN_ALIASES)
        self._asset_validator = AssetRecordValidator()

    def import_ssrs(
        self,
        *,
        csv_data: str,
        mode: ImportMode,
        ssr_sink: SSRSink,
        asset_sink: AssetSink,
    ) -> SSRBatchSummary:
        parsed = parse_delimited_text(csv_data)
        summary = SSRBatchSummary()

        for row_number, line in enumerate(parsed.data_lines, start=2):
            errors_before = len(summary.errors)
            try:
                self._process_row(
                    row=zip_row(parsed.headers, split_row(line)),
                    row_number=row_number,
                    mode=mode,
                    summary=summary,
                    ssr_sink=ssr_sink,
                    asset_sink=asset_sink,
                )
            except PersistenceUnavailableError:
                raise
            except Exception as exc:  # noqa: BLE001
                summary.add_error(row_number, str(exc) or exc.__class__.__name__)
                logger.exception("Unexpected failure on SSR import %s", summary.errors[-1])
                continue

            if self._log_row_errors:
                for message in summary.errors[errors_before:]:
                    logger.warning("SSR import row failed %s", message)

        log_event(
            logger,
            logging.INFO,
            "ssr_import_completed",
            mode=mode.value,
            rows=len(parsed.data_lines),
            ssrs_created=summary.ssrs_created,
            assets_created=summary.assets_created,
            errors=len(summary.errors),
        )
        return summary

    def _process_row(
        self,
        *,
        row: dict[str, str],
        row_number: int,
        mode: ImportMode,
        summary: SSRBatchSummary,
        ssr_sink: SSRSink,
        asset_sink: AssetSink,
    ) -> None:
        ssr = self._ssr_mapper.map_named_row(row)
        reason = self._ssr_validator.validate(ssr)
        if reason is not None:
            summary.add_error(row_number, reason)
            return

        created = ssr_sink.insert_ssr(ssr)
        if not created.ok:
            summary.add_error(row_number, f"Failed to create SSR - {created.error}")
            return
        summary.ssrs_created += 1

        if mode is not ImportMode.SSR_WITH_ASSETS or not self._ssr_mapper.has_asset_columns(row):
            return

        asset = self._asset_mapper.map_named_row(row, ssr_id=str(created.record_id), status="active")
        if not self._asset_validator.is_complete(asset):
            return

        stored = asset_sink.insert_asset(asset)
        if stored.ok:
            summary.assets_created += 1
        else:
            summary.add_error(row_number, f"SSR created but failed to add asset - {stored.error}")


@lru_cache(maxsize=1)
def get_ssr_import_service() -> SSRImportService:
    return SSRImportService(log_row_errors=get_asset_import_settings().log_row_errors)
