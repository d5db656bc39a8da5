"""
app/services/asset_import_service.py

Batch coordinator for bulk asset registration from delimited text.

Each data row goes through split -> map -> validate -> persist, strictly in
order and one sink call at a time. A row that fails for any reason becomes a
``RowFailed`` outcome and the pass continues; only a lost database connection
aborts the batch.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from app.config import get_asset_import_settings
from app.domain.asset_import import BatchSummary, RowCreated, RowFailed, RowOutcome
from app.errors import PersistenceUnavailableError
from app.logging_utils import log_event
from app.mappers.asset_mapper import AssetRecordMapper
from app.parsers.delimited_text import parse_delimited_text, split_row
from app.repositories.asset_repository import AssetSink
from app.validators.asset_validator import AssetRecordValidator

logger = logging.getLogger(__name__)


class AssetImportService:
    """
    Coordinates parsing, mapping, validation, and persistence of asset rows.
    """

    def __init__(
        self,
        *,
        reject_short_rows: bool = False,
        log_row_errors: bool = True,
        mapper: AssetRecordMapper | None = None,
        validator: AssetRecordValidator | None = None,
    ) -> None:
        self._log_row_errors = log_row_errors
        self._mapper = mapper or AssetRecordMapper()
        self._validator = validator or AssetRecordValidator(reject_short_rows=reject_short_rows)

    def import_assets(
        self,
        *,
        csv_data: str,
        ssr_id: str,
        sink: AssetSink,
    ) -> BatchSummary:
        """
        Register every data row under ``ssr_id`` and summarize the outcome.

        Raises:
            EmptyInputError: when ``csv_data`` is blank; no row is processed.
            PersistenceUnavailableError: when the sink loses its database.
        """

        parsed = parse_delimited_text(csv_data)
        summary = BatchSummary()
        summary.start()
        logger.debug("Asset import %s ssr_id=%s rows=%d", summary.state.value, ssr_id, len(parsed.data_lines))

        for row_number, line in enumerate(parsed.data_lines, start=2):
            outcome = self._process_row(
                line=line,
                row_number=row_number,
                headers=parsed.headers,
                ssr_id=ssr_id,
                sink=sink,
            )
            summary.record(outcome)
            if isinstance(outcome, RowFailed):
                self._log_failure(outcome, ssr_id=ssr_id)

        summary.finish()
        log_event(
            logger,
            logging.INFO,
            "asset_import_completed",
            state=summary.state.value,
            ssr_id=ssr_id,
            rows=len(parsed.data_lines),
            assets_created=summary.assets_created,
            rows_failed=len(summary.errors),
        )
        return summary

    def _log_failure(self, outcome: RowFailed, *, ssr_id: str) -> None:
        if outcome.error is not None:
            logger.error(
                "Unexpected failure on asset row ssr_id=%s %s",
                ssr_id,
                outcome.describe(),
                exc_info=outcome.error,
            )
        elif self._log_row_errors:
            logger.warning("Asset import row failed ssr_id=%s %s", ssr_id, outcome.describe())

    def _process_row(
        self,
        *,
        line: str,
        row_number: int,
        headers: Sequence[str],
        ssr_id: str,
        sink: AssetSink,
    ) -> RowOutcome:
        try:
            values = split_row(line)
            shape_error = self._validator.check_shape(values=values, headers=headers)
            if shape_error is not None:
                return RowFailed(row_number=row_number, reason=shape_error)

            record = self._mapper.map_row(values=values, headers=headers, ssr_id=ssr_id)
            reason = self._validator.validate(record)
            if reason is not None:
                return RowFailed(row_number=row_number, reason=reason)

            result = sink.insert_asset(record)
        except PersistenceUnavailableError:
            raise
        except Exception as exc:  # noqa: BLE001
            return RowFailed(
                row_number=row_number,
                reason=str(exc) or exc.__class__.__name__,
                error=exc,
            )

        if not result.ok:
            return RowFailed(row_number=row_number, reason=result.error or "Insert rejected.")
        return RowCreated(row_number=row_number)


@lru_cache(maxsize=1)
def get_asset_import_service() -> AssetImportService:
    """
    Build and cache the import service with env-driven settings.
    """
    settings = get_asset_import_settings()
    return AssetImportService(
        reject_short_rows=settings.reject_short_rows,
        log_row_errors=settings.log_row_errors,
    )
