"""
app/domain/asset_import.py

Domain models used by the asset CSV import flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

DEFAULT_ASSET_STATUS = "active"
DEFAULT_ASSET_TYPE = "Other"


class ImportState(str, Enum):
    """
    Lifecycle of one batch run.
    """

    NOT_STARTED = "not_started"
    PROCESSING = "processing"
    DONE = "done"


@dataclass(frozen=True)
class AssetRecord:
    """
    One asset row mapped onto the fixed registry schema.

    ``ssr_id`` is the parent SSR reference supplied with the upload.
    """

    ssr_id: str
    nsn: str
    asset_code: str
    designation: str
    asset_type: str = DEFAULT_ASSET_TYPE
    short_name: str = ""
    status: str = DEFAULT_ASSET_STATUS


@dataclass(frozen=True)
class RowCreated:
    row_number: int


@dataclass(frozen=True)
class RowFailed:
    row_number: int
    reason: str
    error: BaseException | None = field(default=None, compare=False, repr=False)

    def describe(self) -> str:
        return f"Row {self.row_number}: {self.reason}"


RowOutcome = Union[RowCreated, RowFailed]


@dataclass
class BatchSummary:
    """
    End-of-run asset import summary.

    Outcomes are only accepted while the batch is ``PROCESSING``; ``finish``
    closes it so a completed summary cannot be extended.
    """

    assets_created: int = 0
    errors: list[str] = field(default_factory=list)
    state: ImportState = ImportState.NOT_STARTED

    def start(self) -> None:
        self._transition(ImportState.NOT_STARTED, ImportState.PROCESSING)

    def finish(self) -> None:
        self._transition(ImportState.PROCESSING, ImportState.DONE)

    def record(self, outcome: RowOutcome) -> None:
        if self.state is not ImportState.PROCESSING:
            raise RuntimeError(f"Cannot record a row outcome while {self.state.value}.")
        if isinstance(outcome, RowCreated):
            self.assets_created += 1
        elif isinstance(outcome, RowFailed):
            self.errors.append(outcome.describe())
        else:
            raise TypeError(f"Unsupported row outcome: {outcome!r}")

    def to_dict(self) -> dict[str, object]:
        return {
            "assetsCreated": self.assets_created,
            "errors": list(self.errors),
        }

    def _transition(self, expected: ImportState, target: ImportState) -> None:
        if self.state is not expected:
            raise RuntimeError(f"Cannot move batch from {self.state.value} to {target.value}.")
        self.state = target
