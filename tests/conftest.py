"""
Shared in-memory collaborators for service and API tests.
"""

from __future__ import annotations

import uuid
from typing import Any, Callable

import pytest

from app.domain.asset_import import AssetRecord
from app.domain.ssr_import import SSRRecord
from app.repositories.asset_repository import AssetSink, InsertResult
from app.repositories.ssr_repository import SSRSink


class RecordingAssetSink(AssetSink):
    """Keeps accepted records; ``on_insert`` may return an error or raise."""

    def __init__(self, on_insert: Callable[[AssetRecord], str | None] | None = None) -> None:
        self.records: list[AssetRecord] = []
        self.calls: list[AssetRecord] = []
        self._on_insert = on_insert

    def insert_asset(self, record: AssetRecord) -> InsertResult:
        self.calls.append(record)
        error = self._on_insert(record) if self._on_insert else None
        if error is not None:
            return InsertResult(error=error)
        self.records.append(record)
        return InsertResult(record_id=uuid.uuid4())


class RecordingSSRSink(SSRSink):
    def __init__(self, on_insert: Callable[[SSRRecord], str | None] | None = None) -> None:
        self.records: list[SSRRecord] = []
        self.ids: list[uuid.UUID] = []
        self._on_insert = on_insert

    def insert_ssr(self, record: SSRRecord) -> InsertResult:
        error = self._on_insert(record) if self._on_insert else None
        if error is not None:
            return InsertResult(error=error)
        record_id = uuid.uuid4()
        self.records.append(record)
        self.ids.append(record_id)
        return InsertResult(record_id=record_id)


class StaticTDSRepository:
    def __init__(self, entries: list[dict[str, Any]] | None = None, error: Exception | None = None) -> None:
        self.entries = entries or []
        self.error = error
        self.queries: list[tuple[str, int]] = []

    def search(self, query: str, *, limit: int = 10) -> list[dict[str, Any]]:
        self.queries.append((query, limit))
        if self.error is not None:
            raise self.error
        return self.entries[:limit]


@pytest.fixture()
def asset_sink() -> RecordingAssetSink:
    return RecordingAssetSink()


@pytest.fixture()
def make_asset_sink() -> Callable[..., RecordingAssetSink]:
    return RecordingAssetSink


@pytest.fixture()
def ssr_sink() -> RecordingSSRSink:
    return RecordingSSRSink()


@pytest.fixture()
def make_ssr_sink() -> Callable[..., RecordingSSRSink]:
    return RecordingSSRSink


@pytest.fixture()
def make_tds_repository() -> Callable[..., StaticTDSRepository]:
    return StaticTDSRepository
