"""
app/repositories/asset_repository.py

Persistence sink for imported assets.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.asset_import import AssetRecord
from app.repositories.session_writer import commit_instance
from db.models.ssr_asset import SSRAsset


@dataclass(frozen=True)
class InsertResult:
    """
    Acknowledgement of one insert, or the reason it was rejected.
    """

    record_id: uuid.UUID | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_record_id(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def invalid_reference_message(value: str) -> str:
    return f'invalid input syntax for type uuid: "{value}"'


class AssetSink(ABC):
    """
    Accepts one asset record at a time.
    """

    @abstractmethod
    def insert_asset(self, record: AssetRecord) -> InsertResult:
        """Store one record; rejections are returned, not raised."""


class SQLAlchemyAssetSink(AssetSink):
    """
    Writes assets to ``ssr_assets`` through a request-scoped session.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def insert_asset(self, record: AssetRecord) -> InsertResult:
        ssr_id = parse_record_id(record.ssr_id)
        if ssr_id is None:
            return InsertResult(error=invalid_reference_message(record.ssr_id))

        asset = SSRAsset(
            id=uuid.uuid4(),
            ssr_id=ssr_id,
            nsn=record.nsn,
            asset_code=record.asset_code,
            designation=record.designation,
            asset_type=record.asset_type,
            short_name=record.short_name,
            status=record.status,
        )
        error = commit_instance(self._session, asset)
        if error is not None:
            return InsertResult(error=error)
        return InsertResult(record_id=asset.id)
