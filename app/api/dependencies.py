"""
app/api/dependencies.py

Shared FastAPI dependencies: JSON payload parsing and per-request
collaborators built on the request's database session.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from app.errors import MalformedPayloadError
from app.repositories.asset_repository import AssetSink, SQLAlchemyAssetSink
from app.repositories.ssr_repository import SQLAlchemySSRSink, SSRSink
from app.repositories.tds_entry_repository import TDSEntryRepository
from db.session import get_db

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request payload: " + "; ".join(parts)


def json_payload(model: type[PayloadT]) -> Callable[[Request], Awaitable[PayloadT]]:
    """
    Build a dependency that parses the raw body into ``model``.

    Failures raise MalformedPayloadError so they share the top-level
    ``{"error": ...}`` response instead of FastAPI's 422 shape.
    """

    async def _parse(request: Request) -> PayloadT:
        body = await request.body()
        try:
            return model.model_validate_json(body or b"")
        except ValidationError as exc:
            raise MalformedPayloadError(describe_validation_error(exc)) from exc

    return _parse


def get_asset_sink(db: Session = Depends(get_db)) -> AssetSink:
    return SQLAlchemyAssetSink(db)


def get_ssr_sink(db: Session = Depends(get_db)) -> SSRSink:
    return SQLAlchemySSRSink(db)


def get_tds_entry_repository(db: Session = Depends(get_db)) -> TDSEntryRepository:
    return TDSEntryRepository(db)
