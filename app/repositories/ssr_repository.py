"""
app/repositories/ssr_repository.py

Persistence sink for imported SSR contacts.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from sqlalchemy.orm import Session

from app.domain.ssr_import import SSRRecord
from app.repositories.asset_repository import InsertResult
from app.repositories.session_writer import commit_instance
from db.models.ssr import SSR


class SSRSink(ABC):
    @abstractmethod
    def insert_ssr(self, record: SSRRecord) -> InsertResult:
        """Store one SSR and return its generated id, or the rejection reason."""


class SQLAlchemySSRSink(SSRSink):
    def __init__(self, session: Session) -> None:
        self._session = session

    def insert_ssr(self, record: SSRRecord) -> InsertResult:
        ssr = SSR(
            id=uuid.uuid4(),
            delivery_team=record.delivery_team,
            title=record.title,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            phone=record.phone,
            role_type=record.role_type,
            status=record.status,
        )
        error = commit_instance(self._session, ssr)
        if error is not None:
            return InsertResult(error=error)
        return InsertResult(record_id=ssr.id)
