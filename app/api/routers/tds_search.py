"""
app/api/routers/tds_search.py

AI-assisted TDS search endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.dependencies import get_tds_entry_repository, json_payload
from app.repositories.tds_entry_repository import TDSEntryRepository
from app.services.tds_search_service import TDSSearchService, get_tds_search_service
from tds_search.schema import TDSSearchRequest, TDSSearchResponse

router = APIRouter(tags=["search"])


@router.post("/ai-tds-search", response_model=TDSSearchResponse)
def ai_tds_search(
    payload: TDSSearchRequest = Depends(json_payload(TDSSearchRequest)),
    repository: TDSEntryRepository = Depends(get_tds_entry_repository),
    search_service: TDSSearchService = Depends(get_tds_search_service),
) -> TDSSearchResponse:
    return search_service.search(query=payload.query, repository=repository)
