"""
app/api/routers/ssr_import.py

SSR CSV import endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.dependencies import get_asset_sink, get_ssr_sink, json_payload
from app.repositories.asset_repository import AssetSink
from app.repositories.ssr_repository import SSRSink
from app.schemas.asset_import import SSRCSVImportRequest, SSRImportSummaryResponse
from app.services.ssr_import_service import SSRImportService, get_ssr_import_service

router = APIRouter(tags=["import"])


@router.post("/process-ssr-csv", response_model=SSRImportSummaryResponse)
def process_ssr_csv(
    payload: SSRCSVImportRequest = Depends(json_payload(SSRCSVImportRequest)),
    ssr_sink: SSRSink = Depends(get_ssr_sink),
    asset_sink: AssetSink = Depends(get_asset_sink),
    import_service: SSRImportService = Depends(get_ssr_import_service),
) -> SSRImportSummaryResponse:
    summary = import_service.import_ssrs(
        csv_data=payload.csv_data,
        mode=payload.mode,
        ssr_sink=ssr_sink,
        asset_sink=asset_sink,
    )
    return SSRImportSummaryResponse(
        ssrs_created=summary.ssrs_created,
        assets_created=summary.assets_created,
        errors=summary.errors,
    )
