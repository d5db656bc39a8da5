"""
app/api/routers/asset_import.py

Asset CSV import endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.dependencies import get_asset_sink, json_payload
from app.repositories.asset_repository import AssetSink
from app.schemas.asset_import import AssetCSVImportRequest, AssetImportSummaryResponse
from app.services.asset_import_service import AssetImportService, get_asset_import_service

router = APIRouter(tags=["import"])


@router.post("/process-assets-csv", response_model=AssetImportSummaryResponse)
def process_assets_csv(
    payload: AssetCSVImportRequest = Depends(json_payload(AssetCSVImportRequest)),
    sink: AssetSink = Depends(get_asset_sink),
    import_service: AssetImportService = Depends(get_asset_import_service),
) -> AssetImportSummaryResponse:
    """
    Register every asset row under one SSR.

    Row failures are reported in ``errors`` with a 200 status; only a batch
    that cannot run at all returns an error response.
    """

    summary = import_service.import_assets(
        csv_data=payload.csv_data,
        ssr_id=payload.ssr_id,
        sink=sink,
    )
    return AssetImportSummaryResponse(
        assets_created=summary.assets_created,
        errors=summary.errors,
    )
