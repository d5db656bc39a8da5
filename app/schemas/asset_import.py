"""
app/schemas/asset_import.py

Request and response schemas for the CSV import endpoints.

Field aliases follow the camelCase keys the portal front end sends.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.ssr_import import ImportMode


class AssetCSVImportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    csv_data: str = Field(..., alias="csvData")
    ssr_id: str = Field(..., alias="ssrId", min_length=1)


class AssetImportSummaryResponse(BaseModel):
    """
    API response model for an asset import run.
    """

    model_config = ConfigDict(populate_by_name=True)

    assets_created: int = Field(..., ge=0, alias="assetsCreated")
    errors: list[str] = Field(default_factory=list)


class SSRCSVImportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    csv_data: str = Field(..., alias="csvData")
    mode: ImportMode = ImportMode.SSR_ONLY


class SSRImportSummaryResponse(BaseModel):
    """
    API response model for an SSR import run.
    """

    model_config = ConfigDict(populate_by_name=True)

    ssrs_created: int = Field(..., ge=0, alias="ssrsCreated")
    assets_created: int = Field(..., ge=0, alias="assetsCreated")
    errors: list[str] = Field(default_factory=list)
