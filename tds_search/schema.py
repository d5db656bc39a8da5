"""Request and response contracts for the TDS search endpoint."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TDSSearchRequest(BaseModel):
    """Search input. ``query`` is echoed back exactly as sent."""

    query: str

    @field_validator("query")
    @classmethod
    def _reject_blank_query(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query must not be blank")
        return value


class TDSSearchResponse(BaseModel):
    """Search matches plus the model's summary of them."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[dict[str, Any]] = Field(default_factory=list)
    ai_summary: str = Field(alias="aiSummary")
    query: str
