"""
app/domain/ssr_import.py

Domain models used by the SSR CSV import flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_SSR_ROLE_TYPE = "Safety Officer"
DEFAULT_SSR_STATUS = "active"


class ImportMode(str, Enum):
    SSR_ONLY = "ssr_only"
    SSR_WITH_ASSETS = "ssr_with_assets"


@dataclass(frozen=True)
class SSRRecord:
    """
    One SSR contact row mapped onto the registry schema.
    """

    delivery_team: str
    first_name: str
    last_name: str
    email: str
    title: str | None = None
    phone: str | None = None
    role_type: str = DEFAULT_SSR_ROLE_TYPE
    status: str = DEFAULT_SSR_STATUS


@dataclass
class SSRBatchSummary:
    """
    End-of-run SSR import summary.
    """

    ssrs_created: int = 0
    assets_created: int = 0
    errors: list[str] = field(default_factory=list)

    def add_error(self, row_number: int, reason: str) -> None:
        self.errors.append(f"Row {row_number}: {reason}")

    def to_dict(self) -> dict[str, object]:
        return {
            "ssrsCreated": self.ssrs_created,
            "assetsCreated": self.assets_created,
            "errors": list(self.errors),
        }
