"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files

_TRUE_VALUES = {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in _TRUE_VALUES


def _get_int_env(name: str, default: int) -> int:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(*names: str) -> str | None:
    """
    Return the first non-empty value among the given variable names.
    """

    _load_env_once()
    for name in names:
        value = os.getenv(name)
        if value is not None and value.strip():
            return value.strip()
    return None


@dataclass(frozen=True)
class AssetImportSettings:
    """
    Runtime settings for CSV imports.

    ``reject_short_rows`` turns rows with fewer values than headers into row
    failures instead of padding them with empty strings.
    """

    reject_short_rows: bool = False
    log_row_errors: bool = True


@dataclass(frozen=True)
class TDSSearchSettings:
    """
    Language-model settings for the AI-assisted TDS search.
    """

    adapter: str = "openai"
    api_key: str | None = None
    base_url: str | None = None
    model: str = "google/gemini-2.5-flash"
    timeout_seconds: float = 30.0
    max_tokens: int = 1024
    result_limit: int = 10


@dataclass(frozen=True)
class CORSSettings:
    allow_origins: tuple[str, ...] = ("*",)
    allow_headers: tuple[str, ...] = (
        "authorization",
        "x-client-info",
        "apikey",
        "content-type",
    )


@lru_cache(maxsize=1)
def get_asset_import_settings() -> AssetImportSettings:
    """
    Return cached import settings from environment variables.
    """

    return AssetImportSettings(
        reject_short_rows=_get_bool_env("ASSET_IMPORT_REJECT_SHORT_ROWS", False),
        log_row_errors=_get_bool_env("ASSET_IMPORT_LOG_ROW_ERRORS", True),
    )


@lru_cache(maxsize=1)
def get_tds_search_settings() -> TDSSearchSettings:
    """
    Return cached search settings.

    The API key is read from LLM_API_KEY first, then OPENAI_API_KEY.
    """

    return TDSSearchSettings(
        adapter=_get_str_env("LLM_ADAPTER", "openai").lower(),
        api_key=_get_optional_str_env("LLM_API_KEY", "OPENAI_API_KEY"),
        base_url=_get_optional_str_env("LLM_BASE_URL"),
        model=_get_str_env("LLM_MODEL", "google/gemini-2.5-flash"),
        timeout_seconds=max(1.0, _get_float_env("TDS_SEARCH_TIMEOUT_SECONDS", 30.0)),
        max_tokens=max(1, _get_int_env("LLM_MAX_TOKENS", 1024)),
        result_limit=max(1, _get_int_env("TDS_SEARCH_RESULT_LIMIT", 10)),
    )


@lru_cache(maxsize=1)
def get_cors_settings() -> CORSSettings:
    raw_origins = _get_str_env("CORS_ALLOW_ORIGINS", "*")
    origins = tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip())
    return CORSSettings(allow_origins=origins or ("*",))
