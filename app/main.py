from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from app.errors import RequestProcessingError

logger = logging.getLogger(__name__)


def _validate_env() -> None:
    """
    Validate required environment variables at startup.

    Raises RuntimeError listing every missing or invalid variable so the
    operator can fix all problems in one restart cycle.

    Rules:
    - A database URL must be configured through one of the supported names.
    - The LLM API key check is skipped only when LLM_ADAPTER=mock.
    """

    from db.config import load_env_files

    load_env_files()

    errors: list[str] = []

    # --- Database URL ---------------------------------------------------
    database_names = ("DATABASE_URL", "SUPABASE_DB_URL", "CLOUD_DATABASE_URL", "LOCAL_DATABASE_URL")
    if not any(os.getenv(name, "").strip() for name in database_names):
        errors.append(
            "No database URL configured. Set one of: " + ", ".join(database_names) + "."
        )

    # --- LLM adapter ----------------------------------------------------
    adapter = os.getenv("LLM_ADAPTER", "openai").strip().lower()
    if adapter not in {"openai", "mock"}:
        errors.append(f"LLM_ADAPTER='{adapter}' is not valid. Allowed values: ['mock', 'openai'].")
    elif adapter != "mock":
        llm_api_key = os.getenv("LLM_API_KEY", "").strip()
        openai_api_key = os.getenv("OPENAI_API_KEY", "").strip()
        if not llm_api_key and not openai_api_key:
            errors.append(
                "LLM API key is not set. Provide LLM_API_KEY or OPENAI_API_KEY, "
                "or set LLM_ADAPTER=mock."
            )

    if errors:
        raise RuntimeError(
            "Startup validation failed: missing or invalid environment variables:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _check_db() -> None:
    """Open a session and run SELECT 1. Raises RuntimeError if the DB is unreachable."""
    from sqlalchemy import text

    from db.session import SessionLocal

    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
    except Exception as exc:
        raise RuntimeError("Database unavailable.") from exc


def _check_schema() -> None:
    """
    Every table registered on Base.metadata must exist in the database.

    Does NOT auto-migrate; the operator runs 'alembic upgrade head'.
    """
    from sqlalchemy import inspect as sa_inspect

    import db.models  # noqa: F401 registers all ORM models on Base.metadata
    from db.base import Base
    from db.session import get_engine

    inspector = sa_inspect(get_engine())
    actual: set[str] = set(inspector.get_table_names())
    expected: set[str] = set(Base.metadata.tables.keys())
    missing = expected - actual

    if missing:
        logger.critical(
            "Schema mismatch: %d table(s) defined in ORM metadata are absent from "
            "the database: %s. Run 'alembic upgrade head' and restart.",
            len(missing),
            ", ".join(sorted(missing)),
        )
        raise RuntimeError(
            f"Schema mismatch: {len(missing)} table(s) missing from the database "
            f"({', '.join(sorted(missing))}). Run migrations and restart."
        )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Validate DB connectivity and schema before serving traffic."""
    _check_db()
    logger.info("Database connectivity confirmed")
    _check_schema()
    logger.info("Database schema validated")
    yield
    logger.info("API shutting down")


async def _request_error_handler(request: Request, exc: RequestProcessingError) -> JSONResponse:
    logger.error("Request failed path=%s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    from app.api.cors import cors_headers
    from app.config import get_cors_settings

    logger.exception("Unhandled error path=%s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or exc.__class__.__name__},
        headers=cors_headers(get_cors_settings(), request.headers.get("origin")),
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Run with ``uvicorn app.main:create_app --factory``.
    """

    _validate_env()
    _configure_logging()

    from app.api.cors import ALLOWED_METHODS, EmptyPreflightCORSMiddleware, cors_headers
    from app.api.routers import (
        asset_import_router,
        notifications_router,
        ssr_import_router,
        tds_search_router,
    )
    from app.config import get_cors_settings

    cors_settings = get_cors_settings()

    application = FastAPI(
        title="TDS Registry API",
        version="1.0.0",
        lifespan=_lifespan,
    )
    application.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=list(cors_settings.allow_origins),
        allow_methods=list(ALLOWED_METHODS),
        allow_headers=list(cors_settings.allow_headers),
    )
    application.add_exception_handler(RequestProcessingError, _request_error_handler)
    application.add_exception_handler(Exception, _unhandled_error_handler)

    application.include_router(asset_import_router)
    application.include_router(ssr_import_router)
    application.include_router(tds_search_router)
    application.include_router(notifications_router)

    @application.options("/{path:path}", include_in_schema=False)
    def preflight(path: str, request: Request) -> Response:
        return Response(status_code=200, headers=cors_headers(cors_settings, request.headers.get("origin")))

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application
