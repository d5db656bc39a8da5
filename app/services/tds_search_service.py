"""
app/services/tds_search_service.py

AI-assisted TDS search: database lookup followed by one model summary call.

The model call is its own failure tier. A failed database lookup degrades to
"no matches" and the model is still asked for suggestions, but a failed model
call fails the whole request.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from app.config import get_tds_search_settings
from app.errors import SearchConfigurationError, SearchServiceError
from app.logging_utils import log_event
from app.repositories.tds_entry_repository import TDSEntryRepository
from tds_search.adapter import BaseLLMAdapter, LLMAdapterError, build_adapter
from tds_search.prompt_builder import SYSTEM_PROMPT, build_user_prompt
from tds_search.schema import TDSSearchResponse

logger = logging.getLogger(__name__)


class TDSSearchService:
    def __init__(self, *, adapter: BaseLLMAdapter | None, result_limit: int = 10) -> None:
        self._adapter = adapter
        self._result_limit = max(1, result_limit)

    def search(self, *, query: str, repository: TDSEntryRepository) -> TDSSearchResponse:
        """
        Look up matching entries and ask the model to summarize them.

        Raises:
            SearchConfigurationError: when no model adapter is configured.
            SearchServiceError: when the model call fails.
        """

        if self._adapter is None:
            raise SearchConfigurationError("LLM_API_KEY is not configured")

        matches: list[dict[str, Any]]
        try:
            matches = repository.search(query, limit=self._result_limit)
        except SQLAlchemyError as exc:
            logger.error("TDS database search failed query=%r: %s", query, exc)
            matches = []

        prompt = build_user_prompt(query, matches)
        try:
            summary = self._adapter.generate(prompt, system_prompt=SYSTEM_PROMPT)
        except LLMAdapterError as exc:
            logger.error("AI summary request failed query=%r: %s", query, exc)
            raise SearchServiceError("AI service error") from exc

        log_event(logger, logging.INFO, "tds_search_completed", query=query, matches=len(matches))
        return TDSSearchResponse(results=matches, ai_summary=summary, query=query)


@lru_cache(maxsize=1)
def get_tds_search_service() -> TDSSearchService:
    """
    Build and cache the search service with env-driven settings.

    A missing API key leaves the adapter unset so the endpoint reports the
    configuration problem per request instead of failing at startup.
    """
    settings = get_tds_search_settings()
    adapter: BaseLLMAdapter | None = None
    if settings.adapter == "mock" or settings.api_key:
        adapter = build_adapter(
            settings.adapter,
            api_key=settings.api_key,
            base_url=settings.base_url,
            model=settings.model,
            max_tokens=settings.max_tokens,
            timeout_seconds=settings.timeout_seconds,
        )
    return TDSSearchService(adapter=adapter, result_limit=settings.result_limit)
