from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from app.errors import SearchConfigurationError, SearchServiceError
from app.services.tds_search_service import TDSSearchService
from tds_search.adapter import BaseLLMAdapter, LLMAdapterError, MockLLMAdapter, build_adapter
from tds_search.prompt_builder import SYSTEM_PROMPT, build_user_prompt


class CapturingAdapter(BaseLLMAdapter):
    def __init__(self, reply: str = "summary", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str | None]] = []

    def generate(self, prompt: str, *, system_prompt: str | None = None) -> str:
        self.calls.append((prompt, system_prompt))
        if self.error is not None:
            raise self.error
        return self.reply


ENTRY = {
    "reference": "TDS-0001",
    "designation": "Land Rover Wolf",
    "nsn": "2320-99-123-4567",
    "short_name": "Wolf",
    "asset_type": "Vehicle",
    "status": "Approved",
}


def test_matches_are_returned_with_model_summary(make_tds_repository) -> None:
    adapter = CapturingAdapter(reply="One Land Rover match.")
    repository = make_tds_repository(entries=[ENTRY])
    service = TDSSearchService(adapter=adapter, result_limit=5)

    response = service.search(query="wolf", repository=repository)

    assert response.results == [ENTRY]
    assert response.ai_summary == "One Land Rover match."
    assert response.query == "wolf"
    assert repository.queries == [("wolf", 5)]
    prompt, system_prompt = adapter.calls[0]
    assert system_prompt == SYSTEM_PROMPT
    assert "Found 1 matches" in prompt
    assert "TDS-0001" in prompt


def test_database_failure_degrades_to_no_matches(make_tds_repository) -> None:
    adapter = CapturingAdapter()
    repository = make_tds_repository(error=OperationalError("SELECT", {}, Exception("down")))

    response = TDSSearchService(adapter=adapter).search(query="wolf", repository=repository)

    assert response.results == []
    assert "No exact matches found" in adapter.calls[0][0]


def test_model_failure_is_a_service_error(make_tds_repository) -> None:
    adapter = CapturingAdapter(error=LLMAdapterError("timeout"))

    with pytest.raises(SearchServiceError, match="AI service error"):
        TDSSearchService(adapter=adapter).search(query="wolf", repository=make_tds_repository())


def test_missing_adapter_is_a_configuration_error(make_tds_repository) -> None:
    repository = make_tds_repository()

    with pytest.raises(SearchConfigurationError):
        TDSSearchService(adapter=None).search(query="wolf", repository=repository)
    assert repository.queries == []


def test_response_serializes_with_camel_case_summary(make_tds_repository) -> None:
    response = TDSSearchService(adapter=MockLLMAdapter()).search(
        query="wolf",
        repository=make_tds_repository(),
    )

    payload = response.model_dump(by_alias=True)
    assert set(payload) == {"results", "aiSummary", "query"}
    assert payload["aiSummary"].startswith("Mock summary.")


def test_build_user_prompt_without_matches_asks_for_suggestions() -> None:
    prompt = build_user_prompt("gizmo", [])
    assert prompt.startswith('Search query: "gizmo"')
    assert "alternative search terms" in prompt


def test_build_adapter_rejects_unknown_names() -> None:
    assert isinstance(build_adapter("mock"), MockLLMAdapter)
    with pytest.raises(ValueError):
        build_adapter("carrier-pigeon")
