"""LLM adapters for TDS search summaries.

Provides a base interface, an adapter for OpenAI-compatible chat completion
gateways and a deterministic mock for tests and offline runs.
"""

import os
from abc import ABC, abstractmethod
from typing import Optional


class LLMAdapterError(Exception):
    """Raised when the model call fails, times out, or returns nothing."""


class BaseLLMAdapter(ABC):
    """Abstract base for all LLM adapters."""

    @abstractmethod
    def generate(self, prompt: str, *, system_prompt: Optional[str] = None) -> str:
        """Send a prompt to the LLM and return the response text.

        Args:
            prompt: The user message.
            system_prompt: Optional system message sent ahead of the prompt.

        Returns:
            Text content of the first completion choice.

        Raises:
            LLMAdapterError: On transport, status or empty-response failures.
        """


class OpenAILLMAdapter(BaseLLMAdapter):
    """Adapter for OpenAI-compatible chat completion APIs.

    One blocking request per call, bounded by ``timeout_seconds``. The client
    is built with ``max_retries=0`` so a slow gateway cannot stretch the
    request beyond its timeout.
    """

    def __init__(
        self,
        model: str = "google/gemini-2.5-flash",
        max_tokens: int = 1024,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        """Initialise the OpenAI adapter.

        Args:
            model: Model identifier understood by the gateway.
            max_tokens: Maximum tokens in the completion.
            api_key: API key. Falls back to the OPENAI_API_KEY env var.
            base_url: Optional base URL for OpenAI-compatible gateways.
            timeout_seconds: Per-request timeout.
        """
        try:
            from openai import OpenAI, OpenAIError  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError(
                "openai package is required for OpenAILLMAdapter. "
                "Install it with: pip install openai"
            ) from exc

        resolved_key = api_key or os.environ.get("OPENAI_API_KEY", "")
        client_kwargs: dict = {
            "api_key": resolved_key,
            "timeout": timeout_seconds,
            "max_retries": 0,
        }
        if base_url:
            client_kwargs["base_url"] = base_url

        self._client = OpenAI(**client_kwargs)
        self._error_type = OpenAIError
        self._model = model
        self._max_tokens = max_tokens

    def generate(self, prompt: str, *, system_prompt: Optional[str] = None) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                max_tokens=self._max_tokens,
                stream=False,
            )
        except self._error_type as exc:
            raise LLMAdapterError(f"Chat completion request failed: {exc}") from exc

        if not response.choices:
            raise LLMAdapterError("Chat completion returned no choices.")
        content = response.choices[0].message.content
        if not content:
            raise LLMAdapterError("Chat completion returned empty content.")
        return content


class MockLLMAdapter(BaseLLMAdapter):
    """Deterministic adapter used in tests and CI where no gateway exists."""

    def generate(self, prompt: str, *, system_prompt: Optional[str] = None) -> str:
        first_line = prompt.splitlines()[0] if prompt else ""
        return f"Mock summary. {first_line}".strip()


def build_adapter(
    name: str,
    *,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    model: str = "google/gemini-2.5-flash",
    max_tokens: int = 1024,
    timeout_seconds: float = 30.0,
) -> BaseLLMAdapter:
    """Return the adapter registered under ``name`` ("openai" or "mock")."""
    if name == "mock":
        return MockLLMAdapter()
    if name == "openai":
        return OpenAILLMAdapter(
            model=model,
            max_tokens=max_tokens,
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
    raise ValueError(f"Unknown LLM adapter '{name}'. Allowed values: ['mock', 'openai'].")
