"""
tds_search: language-model support for the AI-assisted TDS search.
"""

from tds_search.adapter import (
    BaseLLMAdapter,
    LLMAdapterError,
    MockLLMAdapter,
    OpenAILLMAdapter,
    build_adapter,
)
from tds_search.prompt_builder import SYSTEM_PROMPT, build_user_prompt
from tds_search.schema import TDSSearchRequest, TDSSearchResponse

__all__ = [
    "BaseLLMAdapter",
    "LLMAdapterError",
    "MockLLMAdapter",
    "OpenAILLMAdapter",
    "SYSTEM_PROMPT",
    "TDSSearchRequest",
    "TDSSearchResponse",
    "build_adapter",
    "build_user_prompt",
]
