"""Prompt text for the TDS search summary."""

import json
from typing import Any, Mapping, Sequence

SYSTEM_PROMPT = (
    "You are a TDS (Tie Down Scheme) search assistant. Help users find "
    "transportation data sheets for military vehicles and equipment. "
    "When given search results, provide a concise summary and highlight the "
    "most relevant matches."
)


def build_user_prompt(query: str, matches: Sequence[Mapping[str, Any]]) -> str:
    if matches:
        return (
            f'Search query: "{query}"\n\n'
            f"Found {len(matches)} matches:\n"
            f"{json.dumps(list(matches), indent=2, default=str)}\n\n"
            "Provide a helpful summary of these results."
        )
    return (
        f'Search query: "{query}"\n\n'
        "No exact matches found in the database. Provide helpful suggestions "
        "for alternative search terms or what the user should look for in a TDS."
    )
