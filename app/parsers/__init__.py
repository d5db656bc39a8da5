"""
app/parsers package marker.
"""

from app.parsers.delimited_text import ParsedText, parse_delimited_text, split_row

__all__ = [
    "ParsedText",
    "parse_delimited_text",
    "split_row",
]
