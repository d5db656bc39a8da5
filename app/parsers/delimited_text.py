"""
app/parsers/delimited_text.py

Line-oriented splitting of comma-delimited upload text.

This is intentionally not ``csv.reader``: quoting is not honoured and blank
lines are kept as rows, so spreadsheets exported by the portal import the
same way they always have.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.errors import EmptyInputError

DELIMITER = ","

RawRow = tuple[str, ...]
HeaderSet = tuple[str, ...]


@dataclass(frozen=True)
class ParsedText:
    """
    Header row plus untouched data lines for one upload.
    """

    headers: HeaderSet
    lines: tuple[str, ...]

    @property
    def data_lines(self) -> tuple[str, ...]:
        return self.lines[1:]


def split_row(line: str) -> RawRow:
    """
    Split one line into trimmed positional values.
    """

    return tuple(value.strip() for value in line.split(DELIMITER))


def parse_delimited_text(raw_text: str) -> ParsedText:
    """
    Split raw text into a normalized header set and data lines.

    Raises EmptyInputError when nothing remains after trimming.
    """

    trimmed = raw_text.strip()
    if not trimmed:
        raise EmptyInputError()

    lines = tuple(trimmed.split("\n"))
    headers = tuple(token.strip().lower() for token in lines[0].split(DELIMITER))
    return ParsedText(headers=headers, lines=lines)
