"""Lexical scanning of configured SQL into code, literal and comment segments."""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum


class SqlSegment(StrEnum):
    """Kind of one contiguous run of SQL text."""

    CODE = "code"
    LITERAL = "literal"
    COMMENT = "comment"


def scan_sql(query: str) -> Iterator[tuple[SqlSegment, str]]:
    """Yield consecutive segments that concatenate back to ``query``.

    Quoted strings and identifiers are LITERAL, ``--`` and ``/* */`` comments are
    COMMENT. An unterminated literal or comment runs to the end of the text.
    """

    position = 0
    code_start = 0
    length = len(query)
    while position < length:
        char = query[position]
        if char in ("'", '"'):
            end = query.find(char, position + 1)
            end = length if end == -1 else end + 1
            kind = SqlSegment.LITERAL
        elif query.startswith("--", position):
            end = query.find("\n", position + 2)
            end = length if end == -1 else end
            kind = SqlSegment.COMMENT
        elif query.startswith("/*", position):
            end = query.find("*/", position + 2)
            end = length if end == -1 else end + 2
            kind = SqlSegment.COMMENT
        else:
            position += 1
            continue

        if code_start < position:
            yield SqlSegment.CODE, query[code_start:position]
        yield kind, query[position:end]
        position = end
        code_start = end

    if code_start < length:
        yield SqlSegment.CODE, query[code_start:]


def top_level_code(query: str) -> str:
    """Return ``query`` with literals, comments and parenthesised text blanked out.

    The result has the same length as ``query``, so offsets line up.
    """

    parts: list[str] = []
    depth = 0
    for kind, text in scan_sql(query):
        if kind is not SqlSegment.CODE:
            parts.append(" " * len(text))
            continue
        for char in text:
            if char == "(":
                depth += 1
                parts.append(" ")
            elif char == ")":
                depth = max(depth - 1, 0)
                parts.append(" ")
            else:
                parts.append(char if depth == 0 else " ")
    return "".join(parts)


def open_statement_end(query: str) -> str:
    """Strip a trailing ``;`` so more SQL can follow, ending any open ``--`` comment."""

    base = query.rstrip().rstrip(";").rstrip()
    segments = list(scan_sql(base))
    if segments:
        kind, text = segments[-1]
        if kind is SqlSegment.COMMENT and text.startswith("--"):
            return f"{base}\n"
    return base
