"""Substring search over the lines of a text blob."""

from __future__ import annotations

from collections.abc import Iterator


def lines(contents: str) -> Iterator[str]:
    """Yield the lines of contents without their terminators.

    Lines end at ``\\n``; a ``\\r`` right before it is dropped too. A trailing
    line break does not produce an empty last line.
    """
    if not contents:
        return
    parts = contents.split("\n")
    if parts[-1] == "":
        parts.pop()
    for line in parts:
        yield line[:-1] if line.endswith("\r") else line


def search(query: str, contents: str) -> list[str]:
    """Return the lines of contents containing query, in order."""
    return [line for line in lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Like search, but both sides are lowercased before comparing."""
    query = query.lower()
    return [line for line in lines(contents) if query in line.lower()]


def search_lines(query: str, contents: str, case_sensitive: bool = True) -> list[str]:
    """Pick the search variant for case_sensitive."""
    if case_sensitive:
        return search(query, contents)
    return search_case_insensitive(query, contents)
