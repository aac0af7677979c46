#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Line filtering for case-sensitive and case-insensitive substring search.

Lines are delimited by ``\\n``; a ``\\r`` immediately before a newline is
dropped (a lone ``\\r`` at the very end is kept), a trailing newline does not produce an extra empty line, and an
empty body has no lines. Every filter is a single pass over the lines with
a stateless per-line predicate, so results keep the original line order and
repeated lines are reported every time they occur.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class LineMatch:
    """A matching line, as a span into the searched text.

    Parameters
    ----------
    line_number : int
        1-based line number within the text
    start : int
        Offset of the first character of the line
    end : int
        Offset just past the last character, excluding any line terminator

    """

    line_number: int
    start: int
    end: int

    def text(self, body: str) -> str:
        """Return the matched line from the text it was found in."""
        return body[self.start : self.end]


def _line_spans(body: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` offsets for each line of ``body``."""
    start = 0
    length = len(body)
    while start < length:
        newline = body.find("\n", start)
        if newline == -1:
            next_start = end = length
        else:
            end = newline
            next_start = newline + 1
            if end > start and body[end - 1] == "\r":
                end -= 1
        yield start, end
        start = next_start


def split_lines(body: str) -> list[str]:
    """Split text into lines without their terminators.

    Only ``\\n`` (optionally preceded by ``\\r``) ends a line, unlike
    :meth:`str.splitlines`, which also breaks on form feeds and Unicode
    separators.

    Examples
    --------
    >>> split_lines("one\\r\\ntwo\\n")
    ['one', 'two']
    >>> split_lines("")
    []

    """
    return [body[start:end] for start, end in _line_spans(body)]


def line_matches(query: str, line: str, ignore_case: bool = False) -> bool:
    """Return True if ``line`` contains ``query``.

    With ``ignore_case`` both sides are lowercased for the comparison.
    """
    if ignore_case:
        return query.lower() in line.lower()
    return query in line


def search(query: str, body: str) -> list[str]:
    """Return the lines of ``body`` that contain ``query`` exactly.

    Parameters
    ----------
    query : str
        Substring to look for. An empty query matches every line.
    body : str
        Full text to search

    Returns
    -------
    list[str]
        Matching lines in their original order

    Examples
    --------
    >>> search("duct", "Rust:\\nsafe, fast, productive.\\nPick three.\\nDuct tape.")
    ['safe, fast, productive.']

    """
    return [line for line in split_lines(body) if query in line]


def search_case_insensitive(query: str, body: str) -> list[str]:
    """Return the lines of ``body`` that contain ``query``, ignoring case.

    Lowercasing is applied only for the comparison; the returned lines keep
    their original casing.

    Examples
    --------
    >>> search_case_insensitive("rUsT", "Rust:\\nsafe, fast, productive.\\nTrust me.")
    ['Rust:', 'Trust me.']

    """
    lowered_query = query.lower()
    return [line for line in split_lines(body) if lowered_query in line.lower()]


def filter_lines(query: str, body: str, ignore_case: bool = False) -> list[str]:
    """Return matching lines using the variant selected by ``ignore_case``."""
    if ignore_case:
        return search_case_insensitive(query, body)
    return search(query, body)


def find_matches(query: str, body: str, ignore_case: bool = False) -> list[LineMatch]:
    """Return spans for the matching lines of ``body``.

    The spans select exactly the lines :func:`filter_lines` would return,
    without copying them out of ``body``.

    Parameters
    ----------
    query : str
        Substring to look for
    body : str
        Full text to search; the spans index into it
    ignore_case : bool, default False
        Compare lowercased text

    Returns
    -------
    list[LineMatch]
        One span per matching line, in order

    """
    needle = query.lower() if ignore_case else query
    return [
        LineMatch(line_number=number, start=start, end=end)
        for number, (start, end) in enumerate(_line_spans(body), start=1)
        if needle in (body[start:end].lower() if ignore_case else body[start:end])
    ]
