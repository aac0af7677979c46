"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mgrep/cli/output.py
from __future__ import annotations

import sys
import unicodedata
from typing import IO, Iterable

MATCH_STYLE = "bold red"


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(stream: IO[str] | None = None) -> bool:
    """Determine if Rich output should be used for a stream.

    Parameters
    ----------
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when the stream is a TTY and the Rich library is
    available. Redirected output is always plain text.

    """
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if not callable(isatty):
        return False
    try:
        if not isatty():
            return False
    except (OSError, ValueError):
        return False

    return check_rich_available()


def _write_plain(lines: Iterable[str], stream: IO[str]) -> None:
    for line in lines:
        stream.write(line)
        stream.write("\n")


def _has_control_characters(line: str) -> bool:
    """Return True if Rich would rewrite part of ``line`` (tabs, \\r, \\f, ...)."""
    return any(unicodedata.category(char) == "Cc" for char in line)


def _write_rich(lines: Iterable[str], query: str, ignore_case: bool, stream: IO[str]) -> None:
    from rich.console import Console
    from rich.text import Text

    console = Console(file=stream, highlight=False, soft_wrap=True)
    for line in lines:
        if _has_control_characters(line):
            stream.write(line)
            stream.write("\n")
            continue
        text = Text(line)
        if query:
            text.highlight_words([query], style=MATCH_STYLE, case_sensitive=not ignore_case)
        console.print(text)


def write_lines(lines: Iterable[str], query: str = "", ignore_case: bool = False, stream: IO[str] | None = None) -> None:
    """Write matching lines, one per line, to ``stream``.

    On an interactive terminal with Rich installed, occurrences of ``query``
    are highlighted. The line text is never altered.

    Parameters
    ----------
    lines : Iterable[str]
        Lines to write, in order
    query : str, default ""
        Query to highlight when Rich output is active
    ignore_case : bool, default False
        Highlight occurrences regardless of case
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    """
    target = stream or sys.stdout
    if should_use_rich_output(target):
        _write_rich(lines, query, ignore_case, target)
    else:
        _write_plain(lines, target)
