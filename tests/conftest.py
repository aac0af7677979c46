"""Pytest configuration and shared fixtures for the mgrep test suite."""

import os
from pathlib import Path

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""

RUST_BODY = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """Write the sample poem to a temporary file."""
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path


@pytest.fixture
def rust_body() -> str:
    """Short multi-line body with mixed-case lines."""
    return RUST_BODY


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that change mgrep behaviour."""
    monkeypatch.delenv("IGNORE_CASE", raising=False)
    monkeypatch.delenv("MGREP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MGREP_LOG_FILE", raising=False)
    monkeypatch.delenv("MGREP_TRACE", raising=False)
    return monkeypatch
