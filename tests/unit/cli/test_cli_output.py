"""Unit tests for writing matching lines."""

import io
import re
from importlib.util import find_spec
from unittest.mock import patch

import pytest

from mgrep.cli.output import check_rich_available, should_use_rich_output, write_lines

RICH_AVAILABLE = find_spec("rich") is not None


class _FakeTTY(io.StringIO):
    def isatty(self):
        return True


@pytest.mark.unit
@pytest.mark.cli
class TestRichDetection:
    """Choosing between plain and Rich output."""

    def test_plain_for_non_tty(self):
        assert should_use_rich_output(io.StringIO()) is False

    def test_plain_when_rich_missing(self):
        with patch("mgrep.cli.output.check_rich_available", return_value=False):
            assert should_use_rich_output(_FakeTTY()) is False

    def test_rich_for_tty(self):
        with patch("mgrep.cli.output.check_rich_available", return_value=True):
            assert should_use_rich_output(_FakeTTY()) is True

    def test_stream_without_isatty(self):
        class Sink:
            def write(self, text):
                pass

        assert should_use_rich_output(Sink()) is False

    def test_check_rich_available_matches_installation(self):
        assert check_rich_available() is RICH_AVAILABLE


@pytest.mark.unit
@pytest.mark.cli
class TestWriteLines:
    """Line output."""

    def test_plain_output_one_line_each(self):
        stream = io.StringIO()

        write_lines(["first", "", "third"], query="i", stream=stream)

        assert stream.getvalue() == "first\n\nthird\n"

    def test_no_lines_writes_nothing(self):
        stream = io.StringIO()

        write_lines([], stream=stream)

        assert stream.getvalue() == ""

    @pytest.mark.skipif(not RICH_AVAILABLE, reason="rich not installed")
    def test_rich_output_keeps_line_text(self):
        stream = _FakeTTY()

        write_lines(["Rust:", "Trust me."], query="RUST", ignore_case=True, stream=stream)

        plain = re.sub(r"\x1b\[[0-9;]*m", "", stream.getvalue())
        assert plain == "Rust:\nTrust me.\n"

    @pytest.mark.skipif(not RICH_AVAILABLE, reason="rich not installed")
    def test_rich_output_keeps_control_characters(self):
        stream = _FakeTTY()

        write_lines(["a\tb", "two\r", "x\x0cy"], query="zz", stream=stream)

        assert stream.getvalue() == "a\tb\ntwo\r\nx\x0cy\n"

    @pytest.mark.skipif(not RICH_AVAILABLE, reason="rich not installed")
    def test_rich_output_mixes_plain_and_highlighted_lines_in_order(self):
        stream = _FakeTTY()

        write_lines(["first\tmatch", "second match"], query="match", stream=stream)

        plain = re.sub(r"\x1b\[[0-9;]*m", "", stream.getvalue())
        assert plain == "first\tmatch\nsecond match\n"
