"""End-to-end tests for CLI exit codes.

This module runs ``python -m mgrep`` in a subprocess and checks exit codes,
standard output and standard error.
"""

import os
import subprocess
import sys

import pytest


@pytest.mark.e2e
class TestExitCodes:
    """Test suite for CLI exit codes."""

    def _run_cli(self, args: list[str], ignore_case: bool = False) -> subprocess.CompletedProcess:
        """Run the CLI with the given arguments.

        Parameters
        ----------
        args : list[str]
            Command-line arguments to pass to mgrep
        ignore_case : bool, default False
            Set ``IGNORE_CASE`` in the child environment

        Returns
        -------
        subprocess.CompletedProcess
            The result of the CLI execution

        """
        env = {key: value for key, value in os.environ.items() if not key.startswith("MGREP_") and key != "IGNORE_CASE"}
        if ignore_case:
            env["IGNORE_CASE"] = "1"
        cmd = [sys.executable, "-m", "mgrep"] + args
        return subprocess.run(cmd, capture_output=True, text=True, env=env)

    def test_exit_code_success(self, poem_file):
        result = self._run_cli(["body", str(poem_file)])

        assert result.returncode == 0
        assert result.stdout == "I'm nobody! Who are you?\nAre you nobody, too?\nHow dreary to be somebody!\n"
        assert result.stderr == ""

    def test_exit_code_success_without_matches(self, poem_file):
        result = self._run_cli(["zebra", str(poem_file)])

        assert result.returncode == 0
        assert result.stdout == ""

    def test_ignore_case_environment(self, poem_file):
        result = self._run_cli(["to", str(poem_file)], ignore_case=True)

        assert result.returncode == 0
        assert result.stdout.splitlines() == [
            "Are you nobody, too?",
            "How dreary to be somebody!",
            "To tell your name the livelong day",
            "To an admiring bog!",
        ]

    def test_exit_code_no_arguments(self):
        result = self._run_cli([])

        assert result.returncode == 1
        assert result.stdout == ""
        assert result.stderr.strip() == "Problem parsing arguments: Didn't get a query string"

    def test_exit_code_missing_file_path(self):
        result = self._run_cli(["needle"])

        assert result.returncode == 1
        assert result.stderr.strip() == "Problem parsing arguments: Didn't get a file path"

    def test_exit_code_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"

        result = self._run_cli(["needle", str(missing)])

        assert result.returncode == 1
        assert result.stdout == ""
        assert result.stderr.strip() == f"Application error: File not found: {missing}"

    def test_closed_stdout_has_no_traceback(self, tmp_path):
        big_file = tmp_path / "big.txt"
        big_file.write_text("matching line with some padding text\n" * 200_000, encoding="utf-8")
        env = {key: value for key, value in os.environ.items() if not key.startswith("MGREP_") and key != "IGNORE_CASE"}

        process = subprocess.Popen(
            [sys.executable, "-m", "mgrep", "matching", str(big_file)],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=env,
        )
        first_line = process.stdout.readline()
        process.stdout.close()
        stderr = process.stderr.read().decode("utf-8")
        returncode = process.wait(timeout=60)

        assert first_line == b"matching line with some padding text\n"
        assert returncode == 1
        assert "Traceback" not in stderr
        assert stderr == ""
