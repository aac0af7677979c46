"""Command-line interface for mgrep.

Prints every line of a file that contains a query string::

    $ mgrep to poem.txt
    Are you nobody, too?
    How dreary to be somebody!

Environment Variable Support
----------------------------
IGNORE_CASE
    If set to any value (even an empty string), matching ignores case::

        $ IGNORE_CASE=1 mgrep to poem.txt

MGREP_LOG_LEVEL
    Logging level for diagnostics on stderr (default ``WARNING``).

MGREP_LOG_FILE
    Also append log records to this file.

MGREP_TRACE
    If set, log at DEBUG with timestamps and logger names.

Exit Codes
----------
0 on success (including when no line matches), 1 when the arguments are
incomplete, the file cannot be read, or standard output is closed early
(for example by ``head``).
"""

import logging
import os
import sys
from typing import IO, Sequence

from mgrep.cli.output import write_lines
from mgrep.config import Config, ConfigBuilder
from mgrep.exceptions import ConfigError, FileError
from mgrep.io_utils import read_text_file
from mgrep.logging_utils import LOG_FILE_ENV, LOG_LEVEL_ENV, TRACE_ENV, configure_logging, resolve_log_level
from mgrep.search import filter_lines

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1

__all__ = [
    "EXIT_ERROR",
    "EXIT_SUCCESS",
    "main",
    "run",
]


def run(config: Config, stream: IO[str] | None = None) -> int:
    """Search the file named by ``config`` and write the matching lines.

    Parameters
    ----------
    config : Config
        Validated search parameters
    stream : optional, default None
        Destination for matching lines. Uses sys.stdout unless otherwise specified.

    Returns
    -------
    int
        Number of matching lines written

    Raises
    ------
    FileError
        If the file cannot be read or decoded. Nothing is written in that case.

    """
    contents = read_text_file(config.file_path)
    results = filter_lines(config.query, contents, ignore_case=config.ignore_case)
    logger.debug(
        "%d matching line(s) for %r in %s (ignore_case=%s)",
        len(results),
        config.query,
        config.file_path,
        config.ignore_case,
    )
    write_lines(results, query=config.query, ignore_case=config.ignore_case, stream=stream)
    return len(results)


def _setup_logging_level() -> None:
    """Set up logging from the environment.

    ``MGREP_TRACE`` (any value) takes precedence and forces DEBUG with the
    timestamped format, then ``MGREP_LOG_LEVEL``. ``MGREP_LOG_FILE`` tees
    log output to a file.
    """
    trace_mode = TRACE_ENV in os.environ
    if trace_mode:
        log_level = logging.DEBUG
    else:
        log_level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV))

    configure_logging(log_level, log_file=os.environ.get(LOG_FILE_ENV) or None, trace_mode=trace_mode)


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    try:
        stdout_fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, stdout_fd)
    os.close(devnull)


def main(args: Sequence[str] | None = None) -> int:
    """Execute the CLI and return the process exit code.

    Parameters
    ----------
    args : Sequence[str], optional
        Full argument vector, program name first. Defaults to ``sys.argv``.

    """
    _setup_logging_level()

    try:
        config = ConfigBuilder().build(sys.argv if args is None else args)
    except ConfigError as e:
        print(f"Problem parsing arguments: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    try:
        run(config)
    except FileError as e:
        logger.debug("Failed to search %s", config.file_path, exc_info=e.original_error)
        print(f"Application error: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    except BrokenPipeError:
        logger.debug("Output closed before all lines were written")
        _silence_stdout()
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
