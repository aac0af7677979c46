"""Centralized logging utilities for mgrep entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_LEVEL_ENV = "MGREP_LOG_LEVEL"
LOG_FILE_ENV = "MGREP_LOG_FILE"
TRACE_ENV = "MGREP_TRACE"


def resolve_log_level(log_level: int | str | None, default: int = logging.WARNING) -> int:
    """Turn a numeric level or level name into a logging level.

    Unknown names fall back to ``default``.
    """
    if log_level is None or log_level == "":
        return default
    if isinstance(log_level, int):
        return log_level
    resolved = getattr(logging, str(log_level).strip().upper(), None)
    return resolved if isinstance(resolved, int) else default


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the command-line runner.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = resolve_log_level(log_level, default=logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)

    return root_logger
