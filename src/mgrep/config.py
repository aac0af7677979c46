#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Search configuration built from the command-line argument vector.

A :class:`Config` is created once per run from the raw argument vector and
the presence of the ``IGNORE_CASE`` environment variable. Two argument shapes
are accepted: a single-pass iterable (``sys.argv`` style, consumed forward
only) and an indexed sequence, which is validated for length and then fed
through the same single-pass path.

The environment lookup is a zero-argument callable so that tests can supply
a fixed value without touching ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Mapping, Sequence

from mgrep.exceptions import InsufficientArgumentsError, MissingFilePathError, MissingQueryError

logger = logging.getLogger(__name__)

IGNORE_CASE_ENV = "IGNORE_CASE"

EnvFlag = Callable[[], bool]


def ignore_case_from_env(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when ``IGNORE_CASE`` is present, whatever its value.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment to inspect. Defaults to ``os.environ``.

    Returns
    -------
    bool
        True if the variable is set (even to an empty string)

    """
    if environ is None:
        environ = os.environ
    return IGNORE_CASE_ENV in environ


@dataclass(frozen=True)
class Config:
    """Validated, immutable parameters for one search run.

    Parameters
    ----------
    query : str
        Text to look for in each line. The empty string matches every line.
    file_path : str
        Path of the file to search. Existence is checked when the file is read.
    ignore_case : bool, default False
        Compare lowercased text instead of exact text.

    """

    query: str
    file_path: str
    ignore_case: bool = False

    def create_updated(self, **kwargs: Any) -> Config:
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)


class ConfigBuilder:
    """Build :class:`Config` values from argument vectors.

    Parameters
    ----------
    env_flag : callable, optional
        Zero-argument callable reporting whether case-insensitive matching
        was requested. Defaults to checking ``IGNORE_CASE`` in the process
        environment.

    Examples
    --------
    >>> builder = ConfigBuilder(env_flag=lambda: False)
    >>> builder.build(["mgrep", "needle", "haystack.txt"])
    Config(query='needle', file_path='haystack.txt', ignore_case=False)

    """

    def __init__(self, env_flag: EnvFlag | None = None):
        """Initialize the builder with an environment lookup."""
        self._env_flag: EnvFlag = env_flag if env_flag is not None else ignore_case_from_env

    def build(self, args: Iterable[str]) -> Config:
        """Build a Config from a single-pass source of arguments.

        The first element is the program name and is skipped. Elements after
        the file path are left unconsumed.

        Parameters
        ----------
        args : Iterable[str]
            Argument source, consumed forward only

        Returns
        -------
        Config
            The validated configuration

        Raises
        ------
        MissingQueryError
            If the source ends before the query
        MissingFilePathError
            If the source ends before the file path

        """
        remaining = iter(args)
        next(remaining, None)

        query = next(remaining, None)
        if query is None:
            raise MissingQueryError()

        file_path = next(remaining, None)
        if file_path is None:
            raise MissingFilePathError()

        config = Config(query=query, file_path=file_path, ignore_case=bool(self._env_flag()))
        logger.debug("Built config: %r", config)
        return config

    def build_from_list(self, args: Sequence[str]) -> Config:
        """Build a Config from an indexed argument list.

        Position 0 is the program name, 1 the query and 2 the file path.

        Raises
        ------
        InsufficientArgumentsError
            If fewer than three arguments are present

        """
        if len(args) < 3:
            raise InsufficientArgumentsError()
        return self.build(iter(args))


def build_config(args: Iterable[str], env_flag: EnvFlag | None = None) -> Config:
    """Build a Config from a single-pass argument source."""
    return ConfigBuilder(env_flag=env_flag).build(args)


def build_config_from_list(args: Sequence[str], env_flag: EnvFlag | None = None) -> Config:
    """Build a Config from an indexed argument list."""
    return ConfigBuilder(env_flag=env_flag).build_from_list(args)
