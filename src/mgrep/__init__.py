"""mgrep - print the lines of a file that contain a query string.

mgrep is a small substring search tool. Given a query and a file path it
prints every line of the file containing the query, optionally ignoring case
when the ``IGNORE_CASE`` environment variable is set.

Examples
--------
Searching text directly:

    >>> from mgrep import search, search_case_insensitive
    >>> poem = "Rust:\\nsafe, fast, productive.\\nPick three.\\nTrust me."
    >>> search("duct", poem)
    ['safe, fast, productive.']
    >>> search_case_insensitive("rUsT", poem)
    ['Rust:', 'Trust me.']

Building a configuration and running a search:

    >>> from mgrep import ConfigBuilder, run
    >>> config = ConfigBuilder().build(["mgrep", "to", "poem.txt"])
    >>> run(config)  # doctest: +SKIP

"""

from mgrep.cli import main, run
from mgrep.config import (
    IGNORE_CASE_ENV,
    Config,
    ConfigBuilder,
    build_config,
    build_config_from_list,
    ignore_case_from_env,
)
from mgrep.exceptions import (
    ConfigError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    InsufficientArgumentsError,
    MalformedFileError,
    MgrepError,
    MissingFilePathError,
    MissingQueryError,
)
from mgrep.io_utils import read_text_file
from mgrep.search import (
    LineMatch,
    filter_lines,
    find_matches,
    line_matches,
    search,
    search_case_insensitive,
    split_lines,
)

__version__ = "0.1.0"

__all__ = [
    "IGNORE_CASE_ENV",
    "Config",
    "ConfigBuilder",
    "ConfigError",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "InsufficientArgumentsError",
    "LineMatch",
    "MalformedFileError",
    "MgrepError",
    "MissingFilePathError",
    "MissingQueryError",
    "build_config",
    "build_config_from_list",
    "filter_lines",
    "find_matches",
    "ignore_case_from_env",
    "line_matches",
    "main",
    "read_text_file",
    "run",
    "search",
    "search_case_insensitive",
    "split_lines",
]
