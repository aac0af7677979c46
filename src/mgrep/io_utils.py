#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mgrep/io_utils.py
"""File reading for the search runner.

The whole file is read into memory and decoded as strict UTF-8. Operating
system and decoding failures are re-raised as :mod:`mgrep.exceptions` file
errors with the original exception attached.
"""

from __future__ import annotations

import builtins
import logging
from pathlib import Path

from mgrep.exceptions import FileAccessError, FileNotFoundError, MalformedFileError

logger = logging.getLogger(__name__)


def read_text_file(path: str | Path) -> str:
    """Read an entire file as UTF-8 text.

    Parameters
    ----------
    path : str or Path
        File to read

    Returns
    -------
    str
        The decoded file contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be opened or read (permissions, directories, etc.)
    MalformedFileError
        If the contents are not valid UTF-8

    """
    file_path = str(path)
    try:
        data = Path(path).read_bytes()
    except builtins.FileNotFoundError as e:
        raise FileNotFoundError(file_path, original_error=e) from e
    except PermissionError as e:
        raise FileAccessError(file_path, message=f"Permission denied: {file_path}", original_error=e) from e
    except OSError as e:
        message = f"Cannot read file {file_path}: {e.strerror or e}"
        raise FileAccessError(file_path, message=message, original_error=e) from e

    logger.debug("Read %d bytes from %s", len(data), file_path)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedFileError(
            f"File is not valid UTF-8: {file_path} (byte {e.start})", file_path=file_path, original_error=e
        ) from e
