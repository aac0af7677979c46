#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mgrep package.

This module defines the exception classes raised while building a search
configuration and while reading the file to be searched. The matching
engine itself is total over its inputs and raises nothing.

Exception Hierarchy
-------------------
- MgrepError (base exception)

  - ConfigError (malformed invocation, raised before any file I/O)
    - InsufficientArgumentsError (indexed argument list too short)
    - MissingQueryError (argument source exhausted before the query)
    - MissingFilePathError (argument source exhausted before the file path)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, directories, other OS errors)
    - MalformedFileError (content is not valid UTF-8)

"""


class MgrepError(Exception):
    """Base exception class for all mgrep-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigError(MgrepError):
    """Exception raised when the argument vector cannot produce a Config.

    Subclasses carry a fixed message describing which argument was missing.
    """

    default_message = "invalid arguments"

    def __init__(self, message: str | None = None):
        """Initialize the configuration error with its static message."""
        super().__init__(message if message is not None else self.default_message)


class InsufficientArgumentsError(ConfigError):
    """Fewer than three elements were supplied in an indexed argument list."""

    default_message = "not enough arguments"


class MissingQueryError(ConfigError):
    """The argument source ended before a query string was produced."""

    default_message = "Didn't get a query string"


class MissingFilePathError(ConfigError):
    """The argument source ended before a file path was produced."""

    default_message = "Didn't get a file path"


class FileError(MgrepError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a file cannot be found.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file cannot be accessed.

    This includes permission errors, directories passed as files, etc.

    Parameters
    ----------
    file_path : str
        Path to the file that cannot be accessed
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class MalformedFileError(FileError):
    """Exception raised when a file's bytes cannot be decoded as text."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed file error."""
        super().__init__(message, file_path=file_path, original_error=original_error)
