#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the textdiff library.

The comparison core has a single precondition (both documents are non-empty
strings); everything else that can go wrong happens at the boundaries, when
documents are read from disk or when saved sessions are loaded.

Exception Hierarchy
-------------------
- TextDiffError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidInputError (empty or missing document text)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, directories)
    - FileDecodeError (bytes that are not valid text)

  - FormatError (unsupported source formats)

  - SessionError (saved session lookup failures)

"""

from typing import Any


class TextDiffError(Exception):
    """Root of every error textdiff raises.

    ``message`` is shown to users as is; ``original_error`` keeps the
    lower-level exception (an ``OSError``, a ``UnicodeDecodeError``) when
    one was translated.
    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TextDiffError):
    """A value passed to textdiff was rejected.

    ``parameter_name`` and ``parameter_value`` identify the offending input
    when known.
    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidInputError(ValidationError):
    """Exception raised when a document side is empty or absent.

    Comparison needs text on both sides. Resolving the problem (for example
    prompting the user for the missing document) is left to the caller.

    Parameters
    ----------
    side : str
        Which input was missing, ``"a"`` or ``"b"``
    message : str, optional
        Custom error message. If not provided, a default message is generated

    """

    def __init__(self, side: str, message: str | None = None):
        """Initialize the invalid input error."""
        if message is None:
            message = f"Text for document {side.upper()} is empty; provide text on both sides to compare"
        super().__init__(message, parameter_name=f"text_{side}", parameter_value=None)
        self.side = side


class FileError(TextDiffError):
    """A document could not be read from disk. ``file_path`` names it."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file exists but cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot read file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileDecodeError(FileError):
    """Exception raised when file bytes cannot be decoded as text."""

    def __init__(
        self,
        file_path: str,
        encoding: str,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the decode error."""
        if message is None:
            message = f"File {file_path} is not valid {encoding} text"
        super().__init__(message, file_path=file_path, original_error=original_error)
        self.encoding = encoding


class FormatError(TextDiffError):
    """Exception raised for unsupported source formats.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The format (file extension) that was not supported
    supported_formats : list[str], optional
        Formats that are accepted

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"Unsupported format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "File format is not supported for comparison"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class SessionError(TextDiffError):
    """Exception raised when a saved session cannot be found or decoded."""

    def __init__(self, message: str, timestamp: int | None = None, original_error: Exception | None = None):
        """Initialize the session error."""
        super().__init__(message, original_error=original_error)
        self.timestamp = timestamp
