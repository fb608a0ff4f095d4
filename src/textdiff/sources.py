#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Plain-text input for the comparison core.

The diff engine only ever sees decoded strings. This module is the thin
boundary that turns a path (or ``-`` for stdin) into such a string and
reports unreadable input as a single descriptive error.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from textdiff.constants import DEFAULT_TEXT_ENCODING, VALID_FILE_EXTENSIONS
from textdiff.exceptions import FileAccessError, FileDecodeError, FileNotFoundError, FormatError

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def is_supported_source(path: Union[str, Path]) -> bool:
    """Whether ``path`` has an extension the text reader accepts.

    Files without an extension are treated as plain text.
    """
    suffix = Path(path).suffix.lower()
    return not suffix or suffix in VALID_FILE_EXTENSIONS


def read_text_source(source: Union[str, Path], encoding: Optional[str] = None) -> str:
    """Read a document as text.

    Parameters
    ----------
    source : str or Path
        File path, or ``"-"`` to read standard input
    encoding : str, optional
        Text encoding, UTF-8 by default

    Returns
    -------
    str
        Decoded document text

    Raises
    ------
    FormatError
        If the file extension is not a plain-text format
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the path is a directory or cannot be opened
    FileDecodeError
        If the bytes are not valid text in ``encoding``

    """
    encoding = encoding or DEFAULT_TEXT_ENCODING

    if str(source) == STDIN_MARKER:
        data = sys.stdin.buffer.read()
        return _decode(data, "<stdin>", encoding)

    path = Path(source)
    if not is_supported_source(path):
        raise FormatError(format_type=path.suffix.lower(), supported_formats=list(VALID_FILE_EXTENSIONS))
    if not path.exists():
        raise FileNotFoundError(str(path))
    if not path.is_file():
        raise FileAccessError(str(path), message=f"Not a regular file: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileAccessError(str(path), original_error=e) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return _decode(data, str(path), encoding)


def _decode(data: bytes, label: str, encoding: str) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise FileDecodeError(label, encoding, original_error=e) from e
    except LookupError as e:
        raise FileDecodeError(label, encoding, message=f"Unknown text encoding: {encoding}", original_error=e) from e
