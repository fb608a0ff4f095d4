#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/normalize.py
"""Line splitting and comparison keys.

Normalization only produces the key used for equality testing; display text
is always the original line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE_RUN_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class NumberedLine:
    """A line paired with its 1-based position in the source document."""

    text: str
    original_line_num: int


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and strip both ends.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Normalized text with consistent whitespace

    """
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()


def normalize_line(line: str, ignore_whitespace: bool) -> str:
    """Return the comparison key for ``line``.

    Parameters
    ----------
    line : str
        Original line text
    ignore_whitespace : bool
        When True, fold whitespace with :func:`normalize_whitespace`;
        otherwise the line is its own key.

    Returns
    -------
    str
        Key used for equality comparison

    """
    if ignore_whitespace:
        return normalize_whitespace(line)
    return line


def is_blank(line: str) -> bool:
    """Whether ``line`` holds nothing but whitespace."""
    return not line.strip()


def split_lines(text: str) -> list[str]:
    r"""Split a document on ``\n``.

    A trailing newline yields a final empty line and ``\r`` is kept as part
    of the line, so the split always round-trips with ``"\n".join``.
    """
    return text.split("\n")


def number_lines(lines: list[str], ignore_empty_lines: bool) -> list[NumberedLine]:
    """Attach original line numbers, optionally dropping blank lines.

    Parameters
    ----------
    lines : list of str
        Every line of a document
    ignore_empty_lines : bool
        Drop whitespace-only lines from the result

    Returns
    -------
    list of NumberedLine
        The lines to diff; index ``i`` is filtered line ``i + 1``

    """
    numbered = [NumberedLine(line, index + 1) for index, line in enumerate(lines)]
    if ignore_empty_lines:
        return [item for item in numbered if not is_blank(item.text)]
    return numbered
