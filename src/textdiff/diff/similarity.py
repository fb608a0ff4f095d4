#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/similarity.py
"""Character-level diffs and the line similarity ratio."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable

from textdiff.diff.models import CharDiff, EditKind
from textdiff.diff.myers import shortest_edit_script


def char_diff(text_a: str, text_b: str) -> tuple[CharDiff, ...]:
    """Diff two strings character by character.

    Parameters
    ----------
    text_a : str
        Original text
    text_b : str
        Updated text

    Returns
    -------
    tuple of CharDiff
        Every character of both strings in alignment order. Equal characters
        appear once, taken from ``text_a``.

    """
    result = []
    for op in shortest_edit_script(text_a, text_b):
        if op.kind is EditKind.ADDED:
            result.append(CharDiff(EditKind.ADDED, text_b[op.index_b]))
        else:
            result.append(CharDiff(op.kind, text_a[op.index_a]))
    return tuple(result)


def similarity(text_a: str, text_b: str) -> float:
    """Return the share of aligned characters relative to the longer string.

    The ratio is the length of the character-level common subsequence found
    by :func:`char_diff` divided by ``max(len(text_a), len(text_b))``. Two
    empty strings are identical (1.0); one empty string shares nothing (0.0).

    Parameters
    ----------
    text_a : str
        First text
    text_b : str
        Second text

    Returns
    -------
    float
        Similarity in ``[0.0, 1.0]``

    """
    if not text_a and not text_b:
        return 1.0
    if not text_a or not text_b:
        return 0.0

    equal_chars = sum(1 for item in char_diff(text_a, text_b) if item.kind is EditKind.EQUAL)
    return equal_chars / max(len(text_a), len(text_b))


def group_char_diff(diff: Iterable[CharDiff]) -> list[tuple[EditKind, str]]:
    """Coalesce consecutive characters of the same kind into text runs.

    >>> group_char_diff(char_diff("line2", "lineTwo"))
    [(<EditKind.EQUAL: 'equal'>, 'line'), (<EditKind.REMOVED: 'removed'>, '2'), (<EditKind.ADDED: 'added'>, 'Two')]

    """
    return [(kind, "".join(item.char for item in items)) for kind, items in groupby(diff, key=lambda item: item.kind)]


def has_visible_change(diff: Iterable[CharDiff]) -> bool:
    """Whether any added or removed character is not whitespace."""
    return any(item.kind is not EditKind.EQUAL and not item.char.isspace() for item in diff)
