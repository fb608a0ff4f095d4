#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/hunks.py
"""Hunk grouping and original line-number mapping."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Sequence

from textdiff.constants import DEFAULT_CONTEXT_SIZE, DEFAULT_MERGE_DISTANCE
from textdiff.diff.models import DiffEntry, Hunk

logger = logging.getLogger(__name__)


def _close_hunk(
    context_before: Iterable[DiffEntry],
    changes: list[DiffEntry],
    trailing_equal: int,
    context_size: int,
) -> tuple[Hunk, list[DiffEntry]]:
    """Split trailing equal entries off ``changes`` and build the hunk.

    Returns the hunk and the trailing equal entries that did not fit in its
    after-context.
    """
    split = len(changes) - trailing_equal
    trailing = changes[split:]
    hunk = Hunk(
        context_before=tuple(context_before),
        changes=tuple(changes[:split]),
        context_after=tuple(trailing[:context_size]),
    )
    return hunk, trailing[context_size:]


def group_into_hunks(
    entries: Iterable[DiffEntry],
    context_size: int = DEFAULT_CONTEXT_SIZE,
    merge_distance: int = DEFAULT_MERGE_DISTANCE,
) -> list[Hunk]:
    """Partition an edit script into hunks with bounded context.

    Equal entries seen while no hunk is open roll through a buffer holding
    the last ``context_size`` of them. The first change opens a hunk; equal
    entries after it stay inside ``changes`` until more than
    ``merge_distance`` of them have accumulated in a row, so change clusters
    separated by short gaps share a hunk. When the gap grows past that
    distance the hunk closes: the first ``context_size`` equal entries of the
    gap become its after-context and the rest seed the next hunk's
    before-context.

    Parameters
    ----------
    entries : iterable of DiffEntry
        Filtered edit script in document order
    context_size : int, default 3
        Maximum equal entries before and after each hunk
    merge_distance : int, default 6
        Maximum run of equal entries kept inside one hunk

    Returns
    -------
    list of Hunk
        Non-overlapping hunks in document order, each with at least one change

    """
    hunks: list[Hunk] = []
    context_before: deque[DiffEntry] = deque(maxlen=context_size)
    changes: list[DiffEntry] = []
    trailing_equal = 0

    for entry in entries:
        if entry.is_change:
            changes.append(entry)
            trailing_equal = 0
            continue

        if not changes:
            context_before.append(entry)
            continue

        changes.append(entry)
        trailing_equal += 1

        if trailing_equal > merge_distance:
            hunk, leftover = _close_hunk(context_before, changes, trailing_equal, context_size)
            hunks.append(hunk)
            context_before = deque(leftover, maxlen=context_size)
            changes = []
            trailing_equal = 0

    if changes:
        hunk, _ = _close_hunk(context_before, changes, trailing_equal, context_size)
        hunks.append(hunk)

    logger.debug("Grouped edit script into %d hunk(s)", len(hunks))
    return hunks


def _lookup(line_map: Sequence[int], line_num: int | None) -> int | None:
    if line_num is None:
        return None
    return line_map[line_num - 1]


def annotate_entries(
    entries: Iterable[DiffEntry],
    line_map_a: Sequence[int],
    line_map_b: Sequence[int],
) -> list[DiffEntry]:
    """Attach original line numbers to each entry.

    Parameters
    ----------
    entries : iterable of DiffEntry
        Entries carrying filtered line numbers
    line_map_a, line_map_b : sequence of int
        Original 1-based line number of each filtered line, per side

    Returns
    -------
    list of DiffEntry
        Copies with ``original_line_num_a``/``original_line_num_b`` set; a side
        without a filtered number stays ``None``

    """
    return [
        entry.with_original_line_numbers(
            _lookup(line_map_a, entry.line_num_a),
            _lookup(line_map_b, entry.line_num_b),
        )
        for entry in entries
    ]


def map_line_numbers(
    hunks: Iterable[Hunk],
    line_map_a: Sequence[int],
    line_map_b: Sequence[int],
) -> list[Hunk]:
    """Annotate every entry of every hunk with original line numbers."""
    return [
        Hunk(
            context_before=tuple(annotate_entries(hunk.context_before, line_map_a, line_map_b)),
            changes=tuple(annotate_entries(hunk.changes, line_map_a, line_map_b)),
            context_after=tuple(annotate_entries(hunk.context_after, line_map_a, line_map_b)),
        )
        for hunk in hunks
    ]
