#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/myers.py
"""Greedy O((N+M)D) shortest edit script search.

This is Myers' algorithm over the edit graph of two sequences: moving right
deletes an element of A, moving down inserts an element of B, and diagonal
moves pair equal elements. Generation ``d`` holds, for every diagonal
``k = x - y`` in ``[-d, d]``, the furthest x reachable with exactly ``d``
non-diagonal moves. The first generation to reach ``(len(A), len(B))`` is
the edit distance, and no shorter script exists.

A snapshot of the frontier is recorded before each generation. Walking those
snapshots backward from the terminal corner recovers the path one generation
at a time, so reconstruction needs no recursion however large the distance.

Running time and memory are O((N+M)D). Two wholly dissimilar documents make
D approach N+M, so the cost degrades to quadratic on such inputs.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable, Optional, Sequence, TypeVar

from textdiff.diff.models import EditKind, EditOp

logger = logging.getLogger(__name__)

T = TypeVar("T")

Frontier = dict[int, int]


def _enters_by_insertion(frontier: Frontier, k: int, d: int) -> bool:
    """Whether diagonal ``k`` of generation ``d`` is reached by a down move from ``k + 1``.

    The neighbour with the larger reach wins. At ``k == -d`` only the insert
    neighbour exists, at ``k == d`` only the delete neighbour, and equal
    reaches fall to the delete neighbour. The same rule drives the forward
    search and the backtrack.
    """
    return k == -d or (k != d and frontier[k - 1] < frontier[k + 1])


def _search(seq_a: Sequence[T], seq_b: Sequence[T], equals: Callable[[T, T], bool]) -> list[Frontier]:
    """Run the forward search and return one frontier snapshot per generation."""
    len_a = len(seq_a)
    len_b = len(seq_b)
    frontier: Frontier = {1: 0}
    trace: list[Frontier] = []

    for d in range(len_a + len_b + 1):
        trace.append(dict(frontier))

        for k in range(-d, d + 1, 2):
            if _enters_by_insertion(frontier, k, d):
                x = frontier[k + 1]
            else:
                x = frontier[k - 1] + 1
            y = x - k

            while x < len_a and y < len_b and equals(seq_a[x], seq_b[y]):
                x += 1
                y += 1

            frontier[k] = x

            if x >= len_a and y >= len_b:
                return trace

    raise RuntimeError("edit graph search did not reach the terminal corner")


def _backtrack(trace: list[Frontier], len_a: int, len_b: int) -> list[EditOp]:
    """Rebuild the edit script by walking the recorded frontiers backward."""
    script: list[EditOp] = []
    x = len_a
    y = len_b

    for d in range(len(trace) - 1, -1, -1):
        frontier = trace[d]
        k = x - y

        prev_k = k + 1 if _enters_by_insertion(frontier, k, d) else k - 1
        prev_x = frontier[prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            script.append(EditOp(EditKind.EQUAL, x, y))

        if d > 0:
            if x == prev_x:
                script.append(EditOp(EditKind.ADDED, None, prev_y))
            else:
                script.append(EditOp(EditKind.REMOVED, prev_x, None))

        x = prev_x
        y = prev_y

    script.reverse()
    return script


def shortest_edit_script(
    seq_a: Sequence[T],
    seq_b: Sequence[T],
    equals: Optional[Callable[[T, T], bool]] = None,
) -> list[EditOp]:
    """Compute a minimal equal/insert/delete script turning ``seq_a`` into ``seq_b``.

    Parameters
    ----------
    seq_a : sequence
        Original sequence (lines, characters, or any comparable elements)
    seq_b : sequence
        Target sequence
    equals : callable, optional
        Equality predicate; defaults to ``==``

    Returns
    -------
    list of EditOp
        Operations in document order. ``EQUAL`` carries both indices,
        ``REMOVED`` only ``index_a`` and ``ADDED`` only ``index_b``. The
        number of non-equal operations is the edit distance.

    Examples
    --------
    >>> [op.kind.value for op in shortest_edit_script("abc", "abd")]
    ['equal', 'equal', 'removed', 'added']

    """
    if equals is None:
        equals = operator.eq

    trace = _search(seq_a, seq_b, equals)
    script = _backtrack(trace, len(seq_a), len(seq_b))
    logger.debug("Edit distance %d between sequences of length %d and %d", len(trace) - 1, len(seq_a), len(seq_b))
    return script


def edit_distance(
    seq_a: Sequence[T],
    seq_b: Sequence[T],
    equals: Optional[Callable[[T, T], bool]] = None,
) -> int:
    """Return the number of insertions plus deletions in a shortest edit script."""
    return len(_search(seq_a, seq_b, equals or operator.eq)) - 1
