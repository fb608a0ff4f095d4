#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/__init__.py
"""Line-oriented document comparison.

This package implements a Git-style diff of two plain-text documents:
a Myers shortest-edit-script search over lines, pairing of similar
removed/added lines into modified lines with character-level highlights,
optional whitespace and blank-line insensitivity, and grouping into hunks
with bounded context.

Key Features
------------
- Minimal edit scripts (Myers O((N+M)D) algorithm)
- Modified-line detection with character diffs
- Whitespace folding and blank-line elision that keep original line numbers
- Hunks with 3 lines of context, merged across short unchanged gaps
- Unified (patch) and JSON renderers

Examples
--------
Compare two strings:
    >>> from textdiff.diff import compute_diff_result
    >>> result = compute_diff_result("line1\\nline2\\nline3", "line1\\nlineTwo\\nline3")
    >>> result.count_changes()
    ChangeCount(added=1, removed=1)

Ignore whitespace:
    >>> result = compute_diff_result("foo\\n", "foo \\n", ignore_whitespace=True)
    >>> result.has_changes
    False

"""

from textdiff.diff.models import ChangeCount, CharDiff, DiffEntry, DiffKind, DiffResult, EditKind, EditOp, Hunk
from textdiff.diff.myers import edit_distance, shortest_edit_script
from textdiff.diff.similarity import char_diff, similarity
from textdiff.diff.text_diff import compare_files, compute_diff_result

__all__ = [
    "ChangeCount",
    "CharDiff",
    "DiffEntry",
    "DiffKind",
    "DiffResult",
    "EditKind",
    "EditOp",
    "Hunk",
    "char_diff",
    "compare_files",
    "compute_diff_result",
    "edit_distance",
    "shortest_edit_script",
    "similarity",
]
