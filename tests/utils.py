"""Test utilities for the textdiff test suite.

This module provides helpers for temporary files and reference
implementations used to check the diff engine.
"""

import tempfile
from pathlib import Path
from typing import Sequence

from textdiff.diff.models import DiffKind, DiffResult, EditKind, EditOp


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    import shutil
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_text_file(directory: Path, name: str, content: str) -> Path:
    """Write ``content`` to ``directory / name`` and return the path."""
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


def lcs_length(seq_a: Sequence, seq_b: Sequence) -> int:
    """Longest common subsequence length by dynamic programming."""
    previous = [0] * (len(seq_b) + 1)
    for item_a in seq_a:
        current = [0]
        for j, item_b in enumerate(seq_b):
            if item_a == item_b:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def apply_edit_script(script: Sequence[EditOp], seq_a: Sequence, seq_b: Sequence) -> tuple[list, list]:
    """Rebuild both sequences from an edit script.

    Returns the items read from ``seq_a`` by equal/removed ops and the items
    read from ``seq_b`` by equal/added ops.
    """
    rebuilt_a = []
    rebuilt_b = []
    for op in script:
        if op.kind is EditKind.EQUAL:
            rebuilt_a.append(seq_a[op.index_a])
            rebuilt_b.append(seq_b[op.index_b])
        elif op.kind is EditKind.REMOVED:
            rebuilt_a.append(seq_a[op.index_a])
        else:
            rebuilt_b.append(seq_b[op.index_b])
    return rebuilt_a, rebuilt_b


def change_kinds(result: DiffResult) -> list[str]:
    """Kinds of every non-equal hunk entry, in order."""
    return [entry.kind.value for entry in result.iter_changes()]


def count_kind_in_entries(result: DiffResult, kind: DiffKind) -> int:
    """Count entries of ``kind`` in the full annotated script."""
    return sum(1 for entry in result.entries if entry.kind is kind)
