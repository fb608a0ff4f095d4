#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/models.py
"""Value types produced by the comparison pipeline.

Every object here is immutable and rebuilt from scratch for each comparison.
Tagged variants use enums rather than bare strings; the enum values are the
lowercase tags used in serialized output.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from textdiff.options import DiffOptions


class EditKind(str, Enum):
    """Primitive edit operations of a shortest edit script."""

    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"


class DiffKind(str, Enum):
    """Kinds of line-level diff entries."""

    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True, slots=True)
class EditOp:
    """One step of an edit script, addressed by 0-based sequence indices.

    ``index_a`` is ``None`` for insertions and ``index_b`` is ``None`` for
    deletions.
    """

    kind: EditKind
    index_a: int | None
    index_b: int | None


@dataclass(frozen=True, slots=True)
class CharDiff:
    """A single character of an intra-line diff."""

    kind: EditKind
    char: str


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One line of the edit script.

    Attributes
    ----------
    kind : DiffKind
        Entry tag.
    text_a, text_b : str or None
        Display text on each side. ``removed`` has only ``text_a``, ``added``
        has only ``text_b``; ``equal`` and ``modified`` carry both.
    line_num_a, line_num_b : int or None
        1-based position in the sequence that was actually diffed.
    original_line_num_a, original_line_num_b : int or None
        1-based position in the source document, filled in once line
        numbers are mapped back through blank-line filtering.
    char_diff : tuple of CharDiff, optional
        Character-level diff of the original texts, ``modified`` only.

    """

    kind: DiffKind
    text_a: str | None = None
    text_b: str | None = None
    line_num_a: int | None = None
    line_num_b: int | None = None
    original_line_num_a: int | None = None
    original_line_num_b: int | None = None
    char_diff: tuple[CharDiff, ...] | None = None

    @property
    def is_change(self) -> bool:
        """Whether this entry is anything other than an unchanged line."""
        return self.kind is not DiffKind.EQUAL

    @property
    def text(self) -> str:
        """Text best describing the entry: side A when present, else side B."""
        if self.text_a is not None:
            return self.text_a
        return self.text_b or ""

    def with_original_line_numbers(self, line_a: int | None, line_b: int | None) -> DiffEntry:
        """Return a copy annotated with source-document line numbers."""
        return replace(self, original_line_num_a=line_a, original_line_num_b=line_b)


@dataclass(frozen=True, slots=True)
class Hunk:
    """A contiguous block of changes with bounded surrounding context."""

    context_before: tuple[DiffEntry, ...]
    changes: tuple[DiffEntry, ...]
    context_after: tuple[DiffEntry, ...]

    def __iter__(self) -> Iterator[DiffEntry]:
        """Iterate over every entry of the hunk in document order."""
        yield from self.context_before
        yield from self.changes
        yield from self.context_after

    def span_a(self) -> tuple[int, int]:
        """Return ``(start, count)`` of the hunk in document A.

        ``start`` is the first source line number shown and ``count`` the
        number of entries with a line on this side; elided blank lines are
        not counted.
        """
        return _span(entry.original_line_num_a for entry in self)

    def span_b(self) -> tuple[int, int]:
        """Return ``(start, count)`` of the hunk in document B."""
        return _span(entry.original_line_num_b for entry in self)

    def header(self) -> str:
        """Format the unified diff ``@@`` header for this hunk."""
        start_a, count_a = self.span_a()
        start_b, count_b = self.span_b()
        return f"@@ -{start_a},{count_a} +{start_b},{count_b} @@"


def _span(line_numbers: Iterator[int | None]) -> tuple[int, int]:
    present = [n for n in line_numbers if n is not None]
    if not present:
        return 0, 0
    return present[0], len(present)


@dataclass(frozen=True, slots=True)
class ChangeCount:
    """Added/removed line totals; a modified line counts once on each side."""

    added: int = 0
    removed: int = 0

    @property
    def total(self) -> int:
        """Sum of added and removed lines."""
        return self.added + self.removed


@dataclass(frozen=True)
class DiffResult:
    """Complete output of one comparison.

    Attributes
    ----------
    hunks : tuple of Hunk
        Change blocks in document order.
    lines_a, lines_b : tuple of str
        Every line of both source documents, blank lines included.
    entries : tuple of DiffEntry
        The whole filtered edit script with original line numbers attached.
    options : DiffOptions, optional
        Options that produced this result.

    """

    hunks: tuple[Hunk, ...]
    lines_a: tuple[str, ...]
    lines_b: tuple[str, ...]
    entries: tuple[DiffEntry, ...] = ()
    options: DiffOptions | None = field(default=None, compare=False)

    @property
    def has_changes(self) -> bool:
        """Whether the comparison found any difference."""
        return bool(self.hunks)

    def iter_changes(self) -> Iterator[DiffEntry]:
        """Yield every non-equal entry across all hunks."""
        for hunk in self.hunks:
            for entry in hunk.changes:
                if entry.is_change:
                    yield entry

    def count_changes(self) -> ChangeCount:
        """Count added and removed lines across all hunks."""
        added = 0
        removed = 0
        for entry in self.iter_changes():
            if entry.kind is DiffKind.ADDED:
                added += 1
            elif entry.kind is DiffKind.REMOVED:
                removed += 1
            elif entry.kind is DiffKind.MODIFIED:
                added += 1
                removed += 1
        return ChangeCount(added=added, removed=removed)

    def count_kind(self, kind: DiffKind) -> int:
        """Count the changed entries of one kind across all hunks."""
        return sum(1 for entry in self.iter_changes() if entry.kind is kind)
