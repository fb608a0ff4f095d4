#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/text_diff.py
"""Line-oriented, Git-style comparison of two text documents.

The pipeline runs in fixed stages, each a pure function:

1. split both documents into lines and optionally drop blank ones
2. diff the lines with :func:`~textdiff.diff.myers.shortest_edit_script`
   using whitespace-folded comparison keys when requested
3. pair each adjacent removed/added couple that is similar enough into one
   ``modified`` entry carrying a character diff
4. drop whitespace-only changes when whitespace is ignored
5. group the script into hunks with bounded context
6. map filtered line numbers back to the source documents
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from textdiff.constants import DEFAULT_SIMILARITY_THRESHOLD
from textdiff.diff.hunks import annotate_entries, group_into_hunks, map_line_numbers
from textdiff.diff.models import DiffEntry, DiffKind, DiffResult, EditKind
from textdiff.diff.myers import shortest_edit_script
from textdiff.diff.normalize import normalize_line, number_lines, split_lines
from textdiff.diff.similarity import char_diff, has_visible_change, similarity
from textdiff.exceptions import InvalidInputError
from textdiff.options import DiffOptions

logger = logging.getLogger(__name__)


def diff_lines(lines_a: Sequence[str], lines_b: Sequence[str], ignore_whitespace: bool = False) -> list[DiffEntry]:
    """Compute the raw line-level edit script.

    Parameters
    ----------
    lines_a : sequence of str
        Lines of the original document (after any blank-line filtering)
    lines_b : sequence of str
        Lines of the updated document
    ignore_whitespace : bool, default False
        Compare whitespace-folded keys instead of the raw lines

    Returns
    -------
    list of DiffEntry
        ``equal``, ``removed`` and ``added`` entries with 1-based filtered
        line numbers

    """
    keys_a = [normalize_line(line, ignore_whitespace) for line in lines_a]
    keys_b = [normalize_line(line, ignore_whitespace) for line in lines_b]

    entries: list[DiffEntry] = []
    for op in shortest_edit_script(keys_a, keys_b):
        if op.kind is EditKind.EQUAL:
            entries.append(
                DiffEntry(
                    DiffKind.EQUAL,
                    text_a=lines_a[op.index_a],
                    text_b=lines_b[op.index_b],
                    line_num_a=op.index_a + 1,
                    line_num_b=op.index_b + 1,
                )
            )
        elif op.kind is EditKind.REMOVED:
            entries.append(DiffEntry(DiffKind.REMOVED, text_a=lines_a[op.index_a], line_num_a=op.index_a + 1))
        else:
            entries.append(DiffEntry(DiffKind.ADDED, text_b=lines_b[op.index_b], line_num_b=op.index_b + 1))
    return entries


def merge_modifications(
    entries: Sequence[DiffEntry],
    ignore_whitespace: bool = False,
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> list[DiffEntry]:
    """Collapse similar adjacent removed/added pairs into modified entries.

    Only a ``removed`` entry immediately followed by an ``added`` entry is
    considered, and each entry joins at most one pair. The similarity gate
    compares normalized texts while the stored character diff always uses
    the original texts.

    Parameters
    ----------
    entries : sequence of DiffEntry
        Raw line-level edit script
    ignore_whitespace : bool, default False
        Normalize whitespace before scoring similarity
    similarity_threshold : float, default 0.4
        Minimum ratio for a pair to merge

    Returns
    -------
    list of DiffEntry
        New script; unmerged entries keep their original order

    """
    merged: list[DiffEntry] = []
    index = 0

    while index < len(entries):
        current = entries[index]
        following = entries[index + 1] if index + 1 < len(entries) else None

        if current.kind is DiffKind.REMOVED and following is not None and following.kind is DiffKind.ADDED:
            text_a = current.text_a or ""
            text_b = following.text_b or ""
            score = similarity(normalize_line(text_a, ignore_whitespace), normalize_line(text_b, ignore_whitespace))

            if score >= similarity_threshold:
                merged.append(
                    DiffEntry(
                        DiffKind.MODIFIED,
                        text_a=text_a,
                        text_b=text_b,
                        line_num_a=current.line_num_a,
                        line_num_b=following.line_num_b,
                        char_diff=char_diff(text_a, text_b),
                    )
                )
                index += 2
                continue

        merged.append(current)
        index += 1

    return merged


def _has_visible_content(entry: DiffEntry) -> bool:
    if entry.kind is DiffKind.EQUAL:
        return True
    if entry.kind is DiffKind.MODIFIED:
        return has_visible_change(entry.char_diff or ())
    return bool(entry.text.strip())


def filter_whitespace_changes(entries: Sequence[DiffEntry]) -> list[DiffEntry]:
    """Drop changes whose only difference is whitespace.

    Equal entries are always kept. A modified entry survives when its
    character diff adds or removes at least one non-whitespace character; an
    unpaired added or removed line survives when it has non-blank text.
    """
    return [entry for entry in entries if _has_visible_content(entry)]


def build_diff(lines_a: Sequence[str], lines_b: Sequence[str], options: DiffOptions) -> list[DiffEntry]:
    """Run diffing, modification merging and whitespace filtering."""
    raw = diff_lines(lines_a, lines_b, options.ignore_whitespace)
    merged = merge_modifications(raw, options.ignore_whitespace, options.similarity_threshold)

    if not options.ignore_whitespace:
        return merged

    filtered = filter_whitespace_changes(merged)
    if len(filtered) != len(merged):
        logger.debug("Dropped %d whitespace-only change(s)", len(merged) - len(filtered))
    return filtered


def compute_diff_result(
    text_a: Optional[str],
    text_b: Optional[str],
    ignore_whitespace: Optional[bool] = None,
    ignore_empty_lines: Optional[bool] = None,
    *,
    options: Optional[DiffOptions] = None,
) -> DiffResult:
    """Compare two documents and group the differences into hunks.

    Parameters
    ----------
    text_a : str
        Original document text
    text_b : str
        Updated document text
    ignore_whitespace : bool, optional
        Fold whitespace when comparing and hide whitespace-only changes.
        Overrides ``options.ignore_whitespace`` when given.
    ignore_empty_lines : bool, optional
        Skip blank lines when comparing. Overrides
        ``options.ignore_empty_lines`` when given.
    options : DiffOptions, optional
        Thresholds and defaults for the comparison

    Returns
    -------
    DiffResult
        Hunks, the full annotated script and both documents' lines

    Raises
    ------
    InvalidInputError
        If either document is empty or ``None``

    Examples
    --------
    >>> result = compute_diff_result("line1\\nline2\\nline3", "line1\\nlineTwo\\nline3")
    >>> [entry.kind.value for entry in result.hunks[0].changes]
    ['modified']

    """
    if not text_a:
        raise InvalidInputError("a")
    if not text_b:
        raise InvalidInputError("b")

    opts = options or DiffOptions()
    overrides = {}
    if ignore_whitespace is not None:
        overrides["ignore_whitespace"] = ignore_whitespace
    if ignore_empty_lines is not None:
        overrides["ignore_empty_lines"] = ignore_empty_lines
    if overrides:
        opts = opts.create_updated(**overrides)

    lines_a = split_lines(text_a)
    lines_b = split_lines(text_b)
    numbered_a = number_lines(lines_a, opts.ignore_empty_lines)
    numbered_b = number_lines(lines_b, opts.ignore_empty_lines)

    entries = build_diff([item.text for item in numbered_a], [item.text for item in numbered_b], opts)

    line_map_a = [item.original_line_num for item in numbered_a]
    line_map_b = [item.original_line_num for item in numbered_b]
    hunks = group_into_hunks(entries, opts.context_size, opts.merge_distance)
    hunks = map_line_numbers(hunks, line_map_a, line_map_b)

    return DiffResult(
        hunks=tuple(hunks),
        lines_a=tuple(lines_a),
        lines_b=tuple(lines_b),
        entries=tuple(annotate_entries(entries, line_map_a, line_map_b)),
        options=opts,
    )


def compare_files(
    path_a: Union[str, Path],
    path_b: Union[str, Path],
    options: Optional[DiffOptions] = None,
    encoding: Optional[str] = None,
) -> DiffResult:
    """Read two plain-text files and compare them.

    This is a convenience wrapper around :func:`compute_diff_result` that
    reads both sides with :func:`textdiff.sources.read_text_source`.

    Parameters
    ----------
    path_a : str or Path
        Path to the original document
    path_b : str or Path
        Path to the updated document
    options : DiffOptions, optional
        Comparison options
    encoding : str, optional
        Text encoding of both files (UTF-8 by default)

    Returns
    -------
    DiffResult
        Comparison result

    """
    from textdiff.sources import read_text_source

    text_a = read_text_source(path_a, encoding=encoding)
    text_b = read_text_source(path_b, encoding=encoding)
    return compute_diff_result(text_a, text_b, options=options)
