#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/renderers/json.py
"""JSON diff renderer for structured output.

This renderer serializes a :class:`DiffResult` into machine-readable JSON
for programmatic processing and API responses.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from textdiff.diff.models import DiffEntry, DiffKind, DiffResult, Hunk
from textdiff.diff.similarity import group_char_diff


class JsonDiffRenderer:
    """Render a comparison result as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)

    Examples
    --------
    Render diff as JSON:
        >>> from textdiff import compute_diff_result
        >>> from textdiff.diff.renderers import JsonDiffRenderer
        >>> result = compute_diff_result("one\\ntwo", "one\\n2")
        >>> payload = JsonDiffRenderer().render(result)

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 2,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent

    def render(self, diff: DiffResult, label_a: str = "a", label_b: str = "b") -> str:
        """Render the diff to a JSON string.

        Parameters
        ----------
        diff : DiffResult
            Comparison result
        label_a, label_b : str
            Names recorded for the two documents

        Returns
        -------
        str
            JSON-formatted diff output

        """
        data = self.to_dict(diff, label_a=label_a, label_b=label_b)

        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        else:
            return json.dumps(data, ensure_ascii=False)

    def to_dict(self, diff: DiffResult, label_a: str = "a", label_b: str = "b") -> Dict[str, Any]:
        """Build the JSON-compatible structure for ``diff``."""
        counts = diff.count_changes()
        return {
            "type": "text_diff",
            "file_a": label_a,
            "file_b": label_b,
            "options": diff.options.to_dict() if diff.options is not None else {},
            "line_count_a": len(diff.lines_a),
            "line_count_b": len(diff.lines_b),
            "hunks": [self._hunk_to_dict(hunk) for hunk in diff.hunks],
            "statistics": {
                "lines_added": counts.added,
                "lines_removed": counts.removed,
                "lines_modified": diff.count_kind(DiffKind.MODIFIED),
                "total_changes": counts.total,
            },
        }

    def _hunk_to_dict(self, hunk: Hunk) -> Dict[str, Any]:
        return {
            "header": hunk.header(),
            "context_before": [self._entry_to_dict(entry) for entry in hunk.context_before],
            "changes": [self._entry_to_dict(entry) for entry in hunk.changes],
            "context_after": [self._entry_to_dict(entry) for entry in hunk.context_after],
        }

    def _entry_to_dict(self, entry: DiffEntry) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": entry.kind.value,
            "line_a": entry.original_line_num_a,
            "line_b": entry.original_line_num_b,
            "text_a": entry.text_a,
            "text_b": entry.text_b,
        }
        if entry.char_diff is not None:
            data["segments"] = [
                {"type": kind.value, "text": text} for kind, text in group_char_diff(entry.char_diff)
            ]
        return data


def render_to_file(diff: DiffResult, output_path: str, label_a: str = "a", label_b: str = "b", **kwargs: Any) -> None:
    """Render a diff to a JSON file.

    Parameters
    ----------
    diff : DiffResult
        Comparison result to serialise.
    output_path : str
        Destination path for the generated JSON file.
    label_a, label_b : str
        Names recorded for the two documents
    **kwargs
        Additional keyword arguments forwarded to :class:`JsonDiffRenderer`.

    """
    renderer = JsonDiffRenderer(**kwargs)
    json_output = renderer.render(diff, label_a=label_a, label_b=label_b)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_output)
