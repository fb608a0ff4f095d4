#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/renderers/unified.py
"""Unified diff renderer with optional ANSI colors.

Hunks are rendered in Git patch style. Modified lines are written as a
deletion followed by an addition; when colors are enabled, the characters
that actually changed inside them are highlighted in reverse video.
"""

from __future__ import annotations

from typing import Any, Iterator

from textdiff.constants import VISIBLE_SPACE, VISIBLE_TAB
from textdiff.diff.models import DiffEntry, DiffKind, DiffResult, EditKind
from textdiff.diff.similarity import group_char_diff

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
BOLD = "\033[1m"
REVERSE = "\033[7m"
NO_REVERSE = "\033[27m"
RESET = "\033[0m"


def visualize_whitespace(text: str | None, show_whitespace: bool = True) -> str:
    """Replace spaces and tabs with visible markers for display."""
    if not show_whitespace or not text:
        return text or ""
    return text.replace(" ", VISIBLE_SPACE).replace("\t", VISIBLE_TAB)


class UnifiedDiffRenderer:
    """Render a :class:`DiffResult` as unified diff lines.

    This renderer produces standard patch text:
    - ``---``/``+++`` file headers (bold when colored)
    - ``@@ -a,b +c,d @@`` hunk headers with source line numbers (cyan)
    - ``-`` deletions (red) and ``+`` additions (green)
    - space-prefixed context lines

    Hunk header counts are the number of lines the hunk shows on each side.
    With ``ignore_empty_lines`` on, skipped blank lines inside a hunk are
    neither shown nor counted, so the output is for reading and is not a
    patch that ``patch``/``git apply`` can apply. Compare with
    ``ignore_empty_lines=False`` for headers that match source line ranges.

    Parameters
    ----------
    use_color : bool, default = False
        If True, add ANSI color codes to output
    show_whitespace : bool, default = False
        If True, render spaces and tabs with visible markers
    highlight_changes : bool, default = True
        If True (and colors are on), highlight changed characters of
        modified lines

    Examples
    --------
    Print a colored patch:
        >>> from textdiff import compute_diff_result
        >>> from textdiff.diff.renderers import UnifiedDiffRenderer
        >>> result = compute_diff_result("a\\nb", "a\\nc")
        >>> for line in UnifiedDiffRenderer(use_color=True).render(result):
        ...     print(line)

    """

    def __init__(
        self,
        use_color: bool = False,
        show_whitespace: bool = False,
        highlight_changes: bool = True,
    ):
        """Initialize the unified diff renderer."""
        self.use_color = use_color
        self.show_whitespace = show_whitespace
        self.highlight_changes = highlight_changes

    def render(self, diff: DiffResult, label_a: str = "a", label_b: str = "b") -> Iterator[str]:
        """Render the diff as patch lines.

        Parameters
        ----------
        diff : DiffResult
            Comparison result
        label_a : str, default "a"
            Name shown in the ``---`` header
        label_b : str, default "b"
            Name shown in the ``+++`` header

        Yields
        ------
        str
            Patch lines without trailing newlines; nothing when the
            documents do not differ

        """
        if not diff.hunks:
            return

        yield self._paint(f"--- {label_a}", BOLD)
        yield self._paint(f"+++ {label_b}", BOLD)

        for hunk in diff.hunks:
            yield self._paint(hunk.header(), CYAN)
            for entry in hunk:
                yield from self._render_entry(entry)

    def render_to_string(self, diff: DiffResult, **kwargs: Any) -> str:
        """Render the diff as a single newline-joined string."""
        return "\n".join(self.render(diff, **kwargs))

    def _render_entry(self, entry: DiffEntry) -> Iterator[str]:
        if entry.kind is DiffKind.EQUAL:
            yield f" {self._show(entry.text_a)}"
        elif entry.kind is DiffKind.REMOVED:
            yield self._paint(f"-{self._show(entry.text_a)}", RED)
        elif entry.kind is DiffKind.ADDED:
            yield self._paint(f"+{self._show(entry.text_b)}", GREEN)
        elif self.use_color and self.highlight_changes and entry.char_diff:
            yield self._paint(f"-{self._highlight(entry, EditKind.REMOVED)}", RED)
            yield self._paint(f"+{self._highlight(entry, EditKind.ADDED)}", GREEN)
        else:
            yield self._paint(f"-{self._show(entry.text_a)}", RED)
            yield self._paint(f"+{self._show(entry.text_b)}", GREEN)

    def _highlight(self, entry: DiffEntry, side: EditKind) -> str:
        """Rebuild one side of a modified line with its changed runs highlighted."""
        parts = []
        for kind, text in group_char_diff(entry.char_diff or ()):
            if kind is EditKind.EQUAL:
                parts.append(self._show(text))
            elif kind is side:
                parts.append(f"{REVERSE}{self._show(text)}{NO_REVERSE}")
        return "".join(parts)

    def _show(self, text: str | None) -> str:
        return visualize_whitespace(text, self.show_whitespace)

    def _paint(self, line: str, color: str) -> str:
        if not self.use_color:
            return line
        return f"{color}{line}{RESET}"


def render_to_file(diff: DiffResult, output_path: str, label_a: str = "a", label_b: str = "b", **kwargs: Any) -> None:
    """Render a diff as a plain (uncolored) patch file.

    Parameters
    ----------
    diff : DiffResult
        Comparison result to write
    output_path : str
        Destination path for the patch
    label_a, label_b : str
        Names used in the file headers
    **kwargs
        Additional keyword arguments forwarded to :class:`UnifiedDiffRenderer`.

    """
    kwargs["use_color"] = False
    renderer = UnifiedDiffRenderer(**kwargs)
    text = renderer.render_to_string(diff, label_a=label_a, label_b=label_b)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text + "\n" if text else "")
