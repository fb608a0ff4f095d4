#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdiff/diff/renderers/__init__.py
"""Diff renderers for various output formats.

Available Renderers
-------------------
- UnifiedDiffRenderer: Git-style patch text with optional ANSI colors
- JsonDiffRenderer: Structured JSON output for programmatic access

Examples
--------
Render with colors for terminal:
    >>> from textdiff import compute_diff_result
    >>> from textdiff.diff.renderers import UnifiedDiffRenderer
    >>> result = compute_diff_result(old_text, new_text)
    >>> for line in UnifiedDiffRenderer(use_color=True).render(result):
    ...     print(line)

"""

from textdiff.diff.renderers.json import JsonDiffRenderer
from textdiff.diff.renderers.unified import UnifiedDiffRenderer, visualize_whitespace

__all__ = [
    "JsonDiffRenderer",
    "UnifiedDiffRenderer",
    "visualize_whitespace",
]
