"""textdiff - line-oriented comparison of plain-text documents.

textdiff computes a Git-style diff of two documents. Lines are aligned with
Myers' shortest-edit-script algorithm, similar removed/added line pairs are
reported as modified lines with character-level highlights, and changes are
grouped into hunks with a few lines of surrounding context. Whitespace-only
differences and blank lines can be ignored while every reported line number
still refers to the original, unfiltered documents.

Key Features
------------
- Minimal line edit scripts (Myers O((N+M)D))
- Modified-line pairing with intra-line character diffs
- Whitespace and blank-line insensitive comparison
- Hunks with configurable context and merge distance
- Unified and JSON renderers
- Saved comparison sessions with replay
- ``textdiff`` command-line tool with config-file defaults

Requirements
------------
- Python 3.10+

Examples
--------
Compare two strings:

    >>> from textdiff import compute_diff_result
    >>> result = compute_diff_result("line1\\nline2\\nline3", "line1\\nlineTwo\\nline3")
    >>> result.count_changes()
    ChangeCount(added=1, removed=1)

Render a unified diff:

    >>> from textdiff.diff.renderers import UnifiedDiffRenderer
    >>> print(UnifiedDiffRenderer().render_to_string(result))
    --- a
    +++ b
    @@ -1,3 +1,3 @@
     line1
    -line2
    +lineTwo
     line3

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "textdiff requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from textdiff.diff import (
    ChangeCount,
    CharDiff,
    DiffEntry,
    DiffKind,
    DiffResult,
    EditKind,
    EditOp,
    Hunk,
    char_diff,
    compare_files,
    compute_diff_result,
    edit_distance,
    shortest_edit_script,
    similarity,
)
from textdiff.exceptions import (
    FileError,
    FormatError,
    InvalidInputError,
    SessionError,
    TextDiffError,
    ValidationError,
)
from textdiff.options import DiffOptions
from textdiff.sessions import InMemoryBackend, JsonFileBackend, SavedSession, SessionStore

__all__ = [
    "__version__",
    # Comparison
    "compute_diff_result",
    "compare_files",
    "shortest_edit_script",
    "edit_distance",
    "char_diff",
    "similarity",
    # Results
    "ChangeCount",
    "CharDiff",
    "DiffEntry",
    "DiffKind",
    "DiffResult",
    "EditKind",
    "EditOp",
    "Hunk",
    # Options
    "DiffOptions",
    # Sessions
    "SavedSession",
    "SessionStore",
    "InMemoryBackend",
    "JsonFileBackend",
    # Exceptions
    "TextDiffError",
    "ValidationError",
    "InvalidInputError",
    "FileError",
    "FormatError",
    "SessionError",
]
