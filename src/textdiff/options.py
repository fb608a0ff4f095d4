#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options controlling a text comparison.

All comparison knobs are gathered in :class:`DiffOptions`, a frozen dataclass
whose field metadata doubles as CLI and configuration-file documentation.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from textdiff.constants import (
    DEFAULT_CONTEXT_SIZE,
    DEFAULT_IGNORE_EMPTY_LINES,
    DEFAULT_IGNORE_WHITESPACE,
    DEFAULT_MERGE_DISTANCE,
    DEFAULT_SHOW_WHITESPACE,
    DEFAULT_SIMILARITY_THRESHOLD,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Configuration for a single comparison.

    Parameters
    ----------
    ignore_whitespace : bool, default False
        Compare lines with runs of whitespace folded to one space and the ends
        trimmed, and drop changes that only touch whitespace.
    ignore_empty_lines : bool, default True
        Remove blank lines before diffing. Reported line numbers still refer
        to the unfiltered documents.
    similarity_threshold : float, default 0.4
        Minimum similarity ratio for an adjacent removed/added pair to be
        reported as one modified line.
    context_size : int, default 3
        Unchanged lines shown before and after each hunk.
    merge_distance : int, default 6
        Maximum run of unchanged lines kept inside a hunk before it is split.
    show_whitespace : bool, default False
        Render spaces and tabs visibly. Display only; never affects the diff.

    """

    ignore_whitespace: bool = field(
        default=DEFAULT_IGNORE_WHITESPACE,
        metadata={"help": "Ignore whitespace-only differences (like diff -w)", "importance": "core"},
    )
    ignore_empty_lines: bool = field(
        default=DEFAULT_IGNORE_EMPTY_LINES,
        metadata={"help": "Skip blank lines when comparing", "importance": "core"},
    )
    similarity_threshold: float = field(
        default=DEFAULT_SIMILARITY_THRESHOLD,
        metadata={
            "help": "Similarity ratio (0.0-1.0) at which a removed/added pair is shown as one modified line",
            "type": float,
            "importance": "advanced",
        },
    )
    context_size: int = field(
        default=DEFAULT_CONTEXT_SIZE,
        metadata={"help": "Number of unchanged context lines around each hunk", "type": int, "importance": "core"},
    )
    merge_distance: int = field(
        default=DEFAULT_MERGE_DISTANCE,
        metadata={
            "help": "Merge change runs separated by at most this many unchanged lines into one hunk",
            "type": int,
            "importance": "advanced",
        },
    )
    show_whitespace: bool = field(
        default=DEFAULT_SHOW_WHITESPACE,
        metadata={"help": "Render spaces and tabs visibly in output", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError(f"similarity_threshold must be in range [0.0, 1.0], got {self.similarity_threshold}")

        if self.context_size < 0:
            raise ValueError(f"context_size must be non-negative, got {self.context_size}")

        if self.merge_distance < 0:
            raise ValueError(f"merge_distance must be non-negative, got {self.merge_distance}")

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of all option fields."""
        return [f.name for f in fields(cls)]
