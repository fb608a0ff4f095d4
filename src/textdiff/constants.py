#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the textdiff library.

This module centralizes the tunable numbers and default options used by the
diff engine, the renderers, the session store and the command-line interface.

Constants are organized by category:
1. Type Definitions - Literal types shared across modules
2. Diff Engine Defaults - Thresholds consumed by the comparison pipeline
3. Display Defaults - Options that only affect rendering
4. Session Storage - Saved comparison limits and keys
5. Text Sources - Accepted input file types
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OutputFormat = Literal["unified", "json"]
ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Diff Engine Defaults
# =============================================================================

# Lines whose similarity ratio reaches this value are paired as "modified"
DEFAULT_SIMILARITY_THRESHOLD = 0.4

# Number of unchanged lines kept before and after each hunk
DEFAULT_CONTEXT_SIZE = 3

# Change runs separated by at most this many unchanged lines share one hunk
DEFAULT_MERGE_DISTANCE = 6

DEFAULT_IGNORE_WHITESPACE = False
DEFAULT_IGNORE_EMPTY_LINES = True

# =============================================================================
# Display Defaults
# =============================================================================

DEFAULT_SHOW_WHITESPACE = False
VISIBLE_SPACE = "·"
VISIBLE_TAB = "→   "

# =============================================================================
# Session Storage
# =============================================================================

MAX_SAVED_SESSIONS = 10
SESSION_STORAGE_KEY = "textdiff.sessions"
DEFAULT_SESSION_FILE = "~/.textdiff/sessions.json"

# =============================================================================
# Text Sources
# =============================================================================

VALID_FILE_EXTENSIONS = (".txt", ".md")
DEFAULT_TEXT_ENCODING = "utf-8"
