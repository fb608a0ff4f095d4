#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textdiff/cli/commands/__init__.py
"""CLI command handlers for textdiff.

This module routes the first command-line word to its handler. Handlers are
imported lazily in :func:`dispatch_command` so ``--help`` stays fast.
"""

import logging
import sys

logger = logging.getLogger(__name__)

USAGE = """usage: textdiff [diff] ORIGINAL MODIFIED [options]
       textdiff sessions {list,show,replay,delete,clear} [options]

Compare two plain-text documents line by line.

commands:
  diff        Compare two documents (default when no command is given)
  sessions    List, show, replay or delete saved comparisons

Run 'textdiff diff --help' or 'textdiff sessions --help' for the options."""


def dispatch_command(args: list[str] | None = None) -> int | None:
    """Route a command line to its command handler.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments

    Returns
    -------
    int or None
        Exit code if a command was handled, None when the arguments should
        be treated as a bare ``diff`` invocation

    """
    if args is None:
        args = sys.argv[1:]

    if not args or args[0] in ("-h", "--help", "help"):
        print(USAGE)
        return 0 if args else 2

    if args[0] == "--version":
        from textdiff import __version__

        print(f"textdiff {__version__}")
        return 0

    if args[0] == "sessions":
        from textdiff.cli.commands.sessions import handle_sessions_command

        return handle_sessions_command(args[1:])

    if args[0] == "diff":
        from textdiff.cli.commands.diff import handle_diff_command

        return handle_diff_command(args[1:])

    return None
