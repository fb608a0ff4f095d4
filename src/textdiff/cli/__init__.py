#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the textdiff comparison library.

Examples
--------
Compare two files::

    $ textdiff old.txt new.txt

Ignore whitespace and keep blank lines::

    $ textdiff diff -w --keep-empty-lines old.md new.md

Compare stdin against a file and write JSON::

    $ cat draft.txt | textdiff - final.txt --format json -o changes.json

Save the comparison and replay it later::

    $ textdiff old.txt new.txt --save-session
    $ textdiff sessions list --rich
    $ textdiff sessions replay 1730000000000

Configuration files (``.textdiff.toml``, ``.textdiff.yaml``, ``.textdiff.json``
or ``[tool.textdiff]`` in ``pyproject.toml``) are discovered from the current
directory upward; ``TEXTDIFF_CONFIG`` or ``--config`` names one explicitly.

"""

import sys

from textdiff.cli.commands import dispatch_command

__all__ = ["main"]


def main(args: list[str] | None = None) -> int:
    """Execute the CLI entry point."""
    if args is None:
        args = sys.argv[1:]

    result = dispatch_command(args)
    if result is not None:
        return result

    # No command word: treat the arguments as a diff invocation
    from textdiff.cli.commands.diff import handle_diff_command

    return handle_diff_command(args)


if __name__ == "__main__":
    sys.exit(main())
