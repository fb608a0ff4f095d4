#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textdiff/cli/commands/diff.py
"""Document comparison command.

This module provides the diff command: it reads two plain-text documents
(either may come from stdin), merges configuration-file defaults with the
command-line flags, compares the documents and writes a unified or JSON
diff. Added/removed totals are reported on stderr.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from textdiff.cli.commands.shared import (
    EXIT_DIFFERENCES,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    add_config_arguments,
    add_logging_arguments,
    emit_diff,
    get_exit_code_for_exception,
    load_cli_config,
    open_session_store,
    print_summary,
    setup_logging_level,
)
from textdiff.cli.config import options_from_config, split_config
from textdiff.diff.text_diff import compute_diff_result
from textdiff.exceptions import TextDiffError
from textdiff.options import DiffOptions
from textdiff.sources import STDIN_MARKER, read_text_source

logger = logging.getLogger(__name__)



def _validate_context_lines(value: str) -> int:
    """Validate context lines is a non-negative integer.

    Parameters
    ----------
    value : str
        Context lines value as string

    Returns
    -------
    int
        Validated context lines value

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"value must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"value must be non-negative, got {ivalue}")

    return ivalue


def _validate_threshold(value: str) -> float:
    """Validate a similarity threshold in the range [0.0, 1.0]."""
    try:
        fvalue = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"similarity threshold must be a number, got '{value}'") from e

    if not 0.0 <= fvalue <= 1.0:
        raise argparse.ArgumentTypeError(f"similarity threshold must be between 0.0 and 1.0, got {fvalue}")

    return fvalue


def _create_diff_parser() -> argparse.ArgumentParser:
    """Create argparse parser for diff command.

    Option flags default to ``None`` so that values from a configuration
    file apply unless the flag is given explicitly.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser for diff command

    """
    parser = argparse.ArgumentParser(
        prog="textdiff diff",
        description="Compare two text documents line by line and print a unified diff",
        add_help=True,
    )

    # Positional arguments
    parser.add_argument("original", help="Original document (.txt, .md or no extension, use '-' for stdin)")
    parser.add_argument("modified", help="Modified document (.txt, .md or no extension, use '-' for stdin)")

    # Output options
    parser.add_argument(
        "--format",
        "-f",
        choices=["unified", "json"],
        default=None,
        help="Output format: unified (default, like diff -u) or json (structured)",
    )
    parser.add_argument("--output", "-o", help="Write diff to file (default: stdout)")
    parser.add_argument(
        "--color",
        dest="color",
        choices=["auto", "always", "never"],
        default=None,
        help="Colorize output: auto (default, if terminal), always, never",
    )
    parser.add_argument(
        "--exit-code",
        action="store_true",
        help="Exit with status 1 when the documents differ",
    )

    # Comparison options
    parser.add_argument(
        "--ignore-whitespace",
        "-w",
        action="store_true",
        default=None,
        help="Ignore whitespace changes (like diff -w)",
    )
    parser.add_argument(
        "--keep-empty-lines",
        dest="ignore_empty_lines",
        action="store_false",
        default=None,
        help="Compare blank lines too (they are skipped by default)",
    )
    parser.add_argument(
        "--similarity-threshold",
        type=_validate_threshold,
        default=None,
        help="Similarity (0.0-1.0) at which a removed/added pair is shown as one modified line (default: 0.4)",
    )
    parser.add_argument(
        "--context",
        "-C",
        dest="context_size",
        type=_validate_context_lines,
        default=None,
        help="Number of context lines (default: 3, like diff -C)",
    )
    parser.add_argument(
        "--merge-distance",
        type=_validate_context_lines,
        default=None,
        help="Join changes separated by at most this many unchanged lines (default: 6)",
    )
    parser.add_argument(
        "--show-whitespace",
        action="store_true",
        default=None,
        help="Render spaces as '·' and tabs as '→' in the output",
    )

    # Sessions
    parser.add_argument("--save-session", action="store_true", help="Save this comparison for later replay")
    parser.add_argument("--session-file", help="Session file (default: ~/.textdiff/sessions.json)")

    # Configuration
    add_config_arguments(parser)

    add_logging_arguments(parser)

    return parser


def _resolve_settings(parsed: argparse.Namespace) -> tuple[DiffOptions, dict[str, Any]]:
    """Merge defaults, configuration file and explicit flags.

    Returns
    -------
    tuple
        ``(options, cli_settings)`` where ``cli_settings`` holds format,
        color and session_file

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file cannot be loaded or holds invalid values

    """
    config = load_cli_config(parsed)

    options = options_from_config(config)
    _, cli_settings = split_config(config)

    overrides = {
        name: getattr(parsed, name)
        for name in DiffOptions.field_names()
        if getattr(parsed, name, None) is not None
    }
    if overrides:
        try:
            options = options.create_updated(**overrides)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    settings = {
        "format": parsed.format or cli_settings.get("format", "unified"),
        "color": parsed.color or cli_settings.get("color", "auto"),
        "session_file": parsed.session_file or cli_settings.get("session_file"),
    }
    if settings["format"] not in ("unified", "json"):
        raise argparse.ArgumentTypeError(f"Invalid format in configuration: {settings['format']}")
    if settings["color"] not in ("auto", "always", "never"):
        raise argparse.ArgumentTypeError(f"Invalid color mode in configuration: {settings['color']}")

    return options, settings


def _label(source: str) -> str:
    return "stdin" if source == STDIN_MARKER else str(Path(source))


def handle_diff_command(args: list[str] | None = None) -> int:
    """Handle diff command to compare two documents.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'diff')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = _create_diff_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    setup_logging_level(parsed)

    # Cannot read both from stdin
    if parsed.original == STDIN_MARKER and parsed.modified == STDIN_MARKER:
        print("Error: Cannot read both original and modified from stdin", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        options, settings = _resolve_settings(parsed)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    label_a = _label(parsed.original)
    label_b = _label(parsed.modified)

    try:
        text_a = read_text_source(parsed.original)
        text_b = read_text_source(parsed.modified)

        logger.info("Comparing %s and %s", label_a, label_b)
        diff_result = compute_diff_result(text_a, text_b, options=options)

        emit_diff(
            diff_result,
            settings["format"],
            label_a,
            label_b,
            output=parsed.output,
            color=settings["color"],
        )
        print_summary(diff_result)

        if parsed.save_session:
            store = open_session_store(settings["session_file"])
            session = store.save(text_a, text_b, name_a=label_a, name_b=label_b, options=options)
            print(f"Session saved: {session.timestamp}", file=sys.stderr)

    except TextDiffError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    if parsed.exit_code and diff_result.has_changes:
        return EXIT_DIFFERENCES
    return EXIT_SUCCESS
