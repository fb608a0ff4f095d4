#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textdiff/cli/commands/shared.py
"""Helpers shared by the textdiff CLI commands.

Exit codes, exception-to-exit-code mapping, the common logging flags and
the output step that turns a :class:`DiffResult` into unified or JSON text.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from textdiff.cli.config import load_config_with_priority
from textdiff.constants import DEFAULT_SESSION_FILE
from textdiff.diff.models import DiffResult
from textdiff.diff.renderers.json import JsonDiffRenderer
from textdiff.diff.renderers.json import render_to_file as render_json_to_file
from textdiff.diff.renderers.unified import UnifiedDiffRenderer
from textdiff.diff.renderers.unified import render_to_file as render_unified_to_file
from textdiff.exceptions import FileError, FormatError, SessionError, ValidationError
from textdiff.logging_utils import configure_logging
from textdiff.sessions import JsonFileBackend, SessionStore

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TEXTDIFF_CONFIG"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5

# Returned by ``diff --exit-code`` when the documents differ
EXIT_DIFFERENCES = 1


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, SessionError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    return EXIT_ERROR


def add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    """Register --log-level, --log-file, --trace and --verbose on ``parser``."""
    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    group.add_argument("--log-file", help="Also write log messages to this file")
    group.add_argument("--trace", action="store_true", help="Very verbose logging with timestamps")
    group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")


def setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Register --config and --no-config on ``parser``."""
    parser.add_argument("--config", help=f"Configuration file (default: discovered, or ${CONFIG_ENV_VAR})")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")


def load_cli_config(parsed_args: argparse.Namespace) -> dict[str, Any]:
    """Load the configuration mapping selected by --config / --no-config.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded

    """
    if parsed_args.no_config:
        return {}
    config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    if config:
        logger.debug("Loaded configuration: %s", config)
    return config


def open_session_store(session_file: str | None = None) -> SessionStore:
    """Return a session store backed by the JSON session file."""
    return SessionStore(JsonFileBackend(session_file or DEFAULT_SESSION_FILE))


def resolve_color(color: str, output: str | None) -> bool:
    """Decide whether unified output should carry ANSI colors."""
    if color == "always":
        return True
    if color == "auto" and not output:
        # Auto-detect: use colors if stdout is a TTY
        return sys.stdout.isatty()
    return False


def emit_diff(
    diff_result: DiffResult,
    output_format: str,
    label_a: str,
    label_b: str,
    output: str | None = None,
    color: str = "auto",
) -> None:
    """Write a rendered diff to ``output`` or standard output.

    Parameters
    ----------
    diff_result : DiffResult
        Comparison result
    output_format : str
        ``"unified"`` or ``"json"``
    label_a, label_b : str
        Names of the two documents
    output : str, optional
        Destination file; stdout when omitted
    color : str
        ``"auto"``, ``"always"`` or ``"never"`` (unified output only)

    """
    show_whitespace = diff_result.options.show_whitespace if diff_result.options else False

    if output_format == "json":
        if output:
            print(f"Writing JSON diff to {output}...", file=sys.stderr)
            render_json_to_file(diff_result, output, label_a=label_a, label_b=label_b)
            print(f"Diff written to: {Path(output)}", file=sys.stderr)
        else:
            print(JsonDiffRenderer().render(diff_result, label_a=label_a, label_b=label_b))
        return

    if output:
        print(f"Writing unified diff to {output}...", file=sys.stderr)
        # Files never get colors
        render_unified_to_file(
            diff_result, output, label_a=label_a, label_b=label_b, show_whitespace=show_whitespace
        )
        print(f"Diff written to: {Path(output)}", file=sys.stderr)
        return

    renderer = UnifiedDiffRenderer(use_color=resolve_color(color, output), show_whitespace=show_whitespace)
    for line in renderer.render(diff_result, label_a=label_a, label_b=label_b):
        print(line)


def print_summary(diff_result: DiffResult) -> None:
    """Print the added/removed line totals to stderr."""
    if not diff_result.has_changes:
        print("No differences found.", file=sys.stderr)
        return
    counts = diff_result.count_changes()
    print(f"Added: +{counts.added} | Removed: -{counts.removed}", file=sys.stderr)
