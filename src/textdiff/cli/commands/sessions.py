#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textdiff/cli/commands/sessions.py
"""Saved session management command.

``textdiff sessions`` lists, shows, replays and deletes comparisons stored
with ``textdiff diff --save-session``. Listing supports both plain text and
rich terminal output.
"""
import argparse
import json
import sys
from datetime import datetime
from typing import Any

from textdiff.cli.commands.shared import (
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
from textdiff.cli.config import split_config
from textdiff.constants import DEFAULT_CONTEXT_SIZE, DEFAULT_MERGE_DISTANCE, DEFAULT_SIMILARITY_THRESHOLD
from textdiff.exceptions import TextDiffError
from textdiff.sessions import SavedSession, SessionStore


def _create_sessions_parser() -> argparse.ArgumentParser:
    """Create argparse parser for sessions command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with list/show/replay/delete/clear subcommands

    """
    parser = argparse.ArgumentParser(
        prog="textdiff sessions", description="Manage saved comparison sessions.", add_help=True
    )
    parser.add_argument("--session-file", help="Session file (default: ~/.textdiff/sessions.json)")
    add_config_arguments(parser)
    add_logging_arguments(parser)

    subparsers = parser.add_subparsers(dest="action", metavar="ACTION")
    subparsers.required = True

    list_parser = subparsers.add_parser("list", help="List saved sessions, newest first")
    list_parser.add_argument("--rich", action="store_true", help="Use rich terminal output with formatting")

    show_parser = subparsers.add_parser("show", help="Print a saved session as JSON")
    show_parser.add_argument("timestamp", type=int, help="Session timestamp (from 'sessions list')")

    replay_parser = subparsers.add_parser("replay", help="Re-run a saved comparison")
    replay_parser.add_argument("timestamp", type=int, help="Session timestamp (from 'sessions list')")
    replay_parser.add_argument("--format", "-f", choices=["unified", "json"], help="Output format (default: unified)")
    replay_parser.add_argument("--output", "-o", help="Write diff to file (default: stdout)")
    replay_parser.add_argument("--color", choices=["auto", "always", "never"], help="Colorize output (default: auto)")

    delete_parser = subparsers.add_parser("delete", help="Delete one saved session")
    delete_parser.add_argument("timestamp", type=int, help="Session timestamp (from 'sessions list')")

    subparsers.add_parser("clear", help="Delete every saved session")

    return parser


def _format_timestamp(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp / 1000).strftime("%Y-%m-%d %H:%M:%S")


def _describe_flags(session: SavedSession) -> str:
    flags = []
    if session.ignore_whitespace:
        flags.append("ignore-whitespace")
    if not session.ignore_empty_lines:
        flags.append("keep-empty-lines")
    if session.show_whitespace:
        flags.append("show-whitespace")
    if session.similarity_threshold != DEFAULT_SIMILARITY_THRESHOLD:
        flags.append(f"threshold={session.similarity_threshold:g}")
    if session.context_size != DEFAULT_CONTEXT_SIZE:
        flags.append(f"context={session.context_size}")
    if session.merge_distance != DEFAULT_MERGE_DISTANCE:
        flags.append(f"merge-distance={session.merge_distance}")
    return ", ".join(flags) or "-"


def _render_plain_sessions(sessions: list[SavedSession]) -> None:
    """Print the session list as plain text."""
    if not sessions:
        print("No saved sessions.")
        return

    print(f"Saved sessions ({len(sessions)}):")
    print("-" * 60)
    for session in sessions:
        names = f"{session.name_a or 'Document A'} -> {session.name_b or 'Document B'}"
        print(f"{session.timestamp}  {_format_timestamp(session.timestamp)}  {names}  [{_describe_flags(session)}]")


def _render_rich_sessions(console: Any, sessions: list[SavedSession]) -> None:
    """Render the session list as a Rich table.

    Parameters
    ----------
    console : Console
        Rich console instance
    sessions : list[SavedSession]
        Sessions to show, newest first

    """
    from rich.table import Table

    table = Table(title=f"Saved Sessions ({len(sessions)})")
    table.add_column("Timestamp", style="cyan", no_wrap=True)
    table.add_column("Saved", style="yellow")
    table.add_column("Document A", style="red")
    table.add_column("Document B", style="green")
    table.add_column("Options", style="white")

    for session in sessions:
        table.add_row(
            str(session.timestamp),
            _format_timestamp(session.timestamp),
            session.name_a or "[dim]Document A[/dim]",
            session.name_b or "[dim]Document B[/dim]",
            _describe_flags(session),
        )

    console.print(table)


def _list_sessions(store: SessionStore, use_rich: bool) -> int:
    sessions = store.list_sessions()

    if use_rich:
        from rich.console import Console

        _render_rich_sessions(Console(), sessions)
    else:
        _render_plain_sessions(sessions)

    return EXIT_SUCCESS


def _replay_session(store: SessionStore, parsed: argparse.Namespace, cli_settings: dict[str, Any]) -> int:
    session = store.get(parsed.timestamp)
    diff_result = session.replay()
    emit_diff(
        diff_result,
        parsed.format or cli_settings.get("format", "unified"),
        session.name_a or "a",
        session.name_b or "b",
        output=parsed.output,
        color=parsed.color or cli_settings.get("color", "auto"),
    )
    print_summary(diff_result)
    return EXIT_SUCCESS


def handle_sessions_command(args: list[str] | None = None) -> int:
    """Handle sessions command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'sessions')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = _create_sessions_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    setup_logging_level(parsed)

    try:
        _, cli_settings = split_config(load_cli_config(parsed))
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    # --session-file wins over the configured file
    store = open_session_store(parsed.session_file or cli_settings.get("session_file"))

    try:
        if parsed.action == "list":
            return _list_sessions(store, parsed.rich)

        if parsed.action == "show":
            session = store.get(parsed.timestamp)
            print(json.dumps(session.to_dict(), indent=2, ensure_ascii=False))
            return EXIT_SUCCESS

        if parsed.action == "replay":
            return _replay_session(store, parsed, cli_settings)

        if parsed.action == "delete":
            if not store.delete(parsed.timestamp):
                print(f"Error: No saved session with timestamp {parsed.timestamp}", file=sys.stderr)
                return EXIT_VALIDATION_ERROR
            print(f"Deleted session {parsed.timestamp}", file=sys.stderr)
            return EXIT_SUCCESS

        store.clear()
        print("All saved sessions deleted", file=sys.stderr)
        return EXIT_SUCCESS

    except TextDiffError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
