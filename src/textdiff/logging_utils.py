"""Logging setup shared by the textdiff command line entry points."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

TRACE_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s:%(lineno)d %(message)s"
PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the root logger.

    Previously installed root handlers are removed so repeated CLI
    invocations in one process do not duplicate output.

    Parameters
    ----------
    log_level : int | str
        Level number or name such as ``"DEBUG"``. Unknown names fall back
        to WARNING.
    log_file : str, optional
        Also append log records to this file. Its parent directory is
        created when missing.
    trace_mode : bool, default False
        Use a verbose format with timestamps, logger names and line numbers.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    level = _resolve_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if file_error is not None:
        root.warning("Cannot write log file %s: %s", log_file, file_error)
    elif log_file:
        root.debug("Appending log output to %s", log_file)

    return root
