#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the textdiff CLI.

This module handles automatic discovery of configuration files, loading
configs from JSON, TOML or YAML, and turning the loaded values into
:class:`~textdiff.options.DiffOptions`.

Example ``.textdiff.toml``::

    ignore_whitespace = true
    context_size = 5
    format = "json"

"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

from textdiff.options import DiffOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".textdiff.toml", ".textdiff.yaml", ".textdiff.yml", ".textdiff.json"]

# Keys accepted in config files besides the DiffOptions fields
CLI_CONFIG_KEYS = {"format", "color", "session_file"}


def _ensure_mapping(config: Any, config_path: Path, kind: str) -> Dict[str, Any]:
    if config is None:
        return {}
    if not isinstance(config, dict):
        noun = "an object" if kind == "JSON" else "a mapping"
        raise argparse.ArgumentTypeError(f"{kind} config file must contain {noun}, got {type(config).__name__}")
    return config


def _parse_toml(config_path: Path) -> Any:
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def _parse_yaml(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _parse_json(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


# suffix -> (format label, parser, parse error types)
_PARSERS: Dict[str, tuple[str, Callable[[Path], Any], tuple[type[Exception], ...]]] = {
    ".toml": ("TOML", _parse_toml, (tomllib.TOMLDecodeError,)),
    ".yaml": ("YAML", _parse_yaml, (yaml.YAMLError,)),
    ".yml": ("YAML", _parse_yaml, (yaml.YAMLError,)),
    ".json": ("JSON", _parse_json, (json.JSONDecodeError,)),
}


def _read_config(config_path: Path, suffix: str) -> Dict[str, Any]:
    kind, parser, parse_errors = _PARSERS[suffix]
    try:
        data = parser(config_path)
    except parse_errors as e:
        raise argparse.ArgumentTypeError(f"Invalid {kind} in {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Cannot read {config_path}: {e}") from e
    return _ensure_mapping(data, config_path, kind)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.textdiff]`` table of a pyproject.toml, or ``{}``.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be parsed or the section is not a table

    """
    section = _read_config(pyproject_path, ".toml").get("tool", {}).get("textdiff", {})
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(f"[tool.textdiff] in {pyproject_path} must be a table")
    return section


def _config_in_dir(directory: Path) -> Optional[Path]:
    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file at or above ``start_dir``.

    In each directory the dedicated files (``.textdiff.toml``,
    ``.textdiff.yaml``, ``.textdiff.yml``, ``.textdiff.json``) are checked
    before a ``pyproject.toml`` that carries a ``[tool.textdiff]`` table.
    A pyproject.toml that cannot be parsed is skipped.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from, defaults to the working directory

    Returns
    -------
    Path or None
        The first configuration file found walking towards the root

    """
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        found = _config_in_dir(directory)
        if found:
            return found

        pyproject = directory / "pyproject.toml"
        if not pyproject.is_file():
            continue
        try:
            has_section = bool(_load_pyproject_section(pyproject))
        except argparse.ArgumentTypeError as e:
            logger.debug("Skipping %s: %s", pyproject, e)
            continue
        if has_section:
            return pyproject

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Search the directory tree, then the home directory, for a config file."""
    return find_config_in_parents(start_dir) or _config_in_dir(Path.home())


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a JSON, TOML, YAML or pyproject.toml configuration file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        The configuration mapping (``{}`` for an empty YAML document)

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unreadable, malformed or of an unknown type

    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    suffix = config_path.suffix.lower()
    if suffix not in _PARSERS:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {suffix or config_path.name}")

    logger.debug("Loading configuration from %s", config_path)
    return _read_config(config_path, suffix)


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the configuration that applies to this invocation.

    An explicit ``--config`` path wins over ``TEXTDIFF_CONFIG``, which wins
    over discovery. Returns ``{}`` when nothing is found; a named file that
    cannot be loaded raises ``argparse.ArgumentTypeError``.
    """
    chosen: Optional[Path | str] = explicit_path or env_var_path or discover_config_file()
    if not chosen:
        return {}
    return load_config_file(chosen)


def split_config(config: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Separate DiffOptions fields from CLI-only keys, rejecting unknown keys.

    Parameters
    ----------
    config : dict
        Flat configuration mapping (hyphenated keys are accepted)

    Returns
    -------
    tuple of dict
        ``(option_values, cli_values)``

    Raises
    ------
    argparse.ArgumentTypeError
        If the mapping contains keys that are not recognized

    """
    option_names = set(DiffOptions.field_names())
    option_values: Dict[str, Any] = {}
    cli_values: Dict[str, Any] = {}
    unknown = []

    for raw_key, value in config.items():
        key = str(raw_key).replace("-", "_")
        if key in option_names:
            option_values[key] = value
        elif key in CLI_CONFIG_KEYS:
            cli_values[key] = value
        else:
            unknown.append(str(raw_key))

    if unknown:
        valid = ", ".join(sorted(option_names | CLI_CONFIG_KEYS))
        raise argparse.ArgumentTypeError(f"Unknown configuration key(s): {', '.join(unknown)}. Valid keys: {valid}")

    return option_values, cli_values


def options_from_config(config: Dict[str, Any], base: Optional[DiffOptions] = None) -> DiffOptions:
    """Build DiffOptions from the option keys of a configuration mapping.

    Raises
    ------
    argparse.ArgumentTypeError
        If a key is unknown or a value is out of range

    """
    option_values, _ = split_config(config)
    try:
        return (base or DiffOptions()).create_updated(**option_values)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration value: {e}") from e
