#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Saved comparison sessions.

A session records the two input texts and the options of a comparison so it
can be replayed later. Sessions are kept by :class:`SessionStore`, which
reads and writes through an injected key-value backend; the diff core itself
never touches storage.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, Union

from textdiff.constants import (
    DEFAULT_CONTEXT_SIZE,
    DEFAULT_MERGE_DISTANCE,
    DEFAULT_SIMILARITY_THRESHOLD,
    MAX_SAVED_SESSIONS,
    SESSION_STORAGE_KEY,
)
from textdiff.diff.models import DiffResult
from textdiff.exceptions import InvalidInputError, SessionError
from textdiff.options import DiffOptions

logger = logging.getLogger(__name__)

# DiffOptions fields stored with each session; records written before the
# thresholds were stored fall back to the defaults
_RECORDED_OPTIONS = (
    "ignore_whitespace",
    "show_whitespace",
    "ignore_empty_lines",
    "similarity_threshold",
    "context_size",
    "merge_distance",
)


class KeyValueBackend(Protocol):
    """Persistence capability used by :class:`SessionStore`."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...

    def clear(self) -> None:
        """Remove every key."""
        ...


class InMemoryBackend:
    """Dictionary-backed store, useful for tests and one-shot sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()


class JsonFileBackend:
    """Store keys as members of one JSON object on disk.

    Parameters
    ----------
    path : str or Path
        JSON file to read and write; parent directories are created on the
        first write

    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SessionError(f"Cannot read session file {self.path}: {e}", original_error=e) from e
        if not isinstance(data, dict):
            raise SessionError(f"Session file {self.path} must contain a JSON object")
        return data

    def _dump(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._dump(data)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


@dataclass(frozen=True)
class SavedSession:
    """A stored comparison.

    ``timestamp`` is the save time in milliseconds since the epoch and
    doubles as the session identifier.
    """

    timestamp: int
    text_a: str
    text_b: str
    name_a: Optional[str] = None
    name_b: Optional[str] = None
    ignore_whitespace: bool = False
    show_whitespace: bool = False
    ignore_empty_lines: bool = True
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    context_size: int = DEFAULT_CONTEXT_SIZE
    merge_distance: int = DEFAULT_MERGE_DISTANCE

    def options(self, base: Optional[DiffOptions] = None) -> DiffOptions:
        """Return the comparison options recorded with the session."""
        return (base or DiffOptions()).create_updated(
            **{name: getattr(self, name) for name in _RECORDED_OPTIONS}
        )

    def replay(self, base: Optional[DiffOptions] = None) -> DiffResult:
        """Re-run the stored comparison."""
        from textdiff.diff.text_diff import compute_diff_result

        return compute_diff_result(self.text_a, self.text_b, options=self.options(base))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SavedSession:
        """Build a session from stored data, tolerating missing optional keys."""
        return cls(
            timestamp=int(data["timestamp"]),
            text_a=str(data["text_a"]),
            text_b=str(data["text_b"]),
            name_a=data.get("name_a"),
            name_b=data.get("name_b"),
            ignore_whitespace=bool(data.get("ignore_whitespace", False)),
            show_whitespace=bool(data.get("show_whitespace", False)),
            ignore_empty_lines=bool(data.get("ignore_empty_lines", False)),
            similarity_threshold=float(data.get("similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD)),
            context_size=int(data.get("context_size", DEFAULT_CONTEXT_SIZE)),
            merge_distance=int(data.get("merge_distance", DEFAULT_MERGE_DISTANCE)),
        )


class SessionStore:
    """Newest-first list of saved sessions kept under one backend key.

    Parameters
    ----------
    backend : KeyValueBackend
        Persistence capability
    key : str, optional
        Backend key holding the serialized session list
    max_sessions : int, default 10
        Older sessions beyond this count are discarded on save
    clock : callable, optional
        Returns the current time in seconds; injectable for tests

    """

    def __init__(
        self,
        backend: KeyValueBackend,
        key: str = SESSION_STORAGE_KEY,
        max_sessions: int = MAX_SAVED_SESSIONS,
        clock: Callable[[], float] = time.time,
    ):
        self.backend = backend
        self.key = key
        self.max_sessions = max_sessions
        self._clock = clock

    def list_sessions(self) -> List[SavedSession]:
        """Return stored sessions, newest first.

        Unreadable stored data is logged and treated as an empty list.
        """
        try:
            raw = self.backend.get(self.key)
        except SessionError as e:
            logger.warning("Failed to load sessions: %s", e)
            return []
        if not raw:
            return []

        try:
            return [SavedSession.from_dict(item) for item in json.loads(raw)]
        except (json.JSONDecodeError, TypeError, KeyError, ValueError) as e:
            logger.warning("Failed to load sessions: %s", e)
            return []

    def _write(self, sessions: List[SavedSession]) -> None:
        self.backend.set(self.key, json.dumps([session.to_dict() for session in sessions], ensure_ascii=False))

    def save(
        self,
        text_a: str,
        text_b: str,
        name_a: Optional[str] = None,
        name_b: Optional[str] = None,
        options: Optional[DiffOptions] = None,
    ) -> SavedSession:
        """Store a comparison as the newest session.

        Raises
        ------
        InvalidInputError
            If either text is empty

        """
        if not text_a:
            raise InvalidInputError("a", message="Both texts are required to save a session")
        if not text_b:
            raise InvalidInputError("b", message="Both texts are required to save a session")

        opts = options or DiffOptions()
        session = SavedSession(
            timestamp=int(self._clock() * 1000),
            text_a=text_a,
            text_b=text_b,
            name_a=name_a,
            name_b=name_b,
            **{name: getattr(opts, name) for name in _RECORDED_OPTIONS},
        )
        sessions = [session, *self.list_sessions()][: self.max_sessions]
        self._write(sessions)
        logger.info("Saved session %d (%d stored)", session.timestamp, len(sessions))
        return session

    def get(self, timestamp: int) -> SavedSession:
        """Return the session saved at ``timestamp``.

        Raises
        ------
        SessionError
            If no such session exists

        """
        for session in self.list_sessions():
            if session.timestamp == timestamp:
                return session
        raise SessionError(f"No saved session with timestamp {timestamp}", timestamp=timestamp)

    def delete(self, timestamp: int) -> bool:
        """Remove one session; returns whether anything was removed."""
        sessions = self.list_sessions()
        remaining = [session for session in sessions if session.timestamp != timestamp]
        if len(remaining) == len(sessions):
            return False
        self._write(remaining)
        return True

    def clear(self) -> None:
        """Remove every stored session."""
        self.backend.delete(self.key)
