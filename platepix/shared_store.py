# -*- coding: utf-8 -*-
"""App-group shared key-value storage (SQLite).

Both the app and the widget process open the same suite. Every value lives in
its own row, so a single-key write is atomic; ``set_many`` writes several keys
in one transaction.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import re
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Protocol, Tuple

from .config import settings
from .errors import StorageUnavailable

logger = logging.getLogger(__name__)

_SUITE_RE = re.compile(r"^group\.[A-Za-z0-9._-]+$")


class KeyValueStore(Protocol):
    suite_name: str

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def set_many(self, values: Mapping[str, Any]) -> None: ...

    def remove(self, key: str) -> None: ...

    def synchronize(self) -> bool: ...


def _encode(value: Any) -> Tuple[str, str]:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "bool", json.dumps(value)
    if isinstance(value, int):
        return "int", json.dumps(value)
    if isinstance(value, float):
        return "float", json.dumps(value)
    if isinstance(value, str):
        return "str", json.dumps(value, ensure_ascii=False)
    if isinstance(value, dt.datetime):
        return "date", json.dumps(value.isoformat())
    if isinstance(value, (list, dict)):
        return "json", json.dumps(value, ensure_ascii=False)
    raise TypeError(f"Unsupported value type for shared storage: {type(value).__name__}")


def _decode(value_type: str, raw: str) -> Any:
    value = json.loads(raw)
    if value_type == "date":
        return dt.datetime.fromisoformat(value)
    return value


def _connect(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(str(db_path), timeout=5.0, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def _init_suite_db(db_path: Path) -> None:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = _connect(db_path)
    try:
        conn.execute("PRAGMA journal_mode = WAL;")
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS defaults (
                key TEXT PRIMARY KEY,
                value_type TEXT NOT NULL,
                value_json TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


class SharedDefaults:
    """SQLite-backed key-value store for one app-group suite."""

    def __init__(self, suite_name: str, db_path: Path) -> None:
        self.suite_name = suite_name
        self.db_path = db_path

    def __repr__(self) -> str:
        return f"SharedDefaults({self.suite_name!r}, {str(self.db_path)!r})"

    @contextmanager
    def _conn(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = _connect(self.db_path)
        except sqlite3.Error as exc:
            raise StorageUnavailable(self.suite_name, str(exc)) from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageUnavailable(self.suite_name, str(exc)) from exc
        finally:
            conn.close()

    def get(self, key: str) -> Any:
        with self._conn() as conn:
            row = conn.execute(
                "SELECT value_type, value_json FROM defaults WHERE key = ?", (key,)
            ).fetchone()
        if row is None:
            return None
        try:
            return _decode(row["value_type"], row["value_json"])
        except (ValueError, TypeError) as exc:
            logger.warning("Unreadable value for %s in %s: %s", key, self.suite_name, exc)
            return None

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, Any]) -> None:
        now = dt.datetime.now(dt.timezone.utc).isoformat()
        rows = []
        for key, value in values.items():
            value_type, value_json = _encode(value)
            rows.append((key, value_type, value_json, now))
        with self._conn() as conn:
            conn.executemany(
                """
                INSERT INTO defaults (key, value_type, value_json, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value_type = excluded.value_type,
                    value_json = excluded.value_json,
                    updated_at = excluded.updated_at
                """,
                rows,
            )

    def remove(self, key: str) -> None:
        with self._conn() as conn:
            conn.execute("DELETE FROM defaults WHERE key = ?", (key,))

    def keys(self) -> list[str]:
        with self._conn() as conn:
            rows = conn.execute("SELECT key FROM defaults ORDER BY key").fetchall()
        return [r["key"] for r in rows]

    def synchronize(self) -> bool:
        """Flush the write-ahead log into the main database file."""
        with self._conn() as conn:
            conn.execute("PRAGMA wal_checkpoint(PASSIVE);")
        return True


class MemoryStore:
    """In-process store with the SharedDefaults interface."""

    def __init__(self, suite_name: str = "group.memory", initial: Optional[Mapping[str, Any]] = None) -> None:
        self.suite_name = suite_name
        self._values: Dict[str, Any] = dict(initial or {})
        self._lock = threading.Lock()
        self.write_count = 0

    def get(self, key: str) -> Any:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, Any]) -> None:
        for value in values.values():
            _encode(value)
        with self._lock:
            self._values.update(values)
            self.write_count += 1

    def remove(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._values)

    def synchronize(self) -> bool:
        return True


def suite_db_path(suite_name: str, data_root: Optional[Path] = None) -> Path:
    root = data_root or settings.data_root
    return root / "groups" / f"{suite_name}.sqlite"


def open_shared_defaults(suite_name: Optional[str] = None, data_root: Optional[Path] = None) -> SharedDefaults:
    """Open (creating if needed) the store for an app-group suite.

    Raises StorageUnavailable when the suite name is not an app-group
    identifier or the backing file cannot be created.
    """
    suite = suite_name or settings.app_group
    if not _SUITE_RE.match(suite):
        raise StorageUnavailable(suite, "suite name must look like 'group.<identifier>'")
    db_path = suite_db_path(suite, data_root)
    try:
        _init_suite_db(db_path)
    except (OSError, sqlite3.Error) as exc:
        raise StorageUnavailable(suite, str(exc)) from exc
    return SharedDefaults(suite, db_path)


def try_open_shared_defaults(
    suite_name: Optional[str] = None, data_root: Optional[Path] = None
) -> Optional[SharedDefaults]:
    try:
        return open_shared_defaults(suite_name, data_root)
    except StorageUnavailable as exc:
        logger.warning("Failed to access shared defaults: %s", exc)
        return None
