"""
Key-value storage capability for the calibration profile.

The engine only ever sees KeyValueStore; backends are swappable
(in-memory for tests, sqlite or a directory of JSON files for real use).
Values are JSON text.
"""

from __future__ import annotations

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional, Protocol


class StorageError(Exception):
    """Raised by backends when the underlying store cannot be used."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def put(self, key: str, value: str) -> bool: ...


class InMemoryStore:
    """Dict-backed store. Lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def put(self, key: str, value: str) -> bool:
        self._data[key] = value
        return True


class JsonFileStore:
    """One file per key under a directory."""

    def __init__(self, root: str = "Storage/kv"):
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        safe = "".join(c if c.isalnum() or c in "-_." else "_" for c in key)
        return self.root / f"{safe}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"cannot read {path}: {e}") from e

    def put(self, key: str, value: str) -> bool:
        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            raise StorageError(f"cannot write {path}: {e}") from e
        return True


class SqliteStore:
    """Single `kv` table; last write wins."""

    def __init__(self, db_path: str = "Storage/auraplay.db"):
        self.db_path = db_path

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"cannot open {self.db_path}: {e}") from e
        try:
            conn.execute(
                """CREATE TABLE IF NOT EXISTS kv(
                       key TEXT PRIMARY KEY,
                       value TEXT NOT NULL,
                       updated_at TEXT NOT NULL DEFAULT (datetime('now'))
                   )"""
            )
            yield conn
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        with self._connect() as conn:
            row = conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
            return row[0] if row else None

    def put(self, key: str, value: str) -> bool:
        with self._connect() as conn:
            conn.execute(
                """INSERT INTO kv(key, value, updated_at) VALUES (?, ?, datetime('now'))
                   ON CONFLICT(key) DO UPDATE SET
                     value=excluded.value,
                     updated_at=datetime('now')
                """,
                (key, value),
            )
            conn.commit()
        return True


def make_store(backend: str, sqlite_path: str = "Storage/auraplay.db",
               storage_dir: str = "Storage/kv") -> KeyValueStore:
    backend = (backend or "memory").strip().lower()
    if backend == "memory":
        return InMemoryStore()
    if backend == "sqlite":
        return SqliteStore(sqlite_path)
    if backend == "file":
        return JsonFileStore(storage_dir)
    raise ValueError(f"Unknown storage backend: {backend!r}")
