"""SQLite store for save slots.

Schema changes live in ``litany.storage.migrations`` as modules exposing
``upgrade(conn)``. Each one is applied once and recorded in
``schema_version``.
"""
from __future__ import annotations

import contextlib
import importlib
import logging
import sqlite3
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

_MIGRATIONS = [
    "001_initial",
]


class Database:
    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = None
        if db_path != MEMORY:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    @property
    def connection(self) -> sqlite3.Connection:
        """The single shared connection, opened on first use."""
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
            logger.debug(f"Opened save database at {self.db_path}")
        return self._conn

    def applied_versions(self) -> set[int]:
        rows = self.connection.execute("SELECT version FROM schema_version").fetchall()
        return {row[0] for row in rows}

    def initialize(self) -> None:
        """Bring the schema up to date. Safe to call on every start."""
        conn = self.connection
        conn.execute("CREATE TABLE IF NOT EXISTS schema_version (version INTEGER PRIMARY KEY)")
        done = self.applied_versions()
        pending = [(v, name) for v, name in enumerate(_MIGRATIONS, 1) if v not in done]
        for version, name in pending:
            importlib.import_module(f"litany.storage.migrations.{name}").upgrade(conn)
            conn.execute("INSERT INTO schema_version (version) VALUES (?)", (version,))
            logger.info(f"Save database migrated to {name}")
        conn.commit()

    @contextlib.contextmanager
    def get_connection(self) -> Iterator[sqlite3.Connection]:
        """Yield the connection inside a transaction: commit, or roll back and re-raise."""
        conn = self.connection
        try:
            yield conn
        except Exception:
            conn.rollback()
            raise
        conn.commit()

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
