from __future__ import annotations

import sqlite3

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS saves (
    slot            TEXT PRIMARY KEY,
    class_id        TEXT NOT NULL,
    level           INTEGER NOT NULL DEFAULT 1,
    player_state    TEXT NOT NULL,
    inventory_state TEXT NOT NULL,
    updated_at      TEXT NOT NULL
);
"""


def upgrade(conn: sqlite3.Connection) -> None:
    conn.executescript(_SCHEMA_SQL)
