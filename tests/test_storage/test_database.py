"""Tests for src/litany/storage/database.py."""
from __future__ import annotations

import sqlite3

import pytest

from litany.storage.database import _MIGRATIONS, Database


class TestDatabaseInitialize:
    def test_all_migrations_applied(self, in_memory_db):
        with in_memory_db.get_connection() as conn:
            versions = {r[0] for r in conn.execute("SELECT version FROM schema_version").fetchall()}
        assert versions == set(range(1, len(_MIGRATIONS) + 1))

    def test_idempotent_rerun(self, in_memory_db):
        in_memory_db.initialize()
        with in_memory_db.get_connection() as conn:
            count = conn.execute("SELECT count(*) FROM schema_version").fetchone()[0]
        assert count == len(_MIGRATIONS)

    def test_saves_table_exists(self, in_memory_db):
        with in_memory_db.get_connection() as conn:
            rows = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='saves'"
            ).fetchall()
        assert len(rows) == 1

    def test_memory_database(self):
        db = Database(":memory:")
        db.initialize()
        with db.get_connection() as conn:
            assert conn.execute("SELECT count(*) FROM saves").fetchone()[0] == 0
        db.close()


class TestConnection:
    def test_rollback_on_error(self, in_memory_db):
        with pytest.raises(sqlite3.IntegrityError):
            with in_memory_db.get_connection() as conn:
                conn.execute(
                    "INSERT INTO saves (slot, class_id, level, player_state, inventory_state, updated_at) "
                    "VALUES ('a', 'knight', 1, '{}', '{}', 'now')"
                )
                conn.execute(
                    "INSERT INTO saves (slot, class_id, level, player_state, inventory_state, updated_at) "
                    "VALUES ('a', 'knight', 1, '{}', '{}', 'now')"
                )
        with in_memory_db.get_connection() as conn:
            assert conn.execute("SELECT count(*) FROM saves").fetchone()[0] == 0

    def test_creates_parent_directory(self, tmp_path):
        db = Database(str(tmp_path / "nested" / "dir" / "game.db"))
        db.initialize()
        assert (tmp_path / "nested" / "dir").is_dir()
        db.close()
