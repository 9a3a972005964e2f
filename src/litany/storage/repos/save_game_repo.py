from __future__ import annotations

from datetime import datetime, timezone

from litany.models.combat import Inventory, PlayerCombatant
from litany.storage.database import Database


class SaveGameRepo:
    """Player stats and inventory snapshots, one row per save slot.

    Status effects belong to a single encounter and are never stored.
    """

    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, slot: str, player: PlayerCombatant, inventory: Inventory) -> None:
        """Insert or overwrite a save slot."""
        now = datetime.now(timezone.utc).isoformat()
        player_state = player.model_dump_json(exclude={"status_effects"})
        with self.db.get_connection() as conn:
            conn.execute(
                "INSERT INTO saves "
                "(slot, class_id, level, player_state, inventory_state, updated_at) "
                "VALUES (?, ?, ?, ?, ?, ?) "
                "ON CONFLICT(slot) DO UPDATE SET "
                "class_id = excluded.class_id, level = excluded.level, "
                "player_state = excluded.player_state, "
                "inventory_state = excluded.inventory_state, "
                "updated_at = excluded.updated_at",
                (slot, player.class_id, player.level, player_state, inventory.model_dump_json(), now),
            )

    def load(self, slot: str) -> tuple[PlayerCombatant, Inventory] | None:
        """Fetch a save slot, or None if it does not exist."""
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT player_state, inventory_state FROM saves WHERE slot = ?", (slot,)
            ).fetchone()
        if row is None:
            return None
        player = PlayerCombatant.model_validate_json(row["player_state"])
        inventory = Inventory.model_validate_json(row["inventory_state"])
        return player, inventory

    def list_saves(self) -> list[dict]:
        """Return slot summaries, most recently updated first."""
        with self.db.get_connection() as conn:
            rows = conn.execute(
                "SELECT slot, class_id, level, updated_at FROM saves ORDER BY updated_at DESC"
            ).fetchall()
        return [dict(r) for r in rows]

    def delete(self, slot: str) -> None:
        with self.db.get_connection() as conn:
            conn.execute("DELETE FROM saves WHERE slot = ?", (slot,))
