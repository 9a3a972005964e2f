"""Between-encounter recovery and rewards: pure functions, no I/O."""
from __future__ import annotations

from litany.content.tables import DefinitionTables, get_tables
from litany.models.combat import Inventory, PlayerCombatant
from litany.models.definitions import ItemKind


def apply_rewards(player: PlayerCombatant, xp: int, gold: int) -> PlayerCombatant:
    return player.model_copy(update={"xp": player.xp + xp, "gold": player.gold + gold})


def rest(player: PlayerCombatant) -> PlayerCombatant:
    """Bonfire rest: full hp and mind, every status effect cleared."""
    return player.model_copy(
        update={"hp": player.max_hp, "mp": player.max_mp, "status_effects": []},
        deep=True,
    )


def refill_flasks(
    inventory: Inventory,
    charges: dict[str, int],
    tables: DefinitionTables | None = None,
) -> Inventory:
    """Top flasks back up to their charge counts. Other items are untouched."""
    tables = tables or get_tables()
    refilled = inventory.model_copy(deep=True)
    for entry in refilled.items:
        item = tables.item(entry.item_id)
        if item is not None and item.kind == ItemKind.FLASK:
            entry.count = max(entry.count, charges.get(entry.item_id, entry.count))
    return refilled
