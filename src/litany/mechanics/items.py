"""Flask and consumable use in combat: pure calculations, no I/O."""
from __future__ import annotations

from litany.content.tables import DefinitionTables, get_tables
from litany.models.action import ItemResult
from litany.models.combat import Inventory, PlayerCombatant
from litany.models.definitions import ItemEffectType


def resolve_item(
    item_id: str,
    player: PlayerCombatant,
    inventory: Inventory,
    tables: DefinitionTables | None = None,
) -> ItemResult:
    """Work out what drinking a flask would restore.

    Restoration is capped at the missing amount. Using an item at full
    health or mind, without charges, or with no usable effect fails.
    """
    tables = tables or get_tables()
    item = tables.item(item_id)
    if item is None:
        return ItemResult(success=False, message="Unknown item", item_id=item_id)

    if inventory.count_of(item.id) <= 0:
        return ItemResult(success=False, message=f"{item.name} is empty.", item_id=item.id)

    if item.effect_type == ItemEffectType.HEAL:
        missing = player.max_hp - player.hp
        if missing <= 0:
            return ItemResult(success=False, message="Health is already full.", item_id=item.id)
        restored = min(item.value, missing)
        return ItemResult(
            success=True,
            message=f"Drank {item.name}. Restored {restored} HP.",
            item_id=item.id,
            hp_restored=restored,
        )

    if item.effect_type == ItemEffectType.RESTORE_MIND:
        missing = player.max_mp - player.mp
        if missing <= 0:
            return ItemResult(success=False, message="Mind is already full.", item_id=item.id)
        restored = min(item.value, missing)
        return ItemResult(
            success=True,
            message=f"Drank {item.name}. Restored {restored} mind.",
            item_id=item.id,
            mp_restored=restored,
        )

    return ItemResult(success=False, message=f"{item.name} cannot be used in combat.", item_id=item.id)
