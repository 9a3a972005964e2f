"""Player creation from class definitions: pure functions, no I/O."""
from __future__ import annotations

import logging

from litany.content.tables import DefinitionTables, get_tables
from litany.models.combat import Inventory, InventoryItem, PlayerCombatant
from litany.models.definitions import SkillDefinition, WeaponAttackDefinition

logger = logging.getLogger(__name__)


def create_player(
    class_id: str,
    tables: DefinitionTables | None = None,
    name: str | None = None,
) -> tuple[PlayerCombatant, Inventory]:
    """Build a fresh player and starting inventory for a class.

    Attack is the class attack plus the starting weapon's bonus. Starting
    items missing from the item table are skipped with a warning.

    Raises:
        ValueError: if the class id is unknown.
    """
    tables = tables or get_tables()
    class_def = tables.player_class(class_id)
    if class_def is None:
        raise ValueError(f"Unknown class: {class_id}")

    weapon = tables.weapon(class_def.weapon_id)
    attack_bonus = weapon.attack_bonus if weapon else 0

    player = PlayerCombatant(
        name=name or class_def.name,
        class_id=class_def.id,
        hp=class_def.max_hp,
        max_hp=class_def.max_hp,
        mp=class_def.max_mp,
        max_mp=class_def.max_mp,
        vitality=class_def.vitality,
        strength=class_def.strength,
        dexterity=class_def.dexterity,
        intelligence=class_def.intelligence,
        mind=class_def.mind,
        agility=class_def.agility,
        attack=class_def.attack + attack_bonus,
        defense=class_def.defense,
        weapon_id=weapon.id if weapon else None,
        unlocked_skills=list(class_def.starting_skills),
    )

    items: list[InventoryItem] = []
    for start in class_def.starting_items:
        if tables.item(start.item_id) is None:
            logger.warning(f"Missing item definition for {start.item_id}")
            continue
        items.append(InventoryItem(item_id=start.item_id, count=start.count))

    return player, Inventory(items=items)


def available_attacks(
    player: PlayerCombatant, tables: DefinitionTables | None = None
) -> list[WeaponAttackDefinition]:
    """Moves of the equipped weapon, or the default attack when unarmed."""
    tables = tables or get_tables()
    weapon = tables.weapon(player.weapon_id)
    if weapon is None or not weapon.attacks:
        return [tables.attack(None)]
    return [tables.attack(attack_id) for attack_id in weapon.attacks]


def available_skills(
    player: PlayerCombatant, tables: DefinitionTables | None = None
) -> list[SkillDefinition]:
    tables = tables or get_tables()
    skills = []
    for skill_id in player.unlocked_skills:
        skill = tables.skill(skill_id)
        if skill is not None:
            skills.append(skill)
    return skills
