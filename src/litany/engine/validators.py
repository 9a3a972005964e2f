"""Validates submitted actions against the current encounter state."""
from __future__ import annotations

from litany.content.tables import DefinitionTables
from litany.models.action import INVALID_TARGET_MESSAGE, Action, ActionKind
from litany.models.combat import CombatPhase, EnemyInstance, Inventory, PlayerCombatant


def validate_phase(phase: CombatPhase) -> tuple[bool, str]:
    if phase == CombatPhase.PLAYER_TURN:
        return True, ""
    if phase.is_terminal:
        return False, "The fight is over."
    return False, "It's not your turn."


def validate_action(
    action: Action,
    player: PlayerCombatant,
    enemy: EnemyInstance,
    inventory: Inventory,
    tables: DefinitionTables,
) -> tuple[bool, str]:
    """Cheap checks that can be made without rolling anything."""
    if action.kind == ActionKind.ATTACK:
        part = enemy.get_part(action.part_id or "")
        if part is None:
            return False, INVALID_TARGET_MESSAGE
        if part.is_severed:
            return False, f"{part.name} is already severed."
        return True, ""

    if action.kind == ActionKind.SKILL:
        skill = tables.skill(action.skill_id)
        if skill is None:
            return False, "Unknown skill"
        if skill.id not in player.unlocked_skills:
            return False, f"{skill.name} is not unlocked."
        if player.mp < skill.cost:
            return False, f"Not enough mind for {skill.name} ({player.mp}/{skill.cost})."
        return True, ""

    if action.kind == ActionKind.ITEM:
        item = tables.item(action.item_id)
        if item is None:
            return False, "Unknown item"
        if inventory.count_of(item.id) <= 0:
            return False, f"{item.name} is empty."
        return True, ""

    return False, "Unknown action"
