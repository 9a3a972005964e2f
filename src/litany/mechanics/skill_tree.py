"""Skill tree: unlocking class skills with XP. Pure functions, no I/O."""
from __future__ import annotations

from enum import Enum

from litany.content.tables import DefinitionTables, get_tables
from litany.models.combat import PlayerCombatant
from litany.models.definitions import SkillDefinition


class SkillStatus(str, Enum):
    UNLOCKED = "unlocked"
    LOCKED = "locked"
    EXPENSIVE = "expensive"
    AVAILABLE = "available"


def _belongs_to(skill: SkillDefinition, player: PlayerCombatant) -> bool:
    return skill.required_class is None or skill.required_class.lower() == player.class_id.lower()


def skill_status(player: PlayerCombatant, skill: SkillDefinition) -> SkillStatus:
    """Where a skill stands for this player.

    Locked covers both another class's skills and missing prerequisites.
    """
    if skill.id in player.unlocked_skills:
        return SkillStatus.UNLOCKED
    if not _belongs_to(skill, player):
        return SkillStatus.LOCKED
    if any(req not in player.unlocked_skills for req in skill.requires):
        return SkillStatus.LOCKED
    if player.xp < skill.unlock_cost:
        return SkillStatus.EXPENSIVE
    return SkillStatus.AVAILABLE


def class_skill_tree(
    player: PlayerCombatant, tables: DefinitionTables | None = None
) -> list[tuple[SkillDefinition, SkillStatus]]:
    """Every skill of the player's class with its status, cheapest first."""
    tables = tables or get_tables()
    skills = [s for s in tables.skills.values() if _belongs_to(s, player)]
    skills.sort(key=lambda s: (s.unlock_cost, s.id))
    return [(skill, skill_status(player, skill)) for skill in skills]


def unlock_skill(
    player: PlayerCombatant, skill_id: str, tables: DefinitionTables | None = None
) -> tuple[PlayerCombatant | None, str]:
    """Spend XP to unlock a skill. Returns ``(None, reason)`` on refusal."""
    tables = tables or get_tables()
    skill = tables.skill(skill_id)
    if skill is None:
        return None, f"Unknown skill: {skill_id}."

    status = skill_status(player, skill)
    if status == SkillStatus.UNLOCKED:
        return None, f"{skill.name} is already unlocked."
    if not _belongs_to(skill, player):
        return None, f"{skill.name} belongs to another class."
    if status == SkillStatus.LOCKED:
        missing = [r for r in skill.requires if r not in player.unlocked_skills]
        return None, f"{skill.name} requires {', '.join(missing)}."
    if status == SkillStatus.EXPENSIVE:
        return None, f"Not enough XP. {skill.name} costs {skill.unlock_cost}."

    unlocked = player.model_copy(update={
        "xp": player.xp - skill.unlock_cost,
        "unlocked_skills": [*player.unlocked_skills, skill.id],
    })
    return unlocked, f"Unlocked {skill.name}."
