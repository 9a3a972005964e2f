"""Skill resolution: computes heals and status effects without applying them."""
from __future__ import annotations

import logging
import random

from litany.content.tables import DefinitionTables, get_tables
from litany.mechanics.dice import roll_bonus, roll_effect_id
from litany.models.action import SkillResult
from litany.models.combat import EnemyInstance, PlayerCombatant, StatusEffect
from litany.models.definitions import SkillDefinition, SkillTarget

logger = logging.getLogger(__name__)


def can_afford(player: PlayerCombatant, skill: SkillDefinition) -> bool:
    return player.mp >= skill.cost


def heal_amount(skill: SkillDefinition, player: PlayerCombatant, rng: random.Random | None = None) -> int:
    """Flat heal, plus a uniform bonus roll, plus the skill's attribute scaling."""
    if not skill.heals:
        return 0
    amount = skill.heal_base + roll_bonus(skill.heal_roll, rng)
    if skill.heal_attribute:
        attribute = getattr(player, skill.heal_attribute, 0)
        amount += attribute // max(skill.heal_divisor, 1)
    return amount


def resolve_skill(
    skill_id: str,
    player: PlayerCombatant,
    enemy: EnemyInstance | None = None,
    tables: DefinitionTables | None = None,
    rng: random.Random | None = None,
) -> SkillResult:
    """Work out what a skill would do.

    Returns the heal amount, the new status effect and its target, and the
    mana cost. Applying them (hp, mp, effect lists) is the caller's job.
    """
    tables = tables or get_tables()
    skill = tables.skill(skill_id)
    if skill is None:
        return SkillResult(success=False, message="Unknown skill", skill_id=skill_id)

    if skill.id not in player.unlocked_skills:
        return SkillResult(success=False, message=f"{skill.name} is not unlocked.", skill_id=skill.id)

    if not can_afford(player, skill):
        logger.debug(f"{skill.id}: mp {player.mp} < cost {skill.cost}")
        return SkillResult(
            success=False,
            message=f"Not enough mind for {skill.name} ({player.mp}/{skill.cost}).",
            skill_id=skill.id,
        )

    healed = heal_amount(skill, player, rng)

    effect = None
    if skill.effect is not None:
        template = skill.effect
        effect = StatusEffect(
            id=roll_effect_id(skill.id, rng),
            type=template.type,
            name=template.name,
            duration=template.duration,
            value=template.value,
        )

    parts = [f"Used {skill.name}!"]
    if healed:
        parts.append(f"Restored {healed} HP.")
    if effect is not None:
        if skill.target == SkillTarget.SELF:
            holder = "You gain"
        else:
            holder = f"{enemy.name if enemy else 'The enemy'} suffers"
        parts.append(f"{holder} {effect.name} for {effect.duration} turns.")

    return SkillResult(
        success=True,
        message=" ".join(parts),
        skill_id=skill.id,
        heal_amount=healed,
        effect=effect,
        effect_target=skill.target.value if effect is not None else None,
        cost=skill.cost,
    )
