"""Combat math: pure functions, no I/O.

Nothing here mutates its arguments: every resolver works on a deep copy and
hands the new state back inside its result.
"""
from __future__ import annotations

import logging
import random

from litany.mechanics.dice import roll_percent, roll_variance
from litany.mechanics.status_effects import effect_multiplier, find_effect
from litany.models.action import INVALID_TARGET_MESSAGE, AttackResult, EnemyAttackResult
from litany.models.combat import BodyPart, EnemyInstance, PlayerCombatant, StatusEffectType
from litany.models.definitions import DamageType, WeaponAttackDefinition

logger = logging.getLogger(__name__)

BASE_ACCURACY = 90
EXECUTE_THRESHOLD = 100
BASE_CRIT_CHANCE = 5
CRIT_MULTIPLIER = 2
SEVER_ATTACK_DEBUFF = 2
SEVER_DAMAGE_TAKEN_BONUS = 0.2


def hit_threshold(part: BodyPart, attack: WeaponAttackDefinition, execute: bool = False) -> int:
    """Percent needed to hit. A roll in [0, 100) below this value hits."""
    if execute:
        return EXECUTE_THRESHOLD
    return BASE_ACCURACY + part.hit_chance_mod + attack.accuracy_mod


def crit_chance(player: PlayerCombatant, attack: WeaponAttackDefinition) -> float:
    return BASE_CRIT_CHANCE + attack.crit_mod + player.dexterity / 2


def base_damage(player: PlayerCombatant, attack: WeaponAttackDefinition) -> float:
    """Unrolled damage: attack stat for physical moves, 2x intelligence for magic."""
    if attack.damage_type == DamageType.MAGIC:
        stat = player.intelligence * 2
    else:
        stat = player.attack
    return stat * attack.damage_mult


def apply_damage_modifiers(
    damage: int,
    player: PlayerCombatant,
    enemy: EnemyInstance,
    part: BodyPart,
) -> int:
    """Run the multiplicative passes in their fixed order.

    Player damage buff, enemy vulnerability, accumulated damage-taken
    multiplier, then the part's own multiplier. Truncates after every pass.
    """
    damage = int(damage * effect_multiplier(player.status_effects, StatusEffectType.BUFF_DAMAGE))
    damage = int(damage * effect_multiplier(enemy.status_effects, StatusEffectType.VULNERABILITY))
    damage = int(damage * enemy.damage_taken_multiplier)
    damage = int(damage * part.damage_multiplier)
    return damage


def resolve_attack(
    player: PlayerCombatant,
    enemy: EnemyInstance,
    target_part_id: str,
    attack: WeaponAttackDefinition,
    rng: random.Random | None = None,
) -> AttackResult:
    """Resolve one player attack against one body part.

    Rolls are drawn in a fixed order (hit, variance, crit) so a seeded or
    fixed random source always yields the same result.
    """
    next_enemy = enemy.model_copy(deep=True)
    part = next_enemy.get_part(target_part_id)

    if part is None or part.is_severed:
        return AttackResult(
            hit=False,
            damage_dealt=0,
            is_crit=False,
            message=INVALID_TARGET_MESSAGE,
            enemy_state=next_enemy,
            is_fatal=False,
            target_part_id=target_part_id,
            attack_id=attack.id,
            is_valid_target=False,
        )

    execute = next_enemy.is_execute_phase
    threshold = hit_threshold(part, attack, execute)
    hit_roll = roll_percent(rng)

    if hit_roll >= threshold:
        logger.debug(f"{attack.id} -> {part.id}: miss (roll {hit_roll:.1f} vs {threshold})")
        return AttackResult(
            hit=False,
            damage_dealt=0,
            is_crit=False,
            message=f"Missed {part.name}!",
            enemy_state=next_enemy,
            is_fatal=False,
            is_execute_phase=execute,
            target_part_id=part.id,
            attack_id=attack.id,
        )

    raw = int(int(base_damage(player, attack)) * roll_variance(rng))
    damage = apply_damage_modifiers(raw, player, next_enemy, part)

    is_crit = execute or roll_percent(rng) < crit_chance(player, attack)
    if is_crit:
        damage = int(damage * CRIT_MULTIPLIER)

    part.hp = max(0, part.hp - damage)
    next_enemy.hp = max(0, next_enemy.hp - damage)

    part_severed = None
    if part.hp == 0 and not part.is_severed:
        part.is_severed = True
        part_severed = part.name
        if part.is_vital:
            next_enemy.hp = 0
        else:
            next_enemy.attack_debuff += SEVER_ATTACK_DEBUFF
            next_enemy.damage_taken_multiplier = round(
                next_enemy.damage_taken_multiplier + SEVER_DAMAGE_TAKEN_BONUS, 2
            )

    is_fatal = next_enemy.hp <= 0
    logger.debug(
        f"{attack.id} -> {part.id}: raw {raw}, final {damage}, crit={is_crit}, "
        f"execute={execute}, severed={part_severed}, enemy hp {next_enemy.hp}"
    )

    if is_crit:
        message = f"CRITICAL! {part.name} took {damage}!"
    else:
        message = f"{attack.name} hit {part.name} for {damage}!"
    if part_severed:
        message += f" Severed {part_severed}!"
    if is_fatal:
        message += " Enemy Defeated!"

    return AttackResult(
        hit=True,
        damage_dealt=damage,
        is_crit=is_crit,
        message=message,
        enemy_state=next_enemy,
        is_fatal=is_fatal,
        part_severed=part_severed,
        is_execute_phase=execute,
        target_part_id=part.id,
        attack_id=attack.id,
    )


def enemy_attack_power(enemy: EnemyInstance) -> int:
    """Enemy attack after severance debuffs and any active weaken effect."""
    power = max(0, enemy.attack - enemy.attack_debuff)
    weaken = find_effect(enemy.status_effects, StatusEffectType.WEAKEN)
    if weaken is not None:
        power = int(power * max(0.0, 1 - weaken.value / 100))
    return power


def resolve_enemy_attack(enemy: EnemyInstance, player: PlayerCombatant) -> EnemyAttackResult:
    """The enemy's single fixed behaviour: a basic attack on the player."""
    next_player = player.model_copy(deep=True)
    damage = max(0, enemy_attack_power(enemy) - player.defense)
    next_player.hp = max(0, next_player.hp - damage)
    is_fatal = next_player.hp <= 0

    if damage > 0:
        message = f"{enemy.name} strikes you for {damage}!"
    else:
        message = f"{enemy.name}'s blow glances off your guard."
    if is_fatal:
        message += " You have fallen."

    return EnemyAttackResult(
        damage_dealt=damage,
        message=message,
        player_state=next_player,
        is_fatal=is_fatal,
    )
