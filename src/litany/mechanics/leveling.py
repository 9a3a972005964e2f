"""Level-up mechanics: gold buys one attribute point per level. Pure math, no I/O."""
from __future__ import annotations

from litany.models.combat import PlayerCombatant

BASE_LEVEL_COST = 100
LEVEL_COST_GROWTH = 1.1

LEVELING_ATTRIBUTES = ("vitality", "strength", "dexterity", "intelligence", "mind", "agility")

# Extra derived stats granted alongside the attribute point
HP_PER_VITALITY = 10
ATTACK_PER_STRENGTH = 2


def level_cost(level: int) -> int:
    """Gold needed to advance from the given level to the next."""
    return int(BASE_LEVEL_COST * LEVEL_COST_GROWTH ** (level - 1))


def can_level_up(player: PlayerCombatant) -> bool:
    return player.gold >= level_cost(player.level)


def level_up(player: PlayerCombatant, attribute: str) -> tuple[PlayerCombatant | None, str]:
    """Spend gold on one attribute point.

    Vitality also raises max hp (and current hp by the same amount), and
    strength also raises attack. Returns ``(None, reason)`` when the
    attribute is unknown or the player cannot afford the level.
    """
    attribute = attribute.lower()
    if attribute not in LEVELING_ATTRIBUTES:
        return None, f"Unknown attribute: {attribute}."

    cost = level_cost(player.level)
    if player.gold < cost:
        return None, f"Not enough gold. Level {player.level + 1} costs {cost}."

    update = {
        "gold": player.gold - cost,
        "level": player.level + 1,
        attribute: getattr(player, attribute) + 1,
    }
    if attribute == "vitality":
        update["max_hp"] = player.max_hp + HP_PER_VITALITY
        update["hp"] = player.hp + HP_PER_VITALITY
    elif attribute == "strength":
        update["attack"] = player.attack + ATTACK_PER_STRENGTH

    return player.model_copy(update=update), f"Reached level {player.level + 1}. {attribute.capitalize()} +1."
