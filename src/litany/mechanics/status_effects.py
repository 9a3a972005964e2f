"""Timed status effects: pure list operations, no I/O.

One active effect per type: applying an effect replaces any effect of the
same type instead of stacking with it.
"""
from __future__ import annotations

from typing import Sequence

from litany.models.combat import StatusEffect, StatusEffectType


def find_effect(effects: Sequence[StatusEffect], effect_type: StatusEffectType) -> StatusEffect | None:
    for effect in effects:
        if effect.type == effect_type and effect.duration > 0:
            return effect
    return None


def effect_multiplier(effects: Sequence[StatusEffect], effect_type: StatusEffectType) -> float:
    """Percentage effect as a damage factor: value 10 -> 1.1."""
    effect = find_effect(effects, effect_type)
    if effect is None:
        return 1.0
    return 1 + effect.value / 100


def apply_effect(effects: Sequence[StatusEffect], effect: StatusEffect) -> list[StatusEffect]:
    """Return a new list with `effect` replacing any effect of its type."""
    kept = [e.model_copy() for e in effects if e.type != effect.type]
    kept.append(effect.model_copy())
    return kept


def tick_effects(effects: Sequence[StatusEffect]) -> tuple[list[StatusEffect], list[StatusEffect]]:
    """Advance effects by one round.

    Returns (remaining, expired). Durations drop by one; anything at or
    below zero afterwards is expired.
    """
    remaining: list[StatusEffect] = []
    expired: list[StatusEffect] = []
    for effect in effects:
        ticked = effect.model_copy(update={"duration": effect.duration - 1})
        if ticked.duration <= 0:
            expired.append(ticked)
        else:
            remaining.append(ticked)
    return remaining, expired
