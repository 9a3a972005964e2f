"""Random rolls for combat: pure math, no I/O.

Every helper takes the random source explicitly so callers can seed it or
substitute a fixed one. Only ``random()`` and ``getrandbits()`` are used.
"""
from __future__ import annotations

import random
import uuid

_default_rng = random.Random()


def get_rng(rng: random.Random | None = None) -> random.Random:
    return rng if rng is not None else _default_rng


def roll_percent(rng: random.Random | None = None) -> float:
    """Uniform roll in [0, 100)."""
    return get_rng(rng).random() * 100


def roll_variance(rng: random.Random | None = None, spread: float = 0.1) -> float:
    """Damage variance factor in [1 - spread, 1 + spread)."""
    return 1 - spread + get_rng(rng).random() * spread * 2


def roll_bonus(upper: int, rng: random.Random | None = None) -> int:
    """Uniform integer in [0, upper). Zero when upper <= 0."""
    if upper <= 0:
        return 0
    return min(int(get_rng(rng).random() * upper), upper - 1)


def roll_effect_id(prefix: str, rng: random.Random | None = None) -> str:
    """Unique id for one application of a status effect."""
    token = uuid.UUID(int=get_rng(rng).getrandbits(128)).hex[:12]
    return f"{prefix}_{token}"
