"""Enemy instance factory: builds one mutable combat entity per encounter."""
from __future__ import annotations

import uuid

from litany.models.combat import BodyPart, EnemyInstance
from litany.models.definitions import EnemyTemplate


def new_instance_id(template_id: str) -> str:
    return f"{template_id}-{uuid.uuid4().hex[:8]}"


def create_instance(template: EnemyTemplate, instance_id: str) -> EnemyInstance:
    """Create a fresh enemy for one encounter.

    Every body part is a new object at full hp, so damage to this instance
    never reaches the template or any sibling instance.
    """
    parts = [
        BodyPart(
            id=p.id,
            name=p.name,
            hp=p.max_hp,
            max_hp=p.max_hp,
            is_severed=False,
            is_vital=p.is_vital,
            hit_chance_mod=p.hit_chance_mod,
            damage_multiplier=p.damage_multiplier,
        )
        for p in template.parts
    ]
    stats = template.base_stats
    return EnemyInstance(
        instance_id=instance_id,
        template_id=template.id,
        name=template.name,
        tier=template.tier.value,
        hp=stats.max_hp,
        max_hp=stats.max_hp,
        attack=stats.attack,
        defense=stats.defense,
        speed=stats.speed,
        xp_reward=template.xp_reward,
        gold_reward=template.gold_reward,
        parts=parts,
        status_effects=[],
        attack_debuff=0,
        damage_taken_multiplier=1.0,
    )
