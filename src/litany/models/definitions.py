"""Immutable catalog entries loaded from the content tables."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from litany.models.combat import StatusEffectType


class DamageType(str, Enum):
    PHYSICAL = "physical"
    MAGIC = "magic"


class SkillTarget(str, Enum):
    SELF = "self"
    ENEMY = "enemy"


class EnemyTier(str, Enum):
    COMMON = "common"
    ELITE = "elite"
    BOSS = "boss"


class ItemKind(str, Enum):
    FLASK = "flask"
    CONSUMABLE = "consumable"
    KEY = "key"


class ItemEffectType(str, Enum):
    HEAL = "heal"
    RESTORE_MIND = "restore_mind"


class WeaponAttackDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    damage_type: DamageType = DamageType.PHYSICAL
    damage_mult: float = 1.0
    accuracy_mod: int = 0
    crit_mod: int = 0


class EffectTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: StatusEffectType
    name: str
    duration: int
    value: int


class SkillDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    required_class: Optional[str] = None
    cost: int = 0
    target: SkillTarget = SkillTarget.SELF
    heal_base: int = 0
    heal_roll: int = 0
    heal_attribute: Optional[str] = None
    heal_divisor: int = 1
    effect: Optional[EffectTemplate] = None
    unlock_cost: int = 0
    requires: tuple[str, ...] = ()

    @property
    def heals(self) -> bool:
        return self.heal_base > 0 or self.heal_roll > 0 or self.heal_attribute is not None


class BodyPartTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    max_hp: int
    is_vital: bool = False
    hit_chance_mod: int = 0
    damage_multiplier: float = 1.0


class EnemyBaseStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_hp: int
    attack: int
    defense: int = 0
    speed: int = 10


class EnemyTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    tier: EnemyTier = EnemyTier.COMMON
    base_stats: EnemyBaseStats
    parts: tuple[BodyPartTemplate, ...] = ()
    xp_reward: int = 0
    gold_reward: int = 0


class StartingItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_id: str
    count: int = 1


class ClassDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    tagline: str = ""
    description: str = ""
    vitality: int = 10
    strength: int = 10
    dexterity: int = 10
    intelligence: int = 10
    mind: int = 10
    agility: int = 10
    max_hp: int = 100
    max_mp: int = 50
    attack: int = 10
    defense: int = 5
    weapon_id: Optional[str] = None
    starting_skills: tuple[str, ...] = ()
    starting_items: tuple[StartingItem, ...] = Field(default=())


class WeaponDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    attack_bonus: int = 0
    attacks: tuple[str, ...] = ()


class ItemDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    kind: ItemKind = ItemKind.CONSUMABLE
    effect_type: Optional[ItemEffectType] = None
    value: int = 0
