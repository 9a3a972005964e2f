from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from litany.models.combat import CombatPhase, EnemyInstance, PlayerCombatant, StatusEffect

INVALID_TARGET_MESSAGE = "Invalid Target!"


class ActionKind(str, Enum):
    ATTACK = "attack"
    SKILL = "skill"
    ITEM = "item"


@dataclass
class Action:
    kind: ActionKind
    raw: str = ""
    attack_id: Optional[str] = None
    part_id: Optional[str] = None
    skill_id: Optional[str] = None
    item_id: Optional[str] = None


@dataclass
class AttackResult:
    hit: bool
    damage_dealt: int
    is_crit: bool
    message: str
    enemy_state: EnemyInstance
    is_fatal: bool = False
    part_severed: Optional[str] = None
    is_execute_phase: bool = False
    target_part_id: str = ""
    attack_id: str = ""
    is_valid_target: bool = True


@dataclass
class SkillResult:
    success: bool
    message: str
    skill_id: str = ""
    heal_amount: int = 0
    effect: Optional[StatusEffect] = None
    effect_target: Optional[str] = None
    cost: int = 0


@dataclass
class ItemResult:
    success: bool
    message: str
    item_id: str = ""
    hp_restored: int = 0
    mp_restored: int = 0


@dataclass
class EnemyAttackResult:
    damage_dealt: int
    message: str
    player_state: PlayerCombatant
    is_fatal: bool = False


CombatResult = Union[AttackResult, SkillResult, ItemResult, EnemyAttackResult]


@dataclass
class TurnOutcome:
    accepted: bool
    message: str
    phase: CombatPhase
    result: Optional[CombatResult] = None

