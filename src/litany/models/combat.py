from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusEffectType(str, Enum):
    BUFF_DAMAGE = "buff_damage"
    VULNERABILITY = "vulnerability"
    WEAKEN = "weaken"


class CombatPhase(str, Enum):
    PLAYER_TURN = "player_turn"
    PLAYER_ACTING = "player_acting"
    ENEMY_TURN = "enemy_turn"
    ENEMY_ACTING = "enemy_acting"
    VICTORY = "victory"
    DEFEAT = "defeat"

    @property
    def is_terminal(self) -> bool:
        return self in (CombatPhase.VICTORY, CombatPhase.DEFEAT)


class MenuState(str, Enum):
    MAIN = "main"
    MOVE_SELECT = "move_select"
    ATTACK_SELECT = "attack_select"
    SKILL_SELECT = "skill_select"
    ITEM_SELECT = "item_select"


class StatusEffect(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: StatusEffectType
    name: str
    duration: int
    value: int


class BodyPart(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    hp: int
    max_hp: int
    is_severed: bool = False
    is_vital: bool = False
    hit_chance_mod: int = 0
    damage_multiplier: float = 1.0


class EnemyInstance(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    instance_id: str
    template_id: str
    name: str
    tier: str = "common"
    hp: int
    max_hp: int
    attack: int
    defense: int = 0
    speed: int = 10
    xp_reward: int = 0
    gold_reward: int = 0
    parts: list[BodyPart] = Field(default_factory=list)
    status_effects: list[StatusEffect] = Field(default_factory=list)
    attack_debuff: int = 0
    damage_taken_multiplier: float = 1.0

    def get_part(self, part_id: str) -> Optional[BodyPart]:
        for part in self.parts:
            if part.id == part_id:
                return part
        return None

    def intact_parts(self) -> list[BodyPart]:
        return [p for p in self.parts if not p.is_severed]

    def intact_limbs(self) -> list[BodyPart]:
        """Non-vital parts that can still be severed."""
        return [p for p in self.parts if not p.is_severed and not p.is_vital]

    @property
    def is_execute_phase(self) -> bool:
        return not self.intact_limbs()

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0


class PlayerCombatant(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = "Wanderer"
    class_id: str = "knight"
    level: int = 1
    xp: int = 0
    gold: int = 0
    hp: int = 100
    max_hp: int = 100
    mp: int = 50
    max_mp: int = 50
    vitality: int = 10
    strength: int = 10
    dexterity: int = 10
    intelligence: int = 10
    mind: int = 10
    agility: int = 10
    attack: int = 10
    defense: int = 5
    weapon_id: Optional[str] = None
    status_effects: list[StatusEffect] = Field(default_factory=list)
    unlocked_skills: list[str] = Field(default_factory=list)

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0


class InventoryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item_id: str
    count: int = 0


class Inventory(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[InventoryItem] = Field(default_factory=list)

    def get(self, item_id: str) -> Optional[InventoryItem]:
        for entry in self.items:
            if entry.item_id == item_id:
                return entry
        return None

    def count_of(self, item_id: str) -> int:
        entry = self.get(item_id)
        return entry.count if entry else 0

    def consume(self, item_id: str, amount: int = 1) -> "Inventory":
        """Return a copy with `amount` charges of an item spent.

        Flask entries stay in the list at zero charges so they can be refilled.
        """
        updated = self.model_copy(deep=True)
        entry = updated.get(item_id)
        if entry is not None:
            entry.count = max(0, entry.count - amount)
        return updated
