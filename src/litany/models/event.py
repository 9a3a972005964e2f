from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CombatEventType(str, Enum):
    COMBAT_START = "COMBAT_START"
    PHASE_CHANGE = "PHASE_CHANGE"
    ACTION_REJECTED = "ACTION_REJECTED"
    ATTACK = "ATTACK"
    MISS = "MISS"
    SEVER = "SEVER"
    SKILL = "SKILL"
    HEAL = "HEAL"
    EFFECT_APPLIED = "EFFECT_APPLIED"
    EFFECT_EXPIRED = "EFFECT_EXPIRED"
    ITEM_USE = "ITEM_USE"
    ENEMY_ATTACK = "ENEMY_ATTACK"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"


class CombatEvent(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    event_type: CombatEventType
    round_number: int = 1
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    actor_id: Optional[str] = None
    target_id: Optional[str] = None
    description: str = ""
    mechanical_details: dict[str, Any] = Field(default_factory=dict)
