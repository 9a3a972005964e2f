"""Parses the action ids the presentation layer submits.

Formats:
    "<attackId>|<partId>"   weapon attack against one body part
    "skill:<skillId>"       skill
    "item:<itemId>"         flask or consumable
"""
from __future__ import annotations

from litany.models.action import Action, ActionKind

SKILL_PREFIX = "skill:"
ITEM_PREFIX = "item:"
PART_SEPARATOR = "|"


def format_attack_id(attack_id: str, part_id: str) -> str:
    return f"{attack_id}{PART_SEPARATOR}{part_id}"


def format_skill_id(skill_id: str) -> str:
    return f"{SKILL_PREFIX}{skill_id}"


def format_item_id(item_id: str) -> str:
    return f"{ITEM_PREFIX}{item_id}"


def parse_action_id(action_id: str | None) -> Action | None:
    """Return the structured action, or None when the id is malformed."""
    if not action_id:
        return None
    raw = action_id.strip()

    if raw.lower().startswith(SKILL_PREFIX):
        skill_id = raw[len(SKILL_PREFIX):].strip()
        return Action(kind=ActionKind.SKILL, raw=raw, skill_id=skill_id) if skill_id else None

    if raw.lower().startswith(ITEM_PREFIX):
        item_id = raw[len(ITEM_PREFIX):].strip()
        return Action(kind=ActionKind.ITEM, raw=raw, item_id=item_id) if item_id else None

    if raw.count(PART_SEPARATOR) == 1:
        attack_id, part_id = (piece.strip() for piece in raw.split(PART_SEPARATOR))
        if attack_id and part_id:
            return Action(kind=ActionKind.ATTACK, raw=raw, attack_id=attack_id, part_id=part_id)

    return None
