"""Read-only definition tables, loaded once per process."""
from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from litany.content.loader import (
    CONTENT_DIR,
    ContentError,
    load_all_attacks,
    load_all_classes,
    load_all_enemies,
    load_all_items,
    load_all_skills,
    load_all_weapons,
)
from litany.models.definitions import (
    ClassDefinition,
    EnemyTemplate,
    ItemDefinition,
    SkillDefinition,
    WeaponAttackDefinition,
    WeaponDefinition,
)

logger = logging.getLogger(__name__)

DEFAULT_ATTACK_ID = "slash"
FALLBACK_ENEMY_ID = "skeleton"

_default_tables: Optional["DefinitionTables"] = None


class DefinitionTables:
    """Skill, weapon-attack, enemy, class, weapon and item catalogs.

    Unknown attack and enemy ids degrade to a default entry instead of
    raising; unknown skills, classes, weapons and items return None.
    """

    def __init__(
        self,
        attacks: Mapping[str, WeaponAttackDefinition],
        skills: Mapping[str, SkillDefinition],
        enemies: Mapping[str, EnemyTemplate],
        classes: Mapping[str, ClassDefinition],
        weapons: Mapping[str, WeaponDefinition],
        items: Mapping[str, ItemDefinition],
    ):
        if DEFAULT_ATTACK_ID not in attacks:
            raise ContentError(f"Default attack '{DEFAULT_ATTACK_ID}' is missing")
        if FALLBACK_ENEMY_ID not in enemies:
            raise ContentError(f"Fallback enemy '{FALLBACK_ENEMY_ID}' is missing")
        self.attacks = MappingProxyType(dict(attacks))
        self.skills = MappingProxyType(dict(skills))
        self.enemies = MappingProxyType(dict(enemies))
        self.classes = MappingProxyType(dict(classes))
        self.weapons = MappingProxyType(dict(weapons))
        self.items = MappingProxyType(dict(items))

    @classmethod
    def load(cls, content_dir: Path = CONTENT_DIR) -> "DefinitionTables":
        return cls(
            attacks=load_all_attacks(content_dir),
            skills=load_all_skills(content_dir),
            enemies=load_all_enemies(content_dir),
            classes=load_all_classes(content_dir),
            weapons=load_all_weapons(content_dir),
            items=load_all_items(content_dir),
        )

    def attack(self, attack_id: str | None) -> WeaponAttackDefinition:
        found = self.attacks.get(attack_id or "")
        if found is None:
            logger.warning(f"Unknown attack '{attack_id}', falling back to '{DEFAULT_ATTACK_ID}'")
            return self.attacks[DEFAULT_ATTACK_ID]
        return found

    def skill(self, skill_id: str | None) -> SkillDefinition | None:
        return self.skills.get(skill_id or "")

    def enemy(self, enemy_id: str | None) -> EnemyTemplate:
        found = self.enemies.get((enemy_id or "").lower())
        if found is None:
            logger.warning(f"Unknown enemy '{enemy_id}', falling back to '{FALLBACK_ENEMY_ID}'")
            return self.enemies[FALLBACK_ENEMY_ID]
        return found

    def player_class(self, class_id: str | None) -> ClassDefinition | None:
        return self.classes.get((class_id or "").lower())

    def weapon(self, weapon_id: str | None) -> WeaponDefinition | None:
        return self.weapons.get(weapon_id or "")

    def item(self, item_id: str | None) -> ItemDefinition | None:
        return self.items.get(item_id or "")


def get_tables() -> DefinitionTables:
    """Return the process-wide tables, loading them on first use."""
    global _default_tables
    if _default_tables is None:
        _default_tables = DefinitionTables.load()
    return _default_tables
