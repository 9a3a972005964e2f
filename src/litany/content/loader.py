from __future__ import annotations
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from litany.models.definitions import (
    ClassDefinition,
    EnemyTemplate,
    ItemDefinition,
    SkillDefinition,
    WeaponAttackDefinition,
    WeaponDefinition,
)

logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).parent


class ContentError(ValueError):
    """A content table is malformed or breaks a structural rule."""


def load_toml(filepath: Path) -> dict[str, Any]:
    with open(filepath, "rb") as f:
        return tomllib.load(f)


def _load_entries(category: str, array_key: str | None, content_dir: Path) -> list[tuple[Path, dict]]:
    entries: list[tuple[Path, dict]] = []
    for f in sorted((content_dir / category).glob("*.toml")):
        data = load_toml(f)
        if array_key is None:
            entries.append((f, data))
        else:
            entries.extend((f, entry) for entry in data.get(array_key, []))
    return entries


def _build(model: type, category: str, array_key: str | None, content_dir: Path) -> dict:
    built: dict[str, Any] = {}
    for path, raw in _load_entries(category, array_key, content_dir):
        try:
            definition = model.model_validate(raw)
        except ValidationError as e:
            raise ContentError(f"{path.name}: invalid {category} entry: {e}") from e
        if definition.id in built:
            raise ContentError(f"{path.name}: duplicate {category} id '{definition.id}'")
        built[definition.id] = definition
    logger.debug(f"Loaded {len(built)} {category} from {content_dir / category}")
    return built


def validate_enemy_template(template: EnemyTemplate) -> None:
    """Reject templates the combat engine cannot fight.

    Every template needs at least one body part, at least one vital part,
    unique part ids and positive hit points.
    """
    if template.base_stats.max_hp <= 0:
        raise ContentError(f"Enemy '{template.id}' has non-positive max_hp")
    if not template.parts:
        raise ContentError(f"Enemy '{template.id}' has no body parts")
    if not any(p.is_vital for p in template.parts):
        raise ContentError(f"Enemy '{template.id}' has no vital body part")
    seen: set[str] = set()
    for part in template.parts:
        if part.id in seen:
            raise ContentError(f"Enemy '{template.id}' has duplicate part id '{part.id}'")
        if part.max_hp <= 0:
            raise ContentError(f"Enemy '{template.id}' part '{part.id}' has non-positive max_hp")
        seen.add(part.id)


def load_all_attacks(content_dir: Path = CONTENT_DIR) -> dict[str, WeaponAttackDefinition]:
    return _build(WeaponAttackDefinition, "attacks", "attacks", content_dir)


def load_all_skills(content_dir: Path = CONTENT_DIR) -> dict[str, SkillDefinition]:
    return _build(SkillDefinition, "skills", "skills", content_dir)


def load_all_weapons(content_dir: Path = CONTENT_DIR) -> dict[str, WeaponDefinition]:
    return _build(WeaponDefinition, "weapons", "weapons", content_dir)


def load_all_items(content_dir: Path = CONTENT_DIR) -> dict[str, ItemDefinition]:
    return _build(ItemDefinition, "items", "items", content_dir)


def load_all_classes(content_dir: Path = CONTENT_DIR) -> dict[str, ClassDefinition]:
    return _build(ClassDefinition, "classes", None, content_dir)


def load_all_enemies(content_dir: Path = CONTENT_DIR) -> dict[str, EnemyTemplate]:
    enemies = _build(EnemyTemplate, "enemies", None, content_dir)
    for template in enemies.values():
        validate_enemy_template(template)
    return enemies
