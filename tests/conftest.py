"""Shared fixtures for the litany test suite."""
from __future__ import annotations

import random

import pytest

from litany.content.tables import DefinitionTables
from litany.mechanics.character_creation import create_player
from litany.mechanics.enemy_factory import create_instance
from litany.models.combat import BodyPart, EnemyInstance, Inventory, PlayerCombatant
from litany.models.definitions import EnemyTemplate, WeaponAttackDefinition


class FixedRng(random.Random):
    """Random source that replays the given values from ``random()``.

    The last value repeats once the sequence runs out. ``getrandbits`` is
    left to the seeded base class.
    """

    def __init__(self, *values: float):
        super().__init__(0)
        self._values = list(values) or [0.0]
        self._index = 0

    def random(self) -> float:
        value = self._values[min(self._index, len(self._values) - 1)]
        self._index += 1
        return value


# 0.6 -> hit roll 60, variance x1.02, crit roll 60: hits most parts, never crits.
HIT_NO_CRIT = 0.6
# 0.99 -> roll 99: misses every normal threshold.
ALWAYS_MISS = 0.99


@pytest.fixture(scope="session")
def tables() -> DefinitionTables:
    return DefinitionTables.load()


@pytest.fixture
def knight(tables) -> PlayerCombatant:
    player, _ = create_player("knight", tables)
    return player


@pytest.fixture
def knight_inventory(tables) -> Inventory:
    _, inventory = create_player("knight", tables)
    return inventory


@pytest.fixture
def skeleton_template(tables) -> EnemyTemplate:
    return tables.enemy("skeleton")


@pytest.fixture
def skeleton(skeleton_template) -> EnemyInstance:
    return create_instance(skeleton_template, "skeleton-test")


@pytest.fixture
def slash(tables) -> WeaponAttackDefinition:
    return tables.attack("slash")


@pytest.fixture
def plain_player() -> PlayerCombatant:
    return PlayerCombatant(name="Tester", attack=12, dexterity=10, defense=5)


def make_enemy(*parts: BodyPart, hp: int = 50, attack: int = 10) -> EnemyInstance:
    return EnemyInstance(
        instance_id="dummy-1",
        template_id="dummy",
        name="Dummy",
        hp=hp,
        max_hp=hp,
        attack=attack,
        parts=list(parts),
    )


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def in_memory_db(tmp_path):
    from litany.storage.database import Database

    db = Database(str(tmp_path / "test.db"))
    db.initialize()
    yield db
    db.close()
