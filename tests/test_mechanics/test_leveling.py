"""Tests for src/litany/mechanics/leveling.py."""
from __future__ import annotations

from litany.mechanics.leveling import can_level_up, level_cost, level_up


class TestLevelCost:
    def test_curve(self):
        assert [level_cost(n) for n in (1, 2, 3, 4)] == [100, 110, 121, 133]

    def test_grows_every_level(self):
        costs = [level_cost(n) for n in range(1, 20)]
        assert costs == sorted(costs)
        assert len(set(costs)) == len(costs)


class TestLevelUp:
    def test_rich_player_gains_a_level(self, knight):
        rich = knight.model_copy(update={"gold": 10_000})
        raised, message = level_up(rich, "dexterity")
        assert raised is not None
        assert raised.level == 2
        assert raised.dexterity == knight.dexterity + 1
        assert raised.gold == 10_000 - 100
        assert "level 2" in message

    def test_vitality_raises_hp(self, knight):
        hurt = knight.model_copy(update={"gold": 100, "hp": 40})
        raised, _ = level_up(hurt, "vitality")
        assert raised.vitality == knight.vitality + 1
        assert raised.max_hp == knight.max_hp + 10
        assert raised.hp == 50

    def test_strength_raises_attack(self, knight):
        raised, _ = level_up(knight.model_copy(update={"gold": 100}), "strength")
        assert raised.strength == knight.strength + 1
        assert raised.attack == knight.attack + 2

    def test_other_attributes_leave_derived_stats(self, knight):
        raised, _ = level_up(knight.model_copy(update={"gold": 100}), "mind")
        assert raised.mind == knight.mind + 1
        assert raised.max_hp == knight.max_hp
        assert raised.attack == knight.attack

    def test_cost_follows_current_level(self, knight):
        veteran = knight.model_copy(update={"gold": 121, "level": 3})
        raised, _ = level_up(veteran, "agility")
        assert raised.level == 4
        assert raised.gold == 0

    def test_not_enough_gold(self, knight):
        poor = knight.model_copy(update={"gold": 99})
        assert not can_level_up(poor)
        raised, message = level_up(poor, "strength")
        assert raised is None
        assert "Not enough gold" in message
        assert poor.level == 1

    def test_unknown_attribute(self, knight):
        raised, message = level_up(knight.model_copy(update={"gold": 500}), "luck")
        assert raised is None
        assert "Unknown attribute" in message

    def test_attribute_name_case_insensitive(self, knight):
        raised, _ = level_up(knight.model_copy(update={"gold": 100}), "Agility")
        assert raised.agility == knight.agility + 1
