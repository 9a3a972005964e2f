"""Tests for src/litany/mechanics/rest.py."""
from __future__ import annotations

from litany.mechanics.rest import apply_rewards, refill_flasks, rest
from litany.models.combat import Inventory, InventoryItem, StatusEffect, StatusEffectType


class TestRest:
    def test_restores_and_clears(self, knight):
        worn = knight.model_copy(update={
            "hp": 3,
            "mp": 0,
            "status_effects": [StatusEffect(id="x", type=StatusEffectType.BUFF_DAMAGE, name="x", duration=2, value=10)],
        })
        rested = rest(worn)
        assert rested.hp == rested.max_hp
        assert rested.mp == rested.max_mp
        assert rested.status_effects == []
        assert worn.hp == 3

    def test_rewards_accumulate(self, knight):
        rewarded = apply_rewards(apply_rewards(knight, 50, 20), 30, 5)
        assert rewarded.xp == 80
        assert rewarded.gold == 25
        assert knight.xp == 0


class TestRefillFlasks:
    def test_refills_flasks_only(self, tables):
        inventory = Inventory(items=[
            InventoryItem(item_id="flask_crimson", count=0),
            InventoryItem(item_id="silver_key", count=1),
        ])
        refilled = refill_flasks(inventory, {"flask_crimson": 3, "silver_key": 5}, tables)
        assert refilled.count_of("flask_crimson") == 3
        assert refilled.count_of("silver_key") == 1
        assert inventory.count_of("flask_crimson") == 0

    def test_never_lowers_count(self, tables):
        inventory = Inventory(items=[InventoryItem(item_id="flask_crimson", count=5)])
        assert refill_flasks(inventory, {"flask_crimson": 3}, tables).count_of("flask_crimson") == 5
