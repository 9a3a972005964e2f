"""Tests for src/litany/mechanics/character_creation.py."""
from __future__ import annotations

import pytest

from litany.mechanics.character_creation import available_attacks, available_skills, create_player
from litany.models.combat import PlayerCombatant


class TestCreatePlayer:
    def test_knight(self, tables):
        player, inventory = create_player("knight", tables)
        assert player.class_id == "knight"
        assert player.hp == player.max_hp == 140
        assert player.mp == player.max_mp == 50
        # class attack 14 + rusty sword 5
        assert player.attack == 19
        assert player.defense == 12
        assert player.weapon_id == "rusty_sword"
        assert player.unlocked_skills == ["pray"]
        assert player.status_effects == []
        assert inventory.count_of("flask_crimson") == 3
        assert inventory.count_of("flask_cerulean") == 1

    def test_class_id_is_case_insensitive(self, tables):
        player, _ = create_player("MAGE", tables)
        assert player.class_id == "mage"

    def test_custom_name(self, tables):
        player, _ = create_player("assassin", tables, name="Yuria")
        assert player.name == "Yuria"

    def test_unknown_class(self, tables):
        with pytest.raises(ValueError, match="Unknown class"):
            create_player("bard", tables)


class TestAvailableMoves:
    def test_weapon_attacks(self, knight, tables):
        assert [a.id for a in available_attacks(knight, tables)] == ["slash", "heavy"]

    def test_unarmed_falls_back_to_default(self, tables):
        assert [a.id for a in available_attacks(PlayerCombatant(), tables)] == ["slash"]

    def test_skills_follow_unlocks(self, tables):
        mage, _ = create_player("mage", tables)
        assert [s.id for s in available_skills(mage, tables)] == ["flame_of_frenzy"]
        learned = mage.model_copy(update={"unlocked_skills": ["flame_of_frenzy", "ember"]})
        assert [s.id for s in available_skills(learned, tables)] == ["flame_of_frenzy", "ember"]

    def test_unknown_unlocks_are_skipped(self, tables):
        player = PlayerCombatant(unlocked_skills=["pray", "moonlight"])
        assert [s.id for s in available_skills(player, tables)] == ["pray"]
