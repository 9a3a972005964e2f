"""Tests for src/litany/content/tables.py."""
from __future__ import annotations

import pytest

from litany.content.loader import ContentError
from litany.content.tables import DEFAULT_ATTACK_ID, FALLBACK_ENEMY_ID, DefinitionTables, get_tables


class TestLookups:
    def test_known_attack(self, tables):
        assert tables.attack("heavy").damage_mult == 1.5

    def test_unknown_attack_falls_back(self, tables, caplog):
        with caplog.at_level("WARNING"):
            attack = tables.attack("fireblast")
        assert attack.id == DEFAULT_ATTACK_ID
        assert "fireblast" in caplog.text

    def test_missing_attack_id_falls_back(self, tables):
        assert tables.attack(None).id == DEFAULT_ATTACK_ID

    def test_enemy_lookup_is_case_insensitive(self, tables):
        assert tables.enemy("Ghoul").id == "ghoul"

    def test_unknown_enemy_falls_back(self, tables):
        assert tables.enemy("dragon").id == FALLBACK_ENEMY_ID

    def test_unknown_entries_are_none(self, tables):
        assert tables.skill("moonlight") is None
        assert tables.player_class("bard") is None
        assert tables.weapon("halberd") is None
        assert tables.item("elixir") is None

    def test_tables_are_read_only(self, tables):
        with pytest.raises(TypeError):
            tables.attacks["poke"] = tables.attack("slash")


class TestConstruction:
    def test_default_attack_required(self, tables):
        with pytest.raises(ContentError, match="Default attack"):
            DefinitionTables(
                attacks={},
                skills=tables.skills,
                enemies=tables.enemies,
                classes=tables.classes,
                weapons=tables.weapons,
                items=tables.items,
            )

    def test_fallback_enemy_required(self, tables):
        with pytest.raises(ContentError, match="Fallback enemy"):
            DefinitionTables(
                attacks=tables.attacks,
                skills=tables.skills,
                enemies={},
                classes=tables.classes,
                weapons=tables.weapons,
                items=tables.items,
            )

    def test_shared_instance(self):
        assert get_tables() is get_tables()
