"""Tests for src/litany/engine/action_parser.py."""
from __future__ import annotations

import pytest

from litany.engine.action_parser import format_attack_id, format_item_id, format_skill_id, parse_action_id
from litany.models.action import ActionKind


class TestParseActionId:
    def test_attack(self):
        action = parse_action_id("heavy|left_arm")
        assert action.kind == ActionKind.ATTACK
        assert action.attack_id == "heavy"
        assert action.part_id == "left_arm"

    def test_skill(self):
        action = parse_action_id("skill:pray")
        assert action.kind == ActionKind.SKILL
        assert action.skill_id == "pray"

    def test_item(self):
        action = parse_action_id("item:flask_crimson")
        assert action.kind == ActionKind.ITEM
        assert action.item_id == "flask_crimson"

    def test_surrounding_whitespace(self):
        assert parse_action_id("  slash|head ").part_id == "head"

    @pytest.mark.parametrize("raw", [None, "", "slash", "slash|", "|head", "a|b|c", "skill:", "item:  "])
    def test_malformed(self, raw):
        assert parse_action_id(raw) is None


class TestFormat:
    def test_formats_parse_back(self):
        assert parse_action_id(format_attack_id("slash", "head")).attack_id == "slash"
        assert parse_action_id(format_skill_id("ember")).skill_id == "ember"
        assert parse_action_id(format_item_id("flask_cerulean")).item_id == "flask_cerulean"
