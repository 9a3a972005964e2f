"""Tests for src/litany/engine/validators.py."""
from __future__ import annotations

from litany.engine.validators import validate_action, validate_phase
from litany.models.action import Action, ActionKind
from litany.models.combat import CombatPhase, Inventory


class TestValidatePhase:
    def test_player_turn_ok(self):
        assert validate_phase(CombatPhase.PLAYER_TURN) == (True, "")

    def test_other_phases(self):
        for phase in (CombatPhase.PLAYER_ACTING, CombatPhase.ENEMY_TURN, CombatPhase.ENEMY_ACTING):
            assert validate_phase(phase) == (False, "It's not your turn.")

    def test_terminal(self):
        assert validate_phase(CombatPhase.VICTORY) == (False, "The fight is over.")
        assert validate_phase(CombatPhase.DEFEAT) == (False, "The fight is over.")


class TestValidateAction:
    def test_attack_on_intact_part(self, knight, skeleton, tables):
        action = Action(kind=ActionKind.ATTACK, attack_id="slash", part_id="head")
        assert validate_action(action, knight, skeleton, Inventory(), tables) == (True, "")

    def test_attack_on_missing_part(self, knight, skeleton, tables):
        action = Action(kind=ActionKind.ATTACK, attack_id="slash", part_id="tail")
        assert validate_action(action, knight, skeleton, Inventory(), tables) == (False, "Invalid Target!")

    def test_attack_on_severed_part(self, knight, skeleton, tables):
        skeleton.get_part("left_arm").is_severed = True
        action = Action(kind=ActionKind.ATTACK, attack_id="slash", part_id="left_arm")
        ok, reason = validate_action(action, knight, skeleton, Inventory(), tables)
        assert not ok
        assert reason == "Left Arm is already severed."

    def test_skill_checks(self, knight, skeleton, tables):
        pray = Action(kind=ActionKind.SKILL, skill_id="pray")
        assert validate_action(pray, knight, skeleton, Inventory(), tables)[0]
        drained = knight.model_copy(update={"mp": 0})
        assert validate_action(pray, drained, skeleton, Inventory(), tables) == (
            False, "Not enough mind for Pray (0/15).",
        )

    def test_item_without_charges(self, knight, skeleton, tables):
        action = Action(kind=ActionKind.ITEM, item_id="flask_crimson")
        assert validate_action(action, knight, skeleton, Inventory(), tables) == (False, "Crimson Flask is empty.")

    def test_item_with_charges(self, knight, skeleton, knight_inventory, tables):
        action = Action(kind=ActionKind.ITEM, item_id="flask_crimson")
        assert validate_action(action, knight, skeleton, knight_inventory, tables) == (True, "")
