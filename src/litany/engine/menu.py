"""Combat menu navigation inside the player's turn.

The menu only collects the pieces of one action id; it never touches the
combat phase. Emitting an action id resets it to the main menu.
"""
from __future__ import annotations

from litany.engine.action_parser import format_attack_id, format_item_id, format_skill_id
from litany.models.combat import MenuState

_PARENT = {
    MenuState.MOVE_SELECT: MenuState.MAIN,
    MenuState.ATTACK_SELECT: MenuState.MOVE_SELECT,
    MenuState.SKILL_SELECT: MenuState.MAIN,
    MenuState.ITEM_SELECT: MenuState.MAIN,
}


class CombatMenu:
    def __init__(self) -> None:
        self.state = MenuState.MAIN
        self.pending_attack_id: str | None = None

    def reset(self) -> None:
        self.state = MenuState.MAIN
        self.pending_attack_id = None

    def open_moves(self) -> None:
        if self.state == MenuState.MAIN:
            self.state = MenuState.MOVE_SELECT

    def open_skills(self) -> None:
        if self.state == MenuState.MAIN:
            self.state = MenuState.SKILL_SELECT

    def open_items(self) -> None:
        if self.state == MenuState.MAIN:
            self.state = MenuState.ITEM_SELECT

    def choose_move(self, attack_id: str) -> None:
        if self.state == MenuState.MOVE_SELECT:
            self.pending_attack_id = attack_id
            self.state = MenuState.ATTACK_SELECT

    def choose_part(self, part_id: str) -> str | None:
        """Finish an attack. Returns the action id, or None if no move is pending."""
        if self.state != MenuState.ATTACK_SELECT or not self.pending_attack_id:
            return None
        action_id = format_attack_id(self.pending_attack_id, part_id)
        self.reset()
        return action_id

    def choose_skill(self, skill_id: str) -> str | None:
        if self.state != MenuState.SKILL_SELECT:
            return None
        self.reset()
        return format_skill_id(skill_id)

    def choose_item(self, item_id: str) -> str | None:
        if self.state != MenuState.ITEM_SELECT:
            return None
        self.reset()
        return format_item_id(item_id)

    def back(self) -> None:
        if self.state == MenuState.ATTACK_SELECT:
            self.pending_attack_id = None
        self.state = _PARENT.get(self.state, MenuState.MAIN)
