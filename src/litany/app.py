"""Main application bootstrap: wires content, storage and the combat loop together."""
from __future__ import annotations

import logging
import random
import time
from pathlib import Path
from typing import Any

from litany.models.combat import CombatPhase, Inventory, MenuState, PlayerCombatant

logger = logging.getLogger(__name__)


def _load_config() -> dict[str, Any]:
    """Load config.toml from project root."""
    import tomllib

    config_path = Path(__file__).parent.parent.parent / "config.toml"
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    return {}


class CombatApp:
    """Drives encounters from the terminal.

    The app is the presentation layer: it owns the menu, the think and
    animation delays, and translates keypresses into action ids. All game
    rules live in the engine it drives.
    """

    def __init__(self, seed: int | None = None, config: dict[str, Any] | None = None):
        self.config = config if config is not None else _load_config()
        combat_cfg = self.config.get("combat", {})
        if seed is None:
            seed = combat_cfg.get("seed")
        self.seed = seed
        self.rng = random.Random(seed)
        self.think_delay = float(combat_cfg.get("enemy_think_delay", 0.6))
        self.animation_delay = float(combat_cfg.get("animation_delay", 0.4))

        # Lazy-initialized components
        self._tables = None
        self._db = None
        self._save_repo = None
        self._display = None

    # -- Component initialization (lazy) --

    @property
    def tables(self):
        if self._tables is None:
            from litany.content.tables import get_tables

            self._tables = get_tables()
        return self._tables

    @property
    def db(self):
        if self._db is None:
            from litany.storage.database import Database

            db_path = self.config.get("storage", {}).get("db_path", "saves/litany.db")
            self._db = Database(db_path)
            self._db.initialize()
        return self._db

    @property
    def save_repo(self):
        if self._save_repo is None:
            from litany.storage.repos import SaveGameRepo

            self._save_repo = SaveGameRepo(self.db)
        return self._save_repo

    @property
    def display(self):
        if self._display is None:
            from litany.cli.combat_display import CombatDisplay

            self._display = CombatDisplay()
        return self._display

    # -- Session --

    def prepare_player(self, class_id: str, save_slot: str | None = None) -> tuple[PlayerCombatant, Inventory]:
        """Load the save slot if it exists, otherwise create a fresh character.

        Raises:
            ValueError: if a new character is needed and the class is unknown.
        """
        from litany.mechanics.character_creation import create_player

        if save_slot:
            loaded = self.save_repo.load(save_slot)
            if loaded is not None:
                logger.info(f"Loaded save slot '{save_slot}'")
                return loaded
        return create_player(class_id, self.tables)

    def starting_charges(self, class_id: str) -> dict[str, int]:
        class_def = self.tables.player_class(class_id)
        if class_def is None:
            return {}
        return {item.item_id: item.count for item in class_def.starting_items}

    def run(self, class_id: str, enemy_ids: list[str], save_slot: str | None = None) -> bool:
        """Fight each enemy in order, resting at a bonfire between fights.

        Returns True if every fight was won.
        """
        from litany.mechanics.rest import apply_rewards, refill_flasks, rest

        player, inventory = self.prepare_player(class_id, save_slot)
        charges = self.starting_charges(player.class_id)

        for index, enemy_id in enumerate(enemy_ids):
            if index > 0:
                player = rest(player)
                inventory = refill_flasks(inventory, charges, self.tables)
                self.display.console.print("[dim]You rest at the bonfire. Flasks refilled.[/dim]")
                player = self.bonfire(player)

            outcome = self.fight(player, inventory, enemy_id)
            if outcome is None:
                return False
            phase, player, inventory, (xp, gold) = outcome
            if phase != CombatPhase.VICTORY:
                return False

            player = apply_rewards(player, xp, gold)
            if save_slot:
                self.save_repo.save(save_slot, player, inventory)
                logger.info(f"Saved to slot '{save_slot}'")

        self.display.show_player(player, inventory)
        return True

    def bonfire(self, player: PlayerCombatant) -> PlayerCombatant:
        """Spend gold on levels and XP on skills until the player moves on."""
        from litany.mechanics.leveling import LEVELING_ATTRIBUTES, level_cost, level_up
        from litany.mechanics.skill_tree import class_skill_tree, unlock_skill

        display = self.display
        while True:
            display.show_bonfire(player, level_cost(player.level))
            choice = display.get_input().lower()
            if choice in ("", "c", "continue"):
                return player

            if choice == "1":
                display.show_attributes(player, LEVELING_ATTRIBUTES)
                options = list(LEVELING_ATTRIBUTES)
            elif choice == "2":
                tree = class_skill_tree(player, self.tables)
                display.show_skill_tree(tree)
                options = [skill.id for skill, _ in tree]
            else:
                display.show_rejected("Invalid choice.")
                continue

            pick = display.get_input().lower()
            if pick in ("b", "back"):
                continue
            index = int(pick) - 1 if pick.isdigit() else -1
            if not 0 <= index < len(options):
                display.show_rejected("Invalid choice.")
                continue

            if choice == "1":
                updated, message = level_up(player, options[index])
            else:
                updated, message = unlock_skill(player, options[index], self.tables)
            if updated is None:
                display.show_rejected(message)
                continue
            player = updated
            logger.info(message)
            display.show_notice(message)

    def visit_bonfire(self, save_slot: str) -> bool:
        """Open the bonfire for a saved character and save the result.

        Returns False if the slot does not exist.
        """
        loaded = self.save_repo.load(save_slot)
        if loaded is None:
            self.display.show_rejected(f"No save in slot '{save_slot}'.")
            return False
        player, inventory = loaded
        player = self.bonfire(player)
        self.save_repo.save(save_slot, player, inventory)
        logger.info(f"Saved to slot '{save_slot}'")
        self.display.show_player(player, inventory)
        return True

    def fight(
        self, player: PlayerCombatant, inventory: Inventory, enemy_id: str
    ) -> tuple[CombatPhase, PlayerCombatant, Inventory, tuple[int, int]] | None:
        """Run one encounter to its end. Returns None if the player leaves."""
        from litany.engine.encounter import CombatEncounter
        from litany.engine.menu import CombatMenu

        template = self.tables.enemy(enemy_id)
        encounter = CombatEncounter.from_template(
            player, template, inventory=inventory, tables=self.tables, rng=self.rng
        )
        menu = CombatMenu()
        display = self.display
        display.show_combat_start(encounter.enemy)

        while not encounter.is_over:
            if encounter.phase == CombatPhase.PLAYER_TURN:
                action_id = self._read_action(encounter, menu)
                if action_id is None:
                    return None
                outcome = encounter.submit_action(action_id)
                if not outcome.accepted:
                    display.show_rejected(outcome.message)
                    continue
                display.show_result(outcome.result)
                time.sleep(self.animation_delay)
                encounter.notify_animation_complete()

            elif encounter.phase == CombatPhase.ENEMY_TURN:
                display.show_enemy_turn(encounter.enemy.name)
                time.sleep(self.think_delay)
                result = encounter.run_enemy_turn()
                if result is not None:
                    display.show_result(result)
                time.sleep(self.animation_delay)
                encounter.notify_animation_complete()

            else:
                encounter.notify_animation_complete()

        xp, gold = encounter.rewards()
        display.show_combat_end(encounter.phase == CombatPhase.VICTORY, xp, gold)
        return encounter.phase, encounter.player, encounter.inventory, (xp, gold)

    def _read_action(self, encounter, menu) -> str | None:
        """Walk the menu until it yields an action id. None means leave."""
        from litany.mechanics.character_creation import available_attacks, available_skills

        display = self.display
        player = encounter.player
        enemy = encounter.enemy
        moves = available_attacks(player, self.tables)
        skills = available_skills(player, self.tables)
        items = [
            (self.tables.item(entry.item_id), entry.count)
            for entry in encounter.inventory.items
            if self.tables.item(entry.item_id) is not None
        ]

        display.show_state(encounter.phase, encounter.round_number, player, enemy)
        while True:
            display.show_menu(
                menu.state, moves=moves, enemy=enemy, skills=skills, items=items, player_mp=player.mp
            )
            choice = display.get_input().lower()

            if menu.state == MenuState.MAIN:
                if choice in ("q", "quit"):
                    return None
                if choice == "1":
                    menu.open_moves()
                elif choice == "2":
                    menu.open_skills()
                elif choice == "3":
                    menu.open_items()
                continue

            if choice in ("b", "back"):
                menu.back()
                continue

            index = int(choice) - 1 if choice.isdigit() else -1
            parts = enemy.intact_parts()
            if menu.state == MenuState.MOVE_SELECT and 0 <= index < len(moves):
                menu.choose_move(moves[index].id)
            elif menu.state == MenuState.ATTACK_SELECT and 0 <= index < len(parts):
                return menu.choose_part(parts[index].id)
            elif menu.state == MenuState.SKILL_SELECT and 0 <= index < len(skills):
                return menu.choose_skill(skills[index].id)
            elif menu.state == MenuState.ITEM_SELECT and 0 <= index < len(items):
                return menu.choose_item(items[index][0].id)
            else:
                display.show_rejected("Invalid choice.")

    def list_saves(self) -> None:
        from rich.table import Table

        saves = self.save_repo.list_saves()
        if not saves:
            self.display.console.print("[dim]No saves yet.[/dim]")
            return
        table = Table(title="Saves")
        for column in ("slot", "class_id", "level", "updated_at"):
            table.add_column(column)
        for row in saves:
            table.add_row(row["slot"], row["class_id"], str(row["level"]), row["updated_at"])
        self.display.console.print(table)
