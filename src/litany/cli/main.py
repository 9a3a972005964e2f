"""Typer CLI application."""
from __future__ import annotations

from typing import List, Optional

import typer

app = typer.Typer(
    name="litany",
    help="Turn-based body-part combat from the terminal",
    no_args_is_help=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine decisions at DEBUG"),
) -> None:
    from litany.app import _load_config
    from litany.logging_setup import setup_logging

    level = "DEBUG" if verbose else _load_config().get("logging", {}).get("level", "WARNING")
    setup_logging(level)


@app.command()
def fight(
    class_id: Optional[str] = typer.Option(None, "--class", "-c", help="Class to play"),
    enemies: Optional[List[str]] = typer.Option(None, "--enemy", "-e", help="Enemy to face; repeat for a gauntlet"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the random source for a repeatable fight"),
    save: Optional[str] = typer.Option(None, "--save", "-s", help="Save slot to load from and write to"),
) -> None:
    """Fight one or more enemies."""
    from litany.app import CombatApp

    combat_app = CombatApp(seed=seed)
    game_cfg = combat_app.config.get("game", {})
    class_id = class_id or game_cfg.get("default_class", "knight")
    enemy_ids = enemies or [game_cfg.get("default_enemy", "skeleton")]

    if combat_app.tables.player_class(class_id) is None:
        known = ", ".join(sorted(combat_app.tables.classes))
        raise typer.BadParameter(f"Unknown class '{class_id}'. Choose from: {known}", param_hint="--class")

    won = combat_app.run(class_id, enemy_ids, save_slot=save)
    raise typer.Exit(code=0 if won else 1)


@app.command()
def enemies() -> None:
    """List every enemy in the bestiary."""
    from litany.app import CombatApp

    combat_app = CombatApp()
    templates = sorted(combat_app.tables.enemies.values(), key=lambda t: (t.base_stats.max_hp, t.id))
    combat_app.display.show_enemy_list(templates)


@app.command()
def classes() -> None:
    """List playable classes and their starting kit."""
    from litany.app import CombatApp
    from litany.mechanics.character_creation import create_player

    combat_app = CombatApp()
    for class_id in sorted(combat_app.tables.classes):
        player, inventory = create_player(class_id, combat_app.tables)
        combat_app.display.show_player(player, inventory)


@app.command()
def bonfire(
    save: str = typer.Option(..., "--save", "-s", help="Save slot of the character to level"),
) -> None:
    """Rest at a bonfire: buy levels with gold and unlock skills with XP."""
    from litany.app import CombatApp

    combat_app = CombatApp()
    if not combat_app.visit_bonfire(save):
        raise typer.Exit(code=1)


@app.command()
def saves() -> None:
    """List all save slots."""
    from litany.app import CombatApp

    combat_app = CombatApp()
    combat_app.list_saves()


if __name__ == "__main__":
    app()
