"""Turn-based combat UI: enemy parts, player vitals, menus and results."""
from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from litany.mechanics.skill_tree import SkillStatus
from litany.models.action import AttackResult, CombatResult, EnemyAttackResult, ItemResult, SkillResult
from litany.models.combat import CombatPhase, EnemyInstance, Inventory, MenuState, PlayerCombatant, StatusEffect
from litany.models.definitions import EnemyTemplate, ItemDefinition, SkillDefinition, WeaponAttackDefinition

console = Console()

_EFFECT_COLORS = {
    "buff_damage": "yellow",
    "vulnerability": "magenta",
    "weaken": "green",
}

_STATUS_COLORS = {
    SkillStatus.UNLOCKED: "green",
    SkillStatus.AVAILABLE: "cyan",
    SkillStatus.EXPENSIVE: "yellow",
    SkillStatus.LOCKED: "red",
}


def _bar(current: int, maximum: int, width: int = 12) -> str:
    pct = max(0.0, current / maximum) if maximum > 0 else 0.0
    filled = int(pct * width)
    if pct > 0.5:
        color = "green"
    elif pct > 0.25:
        color = "yellow"
    else:
        color = "red"
    return f"[{color}]{'█' * filled}[/{color}][dim]{'░' * (width - filled)}[/dim]"


def _effect_tags(effects: Sequence[StatusEffect]) -> str:
    tags = []
    for effect in effects:
        color = _EFFECT_COLORS.get(effect.type.value, "cyan")
        tags.append(f"[{color}]{effect.name}({effect.duration})[/{color}]")
    return " ".join(tags)


class CombatDisplay:
    def __init__(self, console_: Console | None = None) -> None:
        self.console = console_ or console

    def show_combat_start(self, enemy: EnemyInstance) -> None:
        label = {
            "boss": "[bold magenta]BOSS FIGHT[/bold magenta]",
            "elite": "[bold yellow]ELITE FOE[/bold yellow]",
        }.get(enemy.tier, "[bold red]COMBAT![/bold red]")
        self.console.print(Panel(
            f"{label}\n\n{enemy.name} blocks the way.",
            border_style="magenta" if enemy.tier == "boss" else "red", box=box.HEAVY,
        ))

    def show_state(self, phase: CombatPhase, round_number: int, player: PlayerCombatant, enemy: EnemyInstance) -> None:
        """Enemy body parts with hp bars, then the player's vitals."""
        content = Text.from_markup(f"  Round {round_number} · [bold yellow]{phase.value.replace('_', ' ')}[/bold yellow]\n\n")

        effects = _effect_tags(enemy.status_effects)
        content.append_text(Text.from_markup(
            f"  [bold]{enemy.name}[/bold] {_bar(enemy.hp, enemy.max_hp)} {enemy.hp}/{enemy.max_hp} {effects}\n"
        ))
        for part in enemy.parts:
            if part.is_severed:
                content.append_text(Text.from_markup(f"    [dim strike]{part.name}[/dim strike] [red]severed[/red]\n"))
                continue
            vital = " [red]♥[/red]" if part.is_vital else ""
            content.append_text(Text.from_markup(
                f"    {part.name:<16} {_bar(part.hp, part.max_hp, 8)} {part.hp}/{part.max_hp}{vital}\n"
            ))
        if enemy.is_execute_phase and not enemy.is_defeated:
            content.append_text(Text.from_markup("    [bold red]EXECUTE: the next blow cannot miss[/bold red]\n"))

        effects = _effect_tags(player.status_effects)
        content.append_text(Text.from_markup(
            f"\n  [bold]{player.name}[/bold]{'':4} HP {_bar(player.hp, player.max_hp)} {player.hp}/{player.max_hp}\n"
            f"  {'':>{len(player.name) + 4}} MP {_bar(player.mp, player.max_mp)} {player.mp}/{player.max_mp} {effects}\n"
        ))
        self.console.print(Panel(content, border_style="red", box=box.ROUNDED, width=64))

    def show_menu(
        self,
        state: MenuState,
        *,
        moves: Sequence[WeaponAttackDefinition] = (),
        enemy: EnemyInstance | None = None,
        skills: Sequence[SkillDefinition] = (),
        items: Sequence[tuple[ItemDefinition, int]] = (),
        player_mp: int = 0,
    ) -> None:
        if state == MenuState.MAIN:
            self.console.print(
                "  [cyan bold][1][/cyan bold] Attack   [cyan bold][2][/cyan bold] Skills   "
                "[cyan bold][3][/cyan bold] Flasks   [cyan bold][q][/cyan bold] Leave"
            )
            return

        table = Table(box=box.SIMPLE, show_header=False, padding=(0, 1))
        table.add_column("#", style="cyan bold")
        table.add_column("Choice")
        table.add_column("Detail", style="dim")

        if state == MenuState.MOVE_SELECT:
            for i, move in enumerate(moves, 1):
                detail = f"x{move.damage_mult:g} dmg, {move.accuracy_mod:+d} acc, {move.crit_mod:+d} crit"
                table.add_row(str(i), move.name, detail)
        elif state == MenuState.ATTACK_SELECT and enemy is not None:
            for i, part in enumerate(enemy.intact_parts(), 1):
                detail = f"{part.hit_chance_mod:+d} acc, x{part.damage_multiplier:g} dmg"
                if part.is_vital:
                    detail += ", vital"
                table.add_row(str(i), part.name, detail)
        elif state == MenuState.SKILL_SELECT:
            for i, skill in enumerate(skills, 1):
                style = "" if player_mp >= skill.cost else "[dim]"
                table.add_row(str(i), f"{style}{skill.name}", f"{skill.cost} MP, {skill.description}")
        elif state == MenuState.ITEM_SELECT:
            for i, (item, count) in enumerate(items, 1):
                table.add_row(str(i), item.name, f"{count} left, {item.description}")

        table.add_row("b", "Back", "")
        self.console.print(table)

    def show_result(self, result: CombatResult) -> None:
        if isinstance(result, AttackResult):
            if not result.hit:
                self.console.print(f"  [dim]{result.message}[/dim]")
            elif result.is_crit:
                self.console.print(f"  [bold yellow]{result.message}[/bold yellow]")
            else:
                self.console.print(f"  [red]{result.message}[/red]")
        elif isinstance(result, (SkillResult, ItemResult)):
            self.console.print(f"  [cyan]{result.message}[/cyan]")
        elif isinstance(result, EnemyAttackResult):
            self.console.print(f"  [bold red]{result.message}[/bold red]")

    def show_rejected(self, message: str) -> None:
        self.console.print(f"  [yellow]{message}[/yellow]")

    def show_enemy_turn(self, enemy_name: str) -> None:
        self.console.print(f"\n[bold red]--- {enemy_name}'s Turn ---[/bold red]")

    def show_combat_end(self, victory: bool, xp_gained: int = 0, gold_gained: int = 0) -> None:
        if victory:
            content = "[bold green]Victory![/bold green]\n"
            if xp_gained:
                content += f"\nXP Gained: {xp_gained}"
            if gold_gained:
                content += f"\nGold: +{gold_gained}"
            self.console.print(Panel(content, border_style="green", box=box.HEAVY))
        else:
            self.console.print(Panel(
                "[bold red]YOU DIED[/bold red]\n\nDarkness claims you...",
                border_style="red", box=box.HEAVY,
            ))

    def show_enemy_list(self, templates: Sequence[EnemyTemplate]) -> None:
        table = Table(title="Bestiary", box=box.ROUNDED)
        table.add_column("Id", style="cyan")
        table.add_column("Name")
        table.add_column("Tier")
        table.add_column("HP", justify="right")
        table.add_column("ATK", justify="right")
        table.add_column("Parts")
        for t in templates:
            parts = ", ".join(f"{p.name}{'*' if p.is_vital else ''}" for p in t.parts)
            table.add_row(t.id, t.name, t.tier.value, str(t.base_stats.max_hp), str(t.base_stats.attack), parts)
        self.console.print(table)

    def show_bonfire(self, player: PlayerCombatant, next_level_cost: int) -> None:
        self.console.print(Panel(
            f"[bold yellow]Bonfire[/bold yellow]\n\n"
            f"Level {player.level}. {player.xp} xp, {player.gold} gold. Next level costs {next_level_cost} gold.",
            border_style="yellow", box=box.ROUNDED,
        ))
        self.console.print(
            "  [cyan bold][1][/cyan bold] Level up   [cyan bold][2][/cyan bold] Skills   "
            "[cyan bold][c][/cyan bold] Continue"
        )

    def show_attributes(self, player: PlayerCombatant, attributes: Sequence[str]) -> None:
        table = Table(box=box.SIMPLE, show_header=False, padding=(0, 1))
        table.add_column("#", style="cyan bold")
        table.add_column("Attribute")
        table.add_column("Value", justify="right", style="dim")
        for i, attribute in enumerate(attributes, 1):
            table.add_row(str(i), attribute.capitalize(), str(getattr(player, attribute)))
        table.add_row("b", "Back", "")
        self.console.print(table)

    def show_skill_tree(self, tree: Sequence[tuple[SkillDefinition, SkillStatus]]) -> None:
        table = Table(box=box.SIMPLE, show_header=False, padding=(0, 1))
        table.add_column("#", style="cyan bold")
        table.add_column("Skill")
        table.add_column("Cost", justify="right")
        table.add_column("Status", style="dim")
        for i, (skill, status) in enumerate(tree, 1):
            color = _STATUS_COLORS.get(status, "white")
            table.add_row(str(i), skill.name, f"{skill.unlock_cost} xp", f"[{color}]{status.value}[/{color}]")
        table.add_row("b", "Back", "", "")
        self.console.print(table)

    def show_notice(self, message: str) -> None:
        self.console.print(f"  [green]{message}[/green]")

    def show_player(self, player: PlayerCombatant, inventory: Inventory) -> None:
        items = ", ".join(f"{i.item_id} x{i.count}" for i in inventory.items) or "nothing"
        self.console.print(
            f"  [bold]{player.name}[/bold] the {player.class_id}, level {player.level}, "
            f"{player.xp} xp, {player.gold} gold. ATK {player.attack} DEF {player.defense}. Carrying {items}."
        )

    def get_input(self, prompt: str = "> ") -> str:
        return self.console.input(f"[bold cyan]{prompt}[/bold cyan]").strip()
