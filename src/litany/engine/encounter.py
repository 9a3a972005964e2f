"""Turn phase state machine: the single owner of one encounter's state."""
from __future__ import annotations

import logging
import random
from typing import Any, Optional

from litany.content.tables import DefinitionTables, get_tables
from litany.engine.action_parser import parse_action_id
from litany.engine.validators import validate_action, validate_phase
from litany.mechanics.combat_math import resolve_attack, resolve_enemy_attack
from litany.mechanics.enemy_factory import create_instance, new_instance_id
from litany.mechanics.items import resolve_item
from litany.mechanics.skills import resolve_skill
from litany.mechanics.status_effects import apply_effect, tick_effects
from litany.models.action import (
    ActionKind,
    AttackResult,
    CombatResult,
    EnemyAttackResult,
    ItemResult,
    SkillResult,
    TurnOutcome,
)
from litany.models.combat import CombatPhase, EnemyInstance, Inventory, PlayerCombatant
from litany.models.definitions import EnemyTemplate, SkillTarget
from litany.models.event import CombatEvent, CombatEventType

logger = logging.getLogger(__name__)


class CombatEncounter:
    """Sequences player input, resolution, the enemy's reply and the outcome.

    Phases run player_turn -> player_acting -> enemy_turn -> enemy_acting ->
    player_turn until victory or defeat. The presentation layer drives it
    with three calls:

    - submit_action(action_id): only accepted in player_turn.
    - notify_animation_complete(): releases player_acting and enemy_acting.
    - run_enemy_turn(): called after the think delay in enemy_turn.

    Calls made in the wrong phase are rejected or ignored and never change
    state. Engine results are swapped in whole; state is never half-applied.
    """

    def __init__(
        self,
        player: PlayerCombatant,
        enemy: EnemyInstance,
        inventory: Inventory | None = None,
        tables: DefinitionTables | None = None,
        rng: random.Random | None = None,
    ):
        self._tables = tables or get_tables()
        self._rng = rng
        self._player = player.model_copy(deep=True)
        self._enemy = enemy.model_copy(deep=True)
        self._inventory = inventory.model_copy(deep=True) if inventory else Inventory()
        self._phase = CombatPhase.PLAYER_TURN
        self._busy = False
        self._pending_fatal = False
        self._last_result: Optional[CombatResult] = None
        self.round_number = 1
        self.events: list[CombatEvent] = []
        self._record(
            CombatEventType.COMBAT_START,
            f"{self._player.name} faces {self._enemy.name}.",
            enemy_id=self._enemy.instance_id,
        )

    @classmethod
    def from_template(
        cls,
        player: PlayerCombatant,
        template: EnemyTemplate,
        inventory: Inventory | None = None,
        tables: DefinitionTables | None = None,
        rng: random.Random | None = None,
        instance_id: str | None = None,
    ) -> "CombatEncounter":
        enemy = create_instance(template, instance_id or new_instance_id(template.id))
        return cls(player, enemy, inventory=inventory, tables=tables, rng=rng)

    # -- Read-only views --

    @property
    def phase(self) -> CombatPhase:
        return self._phase

    @property
    def player(self) -> PlayerCombatant:
        return self._player.model_copy(deep=True)

    @property
    def enemy(self) -> EnemyInstance:
        return self._enemy.model_copy(deep=True)

    @property
    def inventory(self) -> Inventory:
        return self._inventory.model_copy(deep=True)

    @property
    def last_result(self) -> Optional[CombatResult]:
        return self._last_result

    @property
    def is_over(self) -> bool:
        return self._phase.is_terminal

    @property
    def awaiting_animation(self) -> bool:
        return self._phase in (CombatPhase.PLAYER_ACTING, CombatPhase.ENEMY_ACTING)

    def rewards(self) -> tuple[int, int]:
        """(xp, gold) earned, zero unless the encounter was won."""
        if self._phase != CombatPhase.VICTORY:
            return 0, 0
        return self._enemy.xp_reward, self._enemy.gold_reward

    # -- Player input --

    def submit_action(self, action_id: str) -> TurnOutcome:
        """Resolve and apply one player action.

        Rejections leave the phase and all state untouched; the reason is
        returned in the outcome's message so the player can be re-prompted.
        """
        if self._busy:
            return self._reject(action_id, "An action is already being resolved.")

        ok, reason = validate_phase(self._phase)
        if not ok:
            return self._reject(action_id, reason)

        action = parse_action_id(action_id)
        if action is None:
            return self._reject(action_id, f"Unknown action '{action_id}'.")

        ok, reason = validate_action(action, self._player, self._enemy, self._inventory, self._tables)
        if not ok:
            return self._reject(action_id, reason)

        self._busy = True
        try:
            if action.kind == ActionKind.ATTACK:
                result = resolve_attack(
                    self._player,
                    self._enemy,
                    action.part_id or "",
                    self._tables.attack(action.attack_id),
                    rng=self._rng,
                )
                if not result.is_valid_target:
                    return self._reject(action_id, result.message)
                self._apply_attack(result)
            elif action.kind == ActionKind.SKILL:
                result = resolve_skill(
                    action.skill_id or "", self._player, self._enemy, tables=self._tables, rng=self._rng
                )
                if not result.success:
                    return self._reject(action_id, result.message)
                self._apply_skill(result)
            else:
                result = resolve_item(action.item_id or "", self._player, self._inventory, tables=self._tables)
                if not result.success:
                    return self._reject(action_id, result.message)
                self._apply_item(result)

            self._last_result = result
            self._set_phase(CombatPhase.PLAYER_ACTING)
            return TurnOutcome(accepted=True, message=result.message, phase=self._phase, result=result)
        finally:
            self._busy = False

    # -- External signals --

    def notify_animation_complete(self) -> bool:
        """Release the current animation join point.

        Returns True if the phase advanced. Duplicate or early signals are
        no-ops.
        """
        if self._phase == CombatPhase.PLAYER_ACTING:
            if self._pending_fatal:
                self._set_phase(CombatPhase.VICTORY)
                self._record(CombatEventType.VICTORY, f"{self._enemy.name} is destroyed.")
            else:
                self._set_phase(CombatPhase.ENEMY_TURN)
            return True

        if self._phase == CombatPhase.ENEMY_ACTING:
            if self._player.is_defeated:
                self._set_phase(CombatPhase.DEFEAT)
                self._record(CombatEventType.DEFEAT, f"{self._player.name} has fallen.")
            else:
                self._end_round()
                self._set_phase(CombatPhase.PLAYER_TURN)
            return True

        logger.debug(f"Animation signal ignored in phase {self._phase.value}")
        return False

    def run_enemy_turn(self) -> EnemyAttackResult | None:
        """Let the enemy act. Only does anything in enemy_turn."""
        if self._phase != CombatPhase.ENEMY_TURN:
            logger.debug(f"Enemy turn ignored in phase {self._phase.value}")
            return None

        self._set_phase(CombatPhase.ENEMY_ACTING)
        result = resolve_enemy_attack(self._enemy, self._player)
        self._player = result.player_state
        self._last_result = result
        self._record(
            CombatEventType.ENEMY_ATTACK,
            result.message,
            actor_id=self._enemy.instance_id,
            damage=result.damage_dealt,
            player_hp=self._player.hp,
        )
        return result

    # -- Internals --

    def _apply_attack(self, result: AttackResult) -> None:
        self._enemy = result.enemy_state
        self._pending_fatal = result.is_fatal
        if not result.hit:
            self._record(CombatEventType.MISS, result.message, target_id=result.target_part_id)
            return
        self._record(
            CombatEventType.ATTACK,
            result.message,
            target_id=result.target_part_id,
            attack_id=result.attack_id,
            damage=result.damage_dealt,
            crit=result.is_crit,
            execute=result.is_execute_phase,
            enemy_hp=self._enemy.hp,
        )
        if result.part_severed:
            self._record(CombatEventType.SEVER, f"Severed {result.part_severed}.", target_id=result.target_part_id)

    def _apply_skill(self, result: SkillResult) -> None:
        player = self._player.model_copy(deep=True)
        enemy = self._enemy.model_copy(deep=True)

        player.mp = max(0, player.mp - result.cost)
        if result.heal_amount:
            before = player.hp
            player.hp = min(player.max_hp, player.hp + result.heal_amount)
            self._record(CombatEventType.HEAL, f"Restored {player.hp - before} HP.", amount=player.hp - before)

        if result.effect is not None:
            if result.effect_target == SkillTarget.SELF.value:
                player.status_effects = apply_effect(player.status_effects, result.effect)
                holder = player.name
            else:
                enemy.status_effects = apply_effect(enemy.status_effects, result.effect)
                holder = enemy.name
            self._record(
                CombatEventType.EFFECT_APPLIED,
                f"{holder} gains {result.effect.name}.",
                effect_type=result.effect.type.value,
                duration=result.effect.duration,
            )

        self._player, self._enemy = player, enemy
        self._pending_fatal = False
        self._record(CombatEventType.SKILL, result.message, skill_id=result.skill_id, cost=result.cost)

    def _apply_item(self, result: ItemResult) -> None:
        player = self._player.model_copy(deep=True)
        player.hp = min(player.max_hp, player.hp + result.hp_restored)
        player.mp = min(player.max_mp, player.mp + result.mp_restored)
        self._player = player
        self._inventory = self._inventory.consume(result.item_id)
        self._pending_fatal = False
        self._record(CombatEventType.ITEM_USE, result.message, item_id=result.item_id)

    def _end_round(self) -> None:
        """Tick every status effect once per full round."""
        player_effects, player_expired = tick_effects(self._player.status_effects)
        enemy_effects, enemy_expired = tick_effects(self._enemy.status_effects)
        self._player = self._player.model_copy(update={"status_effects": player_effects})
        self._enemy = self._enemy.model_copy(update={"status_effects": enemy_effects})
        for effect in player_expired + enemy_expired:
            self._record(CombatEventType.EFFECT_EXPIRED, f"{effect.name} wears off.", effect_id=effect.id)
        self.round_number += 1

    def _set_phase(self, phase: CombatPhase) -> None:
        previous = self._phase
        self._phase = phase
        logger.info(f"Combat phase {previous.value} -> {phase.value} (round {self.round_number})")
        self._record(
            CombatEventType.PHASE_CHANGE,
            f"{previous.value} -> {phase.value}",
            previous=previous.value,
            phase=phase.value,
        )

    def _reject(self, action_id: str, reason: str) -> TurnOutcome:
        logger.info(f"Rejected action '{action_id}' in {self._phase.value}: {reason}")
        self._record(CombatEventType.ACTION_REJECTED, reason, action_id=action_id)
        return TurnOutcome(accepted=False, message=reason, phase=self._phase)

    def _record(self, event_type: CombatEventType, description: str, **details: Any) -> None:
        actor_id = details.pop("actor_id", None)
        target_id = details.pop("target_id", None)
        self.events.append(
            CombatEvent(
                event_type=event_type,
                round_number=self.round_number,
                actor_id=actor_id,
                target_id=target_id,
                description=description,
                mechanical_details=details,
            )
        )
