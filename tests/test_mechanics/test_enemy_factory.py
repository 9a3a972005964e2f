"""Tests for src/litany/mechanics/enemy_factory.py."""
from __future__ import annotations

from litany.mechanics.enemy_factory import create_instance, new_instance_id


class TestCreateInstance:
    def test_full_health(self, skeleton_template):
        enemy = create_instance(skeleton_template, "skel-1")
        assert enemy.instance_id == "skel-1"
        assert enemy.template_id == "skeleton"
        assert enemy.hp == enemy.max_hp == 50
        assert enemy.attack == 18
        assert enemy.tier == "common"
        assert all(p.hp == p.max_hp and not p.is_severed for p in enemy.parts)

    def test_fresh_modifiers(self, skeleton_template):
        enemy = create_instance(skeleton_template, "skel-1")
        assert enemy.status_effects == []
        assert enemy.attack_debuff == 0
        assert enemy.damage_taken_multiplier == 1.0

    def test_carries_rewards(self, skeleton_template):
        enemy = create_instance(skeleton_template, "skel-1")
        assert (enemy.xp_reward, enemy.gold_reward) == (50, 20)

    def test_parts_copy_template(self, skeleton_template):
        enemy = create_instance(skeleton_template, "skel-1")
        head = enemy.get_part("head")
        assert head.is_vital
        assert head.hit_chance_mod == -15
        assert head.damage_multiplier == 1.5
        assert [p.id for p in enemy.parts] == [p.id for p in skeleton_template.parts]

    def test_instances_do_not_share_parts(self, skeleton_template):
        first = create_instance(skeleton_template, "a")
        second = create_instance(skeleton_template, "b")
        first.get_part("left_arm").hp = 0
        first.get_part("left_arm").is_severed = True
        assert second.get_part("left_arm").hp == 14
        assert not second.get_part("left_arm").is_severed
        assert skeleton_template.parts[1].max_hp == 14

    def test_not_in_execute_phase_at_start(self, skeleton_template):
        assert not create_instance(skeleton_template, "a").is_execute_phase


class TestInstanceId:
    def test_format(self):
        instance_id = new_instance_id("ghoul")
        assert instance_id.startswith("ghoul-")
        assert len(instance_id) == len("ghoul-") + 8

    def test_unique(self):
        assert new_instance_id("ghoul") != new_instance_id("ghoul")
