"""Tests for the Player model."""

import pytest
from pydantic import ValidationError

from minidungeon.sim.core.entities import MAX_HP, Player
from minidungeon.sim.core.geometry import Position
from minidungeon.sim.core.rng import GameRNG


class TestPlayerDefaults:
    def test_starts_at_entry_with_full_health(self):
        player = Player()
        assert player.position == Position(0, 0)
        assert player.hp == MAX_HP == 10
        assert player.score == 0
        assert player.steps == 0
        assert player.level == 1


# ---------------------------------------------------------------------------
# Player -- damage / heal
# ---------------------------------------------------------------------------

class TestPlayerHealth:
    def test_take_damage(self):
        player = Player()
        lost = player.take_damage(3)
        assert lost == 3
        assert player.hp == 7

    def test_damage_clamps_at_zero(self):
        player = Player(hp=1)
        lost = player.take_damage(5)
        assert lost == 1
        assert player.hp == 0
        assert player.is_dead

    def test_negative_damage_is_noop(self):
        player = Player(hp=5)
        assert player.take_damage(-4) == 0
        assert player.hp == 5

    def test_heal_caps_at_max(self):
        player = Player(hp=8)
        gained = player.heal(4)
        assert gained == 2
        assert player.hp == MAX_HP

    def test_heal_negative_is_noop(self):
        player = Player(hp=5)
        assert player.heal(-3) == 0
        assert player.hp == 5

    def test_modify_hp_both_directions(self):
        player = Player(hp=5)
        player.modify_hp(100)
        assert player.hp == MAX_HP
        player.modify_hp(-100)
        assert player.hp == 0

    def test_hp_stays_in_range_for_random_sequences(self):
        rng = GameRNG(seed=7)
        player = Player()
        for _ in range(2000):
            amount = rng.random_below(13) - 6
            if rng.random_bool():
                player.modify_hp(amount)
            elif amount >= 0:
                player.heal(amount)
            else:
                player.take_damage(-amount)
            assert 0 <= player.hp <= MAX_HP


class TestPlayerProgress:
    def test_add_score_is_not_clamped(self):
        player = Player()
        player.add_score(2)
        player.add_score(-5)
        assert player.score == -3

    def test_increment_steps(self):
        player = Player()
        for _ in range(3):
            player.increment_steps()
        assert player.steps == 3


class TestPlayerValidation:
    @pytest.mark.parametrize("fields", [{"hp": 11}, {"hp": -1}, {"steps": -1}, {"level": 0}])
    def test_out_of_range_fields_rejected(self, fields):
        with pytest.raises(ValidationError):
            Player(**fields)

    def test_bounds_accepted(self):
        assert Player(hp=0).is_dead
        assert Player(hp=MAX_HP, steps=0, level=1).hp == MAX_HP
