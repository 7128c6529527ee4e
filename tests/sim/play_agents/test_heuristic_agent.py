"""Tests for HeuristicAgent -- shortest-path play agent."""

from __future__ import annotations

from minidungeon.sim.core.cells import Cell, CellType
from minidungeon.sim.core.geometry import Direction, Position
from minidungeon.sim.engine import replace_cell
from minidungeon.sim.play_agents.heuristic_agent import HeuristicAgent
from minidungeon.sim.play_agents.random_agent import RandomAgent
from minidungeon.sim.runner import BatchRunner


# ======================================================================
# Path choice
# ======================================================================


class TestPathChoice:
    def test_heads_for_ladder(self, cleared_session):
        assert HeuristicAgent().choose_direction(cleared_session) == Direction.DOWN

    def test_avoids_trap(self, cleared_session):
        replace_cell(cleared_session, Position(1, 0), Cell.of(CellType.TRAP))
        assert HeuristicAgent().choose_direction(cleared_session) == Direction.RIGHT

    def test_avoids_melee_enemy(self, cleared_session):
        replace_cell(cleared_session, Position(1, 0), Cell.of(CellType.MELEE_ENEMY))
        assert HeuristicAgent().choose_direction(cleared_session) == Direction.RIGHT

    def test_walks_through_hazard_when_no_safe_path(self, cleared_session):
        replace_cell(cleared_session, Position(1, 0), Cell.of(CellType.TRAP))
        replace_cell(cleared_session, Position(0, 1), Cell.of(CellType.TRAP))
        assert HeuristicAgent().choose_direction(cleared_session) == Direction.DOWN

    def test_detours_for_potion_when_hurt(self, cleared_session):
        replace_cell(cleared_session, Position(0, 3), Cell.of(CellType.HEALTH_POTION))
        cleared_session.player.hp = 3
        assert HeuristicAgent().choose_direction(cleared_session) == Direction.RIGHT

    def test_ignores_potion_when_healthy(self, cleared_session):
        replace_cell(cleared_session, Position(0, 3), Cell.of(CellType.HEALTH_POTION))
        cleared_session.player.hp = 8
        assert HeuristicAgent().choose_direction(cleared_session) == Direction.DOWN

    def test_random_fallback_when_boxed_in(self, cleared_session):
        replace_cell(cleared_session, Position(1, 0), Cell.of(CellType.WALL))
        replace_cell(cleared_session, Position(0, 1), Cell.of(CellType.WALL))
        assert HeuristicAgent().choose_direction(cleared_session) in set(Direction)


# ======================================================================
# Performance
# ======================================================================


class TestPerformance:
    def test_beats_random_agent(self):
        heuristic = BatchRunner(HeuristicAgent).run_batch(20, difficulty=1, base_seed=0)
        random = BatchRunner(RandomAgent).run_batch(20, difficulty=1, base_seed=0)

        heuristic_wins = sum(t.won for t in heuristic)
        random_wins = sum(t.won for t in random)
        assert heuristic_wins >= 1
        assert heuristic_wins > random_wins

    def test_reaches_deeper_levels(self):
        heuristic = BatchRunner(HeuristicAgent).run_batch(20, difficulty=1, base_seed=100)
        random = BatchRunner(RandomAgent).run_batch(20, difficulty=1, base_seed=100)
        assert sum(t.level_reached for t in heuristic) > sum(t.level_reached for t in random)
