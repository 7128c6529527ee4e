"""Heuristic agent -- walks shortest safe paths toward a goal tile.

Decision order each turn:
    1. If HP is at or below ``heal_threshold`` and a potion is on the
       grid, head for the nearest potion.
    2. Otherwise head for the ladder.

Paths are found with a breadth-first search over non-wall tiles.  The
first search also avoids traps and melee mutants; if no such path exists
the hazards are allowed.  If the goal is unreachable the agent falls back
to a random direction.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from minidungeon.sim.core.cells import CellType
from minidungeon.sim.core.geometry import Direction, Position
from minidungeon.sim.core.rng import GameRNG
from minidungeon.sim.play_agents.base import PlayAgent

if TYPE_CHECKING:
    from minidungeon.sim.core.game_state import GameSession
    from minidungeon.sim.core.grid import Grid

_HAZARDS = frozenset({CellType.TRAP, CellType.MELEE_ENEMY})


class HeuristicAgent(PlayAgent):
    """Agent that plays sensibly enough to win most low-difficulty games.

    Parameters
    ----------
    rng:
        RNG used only for the random fallback move.
    heal_threshold:
        HP at or below which the agent detours for health potions.
    """

    def __init__(self, rng: GameRNG | None = None, heal_threshold: int = 4) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._heal_threshold = heal_threshold

    def choose_direction(self, session: GameSession) -> Direction | None:
        grid = session.grid
        start = session.player.position

        goals: set[Position] = set()
        if session.player.hp <= self._heal_threshold:
            goals = set(grid.find(CellType.HEALTH_POTION))
        if not goals:
            goals = set(grid.find(CellType.LADDER))

        for avoid in (_HAZARDS, frozenset()):
            step = self._first_step(grid, start, goals, avoid)
            if step is not None:
                return step

        return self._rng.random_choice(list(Direction))

    # ------------------------------------------------------------------
    # Path finding
    # ------------------------------------------------------------------

    def _first_step(
        self,
        grid: Grid,
        start: Position,
        goals: set[Position],
        avoid: frozenset[CellType],
    ) -> Direction | None:
        """Return the first direction of a shortest path to any goal."""
        if not goals or start in goals:
            return None

        # Maps each visited tile to the direction taken out of ``start``.
        first: dict[Position, Direction | None] = {start: None}
        queue: deque[Position] = deque([start])

        while queue:
            current = queue.popleft()
            for direction in Direction:
                nxt = current.plus(direction)
                if nxt is None or nxt in first:
                    continue
                cell = grid.cell_at(nxt)
                if cell.blocks_movement:
                    continue
                if nxt not in goals and cell.cell_type in avoid:
                    continue
                first[nxt] = first[current] or direction
                if nxt in goals:
                    return first[nxt]
                queue.append(nxt)

        return None
