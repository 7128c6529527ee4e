"""Random action agent -- picks a direction uniformly at random.

``RandomAgent`` is the baseline for batch simulation.  Because it walks
into walls and edges freely, it also exercises the rejection path of
``move`` on every run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from minidungeon.sim.core.geometry import Direction
from minidungeon.sim.core.rng import GameRNG
from minidungeon.sim.play_agents.base import PlayAgent

if TYPE_CHECKING:
    from minidungeon.sim.core.game_state import GameSession

_DIRECTIONS = list(Direction)


class RandomAgent(PlayAgent):
    """Agent that moves in a random direction every turn.

    Parameters
    ----------
    rng:
        Stream the directions are drawn from.  Defaults to
        ``GameRNG(seed=0)``.  Never pass the session RNG here.
    """

    def __init__(self, rng: GameRNG | None = None) -> None:
        self._rng = rng or GameRNG(seed=0)

    def choose_direction(self, session: GameSession) -> Direction | None:
        return self._rng.random_choice(_DIRECTIONS)
