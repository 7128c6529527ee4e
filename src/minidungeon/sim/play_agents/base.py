"""Base class for agents that play the dungeon headlessly.

All play agents must subclass ``PlayAgent`` and implement
``choose_direction``.  The game driver calls it once per turn.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minidungeon.sim.core.game_state import GameSession
    from minidungeon.sim.core.geometry import Direction


class PlayAgent(ABC):
    """Picks one direction per turn for a headless game."""

    @abstractmethod
    def choose_direction(self, session: GameSession) -> Direction | None:
        """Choose the next move.

        Parameters
        ----------
        session:
            The current game session, giving the agent full observability.
            Agents must treat it as read-only.

        Returns
        -------
        Direction | None
            The direction to move in.  ``None`` is passed straight to the
            engine, which treats it as a rejected move.
        """
