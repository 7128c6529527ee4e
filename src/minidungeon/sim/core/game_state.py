"""Session state for a single game.

Houses the full mutable state of one game (``GameSession``): the current
grid, the player, the RNG, and the terminal status.  The rules that mutate
a session live in ``minidungeon.sim.engine``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from minidungeon.sim.core.cells import Cell
from minidungeon.sim.core.entities import Player
from minidungeon.sim.core.geometry import Position
from minidungeon.sim.core.grid import Grid

IN_PROGRESS_MESSAGE = "Game in progress. Good luck!"


def _is_coordinate_pair(value: object) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    )


class GameStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    OVER = "OVER"


class GameOverReason(str, Enum):
    """Why a game ended.  Every reason is terminal."""

    HEALTH_DEPLETED = "HEALTH_DEPLETED"
    STEPS_EXHAUSTED = "STEPS_EXHAUSTED"
    VICTORY = "VICTORY"


class GameSession(BaseModel):
    """Full mutable state of one game, across all of its levels."""

    model_config = {"arbitrary_types_allowed": True}

    grid: Grid
    player: Player = Field(default_factory=Player)
    difficulty: int
    seed: int
    rng: Any = Field(default=None, exclude=True)
    """The session's ``GameRNG``.  Excluded from serialization."""

    status: GameStatus = GameStatus.IN_PROGRESS
    over_reason: GameOverReason | None = None
    """Set once ``status`` becomes ``OVER``."""

    status_message: str = IN_PROGRESS_MESSAGE

    observer: Any = Field(default=None, exclude=True)
    """Optional ``Callable[[GameEvent], None]`` sink for game events."""

    # -- queries -------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.OVER

    @property
    def is_won(self) -> bool:
        return self.over_reason == GameOverReason.VICTORY

    def cell_at(self, position: Position | None) -> Cell | None:
        return self.grid.cell_at(position)

    # -- transitions ---------------------------------------------------------

    def replace_cell(
        self,
        position: Position | tuple[int, int] | None,
        cell: Cell,
    ) -> bool:
        """Install *cell* at *position*.

        *position* may also be a raw ``(row, col)`` pair of ints.  Returns
        False and leaves the grid untouched for anything else, including a
        missing or off-grid position.
        """
        if isinstance(position, Position):
            return self.grid.set_cell(position, cell)
        if not _is_coordinate_pair(position) or not Position.in_bounds(*position):
            return False
        return self.grid.set_cell(Position(*position), cell)

    def finish(self, reason: GameOverReason, message: str) -> None:
        """Enter the absorbing ``OVER`` state."""
        self.status = GameStatus.OVER
        self.over_reason = reason
        self.status_message = message
