"""Grid coordinates and movement directions.

``Position`` is an immutable value type; every operation returns a new
instance.  Stepping off the edge of the grid is a normal outcome and is
reported as ``None`` rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

GRID_SIZE = 10
MIN_BOUND = 0
MAX_BOUND = GRID_SIZE - 1


class OutOfBounds(ValueError):
    """Raised when a Position is constructed outside the grid."""


class Direction(str, Enum):
    """The four cardinal directions the player can move in."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def d_row(self) -> int:
        return _OFFSETS[self][0]

    @property
    def d_col(self) -> int:
        return _OFFSETS[self][1]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Position:
    """An immutable ``(row, col)`` coordinate inside the grid."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not Position.in_bounds(self.row, self.col):
            raise OutOfBounds(
                f"Position coordinates must be between {MIN_BOUND} and "
                f"{MAX_BOUND}, got: ({self.row},{self.col})"
            )

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Return True if ``(row, col)`` lies inside the grid."""
        return MIN_BOUND <= row <= MAX_BOUND and MIN_BOUND <= col <= MAX_BOUND

    def plus(self, direction: Direction) -> Position | None:
        """Return the neighbouring position in *direction*, or ``None`` at
        the grid edge."""
        new_row = self.row + direction.d_row
        new_col = self.col + direction.d_col
        if not Position.in_bounds(new_row, new_col):
            return None
        return Position(new_row, new_col)

    def offset_to(self, other: Position) -> tuple[int, int]:
        """Return ``(drow, dcol)`` from this position to *other*."""
        return other.row - self.row, other.col - self.col

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
