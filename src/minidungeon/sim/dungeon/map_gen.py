"""Procedural map generator for a single dungeon level.

Generates a 10x10 grid in a fixed order:
- Entry at (0,0), ladder at (9,9)
- Border obstruction walls: for offsets 2, 4, 6, a 40% roll places four
  walls mirrored across the grid edges
- ``3 + difficulty`` interior walls, anywhere outside the two-tile border
- Features on random empty tiles: 5 gold, 5 traps, 2 health potions,
  3 melee enemies, then ``difficulty`` ranged enemies

Constraints:
- The RNG is consumed in exactly this sequence, one draw per border
  offset (even when the roll fails), two per interior wall (row then col)
  and one per feature.  Identical seed + difficulty always yields an
  identical grid.
"""

from __future__ import annotations

import logging

from minidungeon.sim.core.cells import Cell, CellType
from minidungeon.sim.core.geometry import GRID_SIZE, Position
from minidungeon.sim.core.grid import Grid
from minidungeon.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)

ENTRY_POSITION = Position(0, 0)
LADDER_POSITION = Position(GRID_SIZE - 1, GRID_SIZE - 1)

BORDER_WALL_CHANCE = 0.4
BASE_INTERIOR_WALLS = 3

# Placement order matters for reproducibility; ranged enemies come last
# and their count is the difficulty.
_FEATURE_COUNTS: list[tuple[CellType, int]] = [
    (CellType.GOLD, 5),
    (CellType.TRAP, 5),
    (CellType.HEALTH_POTION, 2),
    (CellType.MELEE_ENEMY, 3),
]


class MapGenerator:
    """Generates dungeon levels."""

    def generate(self, difficulty: int, rng: GameRNG) -> Grid:
        """Generate a fully populated grid for *difficulty*.

        Returns a new ``Grid``; *rng* is advanced.
        """
        grid = Grid()

        grid.set_cell(ENTRY_POSITION, Cell.of(CellType.ENTRY))
        grid.set_cell(LADDER_POSITION, Cell.of(CellType.LADDER))

        self._place_walls(grid, difficulty, rng)

        for cell_type, count in _FEATURE_COUNTS:
            self._place_random_cells(grid, count, cell_type, rng)
        self._place_random_cells(grid, difficulty, CellType.RANGED_ENEMY, rng)

        logger.debug(
            "Generated level: difficulty=%d walls=%d ranged=%d empty=%d",
            difficulty,
            grid.count(CellType.WALL),
            grid.count(CellType.RANGED_ENEMY),
            grid.count(CellType.EMPTY),
        )
        return grid

    def _place_walls(self, grid: Grid, difficulty: int, rng: GameRNG) -> None:
        far = GRID_SIZE - 3
        for i in range(2, GRID_SIZE - 2, 2):
            if rng.random_float() < BORDER_WALL_CHANCE:
                grid.set_cell(Position(2, i), Cell.of(CellType.WALL))
                grid.set_cell(Position(far, i), Cell.of(CellType.WALL))
                grid.set_cell(Position(i, 2), Cell.of(CellType.WALL))
                grid.set_cell(Position(i, far), Cell.of(CellType.WALL))

        interior_walls = BASE_INTERIOR_WALLS + difficulty
        for _ in range(interior_walls):
            row = 2 + rng.random_below(GRID_SIZE - 4)
            col = 2 + rng.random_below(GRID_SIZE - 4)
            grid.set_cell(Position(row, col), Cell.of(CellType.WALL))

    def _place_random_cells(
        self,
        grid: Grid,
        count: int,
        cell_type: CellType,
        rng: GameRNG,
    ) -> None:
        """Place *count* cells of *cell_type* on random empty tiles."""
        for _ in range(count):
            pos = self._random_empty_position(grid, rng)
            if pos is None:
                # Grid is full; remaining placements are skipped.
                return
            grid.set_cell(pos, Cell.of(cell_type))

    def _random_empty_position(self, grid: Grid, rng: GameRNG) -> Position | None:
        empty = grid.find(CellType.EMPTY)
        if not empty:
            return None
        return empty[rng.random_below(len(empty))]
