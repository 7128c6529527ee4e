"""The fixed-size dungeon grid."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field

from minidungeon.sim.core.cells import Cell, CellType
from minidungeon.sim.core.geometry import GRID_SIZE, Position


def _empty_rows() -> list[list[Cell]]:
    return [[Cell() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


class Grid(BaseModel):
    """A fully populated ``GRID_SIZE`` x ``GRID_SIZE`` board of cells.

    Cells are addressed by ``Position``.  There are no absent entries:
    unused tiles hold ``EMPTY`` cells.
    """

    rows: list[list[Cell]] = Field(default_factory=_empty_rows)

    @property
    def size(self) -> int:
        return GRID_SIZE

    # -- access --------------------------------------------------------------

    def cell_at(self, position: Position | None) -> Cell | None:
        """Return the cell at *position*, or ``None`` for a missing position."""
        if position is None:
            return None
        return self.rows[position.row][position.col]

    def set_cell(self, position: Position | None, cell: Cell) -> bool:
        """Install *cell* at *position*, replacing whatever was there.

        Returns False (and changes nothing) if *position* is missing.
        """
        if position is None:
            return False
        self.rows[position.row][position.col] = cell
        return True

    # -- iteration -----------------------------------------------------------

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                yield Position(row, col)

    def items(self) -> Iterator[tuple[Position, Cell]]:
        """Yield ``(position, cell)`` pairs in row-major order."""
        for pos in self.positions():
            yield pos, self.rows[pos.row][pos.col]

    def find(self, cell_type: CellType) -> list[Position]:
        """Return all positions holding *cell_type*, in row-major order."""
        return [pos for pos, cell in self.items() if cell.cell_type == cell_type]

    def count(self, cell_type: CellType) -> int:
        return sum(
            1 for row in self.rows for cell in row if cell.cell_type == cell_type
        )

    def type_layout(self) -> list[list[CellType]]:
        """Return the cell-type matrix, ignoring per-cell flags."""
        return [[cell.cell_type for cell in row] for row in self.rows]
