"""Cell models for the dungeon grid.

The set of cell variants is closed: every cell is a ``Cell`` tagged with a
``CellType``.  Behaviour on entry is looked up in a dispatch table in
``minidungeon.sim.mechanics.cell_effects`` rather than implemented by
subclasses.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CellType(str, Enum):
    """Every kind of tile a dungeon level can contain."""

    EMPTY = "EMPTY"
    ENTRY = "ENTRY"
    WALL = "WALL"
    GOLD = "GOLD"
    HEALTH_POTION = "HEALTH_POTION"
    TRAP = "TRAP"
    LADDER = "LADDER"
    MELEE_ENEMY = "MELEE_ENEMY"
    RANGED_ENEMY = "RANGED_ENEMY"


# Display tags consumed by renderers.  Empty, entry and wall tiles have none.
SPRITES: dict[CellType, str | None] = {
    CellType.EMPTY: None,
    CellType.ENTRY: None,
    CellType.WALL: None,
    CellType.GOLD: "treasure.png",
    CellType.HEALTH_POTION: "health.png",
    CellType.TRAP: "trap.png",
    CellType.LADDER: "ladder.png",
    CellType.MELEE_ENEMY: "zombie.png",
    CellType.RANGED_ENEMY: "ranged_mutant.png",
}

CONSUMABLE_TYPES = frozenset({CellType.GOLD, CellType.HEALTH_POTION})
ENEMY_TYPES = frozenset({CellType.MELEE_ENEMY, CellType.RANGED_ENEMY})


class Cell(BaseModel):
    """A single tile owned by the grid at one coordinate."""

    cell_type: CellType = CellType.EMPTY
    consumed: bool = False
    """One-shot flag for gold and potions.  Always False for other types."""

    @classmethod
    def of(cls, cell_type: CellType) -> Cell:
        """Create a fresh cell of *cell_type*."""
        return cls(cell_type=cell_type)

    # -- queries -------------------------------------------------------------

    @property
    def sprite(self) -> str | None:
        return SPRITES[self.cell_type]

    @property
    def blocks_movement(self) -> bool:
        return self.cell_type == CellType.WALL

    @property
    def is_consumable(self) -> bool:
        return self.cell_type in CONSUMABLE_TYPES

    @property
    def is_enemy(self) -> bool:
        return self.cell_type in ENEMY_TYPES
