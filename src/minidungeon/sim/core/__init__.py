"""Core simulation primitives for the dungeon simulator."""

from minidungeon.sim.core.cells import Cell, CellType
from minidungeon.sim.core.entities import MAX_HP, Player
from minidungeon.sim.core.game_state import GameOverReason, GameSession, GameStatus
from minidungeon.sim.core.geometry import GRID_SIZE, Direction, OutOfBounds, Position
from minidungeon.sim.core.grid import Grid
from minidungeon.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # geometry
    "GRID_SIZE",
    "Direction",
    "OutOfBounds",
    "Position",
    # cells / grid
    "Cell",
    "CellType",
    "Grid",
    # entities
    "MAX_HP",
    "Player",
    # game_state
    "GameOverReason",
    "GameSession",
    "GameStatus",
]
