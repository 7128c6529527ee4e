"""Dungeon module -- level generation."""

from minidungeon.sim.dungeon.map_gen import (
    ENTRY_POSITION,
    LADDER_POSITION,
    MapGenerator,
)

__all__ = [
    "ENTRY_POSITION",
    "LADDER_POSITION",
    "MapGenerator",
]
