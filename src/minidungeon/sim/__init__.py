"""Turn-based dungeon simulation engine."""

from minidungeon.sim.engine import MAX_STEPS, MoveResult, move, new_session, replace_cell
from minidungeon.sim.events import EventKind, GameEvent, set_observer
from minidungeon.sim.mechanics.progression import WINNING_LEVEL, advance_level

__all__ = [
    "EventKind",
    "GameEvent",
    "MAX_STEPS",
    "MoveResult",
    "WINNING_LEVEL",
    "advance_level",
    "move",
    "new_session",
    "replace_cell",
    "set_observer",
]
