"""Persistence collaborators: session snapshots and the leaderboard."""

from minidungeon.persistence.save_state import (
    SaveState,
    SaveStateError,
    load_game,
    save_game,
)
from minidungeon.persistence.scoreboard import MAX_SCORES, ScoreBoard, ScoreEntry

__all__ = [
    "MAX_SCORES",
    "SaveState",
    "SaveStateError",
    "ScoreBoard",
    "ScoreEntry",
    "load_game",
    "save_game",
]
