"""Level progression -- the ladder-triggered transition."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from minidungeon.sim.core.game_state import GameOverReason
from minidungeon.sim.dungeon.map_gen import ENTRY_POSITION, MapGenerator
from minidungeon.sim.events import EventKind, GameEvent, emit

if TYPE_CHECKING:
    from minidungeon.sim.core.game_state import GameSession

logger = logging.getLogger(__name__)

WINNING_LEVEL = 2

VICTORY_MESSAGE = "Congratulations! You've completed all levels and won the game!"


def advance_level(
    session: GameSession,
    events: list[GameEvent] | None = None,
) -> None:
    """Move the player to the next dungeon level, or win the game.

    Past ``WINNING_LEVEL`` the session ends in victory and no new grid is
    generated.  Otherwise a fresh grid is generated from the session's
    ongoing RNG (not re-seeded) and the player returns to the entry.
    """
    player = session.player
    player.level += 1

    if player.level > WINNING_LEVEL:
        session.finish(GameOverReason.VICTORY, VICTORY_MESSAGE)
        logger.info("Victory at level %d with score %d", player.level, player.score)
        emit(session, EventKind.GAME_OVER, VICTORY_MESSAGE, events)
        return

    session.grid = MapGenerator().generate(session.difficulty, session.rng)
    player.position = ENTRY_POSITION
    session.status_message = (
        f"You reached level {player.level}! Find the ladder to continue."
    )
    logger.info("Advanced to level %d", player.level)
    emit(session, EventKind.LEVEL_REACHED, session.status_message, events)
