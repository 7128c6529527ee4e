"""Game engine -- creates sessions and drives them one move at a time.

A move is processed completely before it returns:

    1. Compute the target tile; off-grid or wall rejects the move
    2. Commit the player's position
    3. Apply the target cell's entry effect
    4. Count the step
    5. Ranged enemy reaction pass
    6. Check loss conditions (health first, then steps)

Rejections happen before step 2, so a rejected move never changes the
session.  Once a session is over every move is rejected.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from minidungeon.sim.core.cells import Cell
from minidungeon.sim.core.entities import Player
from minidungeon.sim.core.game_state import GameOverReason, GameSession
from minidungeon.sim.core.geometry import Direction, Position
from minidungeon.sim.core.rng import GameRNG
from minidungeon.sim.dungeon.map_gen import ENTRY_POSITION, MapGenerator
from minidungeon.sim.events import EventKind, GameEvent, emit
from minidungeon.sim.mechanics.cell_effects import on_enter
from minidungeon.sim.mechanics.ranged import run_reaction_pass

logger = logging.getLogger(__name__)

MAX_STEPS = 100

HEALTH_DEPLETED_MESSAGE = "Game Over! You ran out of health."
STEPS_EXHAUSTED_MESSAGE = "Game Over! You ran out of steps."


@dataclass
class MoveResult:
    """Outcome of a single call to :func:`move`."""

    moved: bool
    events: list[GameEvent] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.moved


def new_session(difficulty: int, seed: int | None = None) -> GameSession:
    """Start a new game.

    Parameters
    ----------
    difficulty:
        Positive integer; controls interior walls and ranged enemy count.
    seed:
        RNG seed.  When omitted a time-based seed is chosen; it is stored
        on the session either way.
    """
    if difficulty < 1:
        raise ValueError(f"difficulty must be >= 1, got {difficulty}")
    if seed is None:
        seed = time.time_ns() // 1_000_000

    rng = GameRNG(seed)
    grid = MapGenerator().generate(difficulty, rng)
    session = GameSession(
        grid=grid,
        player=Player(position=ENTRY_POSITION),
        difficulty=difficulty,
        seed=seed,
        rng=rng,
    )
    logger.info("New session: difficulty=%d seed=%d", difficulty, seed)
    return session


def move(session: GameSession, direction: Direction | None) -> MoveResult:
    """Try to move the player one tile in *direction*."""
    if session.is_over or direction is None:
        return MoveResult(moved=False)

    player = session.player
    target = player.position.plus(direction)
    if target is None:
        return MoveResult(moved=False)

    destination = session.cell_at(target)
    if destination is None or destination.blocks_movement:
        return MoveResult(moved=False)

    events: list[GameEvent] = []
    player.position = target
    emit(session, EventKind.MOVE, f"Moved {direction.value.lower()} to {target}", events)

    on_enter(destination, player, session, events)
    player.increment_steps()

    # Victory is final; nothing else happens on the old grid.
    if not session.is_over:
        run_reaction_pass(session, events)
        _check_game_over(session, events)

    return MoveResult(moved=True, events=events)


def replace_cell(
    session: GameSession,
    position: Position | tuple[int, int] | None,
    cell: Cell,
) -> bool:
    """Install *cell* at *position* on the current grid.

    Returns False for a missing or off-grid position.
    """
    return session.replace_cell(position, cell)


def _check_game_over(session: GameSession, events: list[GameEvent]) -> None:
    player = session.player
    if player.hp <= 0:
        session.finish(GameOverReason.HEALTH_DEPLETED, HEALTH_DEPLETED_MESSAGE)
    elif player.steps >= MAX_STEPS:
        session.finish(GameOverReason.STEPS_EXHAUSTED, STEPS_EXHAUSTED_MESSAGE)
    else:
        return

    logger.info(
        "Game over (%s): level=%d score=%d steps=%d",
        session.over_reason.value,
        player.level,
        player.score,
        player.steps,
    )
    emit(session, EventKind.GAME_OVER, session.status_message, events)
