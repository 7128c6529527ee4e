"""Ranged enemy behaviour.

Ranged mutants never move.  After every resolved move each one still on
the grid gets a chance to fire, scanned in row-major order:

    1. Player exactly two tiles away along one cardinal axis
    2. The single tile between them is not a wall
    3. One 50% roll per qualifying enemy; a hit deals ``RANGED_DAMAGE``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from minidungeon.sim.core.cells import CellType
from minidungeon.sim.core.geometry import Position
from minidungeon.sim.events import EventKind, GameEvent, emit

if TYPE_CHECKING:
    from minidungeon.sim.core.entities import Player
    from minidungeon.sim.core.game_state import GameSession
    from minidungeon.sim.core.grid import Grid
    from minidungeon.sim.core.rng import GameRNG

RANGED_DAMAGE = 2
RANGED_REACH = 2


def can_shoot_at(
    enemy_pos: Position | None,
    player_pos: Position | None,
    grid: Grid,
) -> bool:
    """Return True if an enemy at *enemy_pos* has a clear shot at *player_pos*."""
    if enemy_pos is None or player_pos is None:
        return False

    d_row, d_col = enemy_pos.offset_to(player_pos)
    if abs(d_row) == RANGED_REACH and d_col == 0:
        middle = Position(enemy_pos.row + d_row // 2, enemy_pos.col)
    elif abs(d_col) == RANGED_REACH and d_row == 0:
        middle = Position(enemy_pos.row, enemy_pos.col + d_col // 2)
    else:
        return False

    return grid.cell_at(middle).cell_type != CellType.WALL


def shoot_at(player: Player, rng: GameRNG) -> bool:
    """Fire one shot at *player*.  Returns True on a hit."""
    if rng.random_bool():
        player.take_damage(RANGED_DAMAGE)
        return True
    return False


def run_reaction_pass(
    session: GameSession,
    events: list[GameEvent] | None = None,
) -> int:
    """Give every ranged enemy on the grid one shot opportunity.

    Returns the number of hits.
    """
    player = session.player
    hits = 0
    for enemy_pos in session.grid.find(CellType.RANGED_ENEMY):
        if not can_shoot_at(enemy_pos, player.position, session.grid):
            continue
        if shoot_at(player, session.rng):
            hits += 1
            emit(
                session,
                EventKind.DAMAGE_TAKEN,
                f"Ranged mutant shot hit! -{RANGED_DAMAGE} HP",
                events,
            )
        else:
            emit(session, EventKind.SHOT_MISSED, "Ranged mutant shot missed!", events)
    return hits
