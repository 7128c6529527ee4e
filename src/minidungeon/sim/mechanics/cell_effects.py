"""Cell entry effects.

Every cell type maps to exactly one handler in ``_DISPATCH``.  A handler
runs once per successful move onto the cell, after the player's position
has been updated, and may replace the cell at that position.

Consumed items and defeated enemies are replaced with a fresh ``EMPTY``
cell; traps stay where they are and hit every time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from minidungeon.sim.core.cells import Cell, CellType
from minidungeon.sim.events import EventKind, GameEvent, emit
from minidungeon.sim.mechanics.progression import advance_level

if TYPE_CHECKING:
    from minidungeon.sim.core.entities import Player
    from minidungeon.sim.core.game_state import GameSession

GOLD_SCORE = 2
POTION_HEAL = 4
TRAP_DAMAGE = 2
ENEMY_DAMAGE = 2
ENEMY_SCORE = 2


def on_enter(
    cell: Cell,
    player: Player,
    session: GameSession,
    events: list[GameEvent] | None = None,
) -> None:
    """Apply *cell*'s entry effect to *player*."""
    handler = _DISPATCH[cell.cell_type]
    handler(cell, player, session, events)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _no_effect(
    cell: Cell,
    player: Player,
    session: GameSession,
    events: list[GameEvent] | None,
) -> None:
    return None


def _enter_gold(
    cell: Cell,
    player: Player,
    session: GameSession,
    events: list[GameEvent] | None,
) -> None:
    if cell.consumed:
        return
    player.add_score(GOLD_SCORE)
    cell.consumed = True
    session.replace_cell(player.position, Cell())
    emit(session, EventKind.ITEM_COLLECTED, f"Gold collected! +{GOLD_SCORE} points", events)


def _enter_health_potion(
    cell: Cell,
    player: Player,
    session: GameSession,
    events: list[GameEvent] | None,
) -> None:
    if cell.consumed:
        return
    healed = player.heal(POTION_HEAL)
    cell.consumed = True
    session.replace_cell(player.position, Cell())
    emit(
        session,
        EventKind.ITEM_COLLECTED,
        f"Health potion consumed! +{healed} HP",
        events,
    )


def _enter_trap(
    cell: Cell,
    player: Player,
    session: GameSession,
    events: list[GameEvent] | None,
) -> None:
    player.take_damage(TRAP_DAMAGE)
    emit(session, EventKind.DAMAGE_TAKEN, f"Trap triggered! -{TRAP_DAMAGE} HP", events)


def _enter_ladder(
    cell: Cell,
    player: Player,
    session: GameSession,
    events: list[GameEvent] | None,
) -> None:
    advance_level(session, events)


def _enter_melee_enemy(
    cell: Cell,
    player: Player,
    session: GameSession,
    events: list[GameEvent] | None,
) -> None:
    # Attack and defeat always happen together.
    player.take_damage(ENEMY_DAMAGE)
    emit(
        session,
        EventKind.DAMAGE_TAKEN,
        f"Melee mutant attacked! -{ENEMY_DAMAGE} HP",
        events,
    )
    player.add_score(ENEMY_SCORE)
    session.replace_cell(player.position, Cell())
    emit(
        session,
        EventKind.ENEMY_DEFEATED,
        f"Defeated melee mutant! +{ENEMY_SCORE} points",
        events,
    )


def _enter_ranged_enemy(
    cell: Cell,
    player: Player,
    session: GameSession,
    events: list[GameEvent] | None,
) -> None:
    player.add_score(ENEMY_SCORE)
    session.replace_cell(player.position, Cell())
    emit(
        session,
        EventKind.ENEMY_DEFEATED,
        f"Defeated ranged mutant! +{ENEMY_SCORE} points",
        events,
    )


_DISPATCH: dict[CellType, Callable[..., None]] = {
    CellType.EMPTY: _no_effect,
    CellType.ENTRY: _no_effect,
    CellType.WALL: _no_effect,
    CellType.GOLD: _enter_gold,
    CellType.HEALTH_POTION: _enter_health_potion,
    CellType.TRAP: _enter_trap,
    CellType.LADDER: _enter_ladder,
    CellType.MELEE_ENEMY: _enter_melee_enemy,
    CellType.RANGED_ENEMY: _enter_ranged_enemy,
}
