"""Shared fixtures and helpers for dungeon tests."""

from __future__ import annotations

import pytest

from minidungeon.sim.core.cells import Cell, CellType
from minidungeon.sim.core.game_state import GameSession
from minidungeon.sim.core.geometry import Position
from minidungeon.sim.engine import new_session, replace_cell


class FixedRNG:
    """Stand-in RNG whose coin flips follow a fixed script."""

    def __init__(self, flips: list[bool]) -> None:
        self._flips = list(flips)
        self.calls = 0

    def random_bool(self) -> bool:
        self.calls += 1
        return self._flips.pop(0)


def clear_grid(session: GameSession) -> GameSession:
    """Replace every tile with EMPTY, keeping entry and ladder corners."""
    for pos in session.grid.positions():
        replace_cell(session, pos, Cell())
    replace_cell(session, Position(0, 0), Cell.of(CellType.ENTRY))
    replace_cell(session, Position(9, 9), Cell.of(CellType.LADDER))
    return session


@pytest.fixture
def session() -> GameSession:
    """A freshly generated difficulty-1 session with a fixed seed."""
    return new_session(1, 12345)


@pytest.fixture
def cleared_session(session: GameSession) -> GameSession:
    """The fixed-seed session with every feature removed from its grid."""
    return clear_grid(session)


@pytest.fixture
def fixed_rng() -> type[FixedRNG]:
    """The scripted coin-flip RNG class."""
    return FixedRNG
