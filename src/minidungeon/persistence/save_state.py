"""Session snapshots -- save a game to JSON and restore it later.

A snapshot records the seed, difficulty, the full player state, the cell
*type* of every tile, the terminal status, and the RNG state.  Per-cell
``consumed`` flags are not stored: a consumed item has already been
replaced by an empty tile.
"""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from minidungeon.sim.core.cells import Cell, CellType
from minidungeon.sim.core.entities import Player
from minidungeon.sim.core.game_state import (
    IN_PROGRESS_MESSAGE,
    GameOverReason,
    GameSession,
    GameStatus,
)
from minidungeon.sim.core.geometry import GRID_SIZE, Position
from minidungeon.sim.engine import new_session

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1

# 624 Mersenne Twister words followed by the position index.
_MT_STATE_LENGTH = 625


class SaveStateError(ValueError):
    """Raised when a snapshot file cannot be parsed or is inconsistent."""


class SaveState(BaseModel):
    """A serializable snapshot of a ``GameSession``."""

    version: int = SNAPSHOT_VERSION
    seed: int
    difficulty: int = Field(ge=1)
    player: Player
    cells: list[list[CellType]]
    """Row-major cell types, ``GRID_SIZE`` x ``GRID_SIZE``."""

    status: GameStatus = GameStatus.IN_PROGRESS
    over_reason: GameOverReason | None = None
    status_message: str = IN_PROGRESS_MESSAGE
    rng_state: tuple[int, list[int], float | None] | None = None
    """``random.Random.getstate()`` of the session RNG, if captured."""

    @field_validator("cells")
    @classmethod
    def _validate_shape(cls, v: list[list[CellType]]) -> list[list[CellType]]:
        if len(v) != GRID_SIZE or any(len(row) != GRID_SIZE for row in v):
            raise ValueError(f"cells must be a {GRID_SIZE}x{GRID_SIZE} grid")
        return v

    @field_validator("rng_state")
    @classmethod
    def _validate_rng_state(
        cls, v: tuple[int, list[int], float | None] | None,
    ) -> tuple[int, list[int], float | None] | None:
        if v is None:
            return v
        version, internal, _ = v
        if version != random.Random.VERSION:
            raise ValueError(f"unsupported rng_state version {version}")
        if len(internal) != _MT_STATE_LENGTH:
            raise ValueError(f"rng_state must hold {_MT_STATE_LENGTH} integers")
        if any(not 0 <= word < 2**32 for word in internal[:-1]):
            raise ValueError("rng_state words must be unsigned 32-bit integers")
        if not 0 <= internal[-1] < _MT_STATE_LENGTH:
            raise ValueError("rng_state index out of range")
        return v

    # -- capture / restore ---------------------------------------------------

    @classmethod
    def from_session(cls, session: GameSession) -> SaveState:
        """Capture *session*."""
        rng_state: Any = None
        if session.rng is not None:
            version, internal, gauss = session.rng.getstate()
            rng_state = (version, list(internal), gauss)
        return cls(
            seed=session.seed,
            difficulty=session.difficulty,
            player=session.player.model_copy(),
            cells=session.grid.type_layout(),
            status=session.status,
            over_reason=session.over_reason,
            status_message=session.status_message,
            rng_state=rng_state,
        )

    def restore(self) -> GameSession:
        """Rebuild an equivalent session.

        The session is recreated from the seed, then every tile is replaced
        with the saved cell type and the player, status and RNG state are
        put back.
        """
        session = new_session(self.difficulty, self.seed)

        for row, cell_types in enumerate(self.cells):
            for col, cell_type in enumerate(cell_types):
                session.replace_cell(Position(row, col), Cell.of(cell_type))

        session.player = self.player.model_copy()
        session.status = self.status
        session.over_reason = self.over_reason
        session.status_message = self.status_message

        if self.rng_state is not None:
            version, internal, gauss = self.rng_state
            session.rng.setstate((version, tuple(internal), gauss))

        logger.debug(
            "Restored session seed=%d level=%d status=%s",
            self.seed,
            self.player.level,
            self.status.value,
        )
        return session

    # -- files ---------------------------------------------------------------

    def save_to_file(self, path: Path) -> None:
        """Write the snapshot as JSON, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.model_dump(mode="json"), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> SaveState:
        """Read a snapshot written by :meth:`save_to_file`.

        Raises ``FileNotFoundError`` if *path* does not exist and
        ``SaveStateError`` if its contents are not a valid snapshot.
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return cls.model_validate(data)
        # UnicodeDecodeError, JSONDecodeError and ValidationError are all
        # ValueErrors, as is OutOfBounds from a bad player position.
        except ValueError as exc:
            raise SaveStateError(f"Invalid save file {path}: {exc}") from exc


def save_game(session: GameSession, path: Path) -> SaveState:
    """Snapshot *session* and write it to *path*."""
    state = SaveState.from_session(session)
    state.save_to_file(path)
    return state


def load_game(path: Path) -> GameSession:
    """Read a snapshot from *path* and restore the session."""
    return SaveState.load_from_file(path).restore()
