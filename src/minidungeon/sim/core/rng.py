"""Seeded randomness for dungeon sessions.

A game session owns exactly one ``GameRNG``.  Map generation and the
ranged reaction pass both draw from it, so the order of draws is part of
the reproducibility contract: same seed, same difficulty, same moves give
the same game.  Play agents get a *forked* stream so their decisions never
shift the session's draws.
"""

from __future__ import annotations

import hashlib
import random
from typing import Any, Sequence, TypeVar

T = TypeVar("T")

_HIT_CHANCE = 0.5


class GameRNG:
    """Mersenne Twister stream with the draws the dungeon rules need.

    Parameters
    ----------
    seed:
        Session seed.  Kept so snapshots and forks can refer to it.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    # -- draws ---------------------------------------------------------------

    def random_below(self, n: int) -> int:
        """Uniform integer in ``[0, n)``.  Used for tile picks."""
        return self._random.randrange(n)

    def random_float(self) -> float:
        """Uniform float in ``[0.0, 1.0)``.  Used for wall rolls."""
        return self._random.random()

    def random_bool(self) -> bool:
        """Fair coin flip.  Used for ranged shots."""
        return self._random.random() < _HIT_CHANCE

    def random_choice(self, options: Sequence[T]) -> T:
        return self._random.choice(options)

    # -- snapshots -----------------------------------------------------------

    def getstate(self) -> Any:
        return self._random.getstate()

    def setstate(self, state: Any) -> None:
        self._random.setstate(state)

    # -- sub-streams ---------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Return an independent stream named *name*.

        The child seed depends only on this stream's seed and *name*, never
        on how far the parent has advanced.
        """
        key = f"{self._seed}:{name}".encode()
        child_seed = int.from_bytes(hashlib.sha256(key).digest()[:8], "big")
        return GameRNG(child_seed)

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
