"""Telemetry data model for per-game statistics.

``GameTelemetry`` captures the outcome of one headless game without
storing the full session history.  It is a plain ``dataclass`` (not a
Pydantic model) to keep collection cheap during batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GameTelemetry:
    """Stats from a single game.

    Attributes
    ----------
    seed:
        The session seed.
    difficulty:
        The session difficulty.
    result:
        ``"victory"``, ``"health_depleted"``, ``"steps_exhausted"``, or
        ``"unfinished"`` if the turn limit of the driver was hit first.
    final_score:
        Player score at the end of the game.
    final_hp:
        Player HP at the end of the game.
    steps:
        Successful moves taken.
    rejected_moves:
        Moves the agent attempted that did not happen (walls, edges).
    level_reached:
        Highest dungeon level reached (3 means the game was won).
    hp_at_each_step:
        Player HP after every successful move.
    events_by_kind:
        Breakdown of emitted events: ``EventKind.value -> count``.
    """

    seed: int
    difficulty: int
    result: str = "unfinished"
    final_score: int = 0
    final_hp: int = 0
    steps: int = 0
    rejected_moves: int = 0
    level_reached: int = 1
    hp_at_each_step: list[int] = field(default_factory=list)
    events_by_kind: dict[str, int] = field(default_factory=dict)

    @property
    def won(self) -> bool:
        return self.result == "victory"
