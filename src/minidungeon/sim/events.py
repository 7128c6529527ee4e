"""Game event notifications.

The engine reports what happens during a move as discrete ``GameEvent``
values.  A session may carry at most one observer (any callable taking a
``GameEvent``); observers are passive sinks and must not mutate the
session.  Every event is also logged at DEBUG level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from minidungeon.sim.core.game_state import GameSession

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    MOVE = "MOVE"
    ITEM_COLLECTED = "ITEM_COLLECTED"
    DAMAGE_TAKEN = "DAMAGE_TAKEN"
    SHOT_MISSED = "SHOT_MISSED"
    ENEMY_DEFEATED = "ENEMY_DEFEATED"
    LEVEL_REACHED = "LEVEL_REACHED"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    message: str


Observer = Callable[[GameEvent], None]


def set_observer(session: GameSession, observer: Observer | None) -> None:
    """Register *observer* on *session*, replacing any previous one.

    Pass ``None`` to remove it.
    """
    session.observer = observer


def emit(
    session: GameSession,
    kind: EventKind,
    message: str,
    sink: list[GameEvent] | None = None,
) -> GameEvent:
    """Log an event, append it to *sink* and notify the session's observer."""
    event = GameEvent(kind=kind, message=message)
    logger.debug("[%s] %s", kind.value, message)
    if sink is not None:
        sink.append(event)
    if session.observer is not None:
        session.observer(event)
    return event
