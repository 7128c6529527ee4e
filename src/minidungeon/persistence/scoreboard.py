"""Top-score leaderboard persisted as a JSON file.

Only the best ``MAX_SCORES`` entries are kept, ordered by score
(descending) and then by timestamp (oldest first).  File errors are logged
and reported through return values; they never propagate to the caller.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path

from pydantic import BaseModel, TypeAdapter

logger = logging.getLogger(__name__)

MAX_SCORES = 5
SCORE_FILE_NAME = ".minidungeon.scores.json"


class ScoreEntry(BaseModel):
    """One leaderboard row."""

    player_name: str
    score: int
    level: int
    timestamp: int
    """Milliseconds since the epoch."""

    def __str__(self) -> str:
        return f"{self.player_name}: {self.score} points (Level {self.level})"


_ENTRIES = TypeAdapter(list[ScoreEntry])


class ScoreBoard:
    """File-backed top-5 leaderboard.

    Parameters
    ----------
    path:
        Location of the JSON file.  Defaults to ``~/.minidungeon.scores.json``.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else Path.home() / SCORE_FILE_NAME

    def add_score(
        self,
        player_name: str,
        score: int,
        level: int,
        timestamp: int | None = None,
    ) -> bool:
        """Record a finished game.

        Returns True if the new entry made the top ``MAX_SCORES``.
        """
        if timestamp is None:
            timestamp = time.time_ns() // 1_000_000
        entry = ScoreEntry(
            player_name=player_name, score=score, level=level, timestamp=timestamp,
        )

        try:
            scores = self._load()
            scores.append(entry)
            # Stable sort keeps a new entry behind older ties.
            scores.sort(key=lambda e: (-e.score, e.timestamp))
            was_added = any(e is entry for e in scores[:MAX_SCORES])
            self._save(scores[:MAX_SCORES])
        except (OSError, ValueError) as exc:
            logger.warning("Error managing scores in %s: %s", self.path, exc)
            return False
        return was_added

    def get_top_scores(self) -> list[ScoreEntry]:
        try:
            return self._load()
        except (OSError, ValueError) as exc:
            logger.warning("Error loading scores from %s: %s", self.path, exc)
            return []

    def clear_scores(self) -> None:
        try:
            self._save([])
        except OSError as exc:
            logger.warning("Error clearing scores in %s: %s", self.path, exc)

    def get_minimum_top_score(self) -> int:
        """Score needed to enter a full board, or 0 if it is not full yet."""
        scores = self.get_top_scores()
        if len(scores) < MAX_SCORES:
            return 0
        return scores[-1].score

    # -- internal helpers ----------------------------------------------------

    def _load(self) -> list[ScoreEntry]:
        if not self.path.exists():
            return []
        # ValidationError and JSONDecodeError are both ValueErrors.
        return _ENTRIES.validate_python(json.loads(self.path.read_text()))

    def _save(self, scores: list[ScoreEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps([e.model_dump() for e in scores], indent=2)
        )
