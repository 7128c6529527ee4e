"""The player entity.

Uses a Pydantic v2 BaseModel for validation and serialization, like the
rest of the session state.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from minidungeon.sim.core.geometry import Position

MIN_HP = 0
MAX_HP = 10


class Player(BaseModel):
    """The single actor moving through the dungeon."""

    position: Position = Field(default_factory=lambda: Position(0, 0))
    hp: int = Field(default=MAX_HP, ge=MIN_HP, le=MAX_HP)
    score: int = 0
    steps: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)

    # -- HP queries ----------------------------------------------------------

    @property
    def is_dead(self) -> bool:
        return self.hp <= MIN_HP

    # -- damage / heal -------------------------------------------------------

    def modify_hp(self, amount: int) -> int:
        """Change HP by *amount*, clamped to ``[MIN_HP, MAX_HP]``.

        Returns the actual change applied.
        """
        before = self.hp
        self.hp = max(MIN_HP, min(MAX_HP, self.hp + amount))
        return self.hp - before

    def take_damage(self, amount: int) -> int:
        """Apply *amount* damage.  Returns the HP actually lost."""
        if amount <= 0:
            return 0
        return -self.modify_hp(-amount)

    def heal(self, amount: int) -> int:
        """Heal *amount* HP, capped at ``MAX_HP``.  Returns HP gained."""
        if amount <= 0:
            return 0
        return self.modify_hp(amount)

    # -- progress ------------------------------------------------------------

    def add_score(self, points: int) -> None:
        self.score += points

    def increment_steps(self) -> None:
        self.steps += 1
