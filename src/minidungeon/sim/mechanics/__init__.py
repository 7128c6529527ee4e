"""Game mechanics: cell entry effects, ranged combat and level progression."""

from minidungeon.sim.mechanics.cell_effects import on_enter
from minidungeon.sim.mechanics.progression import WINNING_LEVEL, advance_level
from minidungeon.sim.mechanics.ranged import can_shoot_at, run_reaction_pass, shoot_at

__all__ = [
    "WINNING_LEVEL",
    "advance_level",
    "can_shoot_at",
    "on_enter",
    "run_reaction_pass",
    "shoot_at",
]
