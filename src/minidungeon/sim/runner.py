"""Headless game runner -- ties sessions, play agents and telemetry together.

Provides:

- **play_game**: drives one session to completion with a play agent.
- **BatchRunner**: orchestrates many games (optionally in parallel).

Each game owns its own session; agents draw from a fork of the session
seed so that their choices never consume the session's RNG.
"""

from __future__ import annotations

import inspect
import logging
import multiprocessing

from minidungeon.sim.core.game_state import GameSession
from minidungeon.sim.core.rng import GameRNG
from minidungeon.sim.engine import move, new_session
from minidungeon.sim.play_agents.base import PlayAgent
from minidungeon.sim.play_agents.random_agent import RandomAgent
from minidungeon.sim.telemetry import GameTelemetry

logger = logging.getLogger(__name__)

_MAX_TURNS = 1000


def play_game(
    session: GameSession,
    agent: PlayAgent,
    max_turns: int = _MAX_TURNS,
) -> GameTelemetry:
    """Let *agent* play *session* until it ends or *max_turns* attempts pass.

    *max_turns* counts attempted moves, including rejected ones.
    """
    telemetry = GameTelemetry(seed=session.seed, difficulty=session.difficulty)

    for _ in range(max_turns):
        if session.is_over:
            break
        result = move(session, agent.choose_direction(session))
        if not result.moved:
            telemetry.rejected_moves += 1
            continue
        telemetry.hp_at_each_step.append(session.player.hp)
        for event in result.events:
            key = event.kind.value
            telemetry.events_by_kind[key] = telemetry.events_by_kind.get(key, 0) + 1
    else:
        if not session.is_over:
            logger.warning(
                "Game seed=%d hit the %d turn limit before ending",
                session.seed,
                max_turns,
            )

    player = session.player
    if session.over_reason is not None:
        telemetry.result = session.over_reason.value.lower()
    telemetry.final_score = player.score
    telemetry.final_hp = player.hp
    telemetry.steps = player.steps
    telemetry.level_reached = player.level
    return telemetry


def _make_agent(agent_class: type[PlayAgent], seed: int) -> PlayAgent:
    """Build an agent, handing it a forked RNG if it accepts ``rng``."""
    if "rng" in inspect.signature(agent_class).parameters:
        return agent_class(rng=GameRNG(seed).fork("agent"))  # type: ignore[call-arg]
    return agent_class()


def _run_single_game(
    agent_class: type[PlayAgent],
    seed: int,
    difficulty: int,
) -> GameTelemetry:
    session = new_session(difficulty, seed)
    return play_game(session, _make_agent(agent_class, seed))


def _worker_run_single(args: tuple[type[PlayAgent], int, int]) -> GameTelemetry:
    """Top-level function for multiprocessing (must be picklable)."""
    agent_class, seed, difficulty = args
    return _run_single_game(agent_class, seed, difficulty)


class BatchRunner:
    """Runs multiple games, optionally in parallel."""

    def __init__(self, agent_class: type[PlayAgent] = RandomAgent) -> None:
        self.agent_class = agent_class

    def run_batch(
        self,
        n_games: int,
        difficulty: int = 1,
        base_seed: int = 42,
        parallel: bool = False,
    ) -> list[GameTelemetry]:
        """Play *n_games* games with seeds ``base_seed .. base_seed + n - 1``."""
        seeds = [base_seed + i for i in range(n_games)]

        if parallel and n_games > 1:
            return self._run_parallel(seeds, difficulty)
        return [
            _run_single_game(self.agent_class, seed, difficulty)
            for seed in seeds
        ]

    def _run_parallel(self, seeds: list[int], difficulty: int) -> list[GameTelemetry]:
        work_items = [(self.agent_class, seed, difficulty) for seed in seeds]
        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)

        with multiprocessing.Pool(processes=n_workers) as pool:
            results = pool.map(_worker_run_single, work_items)

        return results
