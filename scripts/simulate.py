"""Run a batch of headless games and summarise the results.

Usage:
    uv run python scripts/simulate.py [--games 1000] [--difficulty 2] [--agent heuristic]
        [--seed 42] [--parallel] [--output results.json] [--verbose]
"""

from __future__ import annotations

import argparse
import json
import logging
import time
from collections import Counter
from dataclasses import asdict
from pathlib import Path

from minidungeon.sim.play_agents import HeuristicAgent, RandomAgent
from minidungeon.sim.runner import BatchRunner

_AGENTS = {"random": RandomAgent, "heuristic": HeuristicAgent}


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate dungeon games")
    parser.add_argument("--games", type=int, default=1000, help="Number of games")
    parser.add_argument("--difficulty", type=int, default=1, help="Difficulty level (>= 1)")
    parser.add_argument("--agent", choices=sorted(_AGENTS), default="heuristic", help="Play agent")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--parallel", action="store_true", help="Use a process pool")
    parser.add_argument("--output", type=str, default=None, help="Write per-game telemetry JSON here")
    parser.add_argument("--verbose", action="store_true", help="Log every game event")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    runner = BatchRunner(agent_class=_AGENTS[args.agent])
    print(f"Running {args.games:,} games (difficulty {args.difficulty}, {args.agent} agent)...")
    t0 = time.perf_counter()
    telemetry = runner.run_batch(
        args.games,
        difficulty=args.difficulty,
        base_seed=args.seed,
        parallel=args.parallel,
    )
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")

    results = Counter(t.result for t in telemetry)
    print()
    for result, count in results.most_common():
        print(f"  {result:<16} {count:>6} ({count / len(telemetry) * 100:.1f}%)")
    print(f"  avg score        {sum(t.final_score for t in telemetry) / len(telemetry):.2f}")
    print(f"  avg steps        {sum(t.steps for t in telemetry) / len(telemetry):.2f}")

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps([asdict(t) for t in telemetry], indent=2))
        print(f"Saved telemetry to {out_path}")


if __name__ == "__main__":
    main()
