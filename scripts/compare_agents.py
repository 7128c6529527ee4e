"""Compare RandomAgent vs HeuristicAgent across difficulty levels.

Usage:
    uv run python scripts/compare_agents.py [--games N] [--max-difficulty D]
"""

from __future__ import annotations

import argparse
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from minidungeon.sim.play_agents.heuristic_agent import HeuristicAgent
from minidungeon.sim.play_agents.random_agent import RandomAgent
from minidungeon.sim.runner import BatchRunner


def run_comparison(n_games: int = 500, max_difficulty: int = 5) -> None:
    difficulties = list(range(1, max_difficulty + 1))
    results = {}
    for label, agent_class in [("RandomAgent", RandomAgent), ("HeuristicAgent", HeuristicAgent)]:
        runner = BatchRunner(agent_class=agent_class)
        per_difficulty = {}
        for difficulty in difficulties:
            print(f"Running {n_games} games with {label} at difficulty {difficulty}...")
            t0 = time.time()
            telemetry = runner.run_batch(n_games, difficulty=difficulty, base_seed=0)
            elapsed = time.time() - t0

            wins = sum(1 for t in telemetry if t.won)
            scores = [t.final_score for t in telemetry]
            steps = [t.steps for t in telemetry]
            per_difficulty[difficulty] = {
                "win_rate": wins / n_games * 100,
                "scores": scores,
                "steps": steps,
                "elapsed": elapsed,
            }
            print(f"  Win rate: {wins}/{n_games} ({wins / n_games * 100:.1f}%)")
            print(f"  Avg score: {np.mean(scores):.1f}  Avg steps: {np.mean(steps):.1f}")
        results[label] = per_difficulty

    generate_charts(results, difficulties, n_games)


def generate_charts(results: dict, difficulties: list[int], n_games: int) -> None:
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    fig.suptitle(f"RandomAgent vs HeuristicAgent: {n_games} games per difficulty", fontsize=16, fontweight="bold")

    colors = {"RandomAgent": "#e74c3c", "HeuristicAgent": "#2ecc71"}

    # --- Chart 1: Win Rate ---
    ax = axes[0]
    for label, per_difficulty in results.items():
        rates = [per_difficulty[d]["win_rate"] for d in difficulties]
        ax.plot(difficulties, rates, marker="o", label=label, color=colors[label])
    ax.set_xlabel("Difficulty")
    ax.set_ylabel("Win Rate (%)")
    ax.set_title("Win Rate by Difficulty")
    ax.set_xticks(difficulties)
    ax.legend()

    # --- Chart 2: Mean Score ---
    ax = axes[1]
    width = 0.35
    x = np.arange(len(difficulties))
    for i, (label, per_difficulty) in enumerate(results.items()):
        means = [np.mean(per_difficulty[d]["scores"]) for d in difficulties]
        ax.bar(x + (i - 0.5) * width, means, width, label=label,
               color=colors[label], edgecolor="black", linewidth=0.5)
    ax.set_xticks(x)
    ax.set_xticklabels([str(d) for d in difficulties])
    ax.set_xlabel("Difficulty")
    ax.set_ylabel("Mean Final Score")
    ax.set_title("Score by Difficulty")
    ax.legend()

    # --- Chart 3: Steps Distribution (hardest difficulty) ---
    ax = axes[2]
    hardest = difficulties[-1]
    bins = np.arange(0, 105, 5)
    for label, per_difficulty in results.items():
        steps = per_difficulty[hardest]["steps"]
        ax.hist(steps, bins=bins, alpha=0.6, label=f"{label} (avg={np.mean(steps):.1f})",
                color=colors[label], edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Steps Taken")
    ax.set_ylabel("Count")
    ax.set_title(f"Steps Distribution (difficulty {hardest})")
    ax.legend()

    plt.tight_layout()
    out_path = "agent_comparison.png"
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--games", type=int, default=500, help="Number of games per agent and difficulty")
    parser.add_argument("--max-difficulty", type=int, default=5, help="Highest difficulty to simulate")
    args = parser.parse_args()
    run_comparison(args.games, args.max_difficulty)
