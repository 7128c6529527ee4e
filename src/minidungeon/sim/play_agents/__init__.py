"""Headless play agents."""

from minidungeon.sim.play_agents.base import PlayAgent
from minidungeon.sim.play_agents.heuristic_agent import HeuristicAgent
from minidungeon.sim.play_agents.random_agent import RandomAgent

__all__ = ["HeuristicAgent", "PlayAgent", "RandomAgent"]
