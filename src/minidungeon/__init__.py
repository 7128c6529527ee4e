"""minidungeon -- a deterministic, seeded dungeon-crawl simulator."""

__version__ = "0.1.0"
