"""
farm_core — path finding and movement simulation for an ant farm.

Public API:
    find_path          — shortest start → end room sequence (BFS)
    PathFinder         — the same search, with run statistics
    NoPathFoundError   — raised when end is unreachable from start
    MovementSimulator  — turn-by-turn single-path ant scheduler
    simulate           — run a MovementSimulator, emitting each turn's line

Usage:
    from farm_core import find_path, simulate, NoPathFoundError

    try:
        path = find_path(colony)
    except NoPathFoundError:
        ...                          # terminal; nothing is emitted
    report = simulate(path, ant_count, emit=print)
"""

from farm_core.pathfinder import NoPathFoundError, PathFinder, find_path
from farm_core.simulator import MovementSimulator, simulate

__all__ = [
    "find_path",
    "PathFinder",
    "NoPathFoundError",
    "MovementSimulator",
    "simulate",
]
