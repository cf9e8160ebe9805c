"""
farm_core/pathfinder.py
───────────────────────
Breadth-first search for one shortest route from start to end.

How the search works
─────────────────────
Every queue entry is a whole partial path, not just its last room:

    queue = [[start]]
    pop [start]           → push [start, a], [start, b]
    pop [start, a]        → push [start, a, c]
    ...
    pop [start, ..., end] → return it

Carrying the path means the winning entry IS the answer: no parent
pointers, no reconstruction pass. Each extension copies the path
(O(L)), which is fine at colony scale.

Visited is marked on ENQUEUE, not on dequeue. A room can therefore sit
in the queue at most once, each room is expanded at most once, and the
first entry ending at the end room is a shortest path by edge count.

Tie-breaks
───────────
Neighbours are pushed in adjacency-list order, i.e. the order the
tunnels were declared. Among several shortest paths, the one this order
reaches first wins. That is deterministic for a given file but carries
no further meaning.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Deque, List, Set

from antfarm.shared.models import ColonyGraph, Path

logger = logging.getLogger(__name__)


class NoPathFoundError(Exception):
    """
    Raised when the end room cannot be reached from the start room.

    Caller contract:
        Terminal. The simulation must not run and nothing is emitted.

    Attributes:
        start: Name of the start room.
        end:   Name of the end room.
        rooms_visited: How many rooms the search reached before giving up.
    """

    def __init__(self, start: str, end: str, rooms_visited: int = 0) -> None:
        self.start = start
        self.end = end
        self.rooms_visited = rooms_visited
        super().__init__("ERROR: no path found between ##start and ##end")


class PathFinder:
    """
    Finds one shortest start → end path in a ColonyGraph.

    Usage:
        finder = PathFinder(colony)
        path   = finder.find()      # ["start", "a", ..., "end"]

    After find():
        finder.rooms_visited → rooms marked visited during the search.
        finder.last_run_ms   → wall-clock time of the last find() call.
    """

    def __init__(self, colony: ColonyGraph) -> None:
        self._colony = colony
        self.rooms_visited: int = 0
        self.last_run_ms: float = 0.0

    def find(self) -> Path:
        """
        Run the search.

        Returns:
            Room names from start to end inclusive.

        Raises:
            NoPathFoundError: if the queue drains without reaching the end.
        """
        started = time.perf_counter()
        start = self._colony.start.name
        end = self._colony.end.name

        queue: Deque[List[str]] = deque([[start]])
        visited: Set[str] = {start}

        try:
            while queue:
                path = queue.popleft()
                room = path[-1]

                if room == end:
                    logger.debug(
                        "Shortest path found: %d rooms, %d visited",
                        len(path), len(visited),
                    )
                    return path

                for neighbour in self._colony.neighbours(room):
                    if neighbour not in visited:
                        visited.add(neighbour)
                        queue.append(path + [neighbour])
        finally:
            self.rooms_visited = len(visited)
            self.last_run_ms = (time.perf_counter() - started) * 1000.0

        raise NoPathFoundError(start, end, rooms_visited=len(visited))

    def __repr__(self) -> str:
        return (
            f"PathFinder(colony={self._colony!r}, "
            f"rooms_visited={self.rooms_visited}, "
            f"last_run_ms={self.last_run_ms:.2f})"
        )


def find_path(colony: ColonyGraph) -> Path:
    """Shortest start → end path in `colony`. Raises NoPathFoundError."""
    return PathFinder(colony).find()
