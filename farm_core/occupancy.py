"""
farm_core/occupancy.py
──────────────────────
OccupancyTable: which ordinary rooms on the path currently hold an ant.

What the table stores
──────────────────────
A boolean vector with one cell per path position:

    path      = ["start", "a", "b", "end"]
    _occupied = [ False,  True, False, False ]
                   ^                     ^
                   never set             never set

The start and end rooms have no capacity limit, so their cells stay
False forever and is_free() always answers True for them. Every other
cell flips to True when an ant enters and back to False when it leaves.

Room names are translated to positions through a dict built once in
__init__, O(1) per lookup. A BFS path never repeats a room, so the
mapping is one-to-one.

Thread safety:
    None needed. The simulator mutates the table from one loop, one ant
    at a time, and later ants in a turn see what earlier ants changed.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np
from numpy.typing import NDArray

MIN_PATH_LENGTH: int = 2
"""A path needs at least a start and an end room."""


class OccupancyTable:
    """
    Single-occupancy bookkeeping for the ordinary rooms of one path.

    Used by:
        MovementSimulator → is_free() before each step, then occupy()/release().
        Tests             → snapshot() / occupied_rooms() between turns.
    """

    def __init__(self, path: Sequence[str]) -> None:
        """
        Args:
            path: Room names from start to end. At least MIN_PATH_LENGTH long.

        Raises:
            ValueError: if the path is too short.
        """
        if len(path) < MIN_PATH_LENGTH:
            raise ValueError(
                f"OccupancyTable requires a path of at least {MIN_PATH_LENGTH} "
                f"rooms, got {len(path)}"
            )
        self._path = list(path)
        self._index: Dict[str, int] = {room: i for i, room in enumerate(self._path)}
        self._last = len(self._path) - 1
        self._occupied: NDArray[np.bool_] = np.zeros(len(self._path), dtype=np.bool_)

    # ── Queries ────────────────────────────────────────────────────────────────

    def is_limited(self, room: str) -> bool:
        """True for ordinary rooms on the path: the ones holding one ant at most."""
        idx = self._index.get(room)
        return idx is not None and 0 < idx < self._last

    def is_free(self, room: str) -> bool:
        """True if an ant may enter `room` right now."""
        if not self.is_limited(room):
            return True
        return not bool(self._occupied[self._index[room]])

    def is_occupied(self, room: str) -> bool:
        return not self.is_free(room)

    def occupied_rooms(self) -> List[str]:
        """Names of the currently occupied rooms, in path order."""
        return [self._path[i] for i in np.flatnonzero(self._occupied)]

    def snapshot(self) -> NDArray[np.bool_]:
        """A copy of the occupancy vector. Mutating it does not affect the table."""
        return self._occupied.copy()

    # ── Mutations ──────────────────────────────────────────────────────────────

    def occupy(self, room: str) -> None:
        """
        Mark `room` as holding an ant. No-op for start and end.

        Raises:
            RuntimeError: if the room is already occupied. The simulator
                          checks is_free() first, so this means a bug.
        """
        if not self.is_limited(room):
            return
        idx = self._index[room]
        if self._occupied[idx]:
            raise RuntimeError(f"Room {room!r} is already occupied")
        self._occupied[idx] = True

    def release(self, room: str) -> None:
        """Mark `room` as empty. No-op for start and end."""
        if self.is_limited(room):
            self._occupied[self._index[room]] = False

    @property
    def occupied_count(self) -> int:
        return int(self._occupied.sum())

    def __repr__(self) -> str:
        return (
            f"OccupancyTable(path_length={len(self._path)}, "
            f"occupied={self.occupied_rooms()})"
        )
