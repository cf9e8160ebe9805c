"""
farm_core/ant.py
────────────────
One ant: an ID and a position index into the shared path.

Position model
───────────────
    position = 0               → in the start room
    0 < position < last        → in an ordinary room on the path
    position = len(path) - 1   → in the end room (finished)

The position only ever grows, by at most one per turn. The ant itself
never checks occupancy; the simulator decides whether a step is
allowed and only then calls advance().
"""

from __future__ import annotations

from typing import Optional, Sequence


class Ant:
    """
    A single ant walking a fixed path.

    Attributes:
        ant_id:   1-based identifier, assigned in population order.
        position: Index into `path`. Starts at 0.
    """

    def __init__(self, ant_id: int, path: Sequence[str]) -> None:
        if ant_id < 1:
            raise ValueError(f"Ant IDs start at 1, got {ant_id}")
        self.ant_id = ant_id
        self._path = path
        self.position: int = 0

    @property
    def room(self) -> str:
        """Name of the room the ant is in now."""
        return self._path[self.position]

    @property
    def at_start(self) -> bool:
        return self.position == 0

    @property
    def finished(self) -> bool:
        """True once the ant is in the end room. Finished ants never move."""
        return self.position == len(self._path) - 1

    @property
    def next_room(self) -> Optional[str]:
        """The room one step ahead, or None if the ant has finished."""
        if self.finished:
            return None
        return self._path[self.position + 1]

    def advance(self) -> str:
        """
        Step one room forward and return the room entered.

        Raises:
            RuntimeError: if the ant has already finished. The simulator
                          never calls advance() on a finished ant.
        """
        if self.finished:
            raise RuntimeError(f"Ant {self.ant_id} has already reached the end room")
        self.position += 1
        return self._path[self.position]

    def __repr__(self) -> str:
        return f"Ant(id={self.ant_id}, position={self.position}, room={self.room!r})"
