"""
antfarm/shared/models.py
────────────────────────
The data structures shared by the reader, the core and the CLI.

Design philosophy
-----------------
A colony is small: tens of rooms, a handful of tunnels each. Rooms are
therefore keyed by name and adjacency is a plain name → neighbour-list
dict. No integer arena, no graph library. A dict lookup per step is
all the traversal needs.

Reading guide
-------------
Read top-to-bottom. Each model builds on the ones above it.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


# ─────────────────────────────────────────────────────────────────────────────
# SECTION 1: ENUMERATIONS
# ─────────────────────────────────────────────────────────────────────────────

class RoomKind(str, Enum):
    """
    The role a room plays in the colony.

    START    → Where every ant begins. No occupancy limit.
    END      → Where every ant finishes. No occupancy limit.
    ORDINARY → Everything else. Holds at most one ant at a time.
    """
    START = "start"
    END = "end"
    ORDINARY = "ordinary"


# ─────────────────────────────────────────────────────────────────────────────
# SECTION 2: COLONY
# ─────────────────────────────────────────────────────────────────────────────

class Room(BaseModel):
    """
    One room of the colony.

    The coordinates are display metadata only: neither the path finder
    nor the simulator reads them. `occupied` exists for completeness of
    the description; the simulator keeps its own occupancy table.
    """
    name: str = Field(..., min_length=1, description="Unique room name")
    x: int = Field(0, description="Horizontal coordinate (display only)")
    y: int = Field(0, description="Vertical coordinate (display only)")
    kind: RoomKind = Field(RoomKind.ORDINARY, description="start, end or ordinary")
    occupied: bool = Field(False, description="Unused by the simulator")


class ColonyGraph(BaseModel):
    """
    Rooms, tunnels, and the two distinguished rooms.

    Fields:
        rooms   → name → Room. Includes the start and end rooms.
        tunnels → name → neighbour names, in insertion order.
                  Insertion order decides BFS tie-breaks, so it is kept
                  exactly as declared (duplicates included).
        start   → The start room.
        end     → The end room.

    Tunnels may reference names that never had a room line. The adjacency
    dict is authoritative for traversal; `rooms` is only for lookups.

    Built once by the reader via connect(); read-only afterwards.
    """
    rooms: Dict[str, Room] = Field(default_factory=dict)
    tunnels: Dict[str, List[str]] = Field(default_factory=dict)
    start: Room
    end: Room

    def connect(self, a: str, b: str) -> None:
        """Record the tunnel a-b in both directions."""
        self.tunnels.setdefault(a, []).append(b)
        self.tunnels.setdefault(b, []).append(a)

    def neighbours(self, name: str) -> List[str]:
        """Neighbour names of `name` in declaration order. Empty if none."""
        return self.tunnels.get(name, [])

    def is_start(self, name: str) -> bool:
        return name == self.start.name

    def is_end(self, name: str) -> bool:
        return name == self.end.name

    def has_room(self, name: str) -> bool:
        """True if `name` was declared as a room or appears in any tunnel."""
        return name in self.rooms or name in self.tunnels

    def are_adjacent(self, a: str, b: str) -> bool:
        return b in self.tunnels.get(a, ())

    @property
    def tunnel_count(self) -> int:
        """Number of declared tunnels (each stored twice, once per direction)."""
        return sum(len(n) for n in self.tunnels.values()) // 2

    def __repr__(self) -> str:
        return (
            f"ColonyGraph(rooms={len(self.rooms)}, tunnels={self.tunnel_count}, "
            f"start={self.start.name!r}, end={self.end.name!r})"
        )


class ColonyDescription(BaseModel):
    """A parsed colony file: the graph plus the number of ants to send."""
    colony: ColonyGraph
    ant_count: int = Field(..., ge=1, description="Population size")


# ─────────────────────────────────────────────────────────────────────────────
# SECTION 3: MOVES
# ─────────────────────────────────────────────────────────────────────────────

MOVE_PREFIX: str = "L"
"""Prefix of every move token: L<ant_id>-<room>."""


class MoveRecord(BaseModel):
    """One ant entering one room during one turn."""
    ant_id: int = Field(..., ge=1)
    room: str = Field(..., min_length=1)

    def __str__(self) -> str:
        return f"{MOVE_PREFIX}{self.ant_id}-{self.room}"


class TurnMoves(BaseModel):
    """
    Every move made in one turn, in ascending ant-ID order.

    Fields:
        turn  → 1-based turn number.
        moves → Move records in the order the ants were processed.
    """
    turn: int = Field(..., ge=1)
    moves: List[MoveRecord] = Field(default_factory=list)

    def render(self) -> str:
        """The output line for this turn: move tokens joined by one space."""
        return " ".join(str(m) for m in self.moves)


Path = List[str]
"""Room names from start to end inclusive; consecutive names are adjacent."""
