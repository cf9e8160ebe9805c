"""
antfarm/pipeline/colony_parser.py
─────────────────────────────────
Reads a colony description and builds the ColonyGraph.

The reader is the first gate in the pipeline. Nothing reaches the path
finder unless the whole file parsed cleanly.

File format
────────────
    3                 ← ant count (a bare integer)
    ##start           ← the next room line is the start room
    start 0 0         ← room: <name> <x> <y>
    ##end
    end 2 0
    a 1 0
    # anything else   ← comment
    start-a           ← tunnel: <name>-<name>
    a-end

What it checks
───────────────
  1. Line shape: every line is a marker, a comment, a tunnel, a room or
     the ant count. Anything malformed → InvalidFormatError.
  2. Unique room names: declaring a name twice → InvalidFormatError.
  3. Endpoints: both a start and an end room → else MissingEndpointError.
     They must be different rooms.
  4. Population: a positive ant count.

What it does NOT check
───────────────────────
  • Connectivity: that's the path finder's job (NoPathFoundError).
  • Tunnel endpoints: a tunnel may name rooms that never had a room
    line. The adjacency map is authoritative.
"""

from __future__ import annotations

import logging
from pathlib import Path as FilePath
from typing import Dict, Iterable, List, Optional, Tuple, Union

from antfarm.shared.models import ColonyDescription, ColonyGraph, Room, RoomKind

logger = logging.getLogger(__name__)

# ── Format tokens ──────────────────────────────────────────────────────────────

START_MARKER: str = "##start"
"""Marks the next room line as the start room."""

END_MARKER: str = "##end"
"""Marks the next room line as the end room."""

COMMENT_PREFIX: str = "#"
"""Any other line starting with this is ignored."""

TUNNEL_SEPARATOR: str = "-"
"""Separates the two room names of a tunnel line."""

RESERVED_NAME_PREFIXES: Tuple[str, ...] = ("L", "#")
"""Room names may not start with these: they would clash with move tokens or comments."""


class InvalidFormatError(Exception):
    """
    Raised when a line cannot be read, or the description is inconsistent.

    Attributes:
        reason:  What was wrong.
        line_no: 1-based line number, or None for whole-file problems.
        line:    The offending line (stripped), or None.
    """

    def __init__(
        self,
        reason: str,
        line_no: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.line_no = line_no
        self.line = line
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"ERROR: invalid data format ({where}{reason})")


class MissingEndpointError(Exception):
    """
    Raised when the description never declares a start or an end room.

    Attributes:
        missing_start: True if no ##start room was declared.
        missing_end:   True if no ##end room was declared.
    """

    def __init__(self, missing_start: bool, missing_end: bool) -> None:
        self.missing_start = missing_start
        self.missing_end = missing_end
        super().__init__("ERROR: missing ##start or ##end")


# ── Line readers ───────────────────────────────────────────────────────────────

def _parse_tunnel(line: str, line_no: int) -> Tuple[str, str]:
    parts = line.split(TUNNEL_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidFormatError("tunnel must be <name>-<name>", line_no, line)
    return parts[0], parts[1]


def _parse_room(line: str, line_no: int, kind: RoomKind) -> Room:
    fields = line.split()
    if len(fields) != 3:
        raise InvalidFormatError("room must be <name> <x> <y>", line_no, line)

    name, raw_x, raw_y = fields
    if name.startswith(RESERVED_NAME_PREFIXES) or TUNNEL_SEPARATOR in name:
        raise InvalidFormatError(f"invalid room name {name!r}", line_no, line)
    try:
        x, y = int(raw_x), int(raw_y)
    except ValueError:
        raise InvalidFormatError("room coordinates must be integers", line_no, line) from None

    return Room(name=name, x=x, y=y, kind=kind)


def _is_integer(line: str) -> bool:
    try:
        int(line)
    except ValueError:
        return False
    return True


def _parse_ant_count(line: str, line_no: int) -> int:
    try:
        return int(line)
    except ValueError:
        raise InvalidFormatError("expected the number of ants", line_no, line) from None


# ── Public API ─────────────────────────────────────────────────────────────────

def parse_colony(lines: Iterable[str]) -> ColonyDescription:
    """
    Build a ColonyDescription from the lines of a colony file.

    Args:
        lines: Raw lines, with or without trailing newlines.

    Returns:
        The colony graph and the ant count.

    Raises:
        InvalidFormatError:   on a malformed line or an inconsistent description.
        MissingEndpointError: if no start or no end room was declared.
    """
    rooms: Dict[str, Room] = {}
    tunnels: List[Tuple[str, str]] = []
    start: Optional[Room] = None
    end: Optional[Room] = None
    ant_count: Optional[int] = None
    pending: RoomKind = RoomKind.ORDINARY

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        if line.startswith(START_MARKER):
            pending = RoomKind.START
            continue
        if line.startswith(END_MARKER):
            pending = RoomKind.END
            continue
        if line.startswith(COMMENT_PREFIX):
            continue

        has_space = len(line.split()) > 1
        if not has_space and _is_integer(line):
            # "-5" is a bad ant count, not a tunnel
            ant_count = int(line)
        elif TUNNEL_SEPARATOR in line and not has_space:
            tunnels.append(_parse_tunnel(line, line_no))
        elif has_space:
            room = _parse_room(line, line_no, pending)
            if room.name in rooms:
                raise InvalidFormatError(f"duplicate room {room.name!r}", line_no, line)

            if pending == RoomKind.START:
                if start is not None:
                    logger.warning(
                        "Start room redeclared on line %d: %r replaces %r",
                        line_no, room.name, start.name,
                    )
                    rooms[start.name].kind = RoomKind.ORDINARY
                start = room
            elif pending == RoomKind.END:
                if end is not None:
                    logger.warning(
                        "End room redeclared on line %d: %r replaces %r",
                        line_no, room.name, end.name,
                    )
                    rooms[end.name].kind = RoomKind.ORDINARY
                end = room

            rooms[room.name] = room
            pending = RoomKind.ORDINARY
        else:
            ant_count = _parse_ant_count(line, line_no)

    if start is None or end is None:
        raise MissingEndpointError(start is None, end is None)
    if ant_count is None or ant_count < 1:
        raise InvalidFormatError(f"number of ants must be positive, got {ant_count}")

    colony = ColonyGraph(rooms=rooms, start=start, end=end)
    for a, b in tunnels:
        colony.connect(a, b)

    logger.info(
        "Colony parsed: %d room(s), %d tunnel(s), %d ant(s)",
        len(rooms), len(tunnels), ant_count,
    )
    return ColonyDescription(colony=colony, ant_count=ant_count)


def load_colony(path: Union[str, FilePath]) -> ColonyDescription:
    """Read and parse the colony file at `path` (UTF-8)."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            return parse_colony(f)
        except UnicodeDecodeError:
            raise InvalidFormatError("file is not valid UTF-8") from None
