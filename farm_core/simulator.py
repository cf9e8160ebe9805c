"""
farm_core/simulator.py
──────────────────────
The MovementSimulator: drives every ant along the path, turn by turn.

How one turn works
───────────────────
  1. Start with an empty move list.
  2. Visit every ant in ascending ID order:
       • In the start room → try to enter path[1].
       • On the path       → try to enter the next room, releasing the
                             current one on success.
       • In the end room   → skip. Finished ants never move again.
     A step succeeds only if the destination is free in the occupancy
     table (the end room always is).
  3. If anything moved, emit the turn's line: move tokens joined by a
     single space, in the order the ants were visited.
  4. If nothing moved, stop. The empty turn emits nothing.

Same-turn visibility
─────────────────────
Occupancy updates apply immediately. When ant 1 leaves room A for the
end room, ant 2 (visited after ant 1 in the same turn) already sees A
as free and walks in. With path [start, A, end] and 2 ants:

    L1-A
    L1-end L2-A
    L2-end

Termination
────────────
Every successful step raises one ant's position by one, and positions
are bounded by len(path) - 1. Every turn that does not stop the loop
moves at least one ant, so the loop ends after at most
ant_count + len(path) turns.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterator, List, Sequence

from antfarm.shared.models import MoveRecord, Path, TurnMoves
from antfarm.shared.telemetry import SimulationReport
from farm_core.ant import Ant
from farm_core.occupancy import MIN_PATH_LENGTH, OccupancyTable

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]
"""Receives one rendered output line per productive turn."""


class MovementSimulator:
    """
    Turn-synchronous scheduler for a population of ants on one path.

    Usage:
        sim    = MovementSimulator(path, ant_count=3)
        report = sim.run(emit=print)

    Or, to inspect state between turns:
        for turn in sim.turns():
            ...  # sim.ants and sim.occupancy reflect the end of `turn`

    The simulator is single-use: create a new one per run.

    Attributes:
        path:      The room sequence, start to end.
        ant_count: Population size.
        ants:      Ant objects in ID order.
        occupancy: The OccupancyTable for this run.
        report:    Counters filled in as turns are produced.
    """

    def __init__(self, path: Sequence[str], ant_count: int) -> None:
        """
        Raises:
            ValueError: if the path has fewer than two rooms or
                        ant_count is below 1. Both are caller bugs.
        """
        if len(path) < MIN_PATH_LENGTH:
            raise ValueError(
                f"MovementSimulator requires a path of at least "
                f"{MIN_PATH_LENGTH} rooms, got {len(path)}"
            )
        if ant_count < 1:
            raise ValueError(f"MovementSimulator requires at least one ant, got {ant_count}")

        self.path: Path = list(path)
        self.ant_count = ant_count
        self.ants: List[Ant] = [Ant(i, self.path) for i in range(1, ant_count + 1)]
        self.occupancy = OccupancyTable(self.path)
        self.report = SimulationReport(path=self.path, ant_count=ant_count)

        # Counts down as ants leave the start room. Reported, never consulted.
        self._start_release_remaining = ant_count
        self._started = False

    # ── One ant, one step ──────────────────────────────────────────────────────

    def _try_step(self, ant: Ant) -> bool:
        """
        Move `ant` one room forward if the destination is free.

        Returns True if the ant moved. Leaves all state untouched otherwise.
        """
        destination = ant.next_room
        if destination is None or not self.occupancy.is_free(destination):
            return False

        if ant.at_start:
            self._start_release_remaining -= 1
        else:
            self.occupancy.release(ant.room)

        self.occupancy.occupy(destination)
        ant.advance()
        return True

    # ── Turn loop ──────────────────────────────────────────────────────────────

    def turns(self) -> Iterator[TurnMoves]:
        """
        Yield one TurnMoves per turn in which at least one ant moved.

        Stops at the first turn where nothing moves; that turn is not
        yielded.
        """
        if self._started:
            raise RuntimeError("MovementSimulator is single-use; create a new one")
        self._started = True

        turn_no = 0
        while True:
            turn_no += 1
            turn = TurnMoves(turn=turn_no)

            for ant in self.ants:
                if ant.finished:
                    continue
                if self._try_step(ant):
                    turn.moves.append(MoveRecord(ant_id=ant.ant_id, room=ant.room))
                    if ant.finished:
                        self.report.arrivals[ant.ant_id] = turn_no

            if not turn.moves:
                logger.debug("Turn %d: no ant could move, stopping", turn_no)
                return

            self.report.turns = turn_no
            self.report.total_moves += len(turn.moves)
            self.report.ants_released = self.ant_count - self._start_release_remaining
            logger.debug(
                "Turn %d: %d move(s), occupied=%s",
                turn_no, len(turn.moves), self.occupancy.occupied_rooms(),
            )
            yield turn

    def run(self, emit: Emitter = print) -> SimulationReport:
        """
        Drive the turn loop to completion, emitting each turn's line.

        Args:
            emit: Called once per productive turn with the rendered line.

        Returns:
            The SimulationReport for this run (counters only).
        """
        started = time.perf_counter()
        for turn in self.turns():
            emit(turn.render())
        self.report.duration_ms = (time.perf_counter() - started) * 1000.0

        logger.info(
            "Simulation finished: %d ant(s), %d turn(s), %d move(s)",
            self.ant_count, self.report.turns, self.report.total_moves,
        )
        return self.report

    def __repr__(self) -> str:
        return (
            f"MovementSimulator(path_length={len(self.path)}, "
            f"ants={self.ant_count}, turns={self.report.turns})"
        )


def simulate(path: Sequence[str], ant_count: int, emit: Emitter = print) -> SimulationReport:
    """Run a fresh MovementSimulator over `path` and emit every turn's line."""
    return MovementSimulator(path, ant_count).run(emit=emit)
