"""
antfarm/shared/telemetry.py
───────────────────────────
SimulationReport: what one simulation run did, after the fact.

Why this is a separate file from models.py
------------------------------------------
models.py describes the colony and the moves as they happen.
telemetry.py summarises a finished run. The simulator builds it while
the turn loop drives output, so it carries counters only, never the
move lists themselves.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class SimulationReport(BaseModel):
    """
    Summary of one MovementSimulator.run() call.

    Fields:
        path           → The room sequence the ants walked.
        ant_count      → Population size.
        turns          → Number of turns that produced a move line.
        total_moves    → Move tokens emitted across all turns.
        arrivals       → ant_id → turn on which that ant entered the end room.
        ants_released  → Ants that left the start room. Starts at zero and
                         counts up; it never gates a move.
        duration_ms    → Wall-clock time of the run.
    """
    path: List[str] = Field(default_factory=list)
    ant_count: int = Field(0, ge=0)
    turns: int = Field(0, ge=0)
    total_moves: int = Field(0, ge=0)
    arrivals: Dict[int, int] = Field(default_factory=dict)
    ants_released: int = Field(0, ge=0)
    duration_ms: float = Field(0.0, ge=0.0)

    @property
    def all_arrived(self) -> bool:
        """True once every ant has reached the end room."""
        return len(self.arrivals) == self.ant_count

    @property
    def moves_per_turn(self) -> float:
        if self.turns == 0:
            return 0.0
        return self.total_moves / self.turns
