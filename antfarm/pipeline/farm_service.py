"""
antfarm/pipeline/farm_service.py
────────────────────────────────
AntFarmService: load a colony, find the path, run the simulation.

Pipeline
─────────
    lines ──► parse_colony() ──► find_path() ──► MovementSimulator.run()
               │                  │                │
               InvalidFormatError NoPathFoundError emit(line) per turn
               MissingEndpointError

Every error is terminal and is raised before the first emit() call, so
a failed run never produces partial output. The service does not catch
them; the CLI decides how to report them.
"""

from __future__ import annotations

import logging
from pathlib import Path as FilePath
from typing import Iterable, Optional, Union

from antfarm.pipeline.colony_parser import load_colony, parse_colony
from antfarm.shared.models import ColonyDescription, Path
from antfarm.shared.telemetry import SimulationReport
from farm_core import MovementSimulator, PathFinder
from farm_core.simulator import Emitter

logger = logging.getLogger(__name__)


class AntFarmService:
    """
    Runs one colony description end to end.

    Public API:
        run_file(path, emit)   → SimulationReport
        run_lines(lines, emit) → SimulationReport
        run(description, emit) → SimulationReport

    Attributes:
        last_path:   The path used by the most recent run, or None.
        last_report: The report of the most recent run, or None.
    """

    def __init__(self, emit: Emitter = print) -> None:
        self._emit = emit
        self.last_path: Optional[Path] = None
        self.last_report: Optional[SimulationReport] = None

    def run_file(
        self,
        path: Union[str, FilePath],
        emit: Optional[Emitter] = None,
    ) -> SimulationReport:
        logger.info("Loading colony from %s", path)
        return self.run(load_colony(path), emit)

    def run_lines(
        self,
        lines: Iterable[str],
        emit: Optional[Emitter] = None,
    ) -> SimulationReport:
        return self.run(parse_colony(lines), emit)

    def run(
        self,
        description: ColonyDescription,
        emit: Optional[Emitter] = None,
    ) -> SimulationReport:
        """
        Find the path through `description.colony` and simulate the ants.

        Raises:
            NoPathFoundError: if start and end are not connected.
        """
        finder = PathFinder(description.colony)
        path = finder.find()
        self.last_path = path
        logger.info(
            "Path found: %s (%d move(s) per ant, %d room(s) visited, %.2fms)",
            " -> ".join(path), len(path) - 1, finder.rooms_visited, finder.last_run_ms,
        )

        simulator = MovementSimulator(path, description.ant_count)
        report = simulator.run(emit=emit or self._emit)
        self.last_report = report
        return report
