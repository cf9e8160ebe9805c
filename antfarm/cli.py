"""
antfarm/cli.py
──────────────
Command line entry point.

    antfarm colony.txt              # move lines on stdout
    antfarm colony.txt --log-level INFO

stdout carries only move lines, or the one error line on failure;
logging goes to stderr. Exit status is 0 on success, 1 on any error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from antfarm.pipeline import AntFarmService, InvalidFormatError, MissingEndpointError
from farm_core import NoPathFoundError

logger = logging.getLogger(__name__)

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="antfarm",
        description="Send ants from ##start to ##end along the shortest path.",
    )
    ap.add_argument("colony_file", help="colony description file")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="stderr logging level (default: WARNING)",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    service = AntFarmService(emit=print)
    try:
        report = service.run_file(args.colony_file)
    except (InvalidFormatError, MissingEndpointError, NoPathFoundError) as exc:
        logger.debug("Run aborted: %r", exc)
        print(exc)
        return 1
    except OSError as exc:
        print(f"ERROR: cannot read {args.colony_file}: {exc.strerror}")
        return 1

    logger.info(
        "%d ant(s) arrived in %d turn(s)", len(report.arrivals), report.turns,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
