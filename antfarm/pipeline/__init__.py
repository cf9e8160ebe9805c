"""
antfarm/pipeline — from colony file to move lines.

Public API:
    parse_colony()          — lines → ColonyDescription
    load_colony()           — file path → ColonyDescription
    InvalidFormatError      — malformed line or inconsistent description
    MissingEndpointError    — no ##start or no ##end room
    AntFarmService          — parse, find the path, simulate
"""

from antfarm.pipeline.colony_parser import (
    InvalidFormatError,
    MissingEndpointError,
    load_colony,
    parse_colony,
)
from antfarm.pipeline.farm_service import AntFarmService

__all__ = [
    "parse_colony",
    "load_colony",
    "InvalidFormatError",
    "MissingEndpointError",
    "AntFarmService",
]
