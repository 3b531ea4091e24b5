"""
Shared utilities (NOT business logic).

Usage:
    from pace_planner.shared import RaceDistance, format_clock
    from pace_planner.shared.formatters import parse_clock
"""
from .formatters import (
    format_pace,
    format_clock,
    parse_clock,
)
from .constants import (
    RaceDistance,
    RACE_DISTANCE_KM,
    RACE_DISTANCE_LABELS,
)

__all__ = [
    # formatters
    "format_pace",
    "format_clock",
    "parse_clock",
    # constants
    "RaceDistance",
    "RACE_DISTANCE_KM",
    "RACE_DISTANCE_LABELS",
]
