"""
PacingService - turns raw form input into a pacing plan.

Normalizes target-time fields and distance, then runs the calculator.
Malformed time fields become zero, which yields an empty plan rather
than an error. Only an unknown distance name raises.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from pace_planner.shared.constants import RaceDistance
from pace_planner.shared.formatters import format_clock

from .calculator import (
    PaceStrategy,
    animation_speed,
    base_pace,
    generate_pace_strategies,
)

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

DistanceInput = Union[RaceDistance, str, int, float]


def normalize_time_field(value) -> int:
    """
    Coerce one hours/minutes/seconds field to a non-negative int.

    "12"    → 12
    "12abc" → 12
    "abc"   → 0
    -3      → 0
    7.9     → 7
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if math.isfinite(value) else 0
    else:
        m = _LEADING_INT_RE.match(str(value))
        number = int(m.group(1)) if m else 0
    return max(0, number)


def target_seconds(hours=0, minutes=0, seconds=0) -> int:
    """Total target time in seconds. Fields are not wrapped at 60."""
    return (
        normalize_time_field(hours) * 3600
        + normalize_time_field(minutes) * 60
        + normalize_time_field(seconds)
    )


def resolve_distance(distance: DistanceInput) -> float:
    """
    Resolve a distance to kilometers.

    Args:
        distance: RaceDistance, its id ("21K"), or kilometers as a number

    Returns:
        Distance in km (may be non-positive for numeric input)

    Raises:
        ValueError: If a string is neither a known id nor a number
    """
    if isinstance(distance, RaceDistance):
        return distance.km
    if isinstance(distance, (int, float)) and not isinstance(distance, bool):
        try:
            return float(distance)
        except OverflowError:
            return math.inf

    text = str(distance).strip()
    for race_distance in RaceDistance:
        if text.upper() == race_distance.value:
            return race_distance.km
    try:
        return float(text)
    except ValueError:
        known = ", ".join(d.value for d in RaceDistance)
        raise ValueError(f"Unknown distance: {distance!r} (expected one of {known} or km)")


@dataclass
class PacingPlan:
    """Everything the planner derives from (target time, distance)."""
    target_seconds: int
    distance_km: float
    base_pace_seconds_per_km: Optional[float]
    animation_speed: float
    strategies: List[PaceStrategy] = field(default_factory=list)

    @property
    def target_time(self) -> str:
        return format_clock(self.target_seconds)

    @property
    def is_empty(self) -> bool:
        return not self.strategies

    def get_strategy(self, name: str) -> Optional[PaceStrategy]:
        """Find a strategy by display name or kind (case-insensitive)."""
        wanted = name.strip().lower()
        for strategy in self.strategies:
            if wanted in (strategy.name.lower(), strategy.kind.value):
                return strategy
        return None


class PacingService:
    """Builds pacing plans."""

    @staticmethod
    def plan(target: int, distance: DistanceInput) -> PacingPlan:
        """
        Build a pacing plan.

        Args:
            target: Target finish time in seconds (negatives clamp to 0)
            distance: Anything resolve_distance accepts

        Returns:
            PacingPlan; strategies are empty if time or distance is not positive
        """
        total = normalize_time_field(target)
        distance_km = resolve_distance(distance)

        strategies = generate_pace_strategies(total, distance_km)
        pace = base_pace(total, distance_km) if strategies else None

        if not strategies:
            logger.info(
                f"No strategies for target={total}s distance={distance_km}km"
            )
        else:
            logger.debug(
                f"Planned {len(strategies)} strategies: target={total}s "
                f"distance={distance_km}km base_pace={pace:.1f}s/km"
            )

        return PacingPlan(
            target_seconds=total,
            distance_km=distance_km,
            base_pace_seconds_per_km=pace,
            animation_speed=animation_speed(pace),
            strategies=strategies,
        )

    @staticmethod
    def plan_from_fields(distance: DistanceInput, hours=0, minutes=0, seconds=0) -> PacingPlan:
        """Build a plan from separate hours/minutes/seconds fields."""
        return PacingService.plan(target_seconds(hours, minutes, seconds), distance)
