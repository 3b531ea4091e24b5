"""
Pace/split calculator.

Builds pacing strategies for a target finish time over a distance.
Every strategy starts from the base pace (target time / distance) and
applies its own per-km pace multiplier and split-time curve.

Strategies:
1. Even Pace - same pace every kilometer
2. Negative Split - start slower, finish faster
3. Positive Split - start faster, settle in later
4. Conservative Start - easy first half, strong second half

The calculator never raises: non-positive inputs give an empty list.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from pace_planner.shared.formatters import format_clock, format_pace


# Animation speed = REFERENCE_PACE / base pace, clamped.
ANIMATION_REFERENCE_PACE_S = 500.0
MIN_ANIMATION_SPEED = 0.5
MAX_ANIMATION_SPEED = 5.0
DEFAULT_ANIMATION_SPEED = 1.0

# Split curve amplitude for negative/positive splits (10% across the race)
SPLIT_DRIFT = 0.1

# Conservative start: slow first half, fast second half
CONSERVATIVE_FIRST_HALF = 1.1
CONSERVATIVE_SECOND_HALF = 0.9


class StrategyKind(str, Enum):
    """Pacing strategy identifier."""
    EVEN = "even"
    NEGATIVE_SPLIT = "negative_split"
    POSITIVE_SPLIT = "positive_split"
    CONSERVATIVE_START = "conservative_start"


@dataclass
class Split:
    """Cumulative elapsed time at a kilometer marker."""
    km: int                 # 1-based
    elapsed_seconds: float  # Untruncated

    @property
    def time(self) -> str:
        """Elapsed time as HH:MM:SS (truncated)."""
        return format_clock(self.elapsed_seconds)


@dataclass
class PaceStrategy:
    """A named pacing strategy with its average pace and km splits."""
    kind: StrategyKind
    name: str
    description: str
    pace_seconds_per_km: float
    animation_speed: float
    splits: List[Split] = field(default_factory=list)

    @property
    def pace(self) -> str:
        """Average pace as M:SS per km."""
        return format_pace(self.pace_seconds_per_km)


# Split factor: f(index, split_count, distance_km) -> multiplier,
# where index is the zero-based kilometer position.
SplitFactor = Callable[[int, int, float], float]


@dataclass(frozen=True)
class StrategyDefinition:
    """Static description of how a strategy shapes pace and splits."""
    kind: StrategyKind
    name: str
    description: str
    pace_multiplier: float
    split_factor: SplitFactor
    animation_factor: float = 1.0


def _even_factor(index: int, split_count: int, distance_km: float) -> float:
    return 1.0


def _negative_factor(index: int, split_count: int, distance_km: float) -> float:
    return 1 - (index / split_count) * SPLIT_DRIFT


def _positive_factor(index: int, split_count: int, distance_km: float) -> float:
    return 1 + (index / split_count) * SPLIT_DRIFT


def _conservative_factor(index: int, split_count: int, distance_km: float) -> float:
    midpoint = math.floor(distance_km / 2)
    if index < midpoint:
        return CONSERVATIVE_FIRST_HALF
    return CONSERVATIVE_SECOND_HALF


# Order matters: strategies are returned in this order.
STRATEGIES: tuple[StrategyDefinition, ...] = (
    StrategyDefinition(
        kind=StrategyKind.EVEN,
        name="Even Pace",
        description="Maintain consistent pace throughout",
        pace_multiplier=1.0,
        split_factor=_even_factor,
    ),
    StrategyDefinition(
        kind=StrategyKind.NEGATIVE_SPLIT,
        name="Negative Split",
        description="Start slower, finish faster",
        pace_multiplier=0.95,
        split_factor=_negative_factor,
        animation_factor=1.3,
    ),
    StrategyDefinition(
        kind=StrategyKind.POSITIVE_SPLIT,
        name="Positive Split",
        description="Start faster, settle in later",
        pace_multiplier=1.05,
        split_factor=_positive_factor,
        animation_factor=0.7,
    ),
    StrategyDefinition(
        kind=StrategyKind.CONSERVATIVE_START,
        name="Conservative Start",
        description="Easy start, strong finish",
        pace_multiplier=0.9,
        split_factor=_conservative_factor,
    ),
)


def _as_positive(value: float) -> Optional[float]:
    """value as a finite positive float, or None."""
    try:
        number = float(value)
    except OverflowError:
        return None
    if math.isfinite(number) and number > 0:
        return number
    return None


def base_pace(duration_seconds: float, distance_km: float) -> Optional[float]:
    """
    Reference pace before any strategy adjustment.

    Args:
        duration_seconds: Target finish time in seconds
        distance_km: Race distance in km

    Returns:
        Seconds per km, or None if either input is non-positive
        or too large to give a finite pace
    """
    duration = _as_positive(duration_seconds)
    distance = _as_positive(distance_km)
    if duration is None or distance is None:
        return None
    pace = duration / distance
    if not math.isfinite(pace):
        return None
    return pace


def split_count(distance_km: float) -> int:
    """Number of whole-kilometer splits for a distance."""
    distance = _as_positive(distance_km)
    if distance is None:
        return 0
    return math.floor(distance)


def animation_speed(pace_seconds_per_km: Optional[float]) -> float:
    """
    Cosmetic speed scalar: faster pace, faster animation.

    Returns DEFAULT_ANIMATION_SPEED when there is no pace.
    """
    if pace_seconds_per_km is None or pace_seconds_per_km <= 0:
        return DEFAULT_ANIMATION_SPEED
    speed = ANIMATION_REFERENCE_PACE_S / pace_seconds_per_km
    return max(MIN_ANIMATION_SPEED, min(MAX_ANIMATION_SPEED, speed))


def _is_finite_strategy(strategy: PaceStrategy) -> bool:
    return math.isfinite(strategy.pace_seconds_per_km) and all(
        math.isfinite(s.elapsed_seconds) for s in strategy.splits
    )


def build_splits(
    definition: StrategyDefinition,
    pace_seconds_per_km: float,
    distance_km: float,
) -> List[Split]:
    """Cumulative splits for every whole kilometer under one strategy."""
    count = split_count(distance_km)
    splits = []
    for index in range(count):
        km = index + 1
        factor = definition.split_factor(index, count, distance_km)
        splits.append(Split(km=km, elapsed_seconds=km * pace_seconds_per_km * factor))
    return splits


def generate_pace_strategies(
    duration_seconds: float,
    distance_km: float,
) -> List[PaceStrategy]:
    """
    Build all pacing strategies for a target time over a distance.

    Args:
        duration_seconds: Target finish time in seconds
        distance_km: Race distance in km

    Returns:
        One PaceStrategy per entry in STRATEGIES, or an empty list
        if the target time or distance is not positive.

    Example:
        >>> strategies = generate_pace_strategies(1500, 5)
        >>> strategies[0].pace, strategies[0].splits[-1].time
        ('5:00', '00:25:00')
    """
    pace = base_pace(duration_seconds, distance_km)
    if pace is None:
        return []

    speed = animation_speed(pace)

    strategies = [
        PaceStrategy(
            kind=definition.kind,
            name=definition.name,
            description=definition.description,
            pace_seconds_per_km=pace * definition.pace_multiplier,
            animation_speed=speed * definition.animation_factor,
            splits=build_splits(definition, pace, distance_km),
        )
        for definition in STRATEGIES
    ]

    # Near the float limit the curve multipliers can overflow a split
    if not all(_is_finite_strategy(s) for s in strategies):
        return []
    return strategies
