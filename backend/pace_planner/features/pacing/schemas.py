"""
Pacing schemas.

Pydantic schemas for API request/response serialization.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from pace_planner.shared.constants import RaceDistance
from .calculator import PaceStrategy, StrategyKind
from .service import PacingPlan, normalize_time_field


class PacingRequest(BaseModel):
    """
    Request for pace strategies.

    Time fields accept anything a form field could send: numbers,
    numeric strings, junk. They are normalized to non-negative ints.
    When all three are omitted the configured default time is used;
    otherwise an omitted field counts as zero.
    """
    distance: Optional[Union[float, str]] = None
    hours: Optional[Any] = None
    minutes: Optional[Any] = None
    seconds: Optional[Any] = None

    @field_validator("hours", "minutes", "seconds", mode="before")
    @classmethod
    def normalize_field(cls, v):
        """Clamp each time field to a non-negative int."""
        if v is None:
            return None
        return normalize_time_field(v)


class DistanceSchema(BaseModel):
    """Race distance option."""
    id: RaceDistance
    name: str
    distance_km: float
    split_count: int


class SplitSchema(BaseModel):
    """Single kilometer split."""
    km: int
    time: str = Field(..., description="Elapsed time as HH:MM:SS")
    elapsed_seconds: float

    @classmethod
    def from_split(cls, split) -> "SplitSchema":
        return cls(km=split.km, time=split.time, elapsed_seconds=split.elapsed_seconds)


class PaceStrategySchema(BaseModel):
    """One pacing strategy with its splits."""
    kind: StrategyKind
    name: str
    description: str
    pace: str = Field(..., description="Average pace as M:SS per km")
    pace_seconds_per_km: float
    animation_speed: float
    splits: List[SplitSchema] = []

    @classmethod
    def from_strategy(cls, strategy: PaceStrategy) -> "PaceStrategySchema":
        return cls(
            kind=strategy.kind,
            name=strategy.name,
            description=strategy.description,
            pace=strategy.pace,
            pace_seconds_per_km=strategy.pace_seconds_per_km,
            animation_speed=strategy.animation_speed,
            splits=[SplitSchema.from_split(s) for s in strategy.splits],
        )


class PacingPlanResponse(BaseModel):
    """Pace strategies for a target time over a distance."""
    target_seconds: int
    target_time: str = Field(..., description="Target time as HH:MM:SS")
    distance_km: float
    base_pace_seconds_per_km: Optional[float] = None
    animation_speed: float
    strategies: List[PaceStrategySchema] = []

    @classmethod
    def from_plan(cls, plan: PacingPlan) -> "PacingPlanResponse":
        return cls(
            target_seconds=plan.target_seconds,
            target_time=plan.target_time,
            distance_km=plan.distance_km,
            base_pace_seconds_per_km=plan.base_pace_seconds_per_km,
            animation_speed=plan.animation_speed,
            strategies=[PaceStrategySchema.from_strategy(s) for s in plan.strategies],
        )
