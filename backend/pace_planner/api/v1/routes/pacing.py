"""
Pacing Routes

Endpoints for race distances and pace strategies.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from pace_planner.config import settings
from pace_planner.features.pacing import (
    DistanceSchema,
    PacingPlanResponse,
    PacingRequest,
    PacingService,
    split_count,
)
from pace_planner.shared.constants import RaceDistance
from pace_planner.shared.formatters import parse_clock

router = APIRouter()


@router.get("/distances", response_model=List[DistanceSchema])
async def list_distances():
    """List supported race distances."""
    return [
        DistanceSchema(
            id=distance,
            name=distance.label,
            distance_km=distance.km,
            split_count=split_count(distance.km),
        )
        for distance in RaceDistance
    ]


@router.post("/strategies", response_model=PacingPlanResponse)
async def plan_strategies(request: PacingRequest):
    """
    Compute pace strategies from form fields.

    Omitted fields fall back to the configured defaults.
    Non-numeric or negative time fields count as zero, and a zero
    target time gives an empty strategy list rather than an error.
    """
    no_time_given = request.hours is None and request.minutes is None and request.seconds is None
    distance = request.distance if request.distance is not None else settings.default_distance

    try:
        if no_time_given:
            plan = PacingService.plan(settings.default_target_seconds, distance)
        else:
            plan = PacingService.plan_from_fields(
                distance,
                hours=request.hours or 0,
                minutes=request.minutes or 0,
                seconds=request.seconds or 0,
            )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return PacingPlanResponse.from_plan(plan)


@router.get("/strategies", response_model=PacingPlanResponse)
async def get_strategies(
    distance: Optional[str] = Query(default=None, description="Distance id (5K, 10K, 21K, 42K) or km"),
    time: Optional[str] = Query(default=None, description="Target time as HH:MM:SS or MM:SS"),
):
    """Compute pace strategies from a clock-formatted target time."""
    try:
        total = parse_clock(time) if time is not None else settings.default_target_seconds
        plan = PacingService.plan(total, distance or settings.default_distance)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return PacingPlanResponse.from_plan(plan)
