"""
Pacing module.

Usage:
    from pace_planner.features.pacing import PacingService
    from pace_planner.features.pacing.calculator import generate_pace_strategies

Components:
- generate_pace_strategies: Pure pace/split calculator
- PacingService: Form input normalization + calculator orchestration
"""

from .calculator import (
    PaceStrategy,
    Split,
    StrategyKind,
    STRATEGIES,
    generate_pace_strategies,
    animation_speed,
    base_pace,
    split_count,
)
from .service import (
    PacingService,
    PacingPlan,
    normalize_time_field,
    target_seconds,
    resolve_distance,
)
from .schemas import (
    PacingRequest,
    PacingPlanResponse,
    PaceStrategySchema,
    SplitSchema,
    DistanceSchema,
)

__all__ = [
    # Calculator
    "PaceStrategy",
    "Split",
    "StrategyKind",
    "STRATEGIES",
    "generate_pace_strategies",
    "animation_speed",
    "base_pace",
    "split_count",
    # Service
    "PacingService",
    "PacingPlan",
    "normalize_time_field",
    "target_seconds",
    "resolve_distance",
    # Schemas
    "PacingRequest",
    "PacingPlanResponse",
    "PaceStrategySchema",
    "SplitSchema",
    "DistanceSchema",
]
