"""
Race distance constants.

Single source of truth for the distances the planner offers.
"""

from enum import Enum


class RaceDistance(str, Enum):
    """
    Named race distances.

    Values are the short ids used in API requests and on the CLI.
    Use RACE_DISTANCE_KM to get the length in kilometers.
    """
    FIVE_K = "5K"
    TEN_K = "10K"
    HALF_MARATHON = "21K"
    MARATHON = "42K"

    @property
    def km(self) -> float:
        """Length in kilometers."""
        return RACE_DISTANCE_KM[self]

    @property
    def label(self) -> str:
        """Human-readable name for display."""
        return RACE_DISTANCE_LABELS[self]


# Mapping: RaceDistance -> kilometers
RACE_DISTANCE_KM: dict[RaceDistance, float] = {
    RaceDistance.FIVE_K: 5.0,
    RaceDistance.TEN_K: 10.0,
    RaceDistance.HALF_MARATHON: 21.097,
    RaceDistance.MARATHON: 42.195,
}

RACE_DISTANCE_LABELS: dict[RaceDistance, str] = {
    RaceDistance.FIVE_K: "5K",
    RaceDistance.TEN_K: "10K",
    RaceDistance.HALF_MARATHON: "Half Marathon",
    RaceDistance.MARATHON: "Marathon",
}
