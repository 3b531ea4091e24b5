"""
Tests for the pace/split calculator.

Covers the four strategies, their split curves, the empty-result
rule and the animation speed scalar.
"""

import math

import pytest

from pace_planner.features.pacing.calculator import (
    DEFAULT_ANIMATION_SPEED,
    MAX_ANIMATION_SPEED,
    MIN_ANIMATION_SPEED,
    STRATEGIES,
    StrategyKind,
    animation_speed,
    base_pace,
    generate_pace_strategies,
    split_count,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def five_k_25min():
    """5K in 25:00 -> base pace 300 s/km."""
    return {s.kind: s for s in generate_pace_strategies(1500, 5)}


@pytest.fixture
def half_marathon_strategies():
    """Half marathon in 1:45:00."""
    return generate_pace_strategies(6300, 21.097)


# =============================================================================
# Test base pace and split count
# =============================================================================

class TestBasePace:
    """Tests for base_pace and split_count."""

    def test_base_pace(self):
        assert base_pace(1500, 5) == pytest.approx(300.0)

    def test_non_positive_inputs(self):
        assert base_pace(0, 5) is None
        assert base_pace(1500, 0) is None
        assert base_pace(-10, 5) is None
        assert base_pace(1500, -5) is None

    def test_non_finite_distance(self):
        assert base_pace(1500, math.nan) is None
        assert base_pace(1500, math.inf) is None

    def test_split_count_floors(self):
        assert split_count(5) == 5
        assert split_count(21.097) == 21
        assert split_count(42.195) == 42
        assert split_count(0.5) == 0
        assert split_count(0) == 0


# =============================================================================
# Test strategy generation
# =============================================================================

class TestGeneratePaceStrategies:
    """Tests for generate_pace_strategies."""

    def test_four_strategies_in_order(self, five_k_25min):
        assert [s.name for s in five_k_25min.values()] == [
            "Even Pace",
            "Negative Split",
            "Positive Split",
            "Conservative Start",
        ]
        assert list(five_k_25min) == [d.kind for d in STRATEGIES]

    def test_descriptions(self, five_k_25min):
        assert five_k_25min[StrategyKind.EVEN].description == "Maintain consistent pace throughout"
        assert five_k_25min[StrategyKind.CONSERVATIVE_START].description == "Easy start, strong finish"

    def test_empty_for_zero_duration(self):
        assert generate_pace_strategies(0, 5) == []

    def test_empty_for_zero_distance(self):
        assert generate_pace_strategies(1500, 0) == []

    def test_empty_for_negative_inputs(self):
        assert generate_pace_strategies(-1500, 5) == []
        assert generate_pace_strategies(1500, -5) == []

    def test_paces(self, five_k_25min):
        assert five_k_25min[StrategyKind.EVEN].pace == "5:00"
        assert five_k_25min[StrategyKind.NEGATIVE_SPLIT].pace == "4:45"
        assert five_k_25min[StrategyKind.POSITIVE_SPLIT].pace == "5:15"
        assert five_k_25min[StrategyKind.CONSERVATIVE_START].pace == "4:30"

    def test_even_pace_splits(self, five_k_25min):
        splits = five_k_25min[StrategyKind.EVEN].splits
        assert [s.km for s in splits] == [1, 2, 3, 4, 5]
        assert [s.time for s in splits] == [
            "00:05:00", "00:10:00", "00:15:00", "00:20:00", "00:25:00",
        ]

    def test_negative_split_pace_not_slower_than_even(self):
        for duration, distance in [(1500, 5), (3000, 10), (6300, 21.097), (12600, 42.195), (1, 5)]:
            by_kind = {s.kind: s for s in generate_pace_strategies(duration, distance)}
            negative = by_kind[StrategyKind.NEGATIVE_SPLIT].pace_seconds_per_km
            even = by_kind[StrategyKind.EVEN].pace_seconds_per_km
            assert negative <= even

    def test_split_count_matches_floor_of_distance(self, half_marathon_strategies):
        for strategy in half_marathon_strategies:
            assert len(strategy.splits) == 21

    def test_huge_integer_duration_gives_empty_list(self):
        """Ints too large for a float are not an error."""
        assert generate_pace_strategies(10 ** 400, 5) == []

    def test_huge_integer_distance_gives_empty_list(self):
        assert generate_pace_strategies(1500, 10 ** 400) == []
        assert split_count(10 ** 400) == 0

    def test_split_overflow_gives_empty_list(self):
        """Positive split curve pushes the last split past the float limit."""
        assert base_pace(1.7e308, 5) is not None
        assert generate_pace_strategies(1.7e308, 5) == []

    def test_infinite_pace_gives_none(self):
        assert base_pace(1e308, 1e-10) is None

    def test_sub_kilometer_distance_has_no_splits(self):
        strategies = generate_pace_strategies(180, 0.5)
        assert len(strategies) == 4
        assert all(s.splits == [] for s in strategies)
        assert strategies[0].pace == "6:00"


# =============================================================================
# Test split curves
# =============================================================================

class TestSplitCurves:
    """Split times follow each strategy's multiplier curve."""

    def test_negative_split_curve(self, five_k_25min):
        """Factor shrinks by 10% x (km - 1) / N."""
        splits = five_k_25min[StrategyKind.NEGATIVE_SPLIT].splits
        expected = [km * 300 * (1 - ((km - 1) / 5) * 0.1) for km in range(1, 6)]
        assert [s.elapsed_seconds for s in splits] == pytest.approx(expected)
        assert splits[0].time == "00:05:00"

    def test_positive_split_curve(self, five_k_25min):
        splits = five_k_25min[StrategyKind.POSITIVE_SPLIT].splits
        expected = [km * 300 * (1 + ((km - 1) / 5) * 0.1) for km in range(1, 6)]
        assert [s.elapsed_seconds for s in splits] == pytest.approx(expected)
        assert splits[-1].time == "00:27:00"

    def test_conservative_start_curve(self, five_k_25min):
        """First floor(5/2) = 2 km at 1.1, the rest at 0.9."""
        splits = five_k_25min[StrategyKind.CONSERVATIVE_START].splits
        assert [s.time for s in splits] == [
            "00:05:30", "00:11:00", "00:13:30", "00:18:00", "00:22:30",
        ]

    def test_conservative_multiplier_drops_at_midpoint(self, half_marathon_strategies):
        strategy = {s.kind: s for s in half_marathon_strategies}[StrategyKind.CONSERVATIVE_START]
        pace = 6300 / 21.097
        factors = [s.elapsed_seconds / (s.km * pace) for s in strategy.splits]
        n = len(strategy.splits)
        for index, factor in enumerate(factors):
            if index < n // 2:
                assert factor == pytest.approx(1.1)
            else:
                assert factor == pytest.approx(0.9)

    def test_splits_truncate_not_round(self):
        """1499 s over 5 km: last even split is 1499 s, shown as 00:24:59."""
        strategies = generate_pace_strategies(1499, 5)
        assert strategies[0].splits[-1].time == "00:24:59"
        assert strategies[0].pace == "4:59"


# =============================================================================
# Test animation speed
# =============================================================================

class TestAnimationSpeed:
    """Tests for the cosmetic animation speed scalar."""

    def test_formula(self):
        assert animation_speed(300) == pytest.approx(500 / 300)

    def test_clamped_high(self):
        assert animation_speed(50) == MAX_ANIMATION_SPEED

    def test_clamped_low(self):
        assert animation_speed(2000) == MIN_ANIMATION_SPEED

    def test_default_without_pace(self):
        assert animation_speed(None) == DEFAULT_ANIMATION_SPEED

    def test_strategy_factors(self, five_k_25min):
        scalar = 500 / 300
        assert five_k_25min[StrategyKind.EVEN].animation_speed == pytest.approx(scalar)
        assert five_k_25min[StrategyKind.NEGATIVE_SPLIT].animation_speed == pytest.approx(scalar * 1.3)
        assert five_k_25min[StrategyKind.POSITIVE_SPLIT].animation_speed == pytest.approx(scalar * 0.7)
        assert five_k_25min[StrategyKind.CONSERVATIVE_START].animation_speed == pytest.approx(scalar)
