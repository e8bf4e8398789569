"""Tests for placement within minimum and maximum limits."""

import random
import warnings

import pytest
from conftest import SPREAD_POSITIONS, SPREAD_SEPARATION, brute_force_max_offset

from vertical_label_placement.placement import (
    InfeasibleLimitsWarning,
    LimitStrategy,
    is_separated,
    max_offset,
    place_with_limits,
)
from vertical_label_placement.placement.limits import clamp_into_limits, shift_into_limits

BOTH_STRATEGIES = pytest.mark.parametrize("strategy", list(LimitStrategy))


def _feasible_bounded_cases(seed: int, count: int):
    """Small inputs whose limits leave room for every label."""
    rng = random.Random(seed)
    cases = []
    for _ in range(count):
        n = rng.randint(1, 4)
        separation = rng.randint(0, 4)
        preferred = sorted(rng.randint(-6, 6) for _ in range(n))
        min_bound = rng.randint(-8, 4)
        max_bound = min_bound + (n - 1) * separation + rng.randint(0, 6)
        cases.append((preferred, separation, min_bound, max_bound))
    return cases


@pytest.fixture
def no_warnings():
    """Turn any warning raised inside the test into an error."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield


class TestDocumentedExamples:
    @BOTH_STRATEGIES
    def test_positive_limits(self, strategy, no_warnings):
        result = place_with_limits(SPREAD_POSITIONS, SPREAD_SEPARATION, 0, 100, strategy)
        assert result == [0, 10, 20, 30]

    @BOTH_STRATEGIES
    def test_negative_limits(self, strategy, no_warnings):
        result = place_with_limits(SPREAD_POSITIONS, SPREAD_SEPARATION, -100, 0, strategy)
        assert result == [-30, -20, -10, 0]

    @BOTH_STRATEGIES
    def test_insufficient_space_keeps_maximum(self, strategy):
        with pytest.warns(InfeasibleLimitsWarning, match="keeping the maximum limit"):
            result = place_with_limits(SPREAD_POSITIONS, SPREAD_SEPARATION, -10, 10, strategy)
        assert result == [-20, -10, 0, 10]

    def test_wide_limits_leave_placement_unchanged(self, no_warnings):
        assert place_with_limits([0, 100], 10, -1000, 1000) == [0, 100]


class TestClampStrategy:
    """The default correction: only out-of-range labels move."""

    def test_is_default(self, no_warnings):
        assert place_with_limits([0, 100], 10, 0, 50) == [0, 50]

    def test_separate_groups_keep_both_limits(self, no_warnings):
        result = place_with_limits([0, 100], 10, 0, 50, LimitStrategy.CLAMP)
        assert result == [0, 50]
        assert result[1] - result[0] >= 10

    def test_already_separated_but_outside_limits(self, no_warnings):
        assert place_with_limits([-20], 10, -10, 10) == [-10]
        assert place_with_limits([20], 10, -10, 10) == [10]
        assert place_with_limits([-20, 20], 10, -10, 10) == [-10, 10]

    def test_one_cluster_against_either_limit(self, no_warnings):
        assert place_with_limits([0, 0, 0], 10, -20, 0) == [-20, -10, 0]
        assert place_with_limits([0, 0, 0], 10, 0, 20) == [0, 10, 20]

    def test_single_label_inside_limits_unchanged(self, no_warnings):
        assert place_with_limits([5], 10, 0, 10) == [5]

    def test_clamp_into_limits_direct(self):
        assert clamp_into_limits([-15, -5, 5, 15], 10, 0, 100) == [0, 10, 20, 30]
        assert clamp_into_limits([], 10, 0, 100) == []

    @pytest.mark.parametrize(
        "preferred,separation,min_bound,max_bound", _feasible_bounded_cases(seed=3, count=40)
    )
    def test_within_limits_and_separated(self, preferred, separation, min_bound, max_bound):
        result = place_with_limits(preferred, separation, min_bound, max_bound)
        assert len(result) == len(preferred)
        assert is_separated(result, separation)
        assert min_bound <= result[0]
        assert result[-1] <= max_bound

    @pytest.mark.parametrize(
        "preferred,separation,min_bound,max_bound", _feasible_bounded_cases(seed=5, count=40)
    )
    def test_optimal_against_brute_force(self, preferred, separation, min_bound, max_bound):
        result = place_with_limits(preferred, separation, min_bound, max_bound)
        expected = brute_force_max_offset(preferred, separation, min_bound, max_bound)
        assert max_offset(preferred, result) == expected


class TestShiftStrategy:
    """Rigid translation of the whole placement."""

    def test_accepts_string_value(self, no_warnings):
        assert place_with_limits(SPREAD_POSITIONS, 10, 0, 100, "shift") == [0, 10, 20, 30]

    def test_preserves_relative_spacing(self, no_warnings):
        result = place_with_limits([0, 0, 50], 10, 10, 200, LimitStrategy.SHIFT)
        assert result == [10, 20, 65]

    def test_spread_groups_break_minimum_limit(self):
        with pytest.warns(InfeasibleLimitsWarning, match="below the minimum limit"):
            result = place_with_limits([0, 100], 10, 0, 50, LimitStrategy.SHIFT)
        assert result == [-50, 50]
        assert result[1] - result[0] >= 10

    def test_shift_into_limits_direct(self):
        assert shift_into_limits([-15, -5, 5, 15], 0, 100) == [0, 10, 20, 30]
        assert shift_into_limits([-15, -5, 5, 15], -100, 0) == [-30, -20, -10, 0]
        assert shift_into_limits([], 0, 100) == []


class TestInfeasibleLimits:
    @BOTH_STRATEGIES
    def test_overflowing_limits(self, strategy):
        with pytest.warns(InfeasibleLimitsWarning):
            result = place_with_limits([0, 0, 0], 10, 0, 0, strategy)
        assert result == [-20, -10, 0]

    @BOTH_STRATEGIES
    def test_separation_always_kept(self, strategy):
        with pytest.warns(InfeasibleLimitsWarning):
            result = place_with_limits([3, 4, 5, 6], 7, 0, 10, strategy)
        assert is_separated(result, 7)
        assert result[-1] == 10

    def test_single_label_outside_narrow_limits_clamped(self, no_warnings):
        assert place_with_limits([100], 10, 5, 5) == [5]


class TestArguments:
    def test_empty(self, no_warnings):
        assert place_with_limits([], 10, 0, 0) == []

    def test_inverted_limits_rejected(self):
        with pytest.raises(ValueError, match="greater than maximum"):
            place_with_limits([0], 10, 5, 0)

    def test_negative_separation_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            place_with_limits([0], -10, 0, 5)

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError, match="Unknown limit strategy"):
            place_with_limits([0], 10, 0, 5, "squash")
