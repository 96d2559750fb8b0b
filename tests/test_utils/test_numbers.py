"""Tests for footprint_estimator/utils/numbers.py."""

from __future__ import annotations

import math

import pytest

from footprint_estimator.utils.numbers import round_half_up, safe_ratio


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.125, 0.13),      # exact tie -> away from zero (round() gives 0.12)
            (-0.125, -0.13),
            (1.005, 1.0),       # binary value is just below the tie
            (2.675, 2.67),
            (19.5752, 19.58),
            (0.0, 0.0),
        ],
    )
    def test_two_places(self, value, expected):
        assert round_half_up(value) == expected

    def test_other_places(self):
        assert round_half_up(2.5, 0) == 3.0
        assert round_half_up(0.0005, 3) == 0.001

    def test_large_values(self):
        assert round_half_up(1e30) == 1e30

    def test_non_finite_pass_through(self):
        assert round_half_up(math.inf) == math.inf
        assert round_half_up(-math.inf) == -math.inf
        assert math.isnan(round_half_up(math.nan))


class TestSafeRatio:
    def test_ordinary_division(self):
        assert safe_ratio(3.0, 4.0) == 0.75

    def test_positive_over_zero(self):
        assert safe_ratio(5.0, 0.0) == math.inf

    def test_negative_over_zero(self):
        assert safe_ratio(-5.0, 0.0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(safe_ratio(0.0, 0.0))

    def test_nan_over_zero(self):
        assert math.isnan(safe_ratio(math.nan, 0.0))
