"""
Tests for the scalar helpers.
"""

import math

import pytest
from vex_math.math_utils import EPSILON, divide, is_valid, next_power_of_two, is_power_of_two, sign


class TestIsValid:
    """Finite-value check."""

    @pytest.mark.parametrize("value", [0.0, -1.5, 1e30, EPSILON])
    def test_finite_values(self, value):
        assert is_valid(value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_nan_and_infinity(self, value):
        assert not is_valid(value)


class TestPowerOfTwo:

    @pytest.mark.parametrize("value, expected", [(0, 1), (1, 2), (2, 4), (3, 4), (5, 8), (100, 128)])
    def test_next_power_of_two(self, value, expected):
        assert next_power_of_two(value) == expected

    @pytest.mark.parametrize("value", [1, 2, 4, 1024])
    def test_is_power_of_two(self, value):
        assert is_power_of_two(value)

    @pytest.mark.parametrize("value", [0, 3, 6, -4])
    def test_is_not_power_of_two(self, value):
        assert not is_power_of_two(value)


class TestSign:

    def test_positive_and_negative(self):
        assert sign(1234.0) == 1.0
        assert sign(-1234.0) == -1.0

    def test_zero_is_positive(self):
        assert sign(0.0) == 1.0


class TestDivide:
    """Float division that follows IEEE 754 on a zero denominator."""

    def test_regular_division(self):
        assert divide(1.0, 4.0) == 0.25

    @pytest.mark.parametrize("numerator, denominator, expected", [
        (1.0, 0.0, math.inf),
        (-1.0, 0.0, -math.inf),
        (1.0, -0.0, -math.inf),
        (-2.0, -0.0, math.inf),
        (3, 0, math.inf),
    ])
    def test_zero_denominator_is_infinite(self, numerator, denominator, expected):
        assert divide(numerator, denominator) == expected

    @pytest.mark.parametrize("numerator", [0.0, -0.0, math.nan])
    def test_zero_over_zero_is_nan(self, numerator):
        assert math.isnan(divide(numerator, 0.0))
