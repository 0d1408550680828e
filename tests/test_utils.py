# tests/test_utils.py
"""
Numeric helper tests
"""

import pytest

from rfp_scoring.scoring.utils import mean, population_std_dev, round_half_up, safe_ratio


class TestRoundHalfUp:

    @pytest.mark.parametrize("value, expected", [(82.5, 83), (82.4, 82), (0.5, 1), (0, 0)])
    def test_whole_numbers_are_ints(self, value, expected):
        result = round_half_up(value)
        assert result == expected
        assert isinstance(result, int)

    def test_places_return_float(self):
        result = round_half_up(0.835, 2)
        assert result == 0.84
        assert isinstance(result, float)


class TestSafeRatio:

    def test_zero_denominator(self):
        assert safe_ratio(5, 0) == 0.0

    def test_negative_denominator(self):
        assert safe_ratio(5, -1) == 0.0


class TestStatistics:

    def test_mean_empty(self):
        assert mean([]) == 0.0

    def test_population_std_dev(self):
        assert population_std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)
        assert population_std_dev([]) == 0.0
