__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from fractions import Fraction

import pytest

from pysatl_finite.errors import RangeError
from pysatl_finite.families.builtins.coefficients import binomial_row, pascal_triangle, powers
from pysatl_finite.probability import Probability


class TestCoefficients:
    @pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 31, 64], ids=lambda n: f"n={n}")
    def test_binomial_row_matches_comb(self, n):
        assert binomial_row(n) == [math.comb(n, k) for k in range(n + 1)]

    def test_small_rows(self):
        assert binomial_row(4) == [1, 4, 6, 4, 1]
        assert binomial_row(5) == [1, 5, 10, 10, 5, 1]

    def test_pascal_triangle(self):
        triangle = pascal_triangle(12)
        assert len(triangle) == 13
        for n, row in enumerate(triangle):
            assert row == binomial_row(n)

    @pytest.mark.parametrize("builder", [binomial_row, pascal_triangle], ids=["row", "triangle"])
    def test_negative_size(self, builder):
        with pytest.raises(RangeError):
            builder(-1)

    def test_powers(self):
        assert powers(Fraction(1, 2), 3) == [1, Fraction(1, 2), Fraction(1, 4), Fraction(1, 8)]
        assert powers(Probability(0), 2) == [1, 0, 0]
        assert powers(Fraction(1, 3), 0) == [Probability.certain()]
