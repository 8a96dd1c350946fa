"""
Tests for Binomial Distribution Family

This module tests the binomial family: exact masses, parameterizations,
closed-form characteristics and agreement with scipy.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from fractions import Fraction
from math import comb

import numpy as np
import pytest
from scipy.stats import binom

from pysatl_finite.errors import RangeError
from pysatl_finite.families import binomial, configure_families_register
from pysatl_finite.types import Characteristic, FamilyName

from .base import BaseDistributionTest


class TestBinomialFamily(BaseDistributionTest):
    """Test suite for Binomial distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.binomial_family = registry.get(FamilyName.BINOMIAL)

    def test_family_properties(self):
        assert self.binomial_family.name == FamilyName.BINOMIAL
        assert self.binomial_family.parametrization_names == ["standard", "failure"]
        assert self.binomial_family.base_parametrization_name == "standard"

    def test_fair_coins(self):
        d = binomial(4)
        assert d.as_dict() == {
            0: Fraction(1, 16),
            1: Fraction(4, 16),
            2: Fraction(6, 16),
            3: Fraction(4, 16),
            4: Fraction(1, 16),
        }

    @pytest.mark.parametrize(
        "n, p",
        [(1, Fraction(1, 3)), (5, Fraction(1, 6)), (12, Fraction(2, 7)), (30, Fraction(9, 10))],
        ids=["n=1", "n=5", "n=12", "n=30"],
    )
    def test_exact_masses(self, n, p):
        d = binomial(n, p)
        self.assert_certain(d)
        for k in range(n + 1):
            assert d.mass_of(k) == comb(n, k) * p**k * (1 - p) ** (n - k)

    @pytest.mark.parametrize("n, p", [(10, 0.3), (25, 0.5), (40, 0.05)], ids=str)
    def test_matches_scipy(self, n, p):
        support = range(n + 1)
        expected = binom.pmf(np.arange(n + 1), n, p)
        self.assert_arrays_almost_equal(self.masses_on(binomial(n, p), support), expected)

    @pytest.mark.parametrize("p", [0, 1], ids=["never", "always"])
    def test_degenerate_success(self, p):
        d = binomial(7, p)
        assert d.support == (7 * p,)

    def test_two_fair_trials(self):
        expected = {0: Fraction(1, 4), 1: Fraction(1, 2), 2: Fraction(1, 4)}
        assert binomial(2, 0.5).as_dict() == expected

    def test_zero_trials(self):
        assert binomial(0, Fraction(1, 3)).as_dict() == {0: Fraction(1)}

    def test_failure_parametrization(self):
        by_failure = self.binomial_family.distribution("failure", trials=6, failure=Fraction(1, 4))
        assert by_failure == binomial(6, Fraction(3, 4))

    def test_mean_and_variance(self):
        n, p = 9, Fraction(2, 5)
        d = binomial(n, p)
        mean = self.binomial_family.characteristic(Characteristic.MEAN, trials=n, success=p)
        variance = self.binomial_family.characteristic(
            Characteristic.VARIANCE, trials=n, success=p
        )
        assert mean == d.average() == n * p
        assert variance == d.average(lambda k: (k - mean) ** 2) == n * p * (1 - p)
        assert float(mean) == pytest.approx(binom.mean(n, float(p)))

    def test_variance_through_failure_parametrization(self):
        variance = self.binomial_family.characteristic(
            Characteristic.VARIANCE, "failure", trials=8, failure=Fraction(1, 4)
        )
        assert variance == 8 * Fraction(3, 4) * Fraction(1, 4)

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"trials": -1}, "trials >= 0"),
            ({"trials": 2.5}, "trials >= 0"),
            ({"trials": True}, "trials >= 0"),
            ({"trials": 3, "success": 1.2}, "0 <= success <= 1"),
        ],
        ids=["negative", "fractional", "bool", "probability"],
    )
    def test_invalid_parameters(self, kwargs, message):
        with pytest.raises(RangeError, match=message):
            binomial(**kwargs)
