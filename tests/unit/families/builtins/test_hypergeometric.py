"""
Tests for Hypergeometric Distribution Family

This module tests the hypergeometric family: exact masses, parameterizations,
closed-form characteristics and agreement with scipy.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from fractions import Fraction
from math import comb

import numpy as np
import pytest
from scipy.stats import hypergeom

from pysatl_finite.errors import RangeError
from pysatl_finite.families import configure_families_register, hypergeometric
from pysatl_finite.types import Characteristic, FamilyName

from .base import BaseDistributionTest


class TestHypergeometricFamily(BaseDistributionTest):
    """Test suite for Hypergeometric distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.hypergeometric_family = registry.get(FamilyName.HYPERGEOMETRIC)

    def test_family_properties(self):
        assert self.hypergeometric_family.name == FamilyName.HYPERGEOMETRIC
        assert self.hypergeometric_family.parametrization_names == ["standard", "counts"]

    def test_urn(self):
        # 2 draws from 5 balls, 3 of them red
        d = hypergeometric(draws=2, population_size=5, successes=3)
        assert d.as_dict() == {
            0: Fraction(1, 10),
            1: Fraction(6, 10),
            2: Fraction(3, 10),
        }

    def test_two_of_five_with_two_marked(self):
        d = hypergeometric(2, 5, 2)
        assert d.as_dict() == {0: Fraction(3, 10), 1: Fraction(6, 10), 2: Fraction(1, 10)}

    @pytest.mark.parametrize(
        "draws, N, K",
        [(5, 20, 7), (10, 12, 9), (0, 4, 2), (6, 6, 3), (3, 10, 0), (3, 10, 10)],
        ids=["typical", "lower-bound", "no-draws", "all-drawn", "no-marked", "all-marked"],
    )
    def test_exact_masses(self, draws, N, K):
        d = hypergeometric(draws, N, K)
        self.assert_certain(d)
        for k in range(draws + 1):
            expected = Fraction(comb(K, k) * comb(N - K, draws - k), comb(N, draws))
            assert d.mass_of(k) == expected

    def test_support_bounds(self):
        d = hypergeometric(draws=10, population_size=12, successes=9)
        assert min(d.support) == 7
        assert max(d.support) == 9

    @pytest.mark.parametrize("draws, N, K", [(10, 50, 20), (30, 60, 45)], ids=str)
    def test_matches_scipy(self, draws, N, K):
        support = range(draws + 1)
        # scipy: hypergeom(M=population, n=marked, N=draws)
        expected = hypergeom.pmf(np.arange(draws + 1), N, K, draws)
        self.assert_arrays_almost_equal(
            self.masses_on(hypergeometric(draws, N, K), support), expected
        )

    def test_empty_population(self):
        assert hypergeometric(0, 0, 0).as_dict() == {0: Fraction(1)}

    def test_counts_parametrization(self):
        by_counts = self.hypergeometric_family.distribution(
            "counts", draws=4, successes=6, failures=9
        )
        assert by_counts == hypergeometric(4, 15, 6)

    def test_mean_and_variance(self):
        draws, N, K = 7, 20, 8
        d = hypergeometric(draws, N, K)
        params = {"draws": draws, "population_size": N, "successes": K}
        mean = self.hypergeometric_family.characteristic(Characteristic.MEAN, **params)
        variance = self.hypergeometric_family.characteristic(Characteristic.VARIANCE, **params)
        assert mean == d.average()
        assert variance == d.average(lambda k: (k - mean) ** 2)
        assert float(variance) == pytest.approx(hypergeom.var(N, K, draws))

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"draws": -1, "population_size": 5, "successes": 2}, "draws >= 0"),
            ({"draws": 1, "population_size": -5, "successes": 0}, "population_size >= 0"),
            ({"draws": 1, "population_size": 5, "successes": 6}, "successes <= population_size"),
            ({"draws": 6, "population_size": 5, "successes": 2}, "draws <= population_size"),
        ],
        ids=["negative-draws", "negative-population", "too-many-marked", "too-many-draws"],
    )
    def test_invalid_parameters(self, kwargs, message):
        with pytest.raises(RangeError, match=message):
            hypergeometric(**kwargs)
