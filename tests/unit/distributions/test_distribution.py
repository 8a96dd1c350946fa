"""
Tests for the finite distribution monad: normalization, inspection,
monad laws, conditioning, independent products and expectations.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pysatl_finite.distributions import Distribution, WeightedValue
from pysatl_finite.errors import MassOverflowError, UndefinedConditionalError
from pysatl_finite.probability import Probability
from tests.utils.mocks import RecordingFunction, coin, dice


def wv(value: object, mass: Fraction | int) -> WeightedValue[object]:
    return WeightedValue(value, Probability(mass))


def upto(n: int) -> Distribution[int]:
    return Distribution(wv(k, Fraction(1, n)) for k in range(1, n + 1))


class TestNormalization:
    def test_duplicates_are_merged(self) -> None:
        d = Distribution([wv(1, Fraction(1, 4)), wv(2, Fraction(1, 2)), wv(1, Fraction(1, 4))])
        assert len(d) == 2
        assert d.mass_of(1) == Fraction(1, 2)
        assert d.support == (1, 2)

    def test_zero_masses_are_dropped(self) -> None:
        d = Distribution([wv("a", 1), wv("b", 0)])
        assert "b" not in d
        assert d.support == ("a",)

    def test_sub_distribution_is_allowed(self) -> None:
        d = Distribution([wv("a", Fraction(1, 4))])
        assert d.total_mass == Fraction(1, 4)
        assert not d.is_certain

    def test_overflow(self) -> None:
        with pytest.raises(MassOverflowError, match="exceed"):
            Distribution([wv(1, Fraction(3, 4)), wv(2, Fraction(1, 2))])

    def test_overflow_by_duplicates(self) -> None:
        with pytest.raises(MassOverflowError):
            Distribution([wv(1, Fraction(2, 3))] * 2)

    def test_overflow_inside_tolerance_is_rescaled(self) -> None:
        d = Distribution([wv(1, Fraction(1, 2)), wv(2, Fraction(1, 2) + Fraction(1, 10**25))])
        assert d.total_mass == 1
        assert d.mass_of(1) < Fraction(1, 2)

    def test_from_masses(self) -> None:
        d = Distribution.from_masses({"x": "1/3", "y": Fraction(2, 3)})
        assert d.as_dict() == {"x": Fraction(1, 3), "y": Fraction(2, 3)}
        assert Distribution.from_masses([("x", 0.5), ("x", 0.5)]) == Distribution.unit("x")

    def test_normalization_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="pysatl_finite.distributions.distribution")
        Distribution([wv(1, Fraction(1, 2)), wv(1, Fraction(1, 2))])
        assert "Normalized 2 weighted values into 1 outcomes" in caplog.text


class TestInspection:
    def test_unit(self) -> None:
        d = Distribution.unit("only")
        assert d.mass_of("only") == 1
        assert d.is_certain
        assert len(d) == 1

    def test_zero(self) -> None:
        d = Distribution.zero()
        assert d.is_impossible
        assert d.total_mass == 0
        assert not d.any()
        assert len(d) == 0

    def test_mass_of_missing(self) -> None:
        assert dice().mass_of(7) == 0

    def test_probability_of(self) -> None:
        die = dice()
        assert die.probability_of(lambda x: x % 2 == 0) == Fraction(1, 2)
        assert die.probability_of(lambda x: x > 4) == Fraction(1, 3)
        assert die.probability_of() == 1

    def test_any(self) -> None:
        die = dice()
        assert die.any()
        assert die.any(lambda x: x == 6)
        assert not die.any(lambda x: x > 6)

    def test_container_protocol(self) -> None:
        die = dice()
        assert 3 in die
        assert 0 not in die
        assert [entry.value for entry in die] == [1, 2, 3, 4, 5, 6]
        assert all(isinstance(entry, WeightedValue) for entry in die)

    def test_equality_ignores_order(self) -> None:
        left = Distribution([wv("a", Fraction(1, 3)), wv("b", Fraction(2, 3))])
        right = Distribution([wv("b", Fraction(2, 3)), wv("a", Fraction(1, 3))])
        assert left == right
        assert hash(left) == hash(right)
        assert left != Distribution.unit("a")
        assert left != {"a": Fraction(1, 3)}

    def test_to_arrays(self) -> None:
        outcomes, masses = dice().to_arrays()
        assert outcomes.dtype == object
        np.testing.assert_allclose(masses, np.full(6, 1 / 6))
        typed, _ = dice().to_arrays(dtype=np.int64)
        np.testing.assert_array_equal(typed, np.arange(1, 7))

    def test_repr_and_str(self) -> None:
        d = Distribution([wv("T", Fraction(1, 4)), wv("H", Fraction(3, 4))])
        assert repr(d) == "Distribution({'T': 1/4, 'H': 3/4})"
        assert str(d) == "H:75%\nT:25%"
        assert len(str(dice()).splitlines()) == 3


class TestMonad:
    def test_map_regroups(self) -> None:
        parity = dice().map(lambda x: x % 2)
        assert len(parity) == 2
        assert parity.mass_of(0) == Fraction(1, 2)
        assert parity.mass_of(1) == Fraction(1, 2)

    def test_map_collapses_non_injective_images(self) -> None:
        d = upto(4).map(lambda v: 1 if v > 1 else 0)
        assert d.as_dict() == {0: Fraction(1, 4), 1: Fraction(3, 4)}

    def test_map_identity(self) -> None:
        assert dice().map(lambda x: x) == dice()

    def test_map_composition(self) -> None:
        f, g = (lambda x: x // 2), (lambda x: x + 1)
        assert dice().map(f).map(g) == dice().map(lambda x: g(f(x)))

    def test_left_identity(self) -> None:
        assert Distribution.unit(4).bind(upto) == upto(4)

    def test_right_identity(self) -> None:
        assert dice().bind(Distribution.unit) == dice()

    def test_associativity(self) -> None:
        def g(n: int) -> Distribution[int]:
            return coin().map(lambda side: n if side == "H" else -n)

        left = dice().bind(upto).bind(g)
        right = dice().bind(lambda x: upto(x).bind(g))
        assert left == right

    def test_total_probability(self) -> None:
        d = upto(2).bind(upto)
        assert d.mass_of(1) == Fraction(3, 4)
        assert d.mass_of(2) == Fraction(1, 4)

    def test_bind_calls_function_once_per_outcome(self) -> None:
        f = RecordingFunction(upto)
        dice().bind(f)
        assert f.calls == [1, 2, 3, 4, 5, 6]

    def test_bind_with_combine(self) -> None:
        d = coin().bind(lambda _: upto(2), combine=lambda side, n: f"{side}{n}")
        assert d.as_dict() == {
            "H1": Fraction(1, 4),
            "H2": Fraction(1, 4),
            "T1": Fraction(1, 4),
            "T2": Fraction(1, 4),
        }

    def test_bind_requires_distribution(self) -> None:
        with pytest.raises(TypeError, match="Distribution"):
            dice().bind(lambda x: x)  # type: ignore[arg-type,return-value]

    def test_bind_of_sub_distribution(self) -> None:
        half = Distribution([wv("a", Fraction(1, 2))])
        d = dice().bind(lambda _: half)
        assert d.total_mass == Fraction(1, 2)


class TestConditioning:
    def test_where_rescales(self) -> None:
        high = dice().where(lambda x: x > 4)
        assert high.as_dict() == {5: Fraction(1, 2), 6: Fraction(1, 2)}
        assert high.is_certain

    def test_where_single_survivor_has_full_mass(self) -> None:
        assert upto(2).where(lambda v: v > 1).as_dict() == {2: Fraction(1)}

    def test_where_on_sub_distribution_sums_to_one(self) -> None:
        d = Distribution([wv(1, Fraction(1, 8)), wv(2, Fraction(1, 8)), wv(3, Fraction(1, 4))])
        conditioned = d.where(lambda x: x != 3)
        assert conditioned.total_mass == 1
        assert conditioned.mass_of(1) == Fraction(1, 2)

    def test_where_zero_mass_event(self) -> None:
        with pytest.raises(UndefinedConditionalError):
            dice().where(lambda x: x > 6)
        with pytest.raises(ZeroDivisionError):
            Distribution.zero().where(lambda x: True)

    def test_bayes(self) -> None:
        # two dice, given that the sum is 10
        pairs = dice().prod(dice()).where(lambda p: p[0] + p[1] == 10)
        assert len(pairs) == 3
        assert pairs.map(lambda p: p[0]).mass_of(5) == Fraction(1, 3)


class TestIndependentProduct:
    def test_prod(self) -> None:
        pairs = coin().prod(coin())
        assert len(pairs) == 4
        assert all(entry.probability == Fraction(1, 4) for entry in pairs)

    def test_prod_probability_factorises(self) -> None:
        pairs = dice().prod(upto(3))
        joint = pairs.probability_of(lambda p: p[0] == 2 and p[1] == 3)
        assert joint == dice().probability_of(lambda a: a == 2) * upto(3).probability_of(
            lambda b: b == 3
        )

    def test_prod_marginals(self) -> None:
        pairs = dice().prod(coin())
        assert pairs.map(lambda p: p[0]) == dice()
        assert pairs.map(lambda p: p[1]) == coin()

    def test_join_with_sum_of_dice(self) -> None:
        total = dice().join_with(dice(), lambda a, b: a + b)
        assert len(total) == 11
        assert total.mass_of(7) == Fraction(1, 6)
        assert total.mass_of(2) == Fraction(1, 36)

    def test_prod_with_zero(self) -> None:
        assert dice().prod(Distribution.zero()).is_impossible

    def test_scale(self) -> None:
        half = Probability(Fraction(1, 2))
        assert dice().scale(half).total_mass == Fraction(1, 2)
        assert half * dice() == dice().scale("1/2")


class TestAverage:
    def test_mean_of_die(self) -> None:
        assert dice().average() == Fraction(7, 2)

    def test_second_moment(self) -> None:
        assert dice().average(lambda x: x * x) == Fraction(91, 6)

    def test_decimal_contributions_stay_exact(self) -> None:
        result = coin().average(lambda _: Decimal("0.1"))
        assert result == Fraction(1, 10)
        assert isinstance(result, Fraction)

    def test_float_contribution_gives_float(self) -> None:
        result = coin().average(lambda side: 1.5 if side == "H" else 0)
        assert isinstance(result, float)
        assert result == pytest.approx(0.75)

    def test_average_of_impossible(self) -> None:
        assert Distribution.zero().average() == 0

    def test_non_numeric_contribution(self) -> None:
        with pytest.raises(TypeError, match="numeric"):
            coin().average()
