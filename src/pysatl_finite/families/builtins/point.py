"""
Point-mass families: Uniform, OneOf, Bernoulli and Rademacher.

Each configure function builds its family and registers it in the global
:class:`~pysatl_finite.families.registry.ParametricFamilyRegister`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from fractions import Fraction
from typing import TYPE_CHECKING, cast

from pysatl_finite.distributions.weighted import WeightedValue
from pysatl_finite.families.builtins._checks import is_probability
from pysatl_finite.families.parametric_family import ParametricFamily
from pysatl_finite.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_finite.families.registry import ParametricFamilyRegister
from pysatl_finite.probability import Probability
from pysatl_finite.types import Characteristic, FamilyName

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    from pysatl_finite.types import ProbabilityLike


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform family.

    Every listed value gets mass ``1/n``; repeated values merge during
    normalization, so ``uniform(1, 1, 2)`` puts ``2/3`` on ``1``.
    """

    def mass(parameters: Parametrization) -> Iterator[WeightedValue[Any]]:
        parameters = cast(_Values, parameters)
        weight = Probability(Fraction(1, len(parameters.values)))
        for value in parameters.values:
            yield WeightedValue(value, weight)

    def mean(parameters: Parametrization) -> Fraction:
        parameters = cast(_Values, parameters)
        return Fraction(sum(parameters.values), len(parameters.values))

    Uniform = ParametricFamily(
        name=FamilyName.UNIFORM,
        distr_parametrizations=["values"],
        mass_function=mass,
        distr_characteristics={Characteristic.MEAN: mean},
    )

    @parametrization(family=Uniform, name="values")
    class _Values(Parametrization):
        """
        Parameters
        ----------
        values : tuple
            Equally likely values, not necessarily distinct.
        """

        values: tuple[Any, ...]

        @constraint(description="at least one value")
        def check_non_empty(self) -> bool:
            return len(self.values) > 0

    ParametricFamilyRegister.register(Uniform)


def configure_one_of_family() -> None:
    """Configure and register the two-point (biased coin) family."""

    def mass(parameters: Parametrization) -> tuple[WeightedValue[Any], ...]:
        parameters = cast(_Biased, parameters)
        bias = Probability.coerce(parameters.bias)
        return (
            WeightedValue(parameters.first, bias),
            WeightedValue(parameters.second, bias.complement()),
        )

    OneOf = ParametricFamily(
        name=FamilyName.ONE_OF,
        distr_parametrizations=["biased"],
        mass_function=mass,
    )

    @parametrization(family=OneOf, name="biased")
    class _Biased(Parametrization):
        """
        Parameters
        ----------
        first : Any
            Outcome drawn with probability ``bias``.
        second : Any
            Outcome drawn with probability ``1 - bias``.
        bias : ProbabilityLike
            Weight of the first outcome.
        """

        first: Any
        second: Any
        bias: ProbabilityLike = Fraction(1, 2)

        @constraint(description="0 <= bias <= 1")
        def check_bias(self) -> bool:
            return is_probability(self.bias)

    ParametricFamilyRegister.register(OneOf)


def configure_bernoulli_family() -> None:
    """Configure and register the Bernoulli family (1 with probability p, else 0)."""

    def mass(parameters: Parametrization) -> tuple[WeightedValue[int], ...]:
        parameters = cast(_Success, parameters)
        success = Probability.coerce(parameters.success)
        return WeightedValue(1, success), WeightedValue(0, success.complement())

    def mean(parameters: Parametrization) -> Fraction:
        parameters = cast(_Success, parameters)
        return Probability.coerce(parameters.success).value

    def variance(parameters: Parametrization) -> Fraction:
        parameters = cast(_Success, parameters)
        success = Probability.coerce(parameters.success)
        return success.value * success.complement().value

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_parametrizations=["success"],
        mass_function=mass,
        distr_characteristics={Characteristic.MEAN: mean, Characteristic.VARIANCE: variance},
    )

    @parametrization(family=Bernoulli, name="success")
    class _Success(Parametrization):
        """
        Parameters
        ----------
        success : ProbabilityLike
            Probability of the outcome 1.
        """

        success: ProbabilityLike

        @constraint(description="0 <= success <= 1")
        def check_success(self) -> bool:
            return is_probability(self.success)

    ParametricFamilyRegister.register(Bernoulli)


def configure_rademacher_family() -> None:
    """Configure and register the Rademacher family (+1 and -1, each with 1/2)."""

    def mass(parameters: Parametrization) -> tuple[WeightedValue[int], ...]:
        half = Probability(Fraction(1, 2))
        return WeightedValue(1, half), WeightedValue(-1, half)

    Rademacher = ParametricFamily(
        name=FamilyName.RADEMACHER,
        distr_parametrizations=["fair"],
        mass_function=mass,
        distr_characteristics={
            Characteristic.MEAN: lambda _: Fraction(0),
            Characteristic.VARIANCE: lambda _: Fraction(1),
        },
    )

    @parametrization(family=Rademacher, name="fair")
    class _Fair(Parametrization):
        """No parameters."""

    ParametricFamilyRegister.register(Rademacher)


__all__ = [
    "configure_uniform_family",
    "configure_one_of_family",
    "configure_bernoulli_family",
    "configure_rademacher_family",
]
