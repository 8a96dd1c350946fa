"""
Hypergeometric family implementation.

Contains the Hypergeometric family with two parameterizations: by population
size (base) and by the counts of marked and unmarked items.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from fractions import Fraction
from typing import TYPE_CHECKING, cast

from pysatl_finite.distributions.weighted import WeightedValue
from pysatl_finite.families.builtins._checks import is_count
from pysatl_finite.families.builtins.coefficients import pascal_triangle
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


def configure_hypergeometric_family() -> None:
    """
    Configure and register the Hypergeometric family.
    """
    HYPERGEOMETRIC_DOC = """
    Hypergeometric distribution.

    Number of marked items seen when drawing ``draws`` items without
    replacement from a population of ``N`` items, ``K`` of them marked:

        P(X = k) = C(K, k) * C(N - K, draws - k) / C(N, draws)

    for ``max(0, draws + K - N) <= k <= min(draws, K)``.

    The full Pascal triangle up to ``N`` is built, which costs O(N**2) time
    and memory.
    """

    def mass(parameters: Parametrization) -> Iterator[WeightedValue[int]]:
        parameters = cast(_Standard, parameters)
        draws = int(parameters.draws)
        population = int(parameters.population_size)
        marked = int(parameters.successes)

        binomial = pascal_triangle(population)
        lowest = max(0, draws + marked - population)
        highest = min(draws, marked)
        arrangements = binomial[population][draws]
        for k in range(lowest, highest + 1):
            favourable = binomial[marked][k] * binomial[population - marked][draws - k]
            yield WeightedValue(k, Probability(Fraction(favourable, arrangements)))

    def mean(parameters: Parametrization) -> Fraction:
        parameters = cast(_Standard, parameters)
        if parameters.population_size == 0:
            return Fraction(0)
        return Fraction(parameters.draws * parameters.successes, parameters.population_size)

    def variance(parameters: Parametrization) -> Fraction:
        parameters = cast(_Standard, parameters)
        n, N, K = parameters.draws, parameters.population_size, parameters.successes
        if N <= 1:
            return Fraction(0)
        return Fraction(n * K * (N - K) * (N - n), N * N * (N - 1))

    Hypergeometric = ParametricFamily(
        name=FamilyName.HYPERGEOMETRIC,
        distr_parametrizations=["standard", "counts"],
        mass_function=mass,
        distr_characteristics={
            Characteristic.MEAN: mean,
            Characteristic.VARIANCE: variance,
        },
    )
    Hypergeometric.__doc__ = HYPERGEOMETRIC_DOC

    @parametrization(family=Hypergeometric, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of hypergeometric distribution.

        Parameters
        ----------
        draws : int
            Number of items drawn without replacement.
        population_size : int
            Number of items in the population.
        successes : int
            Number of marked items in the population.
        """

        draws: int
        population_size: int
        successes: int

        @constraint(description="draws >= 0")
        def check_draws(self) -> bool:
            return is_count(self.draws)

        @constraint(description="population_size >= 0")
        def check_population(self) -> bool:
            return is_count(self.population_size)

        @constraint(description="0 <= successes <= population_size")
        def check_successes(self) -> bool:
            return is_count(self.successes) and self.successes <= self.population_size

        @constraint(description="draws <= population_size")
        def check_draws_fit(self) -> bool:
            return self.draws <= self.population_size

    @parametrization(family=Hypergeometric, name="counts")
    class _Counts(Parametrization):
        """
        Count parametrization of hypergeometric distribution.

        Parameters
        ----------
        draws : int
            Number of items drawn without replacement.
        successes : int
            Number of marked items in the population.
        failures : int
            Number of unmarked items in the population.
        """

        draws: int
        successes: int
        failures: int

        @constraint(description="draws >= 0")
        def check_draws(self) -> bool:
            return is_count(self.draws)

        @constraint(description="successes >= 0")
        def check_successes(self) -> bool:
            return is_count(self.successes)

        @constraint(description="failures >= 0")
        def check_failures(self) -> bool:
            return is_count(self.failures)

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Standard(  # type: ignore[call-arg]
                draws=self.draws,
                population_size=self.successes + self.failures,
                successes=self.successes,
            )

    ParametricFamilyRegister.register(Hypergeometric)


__all__ = ["configure_hypergeometric_family"]
