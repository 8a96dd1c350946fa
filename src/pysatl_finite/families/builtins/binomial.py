"""
Binomial family implementation.

Contains the Binomial family with two parameterizations: by the success
probability (base) and by the failure probability.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from fractions import Fraction
from typing import TYPE_CHECKING, cast

from pysatl_finite.distributions.weighted import WeightedValue
from pysatl_finite.families.builtins._checks import is_count, is_probability
from pysatl_finite.families.builtins.coefficients import binomial_row, powers
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

    from pysatl_finite.types import ProbabilityLike


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial family.
    """
    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in ``trials`` independent yes/no experiments, each
    succeeding with probability ``p``:

        P(K = k) = C(n, k) * p**k * (1 - p)**(n - k),  k = 0..n

    Coefficients come from the multiplicative Pascal recurrence and the
    powers of ``p`` and ``1 - p`` from repeated exact multiplication, so the
    masses are exact fractions.
    """

    def mass(parameters: Parametrization) -> Iterator[WeightedValue[int]]:
        parameters = cast(_Standard, parameters)
        n = int(parameters.trials)
        success = Probability.coerce(parameters.success)

        coefficients = binomial_row(n)
        p_powers = powers(success, n)
        q_powers = powers(success.complement(), n)

        for k in range(n + 1):
            weight = p_powers[k] * q_powers[n - k]
            yield WeightedValue(k, Probability(coefficients[k] * weight.value))

    def mean(parameters: Parametrization) -> Fraction:
        parameters = cast(_Standard, parameters)
        return int(parameters.trials) * Probability.coerce(parameters.success).value

    def variance(parameters: Parametrization) -> Fraction:
        parameters = cast(_Standard, parameters)
        success = Probability.coerce(parameters.success)
        return int(parameters.trials) * success.value * success.complement().value

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_parametrizations=["standard", "failure"],
        mass_function=mass,
        distr_characteristics={
            Characteristic.MEAN: mean,
            Characteristic.VARIANCE: variance,
        },
    )
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of binomial distribution.

        Parameters
        ----------
        trials : int
            Number of experiments.
        success : ProbabilityLike
            Probability of a successful experiment.
        """

        trials: int
        success: ProbabilityLike = Fraction(1, 2)

        @constraint(description="trials >= 0")
        def check_trials(self) -> bool:
            return is_count(self.trials)

        @constraint(description="0 <= success <= 1")
        def check_success(self) -> bool:
            return is_probability(self.success)

    @parametrization(family=Binomial, name="failure")
    class _Failure(Parametrization):
        """
        Failure parametrization of binomial distribution.

        Parameters
        ----------
        trials : int
            Number of experiments.
        failure : ProbabilityLike
            Probability of a failed experiment.
        """

        trials: int
        failure: ProbabilityLike

        @constraint(description="trials >= 0")
        def check_trials(self) -> bool:
            return is_count(self.trials)

        @constraint(description="0 <= failure <= 1")
        def check_failure(self) -> bool:
            return is_probability(self.failure)

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Standard(  # type: ignore[call-arg]
                trials=self.trials, success=Probability.coerce(self.failure).complement()
            )

    ParametricFamilyRegister.register(Binomial)


__all__ = ["configure_binomial_family"]
