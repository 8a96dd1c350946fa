"""
Distribution Factories
======================

Public constructors of the standard finite distributions. Each one resolves
its family in the configured global register, validates the parameters
against the family's constraints and returns a normalized
:class:`~pysatl_finite.distributions.distribution.Distribution`.

Invalid parameters raise :class:`~pysatl_finite.errors.RangeError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from fractions import Fraction
from typing import TYPE_CHECKING, Any

from pysatl_finite.distributions.distribution import Distribution
from pysatl_finite.distributions.equality import STRUCTURAL
from pysatl_finite.families.configuration import configure_families_register
from pysatl_finite.types import FamilyName

if TYPE_CHECKING:
    from pysatl_finite.distributions.equality import EqualityStrategy
    from pysatl_finite.families.parametric_family import ParametricFamily
    from pysatl_finite.types import ProbabilityLike

_HALF = Fraction(1, 2)


def family(name: FamilyName | str) -> ParametricFamily:
    """Look up a configured family by name."""
    return configure_families_register().get(name)


def impossible(equality: EqualityStrategy = STRUCTURAL) -> Distribution[Any]:
    """The impossible distribution (empty support)."""
    return Distribution.zero(equality)


def certainly[T](value: T, equality: EqualityStrategy = STRUCTURAL) -> Distribution[T]:
    """Point distribution on ``value``."""
    return Distribution.unit(value, equality)


def uniform[T](*values: T, equality: EqualityStrategy = STRUCTURAL) -> Distribution[T]:
    """
    Equal mass ``1/n`` on each of the ``n`` given values.

    Repeated values are merged, so they accumulate mass.

    Raises
    ------
    RangeError
        If no values are given.
    """
    return family(FamilyName.UNIFORM).distribution(values=tuple(values), equality=equality)


def one_of[T](
    first: T,
    second: T,
    bias: ProbabilityLike = _HALF,
    equality: EqualityStrategy = STRUCTURAL,
) -> Distribution[T]:
    """
    Two-point distribution: ``first`` with probability ``bias``,
    ``second`` with ``1 - bias``.
    """
    return family(FamilyName.ONE_OF).distribution(
        first=first, second=second, bias=bias, equality=equality
    )


def bernoulli(p: ProbabilityLike) -> Distribution[int]:
    """``1`` with probability ``p``, ``0`` otherwise."""
    return family(FamilyName.BERNOULLI).distribution(success=p)


def rademacher() -> Distribution[int]:
    """``1`` and ``-1`` with probability ``1/2`` each."""
    return family(FamilyName.RADEMACHER).distribution()


def binomial(trials: int, success: ProbabilityLike = _HALF) -> Distribution[int]:
    """
    Number of successes in ``trials`` independent experiments.

    Parameters
    ----------
    trials : int
        Number of experiments, non-negative.
    success : ProbabilityLike, default 1/2
        Success probability of one experiment.
    """
    return family(FamilyName.BINOMIAL).distribution(trials=trials, success=success)


def hypergeometric(draws: int, population_size: int, successes: int) -> Distribution[int]:
    """
    Number of marked items among ``draws`` items drawn without replacement.

    Parameters
    ----------
    draws : int
        Number of draws, ``0 <= draws <= population_size``.
    population_size : int
        Size of the population, non-negative.
    successes : int
        Marked items in the population, ``0 <= successes <= population_size``.
    """
    return family(FamilyName.HYPERGEOMETRIC).distribution(
        draws=draws, population_size=population_size, successes=successes
    )


__all__ = [
    "family",
    "impossible",
    "certainly",
    "uniform",
    "one_of",
    "bernoulli",
    "rademacher",
    "binomial",
    "hypergeometric",
]
