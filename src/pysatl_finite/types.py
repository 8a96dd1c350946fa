"""
Core Type Definitions
=====================

Fundamental type aliases and enumerations used throughout PySATL Finite.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Hashable
from decimal import Decimal
from enum import StrEnum
from fractions import Fraction
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pysatl_finite.distributions.distribution import Distribution
    from pysatl_finite.probability import Probability


type ExactNumber = int | Fraction | Decimal
"""Numbers that convert to :class:`~fractions.Fraction` without loss."""

type Number = ExactNumber | float
"""Type alias for all numeric types accepted by the calculus."""

type ProbabilityLike = Probability | Number | str
"""Anything :meth:`Probability.coerce` understands."""

type Predicate[T] = Callable[[T], bool]
"""Event on outcomes of type ``T``."""

type Reducer[T] = Callable[[T], Any]
"""Numeric contribution of an outcome, used by expectations."""

type Transition[T] = Callable[[T], Distribution[T]]
"""One step of a stochastic process: state -> distribution over next states."""

type GroupingKey = Hashable
"""Key under which outcomes are merged during normalization."""

type ParametrizationName = str
"""Type alias for parametrization names."""

type CharacteristicName = str
"""Type alias for analytic characteristic names (e.g. 'mean')."""


class FamilyName(StrEnum):
    """Names of the builtin discrete families."""

    UNIFORM = "Uniform"
    ONE_OF = "OneOf"
    BERNOULLI = "Bernoulli"
    RADEMACHER = "Rademacher"
    BINOMIAL = "Binomial"
    HYPERGEOMETRIC = "Hypergeometric"


class Characteristic(StrEnum):
    """Analytic characteristics a family may provide in closed form."""

    MEAN = "mean"
    VARIANCE = "variance"


__all__ = [
    "ExactNumber",
    "Number",
    "ProbabilityLike",
    "Predicate",
    "Reducer",
    "Transition",
    "GroupingKey",
    "ParametrizationName",
    "CharacteristicName",
    "FamilyName",
    "Characteristic",
]
