"""
Weighted Values
===============

:class:`WeightedValue` pairs an outcome with its :class:`Probability`; it is
the atomic entry of a :class:`~pysatl_finite.distributions.distribution.Distribution`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_finite.probability import Probability

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_finite.types import ProbabilityLike


@dataclass(frozen=True, slots=True)
class WeightedValue[T]:
    """
    An outcome with its associated likelihood.

    Parameters
    ----------
    value : T
        The outcome.
    probability : Probability
        Its weight.
    """

    value: T
    probability: Probability

    def __post_init__(self) -> None:
        if not isinstance(self.probability, Probability):
            object.__setattr__(self, "probability", Probability.coerce(self.probability))

    def map[S](self, f: Callable[[T], S]) -> WeightedValue[S]:
        """Transform the outcome, keeping the probability."""
        return WeightedValue(f(self.value), self.probability)

    def join_with[S, R](
        self, other: WeightedValue[S], f: Callable[[T, S], R]
    ) -> WeightedValue[R]:
        """
        Combine with an independent weighted value.

        Independence of the two values is assumed, not checked: the joint
        weight is the product of both probabilities.
        """
        return WeightedValue(f(self.value, other.value), self.probability * other.probability)

    def scale(self, p: ProbabilityLike) -> WeightedValue[T]:
        """Multiply the weight by an external probability."""
        return WeightedValue(self.value, self.probability.multiply(p))

    def __rmul__(self, p: object) -> WeightedValue[T]:
        if isinstance(p, Probability):
            return self.scale(p)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.value}:{self.probability}"


__all__ = ["WeightedValue"]
