"""
Random Sampling Helpers
=======================

Randomized counterparts of the exact factories, built on
:class:`numpy.random.Generator`. They are meant for simulations and
demonstrations; no exact computation of the calculus depends on them.

Notes
-----
- :func:`draw` uses inverse transform sampling over the cumulative float
  masses of a :class:`~pysatl_finite.distributions.distribution.Distribution`.
  Sub-distributions are renormalized before sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_finite.errors import RangeError, UndefinedConditionalError
from pysatl_finite.probability import Probability

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Any

    import numpy.typing as npt

    from pysatl_finite.distributions.distribution import Distribution
    from pysatl_finite.types import ProbabilityLike


def _probability(success_probability: ProbabilityLike) -> float:
    return Probability.coerce(success_probability).to_float()


def coin_toss(rng: np.random.Generator, success_probability: ProbabilityLike = 0.5) -> bool:
    """
    Toss a biased coin.

    Raises
    ------
    RangeError
        If ``success_probability`` is outside ``[0, 1]``.
    """
    return bool(rng.random() < _probability(success_probability))


def coin_toss_between[T](
    rng: np.random.Generator,
    first: T,
    second: T,
    success_probability: ProbabilityLike = 0.5,
) -> T:
    """Return ``first`` with probability ``success_probability``, else ``second``."""
    return first if coin_toss(rng, success_probability) else second


def choose[T](rng: np.random.Generator, values: Sequence[T]) -> T:
    """
    Pick one of ``values`` uniformly at random.

    Raises
    ------
    RangeError
        If ``values`` is empty.
    """
    if len(values) == 0:
        raise RangeError("Cannot choose from an empty sequence")
    return values[int(rng.integers(len(values)))]


def draw(
    distribution: Distribution[Any],
    size: int,
    rng: np.random.Generator | None = None,
) -> npt.NDArray[Any]:
    """
    Draw i.i.d. outcomes of a distribution.

    Parameters
    ----------
    distribution : Distribution
        Source distribution; its masses are converted to float.
    size : int
        Number of outcomes to draw, non-negative.
    rng : numpy.random.Generator, optional
        Source of randomness; a fresh default generator when omitted.

    Returns
    -------
    numpy.ndarray
        1D object array of shape ``(size,)``.

    Raises
    ------
    RangeError
        If ``size`` is negative.
    UndefinedConditionalError
        If the distribution is impossible (nothing to draw from).
    """
    if size < 0:
        raise RangeError(f"Sample size must be non-negative, got {size}")
    if distribution.is_impossible:
        raise UndefinedConditionalError("Cannot draw from the impossible distribution")

    rng = np.random.default_rng() if rng is None else rng
    outcomes, masses = distribution.to_arrays()
    cdf = np.cumsum(masses)
    cdf /= cdf[-1]
    U = rng.random(size)
    positions = np.minimum(np.searchsorted(cdf, U, side="right"), len(cdf) - 1)
    return outcomes[positions]


__all__ = [
    "coin_toss",
    "coin_toss_between",
    "choose",
    "draw",
]
