"""
Finite Distributions
====================

This module defines :class:`Distribution`, an immutable finite
(sub-)distribution: a mapping from distinct outcomes to their total
:class:`~pysatl_finite.probability.Probability` mass, with total mass at most 1.

It is a monad:

- :meth:`Distribution.unit` / :meth:`Distribution.zero`: point mass and
  impossible distribution;
- :meth:`Distribution.map`: functor map with regrouping of colliding images;
- :meth:`Distribution.bind`: law of total probability;
- :meth:`Distribution.where`: conditioning with rescale;
- :meth:`Distribution.prod` / :meth:`Distribution.join_with`: independent
  product.

Notes
-----
- Every distribution is built through a single normalization step that drops
  zero-mass entries, groups outcomes by the distribution's
  :class:`~pysatl_finite.distributions.equality.EqualityStrategy` and sums
  masses per group. The first outcome seen in a group represents it.
- Input whose total mass exceeds ``1 + mass_tolerance`` raises
  :class:`~pysatl_finite.errors.MassOverflowError`. A total inside the
  tolerance band is rescaled to exactly 1.
- All masses are exact fractions; floats appear only in :meth:`to_arrays`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_finite.config import calculus_config
from pysatl_finite.distributions.equality import STRUCTURAL
from pysatl_finite.distributions.weighted import WeightedValue
from pysatl_finite.errors import MassOverflowError, UndefinedConditionalError
from pysatl_finite.probability import Probability

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    import numpy.typing as npt

    from pysatl_finite.distributions.equality import EqualityStrategy
    from pysatl_finite.types import GroupingKey, Predicate, ProbabilityLike, Reducer

logger = logging.getLogger(__name__)

_ZERO = Fraction(0)
_ONE = Fraction(1)


def _always(_: Any) -> bool:
    return True


def _identity(value: Any) -> Any:
    return value


def _pair(a: Any, b: Any) -> tuple[Any, Any]:
    return a, b


def _exact(contribution: Any) -> Fraction | float:
    if isinstance(contribution, Decimal):
        return Fraction(contribution)
    if isinstance(contribution, (int, Fraction, float)):
        return contribution
    if isinstance(contribution, Probability):
        return contribution.value
    raise TypeError(
        f"Expectation contributions must be numeric, got {type(contribution).__name__}"
    )


class Distribution[T]:
    """
    Immutable finite (sub-)distribution over outcomes of type ``T``.

    Parameters
    ----------
    entries : Iterable[WeightedValue[T]], optional
        Weighted outcomes, not necessarily distinct.
    equality : EqualityStrategy, default STRUCTURAL
        Strategy deciding which outcomes are merged.

    Raises
    ------
    MassOverflowError
        If the total mass of ``entries`` exceeds ``1 + mass_tolerance``.
    """

    __slots__ = ("_entries", "_equality", "_index")

    _entries: tuple[WeightedValue[T], ...]
    _equality: EqualityStrategy
    _index: dict[GroupingKey, int]

    def __init__(
        self,
        entries: Iterable[WeightedValue[T]] = (),
        equality: EqualityStrategy = STRUCTURAL,
    ) -> None:
        self._equality = equality
        self._entries, self._index = self._normalize(entries, equality)

    @staticmethod
    def _normalize(
        entries: Iterable[WeightedValue[T]], equality: EqualityStrategy
    ) -> tuple[tuple[WeightedValue[T], ...], dict[GroupingKey, int]]:
        groups: dict[GroupingKey, list[Any]] = {}
        total = _ZERO
        seen = 0
        for entry in entries:
            seen += 1
            mass = entry.probability.value
            if mass == _ZERO:
                continue
            total += mass
            key = equality.key(entry.value)
            group = groups.get(key)
            if group is None:
                groups[key] = [entry.value, mass]
            else:
                group[1] += mass

        if total > _ONE:
            if total > _ONE + calculus_config().mass_tolerance:
                raise MassOverflowError(f"Given probabilities {total} exceed 1.0")
            for group in groups.values():
                group[1] /= total

        normalized = tuple(
            WeightedValue(value, Probability(mass)) for value, mass in groups.values()
        )
        index = {key: position for position, key in enumerate(groups)}
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Normalized %d weighted values into %d outcomes (total mass %s)",
                seen,
                len(normalized),
                min(total, _ONE),
            )
        return normalized, index

    # ---------- canonical instances ----------

    @classmethod
    def zero(cls, equality: EqualityStrategy = STRUCTURAL) -> Distribution[T]:
        """The impossible distribution: empty support, zero total mass."""
        return cls((), equality)

    @classmethod
    def unit(cls, value: T, equality: EqualityStrategy = STRUCTURAL) -> Distribution[T]:
        """The certain distribution on ``value``."""
        return cls((WeightedValue(value, Probability.certain()),), equality)

    @classmethod
    def from_masses(
        cls,
        masses: Mapping[T, ProbabilityLike] | Iterable[tuple[T, ProbabilityLike]],
        equality: EqualityStrategy = STRUCTURAL,
    ) -> Distribution[T]:
        """
        Build a distribution from ``outcome -> mass`` pairs.

        Parameters
        ----------
        masses : Mapping or Iterable of pairs
            Masses may be anything :meth:`Probability.coerce` accepts.
        equality : EqualityStrategy, default STRUCTURAL
            Grouping strategy of the result.
        """
        pairs = masses.items() if isinstance(masses, Mapping) else masses
        return cls((WeightedValue(v, Probability.coerce(p)) for v, p in pairs), equality)

    # ---------- inspection ----------

    @property
    def entries(self) -> tuple[WeightedValue[T], ...]:
        """Normalized support entries in first-appearance order."""
        return self._entries

    @property
    def support(self) -> tuple[T, ...]:
        """Outcomes with strictly positive mass."""
        return tuple(entry.value for entry in self._entries)

    @property
    def equality(self) -> EqualityStrategy:
        """Grouping strategy of this distribution."""
        return self._equality

    @property
    def total_mass(self) -> Probability:
        return self.probability_of(_always)

    @property
    def is_certain(self) -> bool:
        """Whether the total mass is exactly 1."""
        return self.total_mass.value == _ONE

    @property
    def is_impossible(self) -> bool:
        return not self._entries

    def mass_of(self, value: T) -> Probability:
        """Mass of a single outcome (zero if it is outside the support)."""
        position = self._index.get(self._equality.key(value))
        if position is None:
            return Probability.impossible()
        return self._entries[position].probability

    def probability_of(self, predicate: Predicate[T] | None = None) -> Probability:
        """
        Total mass of the outcomes satisfying ``predicate``.

        Parameters
        ----------
        predicate : Callable[[T], bool], optional
            The event; all outcomes when omitted.
        """
        event = _always if predicate is None else predicate
        return Probability(
            sum((entry.probability.value for entry in self._entries if event(entry.value)), _ZERO)
        )

    def any(self, predicate: Predicate[T] | None = None) -> bool:
        """Whether the event has strictly positive probability."""
        return self.probability_of(predicate).value > _ZERO

    # ---------- monad ----------

    def map[S](
        self, f: Callable[[T], S], equality: EqualityStrategy = STRUCTURAL
    ) -> Distribution[S]:
        """
        Push the distribution forward through ``f``.

        Images that collide under ``equality`` are merged and their masses
        summed, since ``f`` need not be injective.
        """
        return Distribution((entry.map(f) for entry in self._entries), equality)

    def bind[S, R](
        self,
        f: Callable[[T], Distribution[S]],
        combine: Callable[[T, S], R] | None = None,
        equality: EqualityStrategy = STRUCTURAL,
    ) -> Distribution[Any]:
        """
        Monadic sequencing (law of total probability).

        For every outcome ``t`` with mass ``p``, every entry of ``f(t)`` is
        scaled by ``p``; all scaled entries are then normalized together:
        ``P(S = s) = sum_t P(T = t) * P(S = s | T = t)``.

        Parameters
        ----------
        f : Callable[[T], Distribution[S]]
            Conditional distribution of the next outcome.
        combine : Callable[[T, S], R], optional
            If given, the result holds ``combine(t, s)`` instead of ``s``.
        equality : EqualityStrategy, default STRUCTURAL
            Grouping strategy of the result.
        """

        def _scaled() -> Iterator[WeightedValue[Any]]:
            for entry in self._entries:
                inner = f(entry.value)
                if not isinstance(inner, Distribution):
                    raise TypeError(
                        f"bind expects a Distribution from its function, got {type(inner).__name__}"
                    )
                for sub in inner._entries:
                    value = sub.value if combine is None else combine(entry.value, sub.value)
                    yield WeightedValue(value, entry.probability * sub.probability)

        return Distribution(_scaled(), equality)

    def where(self, predicate: Predicate[T]) -> Distribution[T]:
        """
        Condition on an event.

        Retained masses are divided by the total mass of the retained outcomes,
        so a non-empty result sums to exactly 1.

        Raises
        ------
        UndefinedConditionalError
            If the event has zero probability.
        """
        retained = [entry for entry in self._entries if predicate(entry.value)]
        mass = sum((entry.probability.value for entry in retained), _ZERO)
        if mass == _ZERO:
            raise UndefinedConditionalError(
                "Cannot condition on an event with zero probability"
            )
        return Distribution(
            (
                WeightedValue(entry.value, Probability(entry.probability.value / mass))
                for entry in retained
            ),
            self._equality,
        )

    def join_with[S, R](
        self,
        other: Distribution[S],
        f: Callable[[T, S], R],
        equality: EqualityStrategy = STRUCTURAL,
    ) -> Distribution[R]:
        """
        Independent product combined through ``f``.

        The two distributions are assumed independent: every pair of entries
        is joined with the product of their masses.
        """
        return Distribution(
            (
                left.join_with(right, f)
                for left in self._entries
                for right in other._entries
            ),
            equality,
        )

    def prod[S](
        self, other: Distribution[S], equality: EqualityStrategy = STRUCTURAL
    ) -> Distribution[tuple[T, S]]:
        """Independent product as a distribution over ``(t, s)`` pairs."""
        return self.join_with(other, _pair, equality)

    def scale(self, p: ProbabilityLike) -> Distribution[T]:
        """Multiply every mass by ``p`` (yields a sub-distribution)."""
        weight = Probability.coerce(p)
        return Distribution((entry.scale(weight) for entry in self._entries), self._equality)

    def __rmul__(self, p: object) -> Distribution[T]:
        if isinstance(p, Probability):
            return self.scale(p)
        return NotImplemented

    def average(self, f: Reducer[T] | None = None) -> Fraction | float:
        """
        Expectation ``sum_i p_i * f(value_i)``.

        Parameters
        ----------
        f : Callable[[T], Number], optional
            Numeric contribution of an outcome; identity when omitted.

        Returns
        -------
        Fraction or float
            Exact when every contribution is ``int``, ``Fraction`` or
            ``Decimal``; a float as soon as one contribution is a float.
        """
        reducer = _identity if f is None else f
        result: Fraction | float = _ZERO
        for entry in self._entries:
            result += entry.probability.value * _exact(reducer(entry.value))
        return result

    # ---------- container protocol ----------

    def __iter__(self) -> Iterator[WeightedValue[T]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value: object) -> bool:
        return self._equality.key(value) in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distribution):
            return NotImplemented
        # Masses are only comparable under one grouping strategy.
        if self._equality != other._equality or len(self) != len(other):
            return False
        return all(self.mass_of(entry.value) == entry.probability for entry in other._entries)

    def __hash__(self) -> int:
        return hash(
            frozenset(
                (key, self._entries[position].probability.value)
                for key, position in self._index.items()
            )
        )

    # ---------- presentation ----------

    def as_dict(self) -> dict[T, Fraction]:
        """Outcome -> exact mass. Outcomes must be hashable."""
        return {entry.value: entry.probability.value for entry in self._entries}

    def to_arrays(
        self, dtype: npt.DTypeLike | None = None
    ) -> tuple[npt.NDArray[Any], npt.NDArray[np.float64]]:
        """
        Float view of the distribution for plotting and reporting.

        Parameters
        ----------
        dtype : numpy dtype, optional
            Dtype of the outcome array; ``object`` when omitted.

        Returns
        -------
        tuple[numpy.ndarray, numpy.ndarray]
            Outcomes and their masses as ``float64``.
        """
        count = len(self._entries)
        outcomes = np.empty(count, dtype=object)
        for position, entry in enumerate(self._entries):
            outcomes[position] = entry.value
        masses = np.fromiter(
            (entry.probability.to_float() for entry in self._entries),
            dtype=np.float64,
            count=count,
        )
        if dtype is not None:
            outcomes = outcomes.astype(dtype)
        return outcomes, masses

    def __repr__(self) -> str:
        body = ", ".join(f"{entry.value!r}: {entry.probability.value}" for entry in self._entries)
        return f"Distribution({{{body}}})"

    def __str__(self) -> str:
        likely = sorted(self._entries, key=lambda entry: entry.probability.value, reverse=True)
        return "\n".join(str(entry) for entry in likely[:3])


__all__ = ["Distribution"]
