"""
Probability Values
==================

This module defines :class:`Probability`, an exact scalar confined to the
closed interval ``[0, 1]``, together with the pure helper functions
:func:`multiply`, :func:`complement` and :func:`total`.

Notes
-----
- Values are stored as :class:`fractions.Fraction`; all arithmetic is exact.
- Floats are accepted on input through their shortest decimal representation
  (``0.1`` becomes exactly ``1/10``) and produced only by :meth:`to_float`.
- Construction outside ``[0, 1]`` raises :class:`~pysatl_finite.errors.RangeError`;
  values are never clamped.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from decimal import Decimal, localcontext
from fractions import Fraction
from typing import TYPE_CHECKING, Any

from pysatl_finite.config import calculus_config
from pysatl_finite.errors import RangeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_finite.types import Number, ProbabilityLike

_ZERO = Fraction(0)
_ONE = Fraction(1)


def _to_fraction(value: Any) -> Fraction:
    """Exact conversion of a supported numeric value; raises TypeError otherwise."""
    if isinstance(value, Probability):
        return value.value
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise RangeError(f"Probability must be finite, got {value}")
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise RangeError(f"Probability must be finite, got {value}")
        return Fraction(repr(value))
    if isinstance(value, str):
        return Fraction(value.strip())
    raise TypeError(f"Cannot interpret {type(value).__name__} as a probability")


@dataclass(frozen=True, slots=True, eq=False)
class Probability:
    """
    Exact probability in ``[0, 1]``.

    Parameters
    ----------
    value : ProbabilityLike
        ``int``, ``Fraction``, ``Decimal``, ``float``, numeric ``str`` or
        another :class:`Probability`.

    Raises
    ------
    RangeError
        If the value is outside ``[0, 1]`` (or not finite).
    TypeError
        If the value is not numeric.
    """

    value: Fraction

    def __init__(self, value: ProbabilityLike) -> None:
        exact = _to_fraction(value)
        if not _ZERO <= exact <= _ONE:
            raise RangeError(f"The value must be between 0.0 and 1.0, got {exact}")
        object.__setattr__(self, "value", exact)

    # ---------- constructors ----------

    @classmethod
    def coerce(cls, value: ProbabilityLike) -> Probability:
        """Return ``value`` unchanged if it already is a probability, else convert it."""
        if isinstance(value, Probability):
            return value
        return cls(value)

    @classmethod
    def from_decimal(cls, value: Decimal) -> Probability:
        return cls(value)

    @classmethod
    def from_float(cls, value: float) -> Probability:
        return cls(value)

    @classmethod
    def impossible(cls) -> Probability:
        """Probability of an impossible event."""
        return _IMPOSSIBLE

    @classmethod
    def certain(cls) -> Probability:
        """Probability of a certain event."""
        return _CERTAIN

    # ---------- arithmetic ----------

    def multiply(self, other: ProbabilityLike) -> Probability:
        """
        Exact product of two probabilities.

        The product of two values in ``[0, 1]`` stays in ``[0, 1]``, so this
        never fails for valid operands.
        """
        return Probability(self.value * Probability.coerce(other).value)

    def complement(self) -> Probability:
        """Return ``1 - p``."""
        return Probability(_ONE - self.value)

    def __mul__(self, other: object) -> Probability:
        if isinstance(other, Probability):
            return self.multiply(other)
        return NotImplemented

    def __invert__(self) -> Probability:
        return self.complement()

    # ---------- comparison ----------

    @staticmethod
    def _comparable(other: object) -> Fraction | None:
        if isinstance(other, Probability):
            return other.value
        if isinstance(other, (int, Fraction, Decimal, float)):
            try:
                return _to_fraction(other)
            except RangeError:
                return None
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value == rhs

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value < rhs

    def __le__(self, other: object) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value <= rhs

    def __gt__(self, other: object) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value > rhs

    def __ge__(self, other: object) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self.value >= rhs

    def is_close(self, other: ProbabilityLike | Number, tolerance: float | None = None) -> bool:
        """
        Compare with another value using floating point tolerance.

        Parameters
        ----------
        other : ProbabilityLike
            Value to compare with. It does not need to be a valid probability.
        tolerance : float, optional
            Absolute tolerance; defaults to ``calculus_config().float_tolerance``.
        """
        if tolerance is None:
            tolerance = calculus_config().float_tolerance
        rhs = float(other.value) if isinstance(other, Probability) else float(_to_fraction(other))
        return math.isclose(self.to_float(), rhs, rel_tol=0.0, abs_tol=tolerance)

    # ---------- conversions ----------

    def to_fraction(self) -> Fraction:
        """Lossless conversion."""
        return self.value

    def to_decimal(self, precision: int | None = None) -> Decimal:
        """
        Convert to :class:`~decimal.Decimal`.

        Exact when the fraction terminates within ``precision`` significant
        digits; otherwise rounded to ``precision`` digits
        (``calculus_config().decimal_precision`` by default).
        """
        if precision is None:
            precision = calculus_config().decimal_precision
        with localcontext() as ctx:
            ctx.prec = precision
            return Decimal(self.value.numerator) / Decimal(self.value.denominator)

    def to_float(self) -> float:
        """Approximate conversion for display and tolerant comparison."""
        return float(self.value)

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self.value != _ZERO

    def __repr__(self) -> str:
        return f"Probability({self.value})"

    def __str__(self) -> str:
        digits = calculus_config().display_precision
        percent = round(self.value * 100, digits)
        text = f"{float(percent):.{digits}f}"
        if digits:
            text = text.rstrip("0").rstrip(".")
        return f"{text}%"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(self.to_float(), format_spec)


_IMPOSSIBLE = Probability(0)
_CERTAIN = Probability(1)


def multiply(a: ProbabilityLike, b: ProbabilityLike) -> Probability:
    """Exact product of two probabilities."""
    return Probability.coerce(a).multiply(b)


def complement(p: ProbabilityLike) -> Probability:
    """Return ``1 - p``."""
    return Probability.coerce(p).complement()


def total(probabilities: Iterable[ProbabilityLike]) -> Probability:
    """
    Sum probabilities of mutually exclusive events.

    Raises
    ------
    RangeError
        If the sum exceeds 1.
    """
    return Probability(sum((Probability.coerce(p).value for p in probabilities), _ZERO))


__all__ = [
    "Probability",
    "multiply",
    "complement",
    "total",
]
