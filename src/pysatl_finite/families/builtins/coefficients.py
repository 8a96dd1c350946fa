"""
Binomial coefficients and probability powers.

Exact integer recurrences used by the binomial and hypergeometric families.
No factorials are computed.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_finite.errors import RangeError
from pysatl_finite.probability import Probability

if TYPE_CHECKING:
    from pysatl_finite.types import ProbabilityLike


def binomial_row(n: int) -> list[int]:
    """
    Row ``C(n, 0), ..., C(n, n)`` of Pascal's triangle.

    Uses ``C(n, k) = C(n, k - 1) * (n + 1 - k) / k`` on the first half of the
    row and mirrors it (``C(n, k) = C(n, n - k)``).

    Raises
    ------
    RangeError
        If ``n`` is negative.
    """
    if n < 0:
        raise RangeError(f"Row index must be non-negative, got {n}")
    row = [1] * (n + 1)
    for k in range(1, n // 2 + 1):
        # exact: C(n, k-1) * (n+1-k) is always divisible by k
        row[k] = row[n - k] = row[k - 1] * (n + 1 - k) // k
    return row


def pascal_triangle(size: int) -> list[list[int]]:
    """
    Rows ``0..size`` of Pascal's triangle.

    Row ``n`` is filled from row ``n - 1`` by
    ``C(n, k) = C(n - 1, k - 1) + C(n - 1, k)`` on its first half and
    mirrored. Time and memory are quadratic in ``size``.

    Raises
    ------
    RangeError
        If ``size`` is negative.
    """
    if size < 0:
        raise RangeError(f"Triangle size must be non-negative, got {size}")
    triangle = [[1]]
    for n in range(1, size + 1):
        previous = triangle[n - 1]
        row = [1] * (n + 1)
        for k in range(1, n // 2 + 1):
            row[k] = row[n - k] = previous[k - 1] + previous[k]
        triangle.append(row)
    return triangle


def powers(p: ProbabilityLike, n: int) -> list[Probability]:
    """``p**0, ..., p**n`` by repeated exact multiplication."""
    base = Probability.coerce(p)
    result = [Probability.certain()]
    for _ in range(n):
        result.append(result[-1] * base)
    return result


__all__ = [
    "binomial_row",
    "pascal_triangle",
    "powers",
]
