"""Shared predicates for parametrization constraints."""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from typing import Any

from pysatl_finite.errors import RangeError
from pysatl_finite.probability import Probability


def is_probability(value: Any) -> bool:
    """Whether ``value`` can be read as a probability in ``[0, 1]``."""
    try:
        Probability.coerce(value)
    except (RangeError, TypeError, ValueError):
        return False
    return True


def is_count(value: Any) -> bool:
    """Whether ``value`` is a non-negative integer (``bool`` excluded)."""
    if isinstance(value, bool):
        return False
    try:
        return operator.index(value) >= 0
    except TypeError:
        return False
