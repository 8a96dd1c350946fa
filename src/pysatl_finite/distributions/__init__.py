"""
Distributions subpackage

The exact finite distribution monad of PySATL Finite:

- weighted outcomes (:mod:`.weighted`);
- grouping strategies deciding which outcomes are merged (:mod:`.equality`);
- the distribution itself (:mod:`.distribution`);
- transition combinators for multi-step processes (:mod:`.transitions`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import Distribution
from .equality import (
    IDENTITY,
    STRUCTURAL,
    EqualityStrategy,
    IdentityEquality,
    KeyEquality,
    StructuralEquality,
)
from .transitions import chain, deterministic, from_, iterate, then, unfold
from .weighted import WeightedValue

__all__ = [
    # distribution
    "Distribution",
    "WeightedValue",
    # grouping
    "EqualityStrategy",
    "StructuralEquality",
    "KeyEquality",
    "IdentityEquality",
    "STRUCTURAL",
    "IDENTITY",
    # transitions
    "then",
    "from_",
    "deterministic",
    "chain",
    "iterate",
    "unfold",
]
