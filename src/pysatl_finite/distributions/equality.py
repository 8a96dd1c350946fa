"""
Grouping Strategies
===================

Pluggable notions of outcome equality used when a distribution is normalized:

- :class:`EqualityStrategy`: protocol mapping an outcome to a hashable key;
  outcomes with equal keys are merged into a single support entry.
- :class:`StructuralEquality`: value equality; unhashable containers
  (lists, dicts, sets) are frozen recursively.
- :class:`KeyEquality`: equality of a projection of the outcome.
- :class:`IdentityEquality`: object identity.

``STRUCTURAL`` is the default strategy of every constructing operation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Hashable, Mapping, Set
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_finite.types import GroupingKey


@runtime_checkable
class EqualityStrategy(Protocol):
    """Protocol for grouping strategies."""

    def key(self, value: Any) -> GroupingKey: ...


# Private tags keep frozen lists and mappings apart from genuine tuples and frozensets.
_LIST_TAG = object()
_MAPPING_TAG = object()


def _freeze(value: Any) -> GroupingKey:
    if isinstance(value, Hashable) and not isinstance(value, tuple):
        return value
    if isinstance(value, tuple):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, Mapping):
        return (_MAPPING_TAG, frozenset((_freeze(k), _freeze(v)) for k, v in value.items()))
    if isinstance(value, Set):
        return frozenset(_freeze(v) for v in value)
    if isinstance(value, list):
        return (_LIST_TAG, tuple(_freeze(v) for v in value))
    raise TypeError(
        f"Outcome of type {type(value).__name__} is not hashable; "
        "pass an explicit equality strategy (e.g. KeyEquality)."
    )


class StructuralEquality(EqualityStrategy):
    """Group outcomes by value equality."""

    __slots__ = ()

    def key(self, value: Any) -> GroupingKey:
        return _freeze(value)

    def __repr__(self) -> str:
        return "StructuralEquality()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StructuralEquality)

    def __hash__(self) -> int:
        return hash(StructuralEquality)


@dataclass(frozen=True, slots=True)
class KeyEquality(EqualityStrategy):
    """
    Group outcomes by a projection.

    Parameters
    ----------
    projection : Callable[[Any], Hashable]
        Outcomes with equal projections are considered equal. The first
        outcome seen in a group represents it in the support.
    """

    projection: Callable[[Any], GroupingKey]

    def key(self, value: Any) -> GroupingKey:
        return _freeze(self.projection(value))


class IdentityEquality(EqualityStrategy):
    """Group outcomes by object identity."""

    __slots__ = ()

    def key(self, value: Any) -> GroupingKey:
        return id(value)

    def __repr__(self) -> str:
        return "IdentityEquality()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IdentityEquality)

    def __hash__(self) -> int:
        return hash(IdentityEquality)


STRUCTURAL = StructuralEquality()
"""Default grouping strategy."""

IDENTITY = IdentityEquality()
"""Identity-based grouping strategy."""


__all__ = [
    "EqualityStrategy",
    "StructuralEquality",
    "KeyEquality",
    "IdentityEquality",
    "STRUCTURAL",
    "IDENTITY",
]
