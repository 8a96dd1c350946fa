"""
Probabilistic State Transitions
===============================

A transition is any function ``state -> Distribution[state]``: a single step
of a stochastic process. Multi-step processes are expressed by composing
transitions instead of writing an explicit state machine.

- :func:`then`: sequential composition through :meth:`Distribution.bind`.
- :func:`from_`: evaluate a transition on an initial state.
- :func:`deterministic`: lift a deterministic step.
- :func:`chain`: compose any number of steps left to right.
- :func:`iterate`: repeat one step a fixed number of times.
- :func:`unfold`: the distributions after 0, 1, 2, ... steps.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_finite.distributions.distribution import Distribution
from pysatl_finite.errors import RangeError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from pysatl_finite.types import Transition


def deterministic[T](step: Callable[[T], T]) -> Transition[T]:
    """View a deterministic step as a transition returning a point distribution."""

    def _transition(state: T) -> Distribution[T]:
        return Distribution.unit(step(state))

    return _transition


def then[T](first: Transition[T], second: Transition[T]) -> Transition[T]:
    """
    Sequential composition: run ``first``, then ``second`` from every
    reachable intermediate state.
    """

    def _transition(state: T) -> Distribution[T]:
        return first(state).bind(second)

    return _transition


def chain[T](*transitions: Transition[T]) -> Transition[T]:
    """
    Compose transitions left to right.

    ``chain(a, b, c)`` equals ``then(then(a, b), c)``; the empty chain is the
    transition that stays put. Steps are bound one after another, so long
    chains do not nest calls.
    """
    steps = tuple(transitions)

    def _transition(state: T) -> Distribution[T]:
        current: Distribution[T] = Distribution.unit(state)
        for step in steps:
            current = current.bind(step)
        return current

    return _transition


def from_[T](transition: Transition[T], initial_state: T) -> Distribution[T]:
    """Evaluate a transition (or a composed chain) on ``initial_state``."""
    return transition(initial_state)


def iterate[T](transition: Transition[T], steps: int) -> Transition[T]:
    """
    Self-composition of ``transition``, ``steps`` times.

    Raises
    ------
    RangeError
        If ``steps`` is negative.
    """
    if steps < 0:
        raise RangeError(f"Number of steps must be non-negative, got {steps}")

    def _transition(state: T) -> Distribution[T]:
        current: Distribution[T] = Distribution.unit(state)
        for _ in range(steps):
            current = current.bind(transition)
        return current

    return _transition


def unfold[T](transition: Transition[T], initial_state: T) -> Iterator[Distribution[T]]:
    """
    Yield the state distribution after 0, 1, 2, ... steps (infinite).

    The first distribution is the point mass on ``initial_state``; each
    following one binds the previous distribution with ``transition``.
    """
    current: Distribution[T] = Distribution.unit(initial_state)
    while True:
        yield current
        current = current.bind(transition)


__all__ = [
    "deterministic",
    "then",
    "chain",
    "from_",
    "iterate",
    "unfold",
]
