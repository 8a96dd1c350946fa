"""
Error Taxonomy
==============

Typed failures raised by the calculus. All of them are precondition
violations: they are raised at the point of construction or invocation and
are never recovered internally.

- :class:`RangeError`: a probability outside ``[0, 1]`` or inconsistent
  size parameters of a factory.
- :class:`MassOverflowError`: weighted values whose total mass exceeds 1
  beyond the configured tolerance.
- :class:`UndefinedConditionalError`: conditioning on an event of zero mass.
- :class:`UnknownFamilyError` and :class:`DuplicateFamilyError`: lookups and
  registrations in the family register.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class FiniteProbabilityError(Exception):
    """Base class of all calculus failures."""


class RangeError(FiniteProbabilityError, ValueError):
    """A value lies outside of its admissible range."""


class MassOverflowError(FiniteProbabilityError, ValueError):
    """Total probability mass of a distribution exceeds 1."""


class UndefinedConditionalError(FiniteProbabilityError, ZeroDivisionError):
    """Conditioning on an event that has zero probability."""


class UnknownFamilyError(FiniteProbabilityError, ValueError):
    """No family with the requested name is registered."""


class DuplicateFamilyError(FiniteProbabilityError, ValueError):
    """A family name is registered twice."""


__all__ = [
    "FiniteProbabilityError",
    "RangeError",
    "MassOverflowError",
    "UnknownFamilyError",
    "DuplicateFamilyError",
    "UndefinedConditionalError",
]
