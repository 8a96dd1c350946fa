"""
Parametric Families module for the builtin finite distributions.

This package provides the machinery for declaring families of finite
distributions with validated parametrizations, the global register of
families, and the public factories built on top of them.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .configuration import configure_families_register, reset_families_register
from .factories import (
    bernoulli,
    binomial,
    certainly,
    family,
    hypergeometric,
    impossible,
    one_of,
    rademacher,
    uniform,
)
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
    # factories
    "family",
    "impossible",
    "certainly",
    "uniform",
    "one_of",
    "bernoulli",
    "rademacher",
    "binomial",
    "hypergeometric",
]
