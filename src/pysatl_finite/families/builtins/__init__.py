"""
Built-in discrete families for PySATL Finite.

This package contains the standard finite families that are available by
default: point-mass families (uniform, two-point, Bernoulli, Rademacher),
the binomial and the hypergeometric family.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_finite.families.builtins.binomial import configure_binomial_family
from pysatl_finite.families.builtins.hypergeometric import configure_hypergeometric_family
from pysatl_finite.families.builtins.point import (
    configure_bernoulli_family,
    configure_one_of_family,
    configure_rademacher_family,
    configure_uniform_family,
)

__all__ = [
    "configure_uniform_family",
    "configure_one_of_family",
    "configure_bernoulli_family",
    "configure_rademacher_family",
    "configure_binomial_family",
    "configure_hypergeometric_family",
]
