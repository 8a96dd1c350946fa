"""
Distribution Families Configuration
====================================

This module configures the builtin discrete families of PySATL Finite:

- Uniform, OneOf, Bernoulli and Rademacher: point-mass families;
- Binomial: successes in independent trials;
- Hypergeometric: successes in draws without replacement.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Configuration happens once; :func:`reset_families_register` undoes it.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_finite.families.builtins import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_hypergeometric_family,
    configure_one_of_family,
    configure_rademacher_family,
    configure_uniform_family,
)
from pysatl_finite.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all builtin families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of families.
    """
    configure_uniform_family()
    configure_one_of_family()
    configure_bernoulli_family()
    configure_rademacher_family()
    configure_binomial_family()
    configure_hypergeometric_family()
    register = ParametricFamilyRegister()
    logger.debug("Configured families: %s", ", ".join(register.names()))
    return register


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()


__all__ = [
    "configure_families_register",
    "reset_families_register",
]
