"""
Calculus Configuration
======================

Process-wide numeric settings of the calculus:

- ``mass_tolerance``: slack above 1 tolerated for the total input mass of a
  distribution before :class:`~pysatl_finite.errors.MassOverflowError` is raised;
- ``decimal_precision``: significant digits used by
  :meth:`Probability.to_decimal` for non-terminating fractions;
- ``display_precision``: decimals shown when a probability is rendered as a
  percentage;
- ``float_tolerance``: absolute tolerance of float comparisons.

Notes
-----
The configuration is built once by :func:`calculus_config` and cached, the
same way the global family register is configured. Defaults may be
overridden through environment variables read at build time:

``PYSATL_FINITE_MASS_TOLERANCE``, ``PYSATL_FINITE_DECIMAL_PRECISION``,
``PYSATL_FINITE_DISPLAY_PRECISION``, ``PYSATL_FINITE_FLOAT_TOLERANCE``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import os
from dataclasses import dataclass
from fractions import Fraction
from functools import lru_cache

logger = logging.getLogger(__name__)

ENV_PREFIX = "PYSATL_FINITE_"

DEFAULT_MASS_TOLERANCE = Fraction(1, 10**20)
DEFAULT_DECIMAL_PRECISION = 28
DEFAULT_DISPLAY_PRECISION = 2
DEFAULT_FLOAT_TOLERANCE = 1e-9


@dataclass(frozen=True, slots=True)
class CalculusConfig:
    """
    Numeric settings of the calculus.

    Parameters
    ----------
    mass_tolerance : Fraction
        Non-negative slack allowed above total mass 1.
    decimal_precision : int
        Significant digits of decimal conversions (positive).
    display_precision : int
        Maximal number of decimals in percentage rendering (non-negative).
    float_tolerance : float
        Absolute tolerance of float comparisons (non-negative).
    """

    mass_tolerance: Fraction = DEFAULT_MASS_TOLERANCE
    decimal_precision: int = DEFAULT_DECIMAL_PRECISION
    display_precision: int = DEFAULT_DISPLAY_PRECISION
    float_tolerance: float = DEFAULT_FLOAT_TOLERANCE

    def __post_init__(self) -> None:
        if self.mass_tolerance < 0:
            raise ValueError(f"mass_tolerance must be non-negative, got {self.mass_tolerance}")
        if self.decimal_precision <= 0:
            raise ValueError(
                f"decimal_precision must be positive, got {self.decimal_precision}"
            )
        if self.display_precision < 0:
            raise ValueError(
                f"display_precision must be non-negative, got {self.display_precision}"
            )
        if self.float_tolerance < 0:
            raise ValueError(
                f"float_tolerance must be non-negative, got {self.float_tolerance}"
            )


def _read_env[T](name: str, parse: type[T], default: T) -> T:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse(raw.strip())  # type: ignore[call-arg]
    except ValueError as exc:
        raise ValueError(f"Invalid value {raw!r} for {ENV_PREFIX + name}") from exc


@lru_cache(maxsize=1)
def calculus_config() -> CalculusConfig:
    """
    Build (once) and return the process-wide configuration.

    Returns
    -------
    CalculusConfig
        Defaults merged with environment overrides.

    Raises
    ------
    ValueError
        If an environment override cannot be parsed or is out of range.
    """
    config = CalculusConfig(
        mass_tolerance=_read_env("MASS_TOLERANCE", Fraction, DEFAULT_MASS_TOLERANCE),
        decimal_precision=_read_env("DECIMAL_PRECISION", int, DEFAULT_DECIMAL_PRECISION),
        display_precision=_read_env("DISPLAY_PRECISION", int, DEFAULT_DISPLAY_PRECISION),
        float_tolerance=_read_env("FLOAT_TOLERANCE", float, DEFAULT_FLOAT_TOLERANCE),
    )
    logger.debug("Calculus configuration loaded: %s", config)
    return config


def reset_calculus_config() -> None:
    """Drop the cached configuration so the next access rebuilds it."""
    calculus_config.cache_clear()


__all__ = [
    "CalculusConfig",
    "calculus_config",
    "reset_calculus_config",
]
