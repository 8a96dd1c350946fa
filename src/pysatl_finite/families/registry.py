"""
Family Register
===============

Process-wide table of the configured discrete families. Factories resolve
their family here by name, so a family becomes usable as soon as its
``configure_*`` function has registered it.

Names are compared as plain strings: ``FamilyName.BINOMIAL`` and
``"Binomial"`` address the same entry.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

from pysatl_finite.errors import DuplicateFamilyError, UnknownFamilyError

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_finite.families.parametric_family import ParametricFamily
    from pysatl_finite.types import FamilyName

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Singleton table ``name -> ParametricFamily``.

    All class methods operate on the single shared instance, created lazily.
    Registration order is preserved.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: FamilyName | str) -> ParametricFamily:
        """
        Family registered under ``name``.

        Raises
        ------
        UnknownFamilyError
            If nothing is registered under ``name``.
        """
        families = cls()._families
        try:
            return families[str(name)]
        except KeyError:
            known = ", ".join(families) or "none"
            raise UnknownFamilyError(
                f"No family {name} found in register (known: {known})"
            ) from None

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its name.

        Raises
        ------
        DuplicateFamilyError
            If the name is already taken.
        """
        families = cls()._families
        key = str(family.name)
        if key in families:
            raise DuplicateFamilyError(f"Family {key} already found in register")
        families[key] = family
        logger.debug("Registered family %s", key)

    @classmethod
    def contains(cls, name: FamilyName | str) -> bool:
        return str(name) in cls()._families

    @classmethod
    def names(cls) -> list[str]:
        """Registered names in registration order."""
        return list(cls()._families)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


__all__ = ["ParametricFamilyRegister"]
