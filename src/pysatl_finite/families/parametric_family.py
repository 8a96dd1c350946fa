"""
Parametric family definitions and management infrastructure.

This module contains the class describing a parametric family of finite
distributions: its parametrizations, the exact mass function building a
:class:`~pysatl_finite.distributions.distribution.Distribution` from base
parameters, and optional closed-form characteristics (mean, variance).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_finite.distributions.distribution import Distribution
from pysatl_finite.distributions.equality import STRUCTURAL

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Any

    from pysatl_finite.distributions.equality import EqualityStrategy
    from pysatl_finite.distributions.weighted import WeightedValue
    from pysatl_finite.families.parametrizations import Parametrization
    from pysatl_finite.types import CharacteristicName, ParametrizationName

    type MassFunction = Callable[[Parametrization], Iterable[WeightedValue[Any]]]
    type ParametrizedFunction = Callable[[Parametrization], Any]

logger = logging.getLogger(__name__)


class ParametricFamily:
    """
    A family of finite distributions with multiple parametrizations.

    Parameters
    ----------
    name : str
        Name of the family.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    mass_function : Callable[[Parametrization], Iterable[WeightedValue]]
        Builds the weighted outcomes from base parameters.
    distr_characteristics : dict[str, dict[str, Callable] or Callable], optional
        Closed-form characteristics. Single functions are treated as defined
        for the base parametrization.
    equality : EqualityStrategy, default STRUCTURAL
        Grouping strategy of the produced distributions.
    """

    def __init__(
        self,
        name: str,
        distr_parametrizations: list[ParametrizationName],
        mass_function: MassFunction,
        distr_characteristics: dict[
            CharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ]
        | None = None,
        equality: EqualityStrategy = STRUCTURAL,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family {name} needs at least one parametrization")

        self._name = name
        self._mass_function = mass_function
        self.equality = equality

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.base_parametrization_name: value}

        self.distr_characteristics: dict[
            CharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in (distr_characteristics or {}).items()}

        # Precompute analytical plan
        self._analytical_plan: dict[
            ParametrizationName, dict[CharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[CharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If the name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class
        logger.debug("Registered parametrization %s of family %s", name, self.name)

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def parameters(
        self, parametrization_name: str | None = None, **parameters_values: Any
    ) -> Parametrization:
        """
        Instantiate and validate parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        RangeError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return parameters

    def distribution(
        self,
        parametrization_name: str | None = None,
        *,
        equality: EqualityStrategy | None = None,
        **parameters_values: Any,
    ) -> Distribution[Any]:
        """
        Create the distribution for given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        equality : EqualityStrategy, optional
            Grouping strategy of the result; the family default when omitted.
        **parameters_values
            Parameter values.

        Returns
        -------
        Distribution
            Normalized exact distribution.
        """
        parameters = self.parameters(parametrization_name, **parameters_values)
        base_parameters = self.to_base(parameters)
        base_parameters.validate()
        strategy = self.equality if equality is None else equality
        return Distribution(self._mass_function(base_parameters), strategy)

    def characteristic(
        self,
        characteristic_name: CharacteristicName,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Any:
        """
        Evaluate a closed-form characteristic.

        Uses the implementation given for the requested parametrization, or
        falls back to the base one.

        Raises
        ------
        KeyError
            If the family provides no such characteristic.
        """
        parameters = self.parameters(parametrization_name, **parameters_values)
        plan = self._analytical_plan.get(parameters.name, {})
        if characteristic_name not in plan:
            raise KeyError(
                f"Family {self.name} has no analytical '{characteristic_name}' characteristic"
            )
        provider_name = plan[characteristic_name]
        params_obj = parameters if provider_name == parameters.name else self.to_base(parameters)
        return self.distr_characteristics[characteristic_name][provider_name](params_obj)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.
        """
        from pysatl_finite.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution


__all__ = ["ParametricFamily"]
