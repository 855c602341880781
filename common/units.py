"""
Unit Registry and Dimensional Analysis for Arctic Mapping.

This module provides a centralized unit system using the `pint` library.
Grid widths, resolutions and circle radii are conventionally given in
kilometers while the projection plane works in meters; spacing along a
path is given in meters. Any of these may also be passed as a pint
quantity, in which case the attached unit wins over the convention.

Example Usage
-------------
>>> from common.units import Q_, to_meters
>>> to_meters(Q_(2.5, 'nautical_mile'), 'km')
4630.0
>>> to_meters(2.5, 'km')
2500.0
"""

from functools import wraps
from typing import Any, Callable, Dict, Union

import numpy as np
from numpy.typing import NDArray

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.exceptions import ValidationError

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


# Scale bar labels accepted by the map layout helpers. "nm" means nautical
# miles here, not nanometers.
LENGTH_UNIT_ALIASES: Dict[str, str] = {
    "km": "kilometer",
    "kilometer": "kilometer",
    "kilometers": "kilometer",
    "nmi": "nautical_mile",
    "nm": "nautical_mile",
    "nautical miles": "nautical_mile",
    "ft": "foot",
    "foot": "foot",
    "feet": "foot",
    "mi": "mile",
    "mile": "mile",
    "miles": "mile",
    "m": "meter",
    "meter": "meter",
    "meters": "meter",
    "yd": "yard",
    "yard": "yard",
    "yards": "yard",
}


class UnitRegistry:
    """Wrapper around the pint registry with map-unit helpers.

    Examples
    --------
    >>> units = UnitRegistry()
    >>> units.meters_per_unit('nmi')
    1852.0
    """

    def __init__(self):
        self._registry = ureg

    @property
    def registry(self) -> PintUnitRegistry:
        """Access the underlying pint registry."""
        return self._registry

    def quantity(self, value: float, unit: str) -> pint.Quantity:
        """Create a quantity with units."""
        return self._registry.Quantity(value, unit)

    def resolve_length_unit(self, alias: str) -> str:
        """Map a user-facing length label to a pint unit name.

        Raises
        ------
        ValidationError
            If the label is not a recognized length unit.
        """
        try:
            return LENGTH_UNIT_ALIASES[alias.lower()]
        except (KeyError, AttributeError):
            raise ValidationError(f"Unrecognized unit type {alias!r}.") from None

    def meters_per_unit(self, alias: str) -> float:
        """Number of meters in one of the given length unit."""
        unit = self.resolve_length_unit(alias)
        return float(self._registry.Quantity(1.0, unit).to("meter").magnitude)

    def validate_dimensionality(
        self,
        quantity: pint.Quantity,
        expected_dim: str
    ) -> bool:
        """Check if a quantity has the expected dimensionality.

        Raises
        ------
        pint.DimensionalityError
            If dimensionality does not match.
        """
        expected = self._registry.parse_expression(expected_dim).dimensionality
        if quantity.dimensionality != expected:
            raise pint.DimensionalityError(
                quantity.units,
                expected,
                quantity.dimensionality,
                expected
            )
        return True


def validate_units(expected_units: Dict[str, str]):
    """Decorator to validate units of quantity arguments.

    Bare numbers pass through untouched; pint quantities must be
    convertible to the expected unit.

    Parameters
    ----------
    expected_units : dict[str, str]
        Mapping from argument names to expected unit strings.

    Examples
    --------
    >>> @validate_units({'radius': 'km'})
    ... def area(radius):
    ...     return radius ** 2
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            import inspect
            sig = inspect.signature(func)
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, expected_unit in expected_units.items():
                if param_name in bound.arguments:
                    value = bound.arguments[param_name]
                    if isinstance(value, pint.Quantity):
                        try:
                            value.to(expected_unit)
                        except pint.DimensionalityError as e:
                            raise ValidationError(
                                f"Parameter '{param_name}' has incompatible units. "
                                f"Expected {expected_unit}, got {value.units}"
                            ) from e

            return func(*args, **kwargs)
        return wrapper
    return decorator


def to_meters(
    value: Union[float, NDArray[np.float64], pint.Quantity],
    default_unit: str
) -> Any:
    """Convert a length to meters.

    Parameters
    ----------
    value : float, array_like or pint.Quantity
        Length value. Bare numbers are interpreted in ``default_unit``.
    default_unit : str
        Unit for bare numbers (e.g. 'km' for grid widths).

    Returns
    -------
    float or ndarray
        Magnitude in meters.
    """
    if isinstance(value, pint.Quantity):
        quantity = value
    else:
        quantity = ureg.Quantity(np.asarray(value, dtype=np.float64), default_unit)
    magnitude = quantity.to("meter").magnitude
    if np.ndim(magnitude) == 0:
        return float(magnitude)
    return np.asarray(magnitude, dtype=np.float64)
