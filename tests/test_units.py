import numpy as np
import pint
import pytest
from numpy.testing import assert_allclose

from common.exceptions import (
    ArcticMappingError,
    DimensionMismatchError,
    SingularProjectionError,
    ValidationError,
)
from common.units import Q_, UnitRegistry, to_meters, validate_units


def test_to_meters_bare_numbers_use_default_unit():
    assert to_meters(2.5, "km") == 2500.0
    assert to_meters(3, "m") == 3.0
    assert_allclose(to_meters([1, 2], "km"), [1000.0, 2000.0])


def test_to_meters_quantity_overrides_default():
    assert_allclose(to_meters(Q_(2.5, "nautical_mile"), "km"), 4630.0)
    assert_allclose(to_meters(Q_(100, "m"), "km"), 100.0)


@pytest.mark.parametrize("alias, meters", [
    ("km", 1000.0),
    ("nmi", 1852.0),
    ("nm", 1852.0),
    ("ft", 0.3048),
    ("mi", 1609.344),
    ("yd", 0.9144),
    ("m", 1.0),
    ("Kilometers", 1000.0),
])
def test_meters_per_unit(alias, meters):
    assert_allclose(UnitRegistry().meters_per_unit(alias), meters)


def test_unknown_unit_alias():
    with pytest.raises(ValidationError):
        UnitRegistry().resolve_length_unit("furlong")


def test_validate_dimensionality():
    units = UnitRegistry()
    assert units.validate_dimensionality(units.quantity(5, "km"), "meter")
    with pytest.raises(pint.DimensionalityError):
        units.validate_dimensionality(units.quantity(5, "second"), "meter")


def test_validate_units_decorator():
    @validate_units({"radius": "km"})
    def circumference(radius):
        return 2 * np.pi * to_meters(radius, "km")

    assert_allclose(circumference(1), 2000 * np.pi)
    assert_allclose(circumference(Q_(500, "m")), 1000 * np.pi)
    with pytest.raises(ValidationError):
        circumference(Q_(1, "kelvin"))


def test_exception_hierarchy():
    assert issubclass(DimensionMismatchError, ValidationError)
    assert issubclass(ValidationError, ValueError)
    assert issubclass(ValidationError, ArcticMappingError)
    assert issubclass(SingularProjectionError, ArcticMappingError)
