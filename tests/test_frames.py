import numpy as np
import pytest
from numpy.testing import assert_allclose

from common.exceptions import DimensionMismatchError, ValidationError
from common.types import Frame, GeoPoints, ProjectedPoints
from polar_projection.frames import coerce_points, is_geo, to_geographic, to_projected


@pytest.mark.parametrize("a, b, expected", [
    (45, 90, True),
    (91, 0, False),
    (45, 400, False),
    (-90, -360, True),
    (0, 0, True),
    (-1.5e6, 2.0e5, False),
    (np.nan, 0, False),
])
def test_is_geo(a, b, expected):
    assert is_geo(a, b) is expected


def test_is_geo_requires_every_element():
    assert is_geo([10, 20, 30], [0, 0, 0])
    assert not is_geo([10, 20, 300], [0, 0, 0])


def test_coerce_points_picks_frame():
    geo = coerce_points(80.0, -45.0)
    assert isinstance(geo, GeoPoints)
    assert geo.frame is Frame.GEOGRAPHIC

    xy = coerce_points([-1.5e6, 2.0e5], [-5.0e5, 3.0e5], meridian=0)
    assert isinstance(xy, ProjectedPoints)
    assert xy.meridian == 0.0


def test_coerce_points_shape_mismatch():
    with pytest.raises(DimensionMismatchError):
        coerce_points([80.0, 81.0], [0.0])


def test_geo_points_reject_projected_values():
    with pytest.raises(ValidationError):
        GeoPoints(-1.5e6, 2.0e5)


def test_points_are_read_only():
    pts = GeoPoints([70.0, 80.0], [0.0, 10.0])
    with pytest.raises(ValueError):
        pts.lat[0] = 60.0


def test_projected_points_require_scalar_meridian():
    with pytest.raises(ValidationError):
        ProjectedPoints(0.0, 0.0, meridian=np.nan)


def test_to_projected_keeps_same_meridian():
    pts = ProjectedPoints([1.0e5], [-1.0e6])
    assert to_projected(pts) is pts
    assert to_projected(pts, -45) is pts


def test_to_projected_changes_meridian_through_geographic():
    geo = GeoPoints([72.0, 81.0], [-60.0, 15.0])
    on_default = to_projected(geo)
    on_zero = to_projected(on_default, meridian=0)
    assert on_zero.meridian == 0.0

    direct = to_projected(geo, meridian=0)
    assert_allclose(on_zero.x, direct.x, atol=1e-6)
    assert_allclose(on_zero.y, direct.y, atol=1e-6)

    back = to_geographic(on_zero)
    assert_allclose(back.lat, geo.lat, atol=1e-6)
    assert_allclose(back.lon, geo.lon, atol=1e-6)


def test_to_geographic_passthrough():
    geo = GeoPoints(80.0, 0.0)
    assert to_geographic(geo) is geo


def test_to_km():
    x_km, y_km = ProjectedPoints([1500.0], [-2500.0]).to_km()
    assert_allclose(x_km, [1.5])
    assert_allclose(y_km, [-2.5])
