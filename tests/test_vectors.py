import numpy as np
import pytest
from numpy.testing import assert_allclose

from common.exceptions import DimensionMismatchError, ValidationError
from common.types import GeoPoints
from polar_projection.frames import to_projected
from polar_projection.vectors import (
    geo_to_proj_vector,
    proj_to_geo_vector,
    rotate_to_geographic,
    rotate_to_projected,
)


def test_identity_on_default_meridian():
    u = np.array([1.0, -2.0, 0.5])
    v = np.array([0.0, 3.0, -4.0])
    vx, vy = geo_to_proj_vector(np.full(3, -45.0), u, v)
    assert_allclose(vx, u, atol=1e-12)
    assert_allclose(vy, v, atol=1e-12)


def test_quarter_turn_at_45_east():
    vx, vy = geo_to_proj_vector(45.0, 1.0, 0.0)
    assert_allclose([vx, vy], [0.0, 1.0], atol=1e-12)

    u, v = proj_to_geo_vector(45.0, 0.0, 1.0)
    assert_allclose([u, v], [1.0, 0.0], atol=1e-12)


def test_rotation_round_trip_and_magnitude():
    rng = np.random.default_rng(42)
    lon = rng.uniform(-180, 180, size=(4, 5))
    u = rng.normal(size=(4, 5))
    v = rng.normal(size=(4, 5))

    vx, vy = geo_to_proj_vector(lon, u, v)
    assert_allclose(np.hypot(vx, vy), np.hypot(u, v))

    u2, v2 = proj_to_geo_vector(lon, vx, vy)
    assert_allclose(u2, u, atol=1e-12)
    assert_allclose(v2, v, atol=1e-12)


def test_projected_location_matches_geographic():
    geo = GeoPoints([75.0, 82.0], [30.0, -120.0])
    u = np.array([3.0, -1.0])
    v = np.array([1.0, 2.0])

    expected = geo_to_proj_vector(geo, u, v)
    from_xy = geo_to_proj_vector(to_projected(geo), u, v)
    assert_allclose(from_xy, expected, atol=1e-9)


def test_rotate_with_unknown_frame():
    geo = GeoPoints(75.0, 30.0)
    xy = to_projected(geo)

    from_geo = rotate_to_projected(75.0, 30.0, 2.0, -1.0)
    from_xy = rotate_to_projected(xy.x, xy.y, 2.0, -1.0)
    assert_allclose(from_geo, geo_to_proj_vector(30.0, 2.0, -1.0), atol=1e-12)
    assert_allclose(from_xy, from_geo, atol=1e-9)

    u, v = rotate_to_geographic(75.0, 30.0, *from_geo)
    assert_allclose([u, v], [2.0, -1.0], atol=1e-12)


def test_component_shape_mismatch():
    with pytest.raises(DimensionMismatchError):
        geo_to_proj_vector([0.0, 10.0], [1.0, 2.0], [1.0])
    with pytest.raises(DimensionMismatchError):
        proj_to_geo_vector([0.0, 10.0], [1.0, 2.0, 3.0], [1.0, 2.0, 3.0])


def test_meridian_keyword_keeps_fixed_offset():
    lon = np.array([10.0, -100.0])
    u = np.array([1.0, -0.5])
    v = np.array([2.0, 3.0])

    default = geo_to_proj_vector(lon, u, v)
    assert_allclose(geo_to_proj_vector(lon, u, v, meridian=-45), default)
    assert_allclose(geo_to_proj_vector(lon, u, v, meridian=0), default)

    vx, vy = default
    assert_allclose(proj_to_geo_vector(lon, vx, vy, meridian=-45), (u, v), atol=1e-12)
    assert_allclose(proj_to_geo_vector(lon, vx, vy, meridian=30), (u, v), atol=1e-12)


def test_meridian_must_be_finite_scalar():
    with pytest.raises(ValidationError):
        geo_to_proj_vector(10.0, 1.0, 2.0, meridian=np.nan)
    with pytest.raises(ValidationError):
        proj_to_geo_vector(10.0, 1.0, 2.0, meridian=[0.0, 1.0])
