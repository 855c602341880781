import numpy as np
import pytest
from numpy.testing import assert_allclose

from common.exceptions import ValidationError
from common.types import GeoPoints, ProjectedPoints
from common.units import Q_
from polar_geometry.paths import INTERPOLATION_METHODS, cumulative_distance, resample_uniform


def test_cumulative_distance_basic():
    path = ProjectedPoints([0.0, 3.0, 3.0], [0.0, 4.0, 4.0])
    assert_allclose(cumulative_distance(path), [0.0, 5.0, 5.0])


def test_cumulative_distance_reference_point():
    path = ProjectedPoints([0.0, 3.0, 3.0], [0.0, 4.0, 4.0])
    d = cumulative_distance(path, reference=ProjectedPoints(3.0, 4.0))
    # Ties in nearest vertex go to the first one
    assert_allclose(d, [-5.0, 0.0, 0.0])


def test_cumulative_distance_km_and_single_point():
    path = ProjectedPoints([0.0, 3000.0], [0.0, 4000.0])
    assert_allclose(cumulative_distance(path, km=True), [0.0, 5.0])
    assert_allclose(cumulative_distance(ProjectedPoints([7.0], [8.0])), [0.0])


def test_cumulative_distance_keeps_orientation():
    row = ProjectedPoints([[0.0, 3.0, 6.0]], [[0.0, 4.0, 8.0]])
    col = ProjectedPoints([[0.0], [3.0], [6.0]], [[0.0], [4.0], [8.0]])
    assert cumulative_distance(row).shape == (1, 3)
    assert cumulative_distance(col).shape == (3, 1)
    assert_allclose(cumulative_distance(col).ravel(), [0.0, 5.0, 10.0])


def test_cumulative_distance_geographic_path():
    path = GeoPoints([80.0, 80.0, 81.0], [-45.0, -40.0, -40.0])
    d = cumulative_distance(path)
    assert d.shape == (3,)
    assert d[0] == 0.0
    assert np.all(np.diff(d) > 0)


def test_cumulative_distance_validation():
    with pytest.raises(ValidationError):
        cumulative_distance(ProjectedPoints(np.zeros((2, 2)), np.zeros((2, 2))))
    with pytest.raises(ValidationError):
        cumulative_distance(ProjectedPoints([], []))
    with pytest.raises(ValidationError):
        cumulative_distance(
            ProjectedPoints([0.0, 1.0], [0.0, 1.0]),
            reference=ProjectedPoints([0.0, 1.0], [0.0, 1.0]),
        )


def test_resample_uniform_drops_remainder():
    path = ProjectedPoints([0.0, 10.0], [0.0, 0.0])
    out = resample_uniform(path, 3)
    assert isinstance(out, ProjectedPoints)
    assert_allclose(out.x, [0.0, 3.0, 6.0, 9.0], atol=1e-9)
    assert_allclose(out.y, 0.0, atol=1e-9)


def test_resample_uniform_reaches_end_on_exact_multiple():
    path = ProjectedPoints([0.0, 5.0, 5.0, 10.0], [0.0, 0.0, 0.0, 0.0])
    out = resample_uniform(path, 5)
    assert_allclose(out.x, [0.0, 5.0, 10.0], atol=1e-9)


def test_resample_uniform_around_a_corner():
    path = ProjectedPoints([0.0, 4.0, 4.0], [0.0, 0.0, 4.0])
    out = resample_uniform(path, 2)
    assert_allclose(out.x, [0.0, 2.0, 4.0, 4.0, 4.0], atol=1e-9)
    assert_allclose(out.y, [0.0, 0.0, 0.0, 2.0, 4.0], atol=1e-9)


def test_resample_uniform_quantity_spacing_and_orientation():
    path = ProjectedPoints([[0.0], [10.0]], [[0.0], [0.0]])
    out = resample_uniform(path, Q_(0.003, "km"))
    assert out.shape == (4, 1)
    assert_allclose(out.x.ravel(), [0.0, 3.0, 6.0, 9.0], atol=1e-9)


def test_resample_uniform_geographic_path():
    path = GeoPoints([70.0, 72.0], [-45.0, -45.0])
    out = resample_uniform(path, 10_000)
    assert isinstance(out, GeoPoints)
    assert_allclose(out.lon, -45.0, atol=1e-6)
    assert_allclose(out.lat[0], 70.0, atol=1e-6)
    assert np.all(np.diff(out.lat) > 0)


def test_resample_uniform_nearest_method():
    path = ProjectedPoints([0.0, 10.0, 20.0], [0.0, 0.0, 0.0])
    out = resample_uniform(path, 10, method="nearest")
    assert_allclose(out.x, [0.0, 10.0, 20.0])


@pytest.mark.parametrize("path, spacing, method", [
    (ProjectedPoints([0.0], [0.0]), 1, "linear"),
    (ProjectedPoints([0.0, 10.0], [0.0, 0.0]), 0, "linear"),
    (ProjectedPoints([0.0, 10.0], [0.0, 0.0]), -2, "linear"),
    (ProjectedPoints([0.0, 10.0], [0.0, 0.0]), [1, 2], "linear"),
    (ProjectedPoints([0.0, 10.0], [0.0, 0.0]), 1, "spline"),
])
def test_resample_uniform_validation(path, spacing, method):
    with pytest.raises(ValidationError):
        resample_uniform(path, spacing, method=method)


@pytest.mark.parametrize("method, too_few", [
    ("quadratic", 2),
    ("cubic", 3),
    ("akima", 2),
])
def test_resample_uniform_method_needs_enough_points(method, too_few):
    x = 10.0 * np.arange(too_few)
    path = ProjectedPoints(x, np.zeros_like(x))
    with pytest.raises(ValidationError):
        resample_uniform(path, 3, method=method)


def test_resample_uniform_counts_distinct_points_only():
    # Four vertices but only three distinct distances along the path
    path = ProjectedPoints([0.0, 10.0, 10.0, 20.0], [0.0, 0.0, 0.0, 0.0])
    with pytest.raises(ValidationError):
        resample_uniform(path, 5, method="cubic")


@pytest.mark.parametrize("method", list(INTERPOLATION_METHODS))
def test_resample_uniform_every_method_on_straight_path(method):
    path = ProjectedPoints([0.0, 10.0, 20.0, 30.0, 40.0], [0.0, 0.0, 0.0, 0.0, 0.0])
    out = resample_uniform(path, 5, method=method)
    assert out.shape == (9,)
    assert_allclose(out.x[:-1:2], [0.0, 10.0, 20.0, 30.0], atol=1e-9)
    assert_allclose(out.y, 0.0, atol=1e-9)
