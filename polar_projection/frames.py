"""
Frame handling for geographic and projected coordinates.

The core operations take ``GeoPoints`` or ``ProjectedPoints`` and never
guess. Numeric pairs of unknown kind (as passed around by plotting code)
go through ``coerce_points``, which applies the magnitude rule of
``is_geo`` explicitly:

    geographic  <=>  all |a| <= 90  and  all |b| <= 360

Projected meters almost always exceed those bounds. Points within a few
hundred meters of the pole do not, so ``(0, 0)`` is classified as
geographic (the equator at the prime meridian). That ambiguity is part of
the rule; it is never reported as an error. Wrap such values in
``ProjectedPoints`` directly.
"""

from typing import Union

import numpy as np
from numpy.typing import ArrayLike

from common.constants import PhysicalConstants
from common.exceptions import DimensionMismatchError
from common.types import GeoPoints, Points, ProjectedPoints
from polar_projection.projections import DEFAULT_MERIDIAN, forward, inverse


def is_geo(a: ArrayLike, b: ArrayLike) -> bool:
    """Guess whether ``(a, b)`` are latitude/longitude rather than x/y.

    Parameters
    ----------
    a, b : array_like
        Candidate latitude (or x) and longitude (or y).

    Returns
    -------
    bool
        True if every |a| <= 90 and every |b| <= 360. Any NaN makes the
        answer False.

    Examples
    --------
    >>> is_geo(45, 90)
    True
    >>> is_geo(91, 0)
    False
    >>> is_geo(0, 0)
    True
    """
    a_arr = np.asarray(a, dtype=np.float64)
    b_arr = np.asarray(b, dtype=np.float64)
    return bool(
        np.all(np.abs(a_arr) <= PhysicalConstants.MAX_ABS_LATITUDE)
        and np.all(np.abs(b_arr) <= PhysicalConstants.MAX_ABS_LONGITUDE)
    )


def coerce_points(
    a: ArrayLike,
    b: ArrayLike,
    meridian: float = DEFAULT_MERIDIAN
) -> Points:
    """Wrap an ambiguous numeric pair in the tagged type chosen by ``is_geo``.

    Parameters
    ----------
    a, b : array_like
        Latitude/longitude in degrees, or x/y in meters.
    meridian : float
        Central meridian attached to the result if it is projected.

    Returns
    -------
    GeoPoints or ProjectedPoints
    """
    if np.shape(a) != np.shape(b):
        raise DimensionMismatchError("Input error: Dimensions of input coordinates must agree.")
    if is_geo(a, b):
        return GeoPoints(a, b)
    return ProjectedPoints(a, b, meridian)


def to_projected(
    points: Points,
    meridian: Union[float, None] = None
) -> ProjectedPoints:
    """Express ``points`` in polar stereographic meters.

    Parameters
    ----------
    points : GeoPoints or ProjectedPoints
        Input coordinates.
    meridian : float, optional
        Target central meridian. Defaults to the meridian already carried
        by projected input, or -45 for geographic input. Projected input
        on a different meridian is re-projected through geographic
        coordinates.
    """
    if isinstance(points, ProjectedPoints):
        if meridian is None or float(meridian) == points.meridian:
            return points
        lat, lon = inverse(points.x, points.y, points.meridian)
        x, y = forward(lat, lon, meridian)
        return ProjectedPoints(x, y, meridian)

    if meridian is None:
        meridian = DEFAULT_MERIDIAN
    x, y = forward(points.lat, points.lon, meridian)
    return ProjectedPoints(x, y, meridian)


def to_geographic(points: Points) -> GeoPoints:
    """Express ``points`` as latitude/longitude using their own meridian."""
    if isinstance(points, GeoPoints):
        return points
    lat, lon = inverse(points.x, points.y, points.meridian)
    return GeoPoints(lat, lon)
