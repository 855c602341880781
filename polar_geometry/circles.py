"""
Circles of fixed radius on the projection plane.

Each circle is a polygon of ``n_points`` vertices at angles
``2*pi*k/n_points`` for ``k = 1..n_points``. The last vertex sits at
``2*pi``, numerically next to (but not a repeat of) the first, which is
what fill routines expect for a closed outline.

The circles are round in projected meters, not on the ground: far from
70°N the ground radius differs from the requested one by the local scale
factor.
"""

from typing import List, Optional, Union

import numpy as np
from numpy.typing import ArrayLike

import pint

from common.constants import PhysicalConstants
from common.exceptions import DimensionMismatchError, ValidationError
from common.logging_config import get_logger
from common.types import Points, PolygonArray
from common.units import to_meters, validate_units
from polar_projection.frames import to_projected

logger = get_logger(__name__)

DEFAULT_POINTS_PER_CIRCLE = 1000


@validate_units({'radius': 'km'})
def make_circles(
    centers: Points,
    radius: Union[float, ArrayLike, pint.Quantity],
    n_points: int = DEFAULT_POINTS_PER_CIRCLE,
    km: bool = False,
    meridian: Optional[float] = None
) -> List[PolygonArray]:
    """Approximate circles around one or more centers.

    Parameters
    ----------
    centers : GeoPoints or ProjectedPoints
        Circle centers, any shape.
    radius : float, array_like or pint.Quantity
        Radius in kilometers, either one value for every circle or one
        per center (same shape as ``centers``).
    n_points : int
        Vertices per circle (default: 1000).
    km : bool
        Return vertex coordinates in kilometers instead of meters.
    meridian : float, optional
        Central meridian for geographic centers (default: -45, or the
        meridian already carried by projected centers).

    Returns
    -------
    list of ndarray
        One ``(n_points, 2)`` array of (x, y) vertices per center, in the
        flattened order of ``centers``.

    Raises
    ------
    ValidationError
        If a radius is negative or ``n_points`` is not a positive integer.
    DimensionMismatchError
        If a radius array does not match the centers.
    """
    if isinstance(n_points, bool) or int(n_points) != n_points or n_points < 1:
        raise ValidationError("Number of points per circle must be a positive integer.")
    n_points = int(n_points)

    r = to_meters(radius, "km")
    r = np.asarray(r, dtype=np.float64)
    if r.ndim != 0 and r.shape != centers.shape:
        raise DimensionMismatchError(
            "Input error: Circle radius declaration must either be a scalar value "
            "or its dimensions must match the dimensions of the circle center coordinates."
        )
    if np.any(r < 0):
        raise ValidationError("Circle radius must be non-negative.")

    xy = to_projected(centers, meridian)
    x = xy.x.ravel()
    y = xy.y.ravel()
    r = np.broadcast_to(r, xy.shape).ravel()

    if km:
        scale = PhysicalConstants.METERS_PER_KILOMETER
        x, y, r = x / scale, y / scale, r / scale

    t = 2 * np.pi / n_points * np.arange(1, n_points + 1)
    cos_t = np.cos(t)
    sin_t = np.sin(t)

    polygons = [
        np.column_stack([cx + cr * cos_t, cy + cr * sin_t])
        for cx, cy, cr in zip(x, y, r)
    ]

    logger.debug(f"Built {len(polygons)} circle(s) with {n_points} vertices each")
    return polygons
