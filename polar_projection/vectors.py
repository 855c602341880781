"""
Rotation of vector components between geographic and projected frames.

Geographic components (u, v) are zonal (eastward) and meridional
(northward). Projected components (vx, vy) follow the x and y axes of the
polar stereographic plane. Because the projection is conformal, the two
frames differ only by a rotation through

    theta = lon + 45°

so vector magnitudes are unchanged.

Notes
-----
The 45° offset is the complement of the default -45° central meridian and
is applied regardless of the meridian used for locating the points. A
vector field on a grid projected with another central meridian therefore
comes out rotated by (meridian + 45)°.
"""

from typing import Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from common.constants import PhysicalConstants
from common.exceptions import DimensionMismatchError
from common.types import GeoPoints, ProjectedPoints
from common.logging_config import get_logger
from polar_projection.frames import coerce_points, to_geographic
from polar_projection.projections import DEFAULT_MERIDIAN, _validate_meridian

logger = get_logger(__name__)

Location = Union[GeoPoints, ProjectedPoints, ArrayLike]


def _rotation_angle(
    location: Location,
    meridian: float,
    *components: ArrayLike
) -> Tuple[NDArray[np.float64], ...]:
    """Resolve the rotation angle in radians and check shapes."""
    meridian = _validate_meridian(meridian)
    if meridian != DEFAULT_MERIDIAN:
        logger.debug(
            f"Rotating vectors for meridian {meridian}; offset stays "
            f"{PhysicalConstants.VECTOR_ROTATION_OFFSET.value}°"
        )

    if isinstance(location, (GeoPoints, ProjectedPoints)):
        lon = to_geographic(location).lon
    else:
        lon = np.asarray(location, dtype=np.float64)

    arrays = [np.asarray(c, dtype=np.float64) for c in components]
    for arr in arrays:
        if arr.shape != lon.shape:
            raise DimensionMismatchError(
                f"All inputs must be of equal dimensions: location {lon.shape}, "
                f"component {arr.shape}."
            )

    theta = np.radians(lon + PhysicalConstants.VECTOR_ROTATION_OFFSET.value)
    return (theta, *arrays)


def geo_to_proj_vector(
    location: Location,
    u: ArrayLike,
    v: ArrayLike,
    meridian: float = DEFAULT_MERIDIAN
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Rotate zonal/meridional components onto the projection axes.

    Parameters
    ----------
    location : GeoPoints, ProjectedPoints or array_like
        Where the vectors are located. A bare array is read as longitude
        in degrees. Projected points are converted back through their own
        central meridian to obtain longitude.
    u, v : array_like
        Eastward and northward components, same shape as ``location``.
    meridian : float
        Central meridian of the map the components are meant for
        (default: -45). It is checked to be a finite scalar but does not
        change the rotation: the offset stays 45° for every meridian.

    Returns
    -------
    Tuple[ndarray, ndarray]
        (vx, vy) along the polar stereographic x and y axes.

    Raises
    ------
    DimensionMismatchError
        If component and location shapes differ.
    ValidationError
        If ``meridian`` is not a finite scalar.

    Examples
    --------
    >>> vx, vy = geo_to_proj_vector(-45.0, 1.0, 0.0)
    >>> float(vx), float(vy)
    (1.0, 0.0)
    """
    theta, u, v = _rotation_angle(location, meridian, u, v)
    vx = u * np.cos(theta) - v * np.sin(theta)
    vy = u * np.sin(theta) + v * np.cos(theta)
    return vx, vy


def proj_to_geo_vector(
    location: Location,
    vx: ArrayLike,
    vy: ArrayLike,
    meridian: float = DEFAULT_MERIDIAN
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Rotate projection-axis components back to zonal/meridional.

    Parameters
    ----------
    location : GeoPoints, ProjectedPoints or array_like
        Where the vectors are located (see ``geo_to_proj_vector``).
    vx, vy : array_like
        Components along the x and y axes, same shape as ``location``.
    meridian : float
        Central meridian of the map (default: -45). Does not change the
        45° rotation offset.

    Returns
    -------
    Tuple[ndarray, ndarray]
        (u, v) eastward and northward components.
    """
    theta, vx, vy = _rotation_angle(location, meridian, vx, vy)
    u = vx * np.cos(theta) + vy * np.sin(theta)
    v = vy * np.cos(theta) - vx * np.sin(theta)
    return u, v


def rotate_to_projected(
    a: ArrayLike,
    b: ArrayLike,
    u: ArrayLike,
    v: ArrayLike,
    meridian: float = DEFAULT_MERIDIAN
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """``geo_to_proj_vector`` for locations of unknown frame.

    ``(a, b)`` is classified with ``is_geo``; only the longitude (or the
    longitude recovered from x/y with ``meridian``) enters the rotation.
    """
    return geo_to_proj_vector(coerce_points(a, b, meridian), u, v, meridian)


def rotate_to_geographic(
    a: ArrayLike,
    b: ArrayLike,
    vx: ArrayLike,
    vy: ArrayLike,
    meridian: float = DEFAULT_MERIDIAN
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """``proj_to_geo_vector`` for locations of unknown frame."""
    return proj_to_geo_vector(coerce_points(a, b, meridian), vx, vy, meridian)
