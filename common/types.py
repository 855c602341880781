"""
Coordinate Types for the Arctic Mapping Core.

This module defines the tagged coordinate values that cross every module
boundary. A set of points is either geographic (latitude/longitude in
degrees) or projected (polar stereographic x/y in meters); the variant is
carried by the type, never guessed from magnitudes inside the core.

Design Rationale
----------------
Projected coordinates are only meaningful together with the central
meridian that produced them, so ``ProjectedPoints`` stores the meridian
alongside its arrays. Both variants accept scalars, vectors or 2-D grids
and keep that shape through every operation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from common.constants import PhysicalConstants
from common.exceptions import DimensionMismatchError, ValidationError


class Frame(Enum):
    """Reference frame of a set of coordinates."""
    GEOGRAPHIC = "geographic"
    PROJECTED = "projected"


class Boundary(Enum):
    """Whether points lying exactly on a quadrangle edge count as inside."""
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


def _frozen_pair(a: ArrayLike, b: ArrayLike, names: Tuple[str, str]) -> Tuple[NDArray, NDArray]:
    a_arr = np.array(a, dtype=np.float64)
    b_arr = np.array(b, dtype=np.float64)
    if a_arr.shape != b_arr.shape:
        raise DimensionMismatchError(
            f"Dimensions of {names[0]} {a_arr.shape} and {names[1]} "
            f"{b_arr.shape} must agree."
        )
    a_arr.setflags(write=False)
    b_arr.setflags(write=False)
    return a_arr, b_arr


@dataclass(frozen=True, eq=False)
class GeoPoints:
    """Geographic coordinates in degrees.

    Attributes
    ----------
    lat : ndarray
        Latitude in DEGREES. Range: [-90, 90]. NaN is allowed and is
        used to separate polylines.
    lon : ndarray
        Longitude in DEGREES, conventionally [-180, 180].

    Examples
    --------
    >>> petermann = GeoPoints(80.75, -65.75)
    >>> petermann.shape
    ()
    """
    lat: NDArray[np.float64]
    lon: NDArray[np.float64]

    def __post_init__(self):
        lat, lon = _frozen_pair(self.lat, self.lon, ("lat", "lon"))
        if np.any(np.abs(lat) > PhysicalConstants.MAX_ABS_LATITUDE):
            raise ValidationError(
                f"Latitude out of range [-90, 90]: max |lat| = {np.nanmax(np.abs(lat))}. "
                f"Did you pass projected meters as geographic coordinates?"
            )
        object.__setattr__(self, "lat", lat)
        object.__setattr__(self, "lon", lon)

    frame = Frame.GEOGRAPHIC

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.lat.shape

    @property
    def size(self) -> int:
        return self.lat.size


@dataclass(frozen=True, eq=False)
class ProjectedPoints:
    """Polar stereographic coordinates in meters.

    Attributes
    ----------
    x, y : ndarray
        Easting and northing in METERS on the 70°N true-scale plane.
    meridian : float
        Central meridian in degrees used to produce ``x`` and ``y``.
        Default is -45 (45°W).
    """
    x: NDArray[np.float64]
    y: NDArray[np.float64]
    meridian: float = PhysicalConstants.DEFAULT_CENTRAL_MERIDIAN.value

    def __post_init__(self):
        x, y = _frozen_pair(self.x, self.y, ("x", "y"))
        if np.ndim(self.meridian) != 0 or not np.isfinite(self.meridian):
            raise ValidationError("Meridian must be a finite scalar longitude.")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "meridian", float(self.meridian))

    frame = Frame.PROJECTED

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.x.shape

    @property
    def size(self) -> int:
        return self.x.size

    def to_km(self) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Return (x, y) divided by 1000."""
        scale = PhysicalConstants.METERS_PER_KILOMETER
        return self.x / scale, self.y / scale


Points = Union[GeoPoints, ProjectedPoints]

# Type aliases for array types
PolygonArray = NDArray[np.float64]  # Shape: (n_points, 2)
