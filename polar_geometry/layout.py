"""
Map Layout Geometry.

Coordinates for the furniture of an Arctic map that do not depend on any
renderer: graticule lines, the extent of a zoomed map around a point, and
the position and length of a scale bar.

Scale Bar Lengths
-----------------
An automatic scale bar is about one fifth of the map width, rounded to the
nearest entry of ``NICE_LENGTHS`` in the requested unit. Ties go to the
longer bar.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

import pint

from common.exceptions import ValidationError
from common.logging_config import get_logger
from common.types import Boundary, GeoPoints, Points
from common.units import UnitRegistry, to_meters, validate_units
from polar_geometry.quadrangle import Quad
from polar_projection.frames import to_projected

logger = get_logger(__name__)

DEFAULT_GRATICULE_LATS = np.arange(30, 81, 10)
DEFAULT_GRATICULE_LONS = np.arange(-150, 181, 30)
POINTS_PER_GRATICULE_LINE = 360

DEFAULT_MAP_SIZE_KM = 500.0

NICE_LENGTHS = np.array([
    0.001, 0.01, 0.1, 0.25, 0.5, 1, 2, 5, 10, 20, 25, 50, 100, 200, 250,
    500, 1000, 2000, 2500, 5000, 10000, 20000, 25000, 50000,
])

# (start fraction of width, end direction, height fraction) per corner
_SCALE_BAR_ANCHORS = {
    "southwest": (0.05, 1.0, 0.05),
    "southeast": (0.95, -1.0, 0.05),
    "northwest": (0.05, 1.0, 0.93),
    "northeast": (0.95, -1.0, 0.93),
}

_CORNER_ALIASES = {
    "sw": "southwest",
    "se": "southeast",
    "nw": "northwest",
    "ne": "northeast",
}


def graticule(
    lats: Optional[ArrayLike] = None,
    lons: Optional[ArrayLike] = None,
    n_points: int = POINTS_PER_GRATICULE_LINE,
    clip: Optional[Quad] = None
) -> GeoPoints:
    """Parallels and meridians as one NaN-separated polyline.

    Parameters
    ----------
    lats : array_like, optional
        Latitudes of the parallels (default: 30 to 80 every 10°).
    lons : array_like, optional
        Longitudes of the meridians (default: -150 to 180 every 30°).
    n_points : int
        Samples per line (default: 360).
    clip : Quad, optional
        Points outside this quadrangle (in its projection) become NaN.

    Returns
    -------
    GeoPoints
        Each parallel runs from -180 to 180 in longitude; each meridian
        runs from the lowest to the highest parallel. Lines are separated
        by a single NaN, with no trailing NaN.
    """
    lats = DEFAULT_GRATICULE_LATS if lats is None else np.atleast_1d(np.asarray(lats, dtype=np.float64))
    lons = DEFAULT_GRATICULE_LONS if lons is None else np.atleast_1d(np.asarray(lons, dtype=np.float64))
    if n_points < 2:
        raise ValidationError("Graticule lines need at least two points each.")
    if lats.size == 0:
        raise ValidationError("Graticule needs at least one parallel.")

    separator = np.array([np.nan])
    lat_parts = []
    lon_parts = []

    for lat in lats:
        lat_parts += [np.full(n_points, lat), separator]
        lon_parts += [np.linspace(-180, 180, n_points), separator]

    meridian_lats = np.linspace(lats.min(), lats.max(), n_points)
    for lon in lons:
        lat_parts += [meridian_lats, separator]
        lon_parts += [np.full(n_points, lon), separator]

    lat_line = np.concatenate(lat_parts[:-1])
    lon_line = np.concatenate(lon_parts[:-1])

    if clip is not None:
        inside = clip.contains_points(GeoPoints(lat_line, lon_line))
        lat_line = np.where(inside, lat_line, np.nan)
        lon_line = np.where(inside, lon_line, np.nan)

    return GeoPoints(lat_line, lon_line)


@validate_units({'map_size': 'km'})
def map_extent(
    center: Points,
    map_size: Union[float, Sequence[float], pint.Quantity] = DEFAULT_MAP_SIZE_KM,
    meridian: Optional[float] = None,
    boundary: Union[Boundary, str] = Boundary.INCLUSIVE
) -> Quad:
    """Extent of a map zoomed on a point.

    Parameters
    ----------
    center : GeoPoints or ProjectedPoints
        Map center (single point).
    map_size : float, pair or pint.Quantity
        Map width, or (width, height), in kilometers (default: 500).
    meridian : float, optional
        Central meridian of the map plane.
    boundary : Boundary or str
        Edge policy of the returned quadrangle.

    Returns
    -------
    Quad
        Limits in meters.
    """
    if center.size != 1:
        raise ValidationError("Map center must be a single point.")
    size_m = np.atleast_1d(to_meters(map_size, "km")).ravel()
    if size_m.size == 1:
        size_m = np.repeat(size_m, 2)
    if size_m.size != 2:
        raise ValidationError("Map size must be a one- or two-element numeric value.")
    if not np.all(size_m > 0):
        raise ValidationError("Map size must be greater than zero.")

    xy = to_projected(center, meridian)
    return Quad.from_center(
        float(xy.x.reshape(())),
        float(xy.y.reshape(())),
        float(size_m[0]),
        float(size_m[1]),
        boundary=boundary,
        meridian=xy.meridian,
    )


@dataclass(frozen=True)
class ScaleBar:
    """A horizontal scale bar.

    Attributes
    ----------
    x : Tuple[float, float]
        Start and end of the bar in meters.
    y : float
        Height of the bar in meters.
    length : float
        Bar length in ``units``.
    units : str
        Unit label as requested.
    """
    x: Tuple[float, float]
    y: float
    length: float
    units: str

    @property
    def label(self) -> str:
        return f"{self.length:g} {self.units}"

    @property
    def label_position(self) -> Tuple[float, float]:
        """Point at the middle of the bar, where the label sits."""
        return (self.x[0] + self.x[1]) / 2, self.y


def nice_length(target: float) -> float:
    """Entry of ``NICE_LENGTHS`` nearest to ``target`` (ties go longer)."""
    diffs = np.abs(NICE_LENGTHS - target)
    # Search from the long end so the longer length wins a tie
    idx = NICE_LENGTHS.size - 1 - int(np.argmin(diffs[::-1]))
    return float(NICE_LENGTHS[idx])


def scale_bar(
    extent: Quad,
    location: str = "southwest",
    units: str = "km",
    length: Optional[float] = None
) -> ScaleBar:
    """Place a scale bar in a corner of a map.

    Parameters
    ----------
    extent : Quad
        Map limits in meters.
    location : str
        'southwest' (default), 'southeast', 'northwest', 'northeast', or
        the abbreviations 'sw', 'se', 'nw', 'ne'.
    units : str
        Length unit label: km, nmi/nm, mi, ft, yd or m.
    length : float, optional
        Bar length in ``units``. Chosen automatically when omitted.

    Returns
    -------
    ScaleBar
    """
    meters_per_unit = UnitRegistry().meters_per_unit(units)

    if length is None:
        length = nice_length((extent.width / 5) / meters_per_unit)
    else:
        if np.ndim(length) != 0:
            raise ValidationError("Length must be a scalar.")
        length = float(length)
        if not length > 0:
            raise ValidationError("Length must be greater than zero.")
    length_m = length * meters_per_unit

    try:
        corner = _CORNER_ALIASES.get(location.lower(), location.lower())
        start_frac, direction, height_frac = _SCALE_BAR_ANCHORS[corner]
    except (KeyError, AttributeError):
        raise ValidationError(f"Invalid location string {location!r} for scale bar.") from None

    x1 = start_frac * extent.width + extent.xmin
    x2 = x1 + direction * length_m
    y = height_frac * extent.height + extent.ymin

    logger.debug(f"Scale bar of {length:g} {units} at {corner} corner")
    return ScaleBar(x=(x1, x2), y=y, length=length, units=units)
