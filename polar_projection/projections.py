"""
North Polar Stereographic Projection.

This module converts between geographic coordinates and the Arctic polar
stereographic plane used by every other part of the system: WGS84
ellipsoid, plane tangent at the North Pole, true scale along 70°N, and a
configurable central meridian (default 45°W, i.e. EPSG:3413).

Scientific Context
------------------
Domain: Cartography, polar mapping
Model: Ellipsoidal polar stereographic (conformal azimuthal) projection

Why the Standard Parallel Matters
---------------------------------
1. A plane tangent at the pole has unit scale only at the pole itself;
   secant scaling to 70°N spreads the distortion over the Arctic basin.
2. The projection is conformal, so local angles (and therefore vector
   directions) are preserved while lengths are scaled by k(φ).
3. The opposite pole maps to infinity: latitude −90° is singular.

Implementation
--------------
This module wraps `pyproj` for the projection itself and reads local
scale factors from PROJ's own partial derivatives.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
- NSIDC Sea Ice Polar Stereographic North, EPSG:3413.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyproj import CRS, Proj, Transformer

from common.constants import PhysicalConstants
from common.exceptions import (
    SingularProjectionError,
    SouthernHemisphereWarning,
    ValidationError,
)
from common.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_MERIDIAN = PhysicalConstants.DEFAULT_CENTRAL_MERIDIAN.value


@dataclass
class TissotIndicatrix:
    """Tissot's indicatrix describing local distortion at a point.

    Attributes
    ----------
    meridional_scale : ndarray
        Scale factor h along the meridian.
    parallel_scale : ndarray
        Scale factor k along the parallel.
    areal_scale : ndarray
        Area distortion factor (h * k for a conformal projection).
    angular_distortion : ndarray
        Maximum angular distortion as reported by PROJ.

    Notes
    -----
    For the polar stereographic projection h = k everywhere, and both
    equal 1 on the true-scale parallel.
    """
    meridional_scale: NDArray[np.float64]
    parallel_scale: NDArray[np.float64]
    areal_scale: NDArray[np.float64]
    angular_distortion: NDArray[np.float64]

    @property
    def is_conformal(self) -> bool:
        """Check if projection is locally conformal (circle, no angular distortion)."""
        return bool(np.all(np.abs(self.meridional_scale - self.parallel_scale) < 1e-6))


class ProjectionAdapter(ABC):
    """Abstract base class for map projection adapters.

    Coordinates are exchanged in DEGREES (geographic) and METERS
    (projected). Inputs may be scalars or arrays of any broadcastable
    shape; outputs take the broadcast shape.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the projection."""
        pass

    @property
    @abstractmethod
    def proj4_string(self) -> str:
        """PROJ.4 definition string."""
        pass

    @property
    @abstractmethod
    def preserves_angles(self) -> bool:
        """Whether this is a conformal projection."""
        pass

    @property
    @abstractmethod
    def preserves_area(self) -> bool:
        """Whether this is an equal-area projection."""
        pass

    @abstractmethod
    def to_projected(
        self,
        lat_deg: ArrayLike,
        lon_deg: ArrayLike
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Transform geographic coordinates to projected coordinates.

        Parameters
        ----------
        lat_deg, lon_deg : array_like
            Geographic coordinates in degrees.

        Returns
        -------
        Tuple[ndarray, ndarray]
            (x, y) projected coordinates in meters.
        """
        pass

    @abstractmethod
    def to_geodetic(
        self,
        x: ArrayLike,
        y: ArrayLike
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Transform projected coordinates to geographic.

        Parameters
        ----------
        x, y : array_like
            Projected coordinates in meters.

        Returns
        -------
        Tuple[ndarray, ndarray]
            (lat_deg, lon_deg) geographic coordinates in degrees.
        """
        pass

    @abstractmethod
    def compute_distortion(
        self,
        lat_deg: ArrayLike,
        lon_deg: ArrayLike
    ) -> TissotIndicatrix:
        """Compute local distortion at the given points."""
        pass


def _validate_meridian(meridian: float) -> float:
    if np.ndim(meridian) != 0:
        raise ValidationError("Error: meridian must be a scalar longitude.")
    meridian = float(meridian)
    if not np.isfinite(meridian):
        raise ValidationError("Error: meridian must be a finite longitude.")
    return meridian


class PolarStereographicNorth(ProjectionAdapter):
    """North polar stereographic projection with a configurable meridian.

    Parameters
    ----------
    central_meridian_deg : float
        Longitude pointing straight down (negative y) from the pole.
        Default -45.
    true_scale_latitude_deg : float
        Latitude of true scale (default: 70).
    ellipsoid : str
        PROJ ellipsoid name (default: WGS84).

    Notes
    -----
    Projected coordinates from two different central meridians are not
    comparable without going back through geographic coordinates.
    """

    def __init__(
        self,
        central_meridian_deg: float = DEFAULT_MERIDIAN,
        true_scale_latitude_deg: float = PhysicalConstants.TRUE_SCALE_LATITUDE.value,
        ellipsoid: str = "WGS84"
    ):
        self._central_meridian = _validate_meridian(central_meridian_deg)
        self._true_scale_latitude = float(true_scale_latitude_deg)

        self._proj4 = (
            f"+proj=stere +lat_0=90 +lat_ts={self._true_scale_latitude} "
            f"+lon_0={self._central_meridian} +k=1 +x_0=0 +y_0=0 "
            f"+ellps={ellipsoid} +units=m +no_defs"
        )

        self._crs_proj = CRS.from_proj4(self._proj4)
        self._crs_geo = self._crs_proj.geodetic_crs
        self._to_proj = Transformer.from_crs(self._crs_geo, self._crs_proj, always_xy=True)
        self._to_geo = Transformer.from_crs(self._crs_proj, self._crs_geo, always_xy=True)

    @property
    def name(self) -> str:
        return (
            f"Polar Stereographic North (true scale {self._true_scale_latitude}°N, "
            f"CM={self._central_meridian}°)"
        )

    @property
    def proj4_string(self) -> str:
        return self._proj4

    @property
    def central_meridian(self) -> float:
        return self._central_meridian

    @property
    def preserves_angles(self) -> bool:
        return True

    @property
    def preserves_area(self) -> bool:
        return False

    def to_projected(
        self,
        lat_deg: ArrayLike,
        lon_deg: ArrayLike
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        lat, lon = np.broadcast_arrays(
            np.asarray(lat_deg, dtype=np.float64),
            np.asarray(lon_deg, dtype=np.float64)
        )
        if np.any(np.abs(lat) > PhysicalConstants.MAX_ABS_LATITUDE):
            raise ValidationError("Latitude out of range [-90, 90].")
        if np.any(lat == -90.0):
            raise SingularProjectionError(
                "The South Pole cannot be projected onto the north polar "
                "stereographic plane."
            )
        warn_if_southern(lat)

        x, y = self._to_proj.transform(lon.ravel(), lat.ravel())
        x = np.array(x, dtype=np.float64).reshape(lat.shape)
        y = np.array(y, dtype=np.float64).reshape(lat.shape)

        finite_in = np.isfinite(lat) & np.isfinite(lon)
        x[~finite_in] = np.nan
        y[~finite_in] = np.nan
        if np.any(finite_in & ~(np.isfinite(x) & np.isfinite(y))):
            raise SingularProjectionError(
                "Projection produced non-finite coordinates for finite input."
            )
        return x, y

    def to_geodetic(
        self,
        x: ArrayLike,
        y: ArrayLike
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        x_arr, y_arr = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64)
        )
        lon, lat = self._to_geo.transform(x_arr.ravel(), y_arr.ravel())
        lat = np.array(lat, dtype=np.float64).reshape(x_arr.shape)
        lon = np.array(lon, dtype=np.float64).reshape(x_arr.shape)

        # NaN separators in polylines stay NaN
        missing = ~(np.isfinite(x_arr) & np.isfinite(y_arr))
        lat[missing] = np.nan
        lon[missing] = np.nan
        return lat, lon

    def compute_distortion(
        self,
        lat_deg: ArrayLike,
        lon_deg: ArrayLike
    ) -> TissotIndicatrix:
        lat, lon = np.broadcast_arrays(
            np.asarray(lat_deg, dtype=np.float64),
            np.asarray(lon_deg, dtype=np.float64)
        )
        factors = Proj(self._crs_proj).get_factors(lon.ravel(), lat.ravel())

        def _shaped(values) -> NDArray[np.float64]:
            return np.asarray(values, dtype=np.float64).reshape(lat.shape)

        return TissotIndicatrix(
            meridional_scale=_shaped(factors.meridional_scale),
            parallel_scale=_shaped(factors.parallel_scale),
            areal_scale=_shaped(factors.areal_scale),
            angular_distortion=_shaped(factors.angular_distortion),
        )


def warn_if_southern(lat_deg: ArrayLike) -> None:
    """Warn when latitudes fall in the southern hemisphere.

    The computation still proceeds; this only flags a likely mix-up with
    a south polar dataset.
    """
    lat = np.asarray(lat_deg)
    if np.any(lat < 0):
        logger.warning(f"{int(np.sum(lat < 0))} southern-hemisphere latitude(s) projected")
        warnings.warn(
            "Some latitudes are in the southern hemisphere. North polar "
            "stereographic coordinates will be heavily distorted there.",
            SouthernHemisphereWarning,
            stacklevel=3
        )


def forward(
    lat: ArrayLike,
    lon: ArrayLike,
    meridian: float = DEFAULT_MERIDIAN
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Project latitude/longitude onto the polar stereographic plane.

    Parameters
    ----------
    lat, lon : array_like
        Geographic coordinates in degrees.
    meridian : float
        Central meridian in degrees (default: -45).

    Returns
    -------
    Tuple[ndarray, ndarray]
        (x, y) in meters, shaped like the broadcast inputs.

    Raises
    ------
    SingularProjectionError
        If any latitude is -90.
    """
    return PolarStereographicNorth(meridian).to_projected(lat, lon)


def inverse(
    x: ArrayLike,
    y: ArrayLike,
    meridian: float = DEFAULT_MERIDIAN
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Convert polar stereographic meters back to latitude/longitude.

    Parameters
    ----------
    x, y : array_like
        Projected coordinates in meters.
    meridian : float
        Central meridian that produced ``x`` and ``y`` (default: -45).

    Returns
    -------
    Tuple[ndarray, ndarray]
        (lat, lon) in degrees, longitude in [-180, 180].
    """
    return PolarStereographicNorth(meridian).to_geodetic(x, y)


def scale_factor(
    lat: ArrayLike,
    meridian: float = DEFAULT_MERIDIAN
) -> NDArray[np.float64]:
    """Map scale factor k at the given latitudes (1 at 70°N)."""
    lat = np.asarray(lat, dtype=np.float64)
    distortion = PolarStereographicNorth(meridian).compute_distortion(lat, meridian)
    return distortion.parallel_scale
