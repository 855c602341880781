"""
Geodetic and Projection Constants for Arctic Polar Stereographic Mapping.

This module provides the constants that define the map projection and
the reference ellipsoid, with their uncertainty bounds and sources.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- NSIDC Sea Ice Polar Stereographic North (EPSG:3413)
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A physical or cartographic constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class PhysicalConstants:
    """Registry of constants used throughout the system.

    Earth Geometry (WGS84)
    ----------------------
    These constants define the reference ellipsoid on which the
    polar stereographic projection is computed.

    Projection Parameters
    ---------------------
    The north polar stereographic plane is tangent at the pole and
    scaled so that distances are true along the 70°N parallel.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    # =========================================================================
    # Polar Stereographic North
    # =========================================================================

    TRUE_SCALE_LATITUDE: Final[Constant] = Constant(
        value=70.0,
        uncertainty=0.0,
        unit="degree",
        source="EPSG:3413",
        description="Standard parallel (latitude of true scale)"
    )

    DEFAULT_CENTRAL_MERIDIAN: Final[Constant] = Constant(
        value=-45.0,
        uncertainty=0.0,
        unit="degree",
        source="EPSG:3413",
        description="Longitude that points straight down from the pole (45°W)"
    )

    VECTOR_ROTATION_OFFSET: Final[Constant] = Constant(
        value=45.0,
        uncertainty=0.0,
        unit="degree",
        source="Arctic Mapping Tools",
        description="Offset added to longitude when rotating vector components"
    )

    # =========================================================================
    # Frame Disambiguation Bounds
    # =========================================================================

    MAX_ABS_LATITUDE: Final[float] = 90.0
    MAX_ABS_LONGITUDE: Final[float] = 360.0

    METERS_PER_KILOMETER: Final[float] = 1000.0
