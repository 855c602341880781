"""
Polar Projection Module for the Arctic Mapping Core.

All conversions between geographic coordinates and the north polar
stereographic plane MUST originate from this module. No downstream
module may call pyproj directly.

This module provides:
- North polar stereographic forward/inverse projection (true scale 70°N)
- Tagged-frame helpers and the magnitude-based frame adapter
- Vector component rotation between geographic and projected frames
"""

from polar_projection.projections import (
    DEFAULT_MERIDIAN,
    ProjectionAdapter,
    PolarStereographicNorth,
    TissotIndicatrix,
    forward,
    inverse,
    scale_factor,
)

from polar_projection.frames import (
    is_geo,
    coerce_points,
    to_projected,
    to_geographic,
)

from polar_projection.vectors import (
    geo_to_proj_vector,
    proj_to_geo_vector,
    rotate_to_projected,
    rotate_to_geographic,
)

__all__ = [
    # Projections
    "DEFAULT_MERIDIAN",
    "ProjectionAdapter",
    "PolarStereographicNorth",
    "TissotIndicatrix",
    "forward",
    "inverse",
    "scale_factor",
    # Frames
    "is_geo",
    "coerce_points",
    "to_projected",
    "to_geographic",
    # Vectors
    "geo_to_proj_vector",
    "proj_to_geo_vector",
    "rotate_to_projected",
    "rotate_to_geographic",
]
