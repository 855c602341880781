"""
Polar Geometry Module for the Arctic Mapping Core.

Geometry built on the polar stereographic plane. Every function here takes
tagged ``GeoPoints`` or ``ProjectedPoints`` and projects through
``polar_projection``; none of them call pyproj directly.

This module provides:
- Regular grids around a center point
- Cumulative distance along paths and uniform path resampling
- Quadrangle membership tests
- Fixed-radius circles
- Map layout helpers (graticule, zoomed extent, scale bar)
"""

from polar_geometry.grids import (
    Grid,
    axis_samples,
    make_grid,
)

from polar_geometry.paths import (
    INTERPOLATION_METHODS,
    cumulative_distance,
    resample_uniform,
)

from polar_geometry.quadrangle import (
    Quad,
    in_quad,
)

from polar_geometry.circles import make_circles

from polar_geometry.layout import (
    NICE_LENGTHS,
    ScaleBar,
    graticule,
    map_extent,
    nice_length,
    scale_bar,
)

__all__ = [
    # Grids
    "Grid",
    "axis_samples",
    "make_grid",
    # Paths
    "INTERPOLATION_METHODS",
    "cumulative_distance",
    "resample_uniform",
    # Quadrangles
    "Quad",
    "in_quad",
    # Circles
    "make_circles",
    # Layout
    "NICE_LENGTHS",
    "ScaleBar",
    "graticule",
    "map_extent",
    "nice_length",
    "scale_bar",
]
