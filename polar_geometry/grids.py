"""
Regular grids on the polar stereographic plane.

A grid is laid out in projected meters around a center point, with
independent horizontal and vertical extents and spacings, and can be
handed back either in meters or as latitude/longitude of every node.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

import pint

from common.exceptions import ValidationError
from common.logging_config import get_logger
from common.types import Frame, GeoPoints, Points, ProjectedPoints
from common.units import to_meters, validate_units
from polar_projection.frames import to_geographic, to_projected

logger = get_logger(__name__)

LengthSpec = Union[float, Tuple[float, float], NDArray[np.float64], pint.Quantity]

# Relative slack when counting steps, so 0.3 / 0.1 counts as 3 steps
_STEP_TOLERANCE = 1e-12


@dataclass(frozen=True, eq=False)
class Grid:
    """A rectangular mesh of nodes.

    Attributes
    ----------
    points : GeoPoints or ProjectedPoints
        2-D node coordinates; rows go by increasing y, columns by
        increasing x (in projected space).
    center : ProjectedPoints
        The requested center, in the grid's projection.
    width_m : Tuple[float, float]
        Requested (horizontal, vertical) extent in meters.
    resolution_m : Tuple[float, float]
        (horizontal, vertical) node spacing in meters.
    """
    points: Points
    center: ProjectedPoints
    width_m: Tuple[float, float]
    resolution_m: Tuple[float, float]

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.points.shape

    @property
    def frame(self) -> Frame:
        return self.points.frame

    def to_projected(self) -> 'Grid':
        """Same grid with nodes in projected meters."""
        return Grid(
            points=to_projected(self.points, self.center.meridian),
            center=self.center,
            width_m=self.width_m,
            resolution_m=self.resolution_m,
        )

    def to_geographic(self) -> 'Grid':
        """Same grid with nodes as latitude/longitude."""
        return Grid(
            points=to_geographic(self.points),
            center=self.center,
            width_m=self.width_m,
            resolution_m=self.resolution_m,
        )


def _axis_pair(value: LengthSpec, name: str) -> Tuple[float, float]:
    """Split a scalar or (horizontal, vertical) length into meters per axis."""
    meters = np.atleast_1d(to_meters(value, "km")).ravel()
    if meters.size == 1:
        return float(meters[0]), float(meters[0])
    if meters.size == 2:
        return float(meters[0]), float(meters[1])
    raise ValidationError(
        f"Grid {name} must have one or two elements, got {meters.size}."
    )


def axis_samples(center: float, width: float, resolution: float) -> NDArray[np.float64]:
    """Node positions along one axis.

    Samples start at ``center - width/2`` and step by ``resolution`` up to
    the last value not beyond ``center + width/2``. When the half-width is
    a whole number of steps the center itself is one of the samples.
    """
    n_steps = int(np.floor(width / resolution * (1 + _STEP_TOLERANCE)))
    offsets = -width / 2 + resolution * np.arange(n_steps + 1)
    return center + offsets


@validate_units({'width': 'km', 'resolution': 'km'})
def make_grid(
    center: Points,
    width: LengthSpec,
    resolution: LengthSpec,
    output_frame: Union[Frame, str] = Frame.GEOGRAPHIC,
    meridian: Optional[float] = None
) -> Grid:
    """Create a regular grid centered on a point.

    Parameters
    ----------
    center : GeoPoints or ProjectedPoints
        Single grid center.
    width : float, pair or pint.Quantity
        Grid extent in kilometers. A pair is (width, height).
    resolution : float, pair or pint.Quantity
        Node spacing in kilometers. A pair is (horizontal, vertical).
    output_frame : Frame or str
        ``Frame.GEOGRAPHIC`` (default) returns latitude/longitude of each
        node, ``Frame.PROJECTED`` returns meters.
    meridian : float, optional
        Central meridian of the grid plane. Defaults to the meridian of a
        projected center, or -45.

    Returns
    -------
    Grid
        Mesh with ``floor(width/resolution) + 1`` nodes along each axis.

    Raises
    ------
    ValidationError
        If widths or resolutions are not positive, a grid is no wider than
        its own step, or the center is not a single point.

    Examples
    --------
    For a 200 km wide grid centered on Petermann Glacier at 3 km spacing:

    >>> grid = make_grid(GeoPoints(80.75, -65.75), 200, 3)
    >>> grid.shape
    (67, 67)
    """
    if center.size != 1:
        raise ValidationError("Grid center coordinates must be scalar.")
    output_frame = Frame(output_frame)

    width_x, width_y = _axis_pair(width, "width")
    res_x, res_y = _axis_pair(resolution, "resolution")

    if not (res_x > 0 and res_y > 0):
        raise ValidationError("Grid resolution must be greater than zero.")
    if not (width_x > 0 and width_y > 0):
        raise ValidationError("Grid width must be greater than zero.")
    if not (width_x > res_x and width_y > res_y):
        raise ValidationError(
            "Grid width must be bigger than the grid resolution. "
            f"Got width=({width_x}, {width_y}) m, resolution=({res_x}, {res_y}) m."
        )

    center_xy = to_projected(center, meridian)
    cx = float(center_xy.x.reshape(()))
    cy = float(center_xy.y.reshape(()))

    x = axis_samples(cx, width_x, res_x)
    y = axis_samples(cy, width_y, res_y)
    X, Y = np.meshgrid(x, y)

    points: Points = ProjectedPoints(X, Y, center_xy.meridian)
    if output_frame is Frame.GEOGRAPHIC:
        points = to_geographic(points)

    logger.debug(
        f"Built {Y.shape[0]}x{X.shape[1]} grid at ({cx:.1f}, {cy:.1f}) m, "
        f"spacing ({res_x:.1f}, {res_y:.1f}) m"
    )

    return Grid(
        points=points,
        center=ProjectedPoints(cx, cy, center_xy.meridian),
        width_m=(width_x, width_y),
        resolution_m=(res_x, res_y),
    )
