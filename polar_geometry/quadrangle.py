"""
Axis-aligned quadrangle membership on the projection plane.

No projection happens here: the points and the quadrangle must already be
in the same frame (normally polar stereographic meters on one meridian).
"""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from common.exceptions import DimensionMismatchError, ValidationError
from common.types import Boundary, Points
from polar_projection.frames import to_projected
from polar_projection.projections import DEFAULT_MERIDIAN


def _range(values: Sequence[float], name: str):
    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.size != 2:
        raise ValidationError(f"{name} must be a two-element range, got {arr.size} elements.")
    return float(arr.min()), float(arr.max())


def in_quad(
    x: ArrayLike,
    y: ArrayLike,
    x_range: Sequence[float],
    y_range: Sequence[float],
    boundary: Union[Boundary, str] = Boundary.INCLUSIVE
) -> NDArray[np.bool_]:
    """Test which points fall inside an axis-aligned box.

    Parameters
    ----------
    x, y : array_like
        Point coordinates of identical shape.
    x_range, y_range : sequence of two floats
        Box limits in either order.
    boundary : Boundary or str
        ``INCLUSIVE`` (default) counts points on an edge as inside,
        ``EXCLUSIVE`` counts them as outside.

    Returns
    -------
    ndarray of bool
        Mask with the shape of ``x``. NaN coordinates are outside.

    Examples
    --------
    >>> in_quad([0, 5, 10], [0, 0, 0], [0, 5], [-1, 1])
    array([ True,  True, False])
    >>> in_quad([0, 5, 10], [0, 0, 0], [0, 5], [-1, 1], "exclusive")
    array([False, False, False])
    """
    x_arr = np.asarray(x, dtype=np.float64)
    y_arr = np.asarray(y, dtype=np.float64)
    if x_arr.shape != y_arr.shape:
        raise DimensionMismatchError(
            f"Dimensions of x {x_arr.shape} and y {y_arr.shape} must agree."
        )
    xmin, xmax = _range(x_range, "x_range")
    ymin, ymax = _range(y_range, "y_range")

    if Boundary(boundary) is Boundary.INCLUSIVE:
        return (x_arr >= xmin) & (x_arr <= xmax) & (y_arr >= ymin) & (y_arr <= ymax)
    return (x_arr > xmin) & (x_arr < xmax) & (y_arr > ymin) & (y_arr < ymax)


@dataclass(frozen=True)
class Quad:
    """Axis-aligned box on the projection plane.

    Attributes
    ----------
    xmin, xmax, ymin, ymax : float
        Limits in meters.
    boundary : Boundary
        Edge policy used by ``contains``.
    meridian : float
        Central meridian of the plane the limits refer to.
    """
    xmin: float
    xmax: float
    ymin: float
    ymax: float
    boundary: Boundary = Boundary.INCLUSIVE
    meridian: float = DEFAULT_MERIDIAN

    def __post_init__(self):
        if not (self.xmin <= self.xmax and self.ymin <= self.ymax):
            raise ValidationError(
                f"Quadrangle limits out of order: x [{self.xmin}, {self.xmax}], "
                f"y [{self.ymin}, {self.ymax}]"
            )
        object.__setattr__(self, "boundary", Boundary(self.boundary))

    @classmethod
    def from_center(
        cls,
        cx: float,
        cy: float,
        width: float,
        height: float,
        boundary: Union[Boundary, str] = Boundary.INCLUSIVE,
        meridian: float = DEFAULT_MERIDIAN
    ) -> 'Quad':
        """Box of the given width and height (meters) around ``(cx, cy)``."""
        return cls(
            xmin=cx - width / 2,
            xmax=cx + width / 2,
            ymin=cy - height / 2,
            ymax=cy + height / 2,
            boundary=Boundary(boundary),
            meridian=meridian,
        )

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def contains(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.bool_]:
        """Mask of points (in this quad's meters) inside the box."""
        return in_quad(x, y, (self.xmin, self.xmax), (self.ymin, self.ymax), self.boundary)

    def contains_points(self, points: Points) -> NDArray[np.bool_]:
        """Mask of tagged points inside the box, projected onto its meridian."""
        xy = to_projected(points, self.meridian)
        return self.contains(xy.x, xy.y)
