"""
Distance along paths and uniform resampling of paths.

Scientific Context
------------------
Distances here are Euclidean lengths on the polar stereographic plane,
which is what a map-reading user measures with a ruler. They match true
ground distance on the 70°N parallel and drift from it elsewhere by the
local scale factor (see ``polar_projection.scale_factor``).

Orientation
-----------
Paths are vectors: ``(N,)``, ``(1, N)`` or ``(N, 1)``. Outputs keep the
row/column orientation of the input.
"""

from typing import Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray
import xarray as xr

import pint

from common.constants import PhysicalConstants
from common.exceptions import ValidationError
from common.logging_config import get_logger
from common.types import GeoPoints, Points, ProjectedPoints
from common.units import to_meters, validate_units
from polar_projection.frames import to_geographic, to_projected

logger = get_logger(__name__)

# Distinct vertices each method needs once repeated points are dropped
INTERPOLATION_METHODS = {
    "linear": 2,
    "nearest": 2,
    "zero": 2,
    "slinear": 2,
    "quadratic": 3,
    "cubic": 4,
    "pchip": 2,
    "akima": 3,
}

# Relative slack when counting samples, so a 0.3 m path at 0.1 m gives 4
_STEP_TOLERANCE = 1e-12


def _check_vector(shape: Tuple[int, ...]) -> None:
    if len(shape) > 2 or (len(shape) == 2 and 1 not in shape):
        raise ValidationError(
            f"Input Error: input coordinates must be vectors, got shape {shape}."
        )


def _oriented(values: NDArray[np.float64], like: Tuple[int, ...]) -> NDArray[np.float64]:
    """Reshape a 1-D result to the row/column orientation of ``like``."""
    if len(like) == 2 and like[0] == 1:
        return values.reshape(1, -1)
    if len(like) == 2:
        return values.reshape(-1, 1)
    return values


def _cumulative(x: NDArray[np.float64], y: NDArray[np.float64]) -> NDArray[np.float64]:
    steps = np.hypot(np.diff(x), np.diff(y))
    return np.concatenate([[0.0], np.cumsum(steps)])


def cumulative_distance(
    path: Points,
    reference: Optional[Points] = None,
    km: bool = False
) -> NDArray[np.float64]:
    """Cumulative distance along a path.

    Parameters
    ----------
    path : GeoPoints or ProjectedPoints
        Path vertices. Geographic paths are projected with the default
        meridian first.
    reference : GeoPoints or ProjectedPoints, optional
        A single point. The path vertex closest to it (lowest index on
        ties) becomes distance zero; earlier vertices become negative.
    km : bool
        Return kilometers instead of meters.

    Returns
    -------
    ndarray
        Distance of every vertex, same shape as the path.

    Examples
    --------
    >>> cumulative_distance(ProjectedPoints([0, 3, 3], [0, 4, 4]))
    array([0., 5., 5.])
    >>> cumulative_distance(
    ...     ProjectedPoints([0, 3, 3], [0, 4, 4]),
    ...     reference=ProjectedPoints(3, 4),
    ... )
    array([-5.,  0.,  0.])
    """
    _check_vector(path.shape)
    if path.size == 0:
        raise ValidationError("Input Error: path must contain at least one point.")

    xy = to_projected(path)
    x = xy.x.ravel()
    y = xy.y.ravel()
    d = _cumulative(x, y)

    if reference is not None:
        if reference.size != 1:
            raise ValidationError("Input Error: Reference coordinate must be a single point.")
        ref = to_projected(reference, xy.meridian)
        dist_to_ref = np.hypot(x - ref.x.ravel()[0], y - ref.y.ravel()[0])
        nearest = int(np.argmin(dist_to_ref))
        d = d - d[nearest]

    if km:
        d = d / PhysicalConstants.METERS_PER_KILOMETER

    return d.reshape(path.shape)


@validate_units({'spacing': 'm'})
def resample_uniform(
    path: Points,
    spacing: Union[float, pint.Quantity],
    method: str = "linear"
) -> Points:
    """Resample a path at equal spacing along its length.

    Samples are taken at distances ``0, spacing, 2*spacing, ...`` up to
    the last multiple not beyond the total length; the remainder of the
    path after that sample is dropped, so the final vertex is generally
    not reproduced.

    Parameters
    ----------
    path : GeoPoints or ProjectedPoints
        Path vertices, at least two.
    spacing : float or pint.Quantity
        Distance between samples in meters.
    method : str
        Interpolation method, one of ``INTERPOLATION_METHODS``.

    Returns
    -------
    GeoPoints or ProjectedPoints
        Resampled path in the same frame and orientation as ``path``.

    Raises
    ------
    ValidationError
        If spacing is not a positive scalar, the path is not a vector, the
        method is unknown, or the path has fewer distinct points than the
        method needs.
    """
    _check_vector(path.shape)
    if path.size < 2:
        raise ValidationError("Input error: a path needs at least two points to resample.")
    spacing_m = to_meters(spacing, "m")
    if np.ndim(spacing_m) != 0:
        raise ValidationError("Input error: spacing must be a scalar.")
    if not spacing_m > 0:
        raise ValidationError("Input error: spacing must be greater than zero.")
    if method not in INTERPOLATION_METHODS:
        raise ValidationError(
            f"Unknown interpolation method {method!r}; "
            f"expected one of {', '.join(INTERPOLATION_METHODS)}."
        )

    xy = to_projected(path)
    x = xy.x.ravel()
    y = xy.y.ravel()
    d = _cumulative(x, y)
    total = d[-1]

    n_steps = int(np.floor(total / spacing_m * (1 + _STEP_TOLERANCE)))
    targets = np.minimum(spacing_m * np.arange(n_steps + 1), total)

    # Zero-length segments repeat a distance; interpolation needs unique ones
    advancing = np.concatenate([[True], np.diff(d) > 0])
    d, x, y = d[advancing], x[advancing], y[advancing]

    if d.size == 1:
        xi = np.full(targets.shape, x[0])
        yi = np.full(targets.shape, y[0])
    else:
        if d.size < INTERPOLATION_METHODS[method]:
            raise ValidationError(
                f"Input error: {method} interpolation needs at least "
                f"{INTERPOLATION_METHODS[method]} distinct points, path has {d.size}."
            )
        along = xr.DataArray(
            np.column_stack([x, y]),
            dims=("distance", "axis"),
            coords={"distance": d, "axis": ["x", "y"]},
        )
        sampled = along.interp(distance=targets, method=method)
        xi = sampled.sel(axis="x").values
        yi = sampled.sel(axis="y").values

    logger.debug(
        f"Resampled {path.size}-vertex path of {total:.1f} m "
        f"to {targets.size} samples every {spacing_m:.1f} m ({method})"
    )

    resampled = ProjectedPoints(
        _oriented(np.asarray(xi, dtype=np.float64), path.shape),
        _oriented(np.asarray(yi, dtype=np.float64), path.shape),
        xy.meridian,
    )
    if isinstance(path, GeoPoints):
        return to_geographic(resampled)
    return resampled
