"""
Projection configuration.

A ``ProjectionConfig`` records every parameter that determines where a
point lands on the map plane. Two runs with the same config hash produce
identical projected coordinates.
"""

import hashlib
import json
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict

from common.constants import PhysicalConstants
from common.exceptions import ValidationError


@dataclass(frozen=True)
class ProjectionConfig:
    """Parameters of the north polar stereographic map.

    Attributes
    ----------
    central_meridian : float
        Longitude in degrees pointing straight down from the pole.
    true_scale_latitude : float
        Standard parallel in degrees.
    ellipsoid : str
        PROJ ellipsoid name.
    """
    central_meridian: float = PhysicalConstants.DEFAULT_CENTRAL_MERIDIAN.value
    true_scale_latitude: float = PhysicalConstants.TRUE_SCALE_LATITUDE.value
    ellipsoid: str = "WGS84"

    def __post_init__(self):
        if not 0.0 < self.true_scale_latitude <= 90.0:
            raise ValidationError(
                "True-scale latitude must lie in the northern hemisphere (0, 90]."
            )
        if not math.isfinite(self.central_meridian):
            raise ValidationError("Central meridian must be a finite longitude.")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ProjectionConfig':
        """Create from dictionary."""
        return cls(**d)

    def config_hash(self) -> str:
        """Compute a deterministic hash of the configuration.

        Returns
        -------
        str
            First 16 hex digits of the SHA-256 of the sorted JSON form.
        """
        config_str = json.dumps(self.to_dict(), sort_keys=True, default=str)
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]

    def projection(self):
        """Build the projection adapter described by this config."""
        from polar_projection.projections import PolarStereographicNorth
        return PolarStereographicNorth(
            central_meridian_deg=self.central_meridian,
            true_scale_latitude_deg=self.true_scale_latitude,
            ellipsoid=self.ellipsoid,
        )


DEFAULT_CONFIG = ProjectionConfig()
