"""
Common utilities and infrastructure for the Arctic Mapping Core.

This package provides foundational components used across all modules:
- Projection constants with provenance
- Unit registry and length conversion
- Tagged coordinate types
- Exception hierarchy
- Projection configuration
- Logging infrastructure
"""

from common.constants import PhysicalConstants
from common.units import UnitRegistry, validate_units, to_meters
from common.types import (
    Boundary,
    Frame,
    GeoPoints,
    ProjectedPoints,
    Points,
)
from common.exceptions import (
    ArcticMappingError,
    ValidationError,
    DimensionMismatchError,
    SingularProjectionError,
    SouthernHemisphereWarning,
)
from common.config import ProjectionConfig, DEFAULT_CONFIG
from common.logging_config import get_logger

__all__ = [
    "PhysicalConstants",
    "UnitRegistry",
    "validate_units",
    "to_meters",
    "Boundary",
    "Frame",
    "GeoPoints",
    "ProjectedPoints",
    "Points",
    "ArcticMappingError",
    "ValidationError",
    "DimensionMismatchError",
    "SingularProjectionError",
    "SouthernHemisphereWarning",
    "ProjectionConfig",
    "DEFAULT_CONFIG",
    "get_logger",
]
