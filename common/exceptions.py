"""
Typed errors and warnings for the Arctic mapping core.

Every failure aborts the whole call; there is no partial output. The
validation errors subclass ``ValueError`` so callers that only care about
bad input can keep catching the builtin.
"""


class ArcticMappingError(Exception):
    """Base error for the project."""


class ValidationError(ArcticMappingError, ValueError):
    """Invalid input: non-positive sizes, bad options, short paths."""


class DimensionMismatchError(ValidationError):
    """Paired arrays (coordinates, vector components, radii) differ in shape."""


class SingularProjectionError(ArcticMappingError, ValueError):
    """The requested point cannot be represented on the projection plane."""


class SouthernHemisphereWarning(UserWarning):
    """Southern latitudes given to a north polar stereographic routine."""
