"""Domain exceptions for astroframe."""


class AstroframeError(Exception):
    """Base exception for all astroframe errors."""

    pass


class CapabilityError(AstroframeError, TypeError):
    """Raised when a value or type is not in the required vector family."""

    pass


class DimensionError(AstroframeError, ValueError):
    """Raised when a point has a dimension the operation cannot handle."""

    pass


class DegenerateVectorError(AstroframeError, ValueError):
    """Raised when a direction is requested for a zero-length vector."""

    pass
