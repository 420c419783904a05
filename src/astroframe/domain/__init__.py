"""Domain layer: Pure coordinate algebra with no I/O dependencies."""

from astroframe.domain.alt_az import AltAz
from astroframe.domain.differential import (
    BaseDifferential,
    CartesianDifferential,
    SphericalCoslatDifferential,
    SphericalDifferential,
    is_differential,
)
from astroframe.domain.exceptions import (
    AstroframeError,
    CapabilityError,
    DegenerateVectorError,
    DimensionError,
)
from astroframe.domain.frame import BaseFrame
from astroframe.domain.models import (
    AngleUnit,
    Category,
    CoordinateSystem,
    EarthLocation,
    ObservationConditions,
    Point,
)
from astroframe.domain.representation import (
    BaseRepresentation,
    CartesianRepresentation,
    SphericalRepresentation,
    is_representation,
)

__all__ = [
    "AltAz",
    "AngleUnit",
    "AstroframeError",
    "BaseDifferential",
    "BaseFrame",
    "BaseRepresentation",
    "CapabilityError",
    "CartesianDifferential",
    "CartesianRepresentation",
    "Category",
    "CoordinateSystem",
    "DegenerateVectorError",
    "DimensionError",
    "EarthLocation",
    "ObservationConditions",
    "Point",
    "SphericalCoslatDifferential",
    "SphericalDifferential",
    "SphericalRepresentation",
    "is_differential",
    "is_representation",
]
