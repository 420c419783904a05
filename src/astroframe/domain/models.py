"""Domain models: the tagged point primitive and observation metadata.

A ``Point`` is the storage shared by representations and differentials.
It holds a fixed number of float64 components together with an immutable
``CoordinateSystem`` tag that says how those components are to be read.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np
from pydantic import BaseModel, Field

from astroframe.domain.exceptions import DimensionError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


class Category(str, Enum):
    """Coordinate system family of a point."""

    CARTESIAN = "cartesian"
    SPHERICAL = "spherical"


class AngleUnit(str, Enum):
    """Angular unit used by spherical components."""

    DEGREE = "degree"
    RADIAN = "radian"


@dataclass(frozen=True)
class CoordinateSystem:
    """Immutable tag describing how a point's components are interpreted.

    Cartesian components are ``(x, y[, z])``. Spherical components are
    ``(lat, lon[, distance])`` with angles in ``unit``.
    """

    category: Category
    unit: AngleUnit = AngleUnit.DEGREE

    @property
    def is_cartesian(self) -> bool:
        return self.category is Category.CARTESIAN

    @property
    def is_spherical(self) -> bool:
        return self.category is Category.SPHERICAL


CARTESIAN = CoordinateSystem(Category.CARTESIAN)
SPHERICAL_DEGREE = CoordinateSystem(Category.SPHERICAL, AngleUnit.DEGREE)
SPHERICAL_RADIAN = CoordinateSystem(Category.SPHERICAL, AngleUnit.RADIAN)


class Point:
    """Fixed-size vector of float64 components tagged with a coordinate system.

    The dimension and the tag are fixed at construction. Individual
    components may be overwritten in place with ``set``.

    Example:
        >>> p = Point([45.0, 180.0, 2.0], SPHERICAL_DEGREE)
        >>> p.get(0)
        45.0
        >>> p.set(2, 3.0)
        >>> p.as_tuple()
        (45.0, 180.0, 3.0)
    """

    __slots__ = ("_coords", "_system")

    def __init__(
        self, coords: ArrayLike, system: CoordinateSystem = CARTESIAN
    ) -> None:
        values = np.array(coords, dtype=np.float64)
        if values.ndim != 1 or values.size == 0:
            msg = (
                "Point components must be a non-empty 1-D sequence, "
                f"got shape {values.shape}"
            )
            raise DimensionError(msg)
        self._coords: NDArray[np.float64] = values
        self._system = system

    @classmethod
    def zeros(cls, dimension: int, system: CoordinateSystem = CARTESIAN) -> Point:
        """Create a point of ``dimension`` zero components."""
        return cls(np.zeros(dimension, dtype=np.float64), system)

    @property
    def dimension(self) -> int:
        return int(self._coords.size)

    @property
    def system(self) -> CoordinateSystem:
        return self._system

    @property
    def coords(self) -> NDArray[np.float64]:
        """Copy of the components as a float64 array."""
        return self._coords.copy()

    def get(self, index: int) -> float:
        return float(self._coords[index])

    def set(self, index: int, value: float) -> None:
        self._coords[index] = value

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(float(v) for v in self._coords)

    def copy(self) -> Point:
        return Point(self._coords, self._system)

    def with_system(self, system: CoordinateSystem) -> Point:
        """Return a copy of the same components under a different tag."""
        return Point(self._coords, system)

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._system == other._system and bool(
            np.array_equal(self._coords, other._coords)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        system = f"{self._system.category.value}/{self._system.unit.value}"
        return f"Point({self.as_tuple()!r}, {system})"


class EarthLocation(BaseModel, frozen=True):
    """Geodetic position of an observatory."""

    lat: float = Field(ge=-90, le=90, description="Geodetic latitude (degrees)")
    lon: float = Field(description="Longitude, east positive (degrees)")
    height: float = Field(default=0.0, description="Height above sea level (meters)")


class ObservationConditions(BaseModel, frozen=True):
    """Passive observation metadata attached to observation-sensitive frames.

    None of these values take part in the vector algebra. They are carried
    so that refraction or time-dependent transforms built on top of a frame
    have what they need.
    """

    pressure: float = Field(
        default=0.0,
        ge=0,
        description="Atmospheric pressure at the observer (pascals)",
    )
    temperature: float = Field(
        default=0.0,
        ge=-273.15,
        description="Air temperature at the observer (degrees Celsius)",
    )
    relative_humidity: float = Field(
        default=0.0,
        ge=0,
        le=1,
        description="Relative humidity as a fraction",
    )
    obs_time: datetime | None = Field(
        default=None,
        description="Time of observation",
    )
    earth_location: EarthLocation | None = Field(
        default=None,
        description="Observer location on Earth",
    )
