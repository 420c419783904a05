"""Positional representations and the algebra defined over them.

A representation is the positional half of a frame. Every binary operation
works on the cartesian projections of its operands and then expresses the
cartesian result in whichever representation type the caller asks for.

Argument and return types are checked before any arithmetic: passing a
differential, or asking for one back, raises ``CapabilityError``.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar, cast

from astroframe.domain import algebra
from astroframe.domain.exceptions import CapabilityError
from astroframe.domain.models import AngleUnit, Category, Point
from astroframe.domain.vector import TaggedVector

R = TypeVar("R", bound="BaseRepresentation")


def is_representation(value: object) -> bool:
    """Return True if ``value`` is a representation instance or class."""
    cls = value if isinstance(value, type) else type(value)
    return issubclass(cls, BaseRepresentation)


def require_representation(value: object, role: str = "argument") -> None:
    """Raise ``CapabilityError`` unless ``value`` is a representation.

    Args:
        value: Instance or class to check.
        role: How the value is used, for the error message.
    """
    if not is_representation(value):
        name = value.__name__ if isinstance(value, type) else type(value).__name__
        msg = f"{role} is expected to be a representation type, got {name}"
        raise CapabilityError(msg)


def _result_type(return_type: type[R] | None) -> type[R]:
    if return_type is None:
        return cast("type[R]", CartesianRepresentation)
    require_representation(return_type, "return type")
    return return_type


class BaseRepresentation(TaggedVector):
    """Common algebra for all positional representations."""

    def get_point(self) -> Point:
        """Copy of the stored point."""
        return self._point.copy()

    def norm(self) -> float:
        """Length over the native components (see ``algebra.norm``)."""
        return algebra.norm(self._point)

    def unit_vector(self, return_type: type[R] | None = None) -> R:
        """Direction of this vector, as ``return_type`` (cartesian by default)."""
        return_type = _result_type(return_type)
        return return_type.from_cartesian(algebra.unit_vector(self._point), self.unit)

    def cross(
        self, other: BaseRepresentation, return_type: type[R] | None = None
    ) -> R:
        """Cross product with ``other``; both must be 3-D."""
        require_representation(other)
        return_type = _result_type(return_type)
        result = algebra.cross(self._point, other._point)
        return return_type.from_cartesian(result, self.unit)

    def dot(self, other: BaseRepresentation) -> float:
        require_representation(other)
        return algebra.dot(self._point, other._point)

    def sum(
        self, other: BaseRepresentation, return_type: type[R] | None = None
    ) -> R:
        require_representation(other)
        return_type = _result_type(return_type)
        result = algebra.vector_sum(self._point, other._point)
        return return_type.from_cartesian(result, self.unit)

    def mean(
        self, other: BaseRepresentation, return_type: type[R] | None = None
    ) -> R:
        require_representation(other)
        return_type = _result_type(return_type)
        result = algebra.mean(self._point, other._point)
        return return_type.from_cartesian(result, self.unit)

    def to_representation(
        self, return_type: type[R], unit: AngleUnit | None = None
    ) -> R:
        """Reinterpret the native components under ``return_type``'s category.

        No geometric conversion happens: a cartesian ``(1, 2, 3)`` becomes a
        spherical ``(lat=1, lon=2, distance=3)``. The angular unit is kept
        unless ``unit`` is given.
        """
        require_representation(return_type, "return type")
        system = return_type.system_for(unit or self.unit)
        return return_type.from_point(self._point.with_system(system))

    def convert_to(
        self,
        return_type: type[R],
        unit: AngleUnit | None = None,
        dimension: int | None = None,
    ) -> R:
        """Geometrically convert to ``return_type`` through the cartesian basis."""
        require_representation(return_type, "return type")
        return return_type.from_cartesian(
            self.project_to_cartesian(), unit or self.unit, dimension or self.dimension
        )


class CartesianRepresentation(BaseRepresentation):
    """Position as ``(x, y, z)``."""

    category: ClassVar[Category] = Category.CARTESIAN

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._point = Point([x, y, z], self.system_for())

    def get_x(self) -> float:
        return self._point.get(0)

    def get_y(self) -> float:
        return self._point.get(1)

    def get_z(self) -> float:
        return self._point.get(2)

    def get_xyz(self) -> tuple[float, ...]:
        return self._components()

    def set_x(self, x: float) -> None:
        self._point.set(0, x)

    def set_y(self, y: float) -> None:
        self._point.set(1, y)

    def set_z(self, z: float) -> None:
        self._point.set(2, z)

    def set_xyz(self, x: float, y: float, z: float) -> None:
        self._set_components(x, y, z)


class SphericalRepresentation(BaseRepresentation):
    """Position as ``(lat, lon, distance)`` with angles in ``unit``."""

    category: ClassVar[Category] = Category.SPHERICAL

    def __init__(
        self,
        lat: float = 0.0,
        lon: float = 0.0,
        distance: float = 1.0,
        unit: AngleUnit = AngleUnit.DEGREE,
    ) -> None:
        self._point = Point([lat, lon, distance], self.system_for(unit))

    def get_lat(self) -> float:
        return self._point.get(0)

    def get_lon(self) -> float:
        return self._point.get(1)

    def get_dist(self) -> float:
        return self._point.get(2)

    def get_lat_lon_dist(self) -> tuple[float, ...]:
        return self._components()

    def set_lat(self, lat: float) -> None:
        self._point.set(0, lat)

    def set_lon(self, lon: float) -> None:
        self._point.set(1, lon)

    def set_dist(self, distance: float) -> None:
        self._point.set(2, distance)

    def set_lat_lon_dist(self, lat: float, lon: float, distance: float) -> None:
        """Overwrite all three components in one update."""
        self._set_components(lat, lon, distance)
