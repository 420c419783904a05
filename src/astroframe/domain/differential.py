"""Differentials: rates of change attached to a representation.

Differentials are a separate family from representations. They support
direction and magnitude only, and are never accepted where a position is
expected.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar, cast

import numpy as np

from astroframe.domain import algebra
from astroframe.domain.exceptions import CapabilityError
from astroframe.domain.models import AngleUnit, Category, Point
from astroframe.domain.vector import TaggedVector

D = TypeVar("D", bound="BaseDifferential")


def is_differential(value: object) -> bool:
    """Return True if ``value`` is a differential instance or class."""
    cls = value if isinstance(value, type) else type(value)
    return issubclass(cls, BaseDifferential)


def require_differential(value: object, role: str = "argument") -> None:
    """Raise ``CapabilityError`` unless ``value`` is a differential."""
    if not is_differential(value):
        name = value.__name__ if isinstance(value, type) else type(value).__name__
        msg = f"{role} is expected to be a differential type, got {name}"
        raise CapabilityError(msg)


class BaseDifferential(TaggedVector):
    """Common operations for all differentials."""

    def get_differential(self) -> Point:
        """Copy of the stored rate point."""
        return self._point.copy()

    def unit_vector(self, return_type: type[D] | None = None) -> D:
        """Direction of the rates, as ``return_type`` (``CartesianDifferential``)."""
        if return_type is None:
            return_type = cast("type[D]", CartesianDifferential)
        require_differential(return_type, "return type")
        return return_type.from_cartesian(algebra.unit_vector(self._point), self.unit)

    def to_differential(
        self, return_type: type[D], unit: AngleUnit | None = None
    ) -> D:
        """Reinterpret the native rates under ``return_type``'s category."""
        require_differential(return_type, "return type")
        system = return_type.system_for(unit or self.unit)
        return return_type.from_point(self._point.with_system(system))

    def rescale(
        self,
        return_type: type[D],
        unit: AngleUnit | None = None,
        dimension: int | None = None,
    ) -> D:
        """Copy the rates into ``return_type`` of the same category.

        Components keep their order and meaning. On a unit change only the
        two angular rates of a spherical differential are rescaled; the
        radial rate is left alone. A shorter target drops trailing rates and
        a longer one pads them with zero.

        Raises:
            CapabilityError: If ``return_type`` belongs to another category.
        """
        require_differential(return_type, "return type")
        category = return_type._concrete_category()
        if category is not self.system.category:
            msg = (
                f"Cannot rescale {self.system.category.value} rates "
                f"into {return_type.__name__}"
            )
            raise CapabilityError(msg)

        unit = unit or self.unit
        dimension = dimension or self.dimension
        coords = np.zeros(dimension, dtype=np.float64)
        kept = min(dimension, self.dimension)
        coords[:kept] = self._point.coords[:kept]
        if self.system.is_spherical and unit is not self.unit:
            coords[:2] = algebra.convert_angles(coords[:2], self.unit, unit)
        return return_type.from_point(Point(coords, return_type.system_for(unit)))

    def convert_to(
        self,
        return_type: type[D],
        unit: AngleUnit | None = None,
        dimension: int | None = None,
    ) -> D:
        """Geometrically convert to ``return_type`` through the cartesian basis."""
        require_differential(return_type, "return type")
        return return_type.from_cartesian(
            self.project_to_cartesian(), unit or self.unit, dimension or self.dimension
        )


class CartesianDifferential(BaseDifferential):
    """Velocity as ``(dx, dy, dz)``."""

    category: ClassVar[Category] = Category.CARTESIAN

    def __init__(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> None:
        self._point = Point([dx, dy, dz], self.system_for())

    def get_dx_dy_dz(self) -> tuple[float, ...]:
        return self._components()

    def set_dx_dy_dz(self, dx: float, dy: float, dz: float) -> None:
        self._set_components(dx, dy, dz)


class SphericalDifferential(BaseDifferential):
    """Rates ``(dlat, dlon, ddistance)`` with angular rates in ``unit``."""

    category: ClassVar[Category] = Category.SPHERICAL

    def __init__(
        self,
        dlat: float = 0.0,
        dlon: float = 0.0,
        ddistance: float = 0.0,
        unit: AngleUnit = AngleUnit.DEGREE,
    ) -> None:
        self._point = Point([dlat, dlon, ddistance], self.system_for(unit))

    def get_dlat_dlon_ddist(self) -> tuple[float, ...]:
        return self._components()

    def set_dlat_dlon_ddist(self, dlat: float, dlon: float, ddistance: float) -> None:
        self._set_components(dlat, dlon, ddistance)


class SphericalCoslatDifferential(BaseDifferential):
    """Rates ``(dlat, dlon * cos(lat), ddistance)``.

    The longitude rate is pre-multiplied by the cosine of the latitude, the
    usual convention for proper motions.
    """

    category: ClassVar[Category] = Category.SPHERICAL

    def __init__(
        self,
        dlat: float = 0.0,
        dlon_coslat: float = 0.0,
        ddistance: float = 0.0,
        unit: AngleUnit = AngleUnit.DEGREE,
    ) -> None:
        self._point = Point([dlat, dlon_coslat, ddistance], self.system_for(unit))

    def get_dlat_dlon_coslat_ddist(self) -> tuple[float, ...]:
        return self._components()

    def set_dlat_dlon_coslat_ddist(
        self, dlat: float, dlon_coslat: float, ddistance: float
    ) -> None:
        self._set_components(dlat, dlon_coslat, ddistance)
