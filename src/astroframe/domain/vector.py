"""Storage and category bookkeeping shared by representations and differentials.

``TaggedVector`` is not a capability in its own right: nothing accepts a
bare ``TaggedVector``. Representations and differentials each derive from
it separately and are checked against their own base classes.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from astroframe.domain import algebra
from astroframe.domain.exceptions import CapabilityError, DimensionError
from astroframe.domain.models import (
    CARTESIAN,
    AngleUnit,
    Category,
    CoordinateSystem,
    Point,
)

V = TypeVar("V", bound="TaggedVector")


class TaggedVector:
    """A single owned ``Point`` whose category is fixed by the subclass."""

    category: ClassVar[Category]

    _point: Point

    @classmethod
    def _concrete_category(cls) -> Category:
        category: Category | None = getattr(cls, "category", None)
        if category is None:
            msg = f"{cls.__name__} is abstract and cannot hold a point"
            raise CapabilityError(msg)
        return category

    @classmethod
    def system_for(cls, unit: AngleUnit = AngleUnit.DEGREE) -> CoordinateSystem:
        """Coordinate system tag used by this class for ``unit``."""
        category = cls._concrete_category()
        if category is Category.CARTESIAN:
            return CARTESIAN
        return CoordinateSystem(category, unit)

    @classmethod
    def from_point(cls: type[V], point: Point) -> V:
        """Wrap a copy of ``point`` without any conversion.

        Raises:
            CapabilityError: If the point's category differs from the class.
        """
        category = cls._concrete_category()
        if point.system.category is not category:
            msg = (
                f"{cls.__name__} holds {category.value} points, "
                f"got a {point.system.category.value} point"
            )
            raise CapabilityError(msg)
        instance = cls.__new__(cls)
        instance._point = point.copy()
        return instance

    @classmethod
    def from_cartesian(
        cls: type[V],
        xyz: Point,
        unit: AngleUnit = AngleUnit.DEGREE,
        dimension: int = 3,
    ) -> V:
        """Build an instance from a 3-D cartesian point by geometric conversion."""
        point = algebra.cartesian_to_system(xyz, cls.system_for(unit), dimension)
        return cls.from_point(point)

    @property
    def dimension(self) -> int:
        return self._point.dimension

    @property
    def unit(self) -> AngleUnit:
        return self._point.system.unit

    @property
    def system(self) -> CoordinateSystem:
        return self._point.system

    def _components(self) -> tuple[float, ...]:
        return self._point.as_tuple()

    def _set_components(self, *values: float) -> None:
        if len(values) != self.dimension:
            msg = (
                f"{type(self).__name__} has {self.dimension} components, "
                f"got {len(values)} values"
            )
            raise DimensionError(msg)
        for index, value in enumerate(values):
            self._point.set(index, value)

    def get_component(self, index: int) -> float:
        return self._point.get(index)

    def set_component(self, index: int, value: float) -> None:
        self._point.set(index, value)

    def project_to_cartesian(self) -> Point:
        """Canonical 3-D cartesian projection of the stored point."""
        return algebra.project_to_cartesian(self._point)

    def magnitude(self) -> float:
        """Length in the cartesian basis, or ``INVALID_LENGTH`` for odd dimensions."""
        return algebra.magnitude(self._point)

    def copy(self: V) -> V:
        return type(self).from_point(self._point)

    def __copy__(self: V) -> V:
        return self.copy()

    def __deepcopy__(self: V, memo: dict[int, Any]) -> V:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaggedVector):
            return NotImplemented
        return type(self) is type(other) and self._point == other._point

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(f"{v!r}" for v in self._components())
        if self.system.is_cartesian:
            return f"{type(self).__name__}({values})"
        return f"{type(self).__name__}({values}, unit={self.unit.value})"
