"""Tests for the point primitive and observation metadata models."""

from datetime import datetime, timezone

import numpy as np
import pytest
from pydantic import ValidationError

from astroframe.domain.exceptions import DimensionError
from astroframe.domain.models import (
    CARTESIAN,
    SPHERICAL_DEGREE,
    SPHERICAL_RADIAN,
    AngleUnit,
    Category,
    CoordinateSystem,
    EarthLocation,
    ObservationConditions,
    Point,
)


class TestCoordinateSystem:
    """Tests for the coordinate system tag."""

    def test_constants(self) -> None:
        """Module constants carry the expected category and unit."""
        assert CARTESIAN.category is Category.CARTESIAN
        assert SPHERICAL_DEGREE.unit is AngleUnit.DEGREE
        assert SPHERICAL_RADIAN.unit is AngleUnit.RADIAN

    def test_predicates(self) -> None:
        """Category predicates follow the tag."""
        assert CARTESIAN.is_cartesian
        assert not CARTESIAN.is_spherical
        assert SPHERICAL_DEGREE.is_spherical

    def test_frozen(self) -> None:
        """Tags cannot be changed after construction."""
        from dataclasses import FrozenInstanceError

        with pytest.raises(FrozenInstanceError):
            CARTESIAN.category = Category.SPHERICAL  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        """Tags compare by value."""
        assert CoordinateSystem(Category.SPHERICAL, AngleUnit.RADIAN) == SPHERICAL_RADIAN


class TestPoint:
    """Tests for Point."""

    def test_components_are_float64(self) -> None:
        """Components are stored as float64."""
        p = Point([1, 2, 3])
        assert p.coords.dtype == np.float64
        assert p.as_tuple() == (1.0, 2.0, 3.0)

    def test_dimension_and_system(self) -> None:
        """Dimension and tag are exposed."""
        p = Point([45.0, 180.0], SPHERICAL_DEGREE)
        assert p.dimension == 2
        assert len(p) == 2
        assert p.system == SPHERICAL_DEGREE

    def test_default_system_is_cartesian(self) -> None:
        """Points are cartesian unless tagged otherwise."""
        assert Point([0.0, 0.0, 0.0]).system == CARTESIAN

    def test_get_and_set(self) -> None:
        """Components can be read and overwritten in place."""
        p = Point([1.0, 2.0, 3.0])
        p.set(1, 7.5)
        assert p.get(1) == 7.5
        assert list(p) == [1.0, 7.5, 3.0]

    def test_input_is_copied(self) -> None:
        """Mutating the source array does not affect the point."""
        source = np.array([1.0, 2.0, 3.0])
        p = Point(source)
        source[0] = 99.0
        assert p.get(0) == 1.0

    def test_coords_returns_copy(self) -> None:
        """Mutating the returned array does not affect the point."""
        p = Point([1.0, 2.0, 3.0])
        p.coords[0] = 99.0
        assert p.get(0) == 1.0

    def test_copy_is_independent(self) -> None:
        """Copies do not share storage."""
        p = Point([1.0, 2.0, 3.0])
        q = p.copy()
        q.set(0, -1.0)
        assert p.get(0) == 1.0
        assert q.get(0) == -1.0

    def test_with_system_keeps_components(self) -> None:
        """Re-tagging keeps the numbers."""
        p = Point([1.0, 2.0, 3.0])
        q = p.with_system(SPHERICAL_RADIAN)
        assert q.as_tuple() == p.as_tuple()
        assert q.system == SPHERICAL_RADIAN
        assert p.system == CARTESIAN

    def test_zeros(self) -> None:
        """Zero point of any dimension."""
        p = Point.zeros(4)
        assert p.as_tuple() == (0.0, 0.0, 0.0, 0.0)

    def test_equality(self) -> None:
        """Equality needs the same tag and components."""
        assert Point([1.0, 2.0]) == Point([1.0, 2.0])
        assert Point([1.0, 2.0]) != Point([1.0, 2.0], SPHERICAL_DEGREE)
        assert Point([1.0, 2.0]) != Point([1.0, 2.0, 0.0])

    def test_empty_raises(self) -> None:
        """Empty input is rejected."""
        with pytest.raises(DimensionError, match="non-empty"):
            Point([])

    def test_nested_raises(self) -> None:
        """Multi-dimensional input is rejected."""
        with pytest.raises(DimensionError):
            Point([[1.0, 2.0], [3.0, 4.0]])


class TestObservationConditions:
    """Tests for ObservationConditions Pydantic model."""

    def test_default_values(self) -> None:
        """Default conditions are all zero or absent."""
        conditions = ObservationConditions()
        assert conditions.pressure == 0.0
        assert conditions.temperature == 0.0
        assert conditions.relative_humidity == 0.0
        assert conditions.obs_time is None
        assert conditions.earth_location is None

    def test_custom_values(self) -> None:
        """Custom conditions are stored."""
        when = datetime(2025, 2, 15, 8, 8, 30, tzinfo=timezone.utc)
        conditions = ObservationConditions(
            pressure=101325.0,
            temperature=12.5,
            relative_humidity=0.6,
            obs_time=when,
            earth_location=EarthLocation(lat=48.6, lon=2.35, height=90.0),
        )
        assert conditions.pressure == 101325.0
        assert conditions.obs_time == when
        assert conditions.earth_location is not None
        assert conditions.earth_location.lat == 48.6

    def test_frozen(self) -> None:
        """Conditions are immutable."""
        conditions = ObservationConditions()
        with pytest.raises(ValidationError):
            conditions.pressure = 1.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"pressure": -1.0},
            {"temperature": -300.0},
            {"relative_humidity": 1.5},
            {"relative_humidity": -0.1},
        ],
    )
    def test_invalid_values_raise(self, kwargs: dict[str, float]) -> None:
        """Out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            ObservationConditions(**kwargs)

    def test_earth_location_latitude_range(self) -> None:
        """Latitude must lie within [-90, 90]."""
        with pytest.raises(ValidationError):
            EarthLocation(lat=91.0, lon=0.0)
