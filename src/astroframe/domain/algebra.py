"""Category-agnostic vector algebra over tagged points.

Every operation except ``norm`` works in a common basis: operands are first
projected to a 3-D cartesian point, and results are produced as cartesian
points. Representation and differential classes wrap these functions and
express the results in the type the caller asks for.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

import numpy as np

from astroframe.domain.exceptions import DegenerateVectorError, DimensionError
from astroframe.domain.models import CARTESIAN, AngleUnit, CoordinateSystem, Point

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# Returned by the length functions for dimensions other than 2 or 3.
INVALID_LENGTH: Final[float] = -1.0

SUPPORTED_DIMENSIONS: Final[tuple[int, ...]] = (2, 3)


def _to_radians(values: NDArray[np.float64], unit: AngleUnit) -> NDArray[np.float64]:
    if unit is AngleUnit.DEGREE:
        return np.radians(values)
    return values


def _from_radians(values: NDArray[np.float64], unit: AngleUnit) -> NDArray[np.float64]:
    if unit is AngleUnit.DEGREE:
        return np.degrees(values)
    return values


def convert_angles(
    values: NDArray[np.float64], from_unit: AngleUnit, to_unit: AngleUnit
) -> NDArray[np.float64]:
    """Express angles given in ``from_unit`` in ``to_unit``."""
    return _from_radians(_to_radians(values, from_unit), to_unit)


def _check_supported(point: Point) -> None:
    if point.dimension not in SUPPORTED_DIMENSIONS:
        msg = (
            f"Cannot project a {point.dimension}-D {point.system.category.value} "
            f"point; supported dimensions are {SUPPORTED_DIMENSIONS}"
        )
        raise DimensionError(msg)


# ──────────────────────────────────────────────────────────────────────────────
# Projection
# ──────────────────────────────────────────────────────────────────────────────


def project_to_cartesian(point: Point) -> Point:
    """Project a point onto the canonical 3-D cartesian basis.

    Cartesian ``(x, y)`` gains ``z = 0``. Spherical ``(lat, lon, d)`` maps to
    ``d * (cos lat cos lon, cos lat sin lon, sin lat)``; the 2-D spherical
    form ``(lat, lon)`` lies on the unit sphere.

    Args:
        point: Point in any supported coordinate system.

    Returns:
        A new 3-D cartesian point.

    Raises:
        DimensionError: If the point is neither 2-D nor 3-D.
    """
    _check_supported(point)
    coords = point.coords

    if point.system.is_cartesian:
        if point.dimension == 2:
            return Point([coords[0], coords[1], 0.0], CARTESIAN)
        return Point(coords, CARTESIAN)

    lat, lon = _to_radians(coords[:2], point.system.unit)
    distance = coords[2] if point.dimension == 3 else 1.0

    xyz = distance * np.array(
        [
            np.cos(lat) * np.cos(lon),
            np.cos(lat) * np.sin(lon),
            np.sin(lat),
        ],
        dtype=np.float64,
    )
    return Point(xyz, CARTESIAN)


def cartesian_to_system(
    xyz: Point, system: CoordinateSystem, dimension: int = 3
) -> Point:
    """Express a 3-D cartesian point in another coordinate system.

    This is the inverse of ``project_to_cartesian``. Longitudes come back in
    ``(-180, 180]`` degrees (or the radian equivalent). Reducing to a 2-D
    target drops ``z`` for cartesian and the distance for spherical.

    Raises:
        DimensionError: If ``xyz`` is not 3-D or ``dimension`` is unsupported.
    """
    if xyz.dimension != 3 or not xyz.system.is_cartesian:
        msg = f"Expected a 3-D cartesian point, got {xyz!r}"
        raise DimensionError(msg)
    if dimension not in SUPPORTED_DIMENSIONS:
        msg = (
            f"Cannot build a {dimension}-D point; "
            f"supported dimensions are {SUPPORTED_DIMENSIONS}"
        )
        raise DimensionError(msg)

    x, y, z = xyz.coords

    if system.is_cartesian:
        return Point([x, y, z][:dimension], system)

    distance = float(np.sqrt(x**2 + y**2 + z**2))
    angles = _from_radians(
        np.array([np.arctan2(z, np.hypot(x, y)), np.arctan2(y, x)], dtype=np.float64),
        system.unit,
    )
    if dimension == 2:
        return Point(angles, system)
    return Point([angles[0], angles[1], distance], system)


# ──────────────────────────────────────────────────────────────────────────────
# Lengths
# ──────────────────────────────────────────────────────────────────────────────


def norm(point: Point) -> float:
    """Euclidean length of the native, untransformed components.

    For spherical points this mixes angles and distance, so it generally
    differs from ``magnitude``. Returns ``INVALID_LENGTH`` for dimensions
    other than 2 or 3.
    """
    if point.dimension not in SUPPORTED_DIMENSIONS:
        logger.warning("norm() of a %d-D point is undefined", point.dimension)
        return INVALID_LENGTH
    return float(np.sqrt(np.sum(point.coords**2)))


def magnitude(point: Point) -> float:
    """Euclidean length of the cartesian projection.

    Returns ``INVALID_LENGTH`` for dimensions other than 2 or 3.
    """
    if point.dimension not in SUPPORTED_DIMENSIONS:
        logger.warning("magnitude() of a %d-D point is undefined", point.dimension)
        return INVALID_LENGTH
    return float(np.sqrt(np.sum(project_to_cartesian(point).coords ** 2)))


def unit_vector(point: Point) -> Point:
    """Cartesian projection scaled to unit magnitude.

    Raises:
        DimensionError: If the point is neither 2-D nor 3-D.
        DegenerateVectorError: If the magnitude is zero.
    """
    _check_supported(point)
    length = magnitude(point)
    if length == 0.0:
        msg = f"Unit vector of zero-magnitude point {point!r} is undefined"
        raise DegenerateVectorError(msg)
    return Point(project_to_cartesian(point).coords / length, CARTESIAN)


# ──────────────────────────────────────────────────────────────────────────────
# Binary operations
# ──────────────────────────────────────────────────────────────────────────────


def cross(a: Point, b: Point) -> Point:
    """Cross product of two 3-D points in the cartesian basis.

    Raises:
        DimensionError: If either point is not 3-D.
    """
    if a.dimension != 3 or b.dimension != 3:
        msg = (
            f"Cross product requires 3-D operands, "
            f"got {a.dimension}-D and {b.dimension}-D"
        )
        raise DimensionError(msg)
    return Point(
        np.cross(project_to_cartesian(a).coords, project_to_cartesian(b).coords),
        CARTESIAN,
    )


def dot(a: Point, b: Point) -> float:
    """Inner product of the cartesian projections."""
    return float(np.dot(project_to_cartesian(a).coords, project_to_cartesian(b).coords))


def vector_sum(a: Point, b: Point) -> Point:
    """Component-wise sum of the cartesian projections."""
    return Point(
        project_to_cartesian(a).coords + project_to_cartesian(b).coords,
        CARTESIAN,
    )


def mean(a: Point, b: Point) -> Point:
    """Component-wise mean of the cartesian projections."""
    return Point(
        (project_to_cartesian(a).coords + project_to_cartesian(b).coords) / 2,
        CARTESIAN,
    )
