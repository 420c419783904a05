"""Altitude-azimuth (horizontal) frame.

Position is ``(altitude, azimuth, distance)`` in degrees and motion is
``(pm_alt, pm_az * cos(alt), radial_velocity)``. Altitude is not range
checked; keeping it within [-90, 90] is up to the caller.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from astroframe.domain.differential import (
    BaseDifferential,
    SphericalCoslatDifferential,
)
from astroframe.domain.frame import BaseFrame
from astroframe.domain.models import ObservationConditions
from astroframe.domain.representation import (
    BaseRepresentation,
    SphericalRepresentation,
)

A = TypeVar("A", bound="AltAz")


class AltAz(BaseFrame[SphericalRepresentation, SphericalCoslatDifferential]):
    """Horizontal coordinates of a source as seen by an observer.

    Example:
        >>> frame = AltAz.from_alt_az(45.0, 180.0, 2.0)
        >>> frame.get_alt_az_dist()
        (45.0, 180.0, 2.0)
    """

    representation_type: ClassVar[type[BaseRepresentation]] = SphericalRepresentation
    differential_type: ClassVar[type[BaseDifferential]] = SphericalCoslatDifferential

    @classmethod
    def from_alt_az(
        cls: type[A],
        alt: float,
        az: float,
        distance: float = 1.0,
        pm_alt: float | None = None,
        pm_az_cosalt: float | None = None,
        radial_velocity: float | None = None,
        *,
        conditions: ObservationConditions | None = None,
    ) -> A:
        """Build a frame from plain numbers.

        Motion is set only when all three of ``pm_alt``, ``pm_az_cosalt`` and
        ``radial_velocity`` are given; otherwise it stays at zero.

        Args:
            alt: Altitude in degrees.
            az: Azimuth in degrees.
            distance: Distance to the source.
            pm_alt: Proper motion in altitude (degrees per unit time).
            pm_az_cosalt: Proper motion in azimuth times cos(alt).
            radial_velocity: Rate of change of distance.
            conditions: Optional observation metadata.

        Raises:
            ValueError: If only some of the motion values are given.
        """
        frame = cls(conditions=conditions)
        frame.set_alt_az_dist(alt, az, distance)

        motion = (pm_alt, pm_az_cosalt, radial_velocity)
        rates = [v for v in motion if v is not None]
        if len(rates) == len(motion):
            frame.set_pm_alt_az_radial(*rates)
        elif rates:
            msg = "pm_alt, pm_az_cosalt and radial_velocity must be given together"
            raise ValueError(msg)
        return frame

    # ──────────────────────────────────────────────────────────────────────────
    # Position
    # ──────────────────────────────────────────────────────────────────────────

    def get_alt(self) -> float:
        return self.data.get_component(0)

    def get_az(self) -> float:
        return self.data.get_component(1)

    def get_distance(self) -> float:
        return self.data.get_component(2)

    def get_alt_az_dist(self) -> tuple[float, ...]:
        return self.data.get_lat_lon_dist()

    def set_alt(self, alt: float) -> None:
        self.data.set_component(0, alt)

    def set_az(self, az: float) -> None:
        self.data.set_component(1, az)

    def set_distance(self, distance: float) -> None:
        self.data.set_component(2, distance)

    def set_alt_az_dist(self, alt: float, az: float, distance: float) -> None:
        self.data.set_lat_lon_dist(alt, az, distance)

    # ──────────────────────────────────────────────────────────────────────────
    # Motion
    # ──────────────────────────────────────────────────────────────────────────

    def get_pm_alt(self) -> float:
        return self.motion.get_component(0)

    def get_pm_az_cosalt(self) -> float:
        return self.motion.get_component(1)

    def get_radial_velocity(self) -> float:
        return self.motion.get_component(2)

    def get_pm_alt_az_radial(self) -> tuple[float, ...]:
        return self.motion.get_dlat_dlon_coslat_ddist()

    def set_pm_alt(self, pm_alt: float) -> None:
        self.motion.set_component(0, pm_alt)

    def set_pm_az_cosalt(self, pm_az_cosalt: float) -> None:
        self.motion.set_component(1, pm_az_cosalt)

    def set_radial_velocity(self, radial_velocity: float) -> None:
        self.motion.set_component(2, radial_velocity)

    def set_pm_alt_az_radial(
        self, pm_alt: float, pm_az_cosalt: float, radial_velocity: float
    ) -> None:
        self.motion.set_dlat_dlon_coslat_ddist(pm_alt, pm_az_cosalt, radial_velocity)
