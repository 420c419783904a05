"""Reference frame composition: one representation plus one differential.

A concrete frame declares the representation and differential types it
stores. Values of other types handed to a frame are converted to the
declared types. Positions go through the cartesian basis; rates of the
same category keep their components and only have their angular unit
rescaled. Values of the declared types are copied, so a frame never shares
state with its caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar, cast

from astroframe.domain.differential import (
    BaseDifferential,
    CartesianDifferential,
    require_differential,
)
from astroframe.domain.models import AngleUnit, EarthLocation, ObservationConditions
from astroframe.domain.representation import (
    BaseRepresentation,
    CartesianRepresentation,
    require_representation,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseRepresentation)
D = TypeVar("D", bound=BaseDifferential)

F = TypeVar("F", bound="BaseFrame[Any, Any]")


class BaseFrame(Generic[R, D]):
    """Position and motion of a source in one reference frame.

    Construction follows three forms:

    - ``Frame()``: default ``data`` and ``motion`` of the declared types.
    - ``Frame(data)``: positional state only.
    - ``Frame(data, motion)``: full state.

    Example:
        >>> frame = BaseFrame(CartesianRepresentation(1.0, 2.0, 3.0))
        >>> frame.data.get_xyz()
        (1.0, 2.0, 3.0)
    """

    representation_type: ClassVar[type[BaseRepresentation]] = CartesianRepresentation
    differential_type: ClassVar[type[BaseDifferential]] = CartesianDifferential
    angle_unit: ClassVar[AngleUnit] = AngleUnit.DEGREE
    dimension: ClassVar[int] = 3

    def __init__(
        self,
        data: BaseRepresentation | None = None,
        motion: BaseDifferential | None = None,
        *,
        conditions: ObservationConditions | None = None,
    ) -> None:
        """Initialize the frame.

        Args:
            data: Position. Uses the representation type's default if None.
            motion: Rates of change. Uses the differential type's default if None.
            conditions: Optional observation metadata.

        Raises:
            CapabilityError: If ``data`` is not a representation or ``motion``
                is not a differential.
        """
        self._data: R = (
            self._coerce_data(data)
            if data is not None
            else cast(R, self.representation_type())
        )
        self._motion: D = (
            self._coerce_motion(motion)
            if motion is not None
            else cast(D, self.differential_type())
        )
        self.conditions: ObservationConditions | None = conditions
        logger.debug("Created %r", self)

    # ──────────────────────────────────────────────────────────────────────────
    # Type coercion
    # ──────────────────────────────────────────────────────────────────────────

    def _needs_conversion(
        self, value: BaseRepresentation | BaseDifferential, target: type
    ) -> bool:
        return (
            type(value) is not target
            or value.dimension != self.dimension
            or (value.system.is_spherical and value.unit is not self.angle_unit)
        )

    def _coerce_data(self, data: BaseRepresentation) -> R:
        require_representation(data)
        target = self.representation_type
        if self._needs_conversion(data, target):
            logger.debug(
                "Converting %s data to %s", type(data).__name__, target.__name__
            )
            return cast(R, data.convert_to(target, self.angle_unit, self.dimension))
        return cast(R, data.copy())

    def _coerce_motion(self, motion: BaseDifferential) -> D:
        require_differential(motion)
        target = self.differential_type
        if not self._needs_conversion(motion, target):
            return cast(D, motion.copy())
        # Same-category rates keep their components; only the unit changes.
        if motion.system.category is target.category:
            logger.debug(
                "Rescaling %s motion to %s", type(motion).__name__, target.__name__
            )
            return cast(D, motion.rescale(target, self.angle_unit, self.dimension))
        logger.debug(
            "Converting %s motion to %s", type(motion).__name__, target.__name__
        )
        return cast(D, motion.convert_to(target, self.angle_unit, self.dimension))

    # ──────────────────────────────────────────────────────────────────────────
    # State
    # ──────────────────────────────────────────────────────────────────────────

    @property
    def data(self) -> R:
        return self._data

    @data.setter
    def data(self, value: BaseRepresentation) -> None:
        self._data = self._coerce_data(value)

    @property
    def motion(self) -> D:
        return self._motion

    @motion.setter
    def motion(self, value: BaseDifferential) -> None:
        self._motion = self._coerce_motion(value)

    # ──────────────────────────────────────────────────────────────────────────
    # Observation metadata
    # ──────────────────────────────────────────────────────────────────────────

    @property
    def pressure(self) -> float | None:
        return self.conditions.pressure if self.conditions else None

    @property
    def temperature(self) -> float | None:
        return self.conditions.temperature if self.conditions else None

    @property
    def relative_humidity(self) -> float | None:
        return self.conditions.relative_humidity if self.conditions else None

    @property
    def obs_time(self) -> datetime | None:
        return self.conditions.obs_time if self.conditions else None

    @property
    def earth_location(self) -> EarthLocation | None:
        return self.conditions.earth_location if self.conditions else None

    # ──────────────────────────────────────────────────────────────────────────
    # Value semantics
    # ──────────────────────────────────────────────────────────────────────────

    def copy(self: F) -> F:
        """Independent copy; conditions are immutable and shared."""
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._data = self._data.copy()
        clone._motion = self._motion.copy()
        return clone

    def __copy__(self: F) -> F:
        return self.copy()

    def __deepcopy__(self: F, memo: dict[int, Any]) -> F:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseFrame):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._data == other._data
            and self._motion == other._motion
            and self.conditions == other.conditions
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data={self._data!r}, motion={self._motion!r})"
