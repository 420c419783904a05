"""Shared pytest fixtures for astroframe tests."""

import pytest

from astroframe.domain.alt_az import AltAz
from astroframe.domain.differential import SphericalCoslatDifferential
from astroframe.domain.representation import (
    CartesianRepresentation,
    SphericalRepresentation,
)


@pytest.fixture
def cartesian_rep() -> CartesianRepresentation:
    """A generic cartesian position."""
    return CartesianRepresentation(1.0, -2.0, 2.0)


@pytest.fixture
def spherical_rep() -> SphericalRepresentation:
    """A spherical position off every axis."""
    return SphericalRepresentation(30.0, 60.0, 5.0)


@pytest.fixture
def coslat_motion() -> SphericalCoslatDifferential:
    """Proper motion with a radial component."""
    return SphericalCoslatDifferential(0.1, 0.2, 3.0)


@pytest.fixture
def alt_az_frame() -> AltAz:
    """Alt-az frame with position and motion set."""
    return AltAz.from_alt_az(45.0, 180.0, 2.0, 0.1, 0.2, 3.0)
