"""Pytest configuration and shared fixtures."""

import pytest
from core.vector import Point, Vector
from core.ray import Ray
from geometry.world import default_world as build_default_world


@pytest.fixture
def default_world():
    """Two concentric spheres lit from (-10, 10, -10)."""
    return build_default_world()


@pytest.fixture
def ray_down_z():
    """A ray from (0, 0, -5) pointing along +z."""
    return Ray(Point(0, 0, -5), Vector(0, 0, 1))
