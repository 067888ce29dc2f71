"""Pytest configuration for raytracer tests.

Provides a seeded random generator and a few small scenes shared across
test modules.
"""

import numpy as np
import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """Seeded generator so stochastic scattering is reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def two_spheres(gray):
    """Small sphere at the origin resting above a large ground sphere."""
    ground = Sphere(Vector3(0.0, -100.5, 0.0), 100.0, gray)
    small = Sphere(Vector3(0.0, 0.0, 0.0), 0.5, gray)
    return [ground, small]


def random_spheres(rng, count, material, spread=10.0, max_radius=0.6):
    """Scatter count spheres inside a cube of side 2 * spread."""
    spheres = []
    for _ in range(count):
        cx, cy, cz = rng.uniform(-spread, spread, 3)
        radius = float(rng.uniform(0.05, max_radius))
        spheres.append(Sphere(Vector3(float(cx), float(cy), float(cz)), radius, material))
    return spheres


def assert_vec_close(actual, expected, tol=1e-6):
    assert abs(actual.x - expected.x) < tol, (actual, expected)
    assert abs(actual.y - expected.y) < tol, (actual, expected)
    assert abs(actual.z - expected.z) < tol, (actual, expected)
