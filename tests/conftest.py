"""
Pytest fixtures and configuration for sphere renderer tests.
"""

import numpy as np
import pytest
from sphere_renders import constants
from sphere_renders.core import Renderer
from sphere_renders.rendering import RayTracer
from sphere_renders.scene import Light, Scene, Sphere, reference_scene


@pytest.fixture
def scene():
    """The standard three-spheres-on-teal-ground scene."""
    return reference_scene()


@pytest.fixture
def tracer(scene):
    return RayTracer(scene)


@pytest.fixture
def origin():
    """Camera position of the reference scene."""
    return np.array([0.0, 0.0, 0.0])


@pytest.fixture
def unit_sphere_ahead():
    """Unit sphere five units down the view axis."""
    return Sphere(np.array([0.0, 0.0, 5.0]), 1.0, constants.RED)


@pytest.fixture
def standard_rays():
    """Common ray directions used in multiple tests."""
    return {
        'forward': np.array([0.0, 0.0, 1.0]),   # Grazes the top of the red sphere
        'up': np.array([0.0, 1.0, 0.0]),        # Open sky
        'down': np.array([0.0, -1.0, 0.0]),     # Teal ground
        'back': np.array([0.0, 0.0, -1.0]),     # Behind the camera
    }


@pytest.fixture
def small_renderer(scene):
    """Reference scene on a cheap 64x64 canvas."""
    return Renderer(scene=scene, canvas_width=64, canvas_height=64)


def ambient_scene(spheres, intensity=1.0):
    """Scene lit only by an ambient light, so shaded color == base color * intensity."""
    return Scene(spheres=spheres, lights=(Light.ambient(intensity),))


def reference_center_intensity():
    """Light at the top of the red sphere, (0, 0, 3) with normal +Y."""
    return 0.2 + 0.6 / np.sqrt(14.0) + 0.2 * 4.0 / np.sqrt(33.0)


def assert_color_close(actual, expected, rtol=1e-9, atol=1e-9, err_msg=""):
    """Assert that two colors are close, with helpful error messages."""
    np.testing.assert_allclose(
        actual, expected, rtol=rtol, atol=atol,
        err_msg=f"Color mismatch: {err_msg}"
    )
