import numpy as np
import pytest
from sphere_renders import constants
from sphere_renders.scene import Light, LightType, Scene, Sphere


def test_reference_scene_contents(scene):
    np.testing.assert_array_equal(scene.camera, [0, 0, 0])
    assert [s.color for s in scene.spheres] == [constants.RED, constants.GREEN,
                                                constants.BLUE, constants.TEAL]
    np.testing.assert_array_equal(scene.spheres[3].center, [0, -5001, 0])
    assert scene.spheres[3].radius == 5000.0

    kinds = [light.kind for light in scene.lights]
    assert kinds == [LightType.AMBIENT, LightType.POINT, LightType.DIRECTIONAL]
    assert [light.intensity for light in scene.lights] == pytest.approx([0.2, 0.6, 0.2])
    np.testing.assert_array_equal(scene.lights[1].vector, [2, 1, 0])
    np.testing.assert_array_equal(scene.lights[2].vector, [1, 4, 4])


def test_scene_is_immutable(scene):
    with pytest.raises(AttributeError):
        scene.spheres = ()
    with pytest.raises(ValueError):
        scene.spheres[0].center[0] = 10.0


def test_sphere_validation():
    with pytest.raises(ValueError):
        Sphere(np.array([0.0, 0.0, 0.0]), 0.0)
    with pytest.raises(ValueError):
        Sphere(np.array([0.0, 0.0, 0.0]), -1.0)
    with pytest.raises(ValueError):
        Sphere(np.array([0.0, 0.0]), 1.0)
    with pytest.raises(ValueError):
        Sphere(np.array([0.0, 0.0, 0.0]), 1.0, (255, 0))


def test_light_validation():
    with pytest.raises(ValueError):
        Light(LightType.POINT, 0.5)
    with pytest.raises(ValueError):
        Light("point", 0.5, [0, 0, 0])
    # Ambient lights carry no vector
    assert Light(LightType.AMBIENT, 0.3, [1, 2, 3]).vector is None


def test_directional_light_needs_a_direction():
    with pytest.raises(ValueError):
        Light.directional(0.2, [0.0, 0.0, 0.0])
    # A point light at the origin is a position, not a direction
    np.testing.assert_array_equal(Light.point(0.6, [0.0, 0.0, 0.0]).vector, [0, 0, 0])


def test_with_light_kinds(scene):
    ambient_only = scene.with_light_kinds([LightType.AMBIENT])
    assert [light.kind for light in ambient_only.lights] == [LightType.AMBIENT]
    assert ambient_only.spheres == scene.spheres
    # Original untouched
    assert len(scene.lights) == 3

    dark = scene.with_light_kinds([])
    assert dark.lights == ()


def test_scene_summary(scene):
    assert str(scene) == "camera (0, 0, 0), 4 spheres, 3 lights"
    assert str(Scene()) == "camera (0, 0, 0), 0 spheres, 0 lights"
