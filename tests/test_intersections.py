import numpy as np
import pytest
from sphere_renders import constants
from sphere_renders.errors import InvalidRayError
from sphere_renders.intersections import intersect_ray_sphere, solve_quadratic_vectorized
from sphere_renders.scene import Sphere


def test_ray_through_center_roots_symmetric(origin, unit_sphere_ahead):
    """
    A unit ray aimed at the center enters at distance - r and leaves at distance + r.
    """
    t1, t2 = intersect_ray_sphere(origin, np.array([0.0, 0.0, 1.0]), unit_sphere_ahead)

    assert t1 == pytest.approx(6.0)
    assert t2 == pytest.approx(4.0)
    assert (t1 + t2) / 2.0 == pytest.approx(5.0)


def test_non_unit_direction_scales_roots(origin, unit_sphere_ahead):
    """Doubling the direction halves t; the world-space hit points are unchanged."""
    t1, t2 = intersect_ray_sphere(origin, np.array([0.0, 0.0, 2.0]), unit_sphere_ahead)
    assert t1 == pytest.approx(3.0)
    assert t2 == pytest.approx(2.0)


def test_tangent_ray_has_equal_roots(scene, origin, standard_rays):
    """The forward axis just touches the top of the red sphere at (0, 0, 3)."""
    red = scene.spheres[0]
    t1, t2 = intersect_ray_sphere(origin, standard_rays['forward'], red)
    assert t1 == t2
    assert t1 == pytest.approx(3.0)


def test_miss_returns_sentinel(origin, unit_sphere_ahead, standard_rays):
    t1, t2 = intersect_ray_sphere(origin, standard_rays['up'], unit_sphere_ahead)
    assert t1 == constants.NO_HIT
    assert t2 == constants.NO_HIT


def test_origin_inside_sphere_gives_opposite_roots():
    sphere = Sphere(np.array([0.0, 0.0, 0.0]), 2.0)
    t1, t2 = intersect_ray_sphere(np.array([0.0, 0.0, 0.0]), np.array([1.0, 0.0, 0.0]), sphere)
    assert t1 == pytest.approx(2.0)
    assert t2 == pytest.approx(-2.0)


def test_sphere_behind_ray_gives_negative_roots(origin, unit_sphere_ahead, standard_rays):
    t1, t2 = intersect_ray_sphere(origin, standard_rays['back'], unit_sphere_ahead)
    assert t1 == pytest.approx(-4.0)
    assert t2 == pytest.approx(-6.0)


def test_batch_matches_single(origin, unit_sphere_ahead):
    directions = np.array([
        [0.0, 0.0, 1.0],
        [0.0, 1.0, 0.0],
        [0.1, 0.05, 1.0],
    ])
    t1, t2 = intersect_ray_sphere(origin, directions, unit_sphere_ahead)
    assert t1.shape == (3,)
    assert t2.shape == (3,)

    for i, d in enumerate(directions):
        s1, s2 = intersect_ray_sphere(origin, d, unit_sphere_ahead)
        assert t1[i] == pytest.approx(s1)
        assert t2[i] == pytest.approx(s2)


def test_zero_direction_is_invalid(origin, unit_sphere_ahead):
    with pytest.raises(InvalidRayError):
        intersect_ray_sphere(origin, np.array([0.0, 0.0, 0.0]), unit_sphere_ahead)

    directions = np.array([[0.0, 0.0, 1.0], [0.0, 0.0, 0.0]])
    with pytest.raises(InvalidRayError):
        intersect_ray_sphere(origin, directions, unit_sphere_ahead)


def test_solve_quadratic_vectorized():
    # (t - 1)(t - 3), t^2 + 1 (no real roots), (t - 2)^2
    a = np.array([1.0, 1.0, 1.0])
    b = np.array([-4.0, 0.0, -4.0])
    c = np.array([3.0, 1.0, 4.0])

    t1, t2, valid = solve_quadratic_vectorized(a, b, c)

    np.testing.assert_array_equal(valid, [True, False, True])
    np.testing.assert_allclose(t1[valid], [3.0, 2.0])
    np.testing.assert_allclose(t2[valid], [1.0, 2.0])
    assert np.isinf(t1[1]) and np.isinf(t2[1])


if __name__ == "__main__":
    pytest.main([__file__])
