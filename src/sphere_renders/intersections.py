"""
Ray-sphere intersection calculations for the sphere renderer.

Substituting the ray P = origin + t * direction into |P - center|^2 = r^2
gives a quadratic in t whose roots are the parametric distances at which the
ray enters and leaves the sphere.
"""
import numpy as np

from sphere_renders import constants
from sphere_renders.errors import InvalidRayError
from sphere_renders.vector import as_vectors, dot, sub


def solve_quadratic_vectorized(a, b, c):
    """
    Solve at^2 + bt + c = 0 for vectorized arrays.

    Args:
        a, b, c: Arrays of quadratic coefficients (a must be non-zero)

    Returns:
        tuple: (t1, t2, valid_mask) where t1 = (-b + sqrt(disc)) / 2a,
        t2 = (-b - sqrt(disc)) / 2a, and both are NO_HIT where disc < 0
    """
    a, b, c = np.broadcast_arrays(*(np.asarray(x, dtype=float) for x in (a, b, c)))
    discriminant = b**2 - 4.0 * a * c
    valid_mask = discriminant >= 0

    t1 = np.full(a.shape, constants.NO_HIT)
    t2 = np.full(a.shape, constants.NO_HIT)

    if np.any(valid_mask):
        sqrt_disc = np.sqrt(discriminant[valid_mask])
        two_a = 2.0 * a[valid_mask]
        t1[valid_mask] = (-b[valid_mask] + sqrt_disc) / two_a
        t2[valid_mask] = (-b[valid_mask] - sqrt_disc) / two_a

    return t1, t2, valid_mask


def intersect_ray_sphere(ray_origin, ray_directions, sphere):
    """
    Vectorized intersection of rays with a single sphere.

    Args:
        ray_origin: (3,) origin point shared by all rays
        ray_directions: (3,) direction or (N, 3) array of directions (need not be unit length)
        sphere: Sphere to test against

    Returns:
        (t1, t2) roots, scalars for a single ray or (N,) arrays. No ordering
        between the two is guaranteed. Both are NO_HIT (inf) on a miss.

    Raises:
        InvalidRayError: if any direction has zero magnitude.
    """
    ray_directions = as_vectors(ray_directions)
    is_single = ray_directions.ndim == 1
    if is_single:
        ray_directions = ray_directions[None, :]

    oc = sub(ray_origin, sphere.center)

    k1 = dot(ray_directions, ray_directions)
    if np.any(k1 == 0.0):
        raise InvalidRayError("Ray direction must have non-zero magnitude")
    k2 = 2.0 * dot(oc, ray_directions)
    k3 = dot(oc, oc) - sphere.radius**2

    t1, t2, _ = solve_quadratic_vectorized(k1, k2, k3)

    if is_single:
        return float(t1[0]), float(t2[0])
    return t1, t2
