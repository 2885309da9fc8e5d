"""
Diffuse lighting for the sphere renderer.

Each light adds to a scalar intensity that later scales the surface color.
Only the Lambertian term is modeled. There are no specular highlights or
shadow rays, and the summed intensity is not clamped.
"""
import numpy as np

from sphere_renders.scene import LightType
from sphere_renders.vector import as_vectors, dot, length, sub


def compute_lighting(scene, points, normals):
    """
    Accumulate light intensity at surface points.

    Args:
        scene: Scene whose lights are evaluated
        points: (3,) or (N, 3) surface points
        normals: Surface normals matching *points*

    Returns:
        Intensity as a float for a single point, or an (N,) array
    """
    points = as_vectors(points)
    normals = as_vectors(normals)
    is_single = points.ndim == 1
    if is_single:
        points = points[None, :]
        normals = normals[None, :]

    intensity = np.zeros(points.shape[0])
    n_len = length(normals)

    for light in scene.lights:
        if light.kind is LightType.AMBIENT:
            intensity += light.intensity
            continue

        if light.kind is LightType.POINT:
            to_light = sub(light.vector, points)
        else:
            to_light = np.broadcast_to(light.vector, points.shape)

        n_dot_l = dot(normals, to_light)
        lit = n_dot_l > 0
        if np.any(lit):
            denom = n_len[lit] * length(to_light[lit])
            intensity[lit] += light.intensity * n_dot_l[lit] / denom

    return float(intensity[0]) if is_single else intensity
