"""
Data structures and stages of the sphere rendering pipeline.
"""
from dataclasses import dataclass

import numpy as np

from sphere_renders import constants
from sphere_renders.intersections import intersect_ray_sphere
from sphere_renders.lighting import compute_lighting
from sphere_renders.vector import add, as_vectors, normalize, scale, sub


@dataclass
class HitResult:
    """
    Nearest intersection for each ray.

    A ray either hits (sphere_index >= 0 and a finite distance) or misses
    (sphere_index == NO_SPHERE and distance == NO_HIT). There is no third state.

    Attributes:
        distance: Parametric distance to the hit (N,) shape array
        sphere_index: Index into scene.spheres, or NO_SPHERE (N,) shape array
    """
    distance: np.ndarray  # (N,) shape
    sphere_index: np.ndarray  # (N,) shape, int

    def __post_init__(self):
        """Validate array shapes and the hit/miss tagging."""
        if self.distance.ndim != 1:
            raise ValueError(f"distance must be 1D array, got shape {self.distance.shape}")
        if self.sphere_index.shape != self.distance.shape:
            raise ValueError(f"sphere_index shape {self.sphere_index.shape} doesn't match distance shape {self.distance.shape}")
        if np.any(np.isfinite(self.distance) != self.is_hit):
            raise ValueError("distance must be finite exactly where a sphere was hit")

    @property
    def is_hit(self):
        return self.sphere_index != constants.NO_SPHERE

    def __len__(self):
        return self.distance.shape[0]


class HitSelector:
    """
    Responsible for determining which sphere each ray hits first.
    """

    def __init__(self, scene):
        self.scene = scene

    def select_nearest(self, ray_origin, ray_directions, t_min, t_max):
        """
        Find the closest sphere intersection strictly inside (t_min, t_max).

        Spheres are tested in scene order and a candidate only replaces the
        current best when strictly closer, so on an exact tie the earlier
        sphere is kept.

        Args:
            ray_origin: (3,) origin point
            ray_directions: (N, 3) array of ray directions
            t_min, t_max: Exclusive bounds on valid parametric distances

        Returns:
            HitResult for all rays
        """
        n_rays = ray_directions.shape[0]
        best_t = np.full(n_rays, constants.NO_HIT)
        best_index = np.full(n_rays, constants.NO_SPHERE, dtype=int)

        for index, sphere in enumerate(self.scene.spheres):
            t1, t2 = intersect_ray_sphere(ray_origin, ray_directions, sphere)
            for t in (t1, t2):
                closer = (t < best_t) & (t_min < t) & (t < t_max)
                best_t[closer] = t[closer]
                best_index[closer] = index

        return HitResult(distance=best_t, sphere_index=best_index)


class RayTracer:
    """
    Shades rays against a fixed scene.

    Combines the HitSelector with the lighting evaluator: a hit ray takes its
    sphere's color scaled by the light intensity at the hit point, a missed
    ray takes the background color.
    """

    def __init__(self, scene, background_color=constants.BACKGROUND_COLOR):
        self.scene = scene
        self.background_color = np.array(background_color, dtype=float)
        self.hit_selector = HitSelector(scene)
        # (M, 3) lookup tables indexed by sphere_index
        self._centers = np.array([s.center for s in scene.spheres], dtype=float).reshape(-1, 3)
        self._colors = np.array([s.color for s in scene.spheres], dtype=float).reshape(-1, 3)

    def trace_ray(self, ray_origin, ray_directions, t_min=constants.DEFAULT_T_MIN,
                  t_max=constants.DEFAULT_T_MAX):
        """
        Calculate the color for each ray.

        Args:
            ray_origin: (3,) origin point
            ray_directions: (3,) direction or (N, 3) array of directions
            t_min, t_max: Exclusive bounds on accepted hit distances

        Returns:
            Float RGB color, (3,) for a single ray or (N, 3). Channels are not
            clamped, so over-bright lighting can exceed 255.
        """
        if not t_min < t_max:
            raise ValueError(f"t_min ({t_min}) must be less than t_max ({t_max})")

        ray_directions = as_vectors(ray_directions)
        is_single = ray_directions.ndim == 1
        if is_single:
            ray_directions = ray_directions[None, :]
        n_rays = ray_directions.shape[0]

        hits = self.hit_selector.select_nearest(ray_origin, ray_directions, t_min, t_max)

        colors = np.empty((n_rays, 3))
        colors[:] = self.background_color

        hit_mask = hits.is_hit
        if np.any(hit_mask):
            index = hits.sphere_index[hit_mask]
            hit_p = add(ray_origin, scale(ray_directions[hit_mask], hits.distance[hit_mask]))
            normals = normalize(sub(hit_p, self._centers[index]))
            intensity = np.atleast_1d(compute_lighting(self.scene, hit_p, normals))
            colors[hit_mask] = self._colors[index] * intensity[:, None]

        return colors[0] if is_single else colors
