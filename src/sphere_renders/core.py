import functools
import logging

import numpy as np

from sphere_renders import constants
from sphere_renders.rendering import RayTracer
from sphere_renders.scene import reference_scene

logger = logging.getLogger(__name__)


class Renderer:
    def __init__(self, scene=None, canvas_width=None, canvas_height=None,
                 viewport_width=None, viewport_height=None, projection_distance=None):
        """
        Initialize the renderer with a scene and projection parameters.

        Coordinate System (Camera-Centric):
        - Camera: scene.camera, looking along +Z.
        - Viewport: a Vw x Vh rectangle centered on the Z axis at z = projection_distance.
        - Canvas: Cw x Ch pixels; canvas (x, y) is centered, with +y up.
        - Output grid: row 0 at the top, column 0 at the left.
        """
        # Defaults if not provided
        self.scene = scene if scene is not None else reference_scene()
        self.Cw = int(canvas_width if canvas_width is not None else constants.DEFAULT_CANVAS_WIDTH)
        self.Ch = int(canvas_height if canvas_height is not None else constants.DEFAULT_CANVAS_HEIGHT)
        self.Vw = float(viewport_width if viewport_width is not None else constants.DEFAULT_VIEWPORT_WIDTH)
        self.Vh = float(viewport_height if viewport_height is not None else constants.DEFAULT_VIEWPORT_HEIGHT)
        self.z_dist = float(projection_distance if projection_distance is not None
                            else constants.DEFAULT_PROJECTION_DISTANCE)

        if self.Cw <= 0 or self.Ch <= 0:
            raise ValueError(f"canvas size must be positive, got {self.Cw}x{self.Ch}")
        if not (self.Vw > 0 and self.Vh > 0):
            raise ValueError(f"viewport size must be positive, got {self.Vw}x{self.Vh}")
        # A zero distance would give the center pixel a zero-length ray
        if self.z_dist == 0:
            raise ValueError("projection_distance must be non-zero")

        self.tracer = RayTracer(self.scene)
        logger.info("Initialized scene with %s", self.scene)

    @property
    def canvas_shape(self):
        """(height, width, 3) shape of the rendered grid."""
        return (self.Ch, self.Cw, 3)

    def canvas_to_viewport(self, x, y):
        """
        Map centered canvas coordinates to viewport-space ray directions.

        Args:
            x, y: Scalars or equally shaped arrays of canvas coordinates

        Returns:
            (3,) direction, or (..., 3) array for array input
        """
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        z = np.full(np.broadcast(x, y).shape, self.z_dist)
        return np.stack([x * self.Vw / self.Cw, y * self.Vh / self.Ch, z], axis=-1)

    def pixel_to_canvas(self, row, col):
        """
        Convert grid indices (row from top, col from left) to centered canvas (x, y).

        Inverse of row = (Ch - 1)//2 - y, col = x + Cw//2. Both axes are
        centered the same way, so even sizes give x in [-Cw/2, Cw/2) and
        y in [-Ch/2, Ch/2), and odd sizes are symmetric about zero.
        """
        x = np.asarray(col) - self.Cw // 2
        y = (self.Ch - 1) // 2 - np.asarray(row)
        return x, y

    def trace_pixel(self, row, col, t_min=constants.DEFAULT_T_MIN, t_max=constants.DEFAULT_T_MAX):
        """Trace the single ray behind one grid cell and return its float color."""
        x, y = self.pixel_to_canvas(row, col)
        direction = self.canvas_to_viewport(x, y)
        return self.tracer.trace_ray(self.scene.camera, direction, t_min, t_max)

    @staticmethod
    def to_pixels(colors):
        """Clamp float colors to the 8-bit channel range and truncate to uint8."""
        return np.clip(colors, constants.CHANNEL_MIN, constants.CHANNEL_MAX).astype(np.uint8)

    @functools.lru_cache(maxsize=8)
    def _render_cached(self, t_min, t_max, chunk_rows):
        """
        Internal cached render call using hashable arguments.

        The scene and projection parameters are fixed per renderer, so the
        bounds and band size fully determine the output.
        """
        canvas = np.zeros(self.canvas_shape, dtype=np.uint8)
        cols = np.arange(self.Cw)

        for start in range(0, self.Ch, chunk_rows):
            rows = np.arange(start, min(start + chunk_rows, self.Ch))
            r, c = np.meshgrid(rows, cols, indexing="ij")
            x, y = self.pixel_to_canvas(r, c)

            # Flatten and shade
            ray_dirs = self.canvas_to_viewport(x, y).reshape(-1, 3)
            colors = self.tracer.trace_ray(self.scene.camera, ray_dirs, t_min, t_max)
            canvas[rows[0]:rows[-1] + 1] = self.to_pixels(colors).reshape(len(rows), self.Cw, 3)
            logger.debug("Traced rows %d-%d of %d", rows[0], rows[-1], self.Ch)

        canvas.flags.writeable = False
        return canvas

    def render(self, t_min=constants.DEFAULT_T_MIN, t_max=constants.DEFAULT_T_MAX,
               chunk_rows=constants.DEFAULT_CHUNK_ROWS):
        """
        Render the full canvas.

        Every pixel is traced from the camera through its viewport point; rows
        are processed in bands of *chunk_rows* to bound memory use. Repeated
        calls with the same arguments return the same cached, read-only grid.

        Returns:
            (height, width, 3) uint8 array, row 0 at the top
        """
        if not t_min < t_max:
            raise ValueError(f"t_min ({t_min}) must be less than t_max ({t_max})")
        if chunk_rows <= 0:
            raise ValueError(f"chunk_rows must be positive, got {chunk_rows}")
        return self._render_cached(float(t_min), float(t_max), int(chunk_rows))
