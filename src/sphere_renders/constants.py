"""
Rendering defaults and named values for the sphere renderer.
"""
import numpy as np

# Canvas (pixels)
DEFAULT_CANVAS_WIDTH = 2000
DEFAULT_CANVAS_HEIGHT = 2000

# Viewport (world units) and its distance from the camera along +Z
DEFAULT_VIEWPORT_WIDTH = 1.0
DEFAULT_VIEWPORT_HEIGHT = 1.0
DEFAULT_PROJECTION_DISTANCE = 1.0

# Parametric bounds for primary rays
DEFAULT_T_MIN = 0.0
DEFAULT_T_MAX = 2000.0

# Root value reported when a ray misses a sphere
NO_HIT = np.inf
# Sphere index tag for rays that hit nothing
NO_SPHERE = -1

# Rows traced per vectorized band (bounds peak memory on large canvases)
DEFAULT_CHUNK_ROWS = 250

# Colors (8-bit RGB)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
TEAL = (0, 255, 255)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

BACKGROUND_COLOR = WHITE

# Valid range of a channel in the final 8-bit image
CHANNEL_MIN = 0
CHANNEL_MAX = 255

DEFAULT_OUTPUT_PATH = "output/render.png"
