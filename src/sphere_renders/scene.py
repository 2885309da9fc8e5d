"""
Scene description for the sphere renderer: spheres, lights and the camera.

Everything here is immutable once constructed. A Scene is built before
rendering and passed explicitly to the tracer, so per-pixel work only ever
reads it.
"""
from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np

from sphere_renders import constants
from sphere_renders.vector import point


class LightType(Enum):
    """Enumeration of supported light kinds."""
    AMBIENT = "ambient"
    POINT = "point"
    DIRECTIONAL = "directional"


def _frozen_vector(v):
    if isinstance(v, np.ndarray) and not v.flags.writeable and v.shape == (3,):
        return v
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {arr.shape}")
    return point(*arr)


@dataclass(frozen=True, eq=False)
class Sphere:
    """
    A solid colored sphere.

    Attributes:
        center: (3,) center point
        radius: Radius in world units, must be positive
        color: Base RGB color (0-255 per channel)
    """
    center: np.ndarray
    radius: float
    color: tuple = constants.WHITE

    def __post_init__(self):
        """Validate geometry and freeze the center."""
        if not self.radius > 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        if len(self.color) != 3:
            raise ValueError(f"color must be an RGB triple, got {self.color}")
        object.__setattr__(self, "center", _frozen_vector(self.center))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "color", tuple(self.color))


@dataclass(frozen=True, eq=False)
class Light:
    """
    A light source.

    Attributes:
        kind: LightType of the source
        intensity: Scalar brightness contribution
        vector: Position (POINT) or direction (DIRECTIONAL); unused for AMBIENT
    """
    kind: LightType
    intensity: float
    vector: np.ndarray | None = None

    def __post_init__(self):
        if not isinstance(self.kind, LightType):
            raise ValueError(f"Invalid light kind: {self.kind!r}")
        if self.kind is LightType.AMBIENT:
            object.__setattr__(self, "vector", None)
        elif self.vector is None:
            raise ValueError(f"{self.kind.value} light requires a vector")
        else:
            object.__setattr__(self, "vector", _frozen_vector(self.vector))
        # A point light may sit at the origin; a direction must have length
        if self.kind is LightType.DIRECTIONAL and not np.any(self.vector):
            raise ValueError("directional light requires a non-zero direction")
        object.__setattr__(self, "intensity", float(self.intensity))

    @classmethod
    def ambient(cls, intensity):
        return cls(LightType.AMBIENT, intensity)

    @classmethod
    def point(cls, intensity, position):
        return cls(LightType.POINT, intensity, position)

    @classmethod
    def directional(cls, intensity, direction):
        return cls(LightType.DIRECTIONAL, intensity, direction)


@dataclass(frozen=True, eq=False)
class Scene:
    """
    Camera plus ordered spheres and lights.

    Sphere order decides which sphere wins when two hits are exactly equally
    distant: the earlier one.
    """
    camera: np.ndarray = field(default_factory=lambda: point(0, 0, 0))
    spheres: tuple = ()
    lights: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "camera", _frozen_vector(self.camera))
        object.__setattr__(self, "spheres", tuple(self.spheres))
        object.__setattr__(self, "lights", tuple(self.lights))

    def with_light_kinds(self, kinds):
        """Return a copy of the scene keeping only lights of the given kinds."""
        kinds = set(kinds)
        return replace(self, lights=tuple(light for light in self.lights if light.kind in kinds))

    def __str__(self):
        cx, cy, cz = self.camera
        return (f"camera ({cx:g}, {cy:g}, {cz:g}), "
                f"{len(self.spheres)} spheres, {len(self.lights)} lights")


def reference_scene():
    """Three unit spheres resting above a huge teal ground sphere, lit by all three light kinds."""
    return Scene(
        camera=point(0, 0, 0),
        spheres=(
            Sphere(point(0, -1, 3), 1, constants.RED),
            Sphere(point(2, 0, 4), 1, constants.GREEN),
            Sphere(point(-2, 0, 4), 1, constants.BLUE),
            Sphere(point(0, -5001, 0), 5000, constants.TEAL),
        ),
        lights=(
            Light.ambient(0.2),
            Light.point(0.6, point(2, 1, 0)),
            Light.directional(0.2, point(1, 4, 4)),
        ),
    )
