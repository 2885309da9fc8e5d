import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle, Polygon

from sphere_renders import constants
from sphere_renders.scene import LightType, reference_scene

# Half-extent of each diagram around the camera (world units)
VIEW_EXTENT = 6.0


def _frustum(scene, size, distance, axis):
    """Triangle from the camera through the viewport edges, projected onto (axis, z)."""
    half = size / 2.0
    # Extend the viewport edges out to the diagram boundary
    reach = VIEW_EXTENT / max(distance, 1e-9)
    cam = scene.camera
    return np.array([
        [cam[axis], cam[2]],
        [cam[axis] - half * reach, cam[2] + distance * reach],
        [cam[axis] + half * reach, cam[2] + distance * reach],
    ])


def plot_scene(scene, path, viewport_width=constants.DEFAULT_VIEWPORT_WIDTH,
               viewport_height=constants.DEFAULT_VIEWPORT_HEIGHT,
               distance=constants.DEFAULT_PROJECTION_DISTANCE):
    """
    Save a two panel layout diagram of the scene.

    Left: top-down (X-Z) view. Right: side (Y-Z) view. Spheres are drawn in
    their base color, point lights as stars, directional lights as arrows from
    the camera, and the camera frustum as a shaded wedge.
    """
    fig, (ax_top, ax_side) = plt.subplots(1, 2, figsize=(12, 6))

    for ax, axis, label in ((ax_top, 0, "X"), (ax_side, 1, "Y")):
        size = viewport_width if axis == 0 else viewport_height
        ax.add_patch(Polygon(_frustum(scene, size, distance, axis), closed=True, color="gray", alpha=0.15))

        for sphere in scene.spheres:
            color = np.array(sphere.color) / 255.0
            ax.add_patch(Circle((sphere.center[axis], sphere.center[2]), sphere.radius,
                                facecolor=color, edgecolor="black", alpha=0.8))

        for light in scene.lights:
            if light.kind is LightType.POINT:
                ax.plot(light.vector[axis], light.vector[2], marker="*", markersize=15,
                        color="orange", markeredgecolor="black")
            elif light.kind is LightType.DIRECTIONAL:
                d = light.vector / np.linalg.norm(light.vector)
                ax.annotate("", xy=(scene.camera[axis] + 2.0 * d[axis], scene.camera[2] + 2.0 * d[2]),
                            xytext=(scene.camera[axis], scene.camera[2]),
                            arrowprops=dict(arrowstyle="->", color="orange", lw=2))

        ax.plot(scene.camera[axis], scene.camera[2], marker="o", color="black")
        ax.set_xlim(scene.camera[axis] - VIEW_EXTENT, scene.camera[axis] + VIEW_EXTENT)
        ax.set_ylim(scene.camera[2] - 1.0, scene.camera[2] + 2.0 * VIEW_EXTENT - 1.0)
        ax.set_aspect("equal")
        ax.set_xlabel(label)
        ax.set_ylabel("Z (view axis)")

    ax_top.set_title("Top Down (X-Z)")
    ax_side.set_title("Side (Y-Z)")
    ambient = sum(light.intensity for light in scene.lights if light.kind is LightType.AMBIENT)
    fig.suptitle(f"{scene} (ambient {ambient:g})")

    fig.savefig(path, dpi=100)
    plt.close(fig)
    return path


if __name__ == "__main__":
    plot_scene(reference_scene(), "scene_layout.png")
    print("Saved scene_layout.png")
