import argparse
import logging
import sys
import time

from sphere_renders import constants
from sphere_renders.core import Renderer
from sphere_renders.image_io import save_image
from sphere_renders.logconfig import setup_logging


def render_to_file(renderer, output, t_max=constants.DEFAULT_T_MAX):
    """Render, report the elapsed time, and save the canvas."""
    print(f"Rendering {renderer.Cw}x{renderer.Ch} canvas of {renderer.scene}...")
    t0 = time.time()
    img = renderer.render(t_max=t_max)
    elapsed_ms = (time.time() - t0) * 1000.0
    print(f"Took {elapsed_ms:.0f} ms.")
    save_image(img, output)
    print(f"Saved {output}")
    return img


def build_parser():
    parser = argparse.ArgumentParser(description="Sphere Renderer CLI")
    parser.add_argument("--width", type=int, default=constants.DEFAULT_CANVAS_WIDTH, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=constants.DEFAULT_CANVAS_HEIGHT, help="Canvas height in pixels")
    parser.add_argument("--viewport-width", type=float, default=constants.DEFAULT_VIEWPORT_WIDTH, help="Viewport width in world units")
    parser.add_argument("--viewport-height", type=float, default=constants.DEFAULT_VIEWPORT_HEIGHT, help="Viewport height in world units")
    parser.add_argument("--distance", type=float, default=constants.DEFAULT_PROJECTION_DISTANCE, help="Camera to viewport distance")
    parser.add_argument("--t-max", type=float, default=constants.DEFAULT_T_MAX, help="Farthest accepted hit distance")
    parser.add_argument("--output", "-o", default=constants.DEFAULT_OUTPUT_PATH, help="Output image path")
    parser.add_argument("--plot", metavar="PATH", help="Also write a layout diagram of the scene to PATH")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    parser.add_argument("--ui", action="store_true", help="Launch the interactive Gradio UI")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level))

    if args.ui:
        from sphere_renders.ui import create_ui
        print("Launching UI...")
        demo = create_ui()
        demo.launch()
        return 0

    try:
        renderer = Renderer(canvas_width=args.width, canvas_height=args.height,
                            viewport_width=args.viewport_width, viewport_height=args.viewport_height,
                            projection_distance=args.distance)
    except ValueError as e:
        parser.error(str(e))

    try:
        render_to_file(renderer, args.output, t_max=args.t_max)
    except ValueError as e:
        parser.error(str(e))
    except OSError as e:
        print(f"Error: could not write {args.output}: {e}", file=sys.stderr)
        return 1

    if args.plot:
        from sphere_renders.tools.plot_scene import plot_scene
        plot_scene(renderer.scene, args.plot, viewport_width=renderer.Vw,
                   viewport_height=renderer.Vh, distance=renderer.z_dist)
        print(f"Saved {args.plot}")

    return 0


def run_ui():
    """Entry point for sphere-render-ui command."""
    return main(["--ui"])


if __name__ == "__main__":
    sys.exit(main())
