import functools

import gradio as gr
import PIL.Image

from sphere_renders import constants
from .core import Renderer
from .scene import LightType, reference_scene

# Keep the previous frame visible while the next one renders.
CSS = """
#output_img img { object-fit: contain; }
.pending { opacity: 1 !important; }
"""

DEFAULT_UI_RESOLUTION = 512


@functools.lru_cache(maxsize=16)
def renderer_for(resolution, viewport_size, distance, kinds):
    """Long-lived renderer per view setting, so revisiting a setting hits its render cache."""
    scene = reference_scene().with_light_kinds(kinds)
    return Renderer(scene=scene, canvas_width=int(resolution), canvas_height=int(resolution),
                    viewport_width=viewport_size, viewport_height=viewport_size,
                    projection_distance=distance)


def render_frame(resolution, viewport_size, distance, use_ambient, use_point, use_directional):
    """Render the reference scene with the chosen lights at a square resolution."""
    kinds = []
    if use_ambient:
        kinds.append(LightType.AMBIENT)
    if use_point:
        kinds.append(LightType.POINT)
    if use_directional:
        kinds.append(LightType.DIRECTIONAL)

    renderer = renderer_for(int(resolution), float(viewport_size), float(distance), tuple(kinds))
    return PIL.Image.fromarray(renderer.render())


def create_ui():

    with gr.Blocks(title="Sphere Renderer", css=CSS) as demo:

        gr.Markdown("# Sphere Renderer")
        gr.Markdown("Ray traced spheres with ambient, point and directional lighting.")

        with gr.Row():
            with gr.Column(scale=1):
                with gr.Group():
                    gr.Markdown("### 🎥 Projection")
                    res_slider = gr.Slider(minimum=64, maximum=1024, value=DEFAULT_UI_RESOLUTION, step=64,
                                           label="Render Resolution", info="Lower for speed, higher for quality")
                    viewport_slider = gr.Slider(minimum=0.25, maximum=4.0, value=constants.DEFAULT_VIEWPORT_WIDTH,
                                                step=0.05, label="Viewport Size", info="World units spanned by the image")
                    distance_slider = gr.Slider(minimum=0.25, maximum=4.0, value=constants.DEFAULT_PROJECTION_DISTANCE,
                                                step=0.05, label="Projection Distance", info="Camera to viewport")
                    reset_btn = gr.Button("🔄 Reset Viewport", variant="secondary")

                with gr.Group():
                    gr.Markdown("### 💡 Lights")
                    with gr.Row():
                        ambient_toggle = gr.Checkbox(value=True, label="Ambient")
                        point_toggle = gr.Checkbox(value=True, label="Point")
                        directional_toggle = gr.Checkbox(value=True, label="Directional")

            with gr.Column(scale=2):
                output_img = gr.Image(label="Viewport", interactive=False, elem_id="output_img")

        inputs = [res_slider, viewport_slider, distance_slider,
                  ambient_toggle, point_toggle, directional_toggle]

        def reset_view():
            return [DEFAULT_UI_RESOLUTION, constants.DEFAULT_VIEWPORT_WIDTH,
                    constants.DEFAULT_PROJECTION_DISTANCE, True, True, True]

        reset_btn.click(fn=reset_view, outputs=inputs)

        # Auto-render on any change
        for input_comp in inputs:
            input_comp.change(fn=render_frame, inputs=inputs, outputs=output_img,
                              trigger_mode="always_last", show_progress="hidden")

        demo.load(fn=render_frame, inputs=inputs, outputs=output_img, show_progress="hidden")

    return demo


if __name__ == "__main__":
    demo = create_ui()
    demo.launch()
