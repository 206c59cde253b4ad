"""Gradio UI for SnapStudio."""

import logging

import gradio as gr

from snapstudio.core.config import config
from snapstudio.core.options import (
    DEFAULT_ANGLE,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DISTANCE,
    DEFAULT_FACE_DIRECTION,
    DEFAULT_LIGHTING,
    DEFAULT_POSE,
    DEFAULT_RESOLUTION,
)

from .handlers import (
    analyze_images,
    apply_social_preset,
    clear_images,
    describe_style,
    export_result,
    generate_scene,
    set_processing,
)
from .handlers.generation import GENERATE_LABEL
from .models import (
    ANGLE_CHOICES,
    ASPECT_RATIO_CHOICES,
    DEFAULT_STYLE,
    DISTANCE_CHOICES,
    EXPORT_FORMATS,
    FACE_DIRECTION_CHOICES,
    LIGHTING_CHOICES,
    POSE_CHOICES,
    RESOLUTION_CHOICES,
    SOCIAL_PLATFORM_CHOICES,
    SOURCE_IMAGE_SLOTS,
    STYLE_CHOICES,
    UIState,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    custom_css = """
    .source-images img {
        object-fit: contain;
    }
    .result-panel {
        min-height: 480px;
    }
    """

    app = gr.Blocks(title="SnapStudio")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState())

        gr.Markdown(
            """
            # SnapStudio
            ### AI product and portrait photography studio
            """
        )

        with gr.Row():
            with gr.Column(scale=1):
                style = gr.Dropdown(
                    label="Style",
                    choices=STYLE_CHOICES,
                    value=DEFAULT_STYLE.value,
                )
                style_info = gr.Markdown()

                with gr.Group(elem_classes="source-images") as source_group:
                    with gr.Row():
                        source_images = [
                            gr.Image(label=f"Image {slot}", type="filepath", height=160)
                            for slot in range(1, SOURCE_IMAGE_SLOTS + 1)
                        ]

                reference_image = gr.Image(
                    label="Style Reference (optional)", type="filepath", height=160
                )

                with gr.Accordion("Image Analysis", open=False):
                    analyze_btn = gr.Button("🔍 Analyze First Image")
                    creation_prompt = gr.Textbox(label="Creation Prompt", lines=3, interactive=False)
                    preservation_prompt = gr.Textbox(
                        label="Preservation Prompt", lines=2, interactive=False
                    )
                    use_analysis_btn = gr.Button("Use as Prompt", size="sm")
                    analysis_info = gr.Markdown()

                prompt = gr.Textbox(
                    label="Prompt",
                    placeholder="Describe the scene or the edit you want...",
                    lines=3,
                )
                fixed_elements = gr.Textbox(
                    label="Fixed Elements",
                    placeholder="Elements that must stay unchanged (logo, text, color...)",
                    lines=1,
                )

                with gr.Accordion("Camera & Lighting", open=True):
                    with gr.Row():
                        angle = gr.Dropdown(
                            label="Camera Angle", choices=ANGLE_CHOICES, value=DEFAULT_ANGLE.value
                        )
                        distance = gr.Dropdown(
                            label="Camera Distance",
                            choices=DISTANCE_CHOICES,
                            value=DEFAULT_DISTANCE.value,
                        )
                    lighting = gr.Dropdown(
                        label="Lighting", choices=LIGHTING_CHOICES, value=DEFAULT_LIGHTING.value
                    )
                    with gr.Row():
                        pose = gr.Dropdown(label="Pose", choices=POSE_CHOICES, value=DEFAULT_POSE.value)
                        face_direction = gr.Dropdown(
                            label="Face Direction",
                            choices=FACE_DIRECTION_CHOICES,
                            value=DEFAULT_FACE_DIRECTION.value,
                        )

                with gr.Accordion("Output", open=True):
                    with gr.Row():
                        resolution = gr.Dropdown(
                            label="Resolution",
                            choices=RESOLUTION_CHOICES,
                            value=DEFAULT_RESOLUTION.value,
                        )
                        aspect_ratio = gr.Dropdown(
                            label="Aspect Ratio",
                            choices=ASPECT_RATIO_CHOICES,
                            value=DEFAULT_ASPECT_RATIO.value,
                        )
                    social_platform = gr.Dropdown(
                        label="Social Media Preset",
                        choices=SOCIAL_PLATFORM_CHOICES,
                        value=None,
                    )
                    with gr.Row():
                        use_background_color = gr.Checkbox(label="Solid Background", value=False)
                        background_color = gr.ColorPicker(label="Background Color", value="#FFFFFF")

                with gr.Row():
                    generate_btn = gr.Button(GENERATE_LABEL, variant="primary", size="lg")
                    clear_btn = gr.Button("🗑️ Clear", size="lg")

            with gr.Column(scale=1, elem_classes="result-panel"):
                result_image = gr.Image(label="Result", type="pil", interactive=False)
                prompt_used = gr.Textbox(label="Prompt Used", lines=4, interactive=False)
                info = gr.Markdown("*Ready to generate.*")

                with gr.Row():
                    export_format = gr.Radio(label="Format", choices=EXPORT_FORMATS, value="png")
                    export_btn = gr.Button("💾 Export")
                download_file = gr.File(label="Download", interactive=False)

        # Event handlers
        style.change(
            fn=describe_style,
            inputs=[style],
            outputs=[style_info, source_group],
        )
        app.load(
            fn=describe_style,
            inputs=[style],
            outputs=[style_info, source_group],
        )

        social_platform.change(
            fn=apply_social_preset,
            inputs=[social_platform],
            outputs=[aspect_ratio],
        )

        analyze_btn.click(
            fn=analyze_images,
            inputs=[*source_images, ui_state],
            outputs=[creation_prompt, preservation_prompt, analysis_info, ui_state],
        )
        use_analysis_btn.click(
            fn=lambda creation, preservation: (creation, preservation),
            inputs=[creation_prompt, preservation_prompt],
            outputs=[prompt, fixed_elements],
        )

        # Generate: disable button -> run -> re-enable button
        generate_btn.click(
            fn=lambda: set_processing(True),
            outputs=[generate_btn],
        ).then(
            fn=generate_scene,
            inputs=[
                *source_images,
                reference_image,
                prompt,
                fixed_elements,
                style,
                angle,
                distance,
                lighting,
                pose,
                face_direction,
                resolution,
                aspect_ratio,
                use_background_color,
                background_color,
                ui_state,
            ],
            outputs=[result_image, prompt_used, info, ui_state],
        ).then(
            fn=lambda: set_processing(False),
            outputs=[generate_btn],
        )

        export_btn.click(
            fn=export_result,
            inputs=[export_format, ui_state],
            outputs=[download_file, info],
        )

        clear_btn.click(
            fn=clear_images,
            inputs=[ui_state],
            outputs=[*source_images, reference_image, result_image, prompt_used, ui_state],
        )

    return app, custom_css


def main():
    """Main entry point for the application."""
    logger.info("Starting SnapStudio...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    if not config.has_api_key:
        logger.warning("No API key configured; generation will fail until one is set")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
