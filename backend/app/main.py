"""Gradio web interface for Photo Canvas."""

from __future__ import annotations

import atexit
import contextlib
import logging
import os
import sys
import tempfile
import traceback

from .constants import DEFAULT_BACKGROUND, EXPORT_FORMATS
from .editor import EditorSession
from .exceptions import PhotoCanvasError
from .layout import list_templates, template_for_label
from .logging_config import setup_logging
from .validators import validate_export_format

logger = logging.getLogger("photocanvas.main")

# Optional Gradio import
try:
    import gradio as gr

    HAS_GRADIO = True
except ImportError:
    HAS_GRADIO = False
    logger.error("Gradio not installed. Run: pip install gradio")

PREVIEW_VIEWPORT = (540, 720)
EXPORT_SCALES = [1.0, 1.5, 2.0, 3.0]

# Temp file management
_temp_files: list[str] = []


def _cleanup_temp_files() -> None:
    """Clean up temporary files."""
    for f in _temp_files:
        with contextlib.suppress(OSError):
            os.unlink(f)
    _temp_files.clear()


atexit.register(_cleanup_temp_files)


def _hex(color: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


def describe_view(session: EditorSession) -> str:
    """Status line for the current selections."""
    if session.image is None:
        return "Choose a photo to see the preview."
    if session.show_original:
        return f"Showing original photo on {session.template.label}"
    return f"Showing {session.template.label} on {_hex(session.background)}"


def save_export(session: EditorSession, scale: float, fmt: str = "PNG") -> str:
    """Encode the session's export and write it to a temp file for download."""
    fmt = validate_export_format(fmt)
    data = session.export_bytes(scale, fmt)
    stem = os.path.splitext(session.file_name or "photo")[0]
    with tempfile.NamedTemporaryFile(
        delete=False,
        prefix=f"{stem}_{session.template.id.value}_",
        suffix=EXPORT_FORMATS[fmt],
    ) as tmp:
        tmp.write(data)
        _temp_files.append(tmp.name)
        return tmp.name


def create_interface() -> object:
    """Create Gradio interface for Photo Canvas."""
    labels = [t.label for t in list_templates()]
    default_session = EditorSession()

    with gr.Blocks(title="Photo Canvas", theme=gr.themes.Soft()) as interface:
        gr.Markdown(
            """
        # Photo Canvas

        Place a photo on an Instagram post or story canvas over a background color.
        """
        )

        session = gr.State(EditorSession)

        with gr.Row():
            with gr.Column(scale=1):
                preview_image = gr.Image(
                    label="Preview",
                    type="pil",
                    height=PREVIEW_VIEWPORT[1],
                    interactive=False,
                )
                file_input = gr.File(
                    label="Select Photo",
                    file_types=["image"],
                    type="filepath",
                )

            with gr.Column(scale=1):
                template_input = gr.Radio(
                    choices=labels,
                    value=default_session.template.label,
                    label="Size",
                )
                color_input = gr.ColorPicker(
                    value=_hex(DEFAULT_BACKGROUND),
                    label="Background",
                )
                original_input = gr.Checkbox(value=False, label="Show original")
                scale_input = gr.Dropdown(
                    choices=EXPORT_SCALES,
                    value=EXPORT_SCALES[0],
                    label="Export scale",
                )
                save_btn = gr.Button("Save", variant="primary")
                download = gr.File(label="Download")
                status = gr.Markdown("**Status:** Choose a photo to see the preview.")

        def _render(state: EditorSession) -> object:
            return state.preview_image(PREVIEW_VIEWPORT)

        def load_photo(state: EditorSession, path: str) -> tuple:
            if path is None:
                state.clear_image()
                return state, _render(state), False, describe_view(state)
            try:
                image = state.load_image(path)
                return (
                    state,
                    _render(state),
                    False,
                    f"Loaded {state.file_name} ({image.width}x{image.height})",
                )
            except PhotoCanvasError as e:
                return state, _render(state), state.show_original, f"Error: {e}"

        file_input.change(
            load_photo,
            inputs=[session, file_input],
            outputs=[session, preview_image, original_input, status],
        )

        def update_view(
            state: EditorSession, label: str, color: str, show_original: bool
        ) -> tuple:
            try:
                state.select_template(template_for_label(label).id)
                state.set_background(color)
                state.show_original = bool(show_original) and state.image is not None
                return state, _render(state), describe_view(state)
            except PhotoCanvasError as e:
                return state, _render(state), f"Error: {e}"

        for control in (template_input, color_input, original_input):
            control.change(
                update_view,
                inputs=[session, template_input, color_input, original_input],
                outputs=[session, preview_image, status],
            )

        def save(state: EditorSession, scale: float) -> tuple:
            if state.image is None:
                return None, "Please choose a photo first"
            try:
                path = save_export(state, float(scale))
                return path, "Your edited photo has been saved."
            except PhotoCanvasError as e:
                return None, f"Could not render final image: {e}"
            except Exception as e:
                traceback.print_exc()
                return None, f"Unexpected error: {e}"

        save_btn.click(
            save,
            inputs=[session, scale_input],
            outputs=[download, status],
        )

    return interface


def main() -> None:
    """Main entry point."""
    setup_logging(os.environ.get("PHOTOCANVAS_LOG_LEVEL", "INFO"))

    if not HAS_GRADIO:
        logger.error("Gradio is required. Run: pip install gradio")
        sys.exit(1)

    logger.info("Starting web interface...")

    try:
        interface = create_interface()
        interface.launch(
            server_name="0.0.0.0",
            server_port=7860,
            share=False,
            show_error=True,
        )
    except Exception as e:
        logger.error("Failed to start: %s", e)
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
