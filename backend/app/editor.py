"""Editor session: the state behind one editing screen."""

from __future__ import annotations

import logging
import os

from PIL import Image

from .composition import CompositionEngine, draw_scene
from .constants import DEFAULT_BACKGROUND
from .enums import CanvasTemplate, DisplayMode
from .exceptions import NoImageLoadedError
from .layout import get_template
from .models import RasterBuffer, SceneDescription, Template
from .parser import load_source_image
from .validators import validate_color, validate_export_format, validate_file_path

logger = logging.getLogger("photocanvas.editor")


class EditorSession:
    """Holds the user's selections and re-renders from them on demand.

    The engine is stateless; every preview or export call passes the
    current selections through it afresh.
    """

    def __init__(self, engine: CompositionEngine | None = None) -> None:
        self.engine = engine or CompositionEngine()

        self.template: Template = get_template(CanvasTemplate.INSTAGRAM_STORY)
        self.background: tuple[int, int, int] = DEFAULT_BACKGROUND
        self.show_original: bool = False
        self.image: Image.Image | None = None
        self.file_name: str | None = None

    @property
    def display_mode(self) -> DisplayMode:
        if self.show_original:
            return DisplayMode.ORIGINAL_PASSTHROUGH
        return DisplayMode.COMPOSITED

    def load_image(self, file_path: str) -> Image.Image:
        """Load a photo from disk, replacing the current one.

        Raises:
            ValidationError: If the path is missing or has an unsupported extension.
            ParseError: If decoding fails.
        """
        validate_file_path(file_path)
        image = load_source_image(file_path)
        self._set_image(image, os.path.basename(file_path))
        return image

    def load_image_bytes(self, data: bytes, name: str | None = None) -> Image.Image:
        """Load a photo from raw bytes, replacing the current one."""
        image = load_source_image(data)
        self._set_image(image, name)
        return image

    def clear_image(self) -> None:
        """Forget the current photo, as when the picker is cleared."""
        self.image = None
        self.file_name = None
        self.show_original = False

    def _set_image(self, image: Image.Image, name: str | None) -> None:
        self.image = image
        self.file_name = name
        # A new photo always starts on the edited view
        self.show_original = False
        logger.info("Loaded photo %s (%dx%d)", name or "<bytes>", *image.size)

    def select_template(self, template: CanvasTemplate | str) -> Template:
        self.template = get_template(template)
        return self.template

    def set_background(self, color: object) -> tuple[int, int, int]:
        self.background = validate_color(color)
        return self.background

    def toggle_original(self) -> bool:
        if self.image is not None:
            self.show_original = not self.show_original
        return self.show_original

    def preview(self) -> SceneDescription | None:
        """Scene for the current selections, or None when no photo is loaded."""
        if self.image is None:
            return None
        return self.engine.render_preview(
            self.image, self.template, self.background, self.display_mode
        )

    def preview_image(self, viewport: tuple[int, int] | None = None) -> Image.Image | None:
        """Draw the current preview scene, fitted into ``viewport``."""
        scene = self.preview()
        if scene is None:
            return None
        return draw_scene(scene, self.image, viewport)

    def export(self, scale: float = 1.0) -> RasterBuffer:
        """Render the composited canvas; the before/after toggle never affects it.

        Raises:
            NoImageLoadedError: If no photo has been loaded.
        """
        if self.image is None:
            raise NoImageLoadedError("No photo loaded. Call load_image() first.")
        return self.engine.render_export(self.image, self.template, self.background, scale)

    def export_bytes(self, scale: float = 1.0, fmt: str = "PNG") -> bytes:
        """Render and encode the composited canvas."""
        fmt = validate_export_format(fmt)
        return self.export(scale).encode(fmt)
