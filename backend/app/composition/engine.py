"""Composition engine: preview scenes and export rasters."""

from __future__ import annotations

import logging

from PIL import Image

from ..config import Config
from ..constants import SCRIM_COLOR
from ..enums import CanvasTemplate, DisplayMode
from ..exceptions import RenderSurfaceUnavailableError, ValidationError
from ..layout import canvas_pixel_size, get_template, place_in_canvas
from ..models import BoundingBox, RasterBuffer, Rect, SceneDescription, Template
from ..validators import validate_color, validate_export_scale, validate_margin, validate_source_size
from .resize import high_quality_resize

logger = logging.getLogger("photocanvas.composition")


def _resolve_template(template: Template | CanvasTemplate | str) -> Template:
    if isinstance(template, Template):
        return template
    return get_template(template)


def allocate_canvas(
    canvas_size: tuple[int, int], fill: tuple[int, int, int]
) -> Image.Image:
    """Create an opaque RGBA canvas filled with ``fill``.

    Raises:
        RenderSurfaceUnavailableError: If the canvas is too large or cannot be allocated.
    """
    width, height = canvas_size
    if width <= 0 or height <= 0:
        raise RenderSurfaceUnavailableError(f"Cannot allocate empty canvas {width}x{height}")
    if width > Config.MAX_CANVAS_EDGE or height > Config.MAX_CANVAS_EDGE:
        raise RenderSurfaceUnavailableError(
            f"Canvas {width}x{height} exceeds maximum edge {Config.MAX_CANVAS_EDGE}"
        )
    try:
        return Image.new("RGBA", (width, height), (*fill, 255))
    except (MemoryError, ValueError) as e:
        raise RenderSurfaceUnavailableError(
            f"Could not allocate {width}x{height} canvas: {e}"
        ) from e


def paint_scene(
    source_image: Image.Image,
    canvas_size: tuple[int, int],
    fill: tuple[int, int, int],
    placement: Rect,
) -> tuple[Image.Image, BoundingBox]:
    """Fill a canvas and draw the photo into its placement rectangle.

    Shared by export and the preview display surface, so both snap the
    placement to pixels and resample the same way.

    Returns:
        The painted RGBA canvas and the pixel box the photo occupies.
    """
    canvas = allocate_canvas(canvas_size, fill)
    box = placement.to_bounding_box(canvas_size)

    try:
        photo = high_quality_resize(source_image.convert("RGBA"), box.size)
        canvas.alpha_composite(photo, dest=(box.x, box.y))
    except MemoryError as e:
        raise RenderSurfaceUnavailableError(
            f"Ran out of memory drawing {box.width}x{box.height} photo: {e}"
        ) from e

    return canvas, box


class CompositionEngine:
    """Place a photo on a template canvas and render it.

    Both render paths take their geometry from ``place_in_canvas``; export
    only adds pixel snapping and resampling on top.
    """

    def __init__(self, margin: float = Config.DEFAULT_MARGIN) -> None:
        validate_margin(margin)
        self.margin = margin

    def render_preview(
        self,
        source_image: Image.Image,
        template: Template | CanvasTemplate | str,
        background: object,
        display_mode: DisplayMode | str = DisplayMode.COMPOSITED,
    ) -> SceneDescription:
        """Describe the preview for a display surface, without touching pixels.

        Args:
            source_image: Decoded photo.
            template: Canvas template.
            background: Background color (tuple or color string).
            display_mode: ``COMPOSITED`` or ``ORIGINAL_PASSTHROUGH``.

        Returns:
            SceneDescription in the template's nominal canvas units.
        """
        template = _resolve_template(template)
        try:
            display_mode = DisplayMode(display_mode)
        except ValueError as e:
            raise ValidationError(f"Unknown display mode {display_mode!r}") from e
        color = validate_color(background)
        validate_source_size(*source_image.size)

        fill = SCRIM_COLOR if display_mode is DisplayMode.ORIGINAL_PASSTHROUGH else color
        canvas_size = template.nominal_size
        placement = place_in_canvas(source_image.size, template, canvas_size, self.margin)

        return SceneDescription(
            template=template,
            canvas_size=canvas_size,
            fill=fill,
            placement=placement,
            display_mode=display_mode,
        )

    def render_export(
        self,
        source_image: Image.Image,
        template: Template | CanvasTemplate | str,
        background: object,
        export_scale: float = 1.0,
    ) -> RasterBuffer:
        """Rasterize the composited canvas at ``export_scale`` times its nominal size.

        Raises:
            InvalidImageDimensionsError: If the photo has a zero side.
            RenderSurfaceUnavailableError: If the canvas cannot be allocated.
            ValidationError: If the scale or color is invalid.
        """
        template = _resolve_template(template)
        scale = validate_export_scale(export_scale)
        fill = validate_color(background)
        validate_source_size(*source_image.size)

        canvas_size = canvas_pixel_size(template, scale)
        placement = place_in_canvas(source_image.size, template, canvas_size, self.margin)
        image, box = paint_scene(source_image, canvas_size, fill, placement)

        logger.info(
            "Exported %s at %.2fx: %dx%d canvas, photo at %s",
            template.id.value, scale, canvas_size[0], canvas_size[1], box.to_tuple(),
        )
        return RasterBuffer(image=image, template=template, export_scale=scale, placement=box)
