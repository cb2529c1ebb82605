"""Contain-fit placement of a photo inside a canvas."""

from __future__ import annotations

import logging

from ..config import Config
from ..exceptions import ValidationError
from ..models import AspectRatio, Rect, Template
from ..validators import validate_margin, validate_source_size

logger = logging.getLogger("photocanvas.layout")


def compute_placement(
    source_size: tuple[float, float],
    canvas_aspect: AspectRatio | tuple[float, float],
    margin: float = Config.DEFAULT_MARGIN,
) -> Rect:
    """Fit a source image entirely inside a canvas, centered, never cropped.

    The canvas spans ``canvas_aspect.width x canvas_aspect.height`` units, so
    passing a pixel size as the aspect yields pixel geometry directly.

    Args:
        source_size: Source image (width, height) in pixels.
        canvas_aspect: Canvas width : height.
        margin: Inset around the fitting box, as a fraction of the shorter
            canvas side.

    Returns:
        Placement rectangle in canvas units.

    Raises:
        InvalidImageDimensionsError: If the source has a zero or negative side.
        ValidationError: If the canvas or margin is invalid.
    """
    src_w, src_h = source_size
    validate_source_size(src_w, src_h)
    validate_margin(margin)

    if isinstance(canvas_aspect, AspectRatio):
        canvas_w, canvas_h = canvas_aspect.width, canvas_aspect.height
    else:
        canvas_w, canvas_h = canvas_aspect
    if not canvas_w > 0 or not canvas_h > 0:
        raise ValidationError(f"Canvas must have positive dimensions, got {canvas_w}x{canvas_h}")

    inset = margin * min(canvas_w, canvas_h)
    box_w = canvas_w - 2 * inset
    box_h = canvas_h - 2 * inset

    image_ratio = src_w / src_h
    box_ratio = box_w / box_h

    if image_ratio >= box_ratio:
        # Wider than the box: full width, letterboxed top and bottom
        width = box_w
        height = box_w / image_ratio
        x = inset
        y = inset + (box_h - height) / 2
    else:
        # Taller than the box: full height, pillarboxed left and right
        height = box_h
        width = box_h * image_ratio
        x = inset + (box_w - width) / 2
        y = inset

    return Rect(x=x, y=y, width=width, height=height)


def canvas_pixel_size(template: Template, scale: float = 1.0) -> tuple[int, int]:
    """Pixel size of a template's canvas at the given export scale."""
    nominal_w, nominal_h = template.nominal_size
    return (int(round(nominal_w * scale)), int(round(nominal_h * scale)))


def place_in_canvas(
    source_size: tuple[float, float],
    template: Template,
    canvas_size: tuple[float, float],
    margin: float = Config.DEFAULT_MARGIN,
) -> Rect:
    """Compute placement on the template's aspect, then scale it into ``canvas_size``."""
    placement = compute_placement(source_size, template.aspect, margin)
    factor = canvas_size[0] / template.aspect.width
    logger.debug(
        "Placed %sx%s source on %s canvas %sx%s (factor %.3f)",
        source_size[0], source_size[1], template.id.value,
        canvas_size[0], canvas_size[1], factor,
    )
    return placement.scale(factor)
