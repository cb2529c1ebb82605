"""Raster display surface for preview scenes."""

from __future__ import annotations

import logging

from PIL import Image

from ..models import SceneDescription
from .engine import paint_scene

logger = logging.getLogger("photocanvas.composition.surface")


def fit_scale(canvas_size: tuple[int, int], viewport: tuple[int, int]) -> float:
    """Largest scale at which the canvas fits inside ``viewport``."""
    return min(viewport[0] / canvas_size[0], viewport[1] / canvas_size[1])


def draw_scene(
    scene: SceneDescription,
    source_image: Image.Image,
    viewport: tuple[int, int] | None = None,
) -> Image.Image:
    """Draw a scene description for on-screen display.

    Args:
        scene: Output of ``CompositionEngine.render_preview``.
        source_image: The photo the scene was described for.
        viewport: Optional (width, height) the canvas must fit into; the
            nominal canvas size is used when omitted.

    Returns:
        RGB image of the scene.
    """
    scale = 1.0 if viewport is None else fit_scale(scene.canvas_size, viewport)
    canvas_size = (
        max(1, int(round(scene.canvas_size[0] * scale))),
        max(1, int(round(scene.canvas_size[1] * scale))),
    )
    placement = scene.placement.scale(canvas_size[0] / scene.canvas_size[0])
    image, box = paint_scene(source_image, canvas_size, scene.fill, placement)
    logger.debug(
        "Drew %s preview at %dx%d, photo at %s",
        scene.display_mode.value, canvas_size[0], canvas_size[1], box.to_tuple(),
    )
    return image.convert("RGB")
