"""Template registry and placement geometry for Photo Canvas."""

from .engine import canvas_pixel_size, compute_placement, place_in_canvas
from .templates import TEMPLATES, aspect_ratio, get_template, list_templates, template_for_label

__all__ = [
    "TEMPLATES",
    "aspect_ratio",
    "canvas_pixel_size",
    "compute_placement",
    "get_template",
    "list_templates",
    "place_in_canvas",
    "template_for_label",
]
