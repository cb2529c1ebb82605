"""Global configuration for Photo Canvas."""

from __future__ import annotations

from PIL import Image


class Config:
    """Global configuration."""

    # Canvas geometry
    BASE_CANVAS_WIDTH = 1080  # Nominal logical width of every template
    DEFAULT_MARGIN = 0.0  # Fraction of the shorter canvas side kept clear around the photo

    # Export limits
    MAX_CANVAS_EDGE = 8192

    # Quality
    RESIZE_FILTER = Image.Resampling.LANCZOS
    GAMMA = 2.2
    JPEG_QUALITY = 95
