"""Shared constants for Photo Canvas."""

from __future__ import annotations

# Passthrough ("before") mode fill: black at 85% opacity over white
SCRIM_COLOR = (38, 38, 38)

# Light pink, the background a fresh session starts with
DEFAULT_BACKGROUND = (255, 217, 237)

# Supported file extensions for photo upload
SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".bmp", ".tif", ".tiff")

# Export encodings (format name -> file suffix)
EXPORT_FORMATS = {
    "PNG": ".png",
    "JPEG": ".jpg",
}
