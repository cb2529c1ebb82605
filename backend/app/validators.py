"""Input validation for Photo Canvas."""

from __future__ import annotations

import math
from pathlib import Path

from PIL import ImageColor

from .constants import EXPORT_FORMATS, SUPPORTED_EXTENSIONS
from .exceptions import InvalidImageDimensionsError, ValidationError


def validate_source_size(width: float, height: float) -> None:
    """Validate the pixel size of a source image.

    Raises:
        InvalidImageDimensionsError: If either side is zero or negative.
    """
    if not width > 0 or not height > 0:
        raise InvalidImageDimensionsError(
            f"Source image must have positive dimensions, got {width}x{height}"
        )


def validate_export_scale(scale: float) -> float:
    """Validate an export scale factor.

    Args:
        scale: Multiplier on the template's nominal canvas size.

    Returns:
        The scale as a float.

    Raises:
        ValidationError: If the scale is not a positive finite number.
    """
    if isinstance(scale, bool) or not isinstance(scale, int | float):
        raise ValidationError(f"Export scale must be a number, got {type(scale).__name__}")

    scale = float(scale)
    if not math.isfinite(scale) or scale <= 0:
        raise ValidationError(f"Export scale must be positive, got {scale}")
    return scale


def validate_margin(margin: float) -> None:
    """Validate a placement margin (fraction of the shorter canvas side)."""
    if not 0.0 <= margin < 0.5:
        raise ValidationError(f"Margin must be in [0, 0.5), got {margin}")


def validate_color(value: object) -> tuple[int, int, int]:
    """Normalize a background color to an opaque RGB tuple.

    Accepts ``(r, g, b)``, ``(r, g, b, a)`` (alpha is dropped) or any color
    string understood by :mod:`PIL.ImageColor`.

    Raises:
        ValidationError: If the value is not a recognizable color.
    """
    if isinstance(value, str):
        try:
            rgb = ImageColor.getrgb(value.strip())
        except ValueError as e:
            raise ValidationError(f"Unrecognized color {value!r}") from e
        return (rgb[0], rgb[1], rgb[2])

    if isinstance(value, tuple | list) and len(value) in (3, 4):
        channels = value[:3]
        if all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
            for c in channels
        ):
            return (channels[0], channels[1], channels[2])

    raise ValidationError(f"Color must be an RGB tuple or color string, got {value!r}")


def validate_export_format(fmt: str) -> str:
    """Validate an export encoding name, returning it upper-cased."""
    normalized = fmt.upper()
    if normalized == "JPG":
        normalized = "JPEG"
    if normalized not in EXPORT_FORMATS:
        raise ValidationError(
            f"Unsupported export format '{fmt}'. Allowed: {', '.join(EXPORT_FORMATS)}"
        )
    return normalized


def validate_file_path(path: str) -> None:
    """Validate input file exists and has supported extension.

    Args:
        path: Path to the input file.

    Raises:
        ValidationError: If file doesn't exist or format is unsupported.
    """
    p = Path(path)
    if not p.exists():
        raise ValidationError(f"File not found: {path}")
    if p.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise ValidationError(
            f"Unsupported format '{p.suffix}'. Allowed: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
