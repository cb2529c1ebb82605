"""Photo loading for Photo Canvas."""

from __future__ import annotations

from PIL import Image

from .image_parser import ImageParser

_PARSER = ImageParser()


def load_source_image(source: str | bytes) -> Image.Image:
    """Decode a photo from a file path or raw bytes.

    Raises:
        ParseError: If the photo cannot be decoded.
    """
    if isinstance(source, bytes | bytearray):
        return _PARSER.parse_bytes(bytes(source))
    return _PARSER.parse(source)


__all__ = ["ImageParser", "load_source_image"]
