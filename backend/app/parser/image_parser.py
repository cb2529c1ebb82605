"""Photo decoder (PNG, JPG, WEBP, ...) for Photo Canvas."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from ..constants import SUPPORTED_EXTENSIONS
from ..exceptions import ParseError, UnsupportedFormatError
from ..validators import validate_source_size

logger = logging.getLogger("photocanvas.parser.image")


class ImageParser:
    """Decode uploaded photos into upright RGB/RGBA Pillow images.

    Camera photos usually store orientation in EXIF instead of rotating the
    pixels, so the decoded image is transposed before anything measures it.
    """

    def supports(self, file_path: str) -> bool:
        return Path(file_path).suffix.lower() in SUPPORTED_EXTENSIONS

    def parse(self, file_path: str) -> Image.Image:
        """Decode a photo from disk.

        Raises:
            UnsupportedFormatError: If the extension is not supported.
            ParseError: If the file cannot be decoded.
            InvalidImageDimensionsError: If the decoded image is empty.
        """
        if not self.supports(file_path):
            raise UnsupportedFormatError(
                f"No decoder for '{file_path}'. Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )
        try:
            with Image.open(file_path) as img:
                image = self._normalize(img)
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
            raise ParseError(f"Failed to open image '{file_path}': {e}") from e

        logger.info("Parsed image %s: %dx%d", Path(file_path).name, *image.size)
        return image

    def parse_bytes(self, data: bytes) -> Image.Image:
        """Decode a photo from raw bytes (as handed over by a file picker)."""
        if not data:
            raise ParseError("No image data")
        try:
            with Image.open(io.BytesIO(data)) as img:
                image = self._normalize(img)
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
            raise ParseError(f"Failed to decode image bytes: {e}") from e

        logger.info("Decoded %d bytes: %dx%d", len(data), *image.size)
        return image

    @staticmethod
    def _normalize(img: Image.Image) -> Image.Image:
        img.load()
        validate_source_size(*img.size)
        upright = ImageOps.exif_transpose(img)
        has_alpha = upright.mode in ("RGBA", "LA", "PA") or "transparency" in upright.info
        return upright.convert("RGBA" if has_alpha else "RGB")
