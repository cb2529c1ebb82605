"""Data structures for Photo Canvas."""

from __future__ import annotations

import io
import math
from dataclasses import dataclass

from PIL import Image as PILImage

from .config import Config
from .enums import CanvasTemplate, DisplayMode


def _snap(value: float) -> int:
    """Round half up, so left and right edges snap the same way."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class AspectRatio:
    """Canvas aspect ratio as width : height."""
    width: float
    height: float

    @property
    def ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class BoundingBox:
    """Integer pixel box."""
    x: int
    y: int
    width: int
    height: int

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def y2(self) -> int:
        return self.y + self.height

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.x2, self.y2)


@dataclass(frozen=True)
class Rect:
    """Placement rectangle in canvas units (floats, not yet snapped to pixels)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    def scale(self, factor: float) -> Rect:
        return Rect(
            x=self.x * factor,
            y=self.y * factor,
            width=self.width * factor,
            height=self.height * factor,
        )

    def normalized(self, canvas_size: tuple[float, float]) -> Rect:
        """Express the rectangle as fractions of the canvas."""
        cw, ch = canvas_size
        return Rect(self.x / cw, self.y / ch, self.width / cw, self.height / ch)

    def contains(self, canvas_size: tuple[float, float], tolerance: float = 1e-9) -> bool:
        cw, ch = canvas_size
        return (
            self.x >= -tolerance
            and self.y >= -tolerance
            and self.x2 <= cw + tolerance
            and self.y2 <= ch + tolerance
        )

    def to_bounding_box(self, canvas_size: tuple[int, int]) -> BoundingBox:
        """Snap to whole pixels, keeping at least one pixel and staying on the canvas."""
        cw, ch = canvas_size
        left = min(max(_snap(self.x), 0), cw - 1)
        top = min(max(_snap(self.y), 0), ch - 1)
        right = min(max(_snap(self.x2), left + 1), cw)
        bottom = min(max(_snap(self.y2), top + 1), ch)
        return BoundingBox(left, top, right - left, bottom - top)


@dataclass(frozen=True)
class Template:
    """A named canvas shape."""
    id: CanvasTemplate
    label: str
    aspect: AspectRatio

    @property
    def nominal_size(self) -> tuple[int, int]:
        """Logical canvas size at export scale 1."""
        width = Config.BASE_CANVAS_WIDTH
        return (width, _snap(width * self.aspect.height / self.aspect.width))


@dataclass(frozen=True)
class SceneDescription:
    """Resolution-independent description of what the preview shows."""
    template: Template
    canvas_size: tuple[int, int]
    fill: tuple[int, int, int]
    placement: Rect
    display_mode: DisplayMode = DisplayMode.COMPOSITED

    @property
    def placement_fractions(self) -> Rect:
        return self.placement.normalized(self.canvas_size)


@dataclass
class RasterBuffer:
    """Final export: an owned RGBA image plus the geometry it was drawn with."""
    image: PILImage.Image
    template: Template
    export_scale: float
    placement: BoundingBox

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def to_bytes(self) -> bytes:
        """Interleaved RGBA8 pixel data, row-major."""
        return self.image.tobytes()

    def encode(self, fmt: str = "PNG") -> bytes:
        """Encode to an image file format (PNG or JPEG)."""
        fmt = fmt.upper()
        buffer = io.BytesIO()
        if fmt == "JPEG":
            self.image.convert("RGB").save(buffer, format="JPEG", quality=Config.JPEG_QUALITY)
        else:
            self.image.save(buffer, format=fmt, optimize=True)
        return buffer.getvalue()
