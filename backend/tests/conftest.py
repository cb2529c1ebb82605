"""Shared pytest fixtures for Photo Canvas tests."""

from __future__ import annotations

import pytest
from PIL import Image

from backend.app.enums import CanvasTemplate
from backend.app.layout import get_template
from backend.app.models import Template


@pytest.fixture
def tall_photo() -> Image.Image:
    """1:2 photo, narrower than every template."""
    return Image.new("RGB", (100, 200), (0, 0, 255))


@pytest.fixture
def square_photo() -> Image.Image:
    return Image.new("RGB", (400, 400), (255, 0, 0))


@pytest.fixture
def wide_photo() -> Image.Image:
    """16:9 photo, wider than every template."""
    return Image.new("RGB", (320, 180), (0, 255, 0))


@pytest.fixture
def transparent_photo() -> Image.Image:
    return Image.new("RGBA", (200, 150), (0, 0, 0, 0))


@pytest.fixture
def grayscale_image() -> Image.Image:
    """Create a grayscale PIL image."""
    return Image.new("L", (100, 100), 128)


@pytest.fixture
def story() -> Template:
    return get_template(CanvasTemplate.INSTAGRAM_STORY)


@pytest.fixture
def portrait() -> Template:
    return get_template(CanvasTemplate.INSTAGRAM_POST_PORTRAIT)


@pytest.fixture
def png_file(tmp_path, wide_photo) -> str:
    """A 320x180 PNG on disk."""
    path = tmp_path / "beach.png"
    wide_photo.save(path, format="PNG")
    return str(path)
