"""Closed enumerations for canvas templates and display modes."""

from __future__ import annotations

from enum import Enum


class CanvasTemplate(Enum):
    """Selectable canvas shapes, in display order."""
    INSTAGRAM_POST_SQUARE = "instagram_post_square"
    INSTAGRAM_POST_PORTRAIT = "instagram_post_portrait"
    INSTAGRAM_STORY = "instagram_story"


class DisplayMode(Enum):
    """How the preview shows the photo."""
    COMPOSITED = "composited"
    ORIGINAL_PASSTHROUGH = "original_passthrough"
