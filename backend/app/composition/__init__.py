"""Composition engine for Photo Canvas."""

from .engine import CompositionEngine, paint_scene
from .surface import draw_scene

__all__ = ["CompositionEngine", "draw_scene", "paint_scene"]
