"""Tests for the template registry and placement geometry."""

import pytest

from backend.app.enums import CanvasTemplate
from backend.app.exceptions import InvalidImageDimensionsError, UnknownTemplateError, ValidationError
from backend.app.layout import (
    aspect_ratio,
    canvas_pixel_size,
    compute_placement,
    get_template,
    list_templates,
    place_in_canvas,
    template_for_label,
)
from backend.app.models import AspectRatio, BoundingBox, Rect


class TestTemplateRegistry:
    def test_display_order(self):
        ids = [t.id for t in list_templates()]
        assert ids == [
            CanvasTemplate.INSTAGRAM_POST_SQUARE,
            CanvasTemplate.INSTAGRAM_POST_PORTRAIT,
            CanvasTemplate.INSTAGRAM_STORY,
        ]

    def test_covers_whole_enumeration(self):
        assert {t.id for t in list_templates()} == set(CanvasTemplate)

    def test_same_result_every_call(self):
        first = list_templates()
        first.clear()
        assert list_templates() == list_templates()
        assert len(list_templates()) == 3

    def test_labels(self):
        assert [t.label for t in list_templates()] == ["Post 1:1", "Post 4:5", "Story 9:16"]

    @pytest.mark.parametrize(
        "template,expected",
        [
            (CanvasTemplate.INSTAGRAM_POST_SQUARE, 1.0),
            (CanvasTemplate.INSTAGRAM_POST_PORTRAIT, 0.8),
            (CanvasTemplate.INSTAGRAM_STORY, 0.5625),
        ],
    )
    def test_aspect_ratio_matches_nominal(self, template, expected):
        ar = aspect_ratio(template)
        assert ar.width / ar.height == pytest.approx(expected)

    def test_lookup_by_string_value(self):
        assert get_template("instagram_story").id is CanvasTemplate.INSTAGRAM_STORY
        assert aspect_ratio("instagram_post_portrait") == AspectRatio(4, 5)

    def test_unknown_string_raises(self):
        with pytest.raises(UnknownTemplateError):
            aspect_ratio("tiktok_video")

    def test_unknown_value_raises(self):
        with pytest.raises(UnknownTemplateError):
            get_template(42)

    def test_unhashable_value_raises(self):
        with pytest.raises(UnknownTemplateError):
            get_template(["instagram_story"])

    def test_template_for_label(self):
        assert template_for_label("Post 4:5").id is CanvasTemplate.INSTAGRAM_POST_PORTRAIT

    def test_template_for_unknown_label(self):
        with pytest.raises(UnknownTemplateError):
            template_for_label("Reel 9:16")

    def test_nominal_sizes(self):
        sizes = [t.nominal_size for t in list_templates()]
        assert sizes == [(1080, 1080), (1080, 1350), (1080, 1920)]


class TestComputePlacement:
    def test_tall_photo_in_story_is_height_constrained(self):
        rect = compute_placement((1000, 2000), (900, 1600))
        assert rect == Rect(x=50, y=0, width=800, height=1600)

    def test_square_photo_in_portrait_is_width_constrained(self):
        rect = compute_placement((4000, 4000), (800, 1000))
        assert rect == Rect(x=0, y=100, width=800, height=800)

    def test_aspect_units(self):
        rect = compute_placement((1000, 2000), AspectRatio(9, 16))
        assert rect == Rect(x=0.5, y=0, width=8, height=16)
        assert rect.scale(100) == Rect(x=50, y=0, width=800, height=1600)

    def test_equal_ratio_fills_canvas(self):
        rect = compute_placement((1080, 1350), AspectRatio(4, 5))
        assert rect == Rect(0, 0, 4, 5)

    @pytest.mark.parametrize("template", list(CanvasTemplate))
    @pytest.mark.parametrize(
        "source_size",
        [(1, 1), (1, 5000), (5000, 1), (3024, 4032), (4032, 3024), (1080, 1920), (333, 777)],
    )
    def test_contained_and_undistorted(self, template, source_size):
        ar = aspect_ratio(template)
        rect = compute_placement(source_size, ar)

        assert rect.contains((ar.width, ar.height))
        assert rect.width / rect.height == pytest.approx(source_size[0] / source_size[1])
        # One axis always spans the whole canvas
        assert rect.width == pytest.approx(ar.width) or rect.height == pytest.approx(ar.height)

    def test_idempotent(self):
        first = compute_placement((3024, 4032), AspectRatio(9, 16))
        second = compute_placement((3024, 4032), AspectRatio(9, 16))
        assert first == second

    def test_zero_width_rejected(self):
        with pytest.raises(InvalidImageDimensionsError):
            compute_placement((0, 100), AspectRatio(1, 1))

    def test_negative_height_rejected(self):
        with pytest.raises(InvalidImageDimensionsError):
            compute_placement((100, -1), AspectRatio(1, 1))

    def test_empty_canvas_rejected(self):
        with pytest.raises(ValidationError, match="Canvas"):
            compute_placement((100, 100), (0, 100))

    def test_margin_insets_box(self):
        rect = compute_placement((100, 100), (1000, 1000), margin=0.1)
        assert rect == Rect(x=100, y=100, width=800, height=800)

    def test_margin_uses_shorter_side(self):
        rect = compute_placement((100, 100), (900, 1600), margin=0.1)
        # inset 90 on every side, box 720x1420
        assert rect.x == pytest.approx(90)
        assert rect.width == pytest.approx(720)
        assert rect.y == pytest.approx(90 + (1420 - 720) / 2)

    def test_margin_out_of_range(self):
        with pytest.raises(ValidationError, match="Margin"):
            compute_placement((100, 100), (100, 100), margin=0.5)


class TestCanvasGeometry:
    def test_canvas_pixel_size_scales_linearly(self, story):
        assert canvas_pixel_size(story) == (1080, 1920)
        assert canvas_pixel_size(story, 2) == (2160, 3840)
        assert canvas_pixel_size(story, 0.5) == (540, 960)

    def test_place_in_canvas(self, story):
        rect = place_in_canvas((1000, 2000), story, (1080, 1920))
        assert rect == Rect(x=60, y=0, width=960, height=1920)


class TestRect:
    def test_normalized(self):
        rect = Rect(60, 0, 960, 1920).normalized((1080, 1920))
        assert rect.x == pytest.approx(60 / 1080)
        assert rect.height == pytest.approx(1.0)

    def test_contains_rejects_overflow(self):
        assert not Rect(10, 0, 100, 10).contains((100, 10))

    def test_snap_to_pixels(self):
        box = Rect(49.6, 0, 800.4, 1600).to_bounding_box((900, 1600))
        assert box == BoundingBox(50, 0, 800, 1600)

    def test_snap_keeps_one_pixel(self):
        box = Rect(0, 4.9, 10, 0.2).to_bounding_box((10, 10))
        assert box.height == 1
        assert box.y2 <= 10
