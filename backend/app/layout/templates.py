"""Canvas template registry."""

from __future__ import annotations

from ..enums import CanvasTemplate
from ..exceptions import UnknownTemplateError
from ..models import AspectRatio, Template

# Canvas templates, in the order the size picker shows them
TEMPLATES: dict[CanvasTemplate, Template] = {
    CanvasTemplate.INSTAGRAM_POST_SQUARE: Template(
        id=CanvasTemplate.INSTAGRAM_POST_SQUARE,
        label="Post 1:1",
        aspect=AspectRatio(1, 1),
    ),
    CanvasTemplate.INSTAGRAM_POST_PORTRAIT: Template(
        id=CanvasTemplate.INSTAGRAM_POST_PORTRAIT,
        label="Post 4:5",
        aspect=AspectRatio(4, 5),
    ),
    CanvasTemplate.INSTAGRAM_STORY: Template(
        id=CanvasTemplate.INSTAGRAM_STORY,
        label="Story 9:16",
        aspect=AspectRatio(9, 16),
    ),
}


def list_templates() -> list[Template]:
    """Return every template in display order."""
    return list(TEMPLATES.values())


def get_template(template: CanvasTemplate | str) -> Template:
    """Look up a template by enum member or its string value.

    Raises:
        UnknownTemplateError: If the value is not one of the known templates.
    """
    if isinstance(template, str):
        try:
            template = CanvasTemplate(template)
        except ValueError as e:
            raise UnknownTemplateError(f"Unknown template {template!r}") from e

    try:
        return TEMPLATES[template]
    except (KeyError, TypeError) as e:
        raise UnknownTemplateError(f"Unknown template {template!r}") from e


def aspect_ratio(template: CanvasTemplate | str) -> AspectRatio:
    """Return the width : height pair of a template."""
    return get_template(template).aspect


def template_for_label(label: str) -> Template:
    """Resolve a display label (e.g. ``"Story 9:16"``) to its template."""
    for template in TEMPLATES.values():
        if template.label == label:
            return template
    raise UnknownTemplateError(f"No template labelled {label!r}")
