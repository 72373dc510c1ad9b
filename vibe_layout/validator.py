"""Candidate validation (overlap, bounds) and layout request parsing."""

import json
import numbers
from typing import Any, Dict, Optional, Sequence, Tuple

from .color import is_valid_color
from .schema import (
    ColorPalette,
    ContentType,
    Dimensions,
    LayoutContent,
    LayoutElement,
    LayoutGeneratorConfig,
)

PALETTE_KEYS: Tuple[str, ...] = ("primary", "secondary", "accent", "background", "text")
CONTENT_KEYS: Tuple[str, ...] = ("heading", "subheading", "body")


class ConfigValidationError(Exception):
    """Raised when a layout request fails validation."""
    pass


# ---------------------------------------------------------------------------
# Geometry predicates
# ---------------------------------------------------------------------------

def has_overlap(a: LayoutElement, b: LayoutElement) -> bool:
    """Axis-aligned box intersection. Touching edges do not count as overlap."""
    return not (
        a.right <= b.position.x
        or a.position.x >= b.right
        or a.bottom <= b.position.y
        or a.position.y >= b.bottom
    )


def is_within_bounds(element: LayoutElement, canvas_size: Dimensions) -> bool:
    """Check if the element's box lies within [0, width] x [0, height]."""
    return (
        element.position.x >= 0
        and element.position.y >= 0
        and element.right <= canvas_size.width
        and element.bottom <= canvas_size.height
    )


def elements_overlap(elements: Sequence[LayoutElement]) -> bool:
    """Check if any pair of elements overlaps."""
    for i in range(len(elements)):
        for j in range(i + 1, len(elements)):
            if has_overlap(elements[i], elements[j]):
                return True
    return False


def all_within_bounds(elements: Sequence[LayoutElement], canvas_size: Dimensions) -> bool:
    return all(is_within_bounds(el, canvas_size) for el in elements)


def validate_candidate(elements: Sequence[LayoutElement], canvas_size: Dimensions) -> Tuple[bool, str]:
    """
    Validate a generated candidate.

    Returns:
        (is_valid, error_message)
    """
    if elements_overlap(elements):
        return False, "Elements overlap"
    for el in elements:
        if not is_within_bounds(el, canvas_size):
            return False, f"Element '{el.id}' is out of bounds"
    return True, ""


# ---------------------------------------------------------------------------
# Request validation
# ---------------------------------------------------------------------------

def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_colors(colors: Any) -> Tuple[bool, str]:
    """Validate the five-color palette."""
    if not isinstance(colors, dict):
        return False, "'colors' must be a mapping"

    for key in PALETTE_KEYS:
        if key not in colors:
            return False, f"colors: missing required field '{key}'"
        if not is_valid_color(colors[key]):
            return False, f"colors: invalid color '{colors[key]}' for '{key}'"

    return True, ""


def validate_content(content: Any) -> Tuple[bool, str]:
    """Validate the optional text payload."""
    if not isinstance(content, dict):
        return False, "'content' must be a mapping"

    for key in CONTENT_KEYS:
        if key in content and content[key] is not None and not isinstance(content[key], str):
            return False, f"content: '{key}' must be a string"

    contact_info = content.get("contactInfo", [])
    if contact_info is not None:
        if not isinstance(contact_info, list):
            return False, "content: 'contactInfo' must be a list of strings"
        for i, line in enumerate(contact_info):
            if not isinstance(line, str):
                return False, f"content: contactInfo[{i}] must be a string"

    return True, ""


def validate_canvas_size(canvas: Any) -> Tuple[bool, str]:
    """Validate that the canvas has positive width and height."""
    if not isinstance(canvas, dict):
        return False, "'canvasSize' must be a mapping"

    for key in ("width", "height"):
        if key not in canvas:
            return False, f"canvasSize: missing required field '{key}'"
        if not _is_number(canvas[key]):
            return False, f"canvasSize: '{key}' must be a number"
        if canvas[key] <= 0:
            return False, f"canvasSize: '{key}' must be positive, got {canvas[key]}"

    return True, ""


def validate_config_dict(data: dict) -> Tuple[bool, str]:
    """
    Validate a complete layout request dictionary (camelCase keys).

    Returns:
        (is_valid, error_message)
    """
    if not isinstance(data, dict):
        return False, "Request must be a mapping"

    for field in ("contentType", "vibeId", "colors", "canvasSize"):
        if field not in data:
            return False, f"Missing required field '{field}'"

    valid_types = [t.value for t in ContentType]
    if data["contentType"] not in valid_types:
        return False, f"Invalid contentType '{data['contentType']}'. Must be one of {valid_types}"

    if not isinstance(data["vibeId"], str):
        return False, "'vibeId' must be a string"

    is_valid, error = validate_colors(data["colors"])
    if not is_valid:
        return False, error

    is_valid, error = validate_content(data.get("content") or {})
    if not is_valid:
        return False, error

    is_valid, error = validate_canvas_size(data["canvasSize"])
    if not is_valid:
        return False, error

    seed = data.get("seed")
    if seed is not None and not _is_number(seed):
        return False, "'seed' must be a number"

    return True, ""


def parse_config(data: dict) -> LayoutGeneratorConfig:
    """
    Parse and validate a layout request.

    Args:
        data: Request dictionary using the external camelCase field names

    Returns:
        Validated LayoutGeneratorConfig

    Raises:
        ConfigValidationError: If validation fails
    """
    is_valid, error = validate_config_dict(data)
    if not is_valid:
        raise ConfigValidationError(error)

    colors = data["colors"]
    content = data.get("content") or {}
    canvas = data["canvasSize"]
    seed: Optional[float] = data.get("seed")

    return LayoutGeneratorConfig(
        content_type=ContentType(data["contentType"]),
        vibe_id=data["vibeId"],
        colors=ColorPalette(**{key: colors[key] for key in PALETTE_KEYS}),
        content=LayoutContent(
            heading=content.get("heading"),
            subheading=content.get("subheading"),
            body=content.get("body"),
            contact_info=tuple(content.get("contactInfo") or ()),
        ),
        canvas_size=Dimensions(float(canvas["width"]), float(canvas["height"])),
        seed=float(seed) if seed is not None else None,
    )


def parse_config_json(json_str: str) -> LayoutGeneratorConfig:
    """Parse a JSON-encoded layout request."""
    try:
        data: Dict[str, Any] = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"Invalid JSON: {str(e)}")
    return parse_config(data)
