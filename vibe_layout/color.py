"""CSS color parsing and WCAG contrast computation."""

import re
from typing import Tuple

import numpy as np

RGB = Tuple[int, int, int]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_PATTERN = re.compile(
    r"^rgba?\(\s*(\d{1,3}(?:\.\d+)?)\s*[,\s]\s*(\d{1,3}(?:\.\d+)?)\s*[,\s]\s*(\d{1,3}(?:\.\d+)?)"
    r"\s*(?:[,/]\s*[\d.]+%?\s*)?\)$",
    re.IGNORECASE,
)


class ColorParseError(ValueError):
    """Raised when a color string is neither hex nor rgb()/rgba()."""
    pass


def parse_color(value: str) -> RGB:
    """
    Parse a CSS hex (#rgb, #rgba, #rrggbb, #rrggbbaa) or rgb()/rgba() string.

    Alpha is ignored.

    Raises:
        ColorParseError: If the string is not a supported color
    """
    if not isinstance(value, str):
        raise ColorParseError(f"Color must be a string, got {type(value).__name__}")

    text = value.strip()
    match = _HEX_PATTERN.match(text)
    if match:
        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits[:3])
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)

    match = _RGB_PATTERN.match(text)
    if match:
        channels = [min(255, round(float(c))) for c in match.groups()]
        return channels[0], channels[1], channels[2]

    raise ColorParseError(f"Unsupported color '{value}'")


def relative_luminance(color: str) -> float:
    """WCAG 2.x relative luminance in [0, 1]."""
    srgb = np.array(parse_color(color), dtype=float) / 255.0
    linear = np.where(srgb <= 0.03928, srgb / 12.92, ((srgb + 0.055) / 1.055) ** 2.4)
    return float(np.dot(linear, [0.2126, 0.7152, 0.0722]))


def contrast_ratio(foreground: str, background: str) -> float:
    """WCAG contrast ratio between two colors, in [1, 21]."""
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def is_valid_color(value: str) -> bool:
    try:
        parse_color(value)
    except ColorParseError:
        return False
    return True
