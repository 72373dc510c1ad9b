"""
Design principle evaluators.

Each evaluator maps a candidate's elements (plus grid/canvas/background where
needed) to a 0-100 score and is independent of the others:

    hierarchy, whitespace, alignment, balance, proximity, contrast, rule of thirds
"""

import logging
import math
from collections import OrderedDict
from typing import Dict, List, Sequence

import numpy as np

from .color import ColorParseError, contrast_ratio
from .constants import (
    BALANCE_THRESHOLD,
    CONTRAST_AA,
    CONTRAST_AA_LARGE,
    CONTRAST_AAA,
    DEFAULT_FONT_SIZE,
    DEFAULT_MIN_WHITESPACE,
    HIERARCHY_AREA_TOLERANCE,
    HIERARCHY_RATIO_TOLERANCE,
    IDEAL_SCALE_RATIOS,
    LARGE_TEXT_PX,
    MAX_WHITESPACE,
    MIN_ELEMENT_MARGIN,
    NEUTRAL_THIRDS_SCORE,
    PROXIMITY_MAX_SAME_TYPE,
    PROXIMITY_MIN_CROSS_TYPE,
    THIRDS_MIN_IMPORTANCE,
    THIRDS_TOLERANCE,
)
from .schema import Dimensions, ElementType, GridSystem, LayoutElement

logger = logging.getLogger(__name__)


def _clamp(score: float, low: float = 0, high: float = 100) -> float:
    return min(high, max(low, score))


def element_distance(a: LayoutElement, b: LayoutElement) -> float:
    """Distance between top-left corners."""
    return math.hypot(a.position.x - b.position.x, a.position.y - b.position.y)


def evaluate_hierarchy(elements: Sequence[LayoutElement]) -> float:
    """
    Visual hierarchy: more important elements should be larger, separated by
    clean scale steps, and text should shrink as importance drops.
    """
    if not elements:
        return 0

    score = 100.0
    ranked = sorted(elements, key=lambda el: el.importance, reverse=True)

    for current, following in zip(ranked, ranked[1:]):
        current_area = current.area
        following_area = following.area

        if current_area < following_area * HIERARCHY_AREA_TOLERANCE:
            score -= 10
            logger.debug(f"Hierarchy: '{current.id}' is more important but smaller than '{following.id}'")

        if following_area > 0:
            ratio = current_area / following_area
            closest = min(IDEAL_SCALE_RATIOS, key=lambda r: abs(r - ratio))
            if abs(ratio - closest) > HIERARCHY_RATIO_TOLERANCE:
                score -= 5

    text = [el for el in elements if el.is_text]
    for current, following in zip(text, text[1:]):
        if current.font_size and following.font_size and current.importance > following.importance:
            if current.font_size <= following.font_size:
                score -= 8

    return max(0, score)


def evaluate_whitespace(
    elements: Sequence[LayoutElement],
    canvas_size: Dimensions,
    min_whitespace: float = DEFAULT_MIN_WHITESPACE,
) -> float:
    """Breathing room: penalize too little (or far too much) empty canvas and cramped padding."""
    score = 100.0

    occupied = float(np.sum([el.area for el in elements])) if elements else 0.0
    canvas_area = canvas_size.area
    whitespace = (canvas_area - occupied) / canvas_area * 100

    if whitespace < min_whitespace:
        score -= (min_whitespace - whitespace) * 2
    elif whitespace > MAX_WHITESPACE:
        score -= (whitespace - MAX_WHITESPACE) * 1.5

    for el in elements:
        if el.spacing.min_side() < MIN_ELEMENT_MARGIN:
            score -= 5

    return max(0, score)


def _on_grid(value: float, unit: float, tolerance: float) -> bool:
    remainder = math.fmod(value, unit)
    return abs(remainder) < tolerance or abs(remainder - unit) < tolerance


def evaluate_alignment(elements: Sequence[LayoutElement], grid: GridSystem) -> float:
    """Grid snapping plus a bonus for shared left, right and center edges."""
    score = 100.0
    tolerance = grid.gutter_x / 2

    for el in elements:
        if grid.gutter_x > 0 and not _on_grid(el.position.x, grid.gutter_x, tolerance):
            score -= 3
        if grid.gutter_y > 0 and not _on_grid(el.position.y, grid.gutter_y, tolerance):
            score -= 3

    for i in range(len(elements)):
        for j in range(i + 1, len(elements)):
            a, b = elements[i], elements[j]
            if abs(a.position.x - b.position.x) < tolerance:
                score += 2
            if abs(a.right - b.right) < tolerance:
                score += 2
            if abs(a.center.x - b.center.x) < tolerance:
                score += 2

    return _clamp(score)


def _axis_score(first: float, second: float) -> float:
    heavier = max(first, second)
    ratio = min(first, second) / heavier if heavier > 0 else 1.0
    return 100.0 if ratio > BALANCE_THRESHOLD else ratio * 100 / BALANCE_THRESHOLD


def evaluate_balance(elements: Sequence[LayoutElement], canvas_size: Dimensions) -> float:
    """
    Visual weight (area x importance) split across the canvas midlines.

    Each axis scores 100 above a 0.6 lighter/heavier ratio and falls linearly
    to 0 below it; the result is the mean of both axes.
    """
    if not elements:
        return 100

    weights = np.array([el.area * el.importance for el in elements], dtype=float)
    centers = np.array([[el.center.x, el.center.y] for el in elements], dtype=float)

    left = centers[:, 0] < canvas_size.width / 2
    top = centers[:, 1] < canvas_size.height / 2

    horizontal = _axis_score(weights[left].sum(), weights[~left].sum())
    vertical = _axis_score(weights[top].sum(), weights[~top].sum())

    return (horizontal + vertical) / 2


def evaluate_proximity(elements: Sequence[LayoutElement]) -> float:
    """Related (same type) elements should sit together; unrelated ones apart."""
    score = 100.0

    groups: Dict[ElementType, List[LayoutElement]] = OrderedDict()
    for el in elements:
        groups.setdefault(el.type, []).append(el)

    for group in groups.values():
        for a, b in zip(group, group[1:]):
            if element_distance(a, b) > PROXIMITY_MAX_SAME_TYPE:
                score -= 5

    types = list(groups)
    for i in range(len(types)):
        for j in range(i + 1, len(types)):
            for a in groups[types[i]]:
                for b in groups[types[j]]:
                    if element_distance(a, b) < PROXIMITY_MIN_CROSS_TYPE:
                        score -= 3

    return max(0, score)


def _safe_contrast(color: str, background: str):
    try:
        return contrast_ratio(color, background)
    except ColorParseError as e:
        logger.warning(f"Skipping contrast check: {e}")
        return None


def evaluate_contrast(elements: Sequence[LayoutElement], background_color: str) -> float:
    """
    Readability against the background (WCAG AA 4.5:1, 3:1 for text >= 18px).

    AAA-level text earns a bonus; the single most important element must
    clear 4.5:1 to work as a focal point.
    """
    if not elements:
        return 100

    score = 100.0

    for el in elements:
        if not el.is_text or not el.color:
            continue
        ratio = _safe_contrast(el.color, background_color)
        if ratio is None:
            continue

        font_size = el.font_size or DEFAULT_FONT_SIZE
        minimum = CONTRAST_AA_LARGE if font_size >= LARGE_TEXT_PX else CONTRAST_AA
        if ratio < minimum:
            score -= 15
        elif ratio >= CONTRAST_AAA:
            score += 5

    focal = elements[0]
    for el in elements[1:]:
        if el.importance > focal.importance:
            focal = el

    if focal.color:
        ratio = _safe_contrast(focal.color, background_color)
        if ratio is not None and ratio < CONTRAST_AA:
            score -= 20

    return _clamp(score)


def thirds_intersections(canvas_size: Dimensions) -> np.ndarray:
    """The four rule-of-thirds intersection points as a (4, 2) array."""
    xs = (canvas_size.width / 3, canvas_size.width * 2 / 3)
    ys = (canvas_size.height / 3, canvas_size.height * 2 / 3)
    return np.array([[x, y] for y in ys for x in xs], dtype=float)


def evaluate_rule_of_thirds(elements: Sequence[LayoutElement], canvas_size: Dimensions) -> float:
    """Neutral 50, +15 per important element centered near a thirds intersection."""
    score = float(NEUTRAL_THIRDS_SCORE)
    points = thirds_intersections(canvas_size)

    for el in elements:
        if el.importance < THIRDS_MIN_IMPORTANCE:
            continue
        center = np.array([el.center.x, el.center.y])
        distances = np.linalg.norm(points - center, axis=1)
        if np.any(distances < THIRDS_TOLERANCE):
            score += 15

    return min(100, score)
