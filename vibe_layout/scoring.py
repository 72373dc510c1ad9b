"""Weighted layout scoring, vibe adherence, and human-readable reports."""

import math
from typing import Dict, List, Sequence

from .constants import (
    BALANCE_ISSUE_THRESHOLD,
    ISSUE_THRESHOLD,
    LOWEST_SCORE_BAND,
    NEUTRAL_THIRDS_SCORE,
    RULE_OF_THIRDS_UNUSED_WEIGHT,
    SCORE_BANDS,
    SCORE_WEIGHTS,
)
from .principles import (
    element_distance,
    evaluate_alignment,
    evaluate_balance,
    evaluate_contrast,
    evaluate_hierarchy,
    evaluate_proximity,
    evaluate_rule_of_thirds,
    evaluate_whitespace,
)
from .schema import (
    Alignment,
    Dimensions,
    ElementDensity,
    GridSystem,
    LayoutElement,
    LayoutScore,
    ScoreBreakdown,
    Symmetry,
    VibeConstraints,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def _weights(constraints: VibeConstraints) -> Dict[str, float]:
    weights = dict(SCORE_WEIGHTS)
    weights["balance"] *= constraints.balance_weight
    if not constraints.use_rule_of_thirds:
        weights["rule_of_thirds"] = RULE_OF_THIRDS_UNUSED_WEIGHT

    total = sum(weights.values())
    return {key: w / total for key, w in weights.items()}


def evaluate_vibe_adherence(elements: Sequence[LayoutElement], constraints: VibeConstraints) -> float:
    """
    How closely the candidate follows the vibe's own rules.

    Starts at 100 and deducts for: exceeding max_elements, element count
    outside the vibe's density band, missing or unexpected decoration,
    centered-alignment ratio contradicting the symmetry mode, and element
    pairs closer than the vibe's minimum spacing.
    """
    score = 100.0
    count = len(elements)

    if count > constraints.max_elements:
        score -= (count - constraints.max_elements) * 5

    density = constraints.layout_preferences.element_density
    if density == ElementDensity.SPARSE and count > 6:
        score -= 15
    elif density == ElementDensity.MODERATE and (count < 5 or count > 10):
        score -= 10
    elif density == ElementDensity.DENSE and count < 8:
        score -= 15

    has_decoration = any(el.is_decorative for el in elements)
    expects_decoration = constraints.layout_preferences.decorative_elements
    if expects_decoration and not has_decoration:
        score -= 10
    elif not expects_decoration and has_decoration:
        score -= 15

    if elements:
        centered = sum(1 for el in elements if el.alignment == Alignment.CENTER) / count
        if constraints.symmetry == Symmetry.STRICT and centered < 0.6:
            score -= 20
        elif constraints.symmetry == Symmetry.ASYMMETRIC and centered > 0.5:
            score -= 15

    violations = 0
    for i in range(count):
        for j in range(i + 1, count):
            distance = element_distance(elements[i], elements[j])
            if 0 < distance < constraints.min_element_spacing:
                violations += 1
    score -= violations * 5

    return max(0, score)


def evaluate_layout(
    elements: Sequence[LayoutElement],
    grid: GridSystem,
    canvas_size: Dimensions,
    constraints: VibeConstraints,
    background_color: str,
) -> LayoutScore:
    """
    Score a candidate against every design principle plus vibe adherence.

    Args:
        elements: Candidate elements
        grid: Grid the candidate was generated on
        canvas_size: Canvas dimensions
        constraints: Vibe constraints (weights, thresholds, preferences)
        background_color: Background the text is read against

    Returns:
        LayoutScore with a weighted total, rounded breakdown, and issues/suggestions
    """
    raw = {
        "hierarchy": evaluate_hierarchy(elements),
        "whitespace": evaluate_whitespace(elements, canvas_size, constraints.min_whitespace),
        "alignment": evaluate_alignment(elements, grid),
        "balance": evaluate_balance(elements, canvas_size),
        "proximity": evaluate_proximity(elements),
        "contrast": evaluate_contrast(elements, background_color),
        "rule_of_thirds": (
            evaluate_rule_of_thirds(elements, canvas_size)
            if constraints.use_rule_of_thirds
            else NEUTRAL_THIRDS_SCORE
        ),
        "vibe_adherence": evaluate_vibe_adherence(elements, constraints),
    }

    weights = _weights(constraints)
    total = sum(raw[key] * weights[key] for key in weights)

    checks = [
        ("hierarchy", ISSUE_THRESHOLD, "Weak visual hierarchy",
         "Make important elements significantly larger"),
        ("whitespace", ISSUE_THRESHOLD, "Insufficient whitespace",
         "Increase spacing between elements"),
        ("alignment", ISSUE_THRESHOLD, "Poor alignment",
         "Align elements to grid or with each other"),
        ("balance", BALANCE_ISSUE_THRESHOLD, "Unbalanced layout",
         "Redistribute visual weight more evenly"),
        ("contrast", ISSUE_THRESHOLD, "Poor contrast/readability",
         "Increase contrast between text and background"),
        ("vibe_adherence", ISSUE_THRESHOLD, "Does not match vibe characteristics",
         f"Follow {constraints.vibe_name} design principles more closely"),
    ]

    issues: List[str] = []
    suggestions: List[str] = []
    for key, threshold, issue, suggestion in checks:
        if raw[key] < threshold:
            issues.append(issue)
            suggestions.append(suggestion)

    return LayoutScore(
        total=round_half_up(total),
        breakdown=ScoreBreakdown(**{key: round_half_up(value) for key, value in raw.items()}),
        issues=tuple(issues),
        suggestions=tuple(suggestions),
    )


def get_score_interpretation(score: float) -> str:
    for threshold, label in SCORE_BANDS:
        if score >= threshold:
            return label
    return LOWEST_SCORE_BAND


def get_score_report(score: LayoutScore) -> str:
    """Multi-line text report: total with band, per-principle breakdown, issues, suggestions."""
    b = score.breakdown
    lines = [
        f"Overall Score: {score.total}/100 ({get_score_interpretation(score.total)})",
        "",
        "Breakdown:",
        f"  Hierarchy: {b.hierarchy}/100",
        f"  Whitespace: {b.whitespace}/100",
        f"  Alignment: {b.alignment}/100",
        f"  Balance: {b.balance}/100",
        f"  Proximity: {b.proximity}/100",
        f"  Contrast: {b.contrast}/100",
        f"  Rule of Thirds: {b.rule_of_thirds}/100",
        f"  Vibe Adherence: {b.vibe_adherence}/100",
    ]

    if score.issues:
        lines += ["", "Issues:"] + [f"  - {issue}" for issue in score.issues]
    if score.suggestions:
        lines += ["", "Suggestions:"] + [f"  - {s}" for s in score.suggestions]

    return "\n".join(lines)


def compare_layouts(first, second) -> int:
    """
    Compare two scored layouts (anything with .score and .elements).

    Returns:
        1 if first is better, -1 if second is better, 0 if equivalent.
        Equal totals prefer the layout with fewer elements.
    """
    if first.score.total != second.score.total:
        return 1 if first.score.total > second.score.total else -1
    if len(first.elements) != len(second.elements):
        return 1 if len(first.elements) < len(second.elements) else -1
    return 0
