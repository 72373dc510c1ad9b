"""
Vibe Layout Module

Generates scored 2D layouts (web sections and business cards) from a content
payload, a color palette, and a named design vibe.

Design:
    Vibe constraints → seeded candidate placement → design principle scoring → best valid candidate

Components:
    - schema: Data structures (requests, elements, grids, scores, layouts)
    - constants: Search defaults, scoring weights, thresholds, print geometry
    - vibes: Vibe constraint catalog and business card geometry
    - rng: Seeded linear-congruential generator
    - color: Color parsing and WCAG contrast
    - validator: Overlap/bounds checks and request parsing
    - constraints: Grid construction and constraint-driven element placement
    - principles: Design principle evaluators
    - scoring: Weighted scoring, vibe adherence, reports
    - solver: Random-restart layout search with fallback
    - business_card: Print business card generator
    - generator: Public entry points (dispatch, best-of-N, quick generation)
"""

from .schema import (
    AlgorithmOptions,
    Alignment,
    ColorPalette,
    ContentType,
    Dimensions,
    ElementDensity,
    ElementType,
    GeneratedLayout,
    GridSystem,
    LayoutContent,
    LayoutElement,
    LayoutGeneratorConfig,
    LayoutMetadata,
    LayoutPreferences,
    LayoutScore,
    Point,
    ScoreBreakdown,
    Spacing,
    Symmetry,
    VibeConstraints,
)
from .vibes import (
    BUSINESS_CARD_CONSTRAINTS,
    VIBE_CONSTRAINTS,
    get_vibe_constraints,
    list_vibes,
    mm_to_pixels,
    pt_to_pixels,
)
from .validator import (
    ConfigValidationError,
    has_overlap,
    is_within_bounds,
    parse_config,
    parse_config_json,
    validate_config_dict,
)
from .principles import (
    evaluate_alignment,
    evaluate_balance,
    evaluate_contrast,
    evaluate_hierarchy,
    evaluate_proximity,
    evaluate_rule_of_thirds,
    evaluate_whitespace,
)
from .scoring import (
    compare_layouts,
    evaluate_layout,
    evaluate_vibe_adherence,
    get_score_interpretation,
    get_score_report,
)
from .solver import LayoutSolver, generate_layout
from .business_card import generate_business_card_layout
from .generator import create_layout, generate_best_layout, quick_generate

__all__ = [
    # Schema
    "AlgorithmOptions",
    "Alignment",
    "ColorPalette",
    "ContentType",
    "Dimensions",
    "ElementDensity",
    "ElementType",
    "GeneratedLayout",
    "GridSystem",
    "LayoutContent",
    "LayoutElement",
    "LayoutGeneratorConfig",
    "LayoutMetadata",
    "LayoutPreferences",
    "LayoutScore",
    "Point",
    "ScoreBreakdown",
    "Spacing",
    "Symmetry",
    "VibeConstraints",
    # Vibes
    "BUSINESS_CARD_CONSTRAINTS",
    "VIBE_CONSTRAINTS",
    "get_vibe_constraints",
    "list_vibes",
    "mm_to_pixels",
    "pt_to_pixels",
    # Validation
    "ConfigValidationError",
    "has_overlap",
    "is_within_bounds",
    "parse_config",
    "parse_config_json",
    "validate_config_dict",
    # Design principles
    "evaluate_alignment",
    "evaluate_balance",
    "evaluate_contrast",
    "evaluate_hierarchy",
    "evaluate_proximity",
    "evaluate_rule_of_thirds",
    "evaluate_whitespace",
    # Scoring
    "compare_layouts",
    "evaluate_layout",
    "evaluate_vibe_adherence",
    "get_score_interpretation",
    "get_score_report",
    # Generation
    "LayoutSolver",
    "generate_layout",
    "generate_business_card_layout",
    "create_layout",
    "generate_best_layout",
    "quick_generate",
]
