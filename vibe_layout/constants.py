"""Constants for layout generation: search defaults, scoring weights, thresholds, and print geometry."""

from typing import Dict, Tuple

# Linear-congruential generator parameters (state = (state * A + C) mod M)
LCG_MULTIPLIER: int = 9301
LCG_INCREMENT: int = 49297
LCG_MODULUS: int = 233280

# Search defaults
DEFAULT_MAX_ITERATIONS: int = 50
DEFAULT_MIN_SCORE: float = 80
DEFAULT_POPULATION_SIZE: int = 10
DEFAULT_MUTATION_RATE: float = 0.2
DEFAULT_BEST_OF_COUNT: int = 5
BEST_OF_SEED_STEP: float = 0.1  # Seed offset between best-of-N draws

# Grid fallback when a vibe lists no preferred columns/rows
DEFAULT_GRID_COLUMNS: int = 3
DEFAULT_GRID_ROWS: int = 4
MARGIN_GUTTER_MULTIPLIER: int = 2  # Margins = 2x gutter on each side

# Element caps
HARD_MAX_ELEMENTS: int = 10
MIN_TARGET_ELEMENTS: int = 3
TARGET_ELEMENT_SPREAD: int = 4  # Target count drawn from 3..6
MAX_DECORATIVE_ELEMENTS: int = 2

# Text placement ranges: (min font px, font span px, min width fraction, width span, line-height multiplier)
HEADING_STYLE: Tuple[float, float, float, float, float] = (48, 32, 0.6, 0.3, 1.2)
SUBHEADING_STYLE: Tuple[float, float, float, float, float] = (24, 16, 0.5, 0.3, 1.3)
BODY_STYLE: Tuple[float, float, float, float, float] = (16, 4, 0.6, 0.2, 4.0)

# Decorative element sizing (px)
DECORATIVE_MIN_SIZE: float = 40
DECORATIVE_SIZE_SPAN: float = 60
DIVIDER_MIN_WIDTH: float = 100
DIVIDER_WIDTH_SPAN: float = 200
DIVIDER_HEIGHT: float = 2

# Fallback layout: (width, height, font size, vertical advance) per text role
FALLBACK_TOP_OFFSET: float = 50
FALLBACK_HEADING: Tuple[float, float, float, float] = (400, 60, 48, 100)
FALLBACK_SUBHEADING: Tuple[float, float, float, float] = (500, 40, 28, 70)
FALLBACK_BODY: Tuple[float, float, float, float] = (600, 80, 18, 0)

# Design principle evaluation
IDEAL_SCALE_RATIOS: Tuple[float, ...] = (1, 1.5, 2, 3)
HIERARCHY_AREA_TOLERANCE: float = 0.9
HIERARCHY_RATIO_TOLERANCE: float = 0.3
DEFAULT_MIN_WHITESPACE: float = 30
MAX_WHITESPACE: float = 80
MIN_ELEMENT_MARGIN: float = 8
BALANCE_THRESHOLD: float = 0.6
PROXIMITY_MAX_SAME_TYPE: float = 200
PROXIMITY_MIN_CROSS_TYPE: float = 40
CONTRAST_AA: float = 4.5
CONTRAST_AA_LARGE: float = 3.0
CONTRAST_AAA: float = 7.0
LARGE_TEXT_PX: float = 18
DEFAULT_FONT_SIZE: float = 16
THIRDS_TOLERANCE: float = 50
THIRDS_MIN_IMPORTANCE: int = 7
NEUTRAL_THIRDS_SCORE: float = 50

# Scoring weights (renormalized to sum to 1; balance is scaled by the vibe's balance_weight)
SCORE_WEIGHTS: Dict[str, float] = {
    "hierarchy": 0.18,
    "whitespace": 0.15,
    "alignment": 0.12,
    "balance": 0.15,
    "proximity": 0.10,
    "contrast": 0.15,
    "rule_of_thirds": 0.10,
    "vibe_adherence": 0.15,
}
RULE_OF_THIRDS_UNUSED_WEIGHT: float = 0.05

# Sub-score thresholds that emit an issue/suggestion pair
ISSUE_THRESHOLD: float = 70
BALANCE_ISSUE_THRESHOLD: float = 60

# Score interpretation bands, highest first
SCORE_BANDS: Tuple[Tuple[float, str], ...] = (
    (90, "Excellent"),
    (80, "Good"),
    (70, "Fair"),
    (60, "Poor"),
)
LOWEST_SCORE_BAND: str = "Needs Improvement"

# Print geometry
MM_PER_INCH: float = 25.4
POINTS_PER_INCH: float = 72
DEFAULT_PRINT_DPI: float = 300
CARD_STACK_GAP_MM: float = 2
CARD_TEXT_SPACING_MM: float = 1
CARD_LOGO_MIN_MM: float = 10
CARD_LOGO_SPAN_MM: float = 5
CARD_TEXT_LINE_HEIGHT: float = 1.4
CARD_TEXT_MIN_WIDTH: float = 0.7
CARD_TEXT_WIDTH_SPAN: float = 0.2

# Defaults for quick generation
DEFAULT_PALETTE: Dict[str, str] = {
    "primary": "#2563eb",
    "secondary": "#7c3aed",
    "accent": "#ec4899",
    "background": "#ffffff",
    "text": "#1e293b",
}
DEFAULT_WEB_CANVAS: Tuple[float, float] = (1200, 800)
DEFAULT_CARD_CANVAS: Tuple[float, float] = (1050, 600)  # 3.5" x 2" at 300 DPI
DEFAULT_CONTENT: Dict[str, str] = {
    "heading": "Your Heading Here",
    "subheading": "Your subheading text",
    "body": "Body content goes here with more details",
}
