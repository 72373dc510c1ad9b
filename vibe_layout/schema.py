"""Data structures for layout requests, placed elements, scores, and generated layouts."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Tuple, Optional

from .constants import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MIN_SCORE,
    DEFAULT_MUTATION_RATE,
    DEFAULT_POPULATION_SIZE,
)


class ElementType(str, Enum):
    """Closed set of visual primitives a layout element can map to."""
    HEADING = "heading"
    SUBHEADING = "subheading"
    BODY = "body"
    IMAGE = "image"
    LOGO = "logo"
    BUTTON = "button"
    DIVIDER = "divider"
    SHAPE = "shape"
    PATTERN = "pattern"


TEXT_TYPES = frozenset({ElementType.HEADING, ElementType.SUBHEADING, ElementType.BODY})
DECORATIVE_TYPES = frozenset({ElementType.SHAPE, ElementType.DIVIDER, ElementType.PATTERN})


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Symmetry(str, Enum):
    STRICT = "strict"
    LOOSE = "loose"
    ASYMMETRIC = "asymmetric"


class ElementDensity(str, Enum):
    SPARSE = "sparse"
    MODERATE = "moderate"
    DENSE = "dense"


class ContentType(str, Enum):
    WEB = "web"
    BUSINESS_CARD = "business-card"


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Spacing:
    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def uniform(cls, value: float) -> "Spacing":
        return cls(value, value, value, value)

    def min_side(self) -> float:
        return min(self.top, self.right, self.bottom, self.left)

    def to_dict(self) -> dict:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}


@dataclass(frozen=True)
class LayoutElement:
    """One placed visual unit with an absolute bounding box."""
    id: str
    type: ElementType
    position: Point
    dimensions: Dimensions
    spacing: Spacing
    alignment: Alignment
    z_index: int
    importance: int  # 1-10, higher must not render smaller than less important siblings
    font_size: Optional[float] = None
    font_weight: Optional[int] = None
    color: Optional[str] = None
    content: Optional[str] = None

    @property
    def area(self) -> float:
        return self.dimensions.area

    @property
    def right(self) -> float:
        return self.position.x + self.dimensions.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.dimensions.height

    @property
    def center(self) -> Point:
        return Point(
            self.position.x + self.dimensions.width / 2,
            self.position.y + self.dimensions.height / 2,
        )

    @property
    def is_text(self) -> bool:
        return self.type in TEXT_TYPES

    @property
    def is_decorative(self) -> bool:
        return self.type in DECORATIVE_TYPES

    def to_dict(self) -> dict:
        result = {
            "id": self.id,
            "type": self.type.value,
            "position": self.position.to_dict(),
            "dimensions": self.dimensions.to_dict(),
            "spacing": self.spacing.to_dict(),
            "alignment": self.alignment.value,
            "zIndex": self.z_index,
            "importance": self.importance,
        }
        if self.font_size is not None:
            result["fontSize"] = self.font_size
        if self.font_weight is not None:
            result["fontWeight"] = self.font_weight
        if self.color is not None:
            result["color"] = self.color
        if self.content is not None:
            result["content"] = self.content
        return result


@dataclass(frozen=True)
class GridSystem:
    columns: int
    rows: int
    gutter_x: float
    gutter_y: float
    margin: Spacing

    def to_dict(self) -> dict:
        return {
            "columns": self.columns,
            "rows": self.rows,
            "gutterX": self.gutter_x,
            "gutterY": self.gutter_y,
            "margin": self.margin.to_dict(),
        }


@dataclass(frozen=True)
class LayoutPreferences:
    preferred_columns: Tuple[int, ...]
    preferred_rows: Tuple[int, ...]
    element_density: ElementDensity
    decorative_elements: bool

    def to_dict(self) -> dict:
        return {
            "preferredColumns": list(self.preferred_columns),
            "preferredRows": list(self.preferred_rows),
            "elementDensity": self.element_density.value,
            "decorativeElements": self.decorative_elements,
        }


@dataclass(frozen=True)
class VibeConstraints:
    """Per-vibe tuning bundle. Registered once in the vibe catalog, never mutated."""
    vibe_id: str
    vibe_name: str
    min_whitespace: float  # Percent of canvas area
    max_elements: int
    min_element_spacing: float  # px
    scale_ratios: Tuple[float, ...]
    alignment_grid: float  # Snap unit in px
    symmetry: Symmetry
    balance_weight: float  # 0-1
    use_golden_ratio: bool
    use_rule_of_thirds: bool
    primary_characteristics: Tuple[str, ...]
    layout_preferences: LayoutPreferences

    def to_dict(self) -> dict:
        return {
            "vibeId": self.vibe_id,
            "vibeName": self.vibe_name,
            "minWhitespace": self.min_whitespace,
            "maxElements": self.max_elements,
            "minElementSpacing": self.min_element_spacing,
            "scaleRatios": list(self.scale_ratios),
            "alignmentGrid": self.alignment_grid,
            "symmetry": self.symmetry.value,
            "balanceWeight": self.balance_weight,
            "useGoldenRatio": self.use_golden_ratio,
            "useRuleOfThirds": self.use_rule_of_thirds,
            "primaryCharacteristics": list(self.primary_characteristics),
            "layoutPreferences": self.layout_preferences.to_dict(),
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    hierarchy: int
    whitespace: int
    alignment: int
    balance: int
    proximity: int
    contrast: int
    rule_of_thirds: int
    vibe_adherence: int

    def values(self) -> Tuple[int, ...]:
        return (
            self.hierarchy, self.whitespace, self.alignment, self.balance,
            self.proximity, self.contrast, self.rule_of_thirds, self.vibe_adherence,
        )

    def to_dict(self) -> dict:
        return {
            "hierarchy": self.hierarchy,
            "whitespace": self.whitespace,
            "alignment": self.alignment,
            "balance": self.balance,
            "proximity": self.proximity,
            "contrast": self.contrast,
            "ruleOfThirds": self.rule_of_thirds,
            "vibeAdherence": self.vibe_adherence,
        }


@dataclass(frozen=True)
class LayoutScore:
    total: int  # 0-100
    breakdown: ScoreBreakdown
    issues: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "breakdown": self.breakdown.to_dict(),
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class LayoutMetadata:
    generated_at: datetime
    seed: float
    iterations: int

    def to_dict(self) -> dict:
        return {
            "generatedAt": self.generated_at.isoformat(),
            "seed": self.seed,
            "iterations": self.iterations,
        }


@dataclass(frozen=True)
class GeneratedLayout:
    """Final artifact of a generation call."""
    id: str
    type: ContentType
    vibe_id: str
    elements: Tuple[LayoutElement, ...]
    grid: GridSystem
    score: LayoutScore
    metadata: LayoutMetadata

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "vibeId": self.vibe_id,
            "elements": [el.to_dict() for el in self.elements],
            "grid": self.grid.to_dict(),
            "score": self.score.to_dict(),
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class ColorPalette:
    primary: str
    secondary: str
    accent: str
    background: str
    text: str

    def to_dict(self) -> dict:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "background": self.background,
            "text": self.text,
        }


@dataclass(frozen=True)
class LayoutContent:
    heading: Optional[str] = None
    subheading: Optional[str] = None
    body: Optional[str] = None
    contact_info: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        result = {}
        if self.heading is not None:
            result["heading"] = self.heading
        if self.subheading is not None:
            result["subheading"] = self.subheading
        if self.body is not None:
            result["body"] = self.body
        if self.contact_info:
            result["contactInfo"] = list(self.contact_info)
        return result


@dataclass(frozen=True)
class LayoutGeneratorConfig:
    """External generation request. canvas_size must have positive width and height."""
    content_type: ContentType
    vibe_id: str
    colors: ColorPalette
    content: LayoutContent
    canvas_size: Dimensions
    seed: Optional[float] = None  # None -> fresh random seed per call

    def with_seed(self, seed: float) -> "LayoutGeneratorConfig":
        return replace(self, seed=seed)

    def to_dict(self) -> dict:
        result = {
            "contentType": self.content_type.value,
            "vibeId": self.vibe_id,
            "colors": self.colors.to_dict(),
            "content": self.content.to_dict(),
            "canvasSize": self.canvas_size.to_dict(),
        }
        if self.seed is not None:
            result["seed"] = self.seed
        return result


@dataclass
class AlgorithmOptions:
    """
    Search tuning.

    use_genetic_algorithm, population_size and mutation_rate are accepted and
    serialized but the search is always plain random restart.
    """
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    min_score: float = DEFAULT_MIN_SCORE
    use_genetic_algorithm: bool = False
    population_size: int = DEFAULT_POPULATION_SIZE
    mutation_rate: float = DEFAULT_MUTATION_RATE

    def to_dict(self) -> dict:
        return {
            "maxIterations": self.max_iterations,
            "minScore": self.min_score,
            "useGeneticAlgorithm": self.use_genetic_algorithm,
            "populationSize": self.population_size,
            "mutationRate": self.mutation_rate,
        }
