"""
Constraint-driven element placement.

Core idea: the vibe's constraints decide *where* each role may go; the seeded
generator decides the jitter inside that region. Every coordinate is snapped
to the grid gutter after it is computed.

Draw order is part of the reproducibility contract:
    target count → heading → subheading → body → decorative count → decoratives
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from .constants import (
    BODY_STYLE,
    DECORATIVE_MIN_SIZE,
    DECORATIVE_SIZE_SPAN,
    DEFAULT_GRID_COLUMNS,
    DEFAULT_GRID_ROWS,
    DIVIDER_HEIGHT,
    DIVIDER_MIN_WIDTH,
    DIVIDER_WIDTH_SPAN,
    HARD_MAX_ELEMENTS,
    HEADING_STYLE,
    MARGIN_GUTTER_MULTIPLIER,
    MAX_DECORATIVE_ELEMENTS,
    MIN_TARGET_ELEMENTS,
    SUBHEADING_STYLE,
    TARGET_ELEMENT_SPREAD,
)
from .rng import SeededRandom
from .schema import (
    Alignment,
    Dimensions,
    ElementType,
    GridSystem,
    LayoutElement,
    LayoutGeneratorConfig,
    Point,
    Spacing,
    Symmetry,
    VibeConstraints,
)
from .validator import has_overlap

logger = logging.getLogger(__name__)

DECORATIVE_CHOICES = (ElementType.SHAPE, ElementType.DIVIDER, ElementType.PATTERN)


def snap(value: float, unit: float) -> float:
    """Snap to the nearest multiple of unit, rounding halves up."""
    if unit <= 0:
        return value
    return math.floor(value / unit + 0.5) * unit


def generate_grid(canvas_size: Dimensions, constraints: VibeConstraints) -> GridSystem:
    """Grid from the vibe's first preferred columns/rows; margins are 2x the gutter."""
    prefs = constraints.layout_preferences
    columns = prefs.preferred_columns[0] if prefs.preferred_columns else DEFAULT_GRID_COLUMNS
    rows = prefs.preferred_rows[0] if prefs.preferred_rows else DEFAULT_GRID_ROWS

    gutter = constraints.alignment_grid
    return GridSystem(
        columns=columns,
        rows=rows,
        gutter_x=gutter,
        gutter_y=gutter,
        margin=Spacing.uniform(gutter * MARGIN_GUTTER_MULTIPLIER),
    )


class ElementPlacer:
    """
    Places heading, subheading, body and decorative elements inside the
    grid's safe area according to one vibe's constraints.
    """

    def __init__(
        self,
        config: LayoutGeneratorConfig,
        constraints: VibeConstraints,
        grid: GridSystem,
        rng: SeededRandom,
    ):
        self.config = config
        self.constraints = constraints
        self.grid = grid
        self.rng = rng
        self.available_width = config.canvas_size.width - grid.margin.left - grid.margin.right
        self.available_height = config.canvas_size.height - grid.margin.top - grid.margin.bottom

    def _snap_point(self, x: float, y: float) -> Point:
        return Point(snap(x, self.grid.gutter_x), snap(y, self.grid.gutter_y))

    def _text_box(self, style: Tuple[float, ...]) -> Tuple[float, Dimensions]:
        """Sample font size and box for a text role: (font, span, width, width span, line height)."""
        min_font, font_span, min_width, width_span, line_height = style
        font_size = self.rng.spread(min_font, font_span)
        width = min(self.available_width * self.rng.spread(min_width, width_span), self.available_width)
        return font_size, Dimensions(width, font_size * line_height)

    def _stack_below(self, anchor: LayoutElement) -> Point:
        return self._snap_point(
            anchor.position.x,
            anchor.position.y + anchor.dimensions.height + self.constraints.min_element_spacing,
        )

    def heading(self) -> LayoutElement:
        font_size, box = self._text_box(HEADING_STYLE)
        margin = self.grid.margin

        if self.constraints.use_rule_of_thirds:
            third = self.available_width / 3 if self.rng.coin() else self.available_width * 2 / 3
            x = margin.left + third - box.width / 2
            y = margin.top + self.available_height / 3 - box.height / 2
        elif self.constraints.symmetry == Symmetry.STRICT:
            x = margin.left + (self.available_width - box.width) / 2
            y = margin.top + self.available_height * 0.25
        else:
            x = margin.left + self.rng.next() * (self.available_width - box.width)
            y = margin.top + self.rng.next() * self.available_height * 0.3

        return LayoutElement(
            id="heading",
            type=ElementType.HEADING,
            position=self._snap_point(x, y),
            dimensions=box,
            spacing=Spacing.uniform(16),
            alignment=Alignment.CENTER if self.constraints.symmetry == Symmetry.STRICT else Alignment.LEFT,
            z_index=10,
            importance=10,
            font_size=font_size,
            font_weight=700,
            color=self.config.colors.text,
            content=self.config.content.heading,
        )

    def subheading(self, placed: Sequence[LayoutElement]) -> LayoutElement:
        heading = next((el for el in placed if el.type == ElementType.HEADING), None)
        font_size, box = self._text_box(SUBHEADING_STYLE)

        if heading is not None:
            position = self._stack_below(heading)
            alignment = heading.alignment
        else:
            x = self.grid.margin.left + self.rng.next() * (self.available_width - box.width)
            y = self.grid.margin.top + self.rng.next() * self.available_height * 0.4
            position = self._snap_point(x, y)
            alignment = Alignment.LEFT

        return LayoutElement(
            id="subheading",
            type=ElementType.SUBHEADING,
            position=position,
            dimensions=box,
            spacing=Spacing.uniform(12),
            alignment=alignment,
            z_index=9,
            importance=8,
            font_size=font_size,
            font_weight=500,
            color=self.config.colors.text,
            content=self.config.content.subheading,
        )

    def body(self, placed: Sequence[LayoutElement]) -> LayoutElement:
        previous = placed[-1] if placed else None
        font_size, box = self._text_box(BODY_STYLE)

        if previous is not None:
            position = self._stack_below(previous)
            alignment = previous.alignment
        else:
            x = self.grid.margin.left + self.rng.next() * (self.available_width - box.width)
            y = self.grid.margin.top + self.available_height * 0.5
            position = self._snap_point(x, y)
            alignment = Alignment.LEFT

        return LayoutElement(
            id="body",
            type=ElementType.BODY,
            position=position,
            dimensions=box,
            spacing=Spacing.uniform(8),
            alignment=alignment,
            z_index=8,
            importance=6,
            font_size=font_size,
            font_weight=400,
            color=self.config.colors.text,
            content=self.config.content.body,
        )

    def decorative(self, placed: Sequence[LayoutElement]) -> Optional[LayoutElement]:
        """Random shape/divider/pattern; None if it collides with anything placed."""
        kind = self.rng.choice(DECORATIVE_CHOICES)
        size = self.rng.spread(DECORATIVE_MIN_SIZE, DECORATIVE_SIZE_SPAN)
        if kind == ElementType.DIVIDER:
            box = Dimensions(self.rng.spread(DIVIDER_MIN_WIDTH, DIVIDER_WIDTH_SPAN), DIVIDER_HEIGHT)
        else:
            box = Dimensions(size, size)

        x = self.grid.margin.left + self.rng.next() * (self.available_width - box.width)
        y = self.grid.margin.top + self.rng.next() * (self.available_height - box.height)
        colors = self.config.colors

        element = LayoutElement(
            id=f"decorative-{kind.value}-{len(placed)}",
            type=kind,
            position=self._snap_point(x, y),
            dimensions=box,
            spacing=Spacing.uniform(8),
            alignment=Alignment.CENTER,
            z_index=5,
            importance=3,
            color=colors.primary if self.rng.coin() else colors.accent,
        )

        for existing in placed:
            if has_overlap(element, existing):
                logger.debug(f"Dropped {element.id}: overlaps '{existing.id}'")
                return None
        return element


def generate_elements(
    config: LayoutGeneratorConfig,
    constraints: VibeConstraints,
    grid: GridSystem,
    seed: float,
) -> List[LayoutElement]:
    """
    Generate one candidate's elements. Deterministic for a given seed.

    Args:
        config: Layout request (content, colors, canvas)
        constraints: Vibe constraints driving placement
        grid: Grid the positions snap to
        seed: Seed for the linear-congruential generator

    Returns:
        Elements in placement order
    """
    rng = SeededRandom(seed)
    placer = ElementPlacer(config, constraints, grid, rng)
    content = config.content

    max_elements = min(constraints.max_elements, HARD_MAX_ELEMENTS)
    target = MIN_TARGET_ELEMENTS + math.floor(rng.next() * TARGET_ELEMENT_SPREAD)
    limit = min(max_elements, target + MAX_DECORATIVE_ELEMENTS)

    elements: List[LayoutElement] = []

    if content.heading:
        elements.append(placer.heading())

    if content.subheading and len(elements) < max_elements:
        elements.append(placer.subheading(elements))

    if content.body and len(elements) < max_elements:
        elements.append(placer.body(elements))

    if constraints.layout_preferences.decorative_elements and len(elements) < limit:
        count = 1 + math.floor(rng.next() * MAX_DECORATIVE_ELEMENTS)
        for _ in range(count):
            if len(elements) >= limit:
                break
            element = placer.decorative(elements)
            if element is not None:
                elements.append(element)

    return elements
