"""
Business card layouts (3.5" x 2") with print geometry.

A single candidate is built at the requested DPI: name, title and contact
lines stacked inside a 3 mm safe zone, plus an optional logo square.
"""

import logging
from datetime import datetime
from typing import List, Optional

from .constants import (
    CARD_LOGO_MIN_MM,
    CARD_LOGO_SPAN_MM,
    CARD_STACK_GAP_MM,
    CARD_TEXT_LINE_HEIGHT,
    CARD_TEXT_MIN_WIDTH,
    CARD_TEXT_SPACING_MM,
    CARD_TEXT_WIDTH_SPAN,
    DEFAULT_PRINT_DPI,
)
from .rng import SeededRandom, random_seed
from .schema import (
    Alignment,
    ContentType,
    Dimensions,
    ElementType,
    GeneratedLayout,
    GridSystem,
    LayoutElement,
    LayoutGeneratorConfig,
    LayoutMetadata,
    Point,
    Spacing,
    Symmetry,
    VibeConstraints,
)
from .scoring import evaluate_layout
from .solver import timestamp_ms
from .validator import has_overlap
from .vibes import BUSINESS_CARD_CONSTRAINTS, get_vibe_constraints, mm_to_pixels, pt_to_pixels

logger = logging.getLogger(__name__)

CARD = BUSINESS_CARD_CONSTRAINTS

# Logo anchor as fractions of the free space inside the safe zone (x, y)
LOGO_ANCHORS = {
    "top-left": (0.0, 0.0),
    "top-center": (0.5, 0.0),
    "top-right": (1.0, 0.0),
    "center": (0.5, 0.5),
    "bottom-left": (0.0, 1.0),
    "bottom-center": (0.5, 1.0),
    "bottom-right": (1.0, 1.0),
}


def card_canvas(dpi: float = DEFAULT_PRINT_DPI) -> Dimensions:
    return Dimensions(mm_to_pixels(CARD.width_mm, dpi), mm_to_pixels(CARD.height_mm, dpi))


def card_grid(dpi: float = DEFAULT_PRINT_DPI) -> GridSystem:
    """3x3 grid with 3 mm gutters; margins are the print safe zone."""
    gutter = mm_to_pixels(CARD.gutter_mm, dpi)
    safe = CARD.safe_zone_mm
    return GridSystem(
        columns=3,
        rows=3,
        gutter_x=gutter,
        gutter_y=gutter,
        margin=Spacing(
            top=mm_to_pixels(safe.top, dpi),
            right=mm_to_pixels(safe.right, dpi),
            bottom=mm_to_pixels(safe.bottom, dpi),
            left=mm_to_pixels(safe.left, dpi),
        ),
    )


class CardComposer:
    """Builds the text stack and logo for one card."""

    def __init__(
        self,
        config: LayoutGeneratorConfig,
        constraints: VibeConstraints,
        rng: SeededRandom,
        dpi: float,
    ):
        self.config = config
        self.constraints = constraints
        self.rng = rng
        self.dpi = dpi
        self.canvas = card_canvas(dpi)
        self.grid = card_grid(dpi)
        margin = self.grid.margin
        self.safe_width = self.canvas.width - margin.left - margin.right
        self.safe_height = self.canvas.height - margin.top - margin.bottom

    @property
    def strict(self) -> bool:
        return self.constraints.symmetry == Symmetry.STRICT

    def _position(self, box: Dimensions, previous: Optional[LayoutElement]) -> Point:
        margin = self.grid.margin

        if previous is None:
            if self.strict:
                x = margin.left + (self.safe_width - box.width) / 2
                y = margin.top + self.safe_height * 0.2
            else:
                x, y = margin.left, margin.top
        else:
            x = previous.position.x
            y = previous.bottom + mm_to_pixels(CARD_STACK_GAP_MM, self.dpi)
            if y + box.height > self.canvas.height - margin.bottom:
                x = margin.left
                y = margin.top + self.safe_height * 0.5

        # Keep inside the safe zone when a wider box inherits a narrower one's x
        x = max(margin.left, min(x, self.canvas.width - margin.right - box.width))
        return Point(x, y)

    def text(
        self,
        element_id: str,
        kind: ElementType,
        content: str,
        font_size: float,
        font_weight: int,
        importance: int,
        previous: Optional[LayoutElement],
    ) -> LayoutElement:
        width = self.safe_width * self.rng.spread(CARD_TEXT_MIN_WIDTH, CARD_TEXT_WIDTH_SPAN)
        box = Dimensions(width, font_size * CARD_TEXT_LINE_HEIGHT)

        return LayoutElement(
            id=element_id,
            type=kind,
            position=self._position(box, previous),
            dimensions=box,
            spacing=Spacing.uniform(mm_to_pixels(CARD_TEXT_SPACING_MM, self.dpi)),
            alignment=Alignment.CENTER if self.strict else Alignment.LEFT,
            z_index=10 - importance,
            importance=importance,
            font_size=font_size,
            font_weight=font_weight,
            color=self.config.colors.text,
            content=content,
        )

    def logo(self, placed: List[LayoutElement]) -> Optional[LayoutElement]:
        """Logo square at a random anchor; None if it collides with the text."""
        anchor = self.rng.choice(CARD.logo_positions)
        size = mm_to_pixels(self.rng.spread(CARD_LOGO_MIN_MM, CARD_LOGO_SPAN_MM), self.dpi)
        fx, fy = LOGO_ANCHORS[anchor]
        margin = self.grid.margin

        element = LayoutElement(
            id="logo",
            type=ElementType.SHAPE,
            position=Point(
                margin.left + (self.safe_width - size) * fx,
                margin.top + (self.safe_height - size) * fy,
            ),
            dimensions=Dimensions(size, size),
            spacing=Spacing.uniform(mm_to_pixels(CARD_TEXT_SPACING_MM, self.dpi)),
            alignment=Alignment.CENTER,
            z_index=5,
            importance=7,
            color=self.config.colors.primary,
        )

        for existing in placed:
            if has_overlap(element, existing):
                logger.debug(f"Dropped logo at {anchor}: overlaps '{existing.id}'")
                return None
        return element

    def compose(self) -> List[LayoutElement]:
        content = self.config.content
        base = pt_to_pixels(CARD.optimal_text_size, self.dpi)
        elements: List[LayoutElement] = []

        def previous() -> Optional[LayoutElement]:
            return elements[-1] if elements else None

        if content.heading:
            elements.append(self.text(
                "name", ElementType.HEADING, content.heading,
                base * CARD.name_scale, 700, 10, previous(),
            ))

        if content.subheading:
            elements.append(self.text(
                "title", ElementType.SUBHEADING, content.subheading,
                base * CARD.title_scale, 500, 8, previous(),
            ))

        for i, line in enumerate(content.contact_info):
            elements.append(self.text(
                f"contact-{i}", ElementType.BODY, line,
                base * CARD.contact_scale, 400, 6, previous(),
            ))

        if self.constraints.layout_preferences.decorative_elements:
            logo = self.logo(elements)
            if logo is not None:
                elements.append(logo)

        return elements


def generate_business_card_layout(
    config: LayoutGeneratorConfig,
    dpi: float = DEFAULT_PRINT_DPI,
) -> GeneratedLayout:
    """
    Generate a business card layout. The config's canvas_size is ignored;
    the canvas is the standard card at the given DPI.

    Args:
        config: Layout request; content.heading is the name, content.subheading
            the title, content.contact_info the contact lines
        dpi: Print resolution used for every mm/pt conversion

    Returns:
        GeneratedLayout with a single scored candidate (iterations = 1)
    """
    constraints = get_vibe_constraints(config.vibe_id)
    seed = config.seed if config.seed is not None else random_seed()

    composer = CardComposer(config, constraints, SeededRandom(seed), dpi)
    elements = composer.compose()
    score = evaluate_layout(elements, composer.grid, composer.canvas, constraints, config.colors.background)

    logger.info(f"Business card for '{config.vibe_id}': score {score.total}, {len(elements)} element(s)")

    return GeneratedLayout(
        id=f"business-card-{timestamp_ms()}",
        type=ContentType.BUSINESS_CARD,
        vibe_id=config.vibe_id,
        elements=tuple(elements),
        grid=composer.grid,
        score=score,
        metadata=LayoutMetadata(generated_at=datetime.now(), seed=seed, iterations=1),
    )
