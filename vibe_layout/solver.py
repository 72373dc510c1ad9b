"""
Layout search via seeded random restart.

Core algorithm:
1. For each iteration i: generate a candidate from seed base + i
2. Reject candidates that overlap or leave the canvas
3. Score the rest, keep the best, stop as soon as one reaches min_score
4. If nothing validated, score and return a fixed centered stack
"""

import logging
import time
from datetime import datetime
from typing import List, Optional

from .constants import (
    FALLBACK_BODY,
    FALLBACK_HEADING,
    FALLBACK_SUBHEADING,
    FALLBACK_TOP_OFFSET,
)
from .constraints import generate_elements, generate_grid
from .rng import random_seed
from .schema import (
    AlgorithmOptions,
    Alignment,
    Dimensions,
    ElementType,
    GeneratedLayout,
    GridSystem,
    LayoutElement,
    LayoutGeneratorConfig,
    LayoutMetadata,
    Point,
    Spacing,
)
from .scoring import evaluate_layout
from .validator import validate_candidate
from .vibes import get_vibe_constraints

logger = logging.getLogger(__name__)


def timestamp_ms() -> int:
    return int(time.time() * 1000)


def generate_fallback_elements(config: LayoutGeneratorConfig, grid: GridSystem) -> List[LayoutElement]:
    """
    Fixed centered stack used when no candidate validates.

    Roles without content are skipped; the vertical advance of a skipped role
    is not applied.
    """
    colors = config.colors
    content = config.content
    center_x = config.canvas_size.width / 2
    y = grid.margin.top + FALLBACK_TOP_OFFSET

    # (type, text, box, padding, font weight, z-index, importance)
    roles = [
        (ElementType.HEADING, content.heading, FALLBACK_HEADING, 16, 700, 10, 10),
        (ElementType.SUBHEADING, content.subheading, FALLBACK_SUBHEADING, 12, 500, 9, 8),
        (ElementType.BODY, content.body, FALLBACK_BODY, 8, 400, 8, 6),
    ]

    elements = []
    for kind, text, (width, height, font_size, advance), spacing, weight, z_index, importance in roles:
        if not text:
            continue
        elements.append(LayoutElement(
            id=kind.value,
            type=kind,
            position=Point(center_x - width / 2, y),
            dimensions=Dimensions(width, height),
            spacing=Spacing.uniform(spacing),
            alignment=Alignment.CENTER,
            z_index=z_index,
            importance=importance,
            font_size=font_size,
            font_weight=weight,
            color=colors.text,
            content=text,
        ))
        y += advance

    return elements


class LayoutSolver:
    """
    Random-restart layout search.

    Every candidate is generated from its own seed, so a run is fully
    reproducible from (config, options, base seed).
    """

    def __init__(self, options: Optional[AlgorithmOptions] = None):
        self.options = options or AlgorithmOptions()

    def solve(self, config: LayoutGeneratorConfig) -> GeneratedLayout:
        """Search for the best-scoring valid layout for config."""
        constraints = get_vibe_constraints(config.vibe_id)
        base_seed = config.seed if config.seed is not None else random_seed()
        grid = generate_grid(config.canvas_size, constraints)

        best: Optional[GeneratedLayout] = None
        iterations = 0

        for i in range(self.options.max_iterations):
            iterations += 1
            seed = base_seed + i
            elements = generate_elements(config, constraints, grid, seed)

            is_valid, error = validate_candidate(elements, config.canvas_size)
            if not is_valid:
                logger.debug(f"Rejected candidate {i} (seed={seed}): {error}")
                continue

            score = evaluate_layout(elements, grid, config.canvas_size, constraints, config.colors.background)

            if best is None or score.total > best.score.total:
                best = GeneratedLayout(
                    id=f"layout-{timestamp_ms()}-{i}",
                    type=config.content_type,
                    vibe_id=config.vibe_id,
                    elements=tuple(elements),
                    grid=grid,
                    score=score,
                    metadata=LayoutMetadata(generated_at=datetime.now(), seed=seed, iterations=i + 1),
                )
                if score.total >= self.options.min_score:
                    break

        if best is not None:
            logger.info(
                f"Layout for '{config.vibe_id}': score {best.score.total} "
                f"after {best.metadata.iterations} iteration(s)"
            )
            return best

        logger.warning(
            f"No valid candidate for '{config.vibe_id}' in {iterations} iteration(s), using fallback layout"
        )
        elements = generate_fallback_elements(config, grid)
        score = evaluate_layout(elements, grid, config.canvas_size, constraints, config.colors.background)
        return GeneratedLayout(
            id=f"layout-fallback-{timestamp_ms()}",
            type=config.content_type,
            vibe_id=config.vibe_id,
            elements=tuple(elements),
            grid=grid,
            score=score,
            metadata=LayoutMetadata(generated_at=datetime.now(), seed=base_seed, iterations=iterations),
        )


def generate_layout(config: LayoutGeneratorConfig, options: Optional[AlgorithmOptions] = None) -> GeneratedLayout:
    """Generate a web layout for config; always returns a layout."""
    return LayoutSolver(options).solve(config)
