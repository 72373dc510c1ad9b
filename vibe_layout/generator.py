"""Public entry points: dispatch by content type, best-of-N generation, quick generation."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Union

from tqdm import tqdm

from .business_card import generate_business_card_layout
from .constants import (
    BEST_OF_SEED_STEP,
    DEFAULT_BEST_OF_COUNT,
    DEFAULT_CARD_CANVAS,
    DEFAULT_CONTENT,
    DEFAULT_PALETTE,
    DEFAULT_WEB_CANVAS,
)
from .rng import random_seed
from .schema import (
    AlgorithmOptions,
    ColorPalette,
    ContentType,
    Dimensions,
    GeneratedLayout,
    LayoutContent,
    LayoutGeneratorConfig,
)
from .scoring import compare_layouts
from .solver import generate_layout

logger = logging.getLogger(__name__)


def create_layout(config: LayoutGeneratorConfig, options: Optional[AlgorithmOptions] = None) -> GeneratedLayout:
    """Business cards go to the card generator (options unused); everything else to the search."""
    if config.content_type == ContentType.BUSINESS_CARD:
        return generate_business_card_layout(config)
    return generate_layout(config, options)


def generate_best_layout(
    config: LayoutGeneratorConfig,
    count: int = DEFAULT_BEST_OF_COUNT,
    options: Optional[AlgorithmOptions] = None,
    workers: int = 1,
    show_progress: bool = False,
) -> GeneratedLayout:
    """
    Run create_layout `count` times and keep the highest total.

    Draw i uses seed base + i * 0.1, where base is config.seed or a single
    fresh random draw. Equal totals prefer fewer elements, then the earlier draw.

    Args:
        config: Layout request
        count: Number of independent draws (at least 1)
        options: Search options passed to every draw
        workers: Thread pool size; results are collected in draw order
        show_progress: Show a tqdm progress bar
    """
    count = max(1, count)
    base_seed = config.seed if config.seed is not None else random_seed()
    configs = [config.with_seed(base_seed + i * BEST_OF_SEED_STEP) for i in range(count)]

    progress = tqdm(total=count, desc=f"Generating {config.vibe_id} layouts", disable=not show_progress)
    layouts: List[GeneratedLayout] = []

    with progress:
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                for layout in pool.map(lambda c: create_layout(c, options), configs):
                    layouts.append(layout)
                    progress.update(1)
        else:
            for c in configs:
                layouts.append(create_layout(c, options))
                progress.update(1)

    best = layouts[0]
    for layout in layouts[1:]:
        if compare_layouts(layout, best) > 0:
            best = layout

    logger.info(f"Best of {count} for '{config.vibe_id}': score {best.score.total} (seed={best.metadata.seed})")
    return best


def default_config(
    vibe_id: str,
    content_type: Union[ContentType, str] = ContentType.WEB,
    content: Optional[Dict[str, str]] = None,
) -> LayoutGeneratorConfig:
    """
    Request with the default palette, canvas and placeholder text.

    Missing or empty heading/subheading/body fall back to placeholders.
    """
    content_type = ContentType(content_type)
    content = content or {}
    width, height = DEFAULT_CARD_CANVAS if content_type == ContentType.BUSINESS_CARD else DEFAULT_WEB_CANVAS

    return LayoutGeneratorConfig(
        content_type=content_type,
        vibe_id=vibe_id,
        colors=ColorPalette(**DEFAULT_PALETTE),
        content=LayoutContent(**{key: content.get(key) or DEFAULT_CONTENT[key] for key in DEFAULT_CONTENT}),
        canvas_size=Dimensions(width, height),
    )


def quick_generate(
    vibe_id: str,
    content_type: Union[ContentType, str] = ContentType.WEB,
    content: Optional[Dict[str, str]] = None,
) -> GeneratedLayout:
    """Generate a layout for vibe_id with default settings and a random seed."""
    return create_layout(default_config(vibe_id, content_type, content))
