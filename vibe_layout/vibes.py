"""
Vibe constraint catalog.

Static, read-only table of per-vibe layout tuning plus the print constants
used by the business card generator. Unknown vibe ids resolve to the
modern-saas profile.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .constants import DEFAULT_PRINT_DPI, MM_PER_INCH, POINTS_PER_INCH
from .schema import (
    ElementDensity,
    LayoutPreferences,
    Spacing,
    Symmetry,
    VibeConstraints,
)

GOLDEN_RATIO: float = 1.618

DEFAULT_VIBE_ID: str = "modern-saas"


MINIMAL = VibeConstraints(
    vibe_id="minimal",
    vibe_name="Minimal",
    min_whitespace=60,
    max_elements=5,
    min_element_spacing=40,
    scale_ratios=(1, 1.5, 2),
    alignment_grid=16,
    symmetry=Symmetry.STRICT,
    balance_weight=0.9,
    use_golden_ratio=False,
    use_rule_of_thirds=True,
    primary_characteristics=("spacious", "clean", "understated"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(1, 2),
        preferred_rows=(2, 3),
        element_density=ElementDensity.SPARSE,
        decorative_elements=False,
    ),
)

# Golden-ratio scale steps, centered composition
LUXURY = VibeConstraints(
    vibe_id="luxury",
    vibe_name="Luxury",
    min_whitespace=50,
    max_elements=7,
    min_element_spacing=32,
    scale_ratios=(1, GOLDEN_RATIO, GOLDEN_RATIO * GOLDEN_RATIO),
    alignment_grid=8,
    symmetry=Symmetry.STRICT,
    balance_weight=1.0,
    use_golden_ratio=True,
    use_rule_of_thirds=False,
    primary_characteristics=("elegant", "refined", "balanced"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(2, 3),
        preferred_rows=(3, 4),
        element_density=ElementDensity.MODERATE,
        decorative_elements=True,
    ),
)

MODERN_SAAS = VibeConstraints(
    vibe_id="modern-saas",
    vibe_name="Modern SaaS",
    min_whitespace=40,
    max_elements=10,
    min_element_spacing=24,
    scale_ratios=(1, 1.5, 2, 3),
    alignment_grid=12,
    symmetry=Symmetry.ASYMMETRIC,
    balance_weight=0.7,
    use_golden_ratio=False,
    use_rule_of_thirds=True,
    primary_characteristics=("bold", "dynamic", "contemporary"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(3, 4),
        preferred_rows=(3, 4, 5),
        element_density=ElementDensity.MODERATE,
        decorative_elements=True,
    ),
)

DARK_TECH = VibeConstraints(
    vibe_id="dark-tech",
    vibe_name="Dark Tech",
    min_whitespace=45,
    max_elements=8,
    min_element_spacing=20,
    scale_ratios=(1, 1.5, 2, 3),
    alignment_grid=16,
    symmetry=Symmetry.LOOSE,
    balance_weight=0.8,
    use_golden_ratio=False,
    use_rule_of_thirds=True,
    primary_characteristics=("technical", "precise", "structured"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(3, 4),
        preferred_rows=(3, 4),
        element_density=ElementDensity.MODERATE,
        decorative_elements=True,
    ),
)

BRUTALIST = VibeConstraints(
    vibe_id="brutalist",
    vibe_name="Brutalist",
    min_whitespace=30,
    max_elements=12,
    min_element_spacing=16,
    scale_ratios=(1, 2, 3, 4),
    alignment_grid=20,
    symmetry=Symmetry.ASYMMETRIC,
    balance_weight=0.5,
    use_golden_ratio=False,
    use_rule_of_thirds=False,
    primary_characteristics=("bold", "unconventional", "grid-based"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(3, 4, 5),
        preferred_rows=(4, 5, 6),
        element_density=ElementDensity.DENSE,
        decorative_elements=False,
    ),
)

PASTEL = VibeConstraints(
    vibe_id="pastel",
    vibe_name="Pastel",
    min_whitespace=55,
    max_elements=7,
    min_element_spacing=28,
    scale_ratios=(1, 1.4, 1.8),
    alignment_grid=12,
    symmetry=Symmetry.LOOSE,
    balance_weight=0.85,
    use_golden_ratio=False,
    use_rule_of_thirds=True,
    primary_characteristics=("soft", "harmonious", "gentle"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(2, 3),
        preferred_rows=(3, 4),
        element_density=ElementDensity.SPARSE,
        decorative_elements=True,
    ),
)

# Strict 16px grid
RETRO_PIXEL = VibeConstraints(
    vibe_id="retro-pixel",
    vibe_name="Retro Pixel",
    min_whitespace=35,
    max_elements=10,
    min_element_spacing=16,
    scale_ratios=(1, 2, 3),
    alignment_grid=16,
    symmetry=Symmetry.STRICT,
    balance_weight=0.8,
    use_golden_ratio=False,
    use_rule_of_thirds=False,
    primary_characteristics=("geometric", "structured", "nostalgic"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(3, 4),
        preferred_rows=(3, 4, 5),
        element_density=ElementDensity.MODERATE,
        decorative_elements=True,
    ),
)

WARM_EDITORIAL = VibeConstraints(
    vibe_id="warm-editorial",
    vibe_name="Warm Editorial",
    min_whitespace=48,
    max_elements=9,
    min_element_spacing=24,
    scale_ratios=(1, 1.6, 2.4),
    alignment_grid=8,
    symmetry=Symmetry.ASYMMETRIC,
    balance_weight=0.75,
    use_golden_ratio=True,
    use_rule_of_thirds=True,
    primary_characteristics=("editorial", "warm", "organic"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(2, 3, 4),
        preferred_rows=(3, 4, 5),
        element_density=ElementDensity.MODERATE,
        decorative_elements=True,
    ),
)

SOFT_NEO_TECH = VibeConstraints(
    vibe_id="soft-neo-tech",
    vibe_name="Soft Neo Tech",
    min_whitespace=45,
    max_elements=9,
    min_element_spacing=24,
    scale_ratios=(1, 1.5, 2.25),
    alignment_grid=12,
    symmetry=Symmetry.LOOSE,
    balance_weight=0.8,
    use_golden_ratio=False,
    use_rule_of_thirds=True,
    primary_characteristics=("modern", "friendly", "balanced"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(3, 4),
        preferred_rows=(3, 4),
        element_density=ElementDensity.MODERATE,
        decorative_elements=True,
    ),
)

GRADIENT_BLOOM = VibeConstraints(
    vibe_id="gradient-bloom",
    vibe_name="Gradient Bloom",
    min_whitespace=42,
    max_elements=10,
    min_element_spacing=20,
    scale_ratios=(1, 1.6, 2.4, 3.2),
    alignment_grid=10,
    symmetry=Symmetry.ASYMMETRIC,
    balance_weight=0.7,
    use_golden_ratio=False,
    use_rule_of_thirds=True,
    primary_characteristics=("vibrant", "flowing", "energetic"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(3, 4),
        preferred_rows=(3, 4, 5),
        element_density=ElementDensity.MODERATE,
        decorative_elements=True,
    ),
)

CYBER_MINT = VibeConstraints(
    vibe_id="cyber-mint",
    vibe_name="Cyber Mint",
    min_whitespace=40,
    max_elements=11,
    min_element_spacing=18,
    scale_ratios=(1, 1.5, 2.5, 4),
    alignment_grid=14,
    symmetry=Symmetry.ASYMMETRIC,
    balance_weight=0.65,
    use_golden_ratio=False,
    use_rule_of_thirds=True,
    primary_characteristics=("futuristic", "dynamic", "bold"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(3, 4, 5),
        preferred_rows=(4, 5),
        element_density=ElementDensity.MODERATE,
        decorative_elements=True,
    ),
)

MAGAZINE_BRUTALISM = VibeConstraints(
    vibe_id="magazine-brutalism",
    vibe_name="Magazine Brutalism",
    min_whitespace=38,
    max_elements=10,
    min_element_spacing=20,
    scale_ratios=(1, 2, 3, 5),
    alignment_grid=16,
    symmetry=Symmetry.ASYMMETRIC,
    balance_weight=0.6,
    use_golden_ratio=False,
    use_rule_of_thirds=False,
    primary_characteristics=("editorial", "bold", "grid-focused"),
    layout_preferences=LayoutPreferences(
        preferred_columns=(3, 4, 5),
        preferred_rows=(4, 5, 6),
        element_density=ElementDensity.DENSE,
        decorative_elements=False,
    ),
)

_CANONICAL: Tuple[VibeConstraints, ...] = (
    MINIMAL,
    LUXURY,
    MODERN_SAAS,
    DARK_TECH,
    BRUTALIST,
    PASTEL,
    RETRO_PIXEL,
    WARM_EDITORIAL,
    SOFT_NEO_TECH,
    GRADIENT_BLOOM,
    CYBER_MINT,
    MAGAZINE_BRUTALISM,
)

VIBE_ALIASES: Mapping[str, str] = MappingProxyType({
    "dark": "dark-tech",
})


def _build_catalog() -> Mapping[str, VibeConstraints]:
    table: Dict[str, VibeConstraints] = {v.vibe_id: v for v in _CANONICAL}
    for alias, target in VIBE_ALIASES.items():
        table[alias] = table[target]
    return MappingProxyType(table)


VIBE_CONSTRAINTS: Mapping[str, VibeConstraints] = _build_catalog()


def get_vibe_constraints(vibe_id: str) -> VibeConstraints:
    """Look up a vibe's constraints; unknown ids fall back to modern-saas."""
    return VIBE_CONSTRAINTS.get(vibe_id, VIBE_CONSTRAINTS[DEFAULT_VIBE_ID])


def list_vibes() -> List[str]:
    """Canonical vibe ids (aliases excluded), sorted."""
    return sorted(v.vibe_id for v in _CANONICAL)


@dataclass(frozen=True)
class BusinessCardConstraints:
    """Standard 3.5" x 2" card. Lengths in mm, text sizes in pt."""
    width_mm: float
    height_mm: float
    safe_zone_mm: Spacing
    gutter_mm: float
    min_text_size: float
    optimal_text_size: float
    logo_positions: Tuple[str, ...]
    name_scale: float
    title_scale: float
    contact_scale: float


BUSINESS_CARD_CONSTRAINTS = BusinessCardConstraints(
    width_mm=88.9,
    height_mm=50.8,
    safe_zone_mm=Spacing.uniform(3),
    gutter_mm=3,
    min_text_size=8,
    optimal_text_size=10,
    logo_positions=(
        "top-left",
        "top-center",
        "top-right",
        "center",
        "bottom-left",
        "bottom-center",
        "bottom-right",
    ),
    name_scale=2.0,
    title_scale=1.2,
    contact_scale=0.9,
)


def mm_to_pixels(mm: float, dpi: float = DEFAULT_PRINT_DPI) -> float:
    return mm / MM_PER_INCH * dpi


def pt_to_pixels(pt: float, dpi: float = POINTS_PER_INCH) -> float:
    return pt * (dpi / POINTS_PER_INCH)
