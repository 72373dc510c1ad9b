"""Tests for the vibe catalog and print conversions."""

import pytest

from vibe_layout import (
    BUSINESS_CARD_CONSTRAINTS,
    VIBE_CONSTRAINTS,
    ElementDensity,
    Symmetry,
    get_vibe_constraints,
    list_vibes,
    mm_to_pixels,
    pt_to_pixels,
)


def test_catalog_has_twelve_vibes():
    vibes = list_vibes()
    assert len(vibes) == 12
    assert "minimal" in vibes
    assert "magazine-brutalism" in vibes
    assert "dark" not in vibes


def test_lookup_by_id():
    minimal = get_vibe_constraints("minimal")
    assert minimal.vibe_id == "minimal"
    assert minimal.max_elements == 5
    assert minimal.symmetry == Symmetry.STRICT
    assert minimal.layout_preferences.element_density == ElementDensity.SPARSE
    assert minimal.layout_preferences.decorative_elements is False


def test_unknown_vibe_falls_back_to_modern_saas():
    assert get_vibe_constraints("no-such-vibe").vibe_id == "modern-saas"


def test_dark_alias():
    assert get_vibe_constraints("dark") is get_vibe_constraints("dark-tech")


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        VIBE_CONSTRAINTS["minimal"] = VIBE_CONSTRAINTS["luxury"]


def test_business_card_constraints():
    assert BUSINESS_CARD_CONSTRAINTS.width_mm == 88.9
    assert BUSINESS_CARD_CONSTRAINTS.height_mm == 50.8
    assert len(BUSINESS_CARD_CONSTRAINTS.logo_positions) == 7


def test_unit_conversions():
    assert mm_to_pixels(25.4) == pytest.approx(300)
    assert mm_to_pixels(25.4, dpi=72) == pytest.approx(72)
    assert pt_to_pixels(10) == pytest.approx(10)
    assert pt_to_pixels(72, dpi=300) == pytest.approx(300)
