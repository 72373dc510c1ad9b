"""Tests for the design principle evaluators."""

import pytest

from vibe_layout import (
    Dimensions,
    ElementType,
    evaluate_alignment,
    evaluate_balance,
    evaluate_contrast,
    evaluate_hierarchy,
    evaluate_proximity,
    evaluate_rule_of_thirds,
    evaluate_whitespace,
)

CANVAS = Dimensions(1000, 1000)


def test_empty_inputs(grid):
    assert evaluate_hierarchy([]) == 0
    assert evaluate_whitespace([], CANVAS) == 70
    assert evaluate_alignment([], grid) == 100
    assert evaluate_balance([], CANVAS) == 100
    assert evaluate_proximity([]) == 100
    assert evaluate_contrast([], "#ffffff") == 100
    assert evaluate_rule_of_thirds([], CANVAS) == 50


def test_hierarchy_clean_scale_step(make_element):
    heading = make_element("h", ElementType.HEADING, width=400, height=100, importance=10, font_size=48)
    sub = make_element("s", ElementType.SUBHEADING, width=400, height=50, importance=8, font_size=24)
    assert evaluate_hierarchy([heading, sub]) == 100


def test_hierarchy_inverted(make_element):
    heading = make_element("h", ElementType.HEADING, width=100, height=10, importance=10, font_size=16)
    body = make_element("b", ElementType.BODY, width=100, height=100, importance=6, font_size=24)
    # area -10, scale ratio -5, font size -8
    assert evaluate_hierarchy([heading, body]) == 77


def test_hierarchy_ignores_zero_area_follower(make_element):
    heading = make_element("h", ElementType.HEADING, width=100, height=100, importance=10, font_size=48)
    divider = make_element("d", ElementType.DIVIDER, width=100, height=0, importance=3)
    assert evaluate_hierarchy([heading, divider]) == 100


def test_whitespace(make_element):
    # 99% empty: 19 points over the 80% cap
    assert evaluate_whitespace([make_element(width=100, height=100)], CANVAS) == pytest.approx(71.5)
    # cramped padding costs 5
    assert evaluate_whitespace([make_element(width=100, height=100, spacing=4)], CANVAS) == pytest.approx(66.5)
    # 10% empty with a 30% minimum
    assert evaluate_whitespace([make_element(width=1000, height=900)], CANVAS) == pytest.approx(60)
    # vibe minimum is honored
    assert evaluate_whitespace([make_element(width=1000, height=500)], CANVAS, 60) == pytest.approx(80)


def test_whitespace_floor(make_element):
    crowded = [make_element(str(i), width=1000, height=1000, spacing=0) for i in range(3)]
    assert evaluate_whitespace(crowded, CANVAS) == 0


def test_alignment_on_grid(make_element, grid):
    assert evaluate_alignment([make_element(x=24, y=36)], grid) == 100


def test_alignment_off_grid(make_element, grid):
    assert evaluate_alignment([make_element(x=30, y=30)], grid) == 94


def test_alignment_bonus_for_shared_edges(make_element, grid):
    a = make_element("a", x=30, y=30, width=100)
    b = make_element("b", x=30, y=150, width=100)
    # four off-grid axes -12, three shared edges +6
    assert evaluate_alignment([a, b], grid) == 94


def test_alignment_is_capped(make_element, grid):
    elements = [make_element(str(i), x=24, y=24 + i * 120, width=100) for i in range(4)]
    assert evaluate_alignment(elements, grid) == 100


def test_balance(make_element):
    lone = make_element(x=100, y=100, width=200, height=200)
    assert evaluate_balance([lone], CANVAS) == 0

    a = make_element("a", x=100, y=100, width=200, height=200, importance=5)
    b = make_element("b", x=700, y=700, width=200, height=200, importance=5)
    assert evaluate_balance([a, b], CANVAS) == 100

    heavy = make_element("a", x=100, y=100, width=200, height=200, importance=10)
    assert evaluate_balance([heavy, b], CANVAS) == pytest.approx(0.5 * 100 / 0.6)


def test_proximity(make_element):
    a = make_element("a", ElementType.BODY, x=0, y=0)
    far = make_element("b", ElementType.BODY, x=300, y=0)
    assert evaluate_proximity([a, far]) == 95

    heading = make_element("h", ElementType.HEADING, x=10, y=10)
    assert evaluate_proximity([a, heading]) == 97


def test_contrast_readable(make_element):
    heading = make_element("h", ElementType.HEADING, importance=10, font_size=16, color="#000000")
    assert evaluate_contrast([heading], "#ffffff") == 100


def test_contrast_unreadable_focal_point(make_element):
    heading = make_element("h", ElementType.HEADING, importance=10, font_size=16, color="#eeeeee")
    # below AA (-15) and weak focal point (-20)
    assert evaluate_contrast([heading], "#ffffff") == 65


def test_contrast_large_text_threshold(make_element):
    heading = make_element("h", ElementType.HEADING, importance=10, font_size=24, color="#777777")
    # passes the 3:1 large-text bar but the focal point still needs 4.5:1
    assert evaluate_contrast([heading], "#ffffff") == 80


def test_contrast_skips_unparseable_color(make_element):
    heading = make_element("h", ElementType.HEADING, importance=10, font_size=24, color="not-a-color")
    assert evaluate_contrast([heading], "#ffffff") == 100


def test_rule_of_thirds(make_element):
    canvas = Dimensions(1200, 900)
    focal = make_element("f", x=350, y=275, width=100, height=50, importance=10)
    minor = make_element("m", x=350, y=275, width=100, height=50, importance=5)
    assert evaluate_rule_of_thirds([focal], canvas) == 65
    assert evaluate_rule_of_thirds([minor], canvas) == 50

    many = [make_element(str(i), x=350, y=275, width=100, height=50, importance=9) for i in range(5)]
    assert evaluate_rule_of_thirds(many, canvas) == 100
