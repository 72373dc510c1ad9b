"""Tests for grid construction and element placement."""

from dataclasses import replace

from vibe_layout import (
    Alignment,
    Dimensions,
    ElementType,
    LayoutContent,
    get_vibe_constraints,
    list_vibes,
)
from vibe_layout.constants import MAX_DECORATIVE_ELEMENTS
from vibe_layout.constraints import ElementPlacer, generate_elements, generate_grid, snap
from vibe_layout.rng import SeededRandom


def test_snap_rounds_half_up():
    assert snap(13, 12) == 12
    assert snap(18, 12) == 24
    assert snap(-18, 12) == -12
    assert snap(5, 0) == 5


def test_grid_from_vibe():
    grid = generate_grid(Dimensions(1200, 800), get_vibe_constraints("modern-saas"))
    assert (grid.columns, grid.rows) == (3, 3)
    assert grid.gutter_x == grid.gutter_y == 12
    assert grid.margin.top == grid.margin.left == 24


def test_placement_is_deterministic(web_config):
    constraints = get_vibe_constraints(web_config.vibe_id)
    grid = generate_grid(web_config.canvas_size, constraints)

    first = generate_elements(web_config, constraints, grid, 0.42)
    second = generate_elements(web_config, constraints, grid, 0.42)
    assert first == second
    assert generate_elements(web_config, constraints, grid, 1.42) != first


def test_positions_snap_to_gutter(web_config):
    for vibe_id in list_vibes():
        constraints = get_vibe_constraints(vibe_id)
        grid = generate_grid(web_config.canvas_size, constraints)
        for seed in range(10):
            for el in generate_elements(web_config, constraints, grid, seed + 0.5):
                assert el.position.x % grid.gutter_x == 0
                assert el.position.y % grid.gutter_y == 0


def test_text_roles(web_config):
    constraints = get_vibe_constraints(web_config.vibe_id)
    grid = generate_grid(web_config.canvas_size, constraints)
    elements = generate_elements(web_config, constraints, grid, 0.42)
    by_id = {el.id: el for el in elements}

    heading = by_id["heading"]
    assert heading.type == ElementType.HEADING
    assert heading.importance == 10
    assert 48 <= heading.font_size < 80
    assert heading.content == "Ship faster"
    assert heading.color == web_config.colors.text

    subheading = by_id["subheading"]
    assert subheading.position.x == heading.position.x
    assert subheading.position.y > heading.bottom
    assert subheading.alignment == heading.alignment

    body = by_id["body"]
    assert body.position.y > subheading.bottom
    assert body.importance == 6


def test_strict_vibe_centers_text(web_config):
    config = replace(web_config, vibe_id="luxury")
    constraints = get_vibe_constraints("luxury")
    grid = generate_grid(config.canvas_size, constraints)
    elements = generate_elements(config, constraints, grid, 0.42)
    assert all(el.alignment == Alignment.CENTER for el in elements)


def test_missing_content_omits_elements(web_config):
    constraints = get_vibe_constraints("minimal")
    grid = generate_grid(web_config.canvas_size, constraints)
    config = replace(web_config, content=LayoutContent())
    assert generate_elements(config, constraints, grid, 0.42) == []


def test_element_caps(web_config):
    for vibe_id in list_vibes():
        constraints = get_vibe_constraints(vibe_id)
        grid = generate_grid(web_config.canvas_size, constraints)
        for seed in range(20):
            elements = generate_elements(web_config, constraints, grid, seed)
            assert len(elements) <= min(constraints.max_elements, 10)
            decorative = [el for el in elements if el.is_decorative]
            assert len(decorative) <= 2
            if not constraints.layout_preferences.decorative_elements:
                assert decorative == []


def test_grid_defaults_without_preferences():
    minimal = get_vibe_constraints("minimal")
    constraints = replace(
        minimal,
        layout_preferences=replace(minimal.layout_preferences, preferred_columns=(), preferred_rows=()),
    )
    grid = generate_grid(Dimensions(100, 100), constraints)
    assert (grid.columns, grid.rows) == (3, 4)


def test_rule_of_thirds_heading(web_config):
    constraints = get_vibe_constraints("modern-saas")
    grid = generate_grid(web_config.canvas_size, constraints)
    width = web_config.canvas_size.width - grid.margin.left - grid.margin.right
    height = web_config.canvas_size.height - grid.margin.top - grid.margin.bottom
    tolerance = grid.gutter_x / 2

    thirds_seen = set()
    for seed in range(20):
        heading = generate_elements(web_config, constraints, grid, seed + 0.5)[0]
        assert heading.id == "heading"
        center_x = heading.position.x + heading.dimensions.width / 2 - grid.margin.left
        center_y = heading.position.y + heading.dimensions.height / 2 - grid.margin.top

        third = min((1, 2), key=lambda k: abs(center_x - width * k / 3))
        assert abs(center_x - width * third / 3) <= tolerance
        assert abs(center_y - height / 3) <= tolerance
        thirds_seen.add(third)
    assert thirds_seen == {1, 2}


def test_subheading_without_heading_stays_in_upper_band(web_config):
    config = replace(web_config, content=LayoutContent(subheading="Deploy in one click"))
    constraints = get_vibe_constraints(config.vibe_id)
    grid = generate_grid(config.canvas_size, constraints)
    height = config.canvas_size.height - grid.margin.top - grid.margin.bottom
    tolerance = grid.gutter_y / 2

    for seed in range(20):
        subheading = generate_elements(config, constraints, grid, seed + 0.5)[0]
        assert subheading.id == "subheading"
        assert subheading.alignment == Alignment.LEFT
        assert grid.margin.top - tolerance <= subheading.position.y
        assert subheading.position.y <= grid.margin.top + height * 0.4 + tolerance


def test_body_without_previous_element_sits_at_half_height(web_config):
    config = replace(web_config, content=LayoutContent(body="Everything your team needs."))
    constraints = get_vibe_constraints(config.vibe_id)
    grid = generate_grid(config.canvas_size, constraints)
    height = config.canvas_size.height - grid.margin.top - grid.margin.bottom
    expected_y = snap(grid.margin.top + height * 0.5, grid.gutter_y)

    for seed in range(10):
        body = generate_elements(config, constraints, grid, seed + 0.5)[0]
        assert body.id == "body"
        assert body.position.y == expected_y
        assert body.alignment == Alignment.LEFT


def test_colliding_decorative_is_dropped(web_config, make_element):
    constraints = get_vibe_constraints(web_config.vibe_id)
    grid = generate_grid(web_config.canvas_size, constraints)
    canvas = web_config.canvas_size
    blocker = make_element("blocker", width=canvas.width, height=canvas.height)

    blocked = ElementPlacer(web_config, constraints, grid, SeededRandom(0.42))
    free = ElementPlacer(web_config, constraints, grid, SeededRandom(0.42))

    assert blocked.decorative([blocker]) is None
    assert free.decorative([]) is not None
    # A dropped decorative consumes the same draws as a placed one
    assert blocked.rng.next() == free.rng.next()


def test_dropped_decoratives_are_not_retried(web_config, monkeypatch):
    constraints = get_vibe_constraints(web_config.vibe_id)
    grid = generate_grid(web_config.canvas_size, constraints)
    original = ElementPlacer.decorative
    placed_calls, dropped_calls = [], []

    def placing(self, placed):
        placed_calls.append(len(placed))
        return original(self, placed)

    def dropping(self, placed):
        dropped_calls.append(len(placed))
        original(self, placed)
        return None

    for seed in range(10):
        placed_calls.clear()
        dropped_calls.clear()

        monkeypatch.setattr(ElementPlacer, "decorative", placing)
        normal = generate_elements(web_config, constraints, grid, seed + 0.5)
        monkeypatch.setattr(ElementPlacer, "decorative", dropping)
        dropped = generate_elements(web_config, constraints, grid, seed + 0.5)

        assert 1 <= len(dropped_calls) <= MAX_DECORATIVE_ELEMENTS
        assert len(dropped_calls) == len(placed_calls)
        assert dropped == [el for el in normal if not el.is_decorative]
