"""Shared test fixtures."""

import pytest

from vibe_layout import (
    Alignment,
    ColorPalette,
    ContentType,
    Dimensions,
    ElementType,
    GridSystem,
    LayoutContent,
    LayoutElement,
    LayoutGeneratorConfig,
    Point,
    Spacing,
)


@pytest.fixture
def palette() -> ColorPalette:
    return ColorPalette(
        primary="#2563eb",
        secondary="#7c3aed",
        accent="#ec4899",
        background="#ffffff",
        text="#1e293b",
    )


@pytest.fixture
def content() -> LayoutContent:
    return LayoutContent(
        heading="Ship faster",
        subheading="Deploy in one click",
        body="Everything your team needs to build, test and release.",
    )


@pytest.fixture
def web_config(palette, content) -> LayoutGeneratorConfig:
    return LayoutGeneratorConfig(
        content_type=ContentType.WEB,
        vibe_id="modern-saas",
        colors=palette,
        content=content,
        canvas_size=Dimensions(1200, 800),
        seed=0.42,
    )


@pytest.fixture
def minimal_config() -> LayoutGeneratorConfig:
    return LayoutGeneratorConfig(
        content_type=ContentType.WEB,
        vibe_id="minimal",
        colors=ColorPalette(
            primary="#000000",
            secondary="#404040",
            accent="#808080",
            background="#ffffff",
            text="#000000",
        ),
        content=LayoutContent(heading="Simplicity", subheading="Less is more"),
        canvas_size=Dimensions(1200, 800),
        seed=0.42,
    )


@pytest.fixture
def card_config(palette) -> LayoutGeneratorConfig:
    return LayoutGeneratorConfig(
        content_type=ContentType.BUSINESS_CARD,
        vibe_id="luxury",
        colors=palette,
        content=LayoutContent(
            heading="Ada Lovelace",
            subheading="Analyst",
            contact_info=("ada@example.com", "+44 20 7946 0000"),
        ),
        canvas_size=Dimensions(1050, 600),
        seed=0.42,
    )


@pytest.fixture
def grid() -> GridSystem:
    return GridSystem(columns=3, rows=4, gutter_x=12, gutter_y=12, margin=Spacing.uniform(24))


@pytest.fixture
def make_element():
    def _make(
        element_id="el",
        kind=ElementType.BODY,
        x=0.0,
        y=0.0,
        width=100.0,
        height=50.0,
        importance=5,
        font_size=None,
        color=None,
        alignment=Alignment.LEFT,
        spacing=16.0,
    ) -> LayoutElement:
        return LayoutElement(
            id=element_id,
            type=kind,
            position=Point(x, y),
            dimensions=Dimensions(width, height),
            spacing=Spacing.uniform(spacing),
            alignment=alignment,
            z_index=importance,
            importance=importance,
            font_size=font_size,
            color=color,
        )
    return _make
