"""Tests for color parsing and contrast."""

import pytest

from vibe_layout.color import ColorParseError, contrast_ratio, is_valid_color, parse_color, relative_luminance


def test_parse_hex():
    assert parse_color("#1e293b") == (30, 41, 59)
    assert parse_color("#fff") == (255, 255, 255)
    assert parse_color("000000") == (0, 0, 0)
    assert parse_color("#ff000080") == (255, 0, 0)


def test_parse_rgb():
    assert parse_color("rgb(10, 20, 30)") == (10, 20, 30)
    assert parse_color("rgba(0, 0, 0, 0.5)") == (0, 0, 0)


def test_parse_rejects_garbage():
    with pytest.raises(ColorParseError):
        parse_color("blue")
    with pytest.raises(ColorParseError):
        parse_color(None)
    assert not is_valid_color("#12")
    assert is_valid_color("#abcdef")


def test_luminance_extremes():
    assert relative_luminance("#ffffff") == pytest.approx(1.0)
    assert relative_luminance("#000000") == pytest.approx(0.0)


def test_contrast_ratio():
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#ffffff", "#000000") == pytest.approx(21.0)
    assert contrast_ratio("#777777", "#777777") == pytest.approx(1.0)
    assert 3 < contrast_ratio("#777777", "#ffffff") < 4.5
