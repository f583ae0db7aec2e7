from __future__ import annotations

import math

import pytest

from yearcal.core.errors import ColorScaleError
from yearcal.core.schema import RenderConfig
from yearcal.viz.scale import QuantizeScale


def test_quantize_splits_domain_into_equal_segments() -> None:
    scale = QuantizeScale((0, 10), ["a", "b", "c", "d"])
    assert scale.thresholds == (2.5, 5.0, 7.5)
    assert [scale(v) for v in (0, 2.4, 2.5, 5, 7.4, 10)] == ["a", "a", "b", "c", "c", "d"]


def test_quantize_clamps_outside_domain() -> None:
    scale = QuantizeScale((0, 10), ["a", "b"])
    assert scale(-100) == "a"
    assert scale(1e9) == "b"


def test_quantize_output_is_always_a_palette_entry_inside_domain() -> None:
    palette = ("#1", "#2", "#3", "#4", "#5")
    scale = QuantizeScale((-3.0, 7.0), palette)
    for i in range(101):
        v = -3.0 + i * 0.1
        assert scale(v) in palette


def test_quantize_single_color_and_nan() -> None:
    scale = QuantizeScale((0, 1), ["only"], unknown="#EBEDF0")
    assert scale(0.3) == "only"
    assert scale(math.nan) == "#EBEDF0"


def test_quantize_rejects_bad_configuration() -> None:
    with pytest.raises(ColorScaleError):
        QuantizeScale((0, 1), [])
    with pytest.raises(ColorScaleError):
        QuantizeScale((1, 0), ["a"])


def test_quantize_from_config() -> None:
    cfg = RenderConfig(color_domain=(0, 4), color_palette=["x", "y"])
    scale = QuantizeScale.from_config(cfg)
    assert scale(1) == "x"
    assert scale(3) == "y"
