"""
Quantized color scale.

QuantizeScale splits a continuous [min, max] domain into len(palette) equal-width segments
and maps each value to the color of its segment. Values below the domain take the first
color, values above it the last. NaN maps to `unknown`.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence

from yearcal.core.errors import ColorScaleError
from yearcal.core.schema import RenderConfig
from yearcal.core.typing import Color

__all__ = ["QuantizeScale"]


class QuantizeScale:
    """
    Map numbers to one of a fixed set of colors.

    Args:
        domain (tuple[float, float]): Input domain [min, max].
        palette (Sequence[str]): Output colors, low to high.
        unknown (str | None): Result for NaN inputs.

    Raises:
        ColorScaleError: If the palette is empty or the domain is not ordered.

    Examples:
        >>> scale = QuantizeScale((0, 10), ["a", "b"])
        >>> scale(2), scale(5), scale(9), scale(-3), scale(42)
        ('a', 'b', 'b', 'a', 'b')
    """

    def __init__(
        self,
        domain: tuple[float, float],
        palette: Sequence[Color],
        *,
        unknown: Color | None = None,
    ) -> None:
        if not palette:
            raise ColorScaleError("palette must contain at least one color")
        lo, hi = float(domain[0]), float(domain[1])
        if lo > hi:
            raise ColorScaleError(f"domain must be ordered (min <= max), got {domain}")
        self.domain = (lo, hi)
        self.palette: tuple[Color, ...] = tuple(palette)
        self.unknown = unknown
        k = len(self.palette)
        self.thresholds: tuple[float, ...] = tuple(
            ((i + 1) * hi + (k - 1 - i) * lo) / k for i in range(k - 1)
        )

    @classmethod
    def from_config(cls, config: RenderConfig, *, unknown: Color | None = None) -> QuantizeScale:
        return cls(config.color_domain, config.color_palette, unknown=unknown)

    def __call__(self, value: float) -> Color | None:
        if math.isnan(value):
            return self.unknown
        return self.palette[bisect_right(self.thresholds, value)]
