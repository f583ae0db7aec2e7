"""
Core exception types raised by the color scale and the navigation contract.

Provides typed exceptions for core-domain failures:
- ColorScaleError for a palette or domain a quantize scale cannot be built from.
- NavigationError for a year-navigation step other than one year back or forward.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Absent per-day values are never an error; they render with the neutral color.

Examples:
    >>> from yearcal.core.errors import NavigationError
    >>> def step(delta: int) -> int:
    ...     if delta not in (-1, 1):
    ...         raise NavigationError(f"unsupported navigation delta: {delta}")
    ...     return delta
    >>> try:
    ...     step(3)
    ... except NavigationError as e:
    ...     msg = str(e)
    >>> "delta" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "ColorScaleError",
    "NavigationError",
]


class ColorScaleError(ValueError):
    """Quantize scale cannot be built (empty palette or unordered domain)."""


class NavigationError(ValueError):
    """Navigation delta other than -1 (previous year) or +1 (next year)."""
