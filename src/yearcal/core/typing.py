"""
Lightweight typing aliases and protocols used across yearcal.

Notes:
    - Intended for annotations; no runtime logic beyond the runtime-checkable protocol.
    - DataSource is the only contract a value provider must satisfy.

Examples:
    >>> from datetime import date
    >>> from yearcal.core.typing import DataSource
    >>> class Constant:
    ...     def get_value(self, day: date) -> float | None:
    ...         return 1.0
    >>> isinstance(Constant(), DataSource)
    True
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "Color",
    "JsonDict",
    "DataSource",
    "NavigateCallback",
]

# CSS color string, e.g. "#216e39".
Color = str

JsonDict = dict[str, Any]

# Receives -1 (previous year) or +1 (next year).
NavigateCallback = Callable[[int], None]


@runtime_checkable
class DataSource(Protocol):
    """Provider of one numeric value per calendar day, or None when it has no data."""

    def get_value(self, day: date) -> float | None: ...
