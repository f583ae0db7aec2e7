"""
Geometry, color and calendar defaults shared by every yearcal component.

Defines the fixed pixel constants used by the layout, the neutral fill used for days
without data, and the default color configuration. This module is zero-IO and uses only
the Python standard library.

Notes:
    - Every visual element is positioned from CELL_SIZE and HEADER_OFFSET; changing them
      rescales the whole chart consistently.
    - STRIP_HEIGHT is nine row-heights per year strip (7 day rows + header + title padding).
    - DAYS_PER_RENDER is fixed at 365 even in leap years, so Dec 31 of a leap year is not
      rendered.
"""

from __future__ import annotations

__all__ = [
    "CHART_WIDTH",
    "CELL_SIZE",
    "HEADER_OFFSET",
    "STRIP_HEIGHT",
    "STRIP_ORIGIN_X",
    "CELL_INSET",
    "DAYS_PER_RENDER",
    "NEUTRAL_COLOR",
    "SEPARATOR_COLOR",
    "SEPARATOR_WIDTH",
    "WEEKDAY_INITIALS",
    "MONTH_ABBREVIATIONS",
    "CHART_STYLE",
    "DEFAULT_COLOR_DOMAIN",
    "DEFAULT_COLOR_PALETTE",
]

# Width of the chart in pixels.
CHART_WIDTH: int = 945

# Pitch of one day cell (cells are drawn CELL_SIZE - 1 wide, leaving a 1px gutter).
CELL_SIZE: int = 17

# Height of the header above the day grid (month labels sit inside it).
HEADER_OFFSET: int = 30

# Height of one year strip.
STRIP_HEIGHT: int = CELL_SIZE * 9 + HEADER_OFFSET

# Horizontal origin of every strip; leaves room for the weekday initials.
STRIP_ORIGIN_X: float = 40.5

# Half-pixel inset so 1px cell edges land on whole device pixels.
CELL_INSET: float = 0.5

DAYS_PER_RENDER: int = 365

NEUTRAL_COLOR: str = "#EBEDF0"
SEPARATOR_COLOR: str = "#fff"
SEPARATOR_WIDTH: int = 3

# Indexed by Sunday-based weekday (0=Sunday .. 6=Saturday).
WEEKDAY_INITIALS: str = "SMTWTFS"

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

CHART_STYLE: str = "max-width: 100%; height: auto; font: 10px sans-serif;"

DEFAULT_COLOR_DOMAIN: tuple[float, float] = (0.0, 10.0)
DEFAULT_COLOR_PALETTE: tuple[str, ...] = ("#9be9a8", "#40c463", "#30a14e", "#216e39")
