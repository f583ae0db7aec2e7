"""
Calendar geometry: where every day, month separator and label goes.

Columns are Monday-aligned weeks counted from the start of the date's year; rows are
weekdays with Monday at the top. All coordinates are relative to a year strip's origin.

Coordinate summary (c = CELL_SIZE, h = HEADER_OFFSET):
    - cell:          x = week * c + 0.5, y = day * c + 0.5 + h, size c - 1
    - month path:    vertical from the top at the month's first column, stepping one column
                     left at the first day's row when the month starts mid-week
    - month label:   x = week(first Monday on/after the 1st) * c + 2, y = h - 5
    - strip height:  c * 9 + h
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta
from typing import NamedTuple

from yearcal.core.constants import CELL_INSET, CELL_SIZE, HEADER_OFFSET, STRIP_HEIGHT
from yearcal.core.schema import DailyRecord

__all__ = [
    "CellRect",
    "sunday_weekday",
    "count_day",
    "day_index",
    "monday_floor",
    "monday_ceil",
    "week_index",
    "cell_rect",
    "month_path",
    "month_label_x",
    "MONTH_LABEL_Y",
    "weekday_label_y",
    "strip_height",
    "chart_height",
    "months_in_span",
]

MONTH_LABEL_Y: int = HEADER_OFFSET - 5


class CellRect(NamedTuple):
    x: float
    y: float
    width: int
    height: int


def sunday_weekday(d: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday."""
    return d.isoweekday() % 7


def count_day(weekday: int) -> int:
    """Remap a Sunday-based weekday to a Monday-based row (Monday=0 .. Sunday=6)."""
    return (weekday + 6) % 7


def day_index(d: date) -> int:
    return count_day(sunday_weekday(d))


def monday_floor(d: date) -> date:
    return d - timedelta(days=d.weekday())


def monday_ceil(d: date) -> date:
    floor = monday_floor(d)
    return floor if floor == d else floor + timedelta(days=7)


def week_index(d: date, year: int | None = None) -> int:
    """Number of Monday boundaries between Jan 1 of `year` (default: d's year) and `d`.

    Both ends are floored to their Monday first, so every day of the partial first week has
    index 0 and the column advances on each Monday.
    """
    start = date(d.year if year is None else year, 1, 1)
    return (monday_floor(d) - monday_floor(start)).days // 7


def cell_rect(d: date) -> CellRect:
    return CellRect(
        x=week_index(d) * CELL_SIZE + CELL_INSET,
        y=day_index(d) * CELL_SIZE + CELL_INSET + HEADER_OFFSET,
        width=CELL_SIZE - 1,
        height=CELL_SIZE - 1,
    )


def month_path(first: date) -> str:
    """SVG path separating the month starting at `first` from the previous month.

    Args:
        first (date): First day of the month.

    Returns:
        str: Path data. A month starting on Monday gets a single vertical line at its first
        column; otherwise the line runs down the next column to the first day's row, steps
        left one column and continues to the bottom of the grid.
    """
    d = max(0, min(7, day_index(first)))
    w = week_index(first)
    bottom = 7 * CELL_SIZE + HEADER_OFFSET
    if d == 0:
        head = f"M{w * CELL_SIZE},0"
    elif d == 7:
        head = f"M{(w + 1) * CELL_SIZE},0"
    else:
        head = f"M{(w + 1) * CELL_SIZE},0V{d * CELL_SIZE + HEADER_OFFSET}H{w * CELL_SIZE}"
    return f"{head}V{bottom}"


def month_label_x(first: date) -> int:
    return week_index(monday_ceil(first), first.year) * CELL_SIZE + 2


def weekday_label_y(weekday: int) -> float:
    """Baseline-centered y for the initial of a Sunday-based weekday."""
    return (count_day(weekday) + 0.5) * CELL_SIZE + HEADER_OFFSET


def strip_height() -> int:
    return STRIP_HEIGHT


def chart_height(n_groups: int) -> int:
    return STRIP_HEIGHT * n_groups


def months_in_span(records: Sequence[DailyRecord]) -> list[date]:
    """First days of every month from the first record's month up to the last record's date.

    The last record's date is exclusive, so a span ending on the 1st of a month does not
    include that month.
    """
    if not records:
        return []
    end = records[-1].date
    cur = records[0].date.replace(day=1)
    out: list[date] = []
    while cur < end:
        out.append(cur)
        if cur.month < 12:
            cur = cur.replace(month=cur.month + 1)
        elif cur.year < date.max.year:
            cur = date(cur.year + 1, 1, 1)
        else:
            break
    return out
