"""
Scene construction for the year calendar.

build_calendar() turns daily records into a Scene: one strip per year (newest first), each
holding, in draw order, the previous-year glyph, the year label, the next-year glyph, the
title, the weekday initials, the day cells, the month separators and the month labels.

The navigation glyphs call the injected `on_navigate` with -1 or +1. The scene never mutates
any state itself; the host applies the delta and renders again.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from functools import partial

from yearcal.core.constants import (
    CELL_SIZE,
    CHART_STYLE,
    CHART_WIDTH,
    MONTH_ABBREVIATIONS,
    NEUTRAL_COLOR,
    SEPARATOR_COLOR,
    SEPARATOR_WIDTH,
    STRIP_ORIGIN_X,
    WEEKDAY_INITIALS,
)
from yearcal.core.schema import DailyRecord, RenderConfig, YearGroup
from yearcal.core.typing import NavigateCallback

from .grouping import group_years
from .layout import (
    MONTH_LABEL_Y,
    cell_rect,
    chart_height,
    month_label_x,
    month_path,
    months_in_span,
    strip_height,
    weekday_label_y,
)
from .scale import QuantizeScale
from .scene import Group, Node, Path, Rect, Scene, Text

__all__ = [
    "format_value",
    "format_tooltip",
    "build_strip",
    "build_calendar",
]

_MINUS = "\u2212"


def _num(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else repr(float(v))


def format_value(value: float | None) -> str:
    """One significant digit, printed like d3 `format(".1")` ('' when absent).

    Exponents from -6 to 0 print in fixed notation, others as `<digit>e<sign><exp>`. Ties round
    away from zero and negatives carry the minus sign U+2212.

    Examples:
        >>> format_value(1.0), format_value(0.25), format_value(12), format_value(None)
        ('1', '0.3', '1e+1', '')
        >>> format_value(0.000012), format_value(3e-7)
        ('0.00001', '3e-7')
    """
    if value is None:
        return ""
    v = float(value)
    if math.isnan(v):
        return "NaN"
    sign = _MINUS if v < 0 else ""
    if math.isinf(v):
        return sign + "Infinity"
    if v == 0:
        return "0"

    exact = Decimal(abs(v))
    exp = exact.adjusted()
    digit = int(exact.quantize(Decimal((0, (1,), exp)), rounding=ROUND_HALF_UP).scaleb(-exp))
    if digit == 10:
        digit, exp = 1, exp + 1
    if exp < -6 or exp > 0:
        return f"{sign}{digit}e{'+' if exp > 0 else '-'}{abs(exp)}"
    if exp == 0:
        return f"{sign}{digit}"
    return f"{sign}0.{'0' * (-exp - 1)}{digit}"


def format_tooltip(record: DailyRecord) -> str:
    return f"{record.date.isoformat()}\n{format_value(record.value)}"


def _nav_glyph(
    glyph: str, x: float, css_class: str, delta: int, on_navigate: NavigateCallback | None
) -> Text:
    return Text(
        text=glyph,
        x=x,
        y=-1,
        font_size=12,
        font_weight="bold",
        text_anchor="start",
        css_class=css_class,
        on_click=partial(on_navigate, delta) if on_navigate is not None else None,
    )


def _month_group(first: date, index: int) -> Group:
    children: list[Node] = []
    if index:
        children.append(
            Path(
                d=month_path(first),
                stroke=SEPARATOR_COLOR,
                stroke_width=SEPARATOR_WIDTH,
                css_class="month-separator",
            )
        )
    children.append(
        Text(
            text=MONTH_ABBREVIATIONS[first.month - 1],
            x=month_label_x(first),
            y=MONTH_LABEL_Y,
            css_class="month-label",
        )
    )
    return Group(children=tuple(children), css_class="month")


def build_strip(
    group: YearGroup,
    index: int,
    config: RenderConfig,
    scale: QuantizeScale,
    on_navigate: NavigateCallback | None = None,
) -> Group:
    """Draw one year strip, offset vertically by its position in the chart."""
    cells = tuple(
        Rect(
            *cell_rect(r.date),
            fill=NEUTRAL_COLOR if r.value is None else scale(r.value),
            title=format_tooltip(r),
            css_class="day",
        )
        for r in group.records
    )
    weekdays = tuple(
        Text(
            text=WEEKDAY_INITIALS[i],
            x=-5,
            y=weekday_label_y(i),
            dy="0.31em",
            css_class="weekday",
        )
        for i in range(7)
    )
    months = tuple(_month_group(first, i) for i, first in enumerate(months_in_span(group.records)))

    offset_y = strip_height() * index + CELL_SIZE * 1.5
    return Group(
        transform=f"translate({_num(STRIP_ORIGIN_X)},{_num(offset_y)})",
        css_class="year-strip",
        children=(
            _nav_glyph("<", -10, "nav-prev", -1, on_navigate),
            Text(
                text=str(group.year),
                x=0,
                y=2,
                font_size=18,
                font_weight="bold",
                text_anchor="start",
                css_class="year-label",
            ),
            _nav_glyph(">", 42, "nav-next", 1, on_navigate),
            Text(
                text=config.title,
                transform=f"translate({26 * CELL_SIZE},0)",
                font_size=20,
                font_weight="bold",
                text_anchor="middle",
                css_class="title",
            ),
            Group(children=weekdays, text_anchor="end", css_class="weekdays"),
            Group(children=cells, css_class="days"),
            Group(children=months, css_class="months"),
        ),
    )


def build_calendar(
    records: Sequence[DailyRecord],
    config: RenderConfig,
    on_navigate: NavigateCallback | None = None,
) -> Scene:
    """Build the full calendar scene for `records`.

    Args:
        records (Sequence[DailyRecord]): Daily records of one or more years.
        config (RenderConfig): Color domain/palette and title.
        on_navigate (NavigateCallback | None): Called with -1/+1 when a navigation glyph is
            activated. Without it the glyphs are drawn but inert.

    Returns:
        Scene: Width CHART_WIDTH, height strip_height() per year group.
    """
    scale = QuantizeScale.from_config(config, unknown=NEUTRAL_COLOR)
    groups = group_years(records)
    height = chart_height(len(groups))
    return Scene(
        width=CHART_WIDTH,
        height=height,
        view_box=(0, 0, CHART_WIDTH, height),
        style=CHART_STYLE,
        children=tuple(build_strip(g, i, config, scale, on_navigate) for i, g in enumerate(groups)),
    )
