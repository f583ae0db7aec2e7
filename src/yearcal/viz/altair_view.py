"""
Altair rendition of the calendar for interactive hosts.

calendar_chart() draws the same week/day grid as the scene graph with Vega-Lite rect marks,
a quantize color scale over the configured domain/palette, the neutral fill for absent days,
and date/value tooltips. Data is assembled in Polars and passed inline.
"""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt
import polars as pl

from yearcal.core.constants import CELL_SIZE, MONTH_ABBREVIATIONS, NEUTRAL_COLOR
from yearcal.core.schema import DailyRecord, RenderConfig

from .aggregate import records_frame
from .calendar import format_value
from .layout import day_index, week_index

__all__ = ["calendar_frame", "calendar_chart"]

_DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def calendar_frame(records: Sequence[DailyRecord]) -> pl.DataFrame:
    """Records with their grid position (week, day), year, month and formatted label."""
    df = records_frame(records)
    dates = df.get_column("date").to_list()
    return df.with_columns(
        pl.Series("week", [week_index(d) for d in dates], dtype=pl.Int64),
        pl.Series("day", [_DAY_NAMES[day_index(d)] for d in dates], dtype=pl.Utf8),
        pl.col("date").dt.year().alias("year"),
        pl.Series("month", [MONTH_ABBREVIATIONS[d.month - 1] for d in dates], dtype=pl.Utf8),
        pl.Series(
            "label", [format_value(v) for v in df.get_column("value").to_list()], dtype=pl.Utf8
        ),
    )


def calendar_chart(records: Sequence[DailyRecord], config: RenderConfig) -> alt.Chart:
    """Quantized rect heatmap, one row of facets per year (newest first)."""
    df = calendar_frame(records).with_columns(pl.col("date").dt.strftime("%Y-%m-%d"))
    values = df.to_dicts()
    lo, hi = config.color_domain
    color = alt.condition(
        "datum.value === null",
        alt.value(NEUTRAL_COLOR),
        alt.Color(
            "value:Q",
            scale=alt.Scale(type="quantize", domain=[lo, hi], range=list(config.color_palette)),
            legend=alt.Legend(title=None),
        ),
    )
    return (
        alt.Chart(alt.Data(values=values))
        .mark_rect(cornerRadius=1)
        .encode(
            x=alt.X("week:O", title=None, axis=None),
            y=alt.Y("day:O", sort=_DAY_NAMES, title=None),
            color=color,
            row=alt.Row("year:O", sort="descending", title=None),
            tooltip=[alt.Tooltip("date:N", title="date"), alt.Tooltip("label:N", title="value")],
        )
        .properties(width=53 * CELL_SIZE, height=7 * CELL_SIZE, title=config.title)
    )
