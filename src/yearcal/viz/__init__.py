"""
yearcal.viz: Aggregation, layout and rendering of year calendars.

## Responsibilities
- Aggregate per-day values across data sources for the selected year.
- Group records into year strips (newest first) and lay days out on a Monday-aligned grid.
- Build an immutable scene graph, serialize it to SVG, and mount it into a host canvas.

## Public API
- aggregate: aggregate_year, records_frame.
- grouping: group_years.
- layout: week_index, day_index, cell_rect, month_path, month_label_x, chart_height.
- scale: QuantizeScale.
- scene: Scene and node types, fingerprint.
- calendar: build_calendar.
- svg: to_svg, save_svg.
- render: Canvas, render_calendar, YearCalendar, render_year.
- altair_view: calendar_chart (Altair rendition).

## Import DAG discipline
- Depends on: yearcal.core, polars, altair (and stdlib).
- Must not import yearcal.io or the app package.

## Examples
```python
from datetime import date
from yearcal.core.schema import RenderConfig, ViewState
from yearcal.io import MappingSource
from yearcal.viz import Canvas, render_year
canvas = Canvas()
cal = render_year(
    canvas,
    [MappingSource({date(2024, 1, 3): 4.0})],
    RenderConfig(title="Workouts"),
    ViewState(selected_year=2024),
)
svg = canvas.to_svg()
```
"""

from __future__ import annotations

from .aggregate import aggregate_year, records_frame
from .calendar import build_calendar
from .grouping import group_years
from .render import Canvas, YearCalendar, render_calendar, render_year
from .scale import QuantizeScale
from .scene import Scene, fingerprint
from .svg import save_svg, to_svg

__all__ = [
    "aggregate_year",
    "records_frame",
    "build_calendar",
    "group_years",
    "Canvas",
    "YearCalendar",
    "render_calendar",
    "render_year",
    "QuantizeScale",
    "Scene",
    "fingerprint",
    "save_svg",
    "to_svg",
]
