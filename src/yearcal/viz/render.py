"""
Render path and host glue.

Overview
- Canvas: host container holding at most one mounted Scene.
- render_calendar(): build a scene from records and mount it (no-op on missing inputs).
- YearCalendar: host-side controller owning the ViewState; navigation applies the delta
  and renders again.
- render_year(): functional entry point that wires a YearCalendar and renders once.

Ordering
- Each render aggregates, builds and mounts synchronously. Mounting detaches the previous
  scene first, so a canvas never holds two scenes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from yearcal.core.errors import NavigationError
from yearcal.core.schema import DailyRecord, RenderConfig, ViewState
from yearcal.core.typing import DataSource, NavigateCallback

from .aggregate import aggregate_year
from .calendar import build_calendar
from .scene import Scene, Text
from .svg import to_svg

logger = logging.getLogger(__name__)

__all__ = [
    "Canvas",
    "render_calendar",
    "YearCalendar",
    "render_year",
]


class Canvas:
    """In-memory container node; holds zero or one drawable."""

    def __init__(self) -> None:
        self._drawable: Scene | None = None
        self.mount_count = 0

    @property
    def drawable(self) -> Scene | None:
        return self._drawable

    def detach(self) -> Scene | None:
        """Remove and return the mounted scene, if any."""
        old, self._drawable = self._drawable, None
        return old

    def mount(self, scene: Scene) -> None:
        self.detach()
        self._drawable = scene
        self.mount_count += 1

    def to_svg(self) -> str:
        return "" if self._drawable is None else to_svg(self._drawable)


def render_calendar(
    canvas: Canvas,
    records: Sequence[DailyRecord] | None,
    config: RenderConfig | None,
    on_navigate: NavigateCallback | None = None,
) -> Scene | None:
    """Build the calendar for `records` and mount it into `canvas`.

    Returns:
        Scene | None: The mounted scene, or None (canvas untouched) when `records` or
        `config` is None.
    """
    if records is None or config is None:
        return None
    scene = build_calendar(records, config, on_navigate)
    canvas.mount(scene)
    return scene


class YearCalendar:
    """
    Host controller: aggregates the selected year, renders, and handles navigation.

    Args:
        canvas (Canvas): Container the scene is mounted into.
        sources (Sequence[DataSource]): Value providers summed per day.
        config (RenderConfig): Color scale configuration and title.
        view (ViewState): Selected year; mutated only by navigate().

    Examples:
        >>> from yearcal.core.schema import RenderConfig, ViewState
        >>> cal = YearCalendar(Canvas(), [], RenderConfig(), ViewState(selected_year=2024))
        >>> cal.render() is not None
        True
        >>> cal.navigate(-1)
        >>> cal.view.selected_year
        2023
    """

    def __init__(
        self,
        canvas: Canvas,
        sources: Sequence[DataSource],
        config: RenderConfig,
        view: ViewState,
    ) -> None:
        self.canvas = canvas
        self.sources = list(sources)
        self.config = config
        self.view = view
        self.records: list[DailyRecord] = []

    def render(self) -> Scene | None:
        """Aggregate the selected year, mount its scene and keep the records in `records`."""
        year = self.view.selected_year
        records = aggregate_year(year, self.sources)
        self.records = records
        scene = render_calendar(self.canvas, records, self.config, self.navigate)
        logger.debug(
            "rendered year=%d records=%d strips=%d",
            year,
            len(records),
            0 if scene is None else len(scene.children),
        )
        return scene

    def navigate(self, delta: int) -> None:
        """Move the selected year by -1 or +1 and render again.

        Raises:
            NavigationError: If `delta` is not -1 or +1, or the target year is outside
                1..9999. The view and the mounted scene are left unchanged.
        """
        if delta not in (-1, 1):
            raise NavigationError(f"navigation delta must be -1 or +1, got {delta!r}")
        target = self.view.selected_year + delta
        try:
            self.view.selected_year = target
        except ValidationError as e:
            raise NavigationError(f"cannot navigate to year {target}") from e
        logger.debug("navigate delta=%+d -> year=%d", delta, self.view.selected_year)
        self.render()

    def glyph(self, css_class: str) -> Text | None:
        """The first navigation glyph (`nav-prev` / `nav-next`) of the mounted scene."""
        scene = self.canvas.drawable
        if scene is None:
            return None
        for node in scene.find(css_class):
            if isinstance(node, Text):
                return node
        return None


def render_year(
    canvas: Canvas,
    sources: Sequence[DataSource] | None,
    config: RenderConfig | None,
    view: ViewState | None,
) -> YearCalendar | None:
    """Render the selected year into `canvas` and return the controller driving it.

    Does nothing and returns None when any input is None.
    """
    if sources is None or config is None or view is None:
        return None
    calendar = YearCalendar(canvas, sources, config, view)
    calendar.render()
    return calendar
