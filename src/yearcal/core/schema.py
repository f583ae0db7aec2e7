"""
Pydantic v2 models for daily records, year groups, render configuration and view state.

Responsibilities
- Define the canonical record types flowing from aggregation into scene construction.
- Validate the render configuration once, at the boundary, so the renderer can trust it.
- Hold the only mutable state of the system (ViewState.selected_year).

Style
- Zero-IO (stdlib + pydantic only).
- Google-style docstrings with Attributes, Raises and Examples sections.

References
- errors: src/yearcal/core/errors.py (ColorScaleError)
- tests: tests/core/*
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import DEFAULT_COLOR_DOMAIN, DEFAULT_COLOR_PALETTE
from .errors import ColorScaleError

__all__ = [
    "DailyRecord",
    "YearGroup",
    "RenderConfig",
    "ViewState",
]


class DailyRecord(BaseModel):
    """
    One calendar day's aggregated value, or the absence of one.

    Attributes:
        date (datetime.date): Calendar day (UTC, no time component).
        value (float | None): Sum of every source's value for the day, or None when no
            source reported a value.

    Notes:
        None is kept distinct from 0.0 all the way into the renderer, where it selects the
        neutral fill.

    Examples:
        >>> from datetime import date
        >>> from yearcal.core.schema import DailyRecord
        >>> DailyRecord(date=date(2024, 1, 1), value=None).value is None
        True
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    date: date
    value: float | None = None


class YearGroup(BaseModel):
    """
    The records of a single calendar year, in ascending date order.

    Attributes:
        year (int): Calendar year shared by every record.
        records (tuple[DailyRecord, ...]): Records of that year.

    Raises:
        pydantic.ValidationError: If a record falls outside `year`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    records: tuple[DailyRecord, ...] = ()

    @model_validator(mode="after")
    def _check_records_in_year(self) -> YearGroup:
        strays = [r.date.isoformat() for r in self.records if r.date.year != self.year]
        if strays:
            raise ValueError(f"records outside year {self.year}: {strays[:3]}")
        return self


class RenderConfig(BaseModel):
    """
    Static render configuration: color domain, palette and chart title.

    Attributes:
        color_domain (tuple[float, float]): Inclusive [min, max] input domain of the color scale.
        color_palette (tuple[str, ...]): Ordered, non-empty sequence of output colors.
        title (str): Static chart title drawn in every year strip.

    Raises:
        pydantic.ValidationError: If the palette is empty or the domain is not ordered.

    Examples:
        >>> from yearcal.core.schema import RenderConfig
        >>> RenderConfig(color_domain=(0, 4), color_palette=["#eee", "#000"], title="Runs")
        RenderConfig(color_domain=(0.0, 4.0), color_palette=('#eee', '#000'), title='Runs')
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    color_domain: tuple[float, float] = DEFAULT_COLOR_DOMAIN
    color_palette: tuple[str, ...] = Field(default=DEFAULT_COLOR_PALETTE, min_length=1)
    title: str = ""

    @field_validator("color_domain")
    @classmethod
    def _check_domain(cls, v: tuple[float, float]) -> tuple[float, float]:
        lo, hi = v
        if lo > hi:
            raise ColorScaleError(f"color_domain must be ordered (min <= max), got {v}")
        return v


class ViewState(BaseModel):
    """
    Mutable view state owned by the host across re-renders.

    Attributes:
        selected_year (int): Year the aggregator renders on the next render call, within the
            range of `datetime.date` (1..9999).

    Notes:
        Only navigation mutates this; assignments are validated.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    selected_year: int = Field(ge=date.min.year, le=date.max.year)
