"""
Per-day aggregation across data sources.

aggregate_year() queries every source once per day of the selected year and combines the
answers in Polars: a day is absent (null) when every source is absent, otherwise the sum of
the present values. Absent sources contribute nothing; they are never coerced to zero.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

import polars as pl

from yearcal.core.constants import DAYS_PER_RENDER
from yearcal.core.schema import DailyRecord
from yearcal.core.typing import DataSource

__all__ = [
    "year_days",
    "aggregate_year",
    "records_frame",
]


def year_days(selected_year: int) -> list[date]:
    """The DAYS_PER_RENDER consecutive days starting at Jan 1 of `selected_year`.

    Leap years are not special-cased: Dec 31 of a leap year is not included.
    """
    start = date(selected_year, 1, 1)
    return [start + timedelta(days=i) for i in range(DAYS_PER_RENDER)]


def aggregate_year(selected_year: int, sources: Sequence[DataSource]) -> list[DailyRecord]:
    """Sum every source's value per day of `selected_year`.

    Args:
        selected_year (int): Year to aggregate.
        sources (Sequence[DataSource]): Value providers; each is queried once per day.

    Returns:
        list[DailyRecord]: Exactly DAYS_PER_RENDER records in ascending date order.

    Examples:
        >>> from yearcal.io import MappingSource
        >>> from datetime import date
        >>> recs = aggregate_year(2024, [MappingSource({date(2024, 1, 2): 2.0})])
        >>> len(recs), recs[0].value, recs[1].value
        (365, None, 2.0)
    """
    days = year_days(selected_year)
    columns = [
        pl.Series(f"s{i}", [source.get_value(d) for d in days], dtype=pl.Float64, strict=False)
        for i, source in enumerate(sources)
    ]
    frame = pl.DataFrame([pl.Series("date", days, dtype=pl.Date), *columns])

    if columns:
        names = [c.name for c in columns]
        value = (
            pl.when(pl.any_horizontal([pl.col(n).is_not_null() for n in names]))
            .then(pl.sum_horizontal(names))
            .otherwise(None)
        )
    else:
        value = pl.lit(None, dtype=pl.Float64)

    out = frame.select(pl.col("date"), value.cast(pl.Float64).alias("value"))
    return [DailyRecord(date=d, value=v) for d, v in out.iter_rows()]


def records_frame(records: Sequence[DailyRecord]) -> pl.DataFrame:
    """Records as a two-column frame (date: Date, value: Float64 with nulls for absent days)."""
    return pl.DataFrame(
        {
            "date": [r.date for r in records],
            "value": [r.value for r in records],
        },
        schema={"date": pl.Date, "value": pl.Float64},
    )
