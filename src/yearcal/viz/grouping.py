"""Group daily records into year strips, most recent year first."""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl

from yearcal.core.schema import DailyRecord, YearGroup

from .aggregate import records_frame

__all__ = ["group_years"]


def group_years(records: Sequence[DailyRecord]) -> list[YearGroup]:
    """Group records by calendar year.

    Records are sorted by date first; within a year the ascending order is kept, and the
    groups are returned in descending year order regardless of input order.

    Args:
        records (Sequence[DailyRecord]): Records of one or more years, any order.

    Returns:
        list[YearGroup]: One group per year present, newest first. Empty input yields [].
    """
    if not records:
        return []
    frame = (
        records_frame(records)
        .sort("date", maintain_order=True)
        .with_columns(pl.col("date").dt.year().alias("year"))
    )
    groups = [
        YearGroup(
            year=int(part.get_column("year")[0]),
            records=tuple(
                DailyRecord(date=d, value=v) for d, v in part.select("date", "value").iter_rows()
            ),
        )
        for part in frame.partition_by("year", maintain_order=True)
    ]
    return groups[::-1]
