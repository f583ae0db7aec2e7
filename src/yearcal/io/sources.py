"""
Data sources for yearcal.

Overview
- MappingSource: DataSource over an in-memory {date: value} mapping.
- FrameSource: DataSource over a polars DataFrame with a date column and a value column.
- load_frame(): Reads a CSV/Parquet/JSON/NDJSON series file with polars.
- load_sources(): One FrameSource per file.

Normalization
- Datetime columns are truncated to dates; string columns are parsed as ISO dates.
- Rows with a null value are dropped, so a day only has a value when some row reports one.
- Duplicate dates are summed.

Import DAG discipline
- Depends on stdlib, polars and yearcal.core; does not import yearcal.viz.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from datetime import date
from pathlib import Path

import polars as pl

from .errors import SourceError

logger = logging.getLogger(__name__)

__all__ = [
    "MappingSource",
    "FrameSource",
    "load_frame",
    "load_sources",
]

_READERS = {
    ".csv": pl.read_csv,
    ".parquet": pl.read_parquet,
    ".json": pl.read_json,
    ".ndjson": pl.read_ndjson,
    ".jsonl": pl.read_ndjson,
}


class MappingSource:
    """DataSource over a mapping of calendar days to values (missing keys are absent)."""

    def __init__(self, values: Mapping[date, float | None]) -> None:
        self._values = dict(values)

    def get_value(self, day: date) -> float | None:
        return self._values.get(day)

    def __len__(self) -> int:
        return len(self._values)


class FrameSource:
    """
    DataSource over a polars DataFrame.

    Args:
        frame (pl.DataFrame): Frame holding at least `date_column` and `value_column`.
        date_column (str): Name of the date column (Date, Datetime or ISO string).
        value_column (str): Name of the numeric value column.
        name (str | None): Optional label used in logs.

    Raises:
        SourceError: If a required column is missing or dates cannot be parsed.

    Examples:
        >>> import polars as pl
        >>> from datetime import date
        >>> from yearcal.io import FrameSource
        >>> df = pl.DataFrame({"date": ["2024-01-01", "2024-01-01"], "value": [1, 2]})
        >>> src = FrameSource(df)
        >>> src.get_value(date(2024, 1, 1))
        3.0
    """

    def __init__(
        self,
        frame: pl.DataFrame,
        *,
        date_column: str = "date",
        value_column: str = "value",
        name: str | None = None,
    ) -> None:
        missing = [c for c in (date_column, value_column) if c not in frame.columns]
        if missing:
            raise SourceError(
                f"source {name or '<frame>'} missing required columns {missing}; "
                f"found {frame.columns}"
            )
        self.name = name
        daily = _daily_totals(frame, date_column, value_column)
        self._values: dict[date, float] = dict(
            zip(daily.get_column("date").to_list(), daily.get_column("value").to_list())
        )
        logger.debug("source %s: %d days with values", name or "<frame>", len(self._values))

    def get_value(self, day: date) -> float | None:
        return self._values.get(day)

    def __len__(self) -> int:
        return len(self._values)


def _date_expr(frame: pl.DataFrame, column: str) -> pl.Expr:
    dtype = frame.schema[column]
    if dtype == pl.Date:
        return pl.col(column)
    if isinstance(dtype, pl.Datetime):
        return pl.col(column).dt.date()
    if dtype == pl.Utf8:
        return pl.col(column).str.strip_chars().str.slice(0, 10).str.to_date("%Y-%m-%d")
    raise SourceError(f"column {column!r} has unsupported date dtype {dtype}")


def _daily_totals(frame: pl.DataFrame, date_column: str, value_column: str) -> pl.DataFrame:
    try:
        return (
            frame.select(
                _date_expr(frame, date_column).alias("date"),
                pl.col(value_column).cast(pl.Float64).alias("value"),
            )
            .drop_nulls()
            .group_by("date", maintain_order=True)
            .agg(pl.col("value").sum())
        )
    except pl.exceptions.PolarsError as e:
        raise SourceError(f"cannot normalize {date_column!r}/{value_column!r}: {e}") from e


def load_frame(path: str | os.PathLike[str]) -> pl.DataFrame:
    """Read a series file with polars, choosing the reader from the file extension.

    Args:
        path: CSV, Parquet, JSON or NDJSON file.

    Returns:
        pl.DataFrame: File contents.

    Raises:
        SourceError: If the file is missing or the extension is unsupported.
    """
    p = Path(path)
    if not p.exists():
        raise SourceError(f"Required file not found: {p}")
    reader = _READERS.get(p.suffix.lower())
    if reader is None:
        raise SourceError(
            f"unsupported source format {p.suffix!r} ({p}); expected one of {sorted(_READERS)}"
        )
    logger.debug("reading %s", p)
    return reader(p)


def load_sources(
    paths: Iterable[str | os.PathLike[str]],
    *,
    date_column: str = "date",
    value_column: str = "value",
) -> list[FrameSource]:
    """One FrameSource per file, in the order given."""
    return [
        FrameSource(
            load_frame(p),
            date_column=date_column,
            value_column=value_column,
            name=Path(p).name,
        )
        for p in paths
    ]
