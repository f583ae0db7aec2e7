from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import polars as pl
import pytest

from yearcal.core.typing import DataSource
from yearcal.io import FrameSource, MappingSource, load_frame, load_sources
from yearcal.io.errors import IoError, SourceError


def test_mapping_source_returns_none_for_missing_days() -> None:
    src = MappingSource({date(2024, 1, 1): 2.0, date(2024, 1, 2): None})
    assert isinstance(src, DataSource)
    assert src.get_value(date(2024, 1, 1)) == 2.0
    assert src.get_value(date(2024, 1, 2)) is None
    assert src.get_value(date(2024, 1, 3)) is None


def test_frame_source_parses_string_dates_and_sums_duplicates() -> None:
    df = pl.DataFrame(
        {
            "date": ["2024-01-01", "2024-01-01", "2024-01-05", "2024-01-06"],
            "value": [1, 2, 4, None],
        }
    )
    src = FrameSource(df)
    assert src.get_value(date(2024, 1, 1)) == 3.0
    assert src.get_value(date(2024, 1, 5)) == 4.0
    # Only a null row for this day: absent, not zero
    assert src.get_value(date(2024, 1, 6)) is None
    assert len(src) == 2


def test_frame_source_truncates_datetimes_and_uses_custom_columns() -> None:
    df = pl.DataFrame(
        {
            "ts": [datetime(2024, 3, 1, 8, 30), datetime(2024, 3, 1, 21, 0)],
            "count": [1.5, 0.5],
        }
    )
    src = FrameSource(df, date_column="ts", value_column="count")
    assert src.get_value(date(2024, 3, 1)) == 2.0


def test_frame_source_missing_columns_raise_source_error() -> None:
    with pytest.raises(SourceError):
        FrameSource(pl.DataFrame({"day": ["2024-01-01"], "value": [1]}))
    assert issubclass(SourceError, IoError)


def test_load_frame_csv_and_parquet(tmp_path: Path) -> None:
    csv_path = tmp_path / "a.csv"
    csv_path.write_text("date,value\n2024-01-01,2\n2024-01-01,3\n2024-01-05,1\n")
    pq_path = tmp_path / "b.parquet"
    pl.DataFrame({"date": [date(2024, 1, 1)], "value": [10.0]}).write_parquet(pq_path)

    assert load_frame(csv_path).height == 3
    sources = load_sources([csv_path, pq_path])

    assert [s.name for s in sources] == ["a.csv", "b.parquet"]
    assert sources[0].get_value(date(2024, 1, 1)) == 5.0
    assert sources[1].get_value(date(2024, 1, 1)) == 10.0


def test_load_frame_rejects_missing_and_unsupported_files(tmp_path: Path) -> None:
    with pytest.raises(SourceError):
        load_frame(tmp_path / "missing.csv")
    bad = tmp_path / "series.xlsx"
    bad.write_bytes(b"")
    with pytest.raises(SourceError):
        load_frame(bad)
