from __future__ import annotations

from datetime import date

from yearcal.core.schema import DailyRecord
from yearcal.io import MappingSource
from yearcal.viz.aggregate import aggregate_year
from yearcal.viz.grouping import group_years


def test_single_year_input_yields_one_group() -> None:
    recs = aggregate_year(2024, [MappingSource({})])
    groups = group_years(recs)
    assert [g.year for g in groups] == [2024]
    assert len(groups[0].records) == 365
    assert groups[0].records == tuple(recs)


def test_groups_are_newest_first_and_sorted_within_year() -> None:
    recs = [
        DailyRecord(date=date(2023, 5, 2), value=2.0),
        DailyRecord(date=date(2024, 1, 2), value=None),
        DailyRecord(date=date(2022, 12, 31), value=1.0),
        DailyRecord(date=date(2023, 5, 1), value=3.0),
        DailyRecord(date=date(2024, 1, 1), value=4.0),
    ]

    groups = group_years(recs)

    assert [g.year for g in groups] == [2024, 2023, 2022]
    assert all(a.year > b.year for a, b in zip(groups, groups[1:]))
    assert [r.date for r in groups[0].records] == [date(2024, 1, 1), date(2024, 1, 2)]
    assert [r.value for r in groups[0].records] == [4.0, None]
    assert [r.date for r in groups[1].records] == [date(2023, 5, 1), date(2023, 5, 2)]


def test_empty_input_yields_no_groups() -> None:
    assert group_years([]) == []
