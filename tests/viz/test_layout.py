from __future__ import annotations

from datetime import date, timedelta

from yearcal.core.constants import CELL_SIZE, HEADER_OFFSET, STRIP_HEIGHT
from yearcal.core.schema import DailyRecord
from yearcal.viz.aggregate import year_days
from yearcal.viz.layout import (
    MONTH_LABEL_Y,
    cell_rect,
    chart_height,
    count_day,
    day_index,
    month_label_x,
    month_path,
    months_in_span,
    week_index,
    weekday_label_y,
)


def test_day_index_is_monday_based_with_period_seven() -> None:
    # 2024-01-01 is a Monday
    assert day_index(date(2024, 1, 1)) == 0
    assert day_index(date(2024, 1, 7)) == 6
    assert [count_day(i) for i in range(7)] == [6, 0, 1, 2, 3, 4, 5]
    days = year_days(2023)
    for a, b in zip(days, days[7:]):
        assert day_index(a) == day_index(b)
    assert {day_index(d) for d in days} == set(range(7))


def test_week_index_advances_on_mondays() -> None:
    assert week_index(date(2024, 1, 1)) == 0
    assert week_index(date(2024, 1, 7)) == 0
    assert week_index(date(2024, 1, 8)) == 1
    assert week_index(date(2024, 12, 30)) == 52
    # 2023-01-01 is a Sunday: the partial first week is column 0
    assert week_index(date(2023, 1, 1)) == 0
    assert week_index(date(2023, 1, 2)) == 1


def test_week_index_is_monotonic_within_a_year() -> None:
    for year in (2021, 2023, 2024):
        idx = [week_index(d) for d in year_days(year)]
        assert idx[0] == 0
        assert all(b - a in (0, 1) for a, b in zip(idx, idx[1:]))


def test_cell_rect_positions_and_gutter() -> None:
    r = cell_rect(date(2024, 1, 8))
    assert (r.x, r.y) == (CELL_SIZE + 0.5, 0.5 + HEADER_OFFSET)
    assert (r.width, r.height) == (CELL_SIZE - 1, CELL_SIZE - 1)
    sunday = cell_rect(date(2024, 1, 7))
    assert sunday.x == 0.5
    assert sunday.y == 6 * CELL_SIZE + 0.5 + HEADER_OFFSET


def test_month_path_single_segment_when_month_starts_on_monday() -> None:
    assert month_path(date(2024, 1, 1)) == "M0,0V149"
    # 2024-04-01 is a Monday in week 13
    assert month_path(date(2024, 4, 1)) == "M221,0V149"


def test_month_path_l_shape_when_month_starts_mid_week() -> None:
    # 2024-02-01 is a Thursday (row 3) in week 4
    assert month_path(date(2024, 2, 1)) == "M85,0V81H68V149"


def test_month_label_x_uses_first_monday_on_or_after_the_first() -> None:
    assert month_label_x(date(2024, 1, 1)) == 2
    # Feb 2024 -> Monday Feb 5 is week 5
    assert month_label_x(date(2024, 2, 1)) == 5 * CELL_SIZE + 2
    # Jan 2023 starts on Sunday -> Monday Jan 2 is week 1
    assert month_label_x(date(2023, 1, 1)) == CELL_SIZE + 2
    assert MONTH_LABEL_Y == HEADER_OFFSET - 5


def test_weekday_labels_and_chart_height() -> None:
    assert weekday_label_y(1) == 0.5 * CELL_SIZE + HEADER_OFFSET  # Monday on top
    assert weekday_label_y(0) == 6.5 * CELL_SIZE + HEADER_OFFSET  # Sunday at the bottom
    assert STRIP_HEIGHT == CELL_SIZE * 9 + HEADER_OFFSET
    assert chart_height(2) == 2 * STRIP_HEIGHT


def test_months_in_span_excludes_month_of_last_day_when_it_starts_there() -> None:
    recs_2024 = [DailyRecord(date=d) for d in year_days(2024)]
    months = months_in_span(recs_2024)
    assert months == [date(2024, m, 1) for m in range(1, 13)]

    short = [DailyRecord(date=date(2024, 1, 20) + timedelta(days=i)) for i in range(13)]
    assert short[-1].date == date(2024, 2, 1)
    assert months_in_span(short) == [date(2024, 1, 1)]
    assert months_in_span([]) == []


def test_months_in_span_stops_at_the_last_representable_year() -> None:
    recs = [DailyRecord(date=d) for d in year_days(9999)]
    assert recs[-1].date == date(9999, 12, 31)
    assert months_in_span(recs) == [date(9999, m, 1) for m in range(1, 13)]
