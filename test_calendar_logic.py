from datetime import date

import pytest

from bengali_calendar import BENGALI_MONTHS, BengaliDate
from calendar_logic import (
    GRID_CELLS,
    MatrixCell,
    build_month_matrix,
    compute_month_view,
    compute_west_bengal_month_view,
    matrix_rows,
    next_month,
    prev_month,
    shift_gregorian_months,
    shift_month,
)
from month_starts import MonthStartTable


def _bd(year, month, day):
    return BengaliDate.create(year, month, day)


# --- paging -----------------------------------------------------------------

@pytest.mark.parametrize("year, month, offset, expected", [
    (1432, 8, 0, (1432, 8)),
    (1432, 11, 1, (1433, 0)),
    (1432, 0, -1, (1431, 11)),
    (1432, 5, -18, (1430, 11)),
    (1432, 3, 24, (1434, 3)),
])
def test_shift_month(year, month, offset, expected):
    assert shift_month(year, month, offset) == expected


def test_prev_next_month():
    assert prev_month(1432, 0) == (1431, 11)
    assert next_month(1432, 11) == (1433, 0)
    assert next_month(1432, 4) == (1432, 5)


def test_shift_gregorian_months_clamps_day():
    assert shift_gregorian_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert shift_gregorian_months(date(2026, 1, 1), -1) == date(2025, 12, 1)
    assert shift_gregorian_months(date(2025, 12, 20), 13) == date(2027, 1, 20)


# --- West Bengal views ------------------------------------------------------

def test_poush_in_january_uses_previous_row(month_starts):
    days, first, prev_days, year_key = compute_west_bengal_month_view(month_starts, 8, date(2026, 1, 1))
    assert year_key == 2025
    assert first == 3  # Poush 1 = 2025-12-17, a Wednesday
    assert days == 30
    assert prev_days == 30


def test_poush_in_december_uses_same_row(month_starts):
    *_, year_key = compute_west_bengal_month_view(month_starts, 8, date(2026, 12, 20))
    assert year_key == 2026


def test_west_bengal_view_without_entry():
    assert compute_west_bengal_month_view(None, 8, date(2026, 1, 1)) is None
    assert compute_west_bengal_month_view(MonthStartTable(), 8, date(2026, 1, 1)) is None


def test_month_view_today(month_starts):
    view = compute_month_view(_bd(1432, 8, 16), "west-bengal", month_starts, 0, date(2026, 1, 1))
    assert (view.month, view.year, view.month_name) == (8, 1432, BENGALI_MONTHS[8])
    assert (view.days_in_month, view.first_day_of_week, view.prev_month_days) == (30, 3, 30)
    assert view.today_day == 16


def test_month_view_next_month(month_starts):
    view = compute_month_view(_bd(1432, 8, 16), "india", month_starts, 1, date(2026, 1, 1))
    assert (view.month, view.year) == (9, 1432)
    assert view.days_in_month == 29
    assert view.first_day_of_week == 5  # 2026-01-16, a Friday
    assert view.prev_month_days == 30
    assert view.today_day == 0


def test_month_view_choitro_crosses_rows(month_starts):
    view = compute_month_view(_bd(1432, 8, 16), "west-bengal", month_starts, 3, date(2026, 1, 1))
    assert (view.month, view.year) == (11, 1432)
    assert view.days_in_month == 30
    assert view.first_day_of_week == 1  # 2026-03-16, a Monday
    assert view.prev_month_days == 30


def test_month_view_boishakh_prev_from_previous_row(month_starts):
    view = compute_month_view(_bd(1433, 0, 1), "west-bengal", month_starts, 0, date(2026, 4, 15))
    assert view.days_in_month == 31
    assert view.first_day_of_week == 3  # 2026-04-15, a Wednesday
    assert view.prev_month_days == 30


def test_month_view_without_mapping():
    view = compute_month_view(_bd(1432, 8, 16), "west-bengal", None, 0, date(2026, 1, 1))
    assert view.days_in_month == 30
    assert view.first_day_of_week == 4  # 2026-01-01, a Thursday
    assert view.prev_month_days == 30
    assert view.today_day == 16


def test_month_view_missing_next_sankranti():
    table = {"2025": {"8": "2025-12-16"}}
    view = compute_month_view(_bd(1432, 8, 16), "west-bengal", table, 0, date(2026, 1, 1))
    assert (view.days_in_month, view.first_day_of_week, view.prev_month_days) == (30, 3, 30)


def test_month_view_sankranti_at_date_max():
    table = {"2025": {"8": "9999-12-31"}}
    assert compute_west_bengal_month_view(MonthStartTable.from_mapping(table), 8, date(2025, 12, 20)) is None
    view = compute_month_view(_bd(1432, 8, 1), "west-bengal", table, 0, date(2025, 12, 20))
    assert (view.days_in_month, view.prev_month_days) == (30, 30)
    assert view.first_day_of_week == 1  # 2025-12-01, a Monday


# --- Bangladesh views -------------------------------------------------------

def test_bangladesh_view():
    view = compute_month_view(_bd(1432, 8, 3), "bangladesh", None, 0)
    assert view.days_in_month == 30
    assert view.first_day_of_week == 1  # Poush 1 = 2025-12-15, a Monday
    assert view.prev_month_days == 30
    assert view.today_day == 3


def test_bangladesh_boishakh_prev_is_last_years_choitro():
    view = compute_month_view(_bd(1432, 0, 1), "bangladesh")
    assert view.days_in_month == 31
    assert view.first_day_of_week == 1  # 2025-04-14, a Monday
    assert view.prev_month_days == 30

    view = compute_month_view(_bd(1432, 11, 1), "bangladesh", None, 1)
    assert (view.month, view.year) == (0, 1433)
    assert view.prev_month_days == 32
    assert view.today_day == 0


def test_bangladesh_leap_choitro():
    view = compute_month_view(_bd(1432, 10, 1), "bangladesh", None, 1)
    assert (view.month, view.year, view.days_in_month) == (11, 1432, 32)


def test_bangladesh_ignores_mapping(month_starts):
    assert compute_month_view(_bd(1432, 8, 3), "bangladesh", month_starts) == \
        compute_month_view(_bd(1432, 8, 3), "bangladesh", None)


# --- month matrix -----------------------------------------------------------

def test_matrix_leading_previous_month():
    cells = build_month_matrix(31, 3, 30)
    assert len(cells) == GRID_CELLS
    assert [c.day for c in cells[:3]] == [28, 29, 30]
    assert not any(c.in_month for c in cells[:3])
    assert cells[3] == MatrixCell(1, True)


def test_matrix_trailing_next_month():
    cells = build_month_matrix(30, 0, 31)
    assert cells[0] == MatrixCell(1, True)
    assert cells[29] == MatrixCell(30, True)
    assert cells[30] == MatrixCell(1, False)
    assert cells[41] == MatrixCell(12, False)


def test_matrix_without_previous_month():
    cells = build_month_matrix(30, 2)
    assert cells[:2] == [MatrixCell(0, False), MatrixCell(0, False)]
    assert cells[2] == MatrixCell(1, True)


@pytest.mark.parametrize("days, first, prev, in_month, leading", [
    (0, 0, None, 1, 0),
    (40, 0, None, 32, 0),
    (float("nan"), 0, None, 30, 0),
    ("abc", 9, None, 30, 6),
    (30, -3, 30, 30, 0),
    (30, 6, 0, 30, 6),
])
def test_matrix_sanitizes_inputs(days, first, prev, in_month, leading):
    cells = build_month_matrix(days, first, prev)
    assert len(cells) == GRID_CELLS
    assert sum(c.in_month for c in cells) == in_month
    assert cells[leading] == MatrixCell(1, True)


def test_matrix_short_previous_month():
    cells = build_month_matrix(30, 3, 1)
    assert [c.day for c in cells[:3]] == [0, 0, 1]


def test_matrix_rows():
    rows = matrix_rows(build_month_matrix(32, 6, 30))
    assert len(rows) == 6
    assert all(len(row) == 7 for row in rows)
    assert rows[0][6] == MatrixCell(1, True)
    assert rows[5][2] == MatrixCell(32, True)
