"""Pure Bengali month-view and month-grid calculations, no UI dependencies."""

from __future__ import annotations

import calendar
import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from bengali_calendar import (
    BENGALI_MONTHS,
    CHOITRO,
    MAX_MONTH_DAYS,
    BengaliDate,
    bengali_month_start,
    month_lengths,
    weekday_index,
)
from month_starts import BANGLADESH, MonthStartTable

logger = logging.getLogger(__name__)

DAY_ABBR = ["S", "M", "T", "W", "T", "F", "S"]

GRID_CELLS = 42
DEFAULT_MONTH_DAYS = 30


@dataclass(frozen=True)
class MatrixCell:
    day: int
    in_month: bool


@dataclass(frozen=True)
class MonthView:
    month: int
    year: int
    month_name: str
    days_in_month: int
    first_day_of_week: int
    prev_month_days: int
    today_day: int


# --- paging -----------------------------------------------------------------

def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Return (year, month) for a Bengali month ``offset`` months away."""
    years, month = divmod(month + offset, 12)
    return year + years, month


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one Bengali month earlier."""
    return shift_month(year, month, -1)


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one Bengali month later."""
    return shift_month(year, month, 1)


def shift_gregorian_months(d: date, offset: int) -> date:
    """Move a Gregorian date by whole months, clamping to the month's last day."""
    years, month0 = divmod(d.month - 1 + offset, 12)
    year = d.year + years
    day = min(d.day, calendar.monthrange(year, month0 + 1)[1])
    return date(year, month0 + 1, day)


# --- month views ------------------------------------------------------------

def _days_between(start: date | None, end: date | None) -> int:
    """Sankranti-to-Sankranti month length, 30 when it cannot be resolved."""
    if start is None or end is None:
        return DEFAULT_MONTH_DAYS
    days = (end - start).days
    if days <= 0:
        return DEFAULT_MONTH_DAYS
    return min(days, MAX_MONTH_DAYS)


def compute_west_bengal_month_view(
    table: MonthStartTable | None, month: int, anchor: date,
) -> tuple[int, int, int, int] | None:
    """Return (days_in_month, first_day_of_week, prev_month_days, year_key).

    ``anchor`` is a Gregorian date near the month being viewed.  The table row
    is the one whose Sankranti for ``month`` is the latest on or before the
    anchor (January dates of Poush belong to the previous year's row); failing
    that, the first candidate row holding the month.  Returns None when no
    candidate row has the month at all, or its day 1 is past ``date.max``.
    """
    if not table:
        return None

    candidates = [anchor.year, anchor.year - 1, anchor.year + 1]

    year_key: int | None = None
    best: date | None = None
    for y in candidates:
        start = table.sankranti(y, month)
        if start is None:
            continue
        if start <= anchor and (best is None or start > best):
            best, year_key = start, y

    if year_key is None:
        year_key = next((y for y in candidates if table.sankranti(y, month)), None)
    if year_key is None:
        return None

    month_start = table.sankranti(year_key, month)
    if month == CHOITRO:
        next_start = table.sankranti(year_key + 1, 0)
    else:
        next_start = table.sankranti(year_key, month + 1)
    if month == 0:
        prev_start = table.sankranti(year_key - 1, CHOITRO)
    else:
        prev_start = table.sankranti(year_key, month - 1)

    try:
        day_one = month_start + timedelta(days=1)
    except OverflowError:
        logger.debug("Sankranti %s has no representable day 1", month_start)
        return None

    days_in_month = _days_between(month_start, next_start)
    first_day_of_week = weekday_index(day_one)
    prev_month_days = _days_between(prev_start, month_start)
    return days_in_month, first_day_of_week, prev_month_days, year_key


def _bangladesh_month_view(year: int, month: int, today_day: int) -> MonthView:
    days_in_month = month_lengths(year)[month]
    first_day_of_week = weekday_index(bengali_month_start(year, month))
    p_year, p_month = prev_month(year, month)
    prev_month_days = month_lengths(p_year)[p_month]
    return MonthView(month, year, BENGALI_MONTHS[month], days_in_month,
                     first_day_of_week, prev_month_days, today_day)


def compute_month_view(
    base: BengaliDate,
    location: str,
    month_starts: MonthStartTable | dict | None = None,
    offset: int = 0,
    today: date | None = None,
) -> MonthView:
    """Return the month view ``offset`` months away from ``base``.

    ``today`` is the Gregorian date ``base`` was converted from; the West
    Bengal view pages a Gregorian anchor alongside the Bengali month so the
    right table row is chosen.
    """
    year, month = shift_month(base.year, base.month, offset)
    today_day = base.day if offset == 0 else 0

    if location == BANGLADESH:
        return _bangladesh_month_view(year, month, today_day)

    anchor = shift_gregorian_months(today or date.today(), offset)
    table = MonthStartTable.coerce(month_starts)
    resolved = compute_west_bengal_month_view(table, month, anchor)
    if resolved is None:
        logger.debug("No month start entry for month %d near %s; using defaults", month, anchor)
        first_day_of_week = weekday_index(anchor.replace(day=1))
        return MonthView(month, year, BENGALI_MONTHS[month], DEFAULT_MONTH_DAYS,
                         first_day_of_week, DEFAULT_MONTH_DAYS, today_day)

    days_in_month, first_day_of_week, prev_month_days, _year_key = resolved
    return MonthView(month, year, BENGALI_MONTHS[month], days_in_month,
                     first_day_of_week, prev_month_days, today_day)


# --- month grid -------------------------------------------------------------

def _sanitize(value: Any, low: int, high: int, default: int | None) -> int | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return max(low, min(int(number), high))


def build_month_matrix(
    days_in_month: Any,
    first_day_of_week: Any,
    prev_month_days: Any = None,
) -> list[MatrixCell]:
    """Return a 6×7 grid (42 cells, row-major, weeks starting Sunday).

    Leading cells hold the tail of the previous month when its length is
    known, otherwise day 0.  Trailing cells number the next month from 1.
    """
    days = _sanitize(days_in_month, 1, MAX_MONTH_DAYS, DEFAULT_MONTH_DAYS)
    first = _sanitize(first_day_of_week, 0, 6, 0)
    prev = _sanitize(prev_month_days, 1, MAX_MONTH_DAYS, None)

    cells: list[MatrixCell] = []
    if prev:
        cells.extend(MatrixCell(max(d, 0), False) for d in range(prev - first + 1, prev + 1))
    else:
        cells.extend(MatrixCell(0, False) for _ in range(first))

    cells.extend(MatrixCell(d, True) for d in range(1, days + 1))

    next_day = 1
    while len(cells) < GRID_CELLS:
        cells.append(MatrixCell(next_day, False))
        next_day += 1
    return cells[:GRID_CELLS]


def matrix_rows(cells: list[MatrixCell]) -> list[list[MatrixCell]]:
    """Split a flat grid into weeks of 7."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
