"""Gregorian to Bengali (Bongabdo) conversion and date formatting.

Pure logic: no UI, no clock, no module state.  Conversion tries, in order:

1. the Sankranti month-start table (West Bengal / India),
2. fixed arithmetic with Pohela Boishakh on April 14 (Bangladesh),
3. an April 14 heuristic that always succeeds.

Each strategy returns a BengaliDate or None; the first result wins.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta

from month_starts import BANGLADESH, MONTHS_PER_YEAR, MonthStartTable
from numerals import format_number

logger = logging.getLogger(__name__)

BENGALI_MONTHS = [
    "বৈশাখ",     # Boishakh
    "জ্যৈষ্ঠ",     # Joishtho
    "আষাঢ়",      # Asharh
    "শ্রাবণ",     # Srabon
    "ভাদ্র",      # Bhadro
    "আশ্বিন",     # Ashwin
    "কার্তিক",    # Kartik
    "অগ্রহায়ণ",   # Ogrohayon
    "পৌষ",       # Poush
    "মাঘ",       # Magh
    "ফাল্গুন",    # Falgun
    "চৈত্র",      # Choitro
]

# 0=Sunday
BENGALI_DAYS = [
    "রবিবার",
    "সোমবার",
    "মঙ্গলবার",
    "বুধবার",
    "বৃহস্পতিবার",
    "শুক্রবার",
    "শনিবার",
]

DISPLAY_FORMATS = ("full", "short", "date-only", "compact")

ERA_OFFSET = 593
NEW_YEAR_MONTH, NEW_YEAR_DAY = 4, 14
MAX_MONTH_DAYS = 32
CHOITRO = 11

_MONTH_LENGTHS = (31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30, 30)


@dataclass(frozen=True)
class BengaliDate:
    year: int
    month: int
    day: int
    month_name: str

    @classmethod
    def create(cls, year: int, month: int, day: int) -> BengaliDate:
        return cls(year, month, day, BENGALI_MONTHS[month])


# --- fixed calendar arithmetic ----------------------------------------------

def is_bengali_leap_year(year: int) -> bool:
    """Gregorian leap rule applied to the Bengali year number."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def month_lengths(year: int) -> list[int]:
    """Return the 12 fixed month lengths for a Bengali year (Choitro 32 in leap years)."""
    lengths = list(_MONTH_LENGTHS)
    if is_bengali_leap_year(year):
        lengths[CHOITRO] = MAX_MONTH_DAYS
    return lengths


def pohela_boishakh(bengali_year: int) -> date:
    """Return the Gregorian date of Boishakh 1 (always April 14)."""
    return date(bengali_year + ERA_OFFSET, NEW_YEAR_MONTH, NEW_YEAR_DAY)


def bengali_month_start(bengali_year: int, month: int) -> date:
    """Return the Gregorian date of day 1 of a month under the fixed calendar."""
    offset = sum(month_lengths(bengali_year)[:month])
    return pohela_boishakh(bengali_year) + timedelta(days=offset)


def weekday_index(d: date) -> int:
    """Return the day of week with 0=Sunday .. 6=Saturday."""
    return d.isoweekday() % 7


def bengali_day_name(weekday: int) -> str:
    return BENGALI_DAYS[weekday % 7]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _safe_date(year: int, month: int, day: int) -> date:
    """Pull out-of-range components back into a real calendar date."""
    year = _clamp(year, 2, 9998)
    month = _clamp(month, 1, 12)
    day = _clamp(day, 1, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _walk_months(bengali_year: int, elapsed: int) -> BengaliDate:
    """Locate the month/day lying ``elapsed`` days after Boishakh 1."""
    lengths = month_lengths(bengali_year)
    month = 0
    day = elapsed + 1
    while month < CHOITRO and day > lengths[month]:
        day -= lengths[month]
        month += 1
    return BengaliDate.create(bengali_year, month, _clamp(day, 1, lengths[month]))


# --- conversion strategies --------------------------------------------------

def _from_month_starts(target: date, table: MonthStartTable | None) -> BengaliDate | None:
    """Table-driven conversion; None when the table cannot place the date."""
    if not table:
        return None

    year = target.year
    current_boishakh = table.sankranti(year, 0)
    prev_boishakh = table.sankranti(year - 1, 0)

    # The Sankranti day itself still belongs to the previous month (strict >).
    if current_boishakh is not None:
        if target > current_boishakh:
            row_year = year
        elif prev_boishakh is not None:
            row_year = year - 1
        else:
            return None
    elif prev_boishakh is not None and target < date(year, NEW_YEAR_MONTH, NEW_YEAR_DAY):
        # This year's row is missing but Jan-Apr still belongs to last year's row.
        row_year = year - 1
    else:
        return None

    bengali_year = row_year - ERA_OFFSET
    for month in range(MONTHS_PER_YEAR):
        start = table.sankranti(row_year, month)
        if start is None:
            continue
        if month < CHOITRO:
            end = table.sankranti(row_year, month + 1)
        else:
            end = table.sankranti(row_year + 1, 0)

        if end is not None:
            if start < target <= end:
                length = (end - start).days
                break
        elif month == CHOITRO and target > start:
            length = month_lengths(bengali_year)[CHOITRO]
            break
    else:
        return None

    day = _clamp((target - start).days, 1, max(1, length))
    return BengaliDate.create(bengali_year, month, _clamp(day, 1, MAX_MONTH_DAYS))


def _fixed_arithmetic(target: date, table: MonthStartTable | None = None) -> BengaliDate:
    """Bangladesh calendar: Boishakh 1 is April 14, month lengths are fixed."""
    bengali_year = target.year - ERA_OFFSET
    if target < pohela_boishakh(bengali_year):
        bengali_year -= 1
    return _walk_months(bengali_year, (target - pohela_boishakh(bengali_year)).days)


def _heuristic(target: date, table: MonthStartTable | None = None) -> BengaliDate:
    """Fallback: treat April 14 of the Gregorian year as the new year."""
    new_year = date(target.year, NEW_YEAR_MONTH, NEW_YEAR_DAY)
    if target >= new_year:
        bengali_year = target.year - ERA_OFFSET
    else:
        bengali_year = target.year - 1 - ERA_OFFSET
        new_year = date(target.year - 1, NEW_YEAR_MONTH, NEW_YEAR_DAY)
    return _walk_months(bengali_year, (target - new_year).days)


_Strategy = Callable[[date, MonthStartTable | None], BengaliDate | None]


def _strategies(location: str | None) -> list[_Strategy]:
    if location == BANGLADESH:
        return [_fixed_arithmetic, _heuristic]
    return [_from_month_starts, _heuristic]


def gregorian_to_bengali(
    year: int,
    month: int,
    day: int,
    month_starts: MonthStartTable | dict | None = None,
    location: str | None = None,
) -> BengaliDate:
    """Convert a Gregorian date (1-based month) to a Bengali date.

    ``month_starts`` may be a MonthStartTable or the raw JSON mapping; it is
    ignored for Bangladesh.  Missing or malformed table data falls back to the
    April 14 heuristic instead of raising.
    """
    target = _safe_date(year, month, day)
    table = None if location == BANGLADESH else MonthStartTable.coerce(month_starts)

    for strategy in _strategies(location):
        result = strategy(target, table)
        if result is not None:
            return result
        if table:
            logger.debug("No month start entry covers %s; falling back", target)
    # The heuristic never declines.
    return _heuristic(target)


# --- formatting -------------------------------------------------------------

def format_bengali_date(
    bengali_date: BengaliDate,
    day_name: str,
    fmt: str = "full",
    use_bengali_numerals: bool = True,
) -> str:
    """Render a Bengali date; unknown formats render as ``full``."""
    day = format_number(bengali_date.day, use_bengali_numerals)
    year = format_number(bengali_date.year, use_bengali_numerals)

    if fmt == "short":
        return f"{day} {bengali_date.month_name}"
    if fmt == "date-only":
        return f"{day} {bengali_date.month_name} {year}"
    if fmt == "compact":
        month = format_number(bengali_date.month + 1, use_bengali_numerals)
        return f"{day}/{month}/{year}"
    return f"{day_name}, {day} {bengali_date.month_name} {year}"
