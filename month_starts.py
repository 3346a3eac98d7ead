"""Sankranti month-start table used by the West Bengal / India calendar.

The table comes from an external JSON resource keyed by Gregorian year, e.g.::

    {"2025": {"0": "2025-04-14", "1": "2025-05-15", ..., "11": "2026-03-15"}}

Each value is the Sankranti date of a Bengali month.  That Gregorian day still
belongs to the previous month; day 1 is the following day.  Raw data is parsed
once here into typed rows so the calendar code never handles strings.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

logger = logging.getLogger(__name__)

WEST_BENGAL = "west-bengal"
INDIA = "india"
BANGLADESH = "bangladesh"
LOCATIONS = (WEST_BENGAL, BANGLADESH, INDIA)

MONTHS_PER_YEAR = 12


def parse_date(value: Any) -> date | None:
    """Parse a ``YYYY-MM-DD`` string, returning None when malformed."""
    if not isinstance(value, str):
        return None
    parts = value.strip().split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None


def _parse_key(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    try:
        return int(str(key).strip())
    except ValueError:
        return None


class MonthStartTable:
    """Read-only lookup: Gregorian year -> 12 optional Sankranti dates."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Mapping[int, tuple[date | None, ...]] | None = None) -> None:
        self._rows: dict[int, tuple[date | None, ...]] = dict(rows or {})

    @classmethod
    def from_mapping(cls, raw: Any) -> MonthStartTable:
        """Build a table from the raw JSON structure.

        Anything that does not fit (bad year keys, non-object rows, month
        indices outside 0-11, unparsable dates) is dropped, so the affected
        months simply read as missing.
        """
        if not isinstance(raw, Mapping):
            logger.debug("Month starts mapping is not an object: %r", type(raw).__name__)
            return cls()

        rows: dict[int, tuple[date | None, ...]] = {}
        for year_key, months in raw.items():
            year = _parse_key(year_key)
            if year is None or not isinstance(months, Mapping):
                logger.debug("Skipping month starts row %r", year_key)
                continue
            entries: list[date | None] = [None] * MONTHS_PER_YEAR
            for month_key, value in months.items():
                month = _parse_key(month_key)
                if month is None or not 0 <= month < MONTHS_PER_YEAR:
                    logger.debug("Skipping month key %r in row %s", month_key, year)
                    continue
                entries[month] = parse_date(value)
                if entries[month] is None:
                    logger.debug("Unparsable Sankranti date %r for %s/%s", value, year, month)
            rows[year] = tuple(entries)
        return cls(rows)

    @classmethod
    def coerce(cls, value: Any) -> MonthStartTable | None:
        """Accept a table, a raw mapping or None."""
        if value is None or isinstance(value, cls):
            return value
        return cls.from_mapping(value)

    def sankranti(self, year: int, month: int) -> date | None:
        """Return the Sankranti date recorded for (Gregorian year row, Bengali month)."""
        row = self._rows.get(year)
        if row is None or not 0 <= month < MONTHS_PER_YEAR:
            return None
        return row[month]

    def year_entries(self, year: int) -> tuple[date | None, ...]:
        return self._rows.get(year, (None,) * MONTHS_PER_YEAR)

    def years(self) -> list[int]:
        return sorted(self._rows)

    def __contains__(self, year: object) -> bool:
        return year in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"MonthStartTable(years={self.years()!r})"


def load_month_starts(path: str | None, location: str) -> MonthStartTable | None:
    """Load the month-start table for a location, or None when unavailable.

    Bangladesh uses the fixed calendar and never reads the file.
    """
    if location == BANGLADESH:
        return None
    if not path:
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.warning("Month starts file not found: %s", path)
        return None
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Could not read month starts file %s: %s", path, exc)
        return None

    if not isinstance(raw, dict):
        logger.warning("Month starts file %s has invalid structure", path)
        return None

    table = MonthStartTable.from_mapping(raw)
    logger.debug("Loaded month starts for %d years from %s", len(table), path)
    return table
