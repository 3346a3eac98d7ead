"""Shared fixtures: a Sankranti table covering Bengali years 1431-1433."""

import pytest

from month_starts import MonthStartTable

MONTH_STARTS = {
    "2024": {
        "0": "2024-04-14", "1": "2024-05-15", "2": "2024-06-15", "3": "2024-07-16",
        "4": "2024-08-16", "5": "2024-09-16", "6": "2024-10-17", "7": "2024-11-16",
        "8": "2024-12-16", "9": "2025-01-15", "10": "2025-02-14", "11": "2025-03-15",
    },
    "2025": {
        "0": "2025-04-14", "1": "2025-05-15", "2": "2025-06-15", "3": "2025-07-16",
        "4": "2025-08-17", "5": "2025-09-17", "6": "2025-10-17", "7": "2025-11-16",
        "8": "2025-12-16", "9": "2026-01-15", "10": "2026-02-13", "11": "2026-03-15",
    },
    "2026": {
        "0": "2026-04-14", "1": "2026-05-15", "2": "2026-06-15", "3": "2026-07-16",
        "4": "2026-08-17", "5": "2026-09-17", "6": "2026-10-17", "7": "2026-11-16",
        "8": "2026-12-16", "9": "2027-01-14", "10": "2027-02-13", "11": "2027-03-15",
    },
}


@pytest.fixture
def raw_month_starts() -> dict:
    return {year: dict(months) for year, months in MONTH_STARTS.items()}


@pytest.fixture
def month_starts(raw_month_starts) -> MonthStartTable:
    return MonthStartTable.from_mapping(raw_month_starts)
