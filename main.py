"""Entry point: prints the Bengali date, festivals and month grid."""

import argparse
import logging
import os
import sys
from datetime import date

from bengali_calendar import (
    DISPLAY_FORMATS,
    bengali_day_name,
    format_bengali_date,
    gregorian_to_bengali,
    weekday_index,
)
from calendar_logic import (
    DAY_ABBR,
    MonthView,
    build_month_matrix,
    compute_month_view,
    matrix_rows,
)
from festivals import festivals_for_month, get_festivals
from month_starts import LOCATIONS, load_month_starts
from numerals import format_number
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bongabdo", description="Show the Bengali (Bongabdo) date and month calendar.",
    )
    parser.add_argument("--date", type=date.fromisoformat, default=None,
                        help="Gregorian date YYYY-MM-DD (default: today)")
    parser.add_argument("--format", choices=DISPLAY_FORMATS, default=None)
    parser.add_argument("--location", choices=LOCATIONS, default=None)
    parser.add_argument("--month-starts", default=None,
                        help="JSON file of Sankranti dates (West Bengal / India)")
    parser.add_argument("--offset", type=int, default=0,
                        help="page the month calendar by N months")
    parser.add_argument("--latin-digits", action="store_true")
    parser.add_argument("--no-calendar", action="store_true")
    parser.add_argument("--no-festivals", action="store_true")
    parser.add_argument("--gregorian", action="store_true")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--save", action="store_true",
                        help="store the effective options as the new defaults")
    return parser.parse_args(argv)


def render_month(view: MonthView, use_bengali_numerals: bool) -> list[str]:
    """Return the month grid as text lines; today is starred, festival days marked '+'."""
    festival_days = festivals_for_month(view.month)
    cells = build_month_matrix(view.days_in_month, view.first_day_of_week, view.prev_month_days)

    lines = [f"{view.month_name} {format_number(view.year, use_bengali_numerals)}"]
    lines.append(" ".join(f"{d:>3}" for d in DAY_ABBR))
    for week in matrix_rows(cells):
        row = []
        for cell in week:
            if not cell.in_month:
                row.append("   ")
                continue
            mark = " "
            if cell.day == view.today_day:
                mark = "*"
            elif cell.day in festival_days:
                mark = "+"
            row.append(f"{format_number(cell.day, use_bengali_numerals):>2}{mark}")
        lines.append(" ".join(row).rstrip())
    return lines


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    debug = args.debug or bool(os.environ.get("BONGABDO_DEBUG"))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[Bongabdo] %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    location = args.location or settings["location"]
    fmt = args.format or settings["display_format"]
    use_bengali_numerals = settings["use_bengali_numerals"] and not args.latin_digits
    show_festivals = settings["show_festivals"] and not args.no_festivals
    show_calendar = settings["show_month_calendar"] and not args.no_calendar
    show_gregorian = settings["show_gregorian"] or args.gregorian

    if args.save:
        settings.update(
            location=location,
            display_format=fmt,
            use_bengali_numerals=use_bengali_numerals,
            show_festivals=show_festivals,
            show_month_calendar=show_calendar,
            show_gregorian=show_gregorian,
            month_starts_path=args.month_starts or settings["month_starts_path"],
        )
        save_settings(settings)

    today = args.date or date.today()
    month_starts = load_month_starts(args.month_starts or settings["month_starts_path"], location)
    logger.debug("Converting %s (location=%s, table=%r)", today, location, month_starts)

    bengali = gregorian_to_bengali(today.year, today.month, today.day, month_starts, location)
    day_name = bengali_day_name(weekday_index(today))
    out = [format_bengali_date(bengali, day_name, fmt, use_bengali_numerals)]

    if show_gregorian:
        out.append(today.strftime("%A, %B %d, %Y"))
    if show_festivals:
        festivals = get_festivals(bengali.month, bengali.day)
        if festivals:
            out.append(", ".join(festivals))
    if show_calendar:
        view = compute_month_view(bengali, location, month_starts, args.offset, today)
        out.append("")
        out.extend(render_month(view, use_bengali_numerals))

    sys.stdout.write("\n".join(out) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
