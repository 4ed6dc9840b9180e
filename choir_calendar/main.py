"""Entry point: loads the data snapshot and prints the annotated month."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import MAXYEAR, MINYEAR, date

from rich.console import Console

from choir_calendar.date_keys import parse_date
from choir_calendar.errors import CalendarError
from choir_calendar.logging_utils import configure_logging
from choir_calendar.month_view import build_month_view, day_detail
from choir_calendar.navigation import NavigationState
from choir_calendar.settings import display_caps_from, load_settings
from choir_calendar.store import load_sources
from choir_calendar.text_view import render_detail, render_month

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="choir-calendar",
                                description="Print the choir schedule for a month.")
    p.add_argument("--year", type=int, help="year to show (default: this year)")
    p.add_argument("--month", type=int, help="month to show, 1-12 (default: this month)")
    p.add_argument("--offset", type=int, default=0,
                   help="move this many months forward (negative: backward)")
    p.add_argument("--select", help="date to select and list in full (YYYY-MM-DD)")
    p.add_argument("--settings", help="settings file (default: ~/.choir-calendar-settings.json)")
    for kind in ("events", "holidays", "songs", "members"):
        p.add_argument(f"--{kind}", help=f"JSON file with {kind} rows")
    p.add_argument("--locale", choices=["ko", "en"], help="weekday label language")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _initial_state(args: argparse.Namespace, today: date) -> NavigationState:
    if args.year is None and args.month is None:
        state = NavigationState.for_today(lambda: today)
    else:
        state = NavigationState(
            today.year if args.year is None else args.year,
            today.month if args.month is None else args.month,
            today=lambda: today,
        )
    for _ in range(abs(args.offset)):
        if args.offset > 0:
            state.go_to_next_month()
        else:
            state.go_to_previous_month()
    if args.select:
        state.select_date(parse_date(args.select))
    return state


def main(argv: list[str] | None = None, console: Console | None = None,
         today: date | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.settings)
    for kind in ("events", "holidays", "songs", "members"):
        if getattr(args, kind):
            settings["data_files"][kind] = getattr(args, kind)
    if args.locale:
        settings["locale"] = args.locale
    configure_logging("DEBUG" if args.verbose else settings["log_level"])

    console = console or Console()
    try:
        state = _initial_state(args, today or date.today())
        year, month = state.viewed_month
        years = [y for y in (year - 1, year, year + 1) if MINYEAR <= y <= MAXYEAR]
        sources = load_sources(settings, years=years)
        view = build_month_view(state, sources, display_caps_from(settings))
    except CalendarError as exc:
        logger.error("%s", exc)
        return 2

    console.print(render_month(view, settings["locale"]))
    if state.selected_date is not None:
        console.print(render_detail(day_detail(state.selected_date, sources)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
