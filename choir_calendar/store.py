"""Load a local snapshot of the calendar's data sources from JSON files."""

from __future__ import annotations

import json
import logging
from typing import Iterable

from choir_calendar.holiday_sources import builtin_holidays_by_date, merge_holiday_maps
from choir_calendar.indexing import index_birthdays, index_events, index_holidays, index_songs
from choir_calendar.month_view import CalendarSources

logger = logging.getLogger(__name__)


def load_json_records(path: str | None) -> list[dict]:
    """Return the objects of a JSON array file; ``[]`` if it cannot be read."""
    if not path:
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Could not load %s: %s", path, exc)
        return []
    if not isinstance(data, list):
        logger.error("Could not load %s: expected a JSON array", path)
        return []
    return [row for row in data if isinstance(row, dict)]


def load_sources(settings: dict, years: Iterable[int]) -> CalendarSources:
    """Read and index every configured data file.

    Holidays from the data file are declared before the built-in registry, so
    they win when both name the same date.
    """
    files = settings.get("data_files", {})
    holiday_maps = [index_holidays(load_json_records(files.get("holidays")))]
    if settings.get("builtin_holidays", True):
        holiday_maps.append(builtin_holidays_by_date(years, settings.get("holidays")))

    sources = CalendarSources(
        events_by_date=index_events(load_json_records(files.get("events"))),
        holidays_by_date=merge_holiday_maps(*holiday_maps),
        songs_by_date=index_songs(load_json_records(files.get("songs"))),
        birthdays_by_month_day=index_birthdays(load_json_records(files.get("members"))),
    )
    logger.debug("Loaded %d event dates, %d holidays, %d song dates, %d birthday dates",
                 len(sources.events_by_date), len(sources.holidays_by_date),
                 len(sources.songs_by_date), len(sources.birthdays_by_month_day))
    return sources
