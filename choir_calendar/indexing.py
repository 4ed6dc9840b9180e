"""Build the date-keyed lookup tables the annotation resolver reads.

Rows may be record objects or raw dicts straight from the data store. Source
order is preserved inside each date bucket.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, TypeVar

from choir_calendar.date_keys import exact_key, month_day_key
from choir_calendar.errors import RecordError
from choir_calendar.records import BirthdayRecord, EventRecord, HolidayRecord, SongRecord

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _coerce(rows: Iterable[Any], record_type: type[R],
            parse: Callable[[Mapping[str, Any]], R], what: str) -> list[R]:
    records: list[R] = []
    for row in rows:
        if isinstance(row, record_type):
            records.append(row)
            continue
        if not isinstance(row, Mapping):
            logger.warning("Skipping %s: unsupported row %r", what, row)
            continue
        try:
            records.append(parse(row))
        except RecordError as exc:
            logger.warning("Skipping %s: %s", what, exc)
    return records


def index_events(rows: Iterable[Any]) -> dict[str, list[EventRecord]]:
    by_date: dict[str, list[EventRecord]] = {}
    for event in _coerce(rows, EventRecord, EventRecord.from_dict, "event"):
        by_date.setdefault(exact_key(event.date), []).append(event)
    return by_date


def index_holidays(rows: Iterable[Any]) -> dict[str, str | None]:
    """Holiday name per date; a later row for an already named date is ignored."""
    by_date: dict[str, str | None] = {}
    for holiday in _coerce(rows, HolidayRecord, HolidayRecord.from_dict, "holiday"):
        key = exact_key(holiday.date)
        if key in by_date:
            logger.debug("Duplicate holiday on %s: keeping %r over %r",
                          key, by_date[key], holiday.name)
            continue
        by_date[key] = holiday.name
    return by_date


def index_songs(rows: Iterable[Any]) -> dict[str, list[SongRecord]]:
    dated = []
    for row in rows:
        if isinstance(row, Mapping) and not row.get("singdate", row.get("date")):
            logger.debug("Song %r has no date, not shown on the calendar", row.get("id"))
            continue
        dated.append(row)
    by_date: dict[str, list[SongRecord]] = {}
    for song in _coerce(dated, SongRecord, SongRecord.from_dict, "song"):
        by_date.setdefault(exact_key(song.date), []).append(song)
    return by_date


def index_birthdays(rows: Iterable[Any]) -> dict[str, list[BirthdayRecord]]:
    """Birthdays by month/day; member rows without a birth date are skipped."""
    members = [row for row in rows
               if not isinstance(row, Mapping) or row.get("birth")]
    by_month_day: dict[str, list[BirthdayRecord]] = {}
    for birthday in _coerce(members, BirthdayRecord, BirthdayRecord.from_member, "member"):
        month, day = birthday.month_day
        by_month_day.setdefault(month_day_key(month, day), []).append(birthday)
    return by_month_day
