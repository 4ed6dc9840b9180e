"""Canonical lookup keys for exact dates and recurring month/day pairs."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from choir_calendar.errors import RecordError


def exact_key(d: date) -> str:
    """Return the zero-padded ``YYYY-MM-DD`` key for *d*."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def month_day_key(month: int, day: int) -> str:
    """Return the year-independent ``MM-DD`` key used for birthdays."""
    return f"{month:02d}-{day:02d}"


def exact_key_from_parts(year: int, month: int, day: int) -> str:
    """Normalise a (year, month, day) that may spill into a neighbouring month.

    ``(2024, 13, 1)`` is January 2025, ``(2024, 3, 0)`` is the last day of
    February and ``(2024, 1, 32)`` is the 1st of February.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return exact_key(date(year, month, 1) + timedelta(days=day - 1))


def parse_date(value) -> date:
    """Interpret a record's date field.

    Accepts ``date`` / ``datetime`` objects, ``YYYY-MM-DD`` strings and ISO
    datetime strings; the time part, if any, is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise RecordError(f"Unrecognised date value: {value!r}")
