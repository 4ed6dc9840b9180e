"""Pure calendar calculations with no UI dependencies."""

from __future__ import annotations

import calendar
import enum
from datetime import MAXYEAR, MINYEAR, date
from typing import NamedTuple

from choir_calendar.errors import InvalidDateError

GRID_CELLS = 42  # 6 weeks × 7 days

WEEKDAY_LABELS: dict[str, tuple[str, ...]] = {
    "ko": ("일", "월", "화", "수", "목", "금", "토"),
    "en": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
}


class MonthMembership(enum.Enum):
    PREVIOUS = "previous"
    CURRENT = "current"
    NEXT = "next"


class DayCell(NamedTuple):
    """One slot of the month grid."""

    day: int
    membership: MonthMembership
    date: date

    @property
    def in_current_month(self) -> bool:
        return self.membership is MonthMembership.CURRENT


def weekday_labels(locale: str = "ko") -> tuple[str, ...]:
    """Return Sunday-first weekday labels, falling back to Korean."""
    return WEEKDAY_LABELS.get(locale, WEEKDAY_LABELS["ko"])


def validate_year_month(year: int, month: int) -> None:
    """Raise InvalidDateError unless (year, month) is a real calendar month."""
    if not isinstance(year, int) or not isinstance(month, int):
        raise InvalidDateError(f"Year and month must be integers; got {year!r}, {month!r}.")
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month must be in 1..12; got {month}.")
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateError(f"Year must be in {MINYEAR}..{MAXYEAR}; got {year}.")


def days_in_month(year: int, month: int) -> int:
    """Number of days in the month, leap years included."""
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month with 0=Sunday … 6=Saturday."""
    return (calendar.weekday(year, month, 1) + 1) % 7


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def build_grid(year: int, month: int) -> list[DayCell]:
    """Return the 42 cells shown for the given month.

    Leading cells are the trailing days of the previous month (none when the
    1st is a Sunday), followed by every day of the month and then as many days
    of the next month as needed to reach 42. Always 6 rows so the calendar
    height stays constant.
    """
    validate_year_month(year, month)
    lead = first_weekday(year, month)
    count = days_in_month(year, month)
    py, pm = prev_month(year, month)
    ny, nm = next_month(year, month)

    try:
        cells: list[DayCell] = []
        prev_count = days_in_month(py, pm)
        for day in range(prev_count - lead + 1, prev_count + 1):
            cells.append(DayCell(day, MonthMembership.PREVIOUS, date(py, pm, day)))
        for day in range(1, count + 1):
            cells.append(DayCell(day, MonthMembership.CURRENT, date(year, month, day)))
        for day in range(1, GRID_CELLS - len(cells) + 1):
            cells.append(DayCell(day, MonthMembership.NEXT, date(ny, nm, day)))
    except ValueError as exc:
        raise InvalidDateError(
            f"Grid for {year:04d}-{month:02d} leaves the supported date range."
        ) from exc
    return cells
