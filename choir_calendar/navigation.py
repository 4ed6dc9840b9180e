"""Viewed month and selected date of a calendar view."""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable

from choir_calendar.calendar_logic import (
    DayCell,
    build_grid,
    next_month,
    prev_month,
    validate_year_month,
)
from choir_calendar.errors import InvalidDateError


class NavigationState:
    """Which month a view shows and which day is selected.

    Transitions only touch this object. Selecting a day never moves the viewed
    month, even when the day belongs to a neighbouring month.
    """

    def __init__(self, year: int, month: int, selected: date | None = None,
                 today: Callable[[], date] = date.today) -> None:
        validate_year_month(year, month)
        self._year = year
        self._month = month
        self._selected: date | None = None
        self._today = today
        if selected is not None:
            self.select_date(selected)

    @classmethod
    def for_today(cls, today: Callable[[], date] = date.today) -> "NavigationState":
        """Open on the current month with today selected."""
        now = today()
        return cls(now.year, now.month, selected=now, today=today)

    def __repr__(self) -> str:
        return (f"NavigationState(year={self._year}, month={self._month}, "
                f"selected={self._selected!r})")

    @property
    def viewed_month(self) -> tuple[int, int]:
        return self._year, self._month

    @property
    def selected_date(self) -> date | None:
        return self._selected

    @property
    def today(self) -> date:
        return self._today()

    def _move_to(self, year: int, month: int) -> tuple[int, int]:
        validate_year_month(year, month)
        self._year, self._month = year, month
        return self.viewed_month

    def go_to_previous_month(self) -> tuple[int, int]:
        return self._move_to(*prev_month(self._year, self._month))

    def go_to_next_month(self) -> tuple[int, int]:
        return self._move_to(*next_month(self._year, self._month))

    def go_to_today(self) -> date:
        now = self._today()
        self._year, self._month = now.year, now.month
        self._selected = now
        return now

    def select_date(self, day: date) -> None:
        if not isinstance(day, date):
            raise InvalidDateError(f"Selected date must be a date; got {day!r}.")
        self._selected = day.date() if isinstance(day, datetime) else day

    def grid(self) -> list[DayCell]:
        """Grid cells of the viewed month."""
        return build_grid(self._year, self._month)
