"""Annotated month grid handed to a presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, NamedTuple, Sequence

from choir_calendar.annotation_resolver import (
    DEFAULT_CAPS,
    CellAnnotations,
    DisplayCaps,
    holiday_label,
    resolve,
)
from choir_calendar.calendar_logic import DayCell, MonthMembership
from choir_calendar.date_keys import exact_key, month_day_key
from choir_calendar.navigation import NavigationState


@dataclass(frozen=True)
class CalendarSources:
    """A fully loaded snapshot of the four lookup tables."""

    events_by_date: Mapping[str, Sequence[Any]] = field(default_factory=dict)
    holidays_by_date: Mapping[str, Any] = field(default_factory=dict)
    songs_by_date: Mapping[str, Sequence[Any]] = field(default_factory=dict)
    birthdays_by_month_day: Mapping[str, Sequence[Any]] = field(default_factory=dict)


class AnnotatedCell(NamedTuple):
    cell: DayCell
    annotations: CellAnnotations
    is_today: bool
    is_selected: bool

    @property
    def is_weekend(self) -> bool:
        return self.cell.date.weekday() >= 5


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    selected_date: date | None
    cells: tuple[AnnotatedCell, ...]

    def weeks(self) -> list[tuple[AnnotatedCell, ...]]:
        """The cells in rows of seven, Sunday first."""
        return [self.cells[i:i + 7] for i in range(0, len(self.cells), 7)]

    def current_month_cells(self) -> list[AnnotatedCell]:
        return [c for c in self.cells if c.cell.membership is MonthMembership.CURRENT]


@dataclass(frozen=True)
class DayDetail:
    """Everything scheduled on one date, without display caps."""

    date: date
    holiday_name: str | None
    events: tuple[Any, ...]
    songs: tuple[Any, ...]
    birthdays: tuple[Any, ...]

    @property
    def is_empty(self) -> bool:
        return not (self.holiday_name or self.events or self.songs or self.birthdays)


def build_month_view(state: NavigationState, sources: CalendarSources,
                     caps: DisplayCaps = DEFAULT_CAPS) -> MonthView:
    today = state.today
    selected = state.selected_date
    cells = tuple(
        AnnotatedCell(
            cell=cell,
            annotations=resolve(
                cell,
                sources.events_by_date,
                sources.holidays_by_date,
                sources.songs_by_date,
                sources.birthdays_by_month_day,
                caps,
            ),
            is_today=cell.date == today,
            is_selected=cell.date == selected,
        )
        for cell in state.grid()
    )
    year, month = state.viewed_month
    return MonthView(year=year, month=month, selected_date=selected, cells=cells)


def day_detail(day: date, sources: CalendarSources) -> DayDetail:
    key = exact_key(day)
    holiday = None
    if key in sources.holidays_by_date:
        holiday = holiday_label(sources.holidays_by_date[key])
    return DayDetail(
        date=day,
        holiday_name=holiday,
        events=tuple(sources.events_by_date.get(key, ())),
        songs=tuple(sources.songs_by_date.get(key, ())),
        birthdays=tuple(sources.birthdays_by_month_day.get(month_day_key(day.month, day.day), ())),
    )
