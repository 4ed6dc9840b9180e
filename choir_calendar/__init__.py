"""Month grid and per-day annotation engine for the choir schedule."""

from choir_calendar.annotation_resolver import DEFAULT_CAPS, CellAnnotations, DisplayCaps, resolve
from choir_calendar.calendar_logic import DayCell, MonthMembership, build_grid
from choir_calendar.date_keys import exact_key, month_day_key
from choir_calendar.errors import CalendarError, InvalidDateError, RecordError
from choir_calendar.month_view import CalendarSources, build_month_view, day_detail
from choir_calendar.navigation import NavigationState

__all__ = [
    "CalendarError",
    "CalendarSources",
    "CellAnnotations",
    "DEFAULT_CAPS",
    "DayCell",
    "DisplayCaps",
    "InvalidDateError",
    "MonthMembership",
    "NavigationState",
    "RecordError",
    "build_grid",
    "build_month_view",
    "day_detail",
    "exact_key",
    "month_day_key",
    "resolve",
]
