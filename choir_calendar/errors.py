"""Exceptions raised by the calendar engine."""


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidDateError(CalendarError, ValueError):
    """A year/month/day outside the range the grid builder accepts."""


class RecordError(CalendarError, ValueError):
    """A source record whose date cannot be interpreted."""
