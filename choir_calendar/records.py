"""Source records consumed by the annotation resolver.

The records mirror rows of the choir's data store. The engine never mutates
them; ``from_dict`` accepts the store's own field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from choir_calendar.date_keys import parse_date


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class EventRecord:
    title: str | None
    date: date
    id: Any = None
    description: str | None = None
    location: str | None = None
    time: str | None = None

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "EventRecord":
        return cls(
            title=_text(row.get("title")),
            date=parse_date(row.get("event_date", row.get("date"))),
            id=row.get("id"),
            description=_text(row.get("description")),
            location=_text(row.get("location")),
            time=_text(row.get("time")),
        )


@dataclass(frozen=True)
class HolidayRecord:
    date: date
    name: str | None

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "HolidayRecord":
        return cls(
            date=parse_date(row.get("holiday_date", row.get("date"))),
            name=_text(row.get("name")) or _text(row.get("holiday_name")),
        )


@dataclass(frozen=True)
class SongRecord:
    id: Any
    title: str | None
    date: date
    kind: str | None = None
    link: str | None = None

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "SongRecord":
        return cls(
            id=row.get("id"),
            title=_text(row.get("title")),
            date=parse_date(row.get("singdate", row.get("date"))),
            kind=_text(row.get("type")),
            link=_text(row.get("link")),
        )


@dataclass(frozen=True)
class BirthdayRecord:
    member_id: Any
    name: str | None
    month_day: tuple[int, int]

    @classmethod
    def from_member(cls, row: Mapping[str, Any]) -> "BirthdayRecord":
        """Build from a member row carrying a full ``birth`` date."""
        born = parse_date(row.get("birth"))
        return cls(
            member_id=row.get("id"),
            name=_text(row.get("name")),
            month_day=(born.month, born.day),
        )
