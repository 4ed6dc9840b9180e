"""Per-cell annotation lookup and display truncation.

Four sources are consulted for each grid cell:

* holidays and events, keyed by exact date, merged into one list with the
  holiday first;
* songs, keyed by exact date;
* birthdays, keyed by month/day so they recur every year.

Each category is cut to its display cap. Songs and birthdays report how many
items were cut so the caller can show a "+N" marker; the holiday/event list
does not unless ``DisplayCaps.event_overflow`` is switched on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple, Sequence

from choir_calendar.calendar_logic import DayCell
from choir_calendar.date_keys import exact_key, month_day_key

FALLBACK_TITLE = "제목 없음"
FALLBACK_NAME = "이름 없음"
FALLBACK_HOLIDAY = "공휴일"


@dataclass(frozen=True)
class DisplayCaps:
    """How many items of each category a cell shows."""

    events: int = 2
    songs: int = 3
    birthdays: int = 2
    event_overflow: bool = False

    def __post_init__(self) -> None:
        for name in ("events", "songs", "birthdays"):
            if getattr(self, name) < 0:
                raise ValueError(f"Display cap {name!r} must be >= 0.")


DEFAULT_CAPS = DisplayCaps()


class DisplayItem(NamedTuple):
    kind: str  # "holiday", "event", "song" or "birthday"
    label: str
    source: Any = None


@dataclass(frozen=True)
class CellAnnotations:
    holiday_name: str | None = None
    events: tuple[DisplayItem, ...] = ()
    songs: tuple[DisplayItem, ...] = ()
    birthdays: tuple[DisplayItem, ...] = ()
    overflow_counts: dict[str, int] = field(default_factory=dict)

    @property
    def is_holiday(self) -> bool:
        return self.holiday_name is not None

    @property
    def is_empty(self) -> bool:
        return not (self.events or self.songs or self.birthdays)


def record_field(record: Any, name: str) -> Any:
    """Read *name* from a record object or a plain mapping."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _label(record: Any, name: str, fallback: str) -> str:
    value = record_field(record, name)
    if value is None:
        return fallback
    text = str(value).strip()
    return text or fallback


def _truncate(items: Sequence[DisplayItem], cap: int) -> tuple[tuple[DisplayItem, ...], int]:
    shown = tuple(items[:cap])
    return shown, len(items) - len(shown)


def holiday_label(name: Any) -> str:
    text = "" if name is None else str(name).strip()
    return text or FALLBACK_HOLIDAY


def resolve(
    cell: DayCell,
    events_by_date: Mapping[str, Sequence[Any]],
    holidays_by_date: Mapping[str, Any],
    songs_by_date: Mapping[str, Sequence[Any]],
    birthdays_by_month_day: Mapping[str, Sequence[Any]],
    caps: DisplayCaps = DEFAULT_CAPS,
) -> CellAnnotations:
    """Resolve the annotation bundle shown in one grid cell."""
    key = exact_key(cell.date)
    md_key = month_day_key(cell.date.month, cell.date.day)

    holiday_name = None
    merged: list[DisplayItem] = []
    if key in holidays_by_date:
        holiday_name = holiday_label(holidays_by_date[key])
        merged.append(DisplayItem("holiday", holiday_name))
    for event in events_by_date.get(key, ()):
        merged.append(DisplayItem("event", _label(event, "title", FALLBACK_TITLE), event))
    events, events_hidden = _truncate(merged, caps.events)

    songs, songs_hidden = _truncate(
        [DisplayItem("song", _label(s, "title", FALLBACK_TITLE), s)
         for s in songs_by_date.get(key, ())],
        caps.songs,
    )
    birthdays, birthdays_hidden = _truncate(
        [DisplayItem("birthday", _label(b, "name", FALLBACK_NAME), b)
         for b in birthdays_by_month_day.get(md_key, ())],
        caps.birthdays,
    )

    overflow = {"songs": songs_hidden, "birthdays": birthdays_hidden}
    if caps.event_overflow:
        overflow["events"] = events_hidden
    return CellAnnotations(
        holiday_name=holiday_name,
        events=events,
        songs=songs,
        birthdays=birthdays,
        overflow_counts=overflow,
    )
