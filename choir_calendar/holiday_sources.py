"""Holiday definitions for South Korea and merging of holiday sources."""

from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Iterable, Mapping

from choir_calendar.date_keys import exact_key

logger = logging.getLogger(__name__)


# --- date generators --------------------------------------------------------

def _fixed(m: int, d: int):
    return lambda year: [date(year, m, d)]


def _from_table(table: dict[int, tuple[int, int]]):
    def fn(year):
        entry = table.get(year)
        return [date(year, entry[0], entry[1])] if entry else []
    return fn


def _from_table_around(table: dict[int, tuple[int, int]]):
    """The listed day plus the day before and after (three-day holidays)."""
    def fn(year):
        entry = table.get(year)
        if not entry:
            return []
        middle = date(year, entry[0], entry[1])
        return [middle + timedelta(days=i) for i in (-1, 0, 1)]
    return fn


# --- Korean lunar calendar lookup tables (2024-2030) ------------------------

_SEOLLAL = {
    2024: (2, 10), 2025: (1, 29), 2026: (2, 17), 2027: (2, 7),
    2028: (1, 27), 2029: (2, 13), 2030: (2, 3),
}

_BUDDHAS_BIRTHDAY = {
    2024: (5, 15), 2025: (5, 5),  2026: (5, 24), 2027: (5, 13),
    2028: (5, 2),  2029: (5, 20), 2030: (5, 9),
}

_CHUSEOK = {
    2024: (9, 17), 2025: (10, 6), 2026: (9, 25), 2027: (9, 15),
    2028: (10, 3), 2029: (9, 22), 2030: (9, 12),
}


# --- Holiday registry: (key, name, dates_fn) --------------------------------
# Declaration order breaks ties when two holidays fall on the same date.

HOLIDAYS: list[tuple] = [
    ("kr_sinjeong",     "신정",         _fixed(1, 1)),
    ("kr_seollal",      "설날",         _from_table_around(_SEOLLAL)),
    ("kr_samiljeol",    "삼일절",       _fixed(3, 1)),
    ("kr_childrens_day", "어린이날",    _fixed(5, 5)),
    ("kr_buddha",       "부처님오신날", _from_table(_BUDDHAS_BIRTHDAY)),
    ("kr_memorial_day", "현충일",       _fixed(6, 6)),
    ("kr_liberation",   "광복절",       _fixed(8, 15)),
    ("kr_chuseok",      "추석",         _from_table_around(_CHUSEOK)),
    ("kr_gaecheonjeol", "개천절",       _fixed(10, 3)),
    ("kr_hangeul_day",  "한글날",       _fixed(10, 9)),
    ("kr_christmas",    "성탄절",       _fixed(12, 25)),
]

ALL_KEYS: tuple[str, ...] = tuple(h[0] for h in HOLIDAYS)


def holiday_names() -> list[tuple[str, str]]:
    """Return [(key, name), ...] in declaration order."""
    return [(h[0], h[1]) for h in HOLIDAYS]


def holidays_for_year(
    year: int, enabled_keys: Iterable[str] | None = None,
) -> dict[date, list[str]]:
    """Return {date: [name, ...]} for all enabled holidays in a year.

    Names on a shared date keep registry order. ``None`` enables everything.
    Years outside the ``datetime`` range have no holidays.
    """
    if not MINYEAR <= year <= MAXYEAR:
        return {}
    enabled = set(ALL_KEYS if enabled_keys is None else enabled_keys)
    result: dict[date, list[str]] = {}
    for key, name, dates_fn in HOLIDAYS:
        if key not in enabled:
            continue
        for d in dates_fn(year):
            result.setdefault(d, []).append(name)
    return result


def builtin_holidays_by_date(
    years: Iterable[int], enabled_keys: Iterable[str] | None = None,
) -> dict[str, str]:
    """Exact-date-keyed holiday names for the given years, one name per date."""
    keys = None if enabled_keys is None else list(enabled_keys)
    by_date: dict[str, str] = {}
    for year in sorted(set(years)):
        for d, names in sorted(holidays_for_year(year, keys).items()):
            by_date[exact_key(d)] = names[0]
    return by_date


def _has_name(name: str | None) -> bool:
    return name is not None and bool(str(name).strip())


def merge_holiday_maps(*sources: Mapping[str, str | None]) -> dict[str, str | None]:
    """Merge several date -> name maps; the first source naming a date wins.

    An entry without a name only marks the date; a later source that does name
    it supplies the name.
    """
    merged: dict[str, str | None] = {}
    for index, source in enumerate(sources):
        for key, name in source.items():
            if key in merged:
                if not _has_name(merged[key]) and _has_name(name):
                    merged[key] = name
                elif merged[key] != name:
                    logger.debug("Holiday %s: keeping %r, ignoring %r from source %d",
                                 key, merged[key], name, index)
                continue
            merged[key] = name
    return merged
