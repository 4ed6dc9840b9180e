"""
tests/test_text_view.py

Covers:
  - Rendering a month table with localized weekday headers
  - Overflow markers and birthday lines
  - Selected-date panel
"""

from datetime import date

import pytest
from rich.console import Console

from choir_calendar.month_view import CalendarSources, build_month_view, day_detail
from choir_calendar.navigation import NavigationState
from choir_calendar.records import SongRecord
from choir_calendar.text_view import month_title, render_detail, render_month

TODAY = date(2024, 9, 17)


def render(renderable):
    console = Console(record=True, width=200, color_system=None)
    console.print(renderable)
    return console.export_text()


@pytest.fixture
def sources():
    songs = [SongRecord(id=i, title=f"S{i}", date=TODAY) for i in range(5)]
    return CalendarSources(
        events_by_date={"2024-09-17": [{"title": "연습"}]},
        holidays_by_date={"2024-09-17": "추석"},
        songs_by_date={"2024-09-17": songs},
        birthdays_by_month_day={"09-17": [{"id": 1, "name": "지은"}]},
    )


@pytest.fixture
def view(sources):
    return build_month_view(NavigationState.for_today(lambda: TODAY), sources)


class TestRenderMonth:

    def test_title_and_headers(self, view):
        text = render(render_month(view, "en", cell_width=10))
        assert "2024-09" in text
        for label in ("Sun", "Mon", "Sat"):
            assert label in text

    def test_korean_title(self, view):
        assert month_title(view, "ko") == "2024년 9월"

    def test_annotations_and_overflow(self, view):
        text = render(render_month(view, "ko", cell_width=10))
        assert "추석" in text
        assert "S2" in text
        assert "S3" not in text
        assert "+2" in text
        assert "지은" in text


class TestRenderDetail:

    def test_lists_everything(self, sources):
        text = render(render_detail(day_detail(TODAY, sources)))
        assert "2024-09-17" in text
        assert "S4" in text
        assert "연습" in text

    def test_empty_day(self, sources):
        text = render(render_detail(day_detail(date(2024, 9, 2), sources)))
        assert "일정이 없습니다" in text
