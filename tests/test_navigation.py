"""
tests/test_navigation.py

Covers:
  - Month stepping with year rollover and its inverse
  - Go-to-today with an injected clock
  - Selecting dates outside the viewed month
  - Constructor validation
"""

from datetime import date, datetime

import pytest

from choir_calendar.calendar_logic import MonthMembership
from choir_calendar.errors import InvalidDateError
from choir_calendar.navigation import NavigationState

TODAY = date(2024, 9, 17)


@pytest.fixture
def state():
    return NavigationState(2024, 1, today=lambda: TODAY)


class TestMonthStepping:

    def test_twelve_steps_forward_is_one_year(self, state):
        for _ in range(12):
            state.go_to_next_month()
        assert state.viewed_month == (2025, 1)

    def test_december_to_january(self):
        s = NavigationState(2024, 12)
        assert s.go_to_next_month() == (2025, 1)
        assert s.go_to_previous_month() == (2024, 12)

    def test_january_to_december(self, state):
        assert state.go_to_previous_month() == (2023, 12)

    @pytest.mark.parametrize("year,month", [(2024, 1), (2024, 6), (2023, 12), (1999, 2)])
    @pytest.mark.parametrize("steps", [1, 5, 12, 30])
    def test_previous_is_inverse_of_next(self, year, month, steps):
        s = NavigationState(year, month)
        for _ in range(steps):
            s.go_to_next_month()
        for _ in range(steps):
            s.go_to_previous_month()
        assert s.viewed_month == (year, month)

    def test_stepping_keeps_selection(self, state):
        state.select_date(date(2024, 1, 10))
        state.go_to_next_month()
        assert state.selected_date == date(2024, 1, 10)


class TestToday:

    def test_go_to_today(self, state):
        assert state.go_to_today() == TODAY
        assert state.viewed_month == (2024, 9)
        assert state.selected_date == TODAY

    def test_for_today(self):
        s = NavigationState.for_today(lambda: TODAY)
        assert s.viewed_month == (2024, 9)
        assert s.selected_date == TODAY
        assert s.today == TODAY


class TestSelection:

    def test_selecting_next_month_cell_keeps_viewed_month(self, state):
        overflow = [c for c in state.grid() if c.membership is MonthMembership.NEXT]
        state.select_date(overflow[0].date)
        assert state.viewed_month == (2024, 1)
        assert state.selected_date == date(2024, 2, 1)

    def test_selecting_previous_month_cell_keeps_viewed_month(self, state):
        head = [c for c in state.grid() if c.membership is MonthMembership.PREVIOUS]
        state.select_date(head[0].date)
        assert state.viewed_month == (2024, 1)
        assert state.selected_date == date(2023, 12, 31)

    def test_datetime_is_reduced_to_date(self, state):
        state.select_date(datetime(2024, 1, 3, 9, 0))
        assert state.selected_date == date(2024, 1, 3)

    def test_non_date_rejected(self, state):
        with pytest.raises(InvalidDateError):
            state.select_date("2024-01-03")

    def test_initial_selection(self):
        s = NavigationState(2024, 2, selected=date(2024, 2, 29))
        assert s.selected_date == date(2024, 2, 29)


class TestConstruction:

    @pytest.mark.parametrize("year,month", [(2024, 0), (2024, 13), (0, 1)])
    def test_invalid_month_rejected(self, year, month):
        with pytest.raises(InvalidDateError):
            NavigationState(year, month)

    def test_grid_follows_viewed_month(self, state):
        state.go_to_next_month()
        current = [c for c in state.grid() if c.membership is MonthMembership.CURRENT]
        assert len(current) == 29
        assert current[0].date == date(2024, 2, 1)


class TestDateRangeEdges:

    def test_stepping_past_last_representable_month_rejected(self):
        s = NavigationState(9999, 12)
        with pytest.raises(InvalidDateError):
            s.go_to_next_month()
        assert s.viewed_month == (9999, 12)

    def test_stepping_before_first_representable_month_rejected(self):
        s = NavigationState(1, 1)
        with pytest.raises(InvalidDateError):
            s.go_to_previous_month()
        assert s.viewed_month == (1, 1)
