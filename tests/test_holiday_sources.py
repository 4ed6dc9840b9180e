"""
tests/test_holiday_sources.py

Covers:
  - Fixed and lunar-table holidays of the built-in registry
  - Three-day holidays
  - Enabling a subset of holidays
  - First-declared-wins merging across sources
"""

from datetime import date

from choir_calendar.holiday_sources import (
    ALL_KEYS,
    builtin_holidays_by_date,
    holiday_names,
    holidays_for_year,
    merge_holiday_maps,
)


class TestRegistry:

    def test_fixed_holidays(self):
        found = holidays_for_year(2024)
        assert found[date(2024, 3, 1)] == ["삼일절"]
        assert found[date(2024, 10, 9)] == ["한글날"]
        assert found[date(2024, 12, 25)] == ["성탄절"]

    def test_chuseok_spans_three_days(self):
        found = holidays_for_year(2024)
        for day in (16, 17, 18):
            assert found[date(2024, 9, day)] == ["추석"]
        assert date(2024, 9, 19) not in found

    def test_seollal_2025(self):
        found = holidays_for_year(2025)
        assert [d for d, names in sorted(found.items()) if names == ["설날"]] == [
            date(2025, 1, 28), date(2025, 1, 29), date(2025, 1, 30),
        ]

    def test_year_outside_lunar_table_only_has_fixed_days(self):
        names = {n for names in holidays_for_year(2040).values() for n in names}
        assert "추석" not in names
        assert "신정" in names

    def test_shared_date_keeps_registry_order(self):
        # 2025-05-05 is both Children's Day and Buddha's Birthday
        assert holidays_for_year(2025)[date(2025, 5, 5)] == ["어린이날", "부처님오신날"]

    def test_enabled_subset(self):
        found = holidays_for_year(2024, ["kr_christmas"])
        assert found == {date(2024, 12, 25): ["성탄절"]}

    def test_names_in_declaration_order(self):
        assert [k for k, _ in holiday_names()] == list(ALL_KEYS)


class TestByDate:

    def test_one_name_per_date(self):
        by_date = builtin_holidays_by_date([2025])
        assert by_date["2025-05-05"] == "어린이날"
        assert by_date["2025-10-06"] == "추석"

    def test_spans_several_years(self):
        by_date = builtin_holidays_by_date([2024, 2025], ["kr_sinjeong"])
        assert by_date == {"2024-01-01": "신정", "2025-01-01": "신정"}


class TestMerge:

    def test_first_source_wins(self):
        custom = {"2024-10-03": "창립 기념일"}
        builtin = {"2024-10-03": "개천절", "2024-10-09": "한글날"}
        assert merge_holiday_maps(custom, builtin) == {
            "2024-10-03": "창립 기념일",
            "2024-10-09": "한글날",
        }

    def test_order_of_sources_matters(self):
        a = {"2024-01-01": "A"}
        b = {"2024-01-01": "B"}
        assert merge_holiday_maps(a, b)["2024-01-01"] == "A"
        assert merge_holiday_maps(b, a)["2024-01-01"] == "B"

    def test_no_sources(self):
        assert merge_holiday_maps() == {}

    def test_named_entry_replaces_unnamed_one(self):
        from_file = {"2024-12-25": None, "2024-12-31": ""}
        builtin = {"2024-12-25": "성탄절"}
        merged = merge_holiday_maps(from_file, builtin)
        assert merged["2024-12-25"] == "성탄절"
        assert merged["2024-12-31"] == ""

    def test_named_entry_is_not_replaced_by_unnamed_one(self):
        assert merge_holiday_maps({"2024-01-01": "A"}, {"2024-01-01": None}) == {"2024-01-01": "A"}


class TestYearRange:

    def test_unrepresentable_years_have_no_holidays(self):
        assert holidays_for_year(10000) == {}
        assert holidays_for_year(0) == {}

    def test_by_date_skips_unrepresentable_years(self):
        by_date = builtin_holidays_by_date([9999, 10000], ["kr_sinjeong"])
        assert by_date == {"9999-01-01": "신정"}
