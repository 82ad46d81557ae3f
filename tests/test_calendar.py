"""Tests for the calendar facade, date parsing and range queries."""

from __future__ import annotations

from datetime import date, datetime

import pytest

import liturgical_calendar.calendar as calendar_module
from liturgical_calendar import (
    CalendarError,
    InvalidDateError,
    LiturgicalCalendar,
    get_calendar_liturgical_year,
    get_calendar_month,
    get_fragment_names,
    make_date,
    parse_date,
    resolve_day,
)
from liturgical_calendar.models import Season

CAL = LiturgicalCalendar()


class TestParseDate:

    def test_accepts_date(self):
        assert parse_date(date(2025, 7, 15)) == date(2025, 7, 15)

    def test_datetime_drops_time(self):
        assert parse_date(datetime(2025, 7, 15, 9, 30)) == date(2025, 7, 15)
        assert type(parse_date(datetime(2025, 7, 15, 23, 59))) is date

    def test_accepts_iso_string(self):
        assert parse_date("2025-07-15") == date(2025, 7, 15)
        assert parse_date(" 2025-7-5 ") == date(2025, 7, 5)

    @pytest.mark.parametrize("value", ["2025/07/15", "15-07-2025", "", "tomorrow"])
    def test_rejects_bad_format(self, value):
        with pytest.raises(InvalidDateError, match="Invalid date format"):
            parse_date(value)

    def test_rejects_impossible_date(self):
        with pytest.raises(InvalidDateError):
            parse_date("2025-02-30")

    def test_error_is_also_value_error(self):
        with pytest.raises(ValueError):
            parse_date("2025-02-30")


class TestMakeDate:

    def test_valid(self):
        assert make_date(2024, 2, 29) == date(2024, 2, 29)

    @pytest.mark.parametrize("year, month, day", [
        (2025, 2, 29),
        (2025, 13, 1),
        (2025, 4, 31),
        (2025, 0, 10),
    ])
    def test_invalid_is_rejected_not_normalized(self, year, month, day):
        with pytest.raises(InvalidDateError):
            make_date(year, month, day)

    def test_is_calendar_error(self):
        with pytest.raises(CalendarError):
            make_date(2025, 2, 29)


class TestResolve:

    def test_accepts_string(self):
        assert CAL.resolve("2025-07-15") == CAL.resolve(date(2025, 7, 15))

    def test_accepts_datetime(self):
        day = CAL.resolve(datetime(2025, 7, 15, 18, 0))
        assert day.date == date(2025, 7, 15)
        assert day.season is Season.ORDINARY

    def test_resolved_day_properties(self):
        day = CAL.resolve(date(2025, 7, 15))
        assert day.date == date(2025, 7, 15)
        assert day.season is Season.ORDINARY
        assert day.week == 15
        assert day.psalter_week == 3
        assert day.title_code == "TIT;ORD;ST15;3MAR;Y-CI"
        assert day.short_code == "ORD15"

    def test_localized_name(self):
        day = CAL.resolve(date(2025, 6, 29))
        assert day.name("en") == "Saints Peter and Paul, Apostles"
        assert day.name("xx") == day.name("la")


class TestRanges:

    def test_range_inclusive(self):
        days = CAL.calendar_range(date(2025, 1, 1), date(2025, 1, 7))
        assert len(days) == 7
        assert days[0].date == date(2025, 1, 1)
        assert days[-1].date == date(2025, 1, 7)

    def test_single_day_range(self):
        assert len(CAL.calendar_range("2025-07-15", "2025-07-15")) == 1

    def test_reversed_range_is_empty(self):
        assert CAL.calendar_range(date(2025, 1, 7), date(2025, 1, 1)) == []

    @pytest.mark.parametrize("year, month, expected", [
        (2025, 1, 31),
        (2025, 2, 28),
        (2024, 2, 29),
        (2025, 4, 30),
        (2025, 12, 31),
    ])
    def test_month_length(self, year, month, expected):
        assert len(CAL.calendar_month(year, month)) == expected

    def test_invalid_month(self):
        with pytest.raises(InvalidDateError):
            CAL.calendar_month(2025, 13)

    @pytest.mark.parametrize("year, expected", [(2025, 365), (2024, 366)])
    def test_year_length(self, year, expected):
        days = CAL.calendar_year(year)
        assert len(days) == expected
        assert all(day.primary is not None for day in days)

    def test_liturgical_year_bounds(self):
        days = CAL.liturgical_year(2025)
        assert days[0].date == date(2024, 12, 1)
        assert days[-1].date == date(2025, 11, 29)
        assert days[0].season is Season.ADVENT

    def test_dates_are_consecutive(self):
        days = CAL.calendar_month(2025, 3)
        for earlier, later in zip(days, days[1:]):
            assert (later.date - earlier.date).days == 1


class TestModuleLevelApi:

    @pytest.fixture(autouse=True)
    def _fresh_default(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("LITCAL_ASCENSION_ON_SUNDAY", "LITCAL_CORPUS_CHRISTI_ON_SUNDAY",
                     "LITCAL_EPIPHANY_ON_SUNDAY", "LITCAL_OPTIONAL_MEMORIALS",
                     "LITCAL_LOCALE"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr(calendar_module, "_default", None)

    def test_resolve_day(self):
        assert resolve_day("2025-04-20").primary.id == "easter_sunday"

    def test_get_fragment_names(self):
        assert get_fragment_names("2025-07-15", "LAU").primary == "ORD/15/3MAR/LAU"

    def test_get_calendar_month(self):
        assert len(get_calendar_month(2025, 2)) == 28

    def test_get_calendar_liturgical_year(self):
        assert get_calendar_liturgical_year(2026)[0].date == date(2025, 11, 30)

    def test_environment_configures_default(self, monkeypatch):
        monkeypatch.setenv("LITCAL_ASCENSION_ON_SUNDAY", "true")
        assert get_fragment_names("2025-06-01", "LAU").primary == "ASC0/LAU"
