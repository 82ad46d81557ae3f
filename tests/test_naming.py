"""Tests for naming: roman numerals, ordinals and seasonal day names."""

from __future__ import annotations

import pytest

from liturgical_calendar.models import DayOfWeek, Season
from liturgical_calendar.naming import seasonal_names, to_ordinal, to_roman


class TestToRoman:

    @pytest.mark.parametrize("num, expected", [
        (1, "I"), (4, "IV"), (9, "IX"), (15, "XV"), (34, "XXXIV"), (1994, "MCMXCIV"),
    ])
    def test_numerals(self, num, expected):
        assert to_roman(num) == expected

    def test_zero_is_empty(self):
        assert to_roman(0) == ""


class TestToOrdinal:

    @pytest.mark.parametrize("num, expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
        (11, "11th"), (12, "12th"), (13, "13th"),
        (21, "21st"), (22, "22nd"), (33, "33rd"), (111, "111th"),
    ])
    def test_suffixes(self, num, expected):
        assert to_ordinal(num) == expected


class TestSeasonalNames:

    def test_ordinary_weekday(self):
        names = seasonal_names(Season.ORDINARY, 15, DayOfWeek.TUESDAY)
        assert names["la"] == "Feria III Hebdomadae XV per Annum"
        assert names["en"] == "Tuesday of the 15th Week in Ordinary Time"

    def test_saturday(self):
        names = seasonal_names(Season.EASTER, 2, DayOfWeek.SATURDAY)
        assert names["la"] == "Sabbatum Hebdomadae II Temporis Paschalis"
        assert names["en"] == "Saturday of the 2nd Week of Easter"

    def test_sunday(self):
        names = seasonal_names(Season.ADVENT, 3, DayOfWeek.SUNDAY)
        assert names["la"] == "Dominica III Adventus"
        assert names["en"] == "3rd Sunday of Advent"

    def test_after_ash_wednesday(self):
        names = seasonal_names(Season.LENT, 0, DayOfWeek.THURSDAY)
        assert names["la"] == "Feria V post Cineres"
        assert names["en"] == "Thursday after Ash Wednesday"

    def test_saturday_after_ash_wednesday(self):
        assert seasonal_names(Season.LENT, 0, DayOfWeek.SATURDAY)["la"] == "Sabbatum post Cineres"

    def test_triduum(self):
        names = seasonal_names(Season.TRIDUUM, 0, DayOfWeek.FRIDAY)
        assert names == {"la": "Sacrum Triduum Paschale", "en": "Paschal Triduum"}
