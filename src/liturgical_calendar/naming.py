"""Pure text helpers for synthesized day names.

Sundays and weekdays of a season have no table entry of their own; their
Latin and English names are composed here from season, week and weekday.
"""

from __future__ import annotations

from liturgical_calendar.models import DayOfWeek, Season

_ROMAN = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
    (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]

_SEASON_LA: dict[Season, str] = {
    Season.ADVENT: "Adventus",
    Season.CHRISTMAS: "Temporis Nativitatis",
    Season.LENT: "Quadragesimae",
    Season.TRIDUUM: "Tridui Paschalis",
    Season.EASTER: "Temporis Paschalis",
    Season.ORDINARY: "per Annum",
}

_SEASON_EN: dict[Season, str] = {
    Season.ADVENT: "of Advent",
    Season.CHRISTMAS: "of the Christmas Season",
    Season.LENT: "of Lent",
    Season.TRIDUUM: "of the Paschal Triduum",
    Season.EASTER: "of Easter",
    Season.ORDINARY: "in Ordinary Time",
}


def to_roman(num: int) -> str:
    """Roman numeral for a positive integer; empty string for 0."""
    result = ""
    for value, numeral in _ROMAN:
        while num >= value:
            result += numeral
            num -= value
    return result


def to_ordinal(num: int) -> str:
    """English ordinal: 1st, 2nd, 3rd, 4th, 11th, 21st ..."""
    if 10 <= num % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(num % 10, "th")
    return f"{num}{suffix}"


def _day_name_en(day: DayOfWeek) -> str:
    return day.name.capitalize()


def seasonal_names(season: Season, week: int, day: DayOfWeek) -> dict[str, str]:
    """Latin and English names for a Sunday or weekday of ``season``."""
    if week == 0:
        # Days between Ash Wednesday and the first Sunday of Lent
        if season is Season.LENT:
            return {
                "la": f"Feria {to_roman(day.value + 1)} post Cineres"
                      if day is not DayOfWeek.SATURDAY else "Sabbatum post Cineres",
                "en": f"{_day_name_en(day)} after Ash Wednesday",
            }
        return {"la": "Sacrum Triduum Paschale", "en": "Paschal Triduum"}

    if day is DayOfWeek.SUNDAY:
        return {
            "la": f"Dominica {to_roman(week)} {_SEASON_LA[season]}",
            "en": f"{to_ordinal(week)} Sunday {_SEASON_EN[season]}",
        }
    feria = "Sabbatum" if day is DayOfWeek.SATURDAY else f"Feria {to_roman(day.value + 1)}"
    return {
        "la": f"{feria} Hebdomadae {to_roman(week)} {_SEASON_LA[season]}",
        "en": f"{_day_name_en(day)} of the {to_ordinal(week)} Week {_SEASON_EN[season]}",
    }
