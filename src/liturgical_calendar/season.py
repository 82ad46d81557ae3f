"""Liturgical season, week and cycle resolution.

Every date maps to exactly one season.  Season boundaries are re-derived
per calendar year from the computus milestones; dates in late December and
early January straddle two liturgical years and are checked against both.

Boundaries (half-open unless noted):
  Advent     [Advent 1, Dec 25)
  Christmas  [Dec 25, Baptism of the Lord), across the new year
  Lent       [Ash Wednesday, Holy Thursday)
  Triduum    [Holy Thursday, Easter], Easter Sunday included
  Easter     (Easter, Pentecost]
  Ordinary   everything else, in two arcs
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from liturgical_calendar import computus
from liturgical_calendar.config import UNIVERSAL, RegionalConfig
from liturgical_calendar.models import (
    Color,
    DayOfWeek,
    Season,
    SeasonInfo,
    SundayCycle,
    WeekdayCycle,
)

LAST_ORDINARY_WEEK = 34

_SUNDAY_CYCLES = {0: SundayCycle.C, 1: SundayCycle.A, 2: SundayCycle.B}


def season_of(day: date, config: Optional[RegionalConfig] = None) -> Season:
    """Return the single season containing ``day``."""
    config = config or UNIVERSAL
    year = day.year

    if day >= date(year, 12, 25):
        return Season.CHRISTMAS
    if day >= computus.first_advent(year):
        return Season.ADVENT
    if day < computus.baptism_of_the_lord(year, config.epiphany_on_sunday):
        return Season.CHRISTMAS

    easter = computus.easter(year)
    offset = computus.days_between(easter, day)
    if -46 <= offset < -3:
        return Season.LENT
    if -3 <= offset <= 0:
        return Season.TRIDUUM
    if 0 < offset <= 49:
        return Season.EASTER
    return Season.ORDINARY


def week_of(day: date, season: Season, config: Optional[RegionalConfig] = None) -> int:
    """Week number within ``season``; 0 in the Triduum."""
    config = config or UNIVERSAL
    year = day.year

    if season is Season.ADVENT:
        return computus.days_between(computus.first_advent(year), day) // 7 + 1

    if season is Season.CHRISTMAS:
        christmas = date(year if day.month == 12 else year - 1, 12, 25)
        return computus.days_between(christmas, day) // 7 + 1

    if season is Season.LENT:
        days = computus.days_between(computus.ash_wednesday(year), day)
        # Ash Wednesday to the first Sunday is week 0
        return 0 if days < 4 else (days + 3) // 7

    if season is Season.TRIDUUM:
        return 0

    if season is Season.EASTER:
        return computus.days_between(computus.easter(year), day) // 7 + 1

    if day < computus.ash_wednesday(year):
        baptism = computus.baptism_of_the_lord(year, config.epiphany_on_sunday)
        # Weeks turn over on Sunday even when Baptism is kept on a Monday
        start = baptism - timedelta(days=computus.weekday(baptism))
        return computus.days_between(start, day) // 7 + 1

    # Counted back from Christ the King so the arc always ends on week 34
    pentecost = computus.pentecost(year)
    span = computus.days_between(pentecost, computus.first_advent(year))
    elapsed = computus.days_between(pentecost, day)
    return LAST_ORDINARY_WEEK - span // 7 + elapsed // 7 + 1


def psalter_week(week: int) -> int:
    """Four-week psalter cycle; week 0 maps to week 4."""
    return (week - 1) % 4 + 1


def liturgical_year(day: date) -> int:
    """Calendar year in which the liturgical year containing ``day`` ends."""
    if day >= computus.first_advent(day.year):
        return day.year + 1
    return day.year


def sunday_cycle(day: date) -> SundayCycle:
    return _SUNDAY_CYCLES[liturgical_year(day) % 3]


def weekday_cycle(day: date) -> WeekdayCycle:
    return WeekdayCycle.I if liturgical_year(day) % 2 else WeekdayCycle.II


def default_color(day: date, config: Optional[RegionalConfig] = None) -> Color:
    """Seasonal color, with rose on Gaudete and Laetare Sundays."""
    season = season_of(day, config)
    sunday = computus.weekday(day) == 0

    if season is Season.ADVENT:
        weeks = computus.days_between(computus.first_advent(day.year), day) // 7
        return Color.ROSACEUS if sunday and weeks == 2 else Color.VIOLACEUS
    if season is Season.LENT:
        weeks = computus.days_between(computus.ash_wednesday(day.year), day) // 7
        return Color.ROSACEUS if sunday and weeks == 3 else Color.VIOLACEUS
    if season is Season.TRIDUUM:
        return Color.RUBER
    if season in (Season.CHRISTMAS, Season.EASTER):
        return Color.ALBUS
    return Color.VIRIDIS


def season_info(day: date, config: Optional[RegionalConfig] = None) -> SeasonInfo:
    """Bundle season, week, psalter week and cycles for ``day``."""
    season = season_of(day, config)
    week = week_of(day, season, config)
    return SeasonInfo(
        date=day,
        season=season,
        week=week,
        psalter_week=psalter_week(week),
        day_of_week=DayOfWeek.of(day),
        sunday_cycle=sunday_cycle(day),
        weekday_cycle=weekday_cycle(day),
        liturgical_year=liturgical_year(day),
    )
