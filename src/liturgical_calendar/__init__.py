"""Liturgical calendar engine.

Maps Gregorian dates to season, week, lectionary cycles and the prevailing
celebration, and composes the content lookup paths for each liturgical
hour.
"""

from __future__ import annotations

__version__ = "0.1.0"

from liturgical_calendar.calendar import (
    LiturgicalCalendar,
    get_calendar_liturgical_year,
    get_calendar_month,
    get_calendar_range,
    get_calendar_year,
    get_fragment_names,
    make_date,
    parse_date,
    resolve_day,
)
from liturgical_calendar.computus import easter, first_advent
from liturgical_calendar.config import RegionalConfig, load_config
from liturgical_calendar.exceptions import (
    CalendarError,
    CelebrationDataError,
    ConfigError,
    InvalidDateError,
    PrecedenceConflictError,
)
from liturgical_calendar.models import (
    Celebration,
    Color,
    DayOfWeek,
    FragmentPaths,
    Genus,
    Hour,
    PrecedenceLevel,
    Rank,
    ResolvedDay,
    Season,
    SeasonInfo,
    SundayCycle,
    Transfer,
    WeekdayCycle,
)
from liturgical_calendar.season import season_info

__all__ = [
    "__version__",
    "LiturgicalCalendar",
    "RegionalConfig",
    "load_config",
    "easter",
    "first_advent",
    "season_info",
    "resolve_day",
    "get_fragment_names",
    "get_calendar_range",
    "get_calendar_month",
    "get_calendar_year",
    "get_calendar_liturgical_year",
    "make_date",
    "parse_date",
    "Celebration",
    "Color",
    "DayOfWeek",
    "FragmentPaths",
    "Genus",
    "Hour",
    "PrecedenceLevel",
    "Rank",
    "ResolvedDay",
    "Season",
    "SeasonInfo",
    "SundayCycle",
    "Transfer",
    "WeekdayCycle",
    "CalendarError",
    "CelebrationDataError",
    "ConfigError",
    "InvalidDateError",
    "PrecedenceConflictError",
]
