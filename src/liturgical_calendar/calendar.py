"""Calendar facade: per-date resolution and range queries.

``LiturgicalCalendar`` binds a regional configuration to a celebration
source.  Range queries are independent per-day evaluations.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union

from liturgical_calendar import computus
from liturgical_calendar.config import RegionalConfig, load_config
from liturgical_calendar.exceptions import InvalidDateError
from liturgical_calendar.fragments import (
    day_fragments,
    fragment_paths,
    mass_fragments,
    office_fragments,
)
from liturgical_calendar.models import FragmentPaths, Hour, ResolvedDay
from liturgical_calendar.precedence import resolve
from liturgical_calendar.sources import general_calendar
from liturgical_calendar.sources.base import CelebrationSource

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]


def make_date(year: int, month: int, day: int) -> date:
    """Build a date, raising InvalidDateError instead of normalizing."""
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(f"Invalid calendar date {year}-{month}-{day}: {exc}") from exc


def parse_date(value: DateLike) -> date:
    """Accept a date, a datetime (time dropped) or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    m = re.match(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", str(value).strip())
    if not m:
        raise InvalidDateError(f"Invalid date format: {value!r}. Expected 'YYYY-MM-DD'.")
    return make_date(*(int(part) for part in m.groups()))


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every date from ``start`` to ``end`` inclusive."""
    for offset in range(computus.days_between(start, end) + 1):
        yield start + timedelta(days=offset)


class LiturgicalCalendar:
    """Resolver bound to one configuration and one celebration source."""

    def __init__(self, config: Optional[RegionalConfig] = None,
                 source: Optional[CelebrationSource] = None):
        self.config = config or RegionalConfig()
        if source is None:
            source = general_calendar(self.config)
        elif getattr(source, "config", self.config) != self.config and hasattr(source, "with_config"):
            # Moveable dates must follow the same rules as the season boundaries
            logger.debug("Rebinding celebration source to %s", self.config)
            source = source.with_config(self.config)
        self.source = source

    def resolve(self, day: DateLike) -> ResolvedDay:
        return resolve(parse_date(day), self.source, self.config)

    def fragments(self, day: DateLike, hour: Union[Hour, str]) -> FragmentPaths:
        return fragment_paths(self.resolve(day), hour)

    def day_fragments(self, day: DateLike) -> dict[Hour, FragmentPaths]:
        return day_fragments(self.resolve(day))

    def mass_fragments(self, day: DateLike) -> dict[str, FragmentPaths]:
        return mass_fragments(self.resolve(day))

    def office_fragments(self, day: DateLike) -> dict[str, FragmentPaths]:
        return office_fragments(self.resolve(day))

    # -- Range queries ------------------------------------------------------

    def calendar_range(self, start: DateLike, end: DateLike) -> list[ResolvedDay]:
        """Resolved days from ``start`` to ``end`` inclusive; empty if reversed."""
        start, end = parse_date(start), parse_date(end)
        days = [self.resolve(day) for day in iter_days(start, end)]
        logger.debug("Resolved %d days from %s to %s", len(days), start, end)
        return days

    def calendar_month(self, year: int, month: int) -> list[ResolvedDay]:
        first = make_date(year, month, 1)
        following = date(year + month // 12, month % 12 + 1, 1)
        return self.calendar_range(first, following - timedelta(days=1))

    def calendar_year(self, year: int) -> list[ResolvedDay]:
        return self.calendar_range(date(year, 1, 1), date(year, 12, 31))

    def liturgical_year(self, year: int) -> list[ResolvedDay]:
        """Liturgical year ``year``: Advent 1 of ``year - 1`` to the eve of Advent 1."""
        start = computus.first_advent(year - 1)
        end = computus.first_advent(year) - timedelta(days=1)
        return self.calendar_range(start, end)


# ── Module-level convenience API ──────────────────────────────────────

_default: Optional[LiturgicalCalendar] = None


def default_calendar() -> LiturgicalCalendar:
    """Calendar built from ``load_config()``, created on first use."""
    global _default
    if _default is None:
        _default = LiturgicalCalendar(load_config())
    return _default


def resolve_day(day: DateLike) -> ResolvedDay:
    return default_calendar().resolve(day)


def get_fragment_names(day: DateLike, hour: Union[Hour, str]) -> FragmentPaths:
    return default_calendar().fragments(day, hour)


def get_calendar_range(start: DateLike, end: DateLike) -> list[ResolvedDay]:
    return default_calendar().calendar_range(start, end)


def get_calendar_month(year: int, month: int) -> list[ResolvedDay]:
    return default_calendar().calendar_month(year, month)


def get_calendar_year(year: int) -> list[ResolvedDay]:
    return default_calendar().calendar_year(year)


def get_calendar_liturgical_year(year: int) -> list[ResolvedDay]:
    return default_calendar().liturgical_year(year)
