"""HTML ordo rendering: a printable table of resolved liturgical days.

Context builders turn ResolvedDay values into plain template rows;
rendering is delegated to the Jinja2 environment in ``filters``.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from liturgical_calendar.calendar import LiturgicalCalendar
from liturgical_calendar.exceptions import CalendarError
from liturgical_calendar.fragments import fragment_paths
from liturgical_calendar.models import Hour, ResolvedDay
from liturgical_calendar.renderer.filters import setup_jinja_env

logger = logging.getLogger(__name__)

_MONTHS_EN = [
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
]


def _day_row(day: ResolvedDay, locale: str) -> dict:
    """Template row for one resolved day."""
    lauds = fragment_paths(day, Hour.LAUDES)
    return {
        "date": day.date,
        "weekday": day.info.day_of_week.code,
        "season": day.season.code,
        "week": day.week,
        "psalter_week": day.psalter_week,
        "cycles": f"{day.sunday_cycle.value}/{day.weekday_cycle.value}",
        "name": day.name(locale),
        "rank": day.rank,
        "color": day.colors[0] if day.colors else None,
        "commemorations": [c.name(locale) for c in day.commemorations],
        "alternates": [c.name(locale) for c in day.alternates],
        "transfers": [t.celebration.name(locale) for t in day.transfers],
        "title_code": day.title_code,
        "lauds": lauds.primary,
        "is_sunday": day.info.is_sunday,
    }


def build_ordo_context(days: Iterable[ResolvedDay], title: str,
                       locale: str = "la") -> dict:
    rows = [_day_row(day, locale) for day in days]
    return {"title": title, "rows": rows, "locale": locale}


def render_ordo(days: Iterable[ResolvedDay], title: str, locale: str = "la") -> str:
    """Render resolved days to an HTML string."""
    env = setup_jinja_env()
    template = env.get_template("ordo.html")
    return template.render(**build_ordo_context(days, title, locale))


def _write_ordo(days: list[ResolvedDay], title: str, locale: str,
                output_path: str | Path) -> Path:
    html_string = render_ordo(days, title, locale)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html_string, encoding="utf-8")
    logger.info("Ordo saved: %s (%d days)", output_path, len(days))
    return output_path


def generate_ordo_month(
    year: int,
    month: int,
    output_path: str | Path,
    calendar: Optional[LiturgicalCalendar] = None,
) -> Path:
    """Render the ordo for one month and write it to ``output_path``."""
    calendar = calendar or LiturgicalCalendar()
    days = calendar.calendar_month(year, month)
    title = f"Ordo {_MONTHS_EN[month - 1]} {year}"
    return _write_ordo(days, title, calendar.config.locale, output_path)


def generate_ordo_range(
    start: date,
    end: date,
    output_path: str | Path,
    calendar: Optional[LiturgicalCalendar] = None,
) -> Path:
    """Render the ordo for an inclusive date range."""
    calendar = calendar or LiturgicalCalendar()
    days = calendar.calendar_range(start, end)
    if not days:
        raise CalendarError(f"Empty range: {start} to {end}")

    title = f"Ordo {start.isoformat()} to {end.isoformat()}"
    return _write_ordo(days, title, calendar.config.locale, output_path)
