"""Fragment path generation: resolved day + hour -> content lookup keys.

The path grammars are a compatibility contract with the content store:

  temporale primary   {short}/{hour}, fallback = seasonal path,
                      seasonal = commune/{SEASON}/{hour}
  sanctorale primary  {short}/{hour}, fallback = sancti/{MM}/{DD}/{hour},
                      common = commune/{type}/{hour}, seasonal = seasonal path
  seasonal primary    {SEASON}/{WW}/{DAY}/{hour}; Sundays add
                      seasonal = {SEASON}/{WW}/dom/{hour}

Every path is composed from the season, day and hour codes in
``models`` so the same day renders identically at every call site.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from liturgical_calendar.config import RegionalConfig
from liturgical_calendar.models import (
    Celebration,
    FragmentPaths,
    Genus,
    Hour,
    Rank,
    ResolvedDay,
    SeasonInfo,
)
from liturgical_calendar.precedence import resolve
from liturgical_calendar.sources.base import CelebrationSource

# Checked in order; first keyword hit decides the common.
_COMMON_TYPES: list[tuple[tuple[str, ...], str]] = [
    (("mary", "bmv", "mariae", "assumption", "immaculate"), "bmv"),
    (("apostle", "apostol"), "apostoli"),
    (("martyr",), "martyres"),
    (("bishop", "pope", "papa", "episcop", "doctor"), "pastores"),
    (("virgin",), "virgines"),
    (("religious", "abbot", "abbat"), "religiosi"),
]

_MASS_PARTS: list[tuple[str, Hour]] = [
    ("introitus", Hour.MISSA_INTROITUS),
    ("collecta", Hour.MISSA_COLLECTA),
    ("lectio_i", Hour.MISSA_LECTIO_I),
    ("psalmus", Hour.MISSA_PSALMUS),
    ("lectio_ii", Hour.MISSA_LECTIO_II),
    ("evangelium", Hour.MISSA_EVANGELIUM),
    ("super_oblata", Hour.MISSA_SUPER_OBLATA),
    ("praefatio", Hour.MISSA_PRAEFATIO),
    ("post_communionem", Hour.MISSA_POST_COMMUNIONEM),
]

_OFFICE_HOURS: list[tuple[str, Hour]] = [
    ("invitatorium", Hour.INVITATORIUM),
    ("officium_lectionis", Hour.OFFICIUM_LECTIONIS),
    ("laudes", Hour.LAUDES),
    ("tertia", Hour.TERTIA),
    ("sexta", Hour.SEXTA),
    ("nona", Hour.NONA),
    ("vesperae", Hour.VESPERAE),
    ("completorium", Hour.COMPLETORIUM),
]


def as_hour(hour: Union[Hour, str]) -> Hour:
    """Accept an Hour or its code (``"LAU"``, ``"MIS-COL"``)."""
    if isinstance(hour, Hour):
        return hour
    try:
        return Hour(hour)
    except ValueError:
        raise ValueError(f"Unknown hour code: {hour!r}") from None


def common_type(celebration: Celebration) -> str:
    """Common of saints used as fallback for ``celebration``."""
    ident = celebration.id.lower()
    for keywords, kind in _COMMON_TYPES:
        if any(word in ident for word in keywords):
            return kind
    return "sancti"


def _week(info: SeasonInfo) -> str:
    return f"{info.week:02d}"


def seasonal_path(info: SeasonInfo, hour: Hour) -> str:
    return f"{info.season.code}/{_week(info)}/{info.day_of_week.code}/{hour.value}"


def bmd_path(info: SeasonInfo, hour: Hour) -> str:
    cycle = info.sunday_cycle.value if info.is_sunday else info.weekday_cycle.value
    return f"{info.season.code}/{_week(info)}/{info.day_of_week.code}/{cycle}/{hour.value}"


def eprex_code(info: SeasonInfo, hour: Hour) -> str:
    return f"{info.season.code}{_week(info)}{info.day_of_week.code}-{hour.value}"


def _commemorated_sanctorale(resolved: ResolvedDay) -> Optional[Celebration]:
    losers = sorted(resolved.commemorations + resolved.alternates,
                    key=lambda c: c.level.value)
    for cand in losers:
        if cand.genus is Genus.SANCTORALE:
            return cand
    return None


def fragment_paths(resolved: ResolvedDay, hour: Union[Hour, str]) -> FragmentPaths:
    """Lookup keys for one resolved day and hour."""
    hour = as_hour(hour)
    info = resolved.info
    primary = resolved.primary
    code = hour.value
    fallback = common = seasonal = None

    if primary.genus is Genus.TEMPORALE:
        primary_path = f"{primary.short_code}/{code}"
        fallback = seasonal_path(info, hour)
        seasonal = f"commune/{info.season.code}/{code}"
    elif primary.genus is Genus.SANCTORALE:
        primary_path = f"{primary.short_code}/{code}"
        fallback = f"sancti/{info.date.month:02d}/{info.date.day:02d}/{code}"
        common = f"commune/{common_type(primary)}/{code}"
        seasonal = seasonal_path(info, hour)
    else:
        primary_path = seasonal_path(info, hour)
        if info.is_sunday:
            seasonal = f"{info.season.code}/{_week(info)}/dom/{code}"
        commemorated = _commemorated_sanctorale(resolved)
        if commemorated is not None and commemorated.rank.at_least(Rank.MEMORIA):
            fallback = f"{commemorated.short_code}/{code}"
            common = f"commune/{common_type(commemorated)}/{code}"
        else:
            common = f"commune/feria/{code}"

    return FragmentPaths(
        primary=primary_path,
        fallback=fallback,
        common=common,
        seasonal=seasonal,
        bmd_path=bmd_path(info, hour),
        eprex_code=eprex_code(info, hour),
        sunday_cycle=info.sunday_cycle,
        weekday_cycle=info.weekday_cycle,
    )


def fragment_names(day: date, hour: Union[Hour, str], source: CelebrationSource,
                   config: Optional[RegionalConfig] = None) -> FragmentPaths:
    """Resolve ``day`` against ``source`` and compose its paths for ``hour``."""
    return fragment_paths(resolve(day, source, config), hour)


def day_fragments(resolved: ResolvedDay) -> dict[Hour, FragmentPaths]:
    """Paths for every hour and Mass part of the day."""
    return {hour: fragment_paths(resolved, hour) for hour in Hour}


def mass_fragments(resolved: ResolvedDay) -> dict[str, FragmentPaths]:
    """Mass propers; the second reading only on Sundays."""
    return {
        name: fragment_paths(resolved, hour)
        for name, hour in _MASS_PARTS
        if hour is not Hour.MISSA_LECTIO_II or resolved.info.is_sunday
    }


def office_fragments(resolved: ResolvedDay) -> dict[str, FragmentPaths]:
    """Liturgy of the Hours, Invitatory through Compline."""
    return {name: fragment_paths(resolved, hour) for name, hour in _OFFICE_HOURS}
