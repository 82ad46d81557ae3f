"""Precedence resolution: which celebration prevails on a date.

Candidates come from the injected celebration source (at most one
temporale, any number of sanctorale) plus a synthesized seasonal
candidate for the Sunday or weekday itself.  Each source candidate is
run through ``RULES`` in order; the first rule whose predicate matches
decides its fate.  Candidates no rule touches stay eligible, and the
eligible candidate with the lowest precedence value becomes primary.

Adding a rare-exception case means appending a ``Rule``, not a new code
path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Callable, Optional

from liturgical_calendar import computus
from liturgical_calendar.config import UNIVERSAL, RegionalConfig
from liturgical_calendar.exceptions import PrecedenceConflictError
from liturgical_calendar.models import (
    OBLIGATORY_MEMORIAL_TIERS,
    OPTIONAL_MEMORIAL_TIER,
    Celebration,
    Genus,
    PrecedenceLevel,
    Rank,
    ResolvedDay,
    Season,
    SeasonInfo,
    Transfer,
)
from liturgical_calendar.naming import seasonal_names
from liturgical_calendar.season import default_color, season_info
from liturgical_calendar.sources.base import CelebrationSource

logger = logging.getLogger(__name__)


class Outcome(Enum):
    TRANSFERRED = "transferred"                 # excluded; moves to another day
    SUPPRESSED = "suppressed"                   # dropped entirely
    COMMEMORATION_ONLY = "commemoration_only"   # never primary
    ALTERNATE_ONLY = "alternate_only"           # offered as an option only


@dataclass(frozen=True)
class DayContext:
    """Facts about the date that rule predicates may consult."""
    info: SeasonInfo
    easter_offset: int
    temporale: Optional[Celebration]
    sanctorale: tuple[Celebration, ...]
    config: RegionalConfig

    @property
    def date(self) -> date:
        return self.info.date

    @property
    def candidates(self) -> tuple[Celebration, ...]:
        if self.temporale is None:
            return self.sanctorale
        return (self.temporale,) + self.sanctorale


@dataclass(frozen=True)
class Rule:
    name: str
    applies: Callable[[Celebration, DayContext], bool]
    outcome: Outcome


# ── Rule predicates ───────────────────────────────────────────────────

def _in_holy_week_or_easter_octave(cand: Celebration, ctx: DayContext) -> bool:
    return cand.genus is Genus.SANCTORALE and -7 <= ctx.easter_offset <= 7


def _optional_memorials_disabled(cand: Celebration, ctx: DayContext) -> bool:
    return (not ctx.config.include_optional_memorials
            and cand.level.tier == OPTIONAL_MEMORIAL_TIER)


def _outranked_on_privileged_day(cand: Celebration, ctx: DayContext) -> bool:
    return (ctx.date in computus.privileged_days(ctx.date.year)
            and cand.level.tier > 2)


def _ties_temporale(cand: Celebration, ctx: DayContext) -> bool:
    return (cand.genus is Genus.SANCTORALE
            and ctx.temporale is not None
            and ctx.temporale.level is cand.level)


def _solemnity_tied_with_temporale(cand: Celebration, ctx: DayContext) -> bool:
    return _ties_temporale(cand, ctx) and cand.level.tier <= 4


def _feast_tied_with_temporale(cand: Celebration, ctx: DayContext) -> bool:
    return _ties_temporale(cand, ctx) and 4 < cand.level.tier < OBLIGATORY_MEMORIAL_TIERS[0]


def _optional_memorial_in_penitential_season(cand: Celebration, ctx: DayContext) -> bool:
    return (cand.level.tier == OPTIONAL_MEMORIAL_TIER
            and ctx.info.season in (Season.ADVENT, Season.LENT))


def _concurrent_obligatory_memorial(cand: Celebration, ctx: DayContext) -> bool:
    memorials = [c for c in ctx.candidates if c.level.tier in OBLIGATORY_MEMORIAL_TIERS]
    return cand in memorials and len(memorials) > 1


RULES: tuple[Rule, ...] = (
    Rule("holy-week-or-easter-octave", _in_holy_week_or_easter_octave, Outcome.TRANSFERRED),
    Rule("optional-memorials-disabled", _optional_memorials_disabled, Outcome.SUPPRESSED),
    Rule("privileged-day", _outranked_on_privileged_day, Outcome.SUPPRESSED),
    Rule("solemnity-impeded-by-temporale", _solemnity_tied_with_temporale, Outcome.TRANSFERRED),
    Rule("feast-impeded-by-temporale", _feast_tied_with_temporale, Outcome.SUPPRESSED),
    Rule("optional-memorial-in-advent-or-lent", _optional_memorial_in_penitential_season,
         Outcome.COMMEMORATION_ONLY),
    Rule("concurrent-obligatory-memorials", _concurrent_obligatory_memorial,
         Outcome.ALTERNATE_ONLY),
)

# Celebration id -> (Easter-offset window, substitute offset from Easter)
SUBSTITUTE_DAYS: dict[str, tuple[tuple[int, int], int]] = {
    "annunciation": ((-7, 7), 8),               # Monday after Divine Mercy Sunday
    "joseph_spouse_of_mary": ((-7, 0), -8),     # Saturday before Palm Sunday
}


def first_matching_rule(cand: Celebration, ctx: DayContext,
                        rules: tuple[Rule, ...] = RULES) -> Optional[Rule]:
    for rule in rules:
        if rule.applies(cand, ctx):
            return rule
    return None


def substitute_date(cand: Celebration, day: date) -> Optional[date]:
    """Substitute date for a transferred celebration, where one is defined."""
    window = SUBSTITUTE_DAYS.get(cand.id)
    if window is None:
        return None
    (low, high), shift = window
    if low <= computus.easter_offset(day) <= high:
        return computus.easter(day.year) + timedelta(days=shift)
    return None


# ── Seasonal candidate ────────────────────────────────────────────────

_SUNDAY_LEVELS: dict[Season, PrecedenceLevel] = {
    Season.ADVENT: PrecedenceLevel.DOMINICA_PRIVILEGIATA_2,
    Season.LENT: PrecedenceLevel.DOMINICA_PRIVILEGIATA_2,
    Season.EASTER: PrecedenceLevel.DOMINICA_PRIVILEGIATA_2,
    Season.CHRISTMAS: PrecedenceLevel.DOMINICA_NATIVITATIS_6,
    Season.ORDINARY: PrecedenceLevel.DOMINICA_ORDINARII_6,
    Season.TRIDUUM: PrecedenceLevel.DOMINICA_ORDINARII_6,
}


def seasonal_level(day: date, info: SeasonInfo) -> PrecedenceLevel:
    """Precedence of the Sunday or weekday itself, absent any celebration."""
    offset = computus.easter_offset(day)
    if offset == 0:
        return PrecedenceLevel.TRIDUUM_1
    if 1 <= offset <= 7:
        return PrecedenceLevel.DIES_OCTAVAE_PASCHAE_2

    if info.is_sunday:
        return _SUNDAY_LEVELS[info.season]

    season = info.season
    if season is Season.TRIDUUM:
        return PrecedenceLevel.TRIDUUM_1
    if season is Season.LENT:
        if offset == computus.EASTER_OFFSETS["ash_wednesday"]:
            return PrecedenceLevel.FERIA_IV_CINERUM_2
        if -6 <= offset <= -4:
            return PrecedenceLevel.FERIA_HEBDOMADAE_SANCTAE_2
        return PrecedenceLevel.FERIA_QUADRAGESIMAE_9
    if season is Season.ADVENT:
        if day.month == 12 and 17 <= day.day <= 24:
            return PrecedenceLevel.FERIA_ADVENTUS_17_24_9
        return PrecedenceLevel.FERIA_ADVENTUS_13
    if season is Season.CHRISTMAS:
        if (day.month == 12 and day.day >= 26) or (day.month == 1 and day.day == 1):
            return PrecedenceLevel.DIES_OCTAVAE_NATIVITATIS_9
        return PrecedenceLevel.FERIA_NATIVITATIS_13
    if season is Season.EASTER:
        return PrecedenceLevel.FERIA_PASCHAE_13
    return PrecedenceLevel.FERIA_ORDINARII_14


def seasonal_candidate(info: SeasonInfo, config: RegionalConfig = UNIVERSAL) -> Celebration:
    """Synthesize the Sunday/weekday candidate that guarantees a primary."""
    code = info.season.code
    return Celebration(
        id=f"{code.lower()}/{info.week:02d}/{info.day_of_week.value}",
        short_code=f"{code}{info.week}",
        genus=Genus.SEASONAL,
        rank=Rank.SOLLEMNITAS if info.is_sunday else Rank.FERIA,
        level=seasonal_level(info.date, info),
        colors=(default_color(info.date, config),),
        names=seasonal_names(info.season, info.week, info.day_of_week),
    )


def title_code(info: SeasonInfo) -> str:
    """ePrex title code, e.g. ``TIT;ORD;ST15;3MAR;Y-CI``."""
    return (
        f"TIT;{info.season.code};ST{info.week:02d};{info.day_of_week.code};"
        f"Y-{info.sunday_cycle.value}{info.weekday_cycle.value}"
    )


# ── Resolution ────────────────────────────────────────────────────────

def resolve(day: date, source: CelebrationSource,
            config: Optional[RegionalConfig] = None) -> ResolvedDay:
    """Resolve ``day`` into primary, commemorations and alternates."""
    config = config or source.config
    info = season_info(day, config)
    found = source.by_date(day)
    ctx = DayContext(
        info=info,
        easter_offset=computus.easter_offset(day),
        temporale=found.temporale,
        sanctorale=tuple(found.sanctorale),
        config=config,
    )

    eligible: list[Celebration] = []
    commemoration_only: list[Celebration] = []
    alternate_only: list[Celebration] = []
    transfers: list[Transfer] = []
    suppressed: list[Celebration] = []

    for cand in ctx.candidates:
        rule = first_matching_rule(cand, ctx)
        if rule is None:
            eligible.append(cand)
            continue
        logger.debug("%s: %s -> %s (%s)", day, cand.id, rule.outcome.value, rule.name)
        if rule.outcome is Outcome.TRANSFERRED:
            transfers.append(Transfer(cand, day, rule.name, substitute_date(cand, day)))
        elif rule.outcome is Outcome.SUPPRESSED:
            suppressed.append(cand)
        elif rule.outcome is Outcome.COMMEMORATION_ONLY:
            commemoration_only.append(cand)
        else:
            alternate_only.append(cand)

    # The temporale entry stands for the day itself when it survives
    if ctx.temporale is None or ctx.temporale not in eligible:
        eligible.append(seasonal_candidate(info, config))

    eligible.sort(key=lambda c: c.level.value)
    primary, rest = eligible[0], eligible[1:]
    if rest and rest[0].level is primary.level:
        raise PrecedenceConflictError(
            f"{day.isoformat()}: {primary.id!r} and {rest[0].id!r} share "
            f"precedence {primary.level.name}"
        )

    commemorations = [
        c for c in rest
        if c.genus is not Genus.SEASONAL and c.level.tier < OPTIONAL_MEMORIAL_TIER
    ] + commemoration_only
    alternates = [
        c for c in rest if c.level.tier == OPTIONAL_MEMORIAL_TIER
    ] + alternate_only

    return ResolvedDay(
        info=info,
        primary=primary,
        commemorations=tuple(commemorations),
        alternates=tuple(alternates),
        transfers=tuple(transfers),
        suppressed=tuple(suppressed),
        title_code=title_code(info),
        short_code=primary.short_code,
    )
