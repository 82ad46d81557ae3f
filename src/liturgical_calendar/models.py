"""Data models for the liturgical calendar.

Closed enumerations (season, day, rank, precedence, color, hour) carry the
canonical codes used by every path and title composed elsewhere, so all
output strings come from one table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional

if TYPE_CHECKING:
    from liturgical_calendar.config import RegionalConfig


class Season(Enum):
    """Liturgical seasons; each value is the canonical season code."""
    ORDINARY = "ORD"
    ADVENT = "ADV"
    CHRISTMAS = "NAT"
    LENT = "QUA"
    TRIDUUM = "TRI"
    EASTER = "PAS"

    @property
    def code(self) -> str:
        return self.value


class DayOfWeek(Enum):
    """Day of the week, Sunday = 0."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def code(self) -> str:
        return _DAY_CODES[self]

    @classmethod
    def of(cls, day: date) -> DayOfWeek:
        return cls(day.isoweekday() % 7)


_DAY_CODES: dict[DayOfWeek, str] = {
    DayOfWeek.SUNDAY: "1DOM",
    DayOfWeek.MONDAY: "2LUN",
    DayOfWeek.TUESDAY: "3MAR",
    DayOfWeek.WEDNESDAY: "4MER",
    DayOfWeek.THURSDAY: "5IOV",
    DayOfWeek.FRIDAY: "6VEN",
    DayOfWeek.SATURDAY: "7SAB",
}


class Rank(Enum):
    """Liturgical rank (gradus) of a celebration."""
    SOLLEMNITAS = "sollemnitas"
    FESTUM = "festum"
    MEMORIA = "memoria"
    MEMORIA_AD_LIBITUM = "memoria_ad_libitum"
    COMMEMORATIO = "commemoratio"
    FERIA = "feria"

    def at_least(self, other: Rank) -> bool:
        """True if this rank is as high as ``other`` or higher."""
        return _RANK_ORDER[self] <= _RANK_ORDER[other]


_RANK_ORDER: dict[Rank, int] = {
    Rank.SOLLEMNITAS: 1,
    Rank.FESTUM: 2,
    Rank.MEMORIA: 3,
    Rank.MEMORIA_AD_LIBITUM: 4,
    Rank.COMMEMORATIO: 5,
    Rank.FERIA: 6,
}


class PrecedenceLevel(Enum):
    """Table of liturgical days, ordered by value (lower wins).

    The hundreds digit is the tier (1-14) of the table of precedence;
    values within a tier are distinct so no two levels ever compare equal.
    """
    TRIDUUM_1 = 100
    SOLLEMNITAS_DOMINI_IN_CALENDARIO_2 = 200
    DOMINICA_PRIVILEGIATA_2 = 201
    FERIA_IV_CINERUM_2 = 202
    FERIA_HEBDOMADAE_SANCTAE_2 = 203
    DIES_OCTAVAE_PASCHAE_2 = 204
    SOLLEMNITAS_GENERALIS_3 = 300
    COMMEMORATIO_OMNIUM_DEFUNCTORUM_3 = 301
    SOLLEMNITAS_PATRONI_4 = 400
    SOLLEMNITAS_DEDICATIONIS_4 = 401
    SOLLEMNITAS_TITULI_4 = 402
    FESTUM_DOMINI_5 = 500
    DOMINICA_NATIVITATIS_6 = 600
    DOMINICA_ORDINARII_6 = 601
    FESTUM_BMV_7 = 700
    FESTUM_SANCTORUM_7 = 701
    FESTUM_PROPRIUM_8 = 800
    FESTUM_DEDICATIONIS_CATHEDRALIS_8 = 801
    FESTUM_PATRONI_REGIONIS_8 = 802
    FERIA_ADVENTUS_17_24_9 = 900
    DIES_OCTAVAE_NATIVITATIS_9 = 901
    FERIA_QUADRAGESIMAE_9 = 902
    MEMORIA_OBLIGATORIA_10 = 1000
    MEMORIA_OBLIGATORIA_PROPRIA_11 = 1100
    MEMORIA_OBLIGATORIA_DIOECESIS_11 = 1101
    MEMORIA_OBLIGATORIA_ORDINIS_11 = 1102
    MEMORIA_AD_LIBITUM_12 = 1200
    MEMORIA_AD_LIBITUM_PROPRIA_12 = 1201
    FERIA_ADVENTUS_13 = 1300
    FERIA_NATIVITATIS_13 = 1301
    FERIA_PASCHAE_13 = 1302
    FERIA_ORDINARII_14 = 1400

    @property
    def tier(self) -> int:
        return self.value // 100

    @property
    def seasonal_only(self) -> bool:
        """Levels reserved for the synthesized seasonal/ferial candidate."""
        return self in SEASONAL_ONLY_LEVELS


SEASONAL_ONLY_LEVELS = frozenset({
    PrecedenceLevel.TRIDUUM_1,
    PrecedenceLevel.DOMINICA_PRIVILEGIATA_2,
    PrecedenceLevel.FERIA_IV_CINERUM_2,
    PrecedenceLevel.FERIA_HEBDOMADAE_SANCTAE_2,
    PrecedenceLevel.DIES_OCTAVAE_PASCHAE_2,
    PrecedenceLevel.DOMINICA_NATIVITATIS_6,
    PrecedenceLevel.DOMINICA_ORDINARII_6,
    PrecedenceLevel.FERIA_ADVENTUS_17_24_9,
    PrecedenceLevel.DIES_OCTAVAE_NATIVITATIS_9,
    PrecedenceLevel.FERIA_QUADRAGESIMAE_9,
    PrecedenceLevel.FERIA_ADVENTUS_13,
    PrecedenceLevel.FERIA_NATIVITATIS_13,
    PrecedenceLevel.FERIA_PASCHAE_13,
    PrecedenceLevel.FERIA_ORDINARII_14,
})

OPTIONAL_MEMORIAL_TIER = PrecedenceLevel.MEMORIA_AD_LIBITUM_12.tier
OBLIGATORY_MEMORIAL_TIERS = (10, 11)


class Color(Enum):
    ALBUS = "albus"          # white
    RUBER = "ruber"          # red
    VIRIDIS = "viridis"      # green
    VIOLACEUS = "violaceus"  # violet
    ROSACEUS = "rosaceus"    # rose
    NIGER = "niger"          # black


class Genus(Enum):
    """Where a celebration comes from."""
    TEMPORALE = "temporale"
    SANCTORALE = "sanctorale"
    SEASONAL = "seasonal"       # synthesized Sunday / weekday of the season


class SundayCycle(Enum):
    A = "A"
    B = "B"
    C = "C"


class WeekdayCycle(Enum):
    I = "I"
    II = "II"


class Hour(Enum):
    """Office hours and Mass parts; each value is the canonical hour code."""
    INVITATORIUM = "INV"
    OFFICIUM_LECTIONIS = "OL"
    LAUDES = "LAU"
    TERTIA = "TER"
    SEXTA = "SEX"
    NONA = "NON"
    VESPERAE = "VES"
    COMPLETORIUM = "COM"
    MISSA_INTROITUS = "MIS-INT"
    MISSA_COLLECTA = "MIS-COL"
    MISSA_LECTIO_I = "MIS-L1"
    MISSA_PSALMUS = "MIS-PS"
    MISSA_LECTIO_II = "MIS-L2"
    MISSA_EVANGELIUM = "MIS-EV"
    MISSA_SUPER_OBLATA = "MIS-SO"
    MISSA_PRAEFATIO = "MIS-PR"
    MISSA_POST_COMMUNIONEM = "MIS-PC"

    @property
    def latin_name(self) -> str:
        return _HOUR_NAMES[self]

    @property
    def is_mass(self) -> bool:
        return self.value.startswith("MIS-")


_HOUR_NAMES: dict[Hour, str] = {
    Hour.INVITATORIUM: "Invitatorium",
    Hour.OFFICIUM_LECTIONIS: "Officium Lectionis",
    Hour.LAUDES: "Laudes Matutinae",
    Hour.TERTIA: "Hora Tertia",
    Hour.SEXTA: "Hora Sexta",
    Hour.NONA: "Hora Nona",
    Hour.VESPERAE: "Vesperae",
    Hour.COMPLETORIUM: "Completorium",
    Hour.MISSA_INTROITUS: "Antiphona ad Introitum",
    Hour.MISSA_COLLECTA: "Collecta",
    Hour.MISSA_LECTIO_I: "Lectio Prima",
    Hour.MISSA_PSALMUS: "Psalmus Responsorius",
    Hour.MISSA_LECTIO_II: "Lectio Secunda",
    Hour.MISSA_EVANGELIUM: "Evangelium",
    Hour.MISSA_SUPER_OBLATA: "Super Oblata",
    Hour.MISSA_PRAEFATIO: "Praefatio",
    Hour.MISSA_POST_COMMUNIONEM: "Post Communionem",
}


# ── Value objects ─────────────────────────────────────────────────────

DateRule = Callable[[int, "RegionalConfig"], date]


@dataclass(frozen=True)
class Celebration:
    """A candidate celebration from the temporale or sanctorale.

    Exactly one matching rule applies: a fixed ``month``/``day``
    (sanctorale), an ``offset`` in days from Easter, or a ``rule``
    computing the date for a given year and regional configuration.
    """
    id: str                     # e.g. "peter_and_paul_apostles"
    short_code: str             # e.g. "0629", "PAS0"
    genus: Genus
    rank: Rank
    level: PrecedenceLevel
    colors: tuple[Color, ...] = (Color.ALBUS,)
    names: Mapping[str, str] = field(default_factory=dict, hash=False, compare=False)
    month: Optional[int] = None
    day: Optional[int] = None
    offset: Optional[int] = None
    rule: Optional[DateRule] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    def name(self, locale: str = "la") -> str:
        """Localized name, falling back to Latin, then English, then the id."""
        return (
            self.names.get(locale)
            or self.names.get("la")
            or self.names.get("en")
            or self.id
        )

    @property
    def is_fixed(self) -> bool:
        return self.month is not None and self.day is not None


@dataclass(frozen=True)
class SeasonInfo:
    """Season-level facts about a single date."""
    date: date
    season: Season
    week: int                   # 0 during the Triduum and before Lent 1
    psalter_week: int           # 1-4
    day_of_week: DayOfWeek
    sunday_cycle: SundayCycle
    weekday_cycle: WeekdayCycle
    liturgical_year: int

    @property
    def is_sunday(self) -> bool:
        return self.day_of_week is DayOfWeek.SUNDAY


@dataclass(frozen=True)
class Transfer:
    """A sanctorale candidate excluded from its calendar date."""
    celebration: Celebration
    date: date
    reason: str
    substitute: Optional[date] = None   # informational only, never re-resolved


@dataclass(frozen=True)
class ResolvedDay:
    """Outcome of precedence resolution for one date."""
    info: SeasonInfo
    primary: Celebration
    commemorations: tuple[Celebration, ...] = ()
    alternates: tuple[Celebration, ...] = ()
    transfers: tuple[Transfer, ...] = ()
    suppressed: tuple[Celebration, ...] = ()
    title_code: str = ""
    short_code: str = ""

    @property
    def date(self) -> date:
        return self.info.date

    @property
    def season(self) -> Season:
        return self.info.season

    @property
    def week(self) -> int:
        return self.info.week

    @property
    def psalter_week(self) -> int:
        return self.info.psalter_week

    @property
    def sunday_cycle(self) -> SundayCycle:
        return self.info.sunday_cycle

    @property
    def weekday_cycle(self) -> WeekdayCycle:
        return self.info.weekday_cycle

    @property
    def rank(self) -> Rank:
        return self.primary.rank

    @property
    def level(self) -> PrecedenceLevel:
        return self.primary.level

    @property
    def colors(self) -> tuple[Color, ...]:
        return self.primary.colors

    def name(self, locale: str = "la") -> str:
        return self.primary.name(locale)


@dataclass(frozen=True)
class FragmentPaths:
    """Content lookup keys for one (date, hour)."""
    primary: str
    bmd_path: str
    eprex_code: str
    sunday_cycle: SundayCycle
    weekday_cycle: WeekdayCycle
    fallback: Optional[str] = None
    common: Optional[str] = None
    seasonal: Optional[str] = None
