"""Bundled temporale: celebrations keyed to Easter or to the Christmas cycle.

Short codes are the content-store keys (``PAS0`` Easter Sunday, ``QUA6F2``
Monday of Holy Week, ...) and form part of the lookup-path contract.
"""

from __future__ import annotations

from datetime import date

from liturgical_calendar import computus
from liturgical_calendar.config import RegionalConfig
from liturgical_calendar.models import (
    Celebration,
    Color,
    DateRule,
    Genus,
    PrecedenceLevel as P,
    Rank,
)


def _ascension(year: int, config: RegionalConfig) -> date:
    return computus.ascension(year, config.ascension_on_sunday)


def _corpus_christi(year: int, config: RegionalConfig) -> date:
    return computus.corpus_christi(year, config.corpus_christi_on_sunday)


def _epiphany(year: int, config: RegionalConfig) -> date:
    return computus.epiphany(year, config.epiphany_on_sunday)


def _baptism(year: int, config: RegionalConfig) -> date:
    return computus.baptism_of_the_lord(year, config.epiphany_on_sunday)


def _holy_family(year: int, config: RegionalConfig) -> date:
    return computus.holy_family(year)


def _christ_the_king(year: int, config: RegionalConfig) -> date:
    return computus.christ_the_king(year)


# Date rules that JSON overlays may reference by name.
NAMED_RULES: dict[str, DateRule] = {
    "ascension": _ascension,
    "corpus_christi": _corpus_christi,
    "epiphany": _epiphany,
    "baptism_of_the_lord": _baptism,
    "holy_family": _holy_family,
    "christ_the_king": _christ_the_king,
}


def _entry(id: str, short_code: str, rank: Rank, level: P, colors: tuple[Color, ...],
           la: str, en: str, *, offset: int | None = None,
           rule: DateRule | None = None) -> Celebration:
    return Celebration(
        id=id,
        short_code=short_code,
        genus=Genus.TEMPORALE,
        rank=rank,
        level=level,
        colors=colors,
        names={"la": la, "en": en},
        offset=offset,
        rule=rule,
    )


_W = (Color.ALBUS,)
_R = (Color.RUBER,)
_V = (Color.VIOLACEUS,)

_HOLY_WEEK_FERIAS = [
    (2, "Feria II Hebdomadae Sanctae", "Monday of Holy Week"),
    (3, "Feria III Hebdomadae Sanctae", "Tuesday of Holy Week"),
    (4, "Feria IV Hebdomadae Sanctae", "Wednesday of Holy Week"),
]

_EASTER_OCTAVE = [
    (2, "Feria II infra octavam Paschae", "Easter Monday"),
    (3, "Feria III infra octavam Paschae", "Easter Tuesday"),
    (4, "Feria IV infra octavam Paschae", "Easter Wednesday"),
    (5, "Feria V infra octavam Paschae", "Easter Thursday"),
    (6, "Feria VI infra octavam Paschae", "Easter Friday"),
    (7, "Sabbatum infra octavam Paschae", "Easter Saturday"),
]

TEMPORALE: tuple[Celebration, ...] = (
    _entry("ash_wednesday", "QUA0", Rank.FERIA, P.FERIA_IV_CINERUM_2, _V,
           "Feria IV Cinerum", "Ash Wednesday", offset=-46),
    _entry("palm_sunday", "QUA6", Rank.SOLLEMNITAS, P.DOMINICA_PRIVILEGIATA_2, _R,
           "Dominica in Palmis de Passione Domini", "Palm Sunday of the Passion of the Lord",
           offset=-7),
    *(
        _entry(f"holy_week_feria_{n}", f"QUA6F{n}", Rank.FERIA,
               P.FERIA_HEBDOMADAE_SANCTAE_2, _V, la, en, offset=n - 8)
        for n, la, en in _HOLY_WEEK_FERIAS
    ),
    _entry("holy_thursday", "TRI1", Rank.SOLLEMNITAS, P.TRIDUUM_1, _W,
           "Feria V in Cena Domini", "Holy Thursday", offset=-3),
    _entry("good_friday", "TRI2", Rank.SOLLEMNITAS, P.TRIDUUM_1, _R,
           "Feria VI in Passione Domini", "Good Friday", offset=-2),
    _entry("holy_saturday", "TRI3", Rank.SOLLEMNITAS, P.TRIDUUM_1, _W,
           "Sabbatum Sanctum", "Holy Saturday", offset=-1),
    _entry("easter_sunday", "PAS0", Rank.SOLLEMNITAS, P.TRIDUUM_1, _W,
           "Dominica Paschae in Resurrectione Domini", "Easter Sunday", offset=0),
    *(
        _entry(f"easter_octave_{n}", f"PAS1F{n}", Rank.SOLLEMNITAS,
               P.DIES_OCTAVAE_PASCHAE_2, _W, la, en, offset=n - 1)
        for n, la, en in _EASTER_OCTAVE
    ),
    _entry("divine_mercy_sunday", "PAS2", Rank.SOLLEMNITAS, P.DIES_OCTAVAE_PASCHAE_2, _W,
           "Dominica II Paschae seu de divina Misericordia",
           "Second Sunday of Easter (Divine Mercy Sunday)", offset=7),
    _entry("ascension", "ASC0", Rank.SOLLEMNITAS, P.SOLLEMNITAS_DOMINI_IN_CALENDARIO_2, _W,
           "In Ascensione Domini", "The Ascension of the Lord", rule=_ascension),
    _entry("pentecost_sunday", "PEN0", Rank.SOLLEMNITAS, P.SOLLEMNITAS_DOMINI_IN_CALENDARIO_2, _R,
           "Dominica Pentecostes", "Pentecost Sunday", offset=49),
    _entry("mary_mother_of_the_church", "MME0", Rank.MEMORIA, P.MEMORIA_OBLIGATORIA_10, _W,
           "Beatae Mariae Virginis, Ecclesiae Matris",
           "The Blessed Virgin Mary, Mother of the Church", offset=50),
    _entry("most_holy_trinity", "TRN0", Rank.SOLLEMNITAS, P.SOLLEMNITAS_GENERALIS_3, _W,
           "Sanctissimae Trinitatis", "The Most Holy Trinity", offset=56),
    _entry("corpus_christi", "COR0", Rank.SOLLEMNITAS, P.SOLLEMNITAS_GENERALIS_3, _W,
           "Sanctissimi Corporis et Sanguinis Christi",
           "The Most Holy Body and Blood of Christ", rule=_corpus_christi),
    _entry("most_sacred_heart_of_jesus", "CIE0", Rank.SOLLEMNITAS, P.SOLLEMNITAS_GENERALIS_3, _W,
           "Sacratissimi Cordis Iesu", "The Most Sacred Heart of Jesus", offset=68),
    _entry("immaculate_heart_of_mary", "CIM0", Rank.MEMORIA, P.MEMORIA_OBLIGATORIA_10, _W,
           "Immaculati Cordis Beatae Mariae Virginis",
           "The Immaculate Heart of the Blessed Virgin Mary", offset=69),
    _entry("christ_the_king", "REX0", Rank.SOLLEMNITAS, P.SOLLEMNITAS_GENERALIS_3, _W,
           "Domini Nostri Iesu Christi Universorum Regis",
           "Our Lord Jesus Christ, King of the Universe", rule=_christ_the_king),
    _entry("holy_family", "SFA0", Rank.FESTUM, P.FESTUM_DOMINI_5, _W,
           "Sanctae Familiae Iesu, Mariae et Ioseph",
           "The Holy Family of Jesus, Mary and Joseph", rule=_holy_family),
    _entry("epiphany", "0106", Rank.SOLLEMNITAS, P.SOLLEMNITAS_DOMINI_IN_CALENDARIO_2, _W,
           "In Epiphania Domini", "The Epiphany of the Lord", rule=_epiphany),
    _entry("baptism_of_the_lord", "BAP0", Rank.FESTUM, P.FESTUM_DOMINI_5, _W,
           "In Baptismate Domini", "The Baptism of the Lord", rule=_baptism),
)
