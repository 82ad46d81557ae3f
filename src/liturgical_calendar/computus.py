"""Easter computation and the moveable feasts derived from it.

Easter uses the Meeus/Jones/Butcher form of the Gregorian computus with
century-dependent (M, N) parameters.  Everything else in the temporale is
either a fixed offset from Easter or is anchored on Christmas.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

logger = logging.getLogger(__name__)

MIN_YEAR = 1583
MAX_YEAR = 2499

# (first year, last year) -> (M, N)
_CENTURY_PARAMS: list[tuple[int, int, int, int]] = [
    (1583, 1699, 22, 2),
    (1700, 1799, 23, 3),
    (1800, 1899, 23, 4),
    (1900, 2099, 24, 5),
    (2100, 2199, 24, 6),
    (2200, 2299, 25, 0),
    (2300, 2399, 26, 1),
    (2400, 2499, 25, 1),
]
_FALLBACK_PARAMS = (24, 5)

# Days from Easter Sunday.
EASTER_OFFSETS: dict[str, int] = {
    "ash_wednesday": -46,
    "palm_sunday": -7,
    "holy_monday": -6,
    "holy_tuesday": -5,
    "holy_wednesday": -4,
    "holy_thursday": -3,
    "good_friday": -2,
    "holy_saturday": -1,
    "easter": 0,
    "easter_monday": 1,
    "easter_tuesday": 2,
    "easter_wednesday": 3,
    "easter_thursday": 4,
    "easter_friday": 5,
    "easter_saturday": 6,
    "divine_mercy": 7,
    "ascension": 39,
    "pentecost": 49,
    "mary_mother_of_the_church": 50,
    "trinity": 56,
    "corpus_christi": 60,
    "sacred_heart": 68,
    "immaculate_heart": 69,
}


def weekday(day: date) -> int:
    """Day of week with Sunday = 0."""
    return day.isoweekday() % 7


def days_between(start: date, end: date) -> int:
    """Signed whole days from ``start`` to ``end``."""
    return end.toordinal() - start.toordinal()


def sunday_on_or_after(day: date) -> date:
    return day + timedelta(days=(7 - weekday(day)) % 7)


def sunday_after(day: date) -> date:
    """First Sunday strictly after ``day``."""
    return day + timedelta(days=7 - weekday(day))


def _century_params(year: int) -> tuple[int, int]:
    for first, last, m, n in _CENTURY_PARAMS:
        if first <= year <= last:
            return m, n
    logger.debug("Year %d outside %d-%d; using 1900-2099 computus parameters",
                 year, MIN_YEAR, MAX_YEAR)
    return _FALLBACK_PARAMS


def easter(year: int) -> date:
    """Gregorian Easter Sunday for ``year``.

    Years outside 1583-2499 fall back to the 1900-2099 parameter pair
    rather than failing.
    """
    m, n = _century_params(year)
    a = year % 19
    b = year % 4
    c = year % 7
    d = (19 * a + m) % 30
    e = (2 * b + 4 * c + 6 * d + n) % 7
    f = 22 + d + e
    # Gauss's two exceptions keep Easter on or before April 25
    if d == 29 and e == 6:
        f -= 7
    elif d == 28 and e == 6 and a > 10:
        f -= 7
    if f > 31:
        return date(year, 4, f - 31)
    return date(year, 3, f)


def easter_offset(day: date) -> int:
    """Signed days from the Easter of ``day``'s calendar year."""
    return days_between(easter(day.year), day)


def from_easter(year: int, name: str) -> date:
    """Date of a named entry of EASTER_OFFSETS in ``year``."""
    return easter(year) + timedelta(days=EASTER_OFFSETS[name])


def ash_wednesday(year: int) -> date:
    return from_easter(year, "ash_wednesday")


def palm_sunday(year: int) -> date:
    return from_easter(year, "palm_sunday")


def holy_thursday(year: int) -> date:
    return from_easter(year, "holy_thursday")


def good_friday(year: int) -> date:
    return from_easter(year, "good_friday")


def holy_saturday(year: int) -> date:
    return from_easter(year, "holy_saturday")


def divine_mercy_sunday(year: int) -> date:
    return from_easter(year, "divine_mercy")


def pentecost(year: int) -> date:
    return from_easter(year, "pentecost")


def trinity_sunday(year: int) -> date:
    return from_easter(year, "trinity")


def sacred_heart(year: int) -> date:
    return from_easter(year, "sacred_heart")


def ascension(year: int, on_sunday: bool = False) -> date:
    """Ascension Thursday, or the following Sunday where transferred."""
    day = from_easter(year, "ascension")
    return sunday_on_or_after(day) if on_sunday else day


def corpus_christi(year: int, on_sunday: bool = False) -> date:
    """Corpus Christi Thursday, or the following Sunday where transferred."""
    day = from_easter(year, "corpus_christi")
    return sunday_on_or_after(day) if on_sunday else day


def privileged_days(year: int) -> tuple[date, ...]:
    """Ash Wednesday, Palm Sunday and Holy Thursday through Easter."""
    return tuple(
        from_easter(year, name)
        for name in ("ash_wednesday", "palm_sunday", "holy_thursday",
                     "good_friday", "holy_saturday", "easter")
    )


# ── Christmas cycle ───────────────────────────────────────────────────

def first_advent(year: int) -> date:
    """First Sunday of Advent: the fourth Sunday before Christmas.

    Christmas on a Sunday counts as weekday 7 so Advent still spans four
    full weeks.
    """
    christmas = date(year, 12, 25)
    distance = weekday(christmas) or 7
    return christmas - timedelta(days=21 + distance)


def christ_the_king(year: int) -> date:
    return first_advent(year) - timedelta(days=7)


def holy_family(year: int) -> date:
    """Sunday within the Christmas octave, or Dec 30 if there is none."""
    christmas = date(year, 12, 25)
    if weekday(christmas) == 0:
        return date(year, 12, 30)
    return sunday_after(christmas)


def epiphany(year: int, on_sunday: bool = False) -> date:
    """January 6, or the Sunday between January 2 and 8."""
    if on_sunday:
        return sunday_on_or_after(date(year, 1, 2))
    return date(year, 1, 6)


def baptism_of_the_lord(year: int, epiphany_on_sunday: bool = False) -> date:
    """Sunday after Epiphany; Monday when Epiphany falls on Jan 7 or 8."""
    epi = epiphany(year, epiphany_on_sunday)
    if epi.day >= 7:
        return epi + timedelta(days=1)
    return sunday_after(epi)
