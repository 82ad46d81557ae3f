"""Tests for precedence resolution and the ordered rule table."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from liturgical_calendar import LiturgicalCalendar, PrecedenceConflictError, RegionalConfig
from liturgical_calendar.models import (
    Celebration,
    Genus,
    PrecedenceLevel,
    Rank,
    Season,
)
from liturgical_calendar.precedence import (
    RULES,
    Outcome,
    seasonal_candidate,
    seasonal_level,
    substitute_date,
    title_code,
)
from liturgical_calendar.season import season_info
from liturgical_calendar.sources import CelebrationTable, general_calendar

CAL = LiturgicalCalendar()


def _ids(celebrations) -> list[str]:
    return [c.id for c in celebrations]


def _transferred(resolved) -> dict[str, object]:
    return {t.celebration.id: t for t in resolved.transfers}


class TestRuleTable:

    def test_rules_are_ordered(self):
        assert [rule.name for rule in RULES] == [
            "holy-week-or-easter-octave",
            "optional-memorials-disabled",
            "privileged-day",
            "solemnity-impeded-by-temporale",
            "feast-impeded-by-temporale",
            "optional-memorial-in-advent-or-lent",
            "concurrent-obligatory-memorials",
        ]

    def test_outcomes(self):
        outcomes = {rule.name: rule.outcome for rule in RULES}
        assert outcomes["holy-week-or-easter-octave"] is Outcome.TRANSFERRED
        assert outcomes["solemnity-impeded-by-temporale"] is Outcome.TRANSFERRED
        assert outcomes["feast-impeded-by-temporale"] is Outcome.SUPPRESSED
        assert outcomes["concurrent-obligatory-memorials"] is Outcome.ALTERNATE_ONLY


class TestTemporale:

    def test_easter_sunday(self):
        day = CAL.resolve(date(2025, 4, 20))
        assert day.primary.id == "easter_sunday"
        assert day.level.tier == 1
        assert day.short_code == "PAS0"

    def test_temporale_replaces_seasonal_candidate(self):
        day = CAL.resolve(date(2025, 6, 8))
        assert day.primary.id == "pentecost_sunday"
        assert all(c.genus is not Genus.SEASONAL for c in day.commemorations)

    def test_ash_wednesday_suppresses_feast(self):
        # Chair of Peter falls on Ash Wednesday in 2023
        day = CAL.resolve(date(2023, 2, 22))
        assert day.primary.id == "ash_wednesday"
        assert "chair_of_peter_apostle" in _ids(day.suppressed)
        assert "chair_of_peter_apostle" not in _ids(day.commemorations)


class TestTransfers:

    def test_joseph_in_holy_week(self):
        day = CAL.resolve(date(2035, 3, 19))
        assert day.primary.id == "holy_week_feria_2"
        transfer = _transferred(day)["joseph_spouse_of_mary"]
        assert transfer.substitute == date(2035, 3, 17)
        assert "joseph_spouse_of_mary" not in _ids(day.commemorations)

    def test_annunciation_in_holy_week(self):
        day = CAL.resolve(date(2024, 3, 25))
        transfer = _transferred(day)["annunciation"]
        assert transfer.reason == "holy-week-or-easter-octave"
        assert transfer.substitute == date(2024, 4, 8)

    def test_annunciation_on_good_friday(self):
        day = CAL.resolve(date(2016, 3, 25))
        assert day.primary.id == "good_friday"
        assert _transferred(day)["annunciation"].substitute == date(2016, 4, 4)

    def test_substitute_not_reexposed(self):
        day = CAL.resolve(date(2024, 4, 8))
        assert "annunciation" not in _ids((day.primary,) + day.commemorations)

    def test_john_the_baptist_yields_to_sacred_heart(self):
        day = CAL.resolve(date(2022, 6, 24))
        assert day.primary.id == "most_sacred_heart_of_jesus"
        transfer = _transferred(day)["nativity_of_john_the_baptist"]
        assert transfer.reason == "solemnity-impeded-by-temporale"

    def test_annunciation_outside_window_has_no_substitute(self):
        annunciation = general_calendar().get("annunciation")
        assert substitute_date(annunciation, date(2025, 3, 25)) is None

    def test_unlisted_celebration_has_no_substitute(self):
        peter_paul = general_calendar().get("peter_and_paul_apostles")
        assert substitute_date(peter_paul, date(2025, 6, 29)) is None


class TestSanctorale:

    def test_solemnity_on_advent_sunday_is_commemorated(self):
        day = CAL.resolve(date(2024, 12, 8))
        assert day.primary.genus is Genus.SEASONAL
        assert day.level is PrecedenceLevel.DOMINICA_PRIVILEGIATA_2
        assert "immaculate_conception_of_mary" in _ids(day.commemorations)
        assert not day.transfers

    def test_solemnity_beats_ordinary_sunday(self):
        day = CAL.resolve(date(2026, 11, 1))
        assert day.primary.id == "all_saints"

    def test_feast_beats_christmas_octave(self):
        day = CAL.resolve(date(2025, 12, 26))
        assert day.primary.id == "stephen_first_martyr"

    def test_feast_under_holy_family_is_commemorated(self):
        day = CAL.resolve(date(2025, 12, 28))
        assert day.primary.id == "holy_family"
        assert "holy_innocents_martyrs" in _ids(day.commemorations)

    def test_optional_memorial_is_primary_in_ordinary_time(self):
        day = CAL.resolve(date(2025, 7, 23))
        assert day.primary.id == "bridget_religious"
        assert day.rank is Rank.MEMORIA_AD_LIBITUM

    def test_optional_memorial_in_advent_is_commemoration_only(self):
        day = CAL.resolve(date(2025, 12, 6))
        assert day.primary.genus is Genus.SEASONAL
        assert "nicholas_bishop" in _ids(day.commemorations)
        assert "nicholas_bishop" not in _ids(day.alternates)

    def test_optional_memorials_disabled(self):
        cal = LiturgicalCalendar(RegionalConfig(include_optional_memorials=False))
        day = cal.resolve(date(2025, 7, 23))
        assert day.primary.genus is Genus.SEASONAL
        assert "bridget_religious" in _ids(day.suppressed)

    def test_concurrent_obligatory_memorials_become_alternates(self):
        # Immaculate Heart and Irenaeus share June 28 in 2025
        day = CAL.resolve(date(2025, 6, 28))
        assert day.primary.genus is Genus.SEASONAL
        assert set(_ids(day.alternates)) == {
            "immaculate_heart_of_mary", "irenaeus_bishop_martyr",
        }


class TestSeasonalCandidate:

    @pytest.mark.parametrize("day, expected", [
        (date(2025, 12, 20), PrecedenceLevel.FERIA_ADVENTUS_17_24_9),
        (date(2025, 12, 2), PrecedenceLevel.FERIA_ADVENTUS_13),
        (date(2025, 12, 21), PrecedenceLevel.DOMINICA_PRIVILEGIATA_2),
        (date(2025, 12, 28), PrecedenceLevel.DOMINICA_NATIVITATIS_6),
        (date(2025, 12, 29), PrecedenceLevel.DIES_OCTAVAE_NATIVITATIS_9),
        (date(2026, 1, 5), PrecedenceLevel.FERIA_NATIVITATIS_13),
        (date(2025, 3, 5), PrecedenceLevel.FERIA_IV_CINERUM_2),
        (date(2025, 3, 12), PrecedenceLevel.FERIA_QUADRAGESIMAE_9),
        (date(2025, 4, 15), PrecedenceLevel.FERIA_HEBDOMADAE_SANCTAE_2),
        (date(2025, 4, 18), PrecedenceLevel.TRIDUUM_1),
        (date(2025, 4, 20), PrecedenceLevel.TRIDUUM_1),
        (date(2025, 4, 27), PrecedenceLevel.DIES_OCTAVAE_PASCHAE_2),
        (date(2025, 5, 14), PrecedenceLevel.FERIA_PASCHAE_13),
        (date(2025, 7, 20), PrecedenceLevel.DOMINICA_ORDINARII_6),
        (date(2025, 7, 15), PrecedenceLevel.FERIA_ORDINARII_14),
    ])
    def test_seasonal_level(self, day, expected):
        assert seasonal_level(day, season_info(day)) is expected

    def test_weekday_candidate(self):
        cand = seasonal_candidate(season_info(date(2025, 7, 15)))
        assert cand.genus is Genus.SEASONAL
        assert cand.rank is Rank.FERIA
        assert cand.short_code == "ORD15"
        assert cand.name("en") == "Tuesday of the 15th Week in Ordinary Time"
        assert cand.name("la") == "Feria III Hebdomadae XV per Annum"

    def test_sunday_candidate(self):
        cand = seasonal_candidate(season_info(date(2025, 12, 14)))
        assert cand.rank is Rank.SOLLEMNITAS
        assert cand.name("en") == "3rd Sunday of Advent"

    def test_title_code(self):
        assert title_code(season_info(date(2025, 7, 15))) == "TIT;ORD;ST15;3MAR;Y-CI"


def _custom(short_code: str, genus: Genus, level: PrecedenceLevel, **kwargs) -> Celebration:
    return Celebration(
        id=short_code.lower(),
        short_code=short_code,
        genus=genus,
        rank=Rank.MEMORIA_AD_LIBITUM,
        level=level,
        **kwargs,
    )


class TestResolution:

    def test_empty_source_always_yields_a_primary(self):
        cal = LiturgicalCalendar(source=CelebrationTable([], []))
        day = date(2025, 1, 1)
        while day.year == 2025:
            resolved = cal.resolve(day)
            assert resolved.primary.genus is Genus.SEASONAL
            assert resolved.season in Season
            day += timedelta(days=1)

    def test_easter_sunday_without_entry_keeps_first_tier(self):
        cal = LiturgicalCalendar(source=CelebrationTable([], []))
        easter = cal.resolve(date(2025, 4, 20))
        assert easter.primary.genus is Genus.SEASONAL
        assert easter.primary.level.tier == 1
        assert cal.resolve(date(2025, 4, 21)).primary.level is PrecedenceLevel.DIES_OCTAVAE_PASCHAE_2

    def test_equal_levels_raise_conflict(self):
        # Easter 2025 + 100 days is July 29
        table = CelebrationTable(
            [_custom("TMP1", Genus.TEMPORALE, PrecedenceLevel.MEMORIA_AD_LIBITUM_12, offset=100)],
            [_custom("SAN1", Genus.SANCTORALE, PrecedenceLevel.MEMORIA_AD_LIBITUM_12,
                     month=7, day=29)],
        )
        cal = LiturgicalCalendar(source=table)
        with pytest.raises(PrecedenceConflictError):
            cal.resolve(date(2025, 7, 29))

    def test_resolution_is_deterministic(self):
        assert CAL.resolve(date(2025, 6, 28)) == CAL.resolve(date(2025, 6, 28))
