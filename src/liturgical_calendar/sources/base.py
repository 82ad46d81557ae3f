"""Celebration sources: the read-only candidate tables behind resolution.

A source answers two questions: which candidates fall on a date, and
where every candidate falls in a given year.  ``CelebrationTable`` is the
bundled implementation; it validates its entries once at construction and
never mutates afterwards.  Regional overlays produce a new table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Protocol

from liturgical_calendar import computus
from liturgical_calendar.config import UNIVERSAL, RegionalConfig
from liturgical_calendar.exceptions import CelebrationDataError
from liturgical_calendar.models import Celebration, Genus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidates:
    """Candidates for one date: at most one temporale, any number of sanctorale."""
    temporale: Optional[Celebration] = None
    sanctorale: tuple[Celebration, ...] = ()


class CelebrationSource(Protocol):
    config: RegionalConfig

    def by_date(self, day: date) -> Candidates:
        ...

    def by_year(self, year: int) -> list[tuple[date, Celebration]]:
        ...


def occurrence(celebration: Celebration, year: int,
               config: RegionalConfig = UNIVERSAL) -> Optional[date]:
    """Date on which ``celebration`` falls in ``year``, or None (Feb 29)."""
    if celebration.rule is not None:
        return celebration.rule(year, config)
    if celebration.offset is not None:
        return computus.easter(year) + timedelta(days=celebration.offset)
    try:
        return date(year, celebration.month, celebration.day)
    except ValueError:
        return None


def _check_fixed_date(entry: Celebration) -> None:
    if entry.month is None or entry.day is None:
        raise CelebrationDataError(f"Sanctorale entry {entry.id!r} is missing month or day")
    try:
        date(2000, entry.month, entry.day)  # leap year admits Feb 29
    except ValueError:
        raise CelebrationDataError(
            f"Sanctorale entry {entry.id!r} has impossible date "
            f"{entry.month:02d}-{entry.day:02d}"
        ) from None


class CelebrationTable:
    """Immutable, validated temporale + sanctorale table."""

    def __init__(
        self,
        temporale: Iterable[Celebration],
        sanctorale: Iterable[Celebration],
        config: RegionalConfig = UNIVERSAL,
    ):
        self.config = config
        self._temporale = tuple(temporale)
        self._sanctorale = tuple(sanctorale)
        self._validate()

        by_day: dict[tuple[int, int], list[Celebration]] = {}
        for entry in self._sanctorale:
            by_day.setdefault((entry.month, entry.day), []).append(entry)
        self._by_day = {
            key: tuple(sorted(entries, key=lambda c: c.level.value))
            for key, entries in by_day.items()
        }
        logger.info("Loaded celebration table: %d temporale, %d sanctorale",
                    len(self._temporale), len(self._sanctorale))

    def _validate(self) -> None:
        seen: set[str] = set()
        for entry in self._temporale + self._sanctorale:
            if not entry.id:
                raise CelebrationDataError("Celebration with empty id")
            if entry.id in seen:
                raise CelebrationDataError(f"Duplicate celebration id: {entry.id!r}")
            seen.add(entry.id)
            if not entry.short_code:
                raise CelebrationDataError(f"Celebration {entry.id!r} has no short code")

        for entry in self._temporale:
            if entry.genus is not Genus.TEMPORALE:
                raise CelebrationDataError(f"{entry.id!r} listed as temporale but is {entry.genus.value}")
            if entry.offset is None and entry.rule is None:
                raise CelebrationDataError(
                    f"Temporale entry {entry.id!r} needs an Easter offset or a date rule"
                )

        levels: dict[tuple[int, int, int], str] = {}
        for entry in self._sanctorale:
            if entry.genus is not Genus.SANCTORALE:
                raise CelebrationDataError(f"{entry.id!r} listed as sanctorale but is {entry.genus.value}")
            _check_fixed_date(entry)
            if entry.level.seasonal_only:
                raise CelebrationDataError(
                    f"Sanctorale entry {entry.id!r} uses seasonal level {entry.level.name}"
                )
            key = (entry.month, entry.day, entry.level.value)
            if key in levels:
                raise CelebrationDataError(
                    f"Overlapping precedence {entry.level.name} on "
                    f"{entry.month:02d}-{entry.day:02d}: {levels[key]!r} and {entry.id!r}"
                )
            levels[key] = entry.id

    # -- Queries ------------------------------------------------------------

    @property
    def temporale(self) -> tuple[Celebration, ...]:
        return self._temporale

    @property
    def sanctorale(self) -> tuple[Celebration, ...]:
        return self._sanctorale

    def get(self, celebration_id: str) -> Optional[Celebration]:
        for entry in self._temporale + self._sanctorale:
            if entry.id == celebration_id:
                return entry
        return None

    def by_date(self, day: date) -> Candidates:
        matches = [
            entry for entry in self._temporale
            if occurrence(entry, day.year, self.config) == day
        ]
        if len(matches) > 1:
            raise CelebrationDataError(
                f"Several temporale entries fall on {day.isoformat()}: "
                + ", ".join(entry.id for entry in matches)
            )
        return Candidates(
            temporale=matches[0] if matches else None,
            sanctorale=self._by_day.get((day.month, day.day), ()),
        )

    def by_year(self, year: int) -> list[tuple[date, Celebration]]:
        result = []
        for entry in self._temporale + self._sanctorale:
            day = occurrence(entry, year, self.config)
            if day is not None:
                result.append((day, entry))
        result.sort(key=lambda pair: (pair[0], pair[1].level.value))
        return result

    def with_overlay(self, entries: Iterable[Celebration]) -> CelebrationTable:
        """Return a new table with ``entries`` added or replacing same-id entries."""
        overlay = {entry.id: entry for entry in entries}
        for entry_id in overlay:
            if self.get(entry_id) is not None:
                logger.warning("Overlay replaces bundled celebration %r", entry_id)

        existing = self._temporale + self._sanctorale
        existing_ids = {entry.id for entry in existing}
        combined = [overlay.get(entry.id, entry) for entry in existing]
        combined.extend(e for e in overlay.values() if e.id not in existing_ids)
        return CelebrationTable(
            [e for e in combined if e.genus is Genus.TEMPORALE],
            [e for e in combined if e.genus is not Genus.TEMPORALE],
            self.config,
        )

    def with_config(self, config: RegionalConfig) -> CelebrationTable:
        return CelebrationTable(self._temporale, self._sanctorale, config)
