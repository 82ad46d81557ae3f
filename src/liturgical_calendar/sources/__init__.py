"""Celebration sources: bundled General Roman Calendar and JSON overlays."""

from __future__ import annotations

from functools import lru_cache

from liturgical_calendar.config import UNIVERSAL, RegionalConfig
from liturgical_calendar.sources.base import (
    Candidates,
    CelebrationSource,
    CelebrationTable,
    occurrence,
)
from liturgical_calendar.sources.loader import load_overlay, parse_entry
from liturgical_calendar.sources.sanctorale import SANCTORALE
from liturgical_calendar.sources.temporale import NAMED_RULES, TEMPORALE


@lru_cache(maxsize=None)
def general_calendar(config: RegionalConfig = UNIVERSAL) -> CelebrationTable:
    """The bundled table for ``config``, built once per configuration."""
    return CelebrationTable(TEMPORALE, SANCTORALE, config)


__all__ = [
    "Candidates",
    "CelebrationSource",
    "CelebrationTable",
    "NAMED_RULES",
    "SANCTORALE",
    "TEMPORALE",
    "general_calendar",
    "load_overlay",
    "occurrence",
    "parse_entry",
]
