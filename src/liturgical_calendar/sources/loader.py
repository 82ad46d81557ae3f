"""JSON loading for regional calendar overlays.

An overlay file is a JSON list of entries::

    [{"id": "adalbert_bishop_martyr", "month": 4, "day": 23,
      "rank": "MEMORIA", "level": "MEMORIA_OBLIGATORIA_PROPRIA_11",
      "colors": ["RUBER"], "names": {"la": "S. Adalberti", "en": "Saint Adalbert"}}]

Temporale entries give ``"genus": "temporale"`` with an ``"offset"`` from
Easter or a named ``"rule"`` (see ``temporale.NAMED_RULES``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from liturgical_calendar.config import UNIVERSAL, RegionalConfig
from liturgical_calendar.exceptions import CelebrationDataError
from liturgical_calendar.models import Celebration, Color, Genus, PrecedenceLevel, Rank
from liturgical_calendar.sources.base import CelebrationTable
from liturgical_calendar.sources.temporale import NAMED_RULES

logger = logging.getLogger(__name__)


def _enum(enum_cls, raw, entry_id: str):
    try:
        return enum_cls[str(raw).upper()]
    except KeyError:
        raise CelebrationDataError(
            f"Entry {entry_id!r}: unknown {enum_cls.__name__} {raw!r}"
        ) from None


def parse_entry(raw: dict) -> Celebration:
    """Convert one JSON object into a Celebration."""
    entry_id = raw.get("id")
    if not entry_id:
        raise CelebrationDataError(f"Overlay entry without id: {raw!r}")
    for key in ("rank", "level"):
        if key not in raw:
            raise CelebrationDataError(f"Entry {entry_id!r} is missing {key!r}")

    genus = _enum(Genus, raw.get("genus", "sanctorale"), entry_id)
    rule = None
    if "rule" in raw:
        rule = NAMED_RULES.get(raw["rule"])
        if rule is None:
            raise CelebrationDataError(f"Entry {entry_id!r}: unknown date rule {raw['rule']!r}")

    month, day = raw.get("month"), raw.get("day")
    short_code = raw.get("short_code")
    if not short_code and month is not None and day is not None:
        short_code = f"{int(month):02d}{int(day):02d}"

    return Celebration(
        id=entry_id,
        short_code=short_code or "",
        genus=genus,
        rank=_enum(Rank, raw["rank"], entry_id),
        level=_enum(PrecedenceLevel, raw["level"], entry_id),
        colors=tuple(_enum(Color, c, entry_id) for c in raw.get("colors", ["ALBUS"])),
        names=dict(raw.get("names", {})),
        month=month,
        day=day,
        offset=raw.get("offset"),
        rule=rule,
    )


def load_overlay(path: str | Path, base: Optional[CelebrationTable] = None,
                 config: RegionalConfig = UNIVERSAL) -> CelebrationTable:
    """Load a JSON overlay on top of ``base``.

    Without a ``base`` the overlay sits on the general calendar built for
    ``config``, so moveable entries follow the same regional rules.
    """
    from liturgical_calendar.sources import general_calendar

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CelebrationDataError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, list):
        raise CelebrationDataError(f"{path}: expected a JSON list of entries")

    entries = [parse_entry(raw) for raw in data]
    logger.info("Loaded %d overlay entries from %s", len(entries), path)
    return (base or general_calendar(config)).with_overlay(entries)
