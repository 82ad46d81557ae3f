"""Regional calendar configuration.

Observance variants (Ascension, Corpus Christi, Epiphany on Sunday or on
their proper weekday) and display locale.  Defaults follow the universal
calendar; ``load_config()`` reads overrides from the environment or a
``.env`` file.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

from liturgical_calendar.exceptions import ConfigError

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class RegionalConfig:
    ascension_on_sunday: bool = False         # Thursday, Easter + 39
    corpus_christi_on_sunday: bool = False    # Thursday, Easter + 60
    epiphany_on_sunday: bool = False          # January 6
    locale: str = "la"
    include_optional_memorials: bool = True


UNIVERSAL = RegionalConfig()


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def load_config(**overrides) -> RegionalConfig:
    """Build a RegionalConfig from ``LITCAL_*`` environment variables.

    Explicit keyword overrides win over the environment.
    """
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))
    values: dict[str, object] = {}
    for env_name, attr in (
        ("LITCAL_ASCENSION_ON_SUNDAY", "ascension_on_sunday"),
        ("LITCAL_CORPUS_CHRISTI_ON_SUNDAY", "corpus_christi_on_sunday"),
        ("LITCAL_EPIPHANY_ON_SUNDAY", "epiphany_on_sunday"),
        ("LITCAL_OPTIONAL_MEMORIALS", "include_optional_memorials"),
    ):
        raw = os.getenv(env_name)
        if raw is not None:
            values[attr] = _parse_bool(env_name, raw)

    locale = os.getenv("LITCAL_LOCALE")
    if locale is not None:
        values["locale"] = locale.strip().lower()

    values.update(overrides)
    if not re.match(r"^[a-z]{2}$", str(values.get("locale", "la"))):
        raise ConfigError(
            f"Invalid locale: {values['locale']!r}. Expected an ISO 639-1 code."
        )
    config = RegionalConfig(**values)
    logger.debug("Loaded regional config: %s", config)
    return config
