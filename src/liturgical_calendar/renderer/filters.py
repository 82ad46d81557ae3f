"""Jinja2 template filters and environment setup."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from liturgical_calendar.models import Color, Rank
from liturgical_calendar.naming import to_roman

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates" / "html"

_COLOR_CSS: dict[Color, str] = {
    Color.ALBUS: "#f5f1e6",
    Color.RUBER: "#b22222",
    Color.VIRIDIS: "#2e7d32",
    Color.VIOLACEUS: "#5b2c83",
    Color.ROSACEUS: "#e58fac",
    Color.NIGER: "#222222",
}

_RANK_LABELS: dict[Rank, str] = {
    Rank.SOLLEMNITAS: "Solemnity",
    Rank.FESTUM: "Feast",
    Rank.MEMORIA: "Memorial",
    Rank.MEMORIA_AD_LIBITUM: "Optional Memorial",
    Rank.COMMEMORATIO: "Commemoration",
    Rank.FERIA: "",
}


def color_css(color: Color | None) -> str:
    """CSS color for a liturgical color swatch."""
    if color is None:
        return "transparent"
    return _COLOR_CSS[color]


def rank_label(rank: Rank | None) -> str:
    """Short English label for a rank; empty for weekdays."""
    if rank is None:
        return ""
    return _RANK_LABELS[rank]


def roman(num: int | None) -> str:
    """Roman numeral filter; empty for 0 or None."""
    if not num:
        return ""
    return to_roman(num)


def setup_jinja_env() -> Environment:
    """Create and configure the Jinja2 template environment."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["color_css"] = color_css
    env.filters["rank_label"] = rank_label
    env.filters["roman"] = roman
    return env
