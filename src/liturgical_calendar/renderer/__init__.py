"""Ordo rendering package: HTML tables of resolved liturgical days.

Uses Jinja2 templates under ``templates/html``.
"""

from __future__ import annotations

from liturgical_calendar.renderer.ordo import (
    build_ordo_context,
    generate_ordo_month,
    generate_ordo_range,
    render_ordo,
)

__all__ = [
    "build_ordo_context",
    "generate_ordo_month",
    "generate_ordo_range",
    "render_ordo",
]
