"""
Generate a sample ordo for one month and print its fragment paths.

Usage:
    source venv/bin/activate
    python scripts/generate_ordo.py [YYYY MM]

Produces an HTML ordo in output/ and prints the Lauds paths of each day.
Regional variants are read from LITCAL_* variables or a .env file.
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from liturgical_calendar import LiturgicalCalendar, load_config
from liturgical_calendar.models import Hour
from liturgical_calendar.renderer import generate_ordo_month

OUTPUT_DIR = Path(__file__).resolve().parents[1] / "output"
YEAR = 2025
MONTH = 12


def main():
    year, month = YEAR, MONTH
    if len(sys.argv) == 3:
        year, month = int(sys.argv[1]), int(sys.argv[2])
    OUTPUT_DIR.mkdir(exist_ok=True)

    print("=" * 60)
    print(f"Generating Ordo for {year}-{month:02d}")
    print("=" * 60)

    config = load_config()
    print(f"\n1. Config: {config}")
    calendar = LiturgicalCalendar(config)

    print("\n2. Resolving days...")
    for day in calendar.calendar_month(year, month):
        paths = calendar.fragments(day.date, Hour.LAUDES)
        print(f"   {day.date}  {paths.primary:<22} {day.name(config.locale)}")
        for transfer in day.transfers:
            print(f"     transferred: {transfer.celebration.id} -> {transfer.substitute}")

    print("\n3. Rendering HTML ordo...")
    path = generate_ordo_month(
        year, month, OUTPUT_DIR / f"ordo-{year}-{month:02d}.html", calendar=calendar
    )
    print(f"   Saved: {path}")

    print("\n" + "=" * 60)
    print(f"Done! Files in: {OUTPUT_DIR}")
    print("=" * 60)


if __name__ == "__main__":
    main()
