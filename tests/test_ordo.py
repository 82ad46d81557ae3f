"""Tests for the HTML ordo renderer."""

from __future__ import annotations

from datetime import date

import pytest

from liturgical_calendar import CalendarError, LiturgicalCalendar, RegionalConfig
from liturgical_calendar.renderer import (
    build_ordo_context,
    generate_ordo_month,
    generate_ordo_range,
    render_ordo,
)

CAL = LiturgicalCalendar()


class TestBuildOrdoContext:

    def test_rows_follow_days(self):
        days = CAL.calendar_range(date(2025, 7, 14), date(2025, 7, 20))
        ctx = build_ordo_context(days, "Week", "en")
        assert ctx["title"] == "Week"
        assert len(ctx["rows"]) == 7
        row = ctx["rows"][1]
        assert row["date"] == date(2025, 7, 15)
        assert row["weekday"] == "3MAR"
        assert row["lauds"] == "ORD/15/3MAR/LAU"
        assert row["cycles"] == "C/I"
        assert row["name"] == "Tuesday of the 15th Week in Ordinary Time"
        assert ctx["rows"][-1]["is_sunday"]

    def test_alternates_and_transfers_listed(self):
        [concurrent] = CAL.calendar_range(date(2025, 6, 28), date(2025, 6, 28))
        row = build_ordo_context([concurrent], "x", "en")["rows"][0]
        assert "Saint Irenaeus, Bishop and Martyr" in row["alternates"]

        [impeded] = CAL.calendar_range(date(2024, 3, 25), date(2024, 3, 25))
        row = build_ordo_context([impeded], "x", "en")["rows"][0]
        assert len(row["transfers"]) == 1


class TestRenderOrdo:

    def test_render_contains_rows(self):
        days = CAL.calendar_range(date(2024, 12, 8), date(2024, 12, 8))
        html = render_ordo(days, "Ordo test")
        assert "<h1>Ordo test</h1>" in html
        assert "ADV/02/1DOM/LAU" in html
        assert "Comm." in html
        assert 'lang="la"' in html

    def test_render_escapes_title(self):
        html = render_ordo([], "<Ordo>")
        assert "&lt;Ordo&gt;" in html


class TestGenerateOrdo:

    def test_month_written(self, tmp_path):
        out = generate_ordo_month(2025, 12, tmp_path / "ordo" / "dec.html")
        assert out.exists()
        html = out.read_text(encoding="utf-8")
        assert "Ordo December 2025" in html
        assert "1208/LAU" in html
        assert html.count("<tr class=") == 31

    def test_month_uses_calendar_locale(self, tmp_path):
        cal = LiturgicalCalendar(RegionalConfig(locale="en"))
        out = generate_ordo_month(2025, 6, tmp_path / "june.html", calendar=cal)
        assert "Saints Peter and Paul, Apostles" in out.read_text(encoding="utf-8")

    def test_range_written(self, tmp_path):
        out = generate_ordo_range(date(2025, 4, 13), date(2025, 4, 20),
                                  tmp_path / "holy_week.html")
        html = out.read_text(encoding="utf-8")
        assert "TRI2/LAU" in html
        assert html.count("<tr class=") == 8

    def test_empty_range(self, tmp_path):
        with pytest.raises(CalendarError, match="Empty range"):
            generate_ordo_range(date(2025, 4, 20), date(2025, 4, 13), tmp_path / "x.html")
