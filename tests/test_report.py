"""Tests for report/ — number formatting, DataFrame exports and narrative text."""

from __future__ import annotations

from datetime import date

import pytest

from esg_roi.config import Action, RoiSettings
from esg_roi.engine.projection import compute_roi
from esg_roi.finance.portfolio import build_portfolio
from esg_roi.report.formatting import format_currency, format_number, format_percent, format_years
from esg_roi.report.narrative import generate_narrative
from esg_roi.report.tables import macc_frame, ranking_frame, years_frame

NBSP = "\u00a0"


class TestFormatting:
    def test_grouping_and_decimal_comma(self):
        assert format_number(1234567.891, 2) == "1.234.567,89"
        assert format_number(1234.26, 1) == "1.234,3"
        assert format_number(999) == "999"

    def test_negative(self):
        assert format_number(-1500) == "-1.500"

    def test_rounds_to_zero_without_sign(self):
        assert format_number(-0.2) == "0"

    def test_currency(self):
        assert format_currency(1500) == f"1.500{NBSP}€"
        assert format_currency(-20.5, "USD", 2) == f"-20,50{NBSP}$"
        assert format_currency(10, "CHF") == f"10{NBSP}CHF"

    def test_percent(self):
        assert format_percent(0.125) == f"12,5{NBSP}%"
        assert format_percent(0.08, 0) == f"8{NBSP}%"

    def test_years(self):
        assert format_years(2.0) == "2,0 years"
        assert format_years(None) == "> horizon"


class TestTables:
    def test_years_frame(self, heat_pump: Action, settings: RoiSettings, as_of: date):
        result = compute_roi(heat_pump, settings, as_of)
        df = years_frame(result)
        assert len(df) == settings.cashflow_horizon_years + 1
        assert df.index[0] == 2025
        assert df["discounted_cf"].sum() == pytest.approx(result.npv)
        assert df.loc[2026, "net_cashflow"] == pytest.approx(result.years[1].net_cashflow)

    def test_ranking_and_macc_frames(self, heat_pump: Action, solar_roof: Action,
                                     settings: RoiSettings, as_of: date):
        summary = build_portfolio([heat_pump, solar_roof], settings, as_of)
        ranking = ranking_frame(summary)
        assert list(ranking["action_id"]) == [e.action_id for e in summary.npv_ranking]

        macc = macc_frame(summary)
        assert macc["cumulative_kpi_reduction"].iloc[-1] == pytest.approx(
            sum(e.kpi_reduction_per_year for e in summary.macc_curve)
        )

    def test_empty_frames(self, settings: RoiSettings, as_of: date):
        summary = build_portfolio([], settings, as_of)
        assert ranking_frame(summary).empty
        assert macc_frame(summary).empty


class TestNarrative:
    def test_profitable_action(self, heat_pump: Action, settings: RoiSettings, as_of: date):
        result = compute_roi(heat_pump, settings, as_of)
        text = generate_narrative(result, settings, kpi_unit="t")
        assert "creates value" in text
        assert "beats the discount rate" in text
        assert "within 5 years" in text
        assert "profitable abatement" in text
        assert "EUR/t" in text

    def test_without_irr_or_macc(self, as_of: date):
        settings = RoiSettings(discount_rate=0.05, cashflow_horizon_years=3)
        action = Action(
            kpi_baseline_per_year=10.0,
            impact_value=10.0,
            due_date=date(2040, 1, 1),
            capex_equipment=500.0,
        )
        result = compute_roi(action, settings, as_of)
        text = generate_narrative(result, settings)
        assert "IRR: n/a" in text
        assert "MACC: n/a" in text
        assert "> horizon" in text
        assert "destroys value" in text
