"""Shared test fixtures — settings, variables and actions for a fixed reference date."""

from __future__ import annotations

from datetime import date

import pytest

from esg_roi.config import Action, RoiSettings, Variable, reset_roi_settings

AS_OF = date(2025, 6, 1)


@pytest.fixture(autouse=True)
def _fresh_settings_singleton():
    reset_roi_settings()
    yield
    reset_roi_settings()


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def settings() -> RoiSettings:
    return RoiSettings(
        currency="EUR",
        discount_rate=0.08,
        tax_rate=0.30,
        cashflow_horizon_years=10,
    )


@pytest.fixture
def zero_rate_settings() -> RoiSettings:
    """No discounting, no tax — cash flows can be checked by hand."""
    return RoiSettings(discount_rate=0.0, tax_rate=0.0, cashflow_horizon_years=3)


@pytest.fixture
def co2_price() -> Variable:
    return Variable(
        id="var-co2",
        name="CO2 price",
        unit="EUR/t",
        method="compoundGrowth",
        start_year=2025,
        start_value=10.0,
        growth_rate=0.10,
    )


@pytest.fixture
def heat_pump() -> Action:
    """A typical abatement action: 120 t CO2/yr baseline, 40% reduction."""
    return Action(
        id="act-heat-pump",
        title="Heat pump retrofit",
        status="IN_PROGRESS",
        kpi_name="CO2",
        kpi_unit="t",
        kpi_baseline_per_year=120.0,
        impact_type="reductionPercent",
        impact_value=40.0,
        monetization_fixed_rate_per_unit=90.0,
        capex_equipment=40_000.0,
        capex_installation=8_000.0,
        grant_percent=25.0,
        opex_maintenance=1_200.0,
        other_benefits_per_year=6_000.0,
        depreciation_years=8,
    )


@pytest.fixture
def solar_roof() -> Action:
    return Action(
        id="act-solar",
        title="Solar roof",
        status="OFFEN",
        kpi_unit="t",
        kpi_baseline_per_year=300.0,
        impact_type="reductionAbsolute",
        impact_value=80.0,
        monetization_fixed_rate_per_unit=60.0,
        capex_equipment=120_000.0,
        capex_installation=20_000.0,
        grant_amount=30_000.0,
        opex_maintenance=2_000.0,
        opex_other=500.0,
        other_benefits_per_year=15_000.0,
        due_date=date(2026, 4, 1),
    )


@pytest.fixture
def incomplete_action() -> Action:
    """Costs entered, KPI block still empty."""
    return Action(
        id="act-draft",
        title="Draft action",
        status="OFFEN",
        capex_equipment=10_000.0,
    )
