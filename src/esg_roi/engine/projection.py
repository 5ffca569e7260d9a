"""Yearly ROI projection — one action, one set of global assumptions.

Row t = 0 is the investment year (−net CAPEX); rows t = 1..horizon follow
the go-live ramp.  Depreciation lowers the taxable base but is not a cash
item, so it is excluded from the net cash flow.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from esg_roi.config.action import Action
from esg_roi.config.settings import RoiSettings
from esg_roi.engine.activation import go_live_factor
from esg_roi.engine.variables import resolve_variable
from esg_roi.finance.metrics import (
    compute_irr,
    compute_macc,
    compute_npv,
    compute_payback,
    compute_quick_roi,
)
from esg_roi.models.results import RoiResult, RoiYearRow

logger = logging.getLogger(__name__)


def _val(value: float | None) -> float:
    return value if value is not None else 0.0


def compute_roi(action: Action, settings: RoiSettings, as_of: date | None = None) -> RoiResult | None:
    """Project an action's cash flows and derive NPV, IRR, payback, quick ROI and MACC.

    Parameters
    ----------
    action : Action
        Cost/benefit inputs of the action.
    settings : RoiSettings
        Discount rate, tax rate and horizon.
    as_of : date | None
        Date whose calendar year is t = 0.  Defaults to today.

    Returns
    -------
    RoiResult | None
        None when the KPI baseline or the impact value is missing or zero;
        the caller should ask for more input.
    """
    if not action.kpi_baseline_per_year or not action.impact_value:
        logger.debug("No ROI for action %s: KPI baseline or impact missing", action.id)
        return None

    horizon = settings.cashflow_horizon_years
    discount_rate = settings.discount_rate
    tax_rate = settings.tax_rate
    current_year = (as_of or date.today()).year

    # --- CAPEX & funding ---
    capex_total = (
        _val(action.capex_equipment)
        + _val(action.capex_installation)
        + _val(action.capex_software)
        + _val(action.capex_consulting)
        + _val(action.capex_other)
    )
    effective_grant = _val(action.grant_amount)
    if not effective_grant and action.grant_percent:
        effective_grant = capex_total * (action.grant_percent / 100)
    net_capex = capex_total - effective_grant

    # --- OPEX ---
    opex_per_year = (
        _val(action.opex_maintenance)
        + _val(action.opex_licenses)
        + _val(action.opex_personnel)
        + _val(action.opex_other)
    )

    # --- KPI reduction ---
    if action.impact_type == "reductionPercent":
        kpi_reduction_per_year = action.kpi_baseline_per_year * (action.impact_value / 100)
    else:
        # A negative absolute impact (an increase) still counts as its magnitude
        kpi_reduction_per_year = abs(action.impact_value)

    # --- Depreciation ---
    depreciation_years = (
        action.depreciation_years if action.depreciation_years is not None else horizon
    )
    annual_depreciation = net_capex / depreciation_years if depreciation_years > 0 else 0.0

    other_benefits_per_year = _val(action.other_benefits_per_year)
    other_costs_per_year = _val(action.other_costs_per_year)
    fixed_rate = _val(action.monetization_fixed_rate_per_unit)
    variable = action.monetization_variable

    # --- t = 0: investment ---
    cumulative_cf = -net_capex
    rows: list[RoiYearRow] = [RoiYearRow(
        year=current_year,
        t=0,
        go_live_factor=0.0,
        kpi_reduction=0.0,
        rate_per_unit=0.0,
        gross_benefit=0.0,
        other_benefits=0.0,
        total_benefit=0.0,
        opex=0.0,
        other_costs=0.0,
        depreciation=0.0,
        ebit=-net_capex,
        taxes=0.0,
        net_cashflow=-net_capex,
        discount_factor=1.0,
        discounted_cf=-net_capex,
        cumulative_cf=cumulative_cf,
    )]

    # --- Yearly loop ---
    for t in range(1, horizon + 1):
        year = current_year + t
        glf = go_live_factor(year, action.due_date, current_year)

        kpi_reduction = kpi_reduction_per_year * glf
        rate_per_unit = resolve_variable(variable, year) if variable is not None else fixed_rate

        gross_benefit = kpi_reduction * rate_per_unit
        other_benefits = other_benefits_per_year * glf
        total_benefit = gross_benefit + other_benefits

        opex = opex_per_year * glf
        other_costs = other_costs_per_year * glf
        depreciation = annual_depreciation if t <= depreciation_years else 0.0

        ebit = total_benefit - opex - other_costs - depreciation
        taxes = ebit * tax_rate if ebit > 0 else 0.0
        net_cf = total_benefit - opex - other_costs - taxes

        discount_factor = 1 / (1 + discount_rate) ** t
        discounted_cf = net_cf * discount_factor
        cumulative_cf += net_cf

        rows.append(RoiYearRow(
            year=year,
            t=t,
            go_live_factor=glf,
            kpi_reduction=kpi_reduction,
            rate_per_unit=rate_per_unit,
            gross_benefit=gross_benefit,
            other_benefits=other_benefits,
            total_benefit=total_benefit,
            opex=opex,
            other_costs=other_costs,
            depreciation=depreciation,
            ebit=ebit,
            taxes=taxes,
            net_cashflow=net_cf,
            discount_factor=discount_factor,
            discounted_cf=discounted_cf,
            cumulative_cf=cumulative_cf,
        ))

    # --- Summary metrics ---
    npv = compute_npv([r.discounted_cf for r in rows])

    irr = compute_irr([r.net_cashflow for r in rows])
    if irr is None:
        logger.debug("IRR unavailable for action %s", action.id)

    payback = compute_payback(
        [r.cumulative_cf for r in rows],
        [r.net_cashflow for r in rows],
    )
    quick_roi = compute_quick_roi(sum(r.total_benefit for r in rows), net_capex)
    macc = compute_macc(npv, sum(r.kpi_reduction for r in rows))

    return RoiResult(
        capex_total=capex_total,
        effective_grant=effective_grant,
        net_capex=net_capex,
        opex_per_year=opex_per_year,
        kpi_reduction_per_year=kpi_reduction_per_year,
        npv=npv,
        irr=irr,
        payback_years=payback,
        quick_roi=quick_roi,
        marginal_abatement_cost=macc,
        years=rows,
    )


def compute_roi_many(
    actions: Iterable[Action],
    settings: RoiSettings,
    as_of: date | None = None,
) -> list[tuple[Action, RoiResult]]:
    """ROI for each action, skipping those without enough data."""
    as_of = as_of or date.today()
    results: list[tuple[Action, RoiResult]] = []
    for action in actions:
        result = compute_roi(action, settings, as_of)
        if result is not None:
            results.append((action, result))
    return results
