"""Result types — the contract between the ROI engine, portfolio views and reports.

Values are kept at full float precision; rounding is a presentation
concern (see ``esg_roi.report``).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# Single action
# ═══════════════════════════════════════════════════════════════════════════

class RoiYearRow(BaseModel):
    """One projected year.  ``t = 0`` is the investment year."""

    year: int
    """Calendar year (current year + t)."""

    t: int
    """Period index used for discounting."""

    go_live_factor: float
    """Fraction of the year the measure is operational (0–1)."""

    kpi_reduction: float
    """KPI units avoided this year = kpi_reduction_per_year × go_live_factor."""

    rate_per_unit: float
    """Money value per KPI unit (linked variable or fixed rate)."""

    gross_benefit: float
    other_benefits: float
    total_benefit: float
    opex: float
    other_costs: float

    depreciation: float
    """Straight-line depreciation of net CAPEX; reduces EBIT, not cash."""

    ebit: float
    taxes: float
    """ebit × tax_rate when ebit > 0, else 0 (no loss carry-forward)."""

    net_cashflow: float
    """total_benefit − opex − other_costs − taxes; −net_capex at t = 0."""

    discount_factor: float
    """1 / (1 + discount_rate)^t."""

    discounted_cf: float
    cumulative_cf: float
    """Running undiscounted sum of net_cashflow from t = 0."""


class RoiResult(BaseModel):
    """Full ROI analysis of one action."""

    capex_total: float
    effective_grant: float
    net_capex: float
    """capex_total − effective_grant."""

    opex_per_year: float
    kpi_reduction_per_year: float

    npv: float
    """Σ discounted_cf over all rows, including the t = 0 investment."""

    irr: float | None
    """Internal Rate of Return. None if Newton–Raphson finds no root."""

    payback_years: float | None
    """Interpolated years until cumulative cash flow turns non-negative. None if never."""

    quick_roi: float
    """Undiscounted total benefit / net CAPEX (0 when net CAPEX ≤ 0)."""

    marginal_abatement_cost: float | None
    """−NPV per KPI unit avoided. ≤ 0 means profitable abatement. None without reduction."""

    years: list[RoiYearRow] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Portfolio
# ═══════════════════════════════════════════════════════════════════════════

class PortfolioEntry(BaseModel):
    """One action in the NPV ranking."""

    action_id: str | None
    title: str
    npv: float
    capex_total: float
    net_capex: float
    irr: float | None
    payback_years: float | None


class MaccEntry(BaseModel):
    """One bar of the marginal abatement cost curve."""

    action_id: str | None
    title: str
    marginal_abatement_cost: float
    kpi_reduction_per_year: float


class PortfolioSummary(BaseModel):
    """Aggregate view over every action with enough data for a result."""

    action_count: int
    total_capex: float
    total_grant: float
    total_net_capex: float
    total_npv: float

    avg_payback_years: float | None
    """Mean payback over actions that pay back. None if none do."""

    npv_ranking: list[PortfolioEntry] = Field(default_factory=list)
    """Sorted by NPV, highest first."""

    macc_curve: list[MaccEntry] = Field(default_factory=list)
    """Sorted by marginal abatement cost, cheapest first."""
