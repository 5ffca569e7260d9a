"""Tabular exports of ROI results as pandas DataFrames."""

from __future__ import annotations

import pandas as pd

from esg_roi.models.results import PortfolioSummary, RoiResult

YEAR_COLUMNS = [
    "t",
    "go_live_factor",
    "kpi_reduction",
    "rate_per_unit",
    "gross_benefit",
    "other_benefits",
    "total_benefit",
    "opex",
    "other_costs",
    "depreciation",
    "ebit",
    "taxes",
    "net_cashflow",
    "discount_factor",
    "discounted_cf",
    "cumulative_cf",
]

RANKING_COLUMNS = ["action_id", "title", "npv", "capex_total", "net_capex", "irr", "payback_years"]
MACC_COLUMNS = ["action_id", "title", "marginal_abatement_cost", "kpi_reduction_per_year"]


def years_frame(result: RoiResult) -> pd.DataFrame:
    """One row per projected year, indexed by calendar year."""
    df = pd.DataFrame([row.model_dump() for row in result.years], columns=["year", *YEAR_COLUMNS])
    return df.set_index("year")


def ranking_frame(summary: PortfolioSummary) -> pd.DataFrame:
    """NPV ranking, highest NPV first."""
    return pd.DataFrame([e.model_dump() for e in summary.npv_ranking], columns=RANKING_COLUMNS)


def macc_frame(summary: PortfolioSummary) -> pd.DataFrame:
    """MACC curve, cheapest abatement first, with the cumulative KPI reduction (x-axis)."""
    df = pd.DataFrame([e.model_dump() for e in summary.macc_curve], columns=MACC_COLUMNS)
    df["cumulative_kpi_reduction"] = df["kpi_reduction_per_year"].cumsum()
    return df
