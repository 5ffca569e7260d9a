"""Narrative generator — plain-text verdicts on one action's ROI result.

Mirrors the KPI tiles of the action view: NPV sign, IRR against the
discount rate, payback within five years, and whether the abatement
pays for itself.
"""

from __future__ import annotations

from esg_roi.config.settings import RoiSettings
from esg_roi.models.results import RoiResult
from esg_roi.report.formatting import (
    format_currency,
    format_number,
    format_percent,
    format_years,
)

FAST_PAYBACK_YEARS = 5.0


def generate_narrative(result: RoiResult, settings: RoiSettings, kpi_unit: str | None = None) -> str:
    """Summarise an ROI result as a short structured text block."""
    cur = settings.currency
    unit = kpi_unit or "unit"

    sections: list[str] = []

    sections.append("=" * 60)
    sections.append("INVESTMENT")
    sections.append("=" * 60)
    sections.append(f"CAPEX total:        {format_currency(result.capex_total, cur)}")
    sections.append(f"Grant:              -{format_currency(result.effective_grant, cur)}")
    sections.append(f"Net CAPEX:          {format_currency(result.net_capex, cur)}")
    sections.append(f"OPEX per year:      {format_currency(result.opex_per_year, cur)}")
    sections.append(f"KPI reduction/year: {format_number(result.kpi_reduction_per_year, 1)} {unit}")

    sections.append("")
    sections.append("=" * 60)
    sections.append("VERDICT")
    sections.append("=" * 60)

    npv_word = "creates" if result.npv >= 0 else "destroys"
    sections.append(
        f"NPV {format_currency(result.npv, cur)} at "
        f"{format_percent(settings.discount_rate)} WACC: the action {npv_word} value."
    )

    if result.irr is None:
        sections.append("IRR: n/a (cash flows have no single break-even rate).")
    elif result.irr > settings.discount_rate:
        sections.append(f"IRR {format_percent(result.irr)} beats the discount rate.")
    else:
        sections.append(f"IRR {format_percent(result.irr)} is below the discount rate.")

    payback = format_years(result.payback_years)
    if result.payback_years is not None and result.payback_years <= FAST_PAYBACK_YEARS:
        sections.append(f"Payback: {payback} (within {FAST_PAYBACK_YEARS:.0f} years).")
    else:
        sections.append(f"Payback: {payback}.")

    sections.append(f"Quick ROI: {format_number(result.quick_roi, 2)}x net CAPEX.")

    if result.marginal_abatement_cost is None:
        sections.append("MACC: n/a (no KPI reduction within the horizon).")
    else:
        macc = f"{format_number(result.marginal_abatement_cost, 2)} {cur}/{unit}"
        if result.marginal_abatement_cost <= 0:
            sections.append(f"MACC: {macc} (profitable abatement).")
        else:
            sections.append(f"MACC: {macc} net cost per {unit} avoided.")

    return "\n".join(sections)
