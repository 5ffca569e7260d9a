"""Portfolio view — totals, NPV ranking and MACC curve across actions.

Actions without enough data for an ROI result are left out of every
aggregate.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from esg_roi.config.action import Action
from esg_roi.config.settings import RoiSettings
from esg_roi.engine.projection import compute_roi_many
from esg_roi.models.results import MaccEntry, PortfolioEntry, PortfolioSummary


def build_portfolio(
    actions: Iterable[Action],
    settings: RoiSettings,
    as_of: date | None = None,
    statuses: Iterable[str] | None = None,
) -> PortfolioSummary:
    """Aggregate ROI results over a set of actions.

    Parameters
    ----------
    actions : Iterable[Action]
        Candidate actions.
    settings : RoiSettings
        Global assumptions applied to every action.
    as_of : date | None
        Reference date for t = 0.  Defaults to today.
    statuses : Iterable[str] | None
        Keep only actions with one of these statuses. None or empty = all.
    """
    wanted = set(statuses) if statuses else None
    if wanted is not None:
        actions = [a for a in actions if a.status in wanted]

    computed = compute_roi_many(actions, settings, as_of)

    paybacks = [r.payback_years for _, r in computed if r.payback_years is not None]
    avg_payback = sum(paybacks) / len(paybacks) if paybacks else None

    ranking = [
        PortfolioEntry(
            action_id=action.id,
            title=action.title,
            npv=result.npv,
            capex_total=result.capex_total,
            net_capex=result.net_capex,
            irr=result.irr,
            payback_years=result.payback_years,
        )
        for action, result in computed
    ]
    ranking.sort(key=lambda e: e.npv, reverse=True)

    curve = [
        MaccEntry(
            action_id=action.id,
            title=action.title,
            marginal_abatement_cost=result.marginal_abatement_cost,
            kpi_reduction_per_year=result.kpi_reduction_per_year,
        )
        for action, result in computed
        if result.marginal_abatement_cost is not None
    ]
    curve.sort(key=lambda e: e.marginal_abatement_cost)

    return PortfolioSummary(
        action_count=len(computed),
        total_capex=sum(r.capex_total for _, r in computed),
        total_grant=sum(r.effective_grant for _, r in computed),
        total_net_capex=sum(r.net_capex for _, r in computed),
        total_npv=sum(r.npv for _, r in computed),
        avg_payback_years=avg_payback,
        npv_ranking=ranking,
        macc_curve=curve,
    )
