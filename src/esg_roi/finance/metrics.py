"""Investment-appraisal metrics — NPV, IRR, payback, quick ROI, MACC.

Operates on the yearly series produced by the projection engine, where
index 0 is the investment year.

Key formulas:
  NPV     = Σ CF_t / (1 + r)^t
  IRR     = rate where NPV = 0  (Newton–Raphson, analytic derivative)
  Payback = (i − 1) + (−cum_{i−1} / CF_i) at the first negative → non-negative crossover
  MACC    = −NPV / Σ KPI reduction
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

IRR_GUESS = 0.1
IRR_MAX_ITER = 100
IRR_TOLERANCE = 1e-7
IRR_MIN_SLOPE = 1e-14


def compute_npv(discounted_cash_flows: Sequence[float]) -> float:
    """Sum of already-discounted yearly cash flows."""
    return float(sum(discounted_cash_flows))


def _npv_and_slope(cash_flows: np.ndarray, periods: np.ndarray, rate: float) -> tuple[float, float]:
    """NPV at ``rate`` and its derivative dNPV/dr."""
    growth = 1 + rate
    npv = np.sum(cash_flows / growth ** periods)
    slope = np.sum(-periods[1:] * cash_flows[1:] / growth ** (periods[1:] + 1))
    return float(npv), float(slope)


def compute_irr(
    cash_flows: Sequence[float],
    guess: float = IRR_GUESS,
    max_iter: int = IRR_MAX_ITER,
    tol: float = IRR_TOLERANCE,
) -> float | None:
    """Internal Rate of Return of yearly cash flows (index 0 = t0).

    Returns None if:
      - the derivative vanishes (|dNPV/dr| < 1e-14), e.g. all flows at t0
      - the iterate reaches r = −1 or stops being finite
      - successive rates do not settle within ``tol`` in ``max_iter`` steps
    """
    flows = np.asarray(cash_flows, dtype=float)
    periods = np.arange(flows.size)

    rate = guess
    with np.errstate(all="ignore"):
        for _ in range(max_iter):
            if rate == -1:
                return None
            npv, slope = _npv_and_slope(flows, periods, rate)
            if not (math.isfinite(npv) and math.isfinite(slope)):
                return None
            if abs(slope) < IRR_MIN_SLOPE:
                return None
            new_rate = rate - npv / slope
            if not math.isfinite(new_rate):
                return None
            if abs(new_rate - rate) < tol:
                return new_rate
            rate = new_rate
    return None


def compute_payback(cumulative: Sequence[float], net_cash_flows: Sequence[float]) -> float | None:
    """Years until cumulative cash flow turns non-negative, interpolated within the year.

    A series that never goes negative pays back immediately (0.0).
    Returns None if a negative cumulative position is never recovered.
    """
    for i in range(1, len(cumulative)):
        prev = cumulative[i - 1]
        if cumulative[i] >= 0 and prev < 0 and net_cash_flows[i] > 0:
            return (i - 1) + (-prev / net_cash_flows[i])

    if cumulative and all(c >= 0 for c in cumulative):
        return 0.0
    return None


def compute_quick_roi(total_benefits: float, net_capex: float) -> float:
    """Undiscounted benefit multiple on net CAPEX; 0 when nothing was invested."""
    if net_capex <= 0:
        return 0.0
    return total_benefits / net_capex


def compute_macc(npv: float, total_kpi_reduction: float) -> float | None:
    """Net cost (−NPV) per KPI unit avoided.  None if nothing is avoided."""
    if total_kpi_reduction <= 0:
        return None
    return -npv / total_kpi_reduction
