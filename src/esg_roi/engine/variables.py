"""Variable resolution — value of a forecast variable in a given year.

  fixed           → start_value
  compoundGrowth  → start_value × (1 + g)^(year − start_year)
  manualOverride  → overrides[year], else start_value

Any year before ``start_year`` resolves to ``start_value``, and so does a
compound value too large to represent as a float.
"""

from __future__ import annotations

import math

from esg_roi.config.variable import Variable


def resolve_variable(variable: Variable, year: int) -> float:
    """Return the variable's value for ``year``.  Never raises."""
    offset = year - variable.start_year
    if offset < 0:
        return variable.start_value

    if variable.method == "compoundGrowth":
        try:
            value = variable.start_value * (1 + variable.growth_rate) ** offset
        except OverflowError:
            return variable.start_value
        return value if math.isfinite(value) else variable.start_value
    if variable.method == "manualOverride":
        return variable.overrides.get(year, variable.start_value)
    return variable.start_value


def variable_series(variable: Variable, horizon_years: int | None = None) -> list[tuple[int, float]]:
    """(year, value) pairs from ``start_year`` through ``start_year + horizon``.

    ``horizon_years`` defaults to the variable's own preview horizon.
    """
    horizon = variable.horizon_years if horizon_years is None else max(horizon_years, 0)
    return [
        (variable.start_year + i, resolve_variable(variable, variable.start_year + i))
        for i in range(horizon + 1)
    ]
