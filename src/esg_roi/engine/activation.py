"""Go-live ramp — share of a calendar year during which an action is live."""

from __future__ import annotations

from datetime import date

# Assumed share of the current year when an action has no due date.
UNDATED_CURRENT_YEAR_FACTOR = 0.5


def go_live_factor(year: int, due_date: date | None, current_year: int) -> float:
    """Fraction of ``year`` the measure is operational.

    With a due date, the due year counts from the due month inclusive:
    a January go-live gives 12/12, a December go-live 1/12.
    """
    if due_date is None:
        if year == current_year:
            return UNDATED_CURRENT_YEAR_FACTOR
        return 1.0 if year > current_year else 0.0

    if year < due_date.year:
        return 0.0
    if year == due_date.year:
        # date.month is 1-based; the ramp uses the 0-based month
        return (12 - (due_date.month - 1)) / 12
    return 1.0
