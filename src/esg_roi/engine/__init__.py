"""Engine — variable resolution, go-live ramp and yearly ROI projection."""

from esg_roi.engine.variables import resolve_variable, variable_series
from esg_roi.engine.activation import go_live_factor
from esg_roi.engine.projection import compute_roi, compute_roi_many

__all__ = [
    "resolve_variable",
    "variable_series",
    "go_live_factor",
    "compute_roi",
    "compute_roi_many",
]
