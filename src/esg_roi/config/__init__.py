"""Configuration models — action, variable and global ROI settings."""

from esg_roi.config.variable import Variable, VariableMethod
from esg_roi.config.action import Action, ImpactType
from esg_roi.config.settings import (
    RoiDefaults,
    RoiSettings,
    configure_logging,
    get_roi_settings,
    reset_roi_settings,
    update_roi_settings,
)

__all__ = [
    "Variable",
    "VariableMethod",
    "Action",
    "ImpactType",
    "RoiDefaults",
    "RoiSettings",
    "configure_logging",
    "get_roi_settings",
    "reset_roi_settings",
    "update_roi_settings",
]
