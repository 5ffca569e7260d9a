"""Result models — ROI output contracts."""

from esg_roi.models.results import (
    MaccEntry,
    PortfolioEntry,
    PortfolioSummary,
    RoiResult,
    RoiYearRow,
)

__all__ = [
    "MaccEntry",
    "PortfolioEntry",
    "PortfolioSummary",
    "RoiResult",
    "RoiYearRow",
]
