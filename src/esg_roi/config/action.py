"""Action — one sustainability investment and its cost/benefit inputs."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from esg_roi.config.variable import Variable, _non_finite

ImpactType = Literal["reductionPercent", "reductionAbsolute"]

_PERCENT_CODES = {"reductionPercent", "reduction_percent"}

_NUMERIC_FIELDS = (
    "kpi_baseline_per_year",
    "impact_value",
    "monetization_fixed_rate_per_unit",
    "capex_equipment",
    "capex_installation",
    "capex_software",
    "capex_consulting",
    "capex_other",
    "grant_amount",
    "grant_percent",
    "opex_maintenance",
    "opex_licenses",
    "opex_personnel",
    "opex_other",
    "other_benefits_per_year",
    "other_costs_per_year",
)


class Action(BaseModel):
    """Inputs of one action's ROI case.

    Every numeric input is optional; the engine reads a missing value as 0.
    Only ``kpi_baseline_per_year`` and ``impact_value`` are required for a
    calculation to happen at all.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # --- Identity ---
    id: str | None = None
    title: str = ""
    status: str | None = None
    kpi_name: str | None = None
    kpi_unit: str | None = None
    due_date: date | None = Field(
        default=None,
        description="Go-live date; drives the activation ramp in the due year.",
    )

    # --- KPI ---
    kpi_baseline_per_year: float | None = Field(default=None, description="Current KPI volume per year")
    impact_type: ImpactType = Field(
        default="reductionAbsolute",
        description="'reductionPercent' = impact_value is % of baseline; "
                    "'reductionAbsolute' = impact_value is units per year (sign ignored).",
    )
    impact_value: float | None = Field(default=None, description="Size of the KPI change")

    # --- Monetization ---
    monetization_fixed_rate_per_unit: float | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "monetizationFixedRatePerUnit",
            "monetizationFixedEurPerUnit",
            "monetization_fixed_rate_per_unit",
        ),
        description="Money value per KPI unit when no variable is linked",
    )
    monetization_variable: Variable | None = Field(
        default=None,
        description="Time-varying value per KPI unit; takes precedence over the fixed rate",
    )

    # --- CAPEX ---
    capex_equipment: float | None = None
    capex_installation: float | None = None
    capex_software: float | None = None
    capex_consulting: float | None = None
    capex_other: float | None = None

    # --- Funding ---
    grant_amount: float | None = Field(default=None, description="Absolute grant")
    grant_percent: float | None = Field(
        default=None,
        description="Grant as % of total CAPEX; used only when grant_amount is 0 or missing",
    )

    # --- OPEX (per year) ---
    opex_maintenance: float | None = None
    opex_licenses: float | None = None
    opex_personnel: float | None = None
    opex_other: float | None = None

    # --- Other ---
    other_benefits_per_year: float | None = None
    other_costs_per_year: float | None = None
    depreciation_years: int | None = Field(
        default=None,
        description="Straight-line depreciation period; defaults to the settings horizon",
    )

    @field_validator(*_NUMERIC_FIELDS, mode="before")
    @classmethod
    def _finite_or_none(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        if _non_finite(value):
            return None
        return value

    @field_validator("depreciation_years", mode="before")
    @classmethod
    def _round_years(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        if isinstance(value, float):
            return round(value) if math.isfinite(value) else None
        return value

    @field_validator("impact_type", mode="before")
    @classmethod
    def _coerce_impact_type(cls, value: Any) -> str:
        if isinstance(value, str) and value.strip() in _PERCENT_CODES:
            return "reductionPercent"
        return "reductionAbsolute"

    @field_validator("due_date", mode="before")
    @classmethod
    def _date_only(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return value
