"""Forecast variable — a named scalar time series (fixed, CAGR or manual)."""

from __future__ import annotations

import json
import math
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

VariableMethod = Literal["fixed", "compoundGrowth", "manualOverride"]

# Codes written by the persistence layer, mapped onto the canonical methods.
_METHOD_CODES: dict[str, str] = {
    "fixed": "fixed",
    "fix": "fixed",
    "compoundGrowth": "compoundGrowth",
    "compound_growth": "compoundGrowth",
    "cagr": "compoundGrowth",
    "manualOverride": "manualOverride",
    "manual_override": "manualOverride",
    "manual": "manualOverride",
}


def _non_finite(value: Any) -> bool:
    """True for NaN/±inf given as a float or as text such as ``"NaN"``."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return False
    return isinstance(value, float) and not math.isfinite(value)


def _parse_overrides(raw: Any) -> dict[int, float]:
    """Turn a ``{year: value}`` mapping (or its JSON text) into ``dict[int, float]``.

    Entries whose key is not a year or whose value is not a finite number
    are dropped.
    """
    if raw is None or raw == "":
        return {}
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return {}
    if not isinstance(raw, dict):
        return {}

    parsed: dict[int, float] = {}
    for key, value in raw.items():
        try:
            year = int(str(key).strip())
            number = float(value)
        except (TypeError, ValueError):
            continue
        if math.isfinite(number):
            parsed[year] = number
    return parsed


class Variable(BaseModel):
    """A re-usable forecast variable, e.g. a CO₂ price in EUR/t.

    The series starts at ``start_year`` with ``start_value``; every year
    before ``start_year`` resolves to ``start_value`` whatever the method.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # --- Identity ---
    id: str | None = Field(default=None, description="Opaque identifier from the host store")
    name: str = Field(default="", description="Human label")
    description: str | None = Field(default=None, description="Free-text notes")
    unit: str = Field(default="", description="Unit of the value (e.g. 'EUR/t')")

    # --- Series definition ---
    method: VariableMethod = Field(
        default="fixed",
        description="'fixed' = flat start_value; 'compoundGrowth' = start_value × (1+g)^n; "
                    "'manualOverride' = per-year overrides, start_value elsewhere. "
                    "Unrecognised methods behave as 'fixed'.",
    )
    start_year: int = Field(description="First year of the series")
    start_value: float = Field(default=0.0, description="Value at start_year and every year before it")
    growth_rate: float = Field(
        default=0.0,
        ge=-1.0,
        le=10.0,
        validation_alias=AliasChoices("growthRate", "growth_rate", "cagr"),
        description="Fractional growth per year for 'compoundGrowth' (0.05 = 5%/year; -100% .. +1000%)",
    )
    overrides: dict[int, float] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("overrides", "manualValues", "manual_values"),
        description="Year → value for 'manualOverride'. Accepts the JSON text form.",
    )
    horizon_years: int = Field(
        default=10, ge=0,
        description="Number of years after start_year shown in previews",
    )

    @field_validator("method", mode="before")
    @classmethod
    def _coerce_method(cls, value: Any) -> str:
        if isinstance(value, str):
            return _METHOD_CODES.get(value.strip(), "fixed")
        return "fixed"

    @field_validator("start_value", "growth_rate", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        if value is None:
            return 0.0
        if _non_finite(value):
            return 0.0
        return value

    @field_validator("overrides", mode="before")
    @classmethod
    def _coerce_overrides(cls, value: Any) -> dict[int, float]:
        return _parse_overrides(value)
