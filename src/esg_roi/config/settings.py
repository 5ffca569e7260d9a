"""Global ROI assumptions — discount rate (WACC), tax rate, horizon.

One ``RoiSettings`` record exists per process.  It is created from
``RoiDefaults`` on first access and replaced wholesale on update, so a
record handed to the engine never changes underneath it.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class RoiDefaults(BaseSettings):
    """Process defaults, overridable via ``ESG_ROI_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(env_prefix="ESG_ROI_", env_file=".env", extra="ignore")

    currency: str = "EUR"
    discount_rate: float = Field(default=0.08, ge=0, le=1.0)
    tax_rate: float = Field(default=0.30, ge=0, le=1.0)
    cashflow_horizon_years: int = Field(default=10, ge=1, le=100)
    log_level: str = "INFO"


class RoiSettings(BaseModel):
    """Financial assumptions shared by every action's ROI calculation.

    Both rates are fractions (0.08 = 8%), never percentages.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, description="Record identifier")
    currency: str = Field(default="EUR", description="Currency label for display; no conversion")
    discount_rate: float = Field(
        default=0.08, ge=0, le=1.0,
        description="Annual discount rate (WACC) used for NPV discounting.",
    )
    tax_rate: float = Field(
        default=0.30, ge=0, le=1.0,
        description="Tax rate applied to positive EBIT only.",
    )
    cashflow_horizon_years: int = Field(
        default=10, ge=1, le=100,
        description="Number of post-investment years to project.",
    )

    @classmethod
    def from_defaults(cls, defaults: RoiDefaults | None = None) -> RoiSettings:
        defaults = defaults or RoiDefaults()
        return cls(
            currency=defaults.currency,
            discount_rate=defaults.discount_rate,
            tax_rate=defaults.tax_rate,
            cashflow_horizon_years=defaults.cashflow_horizon_years,
        )


_UPDATABLE_FIELDS = ("currency", "discount_rate", "tax_rate", "cashflow_horizon_years")
_CAMEL_TO_FIELD = {to_camel(name): name for name in _UPDATABLE_FIELDS}

_lock = threading.RLock()
_current: RoiSettings | None = None


def get_roi_settings() -> RoiSettings:
    """Return the process-wide settings record, creating it on first access."""
    global _current
    with _lock:
        if _current is None:
            _current = RoiSettings.from_defaults()
            logger.info(
                "Created ROI settings %s (discount_rate=%s, tax_rate=%s, horizon=%s)",
                _current.id, _current.discount_rate, _current.tax_rate,
                _current.cashflow_horizon_years,
            )
        return _current


def update_roi_settings(**changes: Any) -> RoiSettings:
    """Apply a partial update and return the new record.

    Keys may be snake_case or camelCase.  Unknown keys and ``None`` values
    are ignored.  Raises ``pydantic.ValidationError`` for out-of-range
    values, in which case the stored record is left as it was.
    """
    global _current
    applied: dict[str, Any] = {}
    for key, value in changes.items():
        name = _CAMEL_TO_FIELD.get(key, key)
        if name in _UPDATABLE_FIELDS and value is not None:
            applied[name] = value

    # Read, merge and store under one lock so concurrent updates both land.
    with _lock:
        data = get_roi_settings().model_dump()
        data.update(applied)
        updated = RoiSettings.model_validate(data)
        _current = updated
    if applied:
        logger.info("Updated ROI settings %s: %s", updated.id, sorted(applied))
    return updated


def reset_roi_settings() -> None:
    """Forget the current record; the next access recreates it from defaults."""
    global _current
    with _lock:
        _current = None


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic root handler for scripts and host applications."""
    if level is None:
        level = RoiDefaults().log_level
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level)
