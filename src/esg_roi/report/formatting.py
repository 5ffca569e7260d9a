"""Number formatting in German (de-DE) conventions: ``1.234,5``.

Currency is a label only; no conversion happens here.
"""

from __future__ import annotations

NBSP = "\u00a0"

CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
}


def format_number(value: float, decimals: int = 0) -> str:
    """``1234.5`` → ``"1.235"`` (decimals=0) or ``"1.234,5"`` (decimals=1)."""
    text = f"{abs(value):,.{decimals}f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    if value < 0 and text.strip("0,.") != "":
        return "-" + text
    return text


def format_currency(value: float, currency: str = "EUR", decimals: int = 0) -> str:
    """``-1500`` → ``"-1.500 €"``.  Unknown currencies show their code."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    return f"{format_number(value, decimals)}{NBSP}{symbol}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Fraction to percent: ``0.125`` → ``"12,5 %"``."""
    return f"{format_number(value * 100, decimals)}{NBSP}%"


def format_years(value: float | None, decimals: int = 1) -> str:
    """Payback period label; None means beyond the horizon."""
    if value is None:
        return "> horizon"
    return f"{format_number(value, decimals)} years"
