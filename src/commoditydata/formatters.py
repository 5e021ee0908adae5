"""Display formatting for prices, percentages and chart labels."""

from __future__ import annotations

from datetime import date

from commoditydata.models.time_range import TimeRange

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "KRW": "₩",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}

# Currencies displayed without minor units
WHOLE_UNIT_CURRENCIES = frozenset({"KRW", "JPY"})

_LARGE_SUFFIXES = ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K"))


def format_currency(value: float, currency: str = "USD") -> str:
    """``$1,234.50``, ``₩1,789,950``; unknown codes are used as the prefix."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    sign = "-" if value < 0 else ""
    if currency in WHOLE_UNIT_CURRENCIES:
        return f"{sign}{symbol}{abs(value):,.0f}"
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_price_with_currency(
    usd_price: float,
    display_currency: str,
    usd_to_krw_rate: float = 1450.0,
) -> str:
    if display_currency == "KRW":
        return format_currency(usd_price * usd_to_krw_rate, "KRW")
    return format_currency(usd_price, "USD")


def format_percent(value: float, decimals: int = 2) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.{decimals}f}%"


def format_large_number(value: float) -> str:
    """Abbreviate with K/M/B/T, e.g. ``1.50M``."""
    for threshold, suffix in _LARGE_SUFFIXES:
        if abs(value) >= threshold:
            return f"{value / threshold:.2f}{suffix}"
    return f"{value:,.0f}"


def format_bar_label(day: date, time_range: TimeRange | str) -> str:
    """Axis label for a bar; long ranges include a two-digit year."""
    tr = TimeRange.parse(time_range)
    if tr in (TimeRange.ONE_YEAR, TimeRange.ALL):
        return f"{day:%y}. {day.month}월 {day.day}일"
    return f"{day.month}월 {day.day}일"


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}..."


def trend_icon(value: float) -> str:
    if value > 0:
        return "↑"
    if value < 0:
        return "↓"
    return "→"
