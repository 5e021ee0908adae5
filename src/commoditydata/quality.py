"""Data quality validation for generated bars."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from commoditydata.models.bar import Bar

MAX_BAR_MOVE = 0.25


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


def validate_bars(bars: Sequence[Bar]) -> ValidationResult:
    """Run all quality checks on a bar sequence.

    Checks:
        1. Not empty
        2. No NaN/Inf prices
        3. Prices strictly positive
        4. Price sanity (no >25% close-to-close move)
        5. Volume sanity (non-negative)
        6. Date ordering (strictly increasing)
        7. OHLC consistency (low <= open/close <= high)
    """
    result = ValidationResult()

    # 1. Not empty
    if not bars:
        result.checks.append(ValidationCheck("not_empty", False, "No bars provided"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(bars)} bars"))

    # 2. NaN/Inf
    bad_values = sum(
        1
        for b in bars
        for val in (b.open, b.high, b.low, b.close)
        if math.isnan(val) or math.isinf(val)
    )
    if bad_values:
        result.checks.append(ValidationCheck("no_nulls", False, f"{bad_values} NaN/Inf values"))
        return result
    result.checks.append(ValidationCheck("no_nulls", True))

    # 3. Positive prices
    non_positive = sum(1 for b in bars if min(b.open, b.high, b.low, b.close) <= 0)
    if non_positive:
        result.checks.append(
            ValidationCheck("positive_prices", False, f"{non_positive} bars with price <= 0")
        )
    else:
        result.checks.append(ValidationCheck("positive_prices", True))

    # 4. Price sanity
    extreme = 0
    for i in range(1, len(bars)):
        prev_close = bars[i - 1].close
        if prev_close > 0 and abs(bars[i].close - prev_close) / prev_close > MAX_BAR_MOVE:
            extreme += 1
    if extreme:
        result.checks.append(
            ValidationCheck("price_sanity", False, f"{extreme} bars with >25% move")
        )
    else:
        result.checks.append(ValidationCheck("price_sanity", True))

    # 5. Volume sanity
    neg_vol = sum(1 for b in bars if b.volume < 0)
    if neg_vol:
        result.checks.append(
            ValidationCheck("volume_sanity", False, f"{neg_vol} bars with negative volume")
        )
    else:
        result.checks.append(ValidationCheck("volume_sanity", True))

    # 6. Date ordering
    out_of_order = sum(1 for i in range(1, len(bars)) if bars[i].date <= bars[i - 1].date)
    if out_of_order:
        result.checks.append(
            ValidationCheck("date_order", False, f"{out_of_order} out of order")
        )
    else:
        result.checks.append(ValidationCheck("date_order", True))

    # 7. OHLC consistency
    inconsistent = sum(
        1
        for b in bars
        if b.low > min(b.open, b.close) or b.high < max(b.open, b.close) or b.high < b.low
    )
    if inconsistent:
        result.checks.append(
            ValidationCheck("ohlc_consistency", False, f"{inconsistent} bars outside their high/low")
        )
    else:
        result.checks.append(ValidationCheck("ohlc_consistency", True))

    return result
