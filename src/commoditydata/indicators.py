"""Technical indicators computed causally over a bar sequence.

Every function returns a list exactly as long as its input, with ``None`` in
positions that do not yet have enough history. Values are rounded to two
decimals as they are produced, and the recursive indicators (EMA, ATR and
the RSI averages) carry the rounded previous value forward.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from commoditydata.models.bar import Bar
from commoditydata.models.chart import EnrichedBar

DECIMALS = 2

RSI_PERIOD = 14
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9
BOLLINGER_PERIOD = 20
BOLLINGER_WIDTH = 2.0
ATR_PERIOD = 14

Series = list[float | None]


def _round(value: float) -> float:
    return round(value, DECIMALS)


def sma(values: Sequence[float], period: int) -> Series:
    """Simple moving average of the trailing ``period`` values."""
    out: Series = [None] * len(values)
    if period <= 0:
        return out
    for i in range(period - 1, len(values)):
        out[i] = _round(sum(values[i - period + 1:i + 1]) / period)
    return out


def ema(values: Sequence[float | None], period: int) -> Series:
    """Exponential moving average seeded with the SMA of the first ``period`` values.

    Leading ``None`` entries are skipped, so the EMA of a partially warmed-up
    series (the MACD line) starts once ``period`` real values exist.
    """
    out: Series = [None] * len(values)
    if period <= 0:
        return out

    start = next((i for i, v in enumerate(values) if v is not None), None)
    if start is None:
        return out
    seed_index = start + period - 1
    if seed_index >= len(values):
        return out

    window = values[start:seed_index + 1]
    if any(v is None for v in window):
        return out

    k = 2.0 / (period + 1)
    prev = _round(sum(window) / period)  # type: ignore[arg-type]
    out[seed_index] = prev
    for i in range(seed_index + 1, len(values)):
        value = values[i]
        if value is None:
            break
        prev = _round((value - prev) * k + prev)
        out[i] = prev
    return out


def rsi(closes: Sequence[float], period: int = RSI_PERIOD) -> Series:
    """Relative Strength Index with Wilder smoothing.

    The first value sits at index ``period`` (it needs ``period`` price
    changes). The averages are rounded before each smoothing step. A window
    with no losses reads 100.
    """
    out: Series = [None] * len(closes)
    if len(closes) <= period:
        return out

    gains = [0.0] * len(closes)
    losses = [0.0] * len(closes)
    for i in range(1, len(closes)):
        delta = closes[i] - closes[i - 1]
        gains[i] = max(delta, 0.0)
        losses[i] = max(-delta, 0.0)

    avg_gain = _round(sum(gains[1:period + 1]) / period)
    avg_loss = _round(sum(losses[1:period + 1]) / period)
    out[period] = _rsi_value(avg_gain, avg_loss)

    for i in range(period + 1, len(closes)):
        avg_gain = _round((avg_gain * (period - 1) + gains[i]) / period)
        avg_loss = _round((avg_loss * (period - 1) + losses[i]) / period)
        out[i] = _rsi_value(avg_gain, avg_loss)
    return out


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return _round(100.0 - 100.0 / (1.0 + rs))


@dataclass(frozen=True)
class MACDSeries:
    macd: Series
    signal: Series
    histogram: Series


def macd(
    closes: Sequence[float],
    fast: int = MACD_FAST,
    slow: int = MACD_SLOW,
    signal: int = MACD_SIGNAL,
) -> MACDSeries:
    """MACD line, its signal EMA, and the histogram between them."""
    fast_ema = ema(closes, fast)
    slow_ema = ema(closes, slow)

    line: Series = [
        _round(f - s) if f is not None and s is not None else None
        for f, s in zip(fast_ema, slow_ema)
    ]
    signal_line = ema(line, signal)
    histogram: Series = [
        _round(m - s) if m is not None and s is not None else None
        for m, s in zip(line, signal_line)
    ]
    return MACDSeries(macd=line, signal=signal_line, histogram=histogram)


@dataclass(frozen=True)
class BollingerSeries:
    upper: Series
    middle: Series
    lower: Series


def bollinger_bands(
    closes: Sequence[float],
    period: int = BOLLINGER_PERIOD,
    width: float = BOLLINGER_WIDTH,
) -> BollingerSeries:
    """Bands at ``width`` population standard deviations around SMA(period)."""
    n = len(closes)
    upper: Series = [None] * n
    middle: Series = [None] * n
    lower: Series = [None] * n

    for i in range(period - 1, n):
        window = closes[i - period + 1:i + 1]
        mean = sum(window) / period
        variance = sum((c - mean) ** 2 for c in window) / period
        offset = width * math.sqrt(variance)
        middle[i] = _round(mean)
        upper[i] = _round(mean + offset)
        lower[i] = _round(mean - offset)
    return BollingerSeries(upper=upper, middle=middle, lower=lower)


def true_range(bars: Sequence[Bar]) -> list[float]:
    """Per-bar true range; the first bar has no previous close and uses high - low."""
    ranges: list[float] = []
    for i, bar in enumerate(bars):
        if i == 0:
            ranges.append(bar.high - bar.low)
            continue
        prev_close = bars[i - 1].close
        ranges.append(max(
            bar.high - bar.low,
            abs(bar.high - prev_close),
            abs(bar.low - prev_close),
        ))
    return ranges


def atr(bars: Sequence[Bar], period: int = ATR_PERIOD) -> Series:
    """Average True Range, seeded with the mean of the first ``period`` true ranges."""
    out: Series = [None] * len(bars)
    if len(bars) < period:
        return out

    tr = true_range(bars)
    prev = _round(sum(tr[:period]) / period)
    out[period - 1] = prev
    for i in range(period, len(bars)):
        prev = _round((prev * (period - 1) + tr[i]) / period)
        out[i] = prev
    return out


@dataclass(frozen=True)
class IndicatorSet:
    """All indicator series for one bar sequence, index-aligned to it."""

    sma: dict[int, Series] = field(default_factory=dict)
    ema: dict[int, Series] = field(default_factory=dict)
    rsi: Series = field(default_factory=list)
    macd: MACDSeries = field(default_factory=lambda: MACDSeries([], [], []))
    bollinger: BollingerSeries = field(
        default_factory=lambda: BollingerSeries([], [], [])
    )
    atr: Series = field(default_factory=list)


def compute_indicators(
    bars: Sequence[Bar],
    sma_periods: Sequence[int] = (20,),
    ema_periods: Sequence[int] = (12, 26),
) -> IndicatorSet:
    """Run the full indicator suite over ``bars``."""
    closes = [b.close for b in bars]
    return IndicatorSet(
        sma={p: sma(closes, p) for p in sma_periods},
        ema={p: ema(closes, p) for p in ema_periods},
        rsi=rsi(closes),
        macd=macd(closes),
        bollinger=bollinger_bands(closes),
        atr=atr(bars),
    )


def enrich(
    bars: Sequence[Bar],
    sma_periods: Sequence[int] = (20,),
    ema_periods: Sequence[int] = (12, 26),
) -> list[EnrichedBar]:
    """Attach every indicator value to its bar."""
    ind = compute_indicators(bars, sma_periods, ema_periods)
    return [
        EnrichedBar(
            bar=bar,
            sma={p: s[i] for p, s in ind.sma.items()},
            ema={p: s[i] for p, s in ind.ema.items()},
            rsi=ind.rsi[i],
            macd=ind.macd.macd[i],
            macd_signal=ind.macd.signal[i],
            macd_histogram=ind.macd.histogram[i],
            bb_upper=ind.bollinger.upper[i],
            bb_middle=ind.bollinger.middle[i],
            bb_lower=ind.bollinger.lower[i],
            atr=ind.atr[i],
        )
        for i, bar in enumerate(bars)
    ]
