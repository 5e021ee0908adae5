"""Pixel geometry for candlestick rendering.

The chart renderer is an external collaborator; this module only derives the
coordinates it needs. Flat bars and flat windows (``high == low``) are
short-circuited instead of being scaled.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from commoditydata.models.bar import Bar

DOMAIN_PADDING = 5.0
MIN_BODY_HEIGHT = 1.0


@dataclass(frozen=True)
class PriceScale:
    """Linear price -> y mapping with y growing downward."""

    low: float
    high: float
    height: float

    @property
    def span(self) -> float:
        return self.high - self.low

    def to_y(self, price: float) -> float:
        if self.span == 0:
            return self.height / 2
        return (self.high - price) / self.span * self.height


@dataclass(frozen=True)
class CandleGeometry:
    x: float
    width: float
    body_top: float
    body_height: float
    wick_top: float
    wick_bottom: float
    up: bool


def price_scale(
    bars: Sequence[Bar], height: float, padding: float = DOMAIN_PADDING,
) -> PriceScale:
    """Scale covering every bar's low/high plus ``padding`` on both sides."""
    low = min(b.low for b in bars) - padding
    high = max(b.high for b in bars) + padding
    return PriceScale(low=low, high=high, height=height)


def wick_from_body(bar: Bar, body_top: float, body_height: float) -> tuple[float, float]:
    """Wick end points extrapolated from an already-placed body rectangle.

    Pixels per price unit are taken from the body; a doji (open == close)
    falls back to one price unit. A zero-range bar has no wick.
    """
    if bar.high == bar.low:
        return body_top, body_top + body_height
    body_span = abs(bar.open - bar.close) or 1.0
    ratio = body_height / body_span
    top = body_top - (bar.high - max(bar.open, bar.close)) * ratio
    bottom = body_top + body_height + (min(bar.open, bar.close) - bar.low) * ratio
    return top, bottom


def layout_candles(
    bars: Sequence[Bar],
    width: float,
    height: float,
    *,
    padding: float = DOMAIN_PADDING,
    body_ratio: float = 0.6,
) -> list[CandleGeometry]:
    """Place one candle per bar across a ``width`` x ``height`` plot area."""
    if not bars:
        return []

    scale = price_scale(bars, height, padding)
    slot = width / len(bars)
    body_width = slot * body_ratio
    candles: list[CandleGeometry] = []

    for i, bar in enumerate(bars):
        top = scale.to_y(max(bar.open, bar.close))
        bottom = scale.to_y(min(bar.open, bar.close))
        body_height = max(bottom - top, MIN_BODY_HEIGHT)
        wick_top, wick_bottom = wick_from_body(bar, top, body_height)
        candles.append(CandleGeometry(
            x=slot * i + (slot - body_width) / 2,
            width=body_width,
            body_top=top,
            body_height=body_height,
            wick_top=wick_top,
            wick_bottom=wick_bottom,
            up=bar.fill == "up",
        ))
    return candles
