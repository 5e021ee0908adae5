"""Seeded OHLCV path simulator for the commodity detail chart.

The simulator works in two pure stages:

1. ``simulate_path`` draws every random quantity up front (regime-switching
   volatility, drift, Box-Muller shocks, wick and volume jitter) and back-solves
   the start price so the path ends exactly on the supplied base price.
2. ``build_bars`` walks that path forward into ``Bar`` objects without touching
   the random source.

``generate`` chains the two and is the public entry point.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from datetime import date, timedelta

from commoditydata.models.bar import Bar

# Regime switching
VOL_SPIKE_PROB = 0.05
VOL_RESET_PROB = 0.20
VOL_SPIKE_MULTIPLIER = 2.5
TREND_CHANGE_PROB = 0.10
TREND_BAND = 0.002

# Keeps every close strictly positive
MAX_ABS_CHANGE = 0.2

WICK_FACTOR = 0.5
MIN_PRICE = 0.01

BASE_VOLUME = 1_000_000
VOLUME_JITTER = (0.5, 1.5)
VOLUME_SPIKE = 2.0

PRICE_DECIMALS = 2


class NormalSampler:
    """Standard normal draws from a seeded uniform source (Box-Muller)."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def _nonzero_uniform(self) -> float:
        u = 0.0
        while u == 0.0:
            u = self._rng.random()
        return u

    def sample(self) -> float:
        u = self._nonzero_uniform()
        v = self._nonzero_uniform()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


@dataclass(frozen=True)
class PathStep:
    """Random draws for one simulated period.

    Attributes:
        change: Fractional close-over-open change.
        shock: Normal sample that drove ``change``.
        volatility: Volatility regime active during the step.
        drift: Trend component of ``change``.
        wick_up: Normal sample sizing the upper wick.
        wick_down: Normal sample sizing the lower wick.
        volume_jitter: Uniform factor applied to the base volume.
    """

    change: float
    shock: float
    volatility: float
    drift: float
    wick_up: float
    wick_down: float
    volume_jitter: float


@dataclass(frozen=True)
class SimulatedPath:
    """Start price plus the ordered step draws."""

    start_price: float
    steps: tuple[PathStep, ...]

    def closes(self) -> list[float]:
        """Replay the recorded changes from ``start_price`` (unrounded)."""
        closes: list[float] = []
        price = self.start_price
        for step in self.steps:
            price = price * (1.0 + step.change)
            closes.append(price)
        return closes


def simulate_path(
    seed: int,
    period_count: int,
    base_price: float,
    base_volatility: float,
) -> SimulatedPath:
    """Draw a regime-switching path whose final close equals ``base_price``."""
    if period_count <= 0:
        return SimulatedPath(start_price=base_price, steps=())

    rng = random.Random(seed)
    normal = NormalSampler(rng)

    volatility = base_volatility
    elevated = False
    drift = 0.0
    steps: list[PathStep] = []

    for _ in range(period_count):
        if not elevated:
            if rng.random() < VOL_SPIKE_PROB:
                elevated = True
                volatility = base_volatility * VOL_SPIKE_MULTIPLIER
        elif rng.random() < VOL_RESET_PROB:
            elevated = False
            volatility = base_volatility

        if rng.random() < TREND_CHANGE_PROB:
            drift = rng.uniform(-TREND_BAND, TREND_BAND)

        shock = normal.sample()
        change = drift + shock * volatility
        change = max(-MAX_ABS_CHANGE, min(MAX_ABS_CHANGE, change))

        steps.append(PathStep(
            change=change,
            shock=shock,
            volatility=volatility,
            drift=drift,
            wick_up=normal.sample(),
            wick_down=normal.sample(),
            volume_jitter=rng.uniform(*VOLUME_JITTER),
        ))

    growth = 1.0
    for step in steps:
        growth *= 1.0 + step.change

    return SimulatedPath(start_price=base_price / growth, steps=tuple(steps))


def _price(value: float) -> float:
    """Round to cents, never below the smallest quotable price."""
    return max(round(value, PRICE_DECIMALS), MIN_PRICE)


def build_bars(path: SimulatedPath, today: date | None = None) -> list[Bar]:
    """Walk a simulated path forward into validated OHLCV bars."""
    today = today or date.today()
    count = len(path.steps)
    bars: list[Bar] = []

    open_ = path.start_price
    for i, step in enumerate(path.steps):
        close = open_ * (1.0 + step.change)
        wick_scale = open_ * step.volatility * WICK_FACTOR
        high = max(open_, close) + abs(step.wick_up) * wick_scale
        low = min(open_, close) - abs(step.wick_down) * wick_scale

        o = _price(open_)
        c = _price(close)
        h = _price(high)
        l = _price(low)
        # Rounding can push the body past a wick
        h = max(h, o, c)
        l = min(l, o, c)

        spike = VOLUME_SPIKE if abs(step.change) > step.volatility else 1.0
        volume = int(BASE_VOLUME * step.volume_jitter * spike)

        bars.append(Bar(
            date=today - timedelta(days=count - 1 - i),
            open=o,
            high=h,
            low=l,
            close=c,
            volume=volume,
        ))
        open_ = close

    return bars


def generate(
    seed: int,
    period_count: int,
    base_price: float,
    base_volatility: float,
    today: date | None = None,
) -> list[Bar]:
    """Generate ``period_count`` bars, oldest first, ending on ``base_price``.

    Args:
        seed: Seed for the pseudo-random source; same seed, same bars.
        period_count: Number of bars; 0 yields an empty list.
        base_price: Current price, reproduced as the last bar's close
            (floored at ``MIN_PRICE``).
        base_volatility: Per-period volatility outside of spikes.
        today: Date of the last bar (defaults to the current day).

    Returns:
        Ordered list of ``Bar``.
    """
    if period_count <= 0:
        return []
    path = simulate_path(seed, period_count, base_price, base_volatility)
    return build_bars(path, today)
