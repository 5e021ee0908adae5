"""Shared fixtures for commoditydata tests."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from commoditydata.models.bar import Bar
from commoditydata.models.commodity import Commodity, CommodityCategory
from commoditydata.providers.mock import MockCatalogProvider

TODAY = date(2024, 3, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def mock_provider() -> MockCatalogProvider:
    return MockCatalogProvider(seed=7)


@pytest.fixture
def sample_commodity() -> Commodity:
    return Commodity(
        id="GOLD",
        symbol="XAU",
        name="Gold",
        name_ko="금",
        category="METALS",
        current_price=2000.0,
    )


@pytest.fixture
def sample_bars() -> list[Bar]:
    """5 consecutive daily bars."""
    bars = []
    for i in range(5):
        bars.append(Bar(
            date=TODAY - timedelta(days=4 - i),
            open=150.0 + i,
            high=151.5 + i,
            low=149.0 + i,
            close=151.0 + i,
            volume=10000 + i * 500,
        ))
    return bars


def make_bars(closes: list[float], spread: float = 1.0) -> list[Bar]:
    """Bars whose open is the previous close and whose wicks are ``spread`` wide."""
    bars = []
    prev = closes[0]
    for i, close in enumerate(closes):
        bars.append(Bar(
            date=TODAY - timedelta(days=len(closes) - 1 - i),
            open=prev,
            high=max(prev, close) + spread,
            low=min(prev, close) - spread,
            close=close,
            volume=1000,
        ))
        prev = close
    return bars
