"""DataFrame export of enriched charts."""

from __future__ import annotations

import pandas as pd

from commoditydata.models.chart import ChartData


def chart_to_frame(chart: ChartData) -> pd.DataFrame:
    """One row per bar, indexed by date; absent indicator values become NaN."""
    records = [eb.to_dict() for eb in chart.bars]
    if not records:
        return pd.DataFrame(
            columns=["open", "high", "low", "close", "volume", "fill"],
            index=pd.DatetimeIndex([], name="date"),
        )
    df = pd.DataFrame.from_records(records)
    df["date"] = pd.to_datetime(df["date"])
    df = df.set_index("date")
    indicator_cols = [c for c in df.columns if c not in ("open", "high", "low", "close", "volume", "fill")]
    df[indicator_cols] = df[indicator_cols].astype("float64")
    return df
