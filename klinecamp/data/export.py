"""Tabular export/import of generated series (requires pandas)."""

from dataclasses import asdict, fields
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from klinecamp.core.models import Bar
from klinecamp.errors import DataError

REQUIRED_COLUMNS = {"date", "open", "close", "high", "low", "volume"}
_OPTIONAL_COLUMNS = ("ma5", "ma10", "ma20", "dif", "dea", "macd")


def series_to_frame(bars: Sequence[Bar]) -> pd.DataFrame:
    """One row per bar, columns in :class:`Bar` field order; unset indicators are NaN."""
    columns = [f.name for f in fields(Bar)]
    return pd.DataFrame([asdict(bar) for bar in bars], columns=columns)


def write_series_csv(bars: Sequence[Bar], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    series_to_frame(bars).to_csv(path, index=False)
    return path


def _optional(value: object) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)  # type: ignore[arg-type]


def load_series_csv(path: Path) -> List[Bar]:
    """Read a series written by :func:`write_series_csv`."""
    df = pd.read_csv(path, dtype={"date": str}, float_precision="round_trip")
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise DataError(f"CSV missing required columns: {sorted(missing)}")
    bars: List[Bar] = []
    for _, row in df.iterrows():
        extras = {name: _optional(row.get(name)) for name in _OPTIONAL_COLUMNS if name in df.columns}
        bars.append(
            Bar(
                date=str(row["date"]),
                open=float(row["open"]),
                close=float(row["close"]),
                high=float(row["high"]),
                low=float(row["low"]),
                volume=int(row["volume"]),
                **extras,
            )
        )
    bars.sort(key=lambda b: b.date)
    return bars
