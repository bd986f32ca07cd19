import math
import random
from datetime import date
from pathlib import Path

import pytest

from klinecamp.data import generate_game_data, load_series_csv, series_to_frame, write_series_csv
from klinecamp.errors import DataError


def test_frame_has_bar_columns_and_nan_for_unset_indicators() -> None:
    bars, _, _ = generate_game_data(25, rng=random.Random(3), today=date(2024, 4, 1))
    df = series_to_frame(bars)
    assert list(df.columns) == ["date", "open", "close", "high", "low", "volume", "ma5", "ma10", "ma20", "dif", "dea", "macd"]
    assert len(df) == 25
    assert math.isnan(df.loc[0, "ma5"])
    assert df.loc[24, "ma20"] == bars[24].ma20


def test_csv_round_trip_preserves_bars(tmp_path: Path) -> None:
    bars, _, _ = generate_game_data(30, rng=random.Random(4), today=date(2024, 4, 1))
    path = write_series_csv(bars, tmp_path / "out" / "series.csv")
    loaded = load_series_csv(path)
    assert loaded[0].ma5 is None
    assert loaded[-1].date == "2024-04-01"
    for a, b in zip(bars, loaded):
        assert (a.open, a.close, a.volume, a.ma10, a.macd) == (b.open, b.close, b.volume, b.ma10, b.macd)


def test_csv_missing_columns(tmp_path: Path) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("date,open,close\n2024-01-01,1,2\n", encoding="utf-8")
    with pytest.raises(DataError):
        load_series_csv(path)
