import random
from datetime import date, timedelta

import pytest

from klinecamp.data.generator import generate_game_data, generate_series
from klinecamp.errors import DataError


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
def test_every_bar_respects_high_low_envelope(seed: int) -> None:
    bars = generate_series(250, rng=random.Random(seed), today=date(2024, 6, 30))
    assert len(bars) == 250
    for bar in bars:
        assert bar.low <= min(bar.open, bar.close)
        assert bar.high >= max(bar.open, bar.close)
        assert bar.low > 0
        assert bar.volume >= 5000
        assert isinstance(bar.volume, int)


def test_dates_are_consecutive_and_end_today() -> None:
    today = date(2024, 3, 1)
    bars = generate_series(10, rng=random.Random(3), today=today)
    assert bars[-1].date == "2024-03-01"
    assert bars[0].date == (today - timedelta(days=9)).isoformat()
    days = [date.fromisoformat(b.date) for b in bars]
    assert all((b - a).days == 1 for a, b in zip(days, days[1:]))


def test_walk_starts_in_range_and_opens_at_previous_close() -> None:
    bars = generate_series(30, rng=random.Random(11), today=date(2024, 1, 31))
    assert 10 <= bars[0].open <= 15
    for prev, cur in zip(bars, bars[1:]):
        assert cur.open == prev.close


def test_prices_are_rounded_to_cents() -> None:
    for bar in generate_series(20, rng=random.Random(5)):
        for value in (bar.open, bar.close, bar.high, bar.low):
            assert round(value, 2) == value


def test_zero_days_is_empty_and_negative_is_rejected() -> None:
    assert generate_series(0) == []
    with pytest.raises(DataError):
        generate_series(-1)


def test_same_rng_seed_reproduces_series() -> None:
    a = generate_series(15, rng=random.Random(9), today=date(2024, 1, 1))
    b = generate_series(15, rng=random.Random(9), today=date(2024, 1, 1))
    assert a == b


def test_generate_game_data_is_annotated() -> None:
    bars, name, code = generate_game_data(40, rng=random.Random(1))
    assert len(bars) == 40
    assert name and code.isdigit()
    assert bars[-1].ma20 is not None
    assert bars[0].dif == 0.0
