"""Synthetic daily OHLCV series for playback sessions.

The walk is intentionally seed-free; pass ``rng`` to make a run reproducible.
"""

import logging
import math
import random
from datetime import date, timedelta
from typing import List, Optional, Tuple

from klinecamp.core.models import Bar
from klinecamp.errors import DataError
from klinecamp.indicators.engine import annotate

logger = logging.getLogger(__name__)

START_PRICE_MIN = 10.0
START_PRICE_SPAN = 5.0
# (u - 0.48) * 0.8 gives a +0.016 mean step: a mild upward drift.
DRIFT_CENTER = 0.48
STEP_RANGE = 0.8
WICK_MAX = 0.5
START_VOLUME = 10_000.0
VOLUME_FLOOR = 5_000.0
VOLUME_STEP = 2_000.0
PRICE_FLOOR = 0.01

_STOCK_TABLE: Tuple[Tuple[str, str], ...] = (
    ("星河科技", "600519"),
    ("东方重工", "601857"),
    ("海川医药", "300015"),
    ("远山能源", "002594"),
    ("华峰电子", "000725"),
    ("金港银行", "601398"),
)


def generate_series(
    day_count: int,
    *,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> List[Bar]:
    """Generate ``day_count`` consecutive daily bars ending at ``today``.

    Each bar opens at the previous close and moves by a biased uniform step;
    wicks extend up to 0.5 beyond the body so ``low <= min(open, close)`` and
    ``high >= max(open, close)`` hold by construction. Prices are rounded to
    2 decimals for display while the walk continues from the unrounded close.
    """
    if day_count < 0:
        raise DataError(f"day_count must be non-negative, got {day_count}")
    rng = rng or random.Random()
    today = today or date.today()

    bars: List[Bar] = []
    price = START_PRICE_MIN + rng.random() * START_PRICE_SPAN
    vol = START_VOLUME

    for i in range(day_count):
        day = today - timedelta(days=day_count - 1 - i)
        change = (rng.random() - DRIFT_CENTER) * STEP_RANGE
        open_ = price
        close = max(PRICE_FLOOR, price + change)

        high = max(open_, close) + rng.random() * WICK_MAX
        low = max(PRICE_FLOOR, min(open_, close) - rng.random() * WICK_MAX)

        vol = max(VOLUME_FLOOR, vol + (rng.random() - 0.5) * VOLUME_STEP)

        bars.append(
            Bar(
                date=day.isoformat(),
                open=round(open_, 2),
                close=round(close, 2),
                high=round(high, 2),
                low=round(low, 2),
                volume=int(math.floor(vol)),
            )
        )
        price = close

    logger.debug("Generated %d bars ending %s", len(bars), today.isoformat())
    return bars


def pick_stock(rng: Optional[random.Random] = None) -> Tuple[str, str]:
    """Return a random ``(name, code)`` pair for display."""
    rng = rng or random.Random()
    return rng.choice(_STOCK_TABLE)


def generate_game_data(
    day_count: int = 90,
    *,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> Tuple[List[Bar], str, str]:
    """Annotated series plus a display name and code for one simulation."""
    rng = rng or random.Random()
    bars = annotate(generate_series(day_count, rng=rng, today=today))
    name, code = pick_stock(rng)
    return bars, name, code
