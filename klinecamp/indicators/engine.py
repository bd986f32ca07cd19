"""Indicator derivation over a complete bar series.

Every value at index ``i`` may depend on the whole prefix ``bars[:i + 1]``,
so :func:`annotate` works on the full sequence rather than streaming.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from klinecamp.core.models import Bar

from .basic import EMA, SMA

logger = logging.getLogger(__name__)

MA_PERIODS: Tuple[int, ...] = (5, 10, 20)
MA_DECIMALS = 2
MACD_DECIMALS = 3


def _round(value: Optional[float], ndigits: int) -> Optional[float]:
    if value is None:
        return None
    return round(value, ndigits)


def moving_average(values: Sequence[float], period: int) -> List[Optional[float]]:
    """Trailing mean of ``period`` values; None before index ``period - 1``."""
    return SMA.series(values, period)


def ema_series(values: Sequence[float], period: int) -> List[float]:
    return EMA.series(values, period)


def macd(
    closes: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> Tuple[List[float], List[float], List[float]]:
    """DIF, DEA and MACD histogram, rounded to 3 decimals.

    DEA is the EMA of the rounded DIF values and the histogram is
    ``2 * (dif - dea)`` of the rounded pair, so the displayed identity
    ``macd == round(2 * (dif - dea), 3)`` holds exactly.
    """
    if fast >= slow:
        raise ValueError("fast period must be shorter than slow period")
    ema_fast = ema_series(closes, fast)
    ema_slow = ema_series(closes, slow)
    dif = [round(f - s, MACD_DECIMALS) for f, s in zip(ema_fast, ema_slow)]
    dea = [round(v, MACD_DECIMALS) for v in ema_series(dif, signal)]
    hist = [round((d - e) * 2, MACD_DECIMALS) for d, e in zip(dif, dea)]
    return dif, dea, hist


def annotate(bars: Sequence[Bar], fast: int = 12, slow: int = 26, signal: int = 9) -> List[Bar]:
    """Return ``bars`` with ma5/ma10/ma20 and dif/dea/macd populated.

    Bars are immutable, so a new list of the same length and order is
    returned; OHLCV fields are untouched. An empty input yields an empty list.
    """
    if not bars:
        return []
    closes = [bar.close for bar in bars]
    averages = {period: moving_average(closes, period) for period in MA_PERIODS}
    dif, dea, hist = macd(closes, fast, slow, signal)

    out: List[Bar] = []
    for i, bar in enumerate(bars):
        out.append(
            replace(
                bar,
                ma5=_round(averages[5][i], MA_DECIMALS),
                ma10=_round(averages[10][i], MA_DECIMALS),
                ma20=_round(averages[20][i], MA_DECIMALS),
                dif=dif[i],
                dea=dea[i],
                macd=hist[i],
            )
        )
    logger.debug("Annotated %d bars", len(out))
    return out


def latest_cross(bars: Sequence[Bar]) -> Optional[str]:
    """Most recent DIF/DEA crossover: ``"golden"`` (DIF above DEA), ``"death"`` or None."""
    for i in range(len(bars) - 1, 0, -1):
        prev, cur = bars[i - 1], bars[i]
        if None in (prev.dif, prev.dea, cur.dif, cur.dea):
            continue
        before = prev.dif - prev.dea  # type: ignore[operator]
        after = cur.dif - cur.dea  # type: ignore[operator]
        if before <= 0 < after:
            return "golden"
        if before >= 0 > after:
            return "death"
    return None
