from collections import deque
from typing import Deque, Iterable, List, Optional


class SMA:
    """Simple Moving Average for streaming usage.

    Keeps a fixed window; `update(x)` returns the mean of the last `period`
    values after adding x, or None until the window is full.
    """

    def __init__(self, period: int):
        if period < 1:
            raise ValueError("period must be >= 1")
        self.period = period
        self.buf: Deque[float] = deque(maxlen=period)

    def update(self, x: float) -> Optional[float]:
        self.buf.append(x)
        if len(self.buf) < self.period:
            return None
        # Re-sum the window each time so values match a plain trailing mean.
        return sum(self.buf) / self.period

    @staticmethod
    def series(values: Iterable[float], period: int) -> List[Optional[float]]:
        sma = SMA(period)
        return [sma.update(v) for v in values]


class EMA:
    """Recursive EMA seeded with the first observation.

    ``ema[0] = x[0]`` and ``ema[i] = x[i] * k + ema[i-1] * (1 - k)`` with
    ``k = 2 / (period + 1)``. There is no warm-up window, so early values lean
    toward the first observation.
    """

    def __init__(self, period: int):
        if period < 1:
            raise ValueError("period must be >= 1")
        self.period = period
        self.mult = 2.0 / (period + 1)
        self.value: Optional[float] = None

    def update(self, x: float) -> float:
        if self.value is None:
            self.value = x
        else:
            self.value = x * self.mult + self.value * (1 - self.mult)
        return self.value

    @staticmethod
    def series(values: Iterable[float], period: int) -> List[float]:
        ema = EMA(period)
        return [ema.update(v) for v in values]
