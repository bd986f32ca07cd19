from dataclasses import dataclass
from typing import Optional

from .enums import TradeSide


@dataclass(frozen=True)
class Bar:
    """
    Single daily OHLCV bar with optional derived indicator fields.

    Attributes:
        date: 交易日 (YYYY-MM-DD)
        open: 开盘价
        close: 收盘价
        high: 最高价
        low: 最低价
        volume: 成交量
        ma5/ma10/ma20: 均线, unset until enough bars precede the index
        dif/dea/macd: MACD family, defined from the first bar
    """

    date: str
    open: float
    close: float
    high: float
    low: float
    volume: int
    ma5: Optional[float] = None
    ma10: Optional[float] = None
    ma20: Optional[float] = None
    dif: Optional[float] = None
    dea: Optional[float] = None
    macd: Optional[float] = None

    @property
    def is_up(self) -> bool:
        # 阳线: close above open
        return self.close > self.open


@dataclass(frozen=True)
class Trade:
    """
    Append-only log entry for one simulated buy or sell.
    """

    side: TradeSide
    price: float
    date: str
    amount: int

    @property
    def notional(self) -> float:
        return self.price * self.amount


@dataclass(frozen=True)
class HistoryRecord:
    """
    One completed simulation, as kept by the history store.
    """

    id: int
    timestamp: str
    yield_rate: float
    profit: float
    stock_name: str
    trade_count: int

    @property
    def month(self) -> str:
        return self.timestamp[:7]
