from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from klinecamp.core.models import Bar, HistoryRecord, Trade


@dataclass(frozen=True)
class SimulationResult:
    initial_capital: float
    final_capital: float
    yield_rate: float  # percent
    trades: List[Trade]
    stock_name: str
    stock_code: str
    bars: List[Bar] = field(default_factory=list, repr=False)

    @property
    def profit(self) -> float:
        return self.final_capital - self.initial_capital

    def to_history_record(self, now: datetime) -> HistoryRecord:
        return HistoryRecord(
            id=int(now.timestamp() * 1000),
            timestamp=now.isoformat(),
            yield_rate=self.yield_rate,
            profit=self.profit,
            stock_name=self.stock_name,
            trade_count=len(self.trades),
        )


@dataclass(frozen=True)
class Rank:
    title: str
    description: str


GOD = Rank("股神降临", "你的交易直觉令人战栗，主力都要避让三分！")
HOT_MONEY = Rank("超级游资", "精准出击，收割果断，市场是你的提款机。")
STEADY = Rank("稳健赢家", "积小胜为大胜，复利的力量在你手中觉醒。")
BREAK_EVEN = Rank("保本大师", "在凶险的市场中全身而退，本身就是一种胜利。")
NOVICE = Rank("韭菜初现", "市场给你上了一课，好在学费不算太贵。")
DONOR = Rank("慈善赌王", "感谢你为股市流动性做出的卓越贡献。")


def rank_for_yield(rate: float) -> Rank:
    """Title for a final yield in percent."""
    if rate >= 30:
        return GOD
    elif rate >= 15:
        return HOT_MONEY
    elif rate > 0:
        return STEADY
    elif rate == 0:
        return BREAK_EVEN
    elif rate > -10:
        return NOVICE
    return DONOR
