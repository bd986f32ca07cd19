"""Read-only indicator encyclopedia shown on the indicator screen."""

from dataclasses import dataclass
from typing import Dict, List, Tuple

CATEGORIES = ("Trend", "Oscillator", "Volume", "Other")


@dataclass(frozen=True)
class IndicatorDef:
    id: str
    name: str
    full_name: str
    category: str
    description: str
    formula: str
    buy_signal: str
    sell_signal: str
    pros: str
    cons: str
    difficulty: int  # 1-5


_INDICATORS: Tuple[IndicatorDef, ...] = (
    IndicatorDef(
        id="ma",
        name="MA",
        full_name="Moving Average (移动平均线)",
        category="Trend",
        description="最基础的趋势指标，通过计算过去一段时间的平均价格来平滑价格波动，从而显示趋势方向。",
        formula="MA(N) = (P1 + P2 + ... + Pn) / N",
        buy_signal="金叉：短期均线（如5日）上穿长期均线（如20日）。K线站上均线。",
        sell_signal="死叉：短期均线下穿长期均线。K线跌破均线。",
        pros="简单直观，趋势跟踪效果好，适合单边行情。",
        cons="滞后性强，在震荡市中会频繁发出错误信号。",
        difficulty=1,
    ),
    IndicatorDef(
        id="macd",
        name="MACD",
        full_name="Moving Average Convergence Divergence (指数平滑异同移动平均线)",
        category="Trend",
        description="利用快慢两条移动平均线的聚合与分离状况，兼顾了趋势追踪和动能研判。",
        formula="DIF = EMA(12) - EMA(26); DEA = EMA(9) of DIF; MACD柱 = 2*(DIF-DEA)",
        buy_signal="低位金叉（DIF上穿DEA）；底背离（股价新低但MACD没创新低）。",
        sell_signal="高位死叉（DIF下穿DEA）；顶背离（股价新高但MACD没创新高）。",
        pros="稳定性高，能有效过滤噪音，背离信号极具参考价值。",
        cons="买卖点比K线滞后，对急涨急跌反应迟钝。",
        difficulty=3,
    ),
    IndicatorDef(
        id="kdj",
        name="KDJ",
        full_name="Stochastic Oscillator (随机指标)",
        category="Oscillator",
        description="统计一个周期内最高价、最低价与收盘价之间的比例关系，研判短期的超买超卖状态。",
        formula="基于RSV（未成熟随机值）计算K、D、J三条线。J线最为灵敏。",
        buy_signal="J值<0（超卖）；低位金叉。",
        sell_signal="J值>100（超买）；高位死叉。",
        pros="反应灵敏，适合捕捉短线震荡行情的买卖点。",
        cons="单边行情中容易钝化，信号过于频繁。",
        difficulty=2,
    ),
    IndicatorDef(
        id="boll",
        name="BOLL",
        full_name="Bollinger Bands (布林带)",
        category="Trend",
        description="基于标准差原理设计，由上轨、中轨、下轨三条线组成，通道宽度随波动率变化。",
        formula="中轨=MA(20); 上/下轨=中轨 ± 2*标准差",
        buy_signal="股价触及下轨反弹；开口扩大且股价沿上轨上涨。",
        sell_signal="股价触及上轨回落；跌破中轨。",
        pros="直观显示压力与支撑，能判断波动率变化（开口/收口）。",
        cons="需要配合其他指标判断突破的有效性。",
        difficulty=2,
    ),
    IndicatorDef(
        id="rsi",
        name="RSI",
        full_name="Relative Strength Index (相对强弱指标)",
        category="Oscillator",
        description="比较一段时间内的平均收盘涨幅和平均收盘跌幅，评估市场多空力量的强弱。",
        formula="RSI = 100 - 100 / (1 + RS)",
        buy_signal="RSI < 20 (超卖)；底背离。",
        sell_signal="RSI > 80 (超买)；顶背离。",
        pros="判断市场情绪（超买/超卖）非常准确，背离信号可靠。",
        cons="在强势单边行情中会过早发出反向信号。",
        difficulty=2,
    ),
)

_BY_ID: Dict[str, IndicatorDef] = {item.id: item for item in _INDICATORS}


def get_indicators() -> List[IndicatorDef]:
    return list(_INDICATORS)


def get_indicator(indicator_id: str) -> IndicatorDef:
    """Look up one entry; raises KeyError for unknown ids."""
    try:
        return _BY_ID[indicator_id.lower()]
    except KeyError:
        raise KeyError(f"Unknown indicator: {indicator_id}") from None


def by_category(category: str) -> List[IndicatorDef]:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category}")
    return [item for item in _INDICATORS if item.category == category]
