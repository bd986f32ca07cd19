"""
Technical indicators: streaming primitives, full-series annotation and the
indicator encyclopedia.
"""

from .basic import EMA, SMA
from .catalog import IndicatorDef, by_category, get_indicator, get_indicators
from .engine import annotate, ema_series, latest_cross, macd, moving_average

__all__ = [
    "SMA",
    "EMA",
    "annotate",
    "moving_average",
    "ema_series",
    "macd",
    "latest_cross",
    "IndicatorDef",
    "get_indicators",
    "get_indicator",
    "by_category",
]
