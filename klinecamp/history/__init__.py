"""
Completed-simulation history: stores and aggregate statistics.
"""

from .stats import HistorySummary, group_by_month, monthly_win_rate, summarize, yield_curve
from .store import DEFAULT_NAMESPACE, InMemoryHistoryStore, SqliteHistoryStore

__all__ = [
    "DEFAULT_NAMESPACE",
    "InMemoryHistoryStore",
    "SqliteHistoryStore",
    "HistorySummary",
    "summarize",
    "group_by_month",
    "monthly_win_rate",
    "yield_curve",
]
