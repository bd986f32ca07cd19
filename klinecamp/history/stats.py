from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Sequence, Tuple

from klinecamp.core.models import HistoryRecord


@dataclass(frozen=True)
class HistorySummary:
    total_games: int
    total_profit: float
    win_count: int
    win_rate: float  # percent


def summarize(records: Sequence[HistoryRecord]) -> HistorySummary:
    n = len(records)
    wins = sum(1 for r in records if r.yield_rate > 0)
    return HistorySummary(
        total_games=n,
        total_profit=sum(r.profit for r in records),
        win_count=wins,
        win_rate=(wins / n * 100) if n else 0.0,
    )


def group_by_month(records: Sequence[HistoryRecord]) -> Dict[str, List[HistoryRecord]]:
    """Records bucketed by ``YYYY-MM``, each bucket in input order."""
    buckets: Dict[str, List[HistoryRecord]] = defaultdict(list)
    for record in records:
        buckets[record.month].append(record)
    return dict(buckets)


def monthly_win_rate(records: Sequence[HistoryRecord], now: datetime) -> int:
    """Rounded win percentage of games played in ``now``'s month, 0 if none."""
    month = f"{now.year:04d}-{now.month:02d}"
    games = [r for r in records if r.timestamp.startswith(month)]
    if not games:
        return 0
    wins = sum(1 for r in games if r.yield_rate > 0)
    return math.floor(wins / len(games) * 100 + 0.5)


def yield_curve(records: Sequence[HistoryRecord]) -> List[Tuple[int, float, str]]:
    """``(game number, yield, timestamp)`` oldest first, from a newest-first list."""
    return [(i + 1, r.yield_rate, r.timestamp) for i, r in enumerate(reversed(records))]
