import sqlite3
from datetime import datetime
from pathlib import Path

import pytest

from klinecamp.core.models import HistoryRecord
from klinecamp.errors import PersistenceError
from klinecamp.history import (
    InMemoryHistoryStore,
    SqliteHistoryStore,
    group_by_month,
    monthly_win_rate,
    summarize,
    yield_curve,
)


def _record(rid: int, ts: str, rate: float, profit: float) -> HistoryRecord:
    return HistoryRecord(id=rid, timestamp=ts, yield_rate=rate, profit=profit, stock_name="AAA", trade_count=2)


RECORDS = [
    _record(3, "2024-02-10T10:00:00", -3.0, -3000),
    _record(2, "2024-02-01T10:00:00", 5.0, 5000),
    _record(1, "2024-01-15T10:00:00", 12.0, 12000),
]


def test_sqlite_store_appends_and_lists_newest_first(tmp_path: Path) -> None:
    store = SqliteHistoryStore(tmp_path / "db" / "history.db")
    for record in reversed(RECORDS):
        store.append(record)
    assert store.list() == RECORDS

    reopened = SqliteHistoryStore(tmp_path / "db" / "history.db")
    assert [r.id for r in reopened.list()] == [3, 2, 1]


def test_sqlite_store_namespaces_are_isolated(tmp_path: Path) -> None:
    db = tmp_path / "history.db"
    a = SqliteHistoryStore(db, namespace="a")
    b = SqliteHistoryStore(db, namespace="b")
    a.append(RECORDS[0])
    assert b.list() == []
    a.clear()
    assert a.list() == []


def test_sqlite_store_read_failure_returns_empty(tmp_path: Path) -> None:
    db = tmp_path / "history.db"
    store = SqliteHistoryStore(db)
    conn = sqlite3.connect(db)
    conn.execute("DROP TABLE game_history")
    conn.commit()
    conn.close()
    assert store.list() == []
    with pytest.raises(PersistenceError):
        store.append(RECORDS[0])


def test_in_memory_store() -> None:
    store = InMemoryHistoryStore()
    for record in reversed(RECORDS):
        store.append(record)
    assert store.list() == RECORDS
    store.clear()
    assert store.list() == []


def test_summary_and_grouping() -> None:
    summary = summarize(RECORDS)
    assert summary.total_games == 3
    assert summary.total_profit == 14000
    assert summary.win_count == 2
    assert summary.win_rate == pytest.approx(200 / 3)
    assert summarize([]).win_rate == 0.0

    grouped = group_by_month(RECORDS)
    assert sorted(grouped) == ["2024-01", "2024-02"]
    assert [r.id for r in grouped["2024-02"]] == [3, 2]


def test_monthly_win_rate_and_curve() -> None:
    assert monthly_win_rate(RECORDS, datetime(2024, 2, 20)) == 50
    assert monthly_win_rate(RECORDS, datetime(2024, 3, 1)) == 0
    assert yield_curve(RECORDS) == [
        (1, 12.0, "2024-01-15T10:00:00"),
        (2, 5.0, "2024-02-01T10:00:00"),
        (3, -3.0, "2024-02-10T10:00:00"),
    ]
