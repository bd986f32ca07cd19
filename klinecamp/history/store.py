import logging
import sqlite3
from pathlib import Path
from typing import List

from klinecamp.core.interfaces import HistoryStore
from klinecamp.core.models import HistoryRecord
from klinecamp.errors import PersistenceError

DEFAULT_NAMESPACE = "kline_bootcamp_history_v1"

logger = logging.getLogger(__name__)


class InMemoryHistoryStore(HistoryStore):
    def __init__(self) -> None:
        self._records: List[HistoryRecord] = []

    def append(self, record: HistoryRecord) -> None:
        self._records.append(record)

    def list(self) -> List[HistoryRecord]:
        return list(reversed(self._records))

    def clear(self) -> None:
        self._records.clear()


class SqliteHistoryStore(HistoryStore):
    """
    Append-only history table; rows are scoped by ``namespace``.

    Reads never raise: a broken database is logged and treated as empty.
    """

    def __init__(self, db_path: Path | str, namespace: str = DEFAULT_NAMESPACE) -> None:
        self._db_path = Path(db_path)
        self.namespace = namespace
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS game_history (
                        seq INTEGER PRIMARY KEY AUTOINCREMENT,
                        namespace TEXT NOT NULL,
                        id INTEGER NOT NULL,
                        timestamp TEXT NOT NULL,
                        yield_rate REAL NOT NULL,
                        profit REAL NOT NULL,
                        stock_name TEXT NOT NULL,
                        trade_count INTEGER NOT NULL
                    )
                    """
                )
                conn.commit()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot open history database {self._db_path}: {exc}") from exc

    def append(self, record: HistoryRecord) -> None:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO game_history
                    (namespace, id, timestamp, yield_rate, profit, stock_name, trade_count)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        self.namespace,
                        record.id,
                        record.timestamp,
                        record.yield_rate,
                        record.profit,
                        record.stock_name,
                        record.trade_count,
                    ),
                )
                conn.commit()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to save game history: {exc}") from exc

    def list(self) -> List[HistoryRecord]:
        try:
            with self._connect() as conn:
                rows = conn.execute(
                    """
                    SELECT id, timestamp, yield_rate, profit, stock_name, trade_count
                    FROM game_history
                    WHERE namespace = ?
                    ORDER BY seq DESC
                    """,
                    (self.namespace,),
                ).fetchall()
        except sqlite3.Error:
            logger.exception("Failed to load game history")
            return []
        return [
            HistoryRecord(
                id=int(row["id"]),
                timestamp=str(row["timestamp"]),
                yield_rate=float(row["yield_rate"]),
                profit=float(row["profit"]),
                stock_name=str(row["stock_name"]),
                trade_count=int(row["trade_count"]),
            )
            for row in rows
        ]

    def clear(self) -> None:
        try:
            with self._connect() as conn:
                conn.execute("DELETE FROM game_history WHERE namespace = ?", (self.namespace,))
                conn.commit()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to clear game history: {exc}") from exc
