import logging
import math
from typing import List, Optional, Sequence

from klinecamp.core.clock import SystemClock
from klinecamp.core.enums import TradeSide
from klinecamp.core.event_bus import EventBus
from klinecamp.core.events import BarRevealedEvent, SessionFinishedEvent, TradeEvent
from klinecamp.core.interfaces import Clock, HistoryStore
from klinecamp.core.models import Bar, Trade
from klinecamp.errors import DataError, PersistenceError, TradeRejectedError
from klinecamp.logging import log_event

from .result import SimulationResult


class SimulationSession:
    """
    Replays an annotated series bar by bar and books buy/sell actions.

    Playback starts ``preview_days`` bars before the end so indicator history
    is visible. The auto-advance timer lives outside; it calls :meth:`tick`
    while :attr:`playing` is set.
    """

    def __init__(
        self,
        bars: Sequence[Bar],
        *,
        stock_name: str = "",
        stock_code: str = "",
        initial_capital: float = 100_000.0,
        lot_size: int = 100,
        preview_days: int = 30,
        bus: Optional[EventBus] = None,
        clock: Optional[Clock] = None,
        history: Optional[HistoryStore] = None,
    ) -> None:
        if not bars:
            raise DataError("SimulationSession needs at least one bar")
        if initial_capital <= 0:
            raise DataError(f"initial_capital must be positive, got {initial_capital}")
        if preview_days < 1:
            raise DataError(f"preview_days must be at least 1, got {preview_days}")
        self.bars: List[Bar] = list(bars)
        self.stock_name = stock_name
        self.stock_code = stock_code
        self.initial_capital = initial_capital
        self.lot_size = lot_size
        self.bus = bus or EventBus()
        self.clock = clock or SystemClock()
        self.history = history
        self._logger = logging.getLogger(__name__)

        self.index = max(0, len(self.bars) - preview_days)
        self.cash = initial_capital
        self.holdings = 0
        self.trades: List[Trade] = []
        self.playing = False
        self.result: Optional[SimulationResult] = None

    @property
    def current(self) -> Bar:
        return self.bars[self.index]

    def visible_bars(self) -> List[Bar]:
        return self.bars[: self.index + 1]

    @property
    def days_left(self) -> int:
        return max(0, len(self.bars) - 1 - self.index)

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.bars) - 1

    @property
    def finished(self) -> bool:
        return self.result is not None

    @property
    def market_value(self) -> float:
        return self.holdings * self.current.close

    @property
    def total_assets(self) -> float:
        return self.cash + self.market_value

    @property
    def yield_rate(self) -> float:
        return (self.total_assets - self.initial_capital) / self.initial_capital * 100

    @property
    def daily_change(self) -> float:
        if self.index == 0:
            return 0.0
        prev = self.bars[self.index - 1].close
        return (self.current.close - prev) / prev * 100

    def can_buy(self) -> bool:
        return not self.finished and self.cash >= self.current.close * self.lot_size

    def can_sell(self) -> bool:
        return not self.finished and self.holdings > 0

    def advance(self) -> bool:
        """Reveal the next bar; False when already on the last one."""
        if self.finished or self.at_end:
            return False
        self.index += 1
        bar = self.current
        self.bus.emit(BarRevealedEvent(timestamp=self.clock.now(), index=self.index, date=bar.date, close=bar.close))
        return True

    def toggle_play(self) -> bool:
        self.playing = not self.playing
        return self.playing

    def tick(self) -> Optional[SimulationResult]:
        """One timer tick: advance while playing, settle once the last bar shows."""
        if not self.playing or self.finished:
            return self.result
        if not self.at_end:
            self.advance()
        if self.at_end:
            self.playing = False
            return self.finish()
        return None

    def buy(self) -> Trade:
        if not self.can_buy():
            raise TradeRejectedError(
                f"Insufficient cash {self.cash:.2f} for one lot at {self.current.close:.2f}"
            )
        price = self.current.close
        max_affordable = math.floor(self.cash / price)
        shares = math.floor(max_affordable * 0.5) or self.lot_size
        self.cash -= shares * price
        self.holdings += shares
        return self._book(TradeSide.BUY, price, shares)

    def sell(self) -> Trade:
        if not self.can_sell():
            raise TradeRejectedError("No holdings to sell")
        price = self.current.close
        shares = self.holdings
        self.cash += shares * price
        self.holdings = 0
        return self._book(TradeSide.SELL, price, shares)

    def _book(self, side: TradeSide, price: float, shares: int) -> Trade:
        trade = Trade(side=side, price=price, date=self.current.date, amount=shares)
        self.trades.append(trade)
        event = TradeEvent(timestamp=self.clock.now(), side=side, price=price, date=trade.date, amount=shares)
        log_event(self._logger, event, level="DEBUG")
        self.bus.emit(event)
        return trade

    def finish(self) -> SimulationResult:
        """Value holdings at the current close, record history once and return the result."""
        if self.result is not None:
            return self.result
        self.playing = False
        final_capital = self.total_assets
        result = SimulationResult(
            initial_capital=self.initial_capital,
            final_capital=final_capital,
            yield_rate=(final_capital - self.initial_capital) / self.initial_capital * 100,
            trades=list(self.trades),
            stock_name=self.stock_name,
            stock_code=self.stock_code,
            bars=self.bars,
        )
        self.result = result
        now = self.clock.now()
        if self.history is not None:
            try:
                self.history.append(result.to_history_record(now))
            except PersistenceError:
                self._logger.exception("Failed to save game history")
        self._logger.info(
            "Simulation '%s' settled: yield=%.2f%% trades=%d", self.stock_name, result.yield_rate, len(result.trades)
        )
        self.bus.emit(
            SessionFinishedEvent(
                timestamp=now,
                stock_name=self.stock_name,
                yield_rate=result.yield_rate,
                profit=result.profit,
                trade_count=len(result.trades),
            )
        )
        return result
