from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .enums import TradeSide


@dataclass(frozen=True)
class Event:
    """
    Base class for all events published by game sessions.

    Events carry the wall-clock timestamp supplied by the session clock.
    """

    timestamp: datetime

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(ts={self.timestamp.isoformat()})"


@dataclass(frozen=True)
class BarRevealedEvent(Event):
    """
    Playback cursor moved to a new bar.
    """

    index: int
    date: str
    close: float


@dataclass(frozen=True)
class TradeEvent(Event):
    """
    A buy or sell executed by the simulation session.
    """

    side: TradeSide
    price: float
    date: str
    amount: int


@dataclass(frozen=True)
class SessionFinishedEvent(Event):
    """
    Simulation settled; carries the final yield (percent) and profit.
    """

    stock_name: str
    yield_rate: float
    profit: float
    trade_count: int


@dataclass(frozen=True)
class StoryStepEvent(Event):
    """
    One narrative turn was applied.
    """

    turn: int
    choice_text: str
    cash_delta: float
    health_delta: int
    next_event_id: str


@dataclass(frozen=True)
class StoryEndedEvent(Event):
    """
    The narrative reached a terminal event.
    """

    ending_id: str
    final_cash: float
    won: bool


@dataclass(frozen=True)
class QuizAnsweredEvent(Event):
    question_id: int
    selected: int
    correct: bool


@dataclass(frozen=True)
class ClickEvent(Event):
    """
    Plain UI acknowledgement (play/pause, next bar, quit).
    """

    action: str
    detail: Optional[str] = None
