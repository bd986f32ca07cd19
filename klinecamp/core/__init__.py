"""
Core primitives shared by the game modes.

Exports the bar/trade models, enums, event models, the synchronous event
bus and the collaborator interfaces injected into sessions.
"""

from .clock import FixedClock, SystemClock
from .enums import CashMode, LogKind, SoundCue, TradeSide
from .event_bus import EventBus
from .events import (
    BarRevealedEvent,
    ClickEvent,
    Event,
    QuizAnsweredEvent,
    SessionFinishedEvent,
    StoryEndedEvent,
    StoryStepEvent,
    TradeEvent,
)
from .interfaces import BusParticipant, Clock, HistoryStore, SoundPlayer, TipProvider
from .models import Bar, HistoryRecord, Trade

__all__ = [
    "Bar",
    "Trade",
    "HistoryRecord",
    "TradeSide",
    "CashMode",
    "LogKind",
    "SoundCue",
    "EventBus",
    "Event",
    "BarRevealedEvent",
    "TradeEvent",
    "SessionFinishedEvent",
    "StoryStepEvent",
    "StoryEndedEvent",
    "QuizAnsweredEvent",
    "ClickEvent",
    "BusParticipant",
    "Clock",
    "SoundPlayer",
    "HistoryStore",
    "TipProvider",
    "SystemClock",
    "FixedClock",
]
